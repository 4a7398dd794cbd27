"""CHIP-8 interpreter state structures."""

import dataclasses
from typing import Optional, Union

import jax
import jax.numpy as jnp
import numpy as np
from flax.struct import dataclass, PyTreeNode, field

from chip8vm.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, SCREEN_WIDTH, SCREEN_HEIGHT,
    STACK_SIZE, NUM_REGISTERS, NUM_KEYS,
)
from chip8vm.errors import FatalError


@dataclasses.dataclass(frozen=True)
class Running:
    """Executor is fetching and executing instructions."""


@dataclasses.dataclass(frozen=True)
class AwaitingKey:
    """Executor is suspended on FX0A until a key goes down."""
    register: int


@dataclasses.dataclass(frozen=True)
class Halted:
    """Executor hit a fatal error; no further instructions run."""
    reason: FatalError


Status = Union[Running, AwaitingKey, Halted]
RUNNING = Running()


@dataclass(frozen=True)
class StackState:
    """Stack state for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Main CHIP-8 interpreter state."""
    rng: jax.Array
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.asarray(PROGRAM_START, dtype=jnp.uint16))
    display: jnp.ndarray = field(default_factory=lambda: jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_))
    stack: StackState = field(default_factory=StackState)
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_KEYS, dtype=jnp.bool_))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    status: Status = field(pytree_node=False, default=RUNNING)
    modern_mode: bool = field(pytree_node=False, default=True)


def random_key() -> jax.Array:
    """PRNG key seeded from fresh OS entropy."""
    seed = np.random.default_rng().integers(0, 2**31 - 1)
    return jax.random.PRNGKey(int(seed))


def create_state(rng: Optional[jax.Array] = None, modern_mode: bool = True) -> EmulatorState:
    """Create initial interpreter state with font data loaded."""
    if rng is None:
        rng = random_key()
    state = EmulatorState(rng, modern_mode=modern_mode)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(FONT_DATA))
