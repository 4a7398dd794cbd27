"""CHIP-8 delay and sound timers.

Both counters are decremented once per call to :func:`tick`, which the host
drives at a fixed 60 Hz independently of how many instructions run.
"""

import jax.numpy as jnp

from chip8vm.state import EmulatorState


def tick(state: EmulatorState) -> EmulatorState:
    """Decrement delay and sound timers, holding each at zero."""
    return state.replace(
        delay_timer=jnp.where(state.delay_timer > 0, state.delay_timer - 1, 0).astype(jnp.uint8),
        sound_timer=jnp.where(state.sound_timer > 0, state.sound_timer - 1, 0).astype(jnp.uint8),
    )


def is_sound_active(state: EmulatorState) -> bool:
    """Sound is on whenever the sound timer is non-zero."""
    return bool(state.sound_timer > 0)
