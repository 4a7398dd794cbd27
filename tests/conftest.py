"""Test configuration and fixtures for CHIP-8 interpreter tests."""

import pytest
import jax
import jax.numpy as jnp
from chip8vm import create_state, Interpreter
from chip8vm.logging import ExecutionLogger


@pytest.fixture
def fresh_state():
    """Provide a fresh interpreter state for each test."""
    return create_state(jax.random.PRNGKey(0))


@pytest.fixture
def modern_state():
    """Provide a fresh state in modern mode."""
    return create_state(jax.random.PRNGKey(0)).replace(modern_mode=True)


@pytest.fixture
def legacy_state():
    """Provide a fresh state in legacy mode."""
    return create_state(jax.random.PRNGKey(0)).replace(modern_mode=False)


@pytest.fixture
def interpreter():
    """Provide a seeded interpreter with a quiet logger."""
    return Interpreter(rng=jax.random.PRNGKey(0), logger=ExecutionLogger(log_level="CRITICAL"))


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def assemble(*words):
    """Helper to turn instruction words into big-endian ROM bytes."""
    return b"".join(word.to_bytes(2, "big") for word in words)
