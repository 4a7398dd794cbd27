"""CHIP-8 monochrome display buffer.

The buffer is a ``(SCREEN_WIDTH, SCREEN_HEIGHT)`` boolean array indexed
``[x, y]``. Sprites are XOR-composited onto it; the origin wraps around the
screen while the sprite body is clipped at the right and bottom edges.
"""

import jax.numpy as jnp

from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH
from chip8vm.state import EmulatorState

# Pre-computed coordinate grids for display operations
xx, yy = jnp.meshgrid(jnp.arange(SCREEN_WIDTH), jnp.arange(SCREEN_HEIGHT), indexing='ij')


def sprite_mask(rows: jnp.ndarray, x: int, y: int) -> jnp.ndarray:
    """Boolean screen-sized mask of the pixels a sprite turns over."""
    height = rows.shape[0]
    if height == 0:
        return jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_)

    x = x % SCREEN_WIDTH
    y = y % SCREEN_HEIGHT
    in_sprite = (xx >= x) & (xx < x + SPRITE_WIDTH) & (yy >= y) & (yy < y + height)

    row_offset = jnp.clip(yy - y, 0, height - 1)
    col_offset = jnp.clip(xx - x, 0, SPRITE_WIDTH - 1)
    bits = (rows.astype(jnp.int32)[row_offset] >> (7 - col_offset)) & 1
    return (bits == 1) & in_sprite


def draw_sprite(state: EmulatorState, rows: jnp.ndarray, x: int, y: int) -> tuple[EmulatorState, bool]:
    """XOR a sprite onto the display; returns the new state and the collision flag."""
    sprite = sprite_mask(rows, x, y)
    collision = bool(jnp.any(state.display & sprite))
    return state.replace(display=state.display ^ sprite), collision


def clear(state: EmulatorState) -> EmulatorState:
    """Turn every pixel off."""
    return state.replace(display=jnp.zeros_like(state.display))


def snapshot(state: EmulatorState) -> jnp.ndarray:
    """Read-only view of the pixel grid."""
    return state.display
