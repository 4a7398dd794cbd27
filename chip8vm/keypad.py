"""CHIP-8 hexadecimal keypad."""

from chip8vm.constants import NUM_KEYS
from chip8vm.state import EmulatorState, AwaitingKey, RUNNING


def set_key(state: EmulatorState, key: int, pressed: bool) -> EmulatorState:
    """Record a key state; a fresh press resolves a pending FX0A wait."""
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"Key index must be in 0..{NUM_KEYS - 1}, got {key}")

    was_pressed = bool(state.keypad[key])
    state = state.replace(keypad=state.keypad.at[key].set(pressed))

    if pressed and not was_pressed and isinstance(state.status, AwaitingKey):
        register = state.status.register
        state = state.replace(V=state.V.at[register].set(key), status=RUNNING)
    return state


def is_pressed(state: EmulatorState, key: int) -> bool:
    return bool(state.keypad[key & 0xF])
