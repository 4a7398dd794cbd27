"""CHIP-8 display operations."""

from chip8vm.constants import FLAG_REGISTER
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm.display import draw_sprite
from chip8vm.memory import read_bytes


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N."""
    rows = read_bytes(state, int(state.I), instruction.n)
    state, collision = draw_sprite(state, rows, int(state.V[instruction.x]), int(state.V[instruction.y]))
    return state.replace(V=state.V.at[FLAG_REGISTER].set(int(collision)))
