"""CHIP-8 interpreter package."""

from chip8vm.state import EmulatorState, create_state, Running, AwaitingKey, Halted
from chip8vm.emulator import execute, fetch, step
from chip8vm.memory import load_rom
from chip8vm.decode import DecodedInstruction, Op, decode, disassemble
from chip8vm.timers import tick, is_sound_active
from chip8vm.keypad import set_key
from chip8vm.display import snapshot
from chip8vm.interpreter import Interpreter
from chip8vm.errors import (
    Chip8Error, RomTooLarge, FatalError, OutOfBounds, InvalidOpcode, StackOverflow, StackUnderflow,
)
from chip8vm.constants import *

__all__ = [
    "EmulatorState",
    "create_state",
    "Running",
    "AwaitingKey",
    "Halted",
    "fetch",
    "execute",
    "step",
    "load_rom",
    "DecodedInstruction",
    "Op",
    "decode",
    "disassemble",
    "tick",
    "is_sound_active",
    "set_key",
    "snapshot",
    "Interpreter",
    "Chip8Error",
    "RomTooLarge",
    "FatalError",
    "OutOfBounds",
    "InvalidOpcode",
    "StackOverflow",
    "StackUnderflow",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]
