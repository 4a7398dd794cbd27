"""CHIP-8 memory access."""

from typing import Sequence, Union

import jax.numpy as jnp
import numpy as np

from chip8vm.constants import MEMORY_SIZE, PROGRAM_START, MAX_ROM_SIZE
from chip8vm.errors import OutOfBounds, RomTooLarge
from chip8vm.state import EmulatorState


def load_rom(state: EmulatorState, rom_data: Union[bytes, bytearray, Sequence[int]]) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    rom_data = bytes(rom_data)
    if len(rom_data) > MAX_ROM_SIZE:
        raise RomTooLarge(len(rom_data), MAX_ROM_SIZE)
    if not rom_data:
        return state
    rom_array = jnp.asarray(np.frombuffer(rom_data, dtype=np.uint8))
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(rom_data)].set(rom_array)
    return state.replace(memory=new_memory)


def read_bytes(state: EmulatorState, address: int, count: int) -> jnp.ndarray:
    """Read `count` bytes starting at `address`."""
    if address < 0 or address + count > MEMORY_SIZE:
        raise OutOfBounds(address + count - 1, "read past end of memory")
    return state.memory[address:address + count]


def write_bytes(state: EmulatorState, address: int, values) -> EmulatorState:
    """Write values starting at `address`; the interpreter area is read-only."""
    values = jnp.asarray(values, dtype=jnp.uint8)
    end = address + values.shape[0]
    if address < PROGRAM_START:
        raise OutOfBounds(address, "write to reserved interpreter area")
    if end > MEMORY_SIZE:
        raise OutOfBounds(end - 1, "write past end of memory")
    return state.replace(memory=state.memory.at[address:end].set(values))
