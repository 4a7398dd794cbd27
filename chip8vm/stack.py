"""CHIP-8 stack operations."""

import jax.numpy as jnp
from chip8vm.constants import ADDRESS_MASK, STACK_SIZE
from chip8vm.errors import StackOverflow, StackUnderflow
from chip8vm.state import StackState


def push(stack: StackState, address: jnp.ndarray, target: int = 0) -> StackState:
    """Push return address onto stack."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflow(target)
    masked_address = jnp.asarray(address, dtype=jnp.uint16) & ADDRESS_MASK
    new_data = stack.data.at[stack.pointer].set(masked_address)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, jnp.ndarray]:
    """Pop return address from stack."""
    if stack.pointer <= 0:
        raise StackUnderflow()
    new_pointer = stack.pointer - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address


def depth(stack: StackState) -> int:
    return int(stack.pointer)
