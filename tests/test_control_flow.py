"""Tests for control flow instructions."""

import pytest
from chip8vm import execute, StackOverflow, StackUnderflow
from chip8vm.constants import STACK_SIZE


class TestJump:
    """Test jump instructions."""

    def test_execute_jump(self, fresh_state):
        """Test 1NNN - Jump to address."""
        state = execute(fresh_state, 0x1001)
        assert state.pc == 1

    def test_jump_with_offset(self, fresh_state):
        """BNNN - Jump with V0 offset."""
        state = execute(fresh_state, 0x6010)  # V0 = 0x10
        state = execute(state, 0x6230)  # V2 = 0x30, ignored
        state = execute(state, 0xB250)  # Jump to 0x250 + V0
        assert state.pc == 0x260

    def test_jump_with_offset_ignores_mode(self, legacy_state, modern_state):
        for state in (legacy_state, modern_state):
            state = execute(state, 0x6004)
            state = execute(state, 0xB300)
            assert state.pc == 0x304


class TestCall:
    """Test subroutine calls."""

    def test_call_pushes_return_address(self, fresh_state):
        state = fresh_state.replace(pc=fresh_state.pc + 2)
        state = execute(state, 0x2300)
        assert state.pc == 0x300
        assert state.stack.pointer == 1
        assert state.stack.data[0] == 0x202

    def test_call_overflow(self, fresh_state):
        state = fresh_state
        for _ in range(STACK_SIZE):
            state = execute(state, 0x2300)
        assert state.stack.pointer == STACK_SIZE

        with pytest.raises(StackOverflow):
            execute(state, 0x2300)

    def test_return_underflow(self, fresh_state):
        with pytest.raises(StackUnderflow):
            execute(fresh_state, 0x00EE)


class TestSkipInstructions:
    """Test all skip instruction variants."""

    def test_skip_if_equal_immediate_true(self, fresh_state):
        """3XNN - Should skip when VX == NN."""
        state = fresh_state.replace(V=fresh_state.V.at[5].set(0x42))
        initial_pc = state.pc

        state = execute(state, 0x3542)  # Skip if V5 == 0x42
        assert state.pc == initial_pc + 2

    def test_skip_if_equal_immediate_false(self, fresh_state):
        """3XNN - Should not skip when VX != NN."""
        state = fresh_state.replace(V=fresh_state.V.at[5].set(0x41))
        initial_pc = state.pc

        state = execute(state, 0x3542)
        assert state.pc == initial_pc

    def test_skip_if_not_equal_immediate_true(self, fresh_state):
        """4XNN - Should skip when VX != NN."""
        state = fresh_state.replace(V=fresh_state.V.at[3].set(0x10))
        initial_pc = state.pc

        state = execute(state, 0x4320)  # Skip if V3 != 0x20
        assert state.pc == initial_pc + 2

    def test_skip_if_not_equal_immediate_false(self, fresh_state):
        """4XNN - Should not skip when VX == NN."""
        state = fresh_state.replace(V=fresh_state.V.at[3].set(0x20))
        initial_pc = state.pc

        state = execute(state, 0x4320)
        assert state.pc == initial_pc

    def test_skip_if_equal_register_true(self, fresh_state):
        """5XY0 - Should skip when VX == VY."""
        state = fresh_state.replace(V=fresh_state.V.at[1].set(0x55).at[2].set(0x55))
        initial_pc = state.pc

        state = execute(state, 0x5120)  # Skip if V1 == V2
        assert state.pc == initial_pc + 2

    def test_skip_if_equal_register_false(self, fresh_state):
        """5XY0 - Should not skip when VX != VY."""
        state = fresh_state.replace(V=fresh_state.V.at[1].set(0x55).at[2].set(0x44))
        initial_pc = state.pc

        state = execute(state, 0x5120)
        assert state.pc == initial_pc

    def test_skip_if_not_equal_register_true(self, fresh_state):
        """9XY0 - Should skip when VX != VY."""
        state = fresh_state.replace(V=fresh_state.V.at[7].set(0xAA).at[8].set(0xBB))
        initial_pc = state.pc

        state = execute(state, 0x9780)  # Skip if V7 != V8
        assert state.pc == initial_pc + 2

    def test_skip_if_not_equal_register_false(self, fresh_state):
        """9XY0 - Should not skip when VX == VY."""
        state = fresh_state.replace(V=fresh_state.V.at[7].set(0xCC).at[8].set(0xCC))
        initial_pc = state.pc

        state = execute(state, 0x9780)
        assert state.pc == initial_pc

    def test_skip_with_zero_values(self, fresh_state):
        """V0 == 0 on a fresh machine, so 3000 skips."""
        initial_pc = fresh_state.pc
        state = execute(fresh_state, 0x3000)
        assert state.pc == initial_pc + 2

    def test_skip_boundary_values(self, fresh_state):
        """Test skip instructions with boundary values."""
        state = fresh_state.replace(V=fresh_state.V.at[0].set(0xFF))
        initial_pc = state.pc

        state = execute(state, 0x30FF)  # Skip if V0 == 255
        assert state.pc == initial_pc + 2


class TestKeySkips:
    """Test EX9E / EXA1."""

    def test_skip_if_key_pressed(self, fresh_state):
        state = execute(fresh_state, 0x6005)  # V0 = 5
        state = state.replace(keypad=state.keypad.at[5].set(True))
        initial_pc = state.pc

        state = execute(state, 0xE09E)
        assert state.pc == initial_pc + 2

    def test_no_skip_if_other_key_pressed(self, fresh_state):
        state = execute(fresh_state, 0x6005)
        state = state.replace(keypad=state.keypad.at[6].set(True))
        initial_pc = state.pc

        state = execute(state, 0xE09E)
        assert state.pc == initial_pc

    def test_skip_if_key_not_pressed(self, fresh_state):
        state = execute(fresh_state, 0x6005)
        initial_pc = state.pc

        state = execute(state, 0xE0A1)
        assert state.pc == initial_pc + 2

    def test_no_skip_if_key_not_pressed_but_held(self, fresh_state):
        state = execute(fresh_state, 0x6005)
        state = state.replace(keypad=state.keypad.at[5].set(True))
        initial_pc = state.pc

        state = execute(state, 0xE0A1)
        assert state.pc == initial_pc

    def test_key_index_uses_low_nibble(self, fresh_state):
        state = execute(fresh_state, 0x6013)  # V0 = 0x13 → key 3
        state = state.replace(keypad=state.keypad.at[3].set(True))
        initial_pc = state.pc

        state = execute(state, 0xE09E)
        assert state.pc == initial_pc + 2
