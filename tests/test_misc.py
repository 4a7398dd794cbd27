"""Tests for miscellaneous instructions (Fxxx)."""

import pytest
from chip8vm import execute, set_key, AwaitingKey, Running, OutOfBounds


class TestTimers:
    """Test timer-related instructions."""

    def test_misc_timer_instructions(self, fresh_state):
        """Test timer set and get operations."""
        state = execute(fresh_state, 0x6030)  # V0 = 48
        state = execute(state, 0xF015)  # Set delay timer to V0
        assert state.delay_timer == 48

        state = execute(state, 0x6120)  # V1 = 32
        state = execute(state, 0xF118)  # Set sound timer to V1
        assert state.sound_timer == 32

        state = execute(state, 0xF207)  # V2 = delay timer
        assert state.V[2] == 48


class TestBCD:
    """Test BCD conversion."""

    def test_misc_bcd_conversion(self, fresh_state):
        """Test BCD conversion with 156."""
        state = execute(fresh_state, 0x609C)  # V0 = 156
        state = execute(state, 0xA300)  # I = 0x300
        state = execute(state, 0xF033)

        assert state.memory[0x300] == 1
        assert state.memory[0x301] == 5
        assert state.memory[0x302] == 6

    @pytest.mark.parametrize("value,digits", [(0, (0, 0, 0)), (7, (0, 0, 7)), (40, (0, 4, 0)), (255, (2, 5, 5))])
    def test_bcd_edge_cases(self, fresh_state, value, digits):
        state = execute(fresh_state, 0x6000 | value)
        state = execute(state, 0xA400)
        state = execute(state, 0xF033)

        assert tuple(int(b) for b in state.memory[0x400:0x403]) == digits

    def test_bcd_into_reserved_area(self, fresh_state):
        state = execute(fresh_state, 0xA100)
        with pytest.raises(OutOfBounds):
            execute(state, 0xF033)


class TestFont:
    """Test font character addressing."""

    def test_misc_font_character(self, fresh_state):
        state = execute(fresh_state, 0x600A)  # V0 = 0xA
        state = execute(state, 0xF029)

        assert state.I == 0x50 + (0xA * 5)

    def test_font_all_characters(self, fresh_state):
        state = fresh_state
        for digit in range(16):
            state = execute(state, 0x6000 | digit)
            state = execute(state, 0xF029)
            assert state.I == 0x50 + (digit * 5), f"Font address wrong for digit {digit:X}"


class TestMemoryOperations:
    """Test store/load register operations."""

    def test_store_load_modern_mode(self, modern_state):
        """Test store/load with modern_mode (I doesn't change)."""
        state = execute(modern_state, 0x6001)
        state = execute(state, 0x6102)
        state = execute(state, 0x6203)
        state = execute(state, 0x6344)  # Not stored
        state = execute(state, 0xA300)

        state = execute(state, 0xF255)  # Store V0-V2
        assert state.I == 0x300
        assert [int(b) for b in state.memory[0x300:0x304]] == [1, 2, 3, 0]

        state = execute(state, 0x6000)
        state = execute(state, 0x6100)
        state = execute(state, 0x6200)
        state = execute(state, 0x6300)

        state = execute(state, 0xF265)  # Load V0-V2
        assert state.V[0] == 1
        assert state.V[1] == 2
        assert state.V[2] == 3
        assert state.V[3] == 0
        assert state.I == 0x300

    def test_store_load_legacy_mode(self, legacy_state):
        """Test store/load with legacy mode (I increments)."""
        state = execute(legacy_state, 0x6001)
        state = execute(state, 0x6102)
        state = execute(state, 0xA400)

        state = execute(state, 0xF155)  # Store V0-V1
        assert state.I == 0x400 + 2

        state = execute(state, 0xA400)
        state = execute(state, 0x6000)
        state = execute(state, 0x6100)

        state = execute(state, 0xF165)  # Load V0-V1
        assert state.V[0] == 1
        assert state.V[1] == 2
        assert state.I == 0x400 + 2

    def test_store_all_registers(self, fresh_state):
        state = fresh_state.replace(V=fresh_state.V.at[15].set(0xEE))
        state = execute(state, 0xA500)
        state = execute(state, 0xFF55)
        assert state.memory[0x50F] == 0xEE

    def test_load_from_font_area(self, fresh_state):
        state = execute(fresh_state, 0xA050)
        state = execute(state, 0xF465)
        assert [int(v) for v in state.V[:5]] == [0xF0, 0x90, 0x90, 0x90, 0xF0]


class TestIndexArithmetic:
    """Test FX1E."""

    def test_add_to_index(self, fresh_state):
        state = execute(fresh_state, 0x6010)
        state = execute(state, 0xA300)
        state = execute(state, 0xF01E)

        assert state.I == 0x310
        assert state.V[15] == 0

    def test_add_to_index_leaves_flag(self, fresh_state):
        state = execute(fresh_state, 0x60FF)
        state = execute(state, 0x6F07)
        state = execute(state, 0xAF80)
        state = execute(state, 0xF01E)

        assert state.I == 0x107F
        assert state.V[15] == 0x07


class TestKeyWait:
    """Test FX0A."""

    def test_wait_for_key_suspends(self, fresh_state):
        initial_pc = fresh_state.pc
        state = execute(fresh_state, 0xF30A)

        assert state.status == AwaitingKey(3)
        assert state.pc == initial_pc

    def test_key_press_resolves_wait(self, fresh_state):
        state = execute(fresh_state, 0xF30A)
        state = set_key(state, 0xB, True)

        assert state.status == Running()
        assert state.V[3] == 0xB

    def test_held_key_does_not_resolve_wait(self, fresh_state):
        state = set_key(fresh_state, 7, True)
        state = execute(state, 0xF00A)
        state = set_key(state, 7, True)

        assert state.status == AwaitingKey(0)

        state = set_key(state, 7, False)
        state = set_key(state, 7, True)
        assert state.status == Running()
        assert state.V[0] == 7

    def test_release_does_not_resolve_wait(self, fresh_state):
        state = set_key(fresh_state, 2, True)
        state = execute(state, 0xF00A)
        state = set_key(state, 2, False)
        assert isinstance(state.status, AwaitingKey)

    def test_set_key_rejects_bad_index(self, fresh_state):
        with pytest.raises(ValueError):
            set_key(fresh_state, 16, True)
