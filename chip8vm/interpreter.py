"""Stepping interface between a host loop and the CHIP-8 engine."""

from typing import Optional, Union, Sequence

import jax
import jax.numpy as jnp

from chip8vm.constants import DEFAULT_CLOCK, TIMER_FREQUENCY
from chip8vm.decode import disassemble
from chip8vm.keypad import set_key
from chip8vm.logging import ExecutionLogger, build_progress_bar
from chip8vm.memory import load_rom
from chip8vm.stack import depth
from chip8vm.state import Status, Running, AwaitingKey, Halted, create_state
from chip8vm import display, emulator, timers


class Interpreter:
    """Owns one CHIP-8 machine and exposes the host stepping contract.

    The host calls :meth:`step` once per intended CPU cycle and :meth:`tick`
    at 60 Hz, writes keys with :meth:`set_key` between batches of steps, and
    reads :meth:`snapshot` and :meth:`is_sound_active` to present a frame.
    """

    def __init__(
        self,
        clock: int = DEFAULT_CLOCK,
        fps: int = TIMER_FREQUENCY,
        modern_mode: bool = True,
        rng: Optional[jax.Array] = None,
        logger: Optional[ExecutionLogger] = None,
    ):
        """Initialize the interpreter.

        Args:
            clock: Instructions per second the host intends to run (typically 700)
            fps: Timer and frame rate in Hz (typically 60)
            modern_mode: Use modern shift and load/store semantics instead of COSMAC VIP ones
            rng: JAX random key for RND. If None, a fresh key is drawn from OS entropy
            logger: Logger for lifecycle and error messages
        """
        if clock <= 0 or fps <= 0:
            raise ValueError(f"clock and fps must be positive, got clock={clock} fps={fps}")

        self.clock = clock
        self.fps = fps
        self.modern_mode = modern_mode
        self.rng = rng
        self.logger = logger or ExecutionLogger(log_level="WARNING")
        self.rom_data = b""
        self.instructions_executed = 0
        self.state = create_state(rng, modern_mode)

    @property
    def instructions_per_frame(self) -> int:
        """Number of instructions executed per 60 Hz frame.

        Returns:
            Number of instructions per frame based on clock and FPS
        """
        return max(1, self.clock // self.fps)

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def halted(self) -> bool:
        return isinstance(self.state.status, Halted)

    @property
    def awaiting_key(self) -> bool:
        return isinstance(self.state.status, AwaitingKey)

    @property
    def stack_depth(self) -> int:
        return depth(self.state.stack)

    def reset(self):
        """Return to power-on state and reload the last ROM."""
        self.state = load_rom(create_state(self.rng, self.modern_mode), self.rom_data)
        self.instructions_executed = 0
        self.logger.info("Interpreter reset")

    def load(self, rom_data: Union[bytes, bytearray, Sequence[int]]):
        """Copy a ROM image into memory at 0x200.

        Args:
            rom_data: Raw ROM bytes

        Raises:
            RomTooLarge: If the ROM does not fit; the machine is left unchanged
        """
        rom_data = bytes(rom_data)
        self.state = load_rom(self.state, rom_data)
        self.rom_data = rom_data
        self.logger.info(f"Loaded ROM ({len(rom_data)} bytes)")

    def step(self) -> bool:
        """Run one instruction.

        Returns:
            True if an instruction was executed, False if the interpreter is
            awaiting a key or halted

        Raises:
            FatalError: The interpreter is now halted with this error as reason
        """
        if not isinstance(self.state.status, Running):
            return False

        on_fetch = self._trace if self.logger.is_enabled_for("DEBUG") else None
        state = emulator.step(self.state, on_fetch)
        self.state = state

        if isinstance(state.status, Halted):
            self.logger.error(f"Halted at PC=0x{int(state.pc):03X}: {state.status.reason}")
            raise state.status.reason

        self.instructions_executed += 1
        if isinstance(state.status, AwaitingKey):
            self.logger.debug(f"Waiting for key into V{state.status.register:X}")
        return True

    def _trace(self, pc: int, instruction: int):
        self.logger.debug(f"{pc:03X}: {instruction:04X}  {disassemble(instruction)}")

    def tick(self):
        """Advance the delay and sound timers by one 60 Hz period."""
        self.state = timers.tick(self.state)

    def set_key(self, key: int, pressed: bool):
        """Set logical key `key` (0x0-0xF) as pressed or released."""
        self.state = set_key(self.state, key, pressed)

    def snapshot(self) -> jnp.ndarray:
        """Immutable (64, 32) boolean pixel grid indexed [x, y]."""
        return display.snapshot(self.state)

    def is_sound_active(self) -> bool:
        return timers.is_sound_active(self.state)

    def run_frame(self) -> int:
        """Run one frame worth of instructions followed by a timer tick.

        Returns:
            Number of instructions actually executed
        """
        executed = 0
        for _ in range(self.instructions_per_frame):
            if self.halted:
                break
            executed += self.step()
        self.tick()
        return executed

    def run_frames(self, n: int, progress: bool = False, log_interval: int = 60) -> int:
        """Run `n` frames headless.

        Args:
            n: Number of frames to run
            progress: Show a tqdm progress bar
            log_interval: Frames between debug statistics lines

        Returns:
            Number of instructions executed
        """
        self.logger.log_run_start({
            "clock": self.clock,
            "fps": self.fps,
            "instructions_per_frame": self.instructions_per_frame,
            "modern_mode": self.modern_mode,
            "frames": n,
        })

        bar = build_progress_bar(n) if progress else None
        executed = 0
        try:
            for frame in range(n):
                executed += self.run_frame()
                if bar is not None:
                    bar.update(1)
                self.logger.log_frame(frame, {
                    "pc": f"0x{int(self.state.pc):03X}",
                    "instructions": executed,
                    "status": type(self.state.status).__name__,
                }, n, log_interval)
        finally:
            if bar is not None:
                bar.close()

        self.logger.log_run_end({
            "instructions": executed,
            "status": type(self.state.status).__name__,
        })
        return executed
