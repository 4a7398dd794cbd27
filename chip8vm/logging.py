"""Console logging utilities for the CHIP-8 interpreter.

Provides a small levelled console logger with optional colours and
timestamps, a run logger that reports frame throughput, and a tqdm progress
bar for headless multi-frame runs.
"""

import time
import sys
from typing import Any, Dict, Optional

from tqdm import tqdm


class ConsoleLogger:
    """Flexible console logger with levels, colours and timestamps."""

    def __init__(
        self,
        name: str = "chip8vm",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream=None,
    ):
        self.name = name
        self.log_level = log_level.upper()
        self.stream = stream or sys.stdout
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

        self.colors = (
            {
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "CRITICAL": "\033[35m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {
                k: ""
                for k in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "RESET"]
            }
        )

        self.level_order = {
            "DEBUG": 0,
            "INFO": 1,
            "WARNING": 2,
            "ERROR": 3,
            "CRITICAL": 4,
        }

    def is_enabled_for(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return self.level_order.get(level.upper(), 1) >= self.level_order.get(
            self.log_level, 1
        )

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = self.colors.get(level.upper(), "")
            reset = self.colors["RESET"]
            level_str = f"{color}{level_str}{reset}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self.is_enabled_for(level):
            formatted = self._format_message(level, message)
            print(formatted, file=self.stream, flush=True)

    def debug(self, message: str):
        """Log debug message."""
        self.log("DEBUG", message)

    def info(self, message: str):
        """Log info message."""
        self.log("INFO", message)

    def error(self, message: str):
        """Log error message."""
        self.log("ERROR", message)


class ExecutionLogger(ConsoleLogger):
    """Logger for interpreter runs with throughput tracking."""

    def __init__(self, name: str = "chip8vm", **kwargs):
        super().__init__(name, **kwargs)
        self.run_start_time = time.time()

    def log_run_start(self, config: Dict[str, Any]):
        """Log interpreter configuration at the start of a run."""
        self.run_start_time = time.time()
        self.info("=" * 60)
        self.info("Starting run with configuration:")
        for key, value in config.items():
            self.info(f"  {key}: {value}")
        self.info("=" * 60)

    def log_frame(
        self,
        frame: int,
        stats: Dict[str, Any],
        total_frames: int,
        log_interval: int = 60,
    ):
        """Log frame statistics every `log_interval` frames."""
        if frame % log_interval != 0 and frame != total_frames - 1:
            return

        elapsed = time.time() - self.run_start_time
        stat_strs = [f"{key}={value}" for key, value in stats.items()]
        self.debug(
            f"Frame {frame + 1:5d}/{total_frames} "
            f"({elapsed:6.2f}s) | " + " | ".join(stat_strs)
        )

    def log_run_end(self, stats: Dict[str, Any]):
        """Log run totals."""
        elapsed = time.time() - self.run_start_time
        self.info("=" * 60)
        self.info(f"Run finished in {elapsed:.2f}s")
        for key, value in stats.items():
            if isinstance(value, float):
                self.info(f"  {key}: {value:.2f}")
            else:
                self.info(f"  {key}: {value}")
        self.info("=" * 60)


def build_progress_bar(n: int, desc: Optional[str] = None, **kwargs) -> tqdm:
    """Build a tqdm progress bar for `n` frames."""
    if desc is None:
        desc = f"Running ({n:,} frames)"

    for kwarg in ("total", "unit"):
        kwargs.pop(kwarg, None)

    return tqdm(total=n, desc=desc, unit="frame", **kwargs)
