"""
Schedule Logging
================

Console and file logging for learning rate trajectories.

This module provides:
- ScheduleLogger: structured logging of per-step learning rates
- format_lr: compact learning rate formatting for console output

Schedules themselves never print. A ScheduleLogger is handed to the
helpers that drive a schedule (``lr_trace``) or to ReduceLROnPlateau,
which reports its reductions through it.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


def format_lr(lr: float) -> str:
    """Format a learning rate in scientific notation (e.g. 1.00e-03)."""
    return f"{lr:.2e}"


class ScheduleLogger:
    """
    Structured logging for learning rate schedules.

    Provides formatted console output and optional file logging of the
    learning rate in use at each step, together with the observed
    metric when there is one.

    Parameters:
        name: Run name (used in log filenames)
        log_dir: Directory for log files (default: ./logs)
        verbose: Print to console (default: True)
        log_to_file: Write to log file (default: False)
        timestamp: Add timestamp to log filename (default: True)
        log_every: Only print every N-th step row; all rows are kept in
                   the history regardless (default: 1)

    Example:
        >>> logger = ScheduleLogger("cosine_sweep")
        >>> logger.log_config(scheduler.describe())
        >>> logger.log_lr(step=0, lr=scheduler.get_lr())
        >>> logger.finalize()
    """

    def __init__(
        self,
        name: str = "schedule",
        log_dir: str = "logs",
        verbose: bool = True,
        log_to_file: bool = False,
        timestamp: bool = True,
        log_every: int = 1
    ):
        self.name = name
        self.verbose = verbose
        self.log_to_file = log_to_file
        self.log_every = max(int(log_every), 1)

        # Setup log directory
        self.log_dir = Path(log_dir)
        if log_to_file:
            self.log_dir.mkdir(exist_ok=True, parents=True)

        if timestamp:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_filename = self.log_dir / f"{name}_{ts}.log"
        else:
            self.log_filename = self.log_dir / f"{name}.log"

        self._history: List[Dict[str, Any]] = []
        self._start_time = time.time()

        self._file = None
        if log_to_file:
            self._file = open(self.log_filename, 'w', encoding='utf-8')

    def _write(self, message: str) -> None:
        """Write message to outputs."""
        if self.verbose:
            print(message)
        if self._file:
            self._file.write(message + "\n")
            self._file.flush()

    def info(self, message: str) -> None:
        """Log informational message."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self._write(f"[{timestamp}] INFO: {message}")

    def warning(self, message: str) -> None:
        """Log warning message."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self._write(f"[{timestamp}] ⚠️ WARNING: {message}")

    def log_config(self, config: Dict[str, Any]) -> None:
        """Log a schedule description (see ``LRScheduler.describe``)."""
        self._write("\n" + "=" * 60)
        self._write("SCHEDULE")
        self._write("=" * 60)
        for key, value in config.items():
            self._write(f"  {key}: {value}")
        self._write("=" * 60 + "\n")

    def log_lr(
        self,
        step: int,
        lr: float,
        metric: Optional[float] = None,
        **extra: Any
    ) -> None:
        """
        Record the learning rate used at ``step``.

        Args:
            step: Step index
            lr: Learning rate in use for the step
            metric: Observed loss/metric, if any
            **extra: Additional name-value pairs to record
        """
        record: Dict[str, Any] = {'step': step, 'lr': lr}
        if metric is not None:
            record['metric'] = metric
        record.update(extra)
        self._history.append(record)

        if step % self.log_every != 0:
            return

        parts = [f"Step {step}", f"lr={format_lr(lr)}"]
        if metric is not None:
            parts.append(f"metric={metric:.4f}")
        for key, value in extra.items():
            if isinstance(value, float):
                parts.append(f"{key}={value:.4f}")
            else:
                parts.append(f"{key}={value}")

        self._write(" | ".join(parts))

    def get_history(self) -> List[Dict[str, Any]]:
        """Return copy of the recorded rows."""
        return self._history.copy()

    def save_history(self, path: Optional[str] = None) -> None:
        """
        Save recorded rows to a JSON file.

        Args:
            path: Output path (default: log_dir/name_history.json)
        """
        if path is None:
            self.log_dir.mkdir(exist_ok=True, parents=True)
            path = self.log_dir / f"{self.name}_history.json"

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self._history, f, indent=2)

    def finalize(self) -> None:
        """Print a summary of the logged trajectory and close the file."""
        elapsed = time.time() - self._start_time

        self._write("\n" + "=" * 60)
        self._write("SCHEDULE SUMMARY")
        self._write("=" * 60)
        self._write(f"Steps logged: {len(self._history)}")

        if self._history:
            lrs = [row['lr'] for row in self._history]
            self._write(f"LR range: {format_lr(min(lrs))} .. {format_lr(max(lrs))}")
            self._write(f"Final LR: {format_lr(lrs[-1])}")

        self._write(f"Elapsed: {elapsed:.1f}s")
        self._write("=" * 60)

        if self._file:
            self._file.close()
            self._file = None

    def __del__(self):
        if getattr(self, '_file', None):
            self._file.close()
