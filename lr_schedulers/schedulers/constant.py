"""
Constant Factor Schedule
========================

Scales the base learning rate by a constant factor for a fixed number
of steps, then switches to the base rate for good.

    lr(n) = factor · base_lr    if n < total_iters
    lr(n) = base_lr             otherwise

Typical use is a short "burn-in" at a reduced rate:

    scheduler = ConstantLR(1e-3, factor=0.1, total_iters=500)

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..core.base import LRScheduler


class ConstantLR(LRScheduler):
    """
    Constant-factor learning rate until ``total_iters`` steps.

    Parameters:
        base_lr: Learning rate after the scaled phase
        factor: Multiplier applied while step < total_iters (default: 1/3)
        total_iters: Number of scaled steps (default: 5)
        init_step: Starting step, for resumed training (default: 0)

    Example:
        >>> scheduler = ConstantLR(0.5, factor=0.1, total_iters=2)
        >>> lrs = []
        >>> for _ in range(5):
        ...     lrs.append(scheduler.get_lr())
        ...     scheduler.step()
        >>> lrs  # [0.05, 0.05, 0.5, 0.5, 0.5]
    """

    def __init__(
        self,
        base_lr: float,
        factor: float = 1.0 / 3,
        total_iters: int = 5,
        init_step: int = 0
    ):
        self.base_lr = float(base_lr)
        self.factor = float(factor)
        self.total_iters = int(total_iters)

        self._step = int(init_step)
        if self._step < self.total_iters:
            self._lr = self.factor * self.base_lr
        else:
            self._lr = self.base_lr

    def step(self, metric: Optional[float] = None) -> None:
        self._step += 1
        # One-way transition
        if self._step == self.total_iters:
            self._lr = self.base_lr

    def get_lr(self, metric: Optional[float] = None) -> float:
        return self._lr

    @property
    def last_step(self) -> int:
        """Number of steps taken, including ``init_step``."""
        return self._step

    def _repr_fields(self) -> Dict[str, Any]:
        return {
            'base_lr': self.base_lr,
            'factor': self.factor,
            'total_iters': self.total_iters,
        }
