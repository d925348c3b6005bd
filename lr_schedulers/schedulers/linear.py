"""
Linear Factor Schedule
======================

Linearly interpolates a multiplicative factor between ``start_factor``
and ``end_factor`` over ``total_iters`` steps, then holds it:

    factor(n) = start_factor + n · (end_factor - start_factor) / total_iters
    lr(n)     = base_lr · factor(n)              for n < total_iters
    lr(n)     = base_lr · end_factor             for n ≥ total_iters

The terminal value is assigned directly rather than extrapolated, so
the rate lands exactly on ``base_lr · end_factor`` and never overshoots.

Common as a warmup: ``LinearLR(lr, start_factor=0.01, total_iters=1000)``.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..core.base import LRScheduler


class LinearLR(LRScheduler):
    """
    Linearly changing learning rate factor.

    Parameters:
        base_lr: Reference learning rate
        start_factor: Factor at step 0 (default: 1/3)
        end_factor: Factor at and after ``total_iters`` (default: 1.0)
        total_iters: Length of the ramp in steps (default: 5);
                     0 means the ramp is already complete
        init_step: Starting step, for resumed training (default: 0)
    """

    def __init__(
        self,
        base_lr: float,
        start_factor: float = 1.0 / 3,
        end_factor: float = 1.0,
        total_iters: int = 5,
        init_step: int = 0
    ):
        self.base_lr = float(base_lr)
        self.start_factor = float(start_factor)
        self.end_factor = float(end_factor)
        self.total_iters = int(total_iters)

        if self.total_iters > 0:
            self._grad = (self.end_factor - self.start_factor) / self.total_iters
        else:
            self._grad = 0.0

        self._step = int(init_step)
        self._lr = self._compute_lr(self._step)

    def _compute_lr(self, n: int) -> float:
        if n >= self.total_iters:
            return self.end_factor * self.base_lr
        return self.base_lr * (self.start_factor + n * self._grad)

    def step(self, metric: Optional[float] = None) -> None:
        self._step += 1
        self._lr = self._compute_lr(self._step)

    def get_lr(self, metric: Optional[float] = None) -> float:
        return self._lr

    @property
    def last_step(self) -> int:
        return self._step

    def _repr_fields(self) -> Dict[str, Any]:
        return {
            'base_lr': self.base_lr,
            'start_factor': self.start_factor,
            'end_factor': self.end_factor,
            'total_iters': self.total_iters,
        }
