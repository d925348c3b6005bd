"""
Exponential Decay Schedule
==========================

    lr(n) = base_lr · γⁿ

The rate is seeded in closed form at construction and then advanced by
the recurrence lr ← lr · γ on every step, which avoids a power call per
step. Both forms agree up to floating-point rounding (~1e-9 relative).

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..core.base import LRScheduler


class ExponentialLR(LRScheduler):
    """
    Multiply the learning rate by ``gamma`` every step.

    Parameters:
        base_lr: Learning rate at step 0
        gamma: Per-step multiplicative decay
        init_step: Starting step, for resumed training (default: 0)
    """

    def __init__(self, base_lr: float, gamma: float, init_step: int = 0):
        self.base_lr = float(base_lr)
        self.gamma = float(gamma)

        self._step = int(init_step)
        self._lr = self.base_lr * self.gamma ** self._step

    def step(self, metric: Optional[float] = None) -> None:
        self._step += 1
        self._lr *= self.gamma

    def get_lr(self, metric: Optional[float] = None) -> float:
        return self._lr

    @property
    def last_step(self) -> int:
        return self._step

    def _repr_fields(self) -> Dict[str, Any]:
        return {'base_lr': self.base_lr, 'gamma': self.gamma}
