"""
Polynomial Decay Schedule
=========================

    lr(n) = base_lr · (1 - n / total_iters)^power    for n < total_iters
    lr(n) = 0                                         otherwise

power=1 gives a linear decay to zero; power=2 a quadratic one. With
``total_iters == 0`` the schedule is saturated from the start and always
returns 0.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..core.base import LRScheduler


class PolynomialLR(LRScheduler):
    """
    Polynomial decay of the learning rate to zero.

    Parameters:
        base_lr: Learning rate at step 0
        total_iters: Steps until the rate reaches zero (default: 5)
        power: Polynomial exponent (default: 1.0)
        init_step: Starting step, for resumed training (default: 0)
    """

    def __init__(
        self,
        base_lr: float,
        total_iters: int = 5,
        power: float = 1.0,
        init_step: int = 0
    ):
        self.base_lr = float(base_lr)
        self.total_iters = int(total_iters)
        self.power = float(power)

        self._step = int(init_step)
        self._lr = self._compute_lr(self._step)

    def _compute_lr(self, n: int) -> float:
        if n >= self.total_iters:
            return 0.0
        factor = 1.0 - n / self.total_iters
        return self.base_lr * factor ** self.power

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
            'total_iters': self.total_iters,
            'power': self.power,
        }
