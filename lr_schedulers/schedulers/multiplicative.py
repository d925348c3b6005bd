"""
Multiplicative Schedule
=======================

Accumulates a user-supplied per-step factor:

    lr(n+1) = lr(n) · λ(n)

where ``λ`` is any pure function of the step index. This is the only
schedule parameterized by a callable rather than fixed constants.

Integration Example:
--------------------
    # 5% decay per step, frozen after step 100
    scheduler = MultiplicativeLR(
        1e-3,
        lr_lambda=lambda n: 0.95 if n < 100 else 1.0
    )

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional

from ..core.base import LRScheduler


class MultiplicativeLR(LRScheduler):
    """
    Learning rate multiplied by ``lr_lambda(step)`` on every step.

    Parameters:
        base_lr: Learning rate at step 0
        lr_lambda: Function mapping a step index to a multiplicative factor
        init_step: Starting step; ``lr_lambda(0) .. lr_lambda(init_step - 1)``
                   are applied in order at construction (default: 0)
    """

    def __init__(
        self,
        base_lr: float,
        lr_lambda: Callable[[int], float],
        init_step: int = 0
    ):
        self.base_lr = float(base_lr)
        self.lr_lambda = lr_lambda

        self._step = int(init_step)
        lr = self.base_lr
        for i in range(self._step):
            lr *= lr_lambda(i)
        self._lr = lr

    def step(self, metric: Optional[float] = None) -> None:
        self._lr *= self.lr_lambda(self._step)
        self._step += 1

    def get_lr(self, metric: Optional[float] = None) -> float:
        return self._lr

    @property
    def last_step(self) -> int:
        return self._step

    def _repr_fields(self) -> Dict[str, Any]:
        return {'base_lr': self.base_lr, 'lr_lambda': self.lr_lambda}
