"""
Step Decay Schedules
====================

Discrete decay of the learning rate at fixed step indices.

StepLR:
-------
Decays by γ every ``step_size`` steps:

    lr(n) = base_lr · γ^⌊n / step_size⌋

MultiStepLR:
------------
Decays by γ at each milestone:

    lr(n) = base_lr · γ^|{m ∈ milestones : m ≤ n}|

Both recompute the rate from the step counter on every step, so no
rounding error accumulates over long runs.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional

from ..core.base import LRScheduler


class StepLR(LRScheduler):
    """
    Decay the learning rate by ``gamma`` every ``step_size`` steps.

    Parameters:
        base_lr: Learning rate at step 0
        step_size: Period of the decay, in steps (0 is treated as 1)
        gamma: Multiplicative decay per period (default: 0.1)
        init_step: Starting step, for resumed training (default: 0)

    Example:
        >>> scheduler = StepLR(1.0, step_size=3, gamma=0.1)
        >>> # steps 0..9 -> 1.0, 1.0, 1.0, 0.1, 0.1, 0.1, 0.01, ...
    """

    def __init__(
        self,
        base_lr: float,
        step_size: int,
        gamma: float = 0.1,
        init_step: int = 0
    ):
        self.base_lr = float(base_lr)
        self.step_size = max(int(step_size), 1)
        self.gamma = float(gamma)

        self._step = int(init_step)
        self._lr = self._compute_lr(self._step)

    def _compute_lr(self, n: int) -> float:
        return self.base_lr * self.gamma ** (n // self.step_size)

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
            'step_size': self.step_size,
            'gamma': self.gamma,
        }


class MultiStepLR(LRScheduler):
    """
    Decay the learning rate by ``gamma`` at each milestone step.

    Milestones are sorted at construction, so input order does not
    matter. Duplicate milestones each apply their own decay.

    Parameters:
        base_lr: Learning rate at step 0
        milestones: Step indices at which to decay
        gamma: Multiplicative decay per milestone (default: 0.1)
        init_step: Starting step, for resumed training (default: 0)
    """

    def __init__(
        self,
        base_lr: float,
        milestones: Iterable[int],
        gamma: float = 0.1,
        init_step: int = 0
    ):
        self.base_lr = float(base_lr)
        self.milestones: List[int] = sorted(int(m) for m in milestones)
        self.gamma = float(gamma)

        self._step = int(init_step)
        self._lr = self._compute_lr(self._step)

    def _milestones_passed(self, n: int) -> int:
        # Milestone lists are short; a linear scan is enough
        return sum(1 for m in self.milestones if m <= n)

    def _compute_lr(self, n: int) -> float:
        return self.base_lr * self.gamma ** self._milestones_passed(n)

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
            'milestones': list(self.milestones),
            'gamma': self.gamma,
        }
