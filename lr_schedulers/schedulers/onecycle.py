"""
One-Cycle Learning Rate
=======================

The 1cycle policy (Smith & Topin, "Super-Convergence"): warm up from a
low initial rate to ``max_lr``, then anneal to a minimum rate far below
the initial one.

Rates:
------
    initial_lr = max_lr / div_factor
    min_lr     = initial_lr / final_div_factor

Phases (over total_steps):
--------------------------
Two-phase (default):
    1. warmup   initial_lr → max_lr     ⌊total · pct_start⌋ steps
    2. anneal   max_lr → min_lr         remaining steps

Three-phase:
    1. warmup   initial_lr → max_lr     ⌊total · pct_start⌋ steps
    2. anneal   max_lr → initial_lr     ⌊total · (1 - pct_start) / 2⌋ steps
    3. final    initial_lr → min_lr     remaining steps

Within a phase the rate is interpolated by progress p = k / phase_length
(p = 1 for an empty phase), either linearly or with a cosine ease:

    linear:  start + (end - start) · p
    cos:     end + (start - end) · ½ · (1 + cos(π · p))

From step ``total_steps`` onward the rate stays at ``min_lr``.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ..core.base import LRScheduler, coerce_enum


class AnnealStrategy(Enum):
    """Interpolation used within each phase."""
    COS = 'cos'
    LINEAR = 'linear'


class OneCycleLR(LRScheduler):
    """
    1cycle learning rate policy.

    Parameters:
        max_lr: Peak learning rate
        total_steps: Length of the whole cycle in steps
        pct_start: Fraction of steps spent warming up (default: 0.3)
        anneal_strategy: 'cos' | 'linear' (default: 'cos')
        div_factor: initial_lr = max_lr / div_factor (default: 25.0)
        final_div_factor: min_lr = initial_lr / final_div_factor (default: 1e4)
        three_phase: Anneal back to initial_lr before the final
                     descent to min_lr (default: False)
        init_step: Starting step, for resumed training (default: 0)
    """

    def __init__(
        self,
        max_lr: float,
        total_steps: int,
        pct_start: float = 0.3,
        anneal_strategy: Union[str, AnnealStrategy] = AnnealStrategy.COS,
        div_factor: float = 25.0,
        final_div_factor: float = 1e4,
        three_phase: bool = False,
        init_step: int = 0
    ):
        self.max_lr = float(max_lr)
        self.total_steps = int(total_steps)
        self.pct_start = float(pct_start)
        self.anneal_strategy = coerce_enum(
            AnnealStrategy, anneal_strategy, 'anneal_strategy'
        )
        self.div_factor = float(div_factor)
        self.final_div_factor = float(final_div_factor)
        self.three_phase = bool(three_phase)

        self.initial_lr = self.max_lr / self.div_factor
        self.min_lr = self.initial_lr / self.final_div_factor

        self.warmup_steps = math.floor(self.total_steps * self.pct_start)
        if self.three_phase:
            self.annealing_steps = math.floor(
                self.total_steps * (1.0 - self.pct_start) / 2.0
            )
            self.final_annealing_steps = (
                self.total_steps - self.warmup_steps - self.annealing_steps
            )
        else:
            self.annealing_steps = self.total_steps - self.warmup_steps
            self.final_annealing_steps = 0

        self._step = int(init_step)

    def phase_and_progress(self) -> Tuple[int, float]:
        """Return the current phase (1, 2 or 3) and progress within it."""
        n = self._step
        if n <= self.warmup_steps:
            return 1, _progress(n, self.warmup_steps)

        n -= self.warmup_steps
        if n <= self.annealing_steps:
            return 2, _progress(n, self.annealing_steps)

        n -= self.annealing_steps
        return 3, min(_progress(n, self.final_annealing_steps), 1.0)

    def _interpolate(self, start: float, end: float, progress: float) -> float:
        if self.anneal_strategy is AnnealStrategy.LINEAR:
            return start + (end - start) * progress
        cos_factor = 0.5 * (1.0 + math.cos(math.pi * progress))
        return end + (start - end) * cos_factor

    def step(self, metric: Optional[float] = None) -> None:
        self._step += 1

    def get_lr(self, metric: Optional[float] = None) -> float:
        if self._step >= self.total_steps:
            return self.min_lr

        phase, progress = self.phase_and_progress()
        if phase == 1:
            return self._interpolate(self.initial_lr, self.max_lr, progress)
        if phase == 2:
            target = self.initial_lr if self.three_phase else self.min_lr
            return self._interpolate(self.max_lr, target, progress)
        return self._interpolate(self.initial_lr, self.min_lr, progress)

    @property
    def last_step(self) -> int:
        return self._step

    def _repr_fields(self) -> Dict[str, Any]:
        return {
            'max_lr': self.max_lr,
            'total_steps': self.total_steps,
            'pct_start': self.pct_start,
            'anneal_strategy': self.anneal_strategy.value,
            'div_factor': self.div_factor,
            'final_div_factor': self.final_div_factor,
            'three_phase': self.three_phase,
        }


def _progress(steps_in_phase: int, phase_length: int) -> float:
    if phase_length > 0:
        return steps_in_phase / phase_length
    return 1.0
