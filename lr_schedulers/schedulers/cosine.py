"""
Cosine Annealing Schedules
==========================

Cosine-shaped oscillation between an upper rate η₀ and a lower rate η₁.

CosineAnnealingLR:
------------------
Periodic with period 2·T_max, descending from η₀ to η₁ over T_max steps
and rising back over the next T_max:

    phase(n) = (n mod 2·T_max) · π / T_max
    lr(n)    = η₁ + (η₀ - η₁) · ½ · (1 + cos(phase(n)))

so lr(n) == lr(n mod 2·T_max) for every n.

CosineAnnealingWarmRestarts (SGDR):
-----------------------------------
Same half-cosine, but instead of rising back the schedule jumps to η₀
("warm restart") and the next cycle is T_mult times longer. The position
within the current cycle, t_cur, lives in [0, T_i]:

    lr = η₁ + (η₀ - η₁) · ½ · (1 + cos(t_cur · π / T_i))

At t_cur == T_i the rate sits at the trough η₁; the following step
folds t_cur back by T_i + 1 and multiplies T_i by T_mult. For example
with η₀=1, η₁=0, T_0=2, T_mult=2 the first 8 rates are

    1.0, 0.5, 0.0, 1.0, (1+1/√2)/2, 0.5, (1-1/√2)/2, 0.0

Zero-length periods are coerced to 1 so no division by zero can occur
and the restart loop always terminates.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
import math
from typing import Any, Dict, Optional, Tuple

from ..core.base import LRScheduler


def _cosine_factor(t: int, t_max: int) -> float:
    """½ · (1 + cos(t·π / t_max))."""
    return 0.5 * (1.0 + math.cos(t * math.pi / t_max))


class CosineAnnealingLR(LRScheduler):
    """
    Periodic cosine annealing between ``eta_0`` and ``eta_1``.

    Parameters:
        eta_0: Upper rate, reached at n = 0, 2·t_max, 4·t_max, ...
        eta_1: Lower rate, reached at n = t_max, 3·t_max, ... (default: 0.0)
        t_max: Half period in steps; values below 1 are treated as 1
        init_step: Starting step, for resumed training (default: 0)

    Example:
        >>> scheduler = CosineAnnealingLR(1.0, 0.0, t_max=2)
        >>> # 1.0, 0.5, 0.0, 0.5, 1.0, 0.5, ...
    """

    def __init__(
        self,
        eta_0: float,
        eta_1: float = 0.0,
        t_max: int = 1,
        init_step: int = 0
    ):
        self.eta_0 = float(eta_0)
        self.eta_1 = float(eta_1)
        self.t_max = max(int(t_max), 1)

        self._step = int(init_step)
        self._lr = self._compute_lr(self._step)

    def _compute_lr(self, n: int) -> float:
        folded = n % (2 * self.t_max)
        factor = _cosine_factor(folded, self.t_max)
        return self.eta_1 + (self.eta_0 - self.eta_1) * factor

    def step(self, metric: Optional[float] = None) -> None:
        self._step += 1
        self._lr = self._compute_lr(self._step)

    def get_lr(self, metric: Optional[float] = None) -> float:
        return self._lr

    @property
    def last_step(self) -> int:
        return self._step

    def _repr_fields(self) -> Dict[str, Any]:
        return {'eta_0': self.eta_0, 'eta_1': self.eta_1, 't_max': self.t_max}


class CosineAnnealingWarmRestarts(LRScheduler):
    """
    Cosine annealing with warm restarts and growing cycle length.

    Parameters:
        eta_0: Rate at the start of every cycle
        eta_1: Rate at the end of every cycle (default: 0.0)
        t_0: Length of the first cycle; values below 1 are treated as 1
        t_mult: Cycle length multiplier after each restart; values below
                1 are treated as 1 (default: 1)
        init_step: Starting step, for resumed training (default: 0)
    """

    def __init__(
        self,
        eta_0: float,
        eta_1: float = 0.0,
        t_0: int = 1,
        t_mult: int = 1,
        init_step: int = 0
    ):
        self.eta_0 = float(eta_0)
        self.eta_1 = float(eta_1)
        # Both must be >= 1 or the restart loop never terminates
        self.t_0 = max(int(t_0), 1)
        self.t_mult = max(int(t_mult), 1)

        self._step = int(init_step)
        self._step_cur, self._t_max = self._fold(self._step, self.t_0)
        self._lr = self._compute_lr()

    def _fold(self, step_cur: int, t_max: int) -> Tuple[int, int]:
        """Fold ``step_cur`` into [0, t_max], growing t_max per restart."""
        while step_cur > t_max:
            step_cur -= t_max + 1
            t_max *= self.t_mult
        return step_cur, t_max

    def _compute_lr(self) -> float:
        factor = _cosine_factor(self._step_cur, self._t_max)
        return self.eta_1 + (self.eta_0 - self.eta_1) * factor

    def step(self, metric: Optional[float] = None) -> None:
        self._step += 1
        self._step_cur, self._t_max = self._fold(self._step_cur + 1, self._t_max)
        self._lr = self._compute_lr()

    def get_lr(self, metric: Optional[float] = None) -> float:
        return self._lr

    @property
    def last_step(self) -> int:
        return self._step

    @property
    def step_cur(self) -> int:
        """Position within the current cycle."""
        return self._step_cur

    @property
    def cycle_length(self) -> int:
        """Length T_i of the current cycle."""
        return self._t_max

    def _repr_fields(self) -> Dict[str, Any]:
        return {
            'eta_0': self.eta_0,
            'eta_1': self.eta_1,
            't_0': self.t_0,
            't_mult': self.t_mult,
        }
