"""
Cyclical Learning Rate
======================

Cycles the learning rate between ``base_lr`` and ``max_lr`` along a
triangular wave (Smith, "Cyclical Learning Rates for Training Neural
Networks").

Mathematical Formulation:
-------------------------
One cycle lasts step_size_up + step_size_down steps. Within a cycle the
position x rises linearly 0 → 1 over step_size_up steps, then falls
1 → 0 over step_size_down steps:

    lr(n) = base_lr + (max_lr - base_lr) · scale(n) · x(n)

The amplitude scale depends on the mode:

    triangular   scale = 1
    triangular2  scale = 1 / 2^(cycle - 1)        (cycle counts from 1)
    exp_range    scale = γⁿ                       (n = absolute step count)

A custom ``scale_fn`` replaces the mode-based scale. It receives either
the cycle number (scale_mode='cycle') or the step index within the
current cycle (scale_mode='iterations').

Example (triangular2, base 0.1, max 0.5, step_size_up 2):

    0.1, 0.3, 0.5, 0.3, 0.1, 0.2, 0.3, 0.2, 0.1, ...

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..core.base import LRScheduler, coerce_enum


class CyclicMode(Enum):
    """Built-in amplitude scaling policies."""
    TRIANGULAR = 'triangular'
    TRIANGULAR2 = 'triangular2'
    EXP_RANGE = 'exp_range'


class ScaleMode(Enum):
    """Argument passed to a custom scale function."""
    CYCLE = 'cycle'
    ITERATIONS = 'iterations'


class CyclicLR(LRScheduler):
    """
    Triangular-wave learning rate between ``base_lr`` and ``max_lr``.

    Parameters:
        base_lr: Lower boundary of the cycle
        max_lr: Upper boundary of the cycle (reached only when scale is 1)
        step_size_up: Steps in the rising half (default: 2000)
        step_size_down: Steps in the falling half; None mirrors
                        step_size_up (default: None)
        mode: 'triangular' | 'triangular2' | 'exp_range' (default: 'triangular')
        gamma: Base of the exp_range scale (default: 1.0)
        scale_fn: Custom scale function, overrides ``mode`` (default: None)
        scale_mode: 'cycle' | 'iterations', argument fed to ``scale_fn``
                    (default: 'cycle')
        init_step: Starting step, for resumed training (default: 0)

    Example:
        >>> scheduler = CyclicLR(0.01, 0.1, step_size_up=4)
        >>> for batch in loader:
        ...     lr = scheduler.get_lr()
        ...     train_step(batch, lr)
        ...     scheduler.step()
    """

    def __init__(
        self,
        base_lr: float,
        max_lr: float,
        step_size_up: int = 2000,
        step_size_down: Optional[int] = None,
        mode: Union[str, CyclicMode] = CyclicMode.TRIANGULAR,
        gamma: float = 1.0,
        scale_fn: Optional[Callable[[float], float]] = None,
        scale_mode: Union[str, ScaleMode] = ScaleMode.CYCLE,
        init_step: int = 0
    ):
        self.base_lr = float(base_lr)
        self.max_lr = float(max_lr)
        self.step_size_up = int(step_size_up)
        self.step_size_down = (
            self.step_size_up if step_size_down is None else int(step_size_down)
        )
        self.mode = coerce_enum(CyclicMode, mode, 'mode')
        self.gamma = float(gamma)
        self.scale_fn = scale_fn
        self.scale_mode = coerce_enum(ScaleMode, scale_mode, 'scale_mode')

        self._step = int(init_step)

    @property
    def cycle_length(self) -> int:
        # A cycle with no steps at all is treated as a single-step cycle
        return max(self.step_size_up + self.step_size_down, 1)

    def cycle_and_position(self) -> Tuple[int, float]:
        """
        Return the 1-based cycle number and position x ∈ [0, 1].
        """
        length = self.cycle_length
        cycle = 1 + self._step // length
        offset = self._step % length

        if offset <= self.step_size_up:
            # Rising half; an empty rising half starts at the peak
            if self.step_size_up > 0:
                x = offset / self.step_size_up
            else:
                x = 1.0
        else:
            x = 1.0 - (offset - self.step_size_up) / self.step_size_down

        return cycle, x

    def _scale(self, cycle: int) -> float:
        if self.scale_fn is not None:
            if self.scale_mode is ScaleMode.CYCLE:
                return self.scale_fn(float(cycle))
            return self.scale_fn(float(self._step % self.cycle_length))

        if self.mode is CyclicMode.TRIANGULAR:
            return 1.0
        if self.mode is CyclicMode.TRIANGULAR2:
            return 0.5 ** (cycle - 1)
        return self.gamma ** self._step

    def step(self, metric: Optional[float] = None) -> None:
        self._step += 1

    def get_lr(self, metric: Optional[float] = None) -> float:
        cycle, x = self.cycle_and_position()
        amplitude = (self.max_lr - self.base_lr) * self._scale(cycle)
        return self.base_lr + amplitude * x

    @property
    def last_step(self) -> int:
        return self._step

    def _repr_fields(self) -> Dict[str, Any]:
        fields = {
            'base_lr': self.base_lr,
            'max_lr': self.max_lr,
            'step_size_up': self.step_size_up,
            'step_size_down': self.step_size_down,
            'mode': self.mode.value,
            'gamma': self.gamma,
        }
        if self.scale_fn is not None:
            fields['scale_fn'] = self.scale_fn
            fields['scale_mode'] = self.scale_mode.value
        return fields
