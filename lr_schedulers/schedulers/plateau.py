"""
Reduce On Plateau
=================

Metric-driven learning rate reduction.

Unlike the other schedules, this one does not follow a closed-form
curve: it watches a loss/metric supplied by the training loop and cuts
the learning rate when the metric stops improving.

State Machine:
--------------
The monitor is either in Normal operation or in Cooldown.

Normal:
    - Compare the metric against the best value seen so far.
    - Improvement: best ← metric, bad-epoch count ← 0.
    - Otherwise: bad-epoch count += 1.
    - Reduce when the bad-epoch count reaches ``patience``
      (with patience=0, any single bad epoch triggers a reduction).

Cooldown:
    - Entered after every reduction, for ``cooldown`` steps.
    - The counter decrements each step and the best value is still
      tracked, but bad epochs are not counted.

Improvement Criterion:
----------------------
The metric must strictly beat a margin around ``best``:

    mode=min, threshold_mode=rel:  metric < best · (1 - threshold)
    mode=min, threshold_mode=abs:  metric < best - threshold
    mode=max, threshold_mode=rel:  metric > best · (1 + threshold)
    mode=max, threshold_mode=abs:  metric > best + threshold

Reduction:
----------
    new_lr = max(lr · factor, min_lr)

The new value is applied only if |lr - new_lr| > eps. Either way the
bad-epoch count resets and cooldown begins.

Resumption:
-----------
The state depends on the whole metric history, so it cannot be rebuilt
from a step offset; replay the metrics instead.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from ..core.base import LRScheduler, coerce_enum

if TYPE_CHECKING:
    from ..utils.logging import ScheduleLogger


class PlateauMode(Enum):
    """Direction of improvement for the monitored metric."""
    MIN = 'min'
    MAX = 'max'


class ThresholdMode(Enum):
    """How ``threshold`` is applied to the best value."""
    REL = 'rel'
    ABS = 'abs'


class ReduceLROnPlateau(LRScheduler):
    """
    Reduce the learning rate when a monitored metric plateaus.

    Parameters:
        lr: Initial learning rate
        mode: 'min' (lower is better) or 'max' (default: 'min')
        factor: Multiplier applied on reduction (default: 0.1)
        patience: Bad epochs tolerated before reducing (default: 10)
        threshold: Improvement margin (default: 1e-4)
        threshold_mode: 'rel' or 'abs' (default: 'rel')
        cooldown: Steps to wait after a reduction (default: 0)
        min_lr: Lower bound on the learning rate (default: 0.0)
        eps: Minimal change worth applying (default: 1e-8)
        verbose: Print a message on each reduction (default: False)
        logger: Optional ScheduleLogger receiving reduction messages

    Unlike the step-indexed schedules there is no ``init_step``: the state
    depends on the metric history, so it cannot be rebuilt from a counter.

    Example:
        >>> scheduler = ReduceLROnPlateau(0.1, factor=0.5, patience=2,
        ...                               threshold=0.001, threshold_mode='abs')
        >>> for loss in [1.0, 0.8, 0.85, 0.82]:
        ...     scheduler.step(loss)
        >>> scheduler.get_lr()  # 0.05
    """

    def __init__(
        self,
        lr: float,
        mode: Union[str, PlateauMode] = PlateauMode.MIN,
        factor: float = 0.1,
        patience: int = 10,
        threshold: float = 1e-4,
        threshold_mode: Union[str, ThresholdMode] = ThresholdMode.REL,
        cooldown: int = 0,
        min_lr: float = 0.0,
        eps: float = 1e-8,
        verbose: bool = False,
        logger: Optional['ScheduleLogger'] = None
    ):
        self.mode = coerce_enum(PlateauMode, mode, 'mode')
        self.factor = float(factor)
        self.patience = int(patience)
        self.threshold = float(threshold)
        self.threshold_mode = coerce_enum(
            ThresholdMode, threshold_mode, 'threshold_mode'
        )
        self.cooldown = int(cooldown)
        self.min_lr = float(min_lr)
        self.eps = float(eps)
        self.verbose = verbose
        self.logger = logger

        self._lr = float(lr)
        self._step = 0
        self._best = float('inf') if self.mode is PlateauMode.MIN else float('-inf')
        self._num_bad_epochs = 0
        self._cooldown_counter = 0
        self._num_reductions = 0

    def is_better(self, current: float, best: float) -> bool:
        """Whether ``current`` improves on ``best`` beyond the threshold."""
        if self.threshold_mode is ThresholdMode.REL:
            if self.mode is PlateauMode.MIN:
                margin = best * (1.0 - self.threshold)
            else:
                margin = best * (1.0 + self.threshold)
        else:
            if self.mode is PlateauMode.MIN:
                margin = best - self.threshold
            else:
                margin = best + self.threshold

        if self.mode is PlateauMode.MIN:
            return current < margin
        return current > margin

    @property
    def in_cooldown(self) -> bool:
        return self._cooldown_counter > 0

    def _reduce_lr(self) -> None:
        old_lr = self._lr
        new_lr = max(old_lr * self.factor, self.min_lr)

        if abs(old_lr - new_lr) > self.eps:
            self._lr = new_lr
            self._num_reductions += 1
            self._report(f"📉 Step {self._step}: reducing LR {old_lr:.2e} → {new_lr:.2e}")

        # Counters reset even when eps suppressed the change
        self._cooldown_counter = self.cooldown
        self._num_bad_epochs = 0

    def _report(self, message: str) -> None:
        if self.logger is not None:
            self.logger.info(message)
        elif self.verbose:
            print(message)

    def step(self, metric: Optional[float] = None) -> None:
        """
        Record ``metric`` for the step that just ran.

        Args:
            metric: Observed loss/metric (required)

        Raises:
            ValueError: If ``metric`` is None
        """
        if metric is None:
            raise ValueError("ReduceLROnPlateau.step() requires a metric value")
        current = float(metric)
        self._step += 1

        if self.in_cooldown:
            self._cooldown_counter -= 1
            if self.is_better(current, self._best):
                self._best = current
            return

        if self.is_better(current, self._best):
            self._best = current
            self._num_bad_epochs = 0
        else:
            self._num_bad_epochs += 1

        if self.patience == 0:
            triggered = self._num_bad_epochs > 0
        else:
            triggered = self._num_bad_epochs >= self.patience

        if triggered:
            self._reduce_lr()

    def get_lr(self, metric: Optional[float] = None) -> float:
        return self._lr

    @property
    def last_step(self) -> int:
        return self._step

    @property
    def best(self) -> float:
        """Best metric value seen so far."""
        return self._best

    @property
    def num_bad_epochs(self) -> int:
        return self._num_bad_epochs

    @property
    def cooldown_counter(self) -> int:
        return self._cooldown_counter

    @property
    def num_reductions(self) -> int:
        """Number of reductions that actually changed the rate."""
        return self._num_reductions

    def _repr_fields(self) -> Dict[str, Any]:
        return {
            'lr': self._lr,
            'mode': self.mode.value,
            'factor': self.factor,
            'patience': self.patience,
            'threshold': self.threshold,
            'threshold_mode': self.threshold_mode.value,
            'cooldown': self.cooldown,
            'min_lr': self.min_lr,
            'eps': self.eps,
        }
