"""
Schedule Tracing
================

Sample a schedule into a numpy array.

``lr_trace`` plays the part of the training loop: for every step it
reads the rate with ``get_lr()`` and then advances with ``step()``,
passing the metric for that step when one is supplied. The result is
the sequence of rates the loop would have used, handy for plotting or
for comparing schedules side by side.

    rates = lr_trace(CosineAnnealingLR(1e-3, t_max=50), 200)
    plt.plot(rates)

Note that tracing advances the schedule it is given.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

from ..core.base import LRScheduler

if TYPE_CHECKING:
    from .logging import ScheduleLogger


def lr_trace(
    scheduler: LRScheduler,
    num_steps: int,
    metrics: Optional[Sequence[float]] = None,
    logger: Optional['ScheduleLogger'] = None
) -> np.ndarray:
    """
    Drive ``scheduler`` for ``num_steps`` steps and record its rates.

    Args:
        scheduler: Schedule to advance
        num_steps: Number of get_lr/step rounds
        metrics: Metric passed to ``step`` at each index; required by
                 ReduceLROnPlateau, ignored by the other schedules
        logger: Optional ScheduleLogger receiving one row per step

    Returns:
        float64 array of shape (num_steps,) where entry i is the rate in
        use for step i

    Raises:
        ValueError: If ``metrics`` is shorter than ``num_steps``
    """
    num_steps = int(num_steps)
    if metrics is not None and len(metrics) < num_steps:
        raise ValueError(
            f"Got {len(metrics)} metrics for {num_steps} steps"
        )

    rates = np.empty(max(num_steps, 0), dtype=np.float64)
    for i in range(num_steps):
        metric = None if metrics is None else float(metrics[i])
        rates[i] = scheduler.get_lr()
        if logger is not None:
            logger.log_lr(step=i, lr=float(rates[i]), metric=metric)
        scheduler.step(metric)

    return rates
