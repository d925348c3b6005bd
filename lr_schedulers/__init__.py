"""
lr-schedulers
=============

Learning rate schedules for optimization loops.

Each schedule is a small stateful object with two operations:
``get_lr()`` returns the rate for the upcoming step without changing
anything, and ``step(metric)`` advances the schedule by one step after
the step has run.

Quick Start:
------------
    from lr_schedulers import CosineAnnealingWarmRestarts

    scheduler = CosineAnnealingWarmRestarts(1e-3, 1e-5, t_0=10, t_mult=2)

    for step, batch in enumerate(train_loader):
        for group in optimizer.param_groups:
            group['lr'] = scheduler.get_lr()
        loss = train_step(model, batch)
        scheduler.step(loss)

Resuming:
---------
Every step-indexed schedule accepts ``init_step`` to rebuild its state
at step k without replaying k steps:

    scheduler = StepLR(0.1, step_size=30, init_step=start_epoch)

ReduceLROnPlateau depends on the metric history and has no such offset.

Components:
-----------
- ConstantLR, LinearLR: factor warmups
- ExponentialLR, StepLR, MultiStepLR, PolynomialLR, MultiplicativeLR: decays
- CosineAnnealingLR, CosineAnnealingWarmRestarts: cosine annealing
- CyclicLR, OneCycleLR: cyclical policies
- ReduceLROnPlateau: metric-driven reduction
- SchedulerConfig, build_scheduler, get_preset: declarative construction
- ScheduleLogger, lr_trace: logging and numpy export

Author: lr-schedulers contributors
License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "lr-schedulers contributors"

# Core API
from .core import (
    LRScheduler,
    SchedulerConfig,
    SCHEDULERS,
    PRESETS,
    build_scheduler,
    get_preset,
)

# Schedules
from .schedulers import (
    ConstantLR,
    ExponentialLR,
    StepLR,
    MultiStepLR,
    LinearLR,
    PolynomialLR,
    MultiplicativeLR,
    CosineAnnealingLR,
    CosineAnnealingWarmRestarts,
    CyclicLR,
    CyclicMode,
    ScaleMode,
    OneCycleLR,
    AnnealStrategy,
    ReduceLROnPlateau,
    PlateauMode,
    ThresholdMode,
)

# Utilities
from .utils import ScheduleLogger, format_lr, lr_trace

__all__ = [
    # Version
    '__version__',

    # Core API
    'LRScheduler',
    'SchedulerConfig',
    'SCHEDULERS',
    'PRESETS',
    'build_scheduler',
    'get_preset',

    # Schedules
    'ConstantLR',
    'ExponentialLR',
    'StepLR',
    'MultiStepLR',
    'LinearLR',
    'PolynomialLR',
    'MultiplicativeLR',
    'CosineAnnealingLR',
    'CosineAnnealingWarmRestarts',
    'CyclicLR',
    'OneCycleLR',
    'ReduceLROnPlateau',

    # Options
    'CyclicMode',
    'ScaleMode',
    'AnnealStrategy',
    'PlateauMode',
    'ThresholdMode',

    # Utilities
    'ScheduleLogger',
    'format_lr',
    'lr_trace',
]
