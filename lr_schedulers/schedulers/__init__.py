"""
lr-schedulers - Schedules
=========================

Learning rate scheduling policies.

Each schedule is an independent LRScheduler driven by an external
training loop through ``get_lr()`` and ``step(metric)``.
"""

from .constant import ConstantLR
from .exponential import ExponentialLR
from .step import StepLR, MultiStepLR
from .linear import LinearLR
from .polynomial import PolynomialLR
from .multiplicative import MultiplicativeLR
from .cosine import CosineAnnealingLR, CosineAnnealingWarmRestarts
from .cyclic import CyclicLR, CyclicMode, ScaleMode
from .onecycle import OneCycleLR, AnnealStrategy
from .plateau import ReduceLROnPlateau, PlateauMode, ThresholdMode

__all__ = [
    # Step-indexed schedules
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

    # Metric-driven schedule
    'ReduceLROnPlateau',

    # Options
    'CyclicMode',
    'ScaleMode',
    'AnnealStrategy',
    'PlateauMode',
    'ThresholdMode',
]
