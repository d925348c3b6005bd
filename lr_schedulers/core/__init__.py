"""
lr-schedulers - Core
====================

Scheduler interface and configuration layer.
"""

from .base import LRScheduler, coerce_enum
from .config import (
    SchedulerConfig,
    SCHEDULERS,
    PRESETS,
    build_scheduler,
    get_preset,
)

__all__ = [
    # Interface
    'LRScheduler',
    'coerce_enum',

    # Configuration
    'SchedulerConfig',
    'SCHEDULERS',
    'PRESETS',
    'build_scheduler',
    'get_preset',
]
