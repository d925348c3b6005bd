"""
lr-schedulers - Utilities
=========================

Logging and tracing helpers.
"""

from .logging import ScheduleLogger, format_lr
from .trace import lr_trace

__all__ = [
    'ScheduleLogger',
    'format_lr',
    'lr_trace',
]
