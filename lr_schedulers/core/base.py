"""
Scheduler Interface
===================

Common contract shared by every learning rate schedule.

A schedule is a small stateful object driven by an external training
loop. The loop asks for the rate of the step it is about to run, trains,
computes a loss or metric, and then advances the schedule:

    for batch in loader:
        lr = scheduler.get_lr()
        set_lr(optimizer, lr)
        loss = train_step(batch)
        scheduler.step(loss)

The ordering (get before step) is part of the contract: ``get_lr()``
always returns the rate for the step that has not run yet.

Invariants:
-----------
- ``get_lr()`` never mutates state; repeated calls return the same value.
- ``step()`` advances the internal counter by exactly one.
- The ``metric`` argument is ignored by every schedule except
  ReduceLROnPlateau, which consumes it in ``step()``.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class LRScheduler(ABC):
    """
    Abstract learning rate schedule.

    Subclasses implement ``step`` and ``get_lr``. The base class carries
    no state of its own.
    """

    @abstractmethod
    def step(self, metric: Optional[float] = None) -> None:
        """
        Advance the schedule by one step.

        Args:
            metric: Observed loss/metric of the step that just ran.
                    Only used by metric-driven schedules.
        """

    @abstractmethod
    def get_lr(self, metric: Optional[float] = None) -> float:
        """
        Return the learning rate for the upcoming step.

        Args:
            metric: Accepted for a uniform signature; unused.
        """

    def _repr_fields(self) -> Dict[str, Any]:
        """Hyperparameters shown in ``repr`` and in logged configs."""
        return {}

    def describe(self) -> Dict[str, Any]:
        """Return the schedule name and its hyperparameters."""
        return {'scheduler': type(self).__name__, **self._repr_fields()}

    def __repr__(self) -> str:
        fields = ', '.join(f"{k}={v!r}" for k, v in self._repr_fields().items())
        return f"{type(self).__name__}({fields})"


def coerce_enum(enum_cls, value, name: str):
    """
    Convert a string option to its enum member.

    Args:
        enum_cls: Enum class whose values are lowercase strings
        value: Enum member or its string value (case-insensitive)
        name: Option name used in the error message

    Raises:
        ValueError: If ``value`` names no member of ``enum_cls``
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        available = ', '.join(repr(m.value) for m in enum_cls)
        raise ValueError(
            f"Unknown {name} {value!r}. Available: {available}"
        ) from None
