"""
lr-schedulers - Configuration
=============================

Declarative construction of schedules.

A training script usually wants to pick its schedule from a config file
or a command-line flag rather than hard-coding a class. This module
provides:

- SCHEDULERS: canonical name → schedule class
- build_scheduler(): construct a schedule by name
- SchedulerConfig: serializable (name, params) pair
- PRESETS / get_preset(): ready-made configurations

Example:
--------
    from lr_schedulers import SchedulerConfig, get_preset

    config = SchedulerConfig('cosine', {'eta_0': 1e-3, 't_max': 100})
    scheduler = config.build()

    # Or start from a preset and override a few values
    scheduler = get_preset('one_cycle', max_lr=3e-3, total_steps=5000).build()

Hyperparameters are passed through to the schedule constructors
unchanged; no validation is performed beyond the constructors' own
numeric guards.

Author: lr-schedulers contributors
License: MIT
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Type

from .base import LRScheduler
from ..schedulers import (
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
    OneCycleLR,
    ReduceLROnPlateau,
)


SCHEDULERS: Dict[str, Type[LRScheduler]] = {
    'constant': ConstantLR,
    'exponential': ExponentialLR,
    'step': StepLR,
    'multistep': MultiStepLR,
    'linear': LinearLR,
    'polynomial': PolynomialLR,
    'multiplicative': MultiplicativeLR,
    'cosine': CosineAnnealingLR,
    'cosine_warm_restarts': CosineAnnealingWarmRestarts,
    'cyclic': CyclicLR,
    'onecycle': OneCycleLR,
    'plateau': ReduceLROnPlateau,
}


def build_scheduler(name: str, **params: Any) -> LRScheduler:
    """
    Construct a schedule by canonical name.

    Args:
        name: Key of SCHEDULERS (case-insensitive)
        **params: Constructor arguments of the schedule

    Returns:
        LRScheduler instance

    Raises:
        ValueError: If ``name`` is not a known schedule
    """
    key = name.lower()
    if key not in SCHEDULERS:
        available = ', '.join(SCHEDULERS.keys())
        raise ValueError(f"Unknown scheduler '{name}'. Available: {available}")
    return SCHEDULERS[key](**params)


@dataclass
class SchedulerConfig:
    """
    Serializable description of a schedule.

    Attributes:
        name: Canonical schedule name (see SCHEDULERS)
        params: Constructor arguments

    Example:
        >>> config = SchedulerConfig('step', {'base_lr': 0.1, 'step_size': 30})
        >>> scheduler = config.build()
        >>> SchedulerConfig.from_dict(config.to_dict()) == config
        True
    """

    name: str = 'constant'
    params: Dict[str, Any] = field(default_factory=dict)

    def build(self) -> LRScheduler:
        """Construct the configured schedule."""
        return build_scheduler(self.name, **self.params)

    def with_overrides(self, **overrides: Any) -> 'SchedulerConfig':
        """Return a copy with some parameters replaced."""
        return SchedulerConfig(self.name, {**self.params, **overrides})

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {'name': self.name, 'params': dict(self.params)}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SchedulerConfig':
        """Create configuration from dictionary."""
        return cls(name=d['name'], params=dict(d.get('params', {})))

    # ========================
    # Presets
    # ========================

    @classmethod
    def step_decay(cls) -> 'SchedulerConfig':
        """Classic ResNet-style decay: ×0.1 every 30 epochs."""
        return cls('step', {'base_lr': 0.1, 'step_size': 30, 'gamma': 0.1})

    @classmethod
    def cosine(cls) -> 'SchedulerConfig':
        """Single cosine half-period from 1e-3 down to 0 over 100 steps."""
        return cls('cosine', {'eta_0': 1e-3, 'eta_1': 0.0, 't_max': 100})

    @classmethod
    def warm_restarts(cls) -> 'SchedulerConfig':
        """SGDR with doubling cycle length."""
        return cls('cosine_warm_restarts', {
            'eta_0': 1e-3,
            'eta_1': 1e-5,
            't_0': 10,
            't_mult': 2,
        })

    @classmethod
    def one_cycle(cls) -> 'SchedulerConfig':
        """1cycle over 1000 steps with cosine annealing."""
        return cls('onecycle', {
            'max_lr': 1e-2,
            'total_steps': 1000,
            'pct_start': 0.3,
            'anneal_strategy': 'cos',
        })

    @classmethod
    def plateau(cls) -> 'SchedulerConfig':
        """Halve the rate after 5 epochs without a 0.1% improvement."""
        return cls('plateau', {
            'lr': 1e-3,
            'mode': 'min',
            'factor': 0.5,
            'patience': 5,
            'threshold': 1e-3,
            'threshold_mode': 'rel',
        })


# ========================
# Preset Configurations
# ========================

PRESETS: Dict[str, Callable[[], SchedulerConfig]] = {
    'step_decay': SchedulerConfig.step_decay,
    'cosine': SchedulerConfig.cosine,
    'warm_restarts': SchedulerConfig.warm_restarts,
    'one_cycle': SchedulerConfig.one_cycle,
    'plateau': SchedulerConfig.plateau,
}


def get_preset(name: str, **overrides: Any) -> SchedulerConfig:
    """
    Get a preset configuration by name.

    Available presets:
    - 'step_decay': StepLR, ×0.1 every 30 steps
    - 'cosine': CosineAnnealingLR over 100 steps
    - 'warm_restarts': CosineAnnealingWarmRestarts, t_0=10, t_mult=2
    - 'one_cycle': OneCycleLR over 1000 steps
    - 'plateau': ReduceLROnPlateau, halving after 5 bad epochs

    Args:
        name: Preset name
        **overrides: Parameters replacing the preset's values

    Returns:
        SchedulerConfig instance

    Raises:
        ValueError: If preset name is not recognized
    """
    if name not in PRESETS:
        available = ', '.join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")
    config = PRESETS[name]()
    if overrides:
        config = config.with_overrides(**overrides)
    return config
