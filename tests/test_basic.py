"""
Basic tests for lr-schedulers.

Run with: pytest tests/test_basic.py -v
"""

import pytest


class TestImports:
    """Test that all modules import correctly."""

    def test_core_imports(self):
        """Test core module imports."""
        from lr_schedulers import (
            LRScheduler,
            SchedulerConfig,
            build_scheduler,
            get_preset,
        )
        assert LRScheduler is not None
        assert SchedulerConfig is not None
        assert build_scheduler is not None
        assert get_preset is not None

    def test_scheduler_imports(self):
        """Test schedule imports."""
        from lr_schedulers import (
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
        for cls in (
            ConstantLR, ExponentialLR, StepLR, MultiStepLR, LinearLR,
            PolynomialLR, MultiplicativeLR, CosineAnnealingLR,
            CosineAnnealingWarmRestarts, CyclicLR, OneCycleLR,
            ReduceLROnPlateau,
        ):
            assert cls is not None

    def test_utils_imports(self):
        """Test utility imports."""
        from lr_schedulers import ScheduleLogger, lr_trace
        assert ScheduleLogger is not None
        assert lr_trace is not None

    def test_all_schedulers_implement_interface(self):
        """Every registered schedule is an LRScheduler."""
        from lr_schedulers import LRScheduler, SCHEDULERS

        assert len(SCHEDULERS) == 12
        for cls in SCHEDULERS.values():
            assert issubclass(cls, LRScheduler)

    def test_interface_is_abstract(self):
        """LRScheduler cannot be instantiated directly."""
        from lr_schedulers import LRScheduler

        with pytest.raises(TypeError):
            LRScheduler()


class TestConfigs:
    """Test configuration layer."""

    def test_build_scheduler(self):
        """Test construction by name."""
        from lr_schedulers import build_scheduler, StepLR

        scheduler = build_scheduler('step', base_lr=1.0, step_size=3, gamma=0.1)
        assert isinstance(scheduler, StepLR)
        assert scheduler.get_lr() == pytest.approx(1.0)

    def test_build_scheduler_case_insensitive(self):
        """Names are matched case-insensitively."""
        from lr_schedulers import build_scheduler, OneCycleLR

        scheduler = build_scheduler('OneCycle', max_lr=0.1, total_steps=10)
        assert isinstance(scheduler, OneCycleLR)

    def test_unknown_scheduler(self):
        """Unknown names raise ValueError listing the options."""
        from lr_schedulers import build_scheduler

        with pytest.raises(ValueError, match="Unknown scheduler 'noam'"):
            build_scheduler('noam', base_lr=1.0)

    def test_config_round_trip(self):
        """to_dict/from_dict preserves the configuration."""
        from lr_schedulers import SchedulerConfig

        config = SchedulerConfig('multistep', {
            'base_lr': 0.1,
            'milestones': [30, 10],
            'gamma': 0.5,
        })
        restored = SchedulerConfig.from_dict(config.to_dict())

        assert restored == config
        assert restored.build().milestones == [10, 30]

    def test_with_overrides(self):
        """Overrides replace only the named params."""
        from lr_schedulers import SchedulerConfig

        config = SchedulerConfig.step_decay().with_overrides(gamma=0.5)
        assert config.params['gamma'] == 0.5
        assert config.params['step_size'] == 30

    @pytest.mark.parametrize(
        "name", ['step_decay', 'cosine', 'warm_restarts', 'one_cycle', 'plateau']
    )
    def test_presets_build(self, name):
        """Every preset builds a working schedule."""
        from lr_schedulers import get_preset

        scheduler = get_preset(name).build()
        lr = scheduler.get_lr()
        assert isinstance(lr, float)
        assert lr > 0

    def test_get_preset_overrides(self):
        """Preset values can be overridden at lookup time."""
        from lr_schedulers import get_preset

        scheduler = get_preset('one_cycle', max_lr=1.0, total_steps=10).build()
        assert scheduler.total_steps == 10
        assert scheduler.max_lr == 1.0

    def test_unknown_preset(self):
        """Unknown preset names raise ValueError."""
        from lr_schedulers import get_preset

        with pytest.raises(ValueError, match="Unknown preset"):
            get_preset('does_not_exist')


class TestRepr:
    """Test schedule descriptions."""

    def test_repr_names_hyperparameters(self):
        """repr shows class name and hyperparameters."""
        from lr_schedulers import StepLR

        text = repr(StepLR(0.1, step_size=30))
        assert text.startswith("StepLR(")
        assert "step_size=30" in text

    def test_describe(self):
        """describe() returns a loggable dict."""
        from lr_schedulers import CyclicLR

        info = CyclicLR(0.01, 0.1, step_size_up=4, mode='triangular2').describe()
        assert info['scheduler'] == 'CyclicLR'
        assert info['mode'] == 'triangular2'
        assert info['step_size_down'] == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
