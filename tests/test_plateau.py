"""
ReduceLROnPlateau tests.

Run with: pytest tests/test_plateau.py -v
"""

from __future__ import annotations

import pytest

from lr_schedulers import (
    ReduceLROnPlateau,
    PlateauMode,
    ThresholdMode,
    ScheduleLogger,
)


def make(**kwargs) -> ReduceLROnPlateau:
    params = dict(lr=0.1, mode='min', factor=0.5, patience=1, threshold=0.0,
                  threshold_mode='abs', cooldown=0, min_lr=0.0, eps=1e-8)
    params.update(kwargs)
    return ReduceLROnPlateau(**params)


class TestPlateauBasics:
    """Improvement tracking and reduction trigger."""

    def test_min_mode(self):
        """Second consecutive bad epoch reduces the rate."""
        scheduler = make(patience=2, threshold=0.001)

        scheduler.step(1.0)
        assert scheduler.get_lr() == pytest.approx(0.1)
        assert scheduler.best == pytest.approx(1.0)

        scheduler.step(0.8)
        assert scheduler.best == pytest.approx(0.8)

        scheduler.step(0.85)
        assert scheduler.num_bad_epochs == 1
        assert scheduler.get_lr() == pytest.approx(0.1)

        scheduler.step(0.82)
        assert scheduler.get_lr() == pytest.approx(0.05)
        assert scheduler.num_bad_epochs == 0

        scheduler.step(0.81)
        assert scheduler.get_lr() == pytest.approx(0.05)
        assert scheduler.num_bad_epochs == 1

    def test_max_mode(self):
        """Higher is better in max mode."""
        scheduler = make(mode=PlateauMode.MAX, factor=0.1, patience=3,
                         threshold=0.01, threshold_mode=ThresholdMode.REL)
        scheduler.step(0.8)
        scheduler.step(0.85)
        assert scheduler.num_bad_epochs == 0

        scheduler.step(0.84)
        scheduler.step(0.83)
        assert scheduler.num_bad_epochs == 2
        assert scheduler.get_lr() == pytest.approx(0.1)

        scheduler.step(0.82)
        assert scheduler.get_lr() == pytest.approx(0.01)

    def test_tie_is_not_improvement(self):
        """Matching the best value counts as a bad epoch."""
        scheduler = make(patience=0)
        scheduler.step(1.0)
        scheduler.step(1.0)
        assert scheduler.get_lr() == pytest.approx(0.05)

    def test_patience_zero(self):
        """patience=0 reduces on every bad epoch."""
        scheduler = make(patience=0)
        scheduler.step(1.0)
        scheduler.step(1.1)
        assert scheduler.get_lr() == pytest.approx(0.05)
        scheduler.step(1.2)
        assert scheduler.get_lr() == pytest.approx(0.025)

    def test_improvement_resets_bad_epochs(self):
        """An improving epoch clears the bad-epoch count."""
        scheduler = make(patience=3)
        scheduler.step(1.0)
        scheduler.step(1.1)
        scheduler.step(1.1)
        assert scheduler.num_bad_epochs == 2
        scheduler.step(0.9)
        assert scheduler.num_bad_epochs == 0
        assert scheduler.get_lr() == pytest.approx(0.1)

    def test_get_lr_ignores_metric(self):
        """The argument to get_lr has no effect."""
        scheduler = make()
        scheduler.step(1.0)
        assert scheduler.get_lr(100.0) == scheduler.get_lr(-100.0) == 0.1

    def test_step_requires_metric(self):
        """step() without a metric raises ValueError."""
        scheduler = make()
        with pytest.raises(ValueError):
            scheduler.step()


class TestPlateauThresholds:
    """Relative and absolute improvement margins."""

    @pytest.mark.parametrize("threshold_mode", ['rel', 'abs'])
    def test_within_margin_is_bad(self, threshold_mode):
        """0.995 does not beat 1.0 by 0.01."""
        scheduler = make(threshold=0.01, threshold_mode=threshold_mode)
        scheduler.step(1.0)
        scheduler.step(0.995)
        assert scheduler.get_lr() == pytest.approx(0.05)

    @pytest.mark.parametrize("threshold_mode", ['rel', 'abs'])
    def test_beyond_margin_is_good(self, threshold_mode):
        """0.98 beats 1.0 by more than 0.01."""
        scheduler = make(threshold=0.01, threshold_mode=threshold_mode)
        scheduler.step(1.0)
        scheduler.step(0.98)
        assert scheduler.get_lr() == pytest.approx(0.1)
        assert scheduler.best == pytest.approx(0.98)

    def test_relative_scales_with_best(self):
        """Relative margin grows with the magnitude of best."""
        rel = make(threshold=0.01, threshold_mode='rel')
        abs_ = make(threshold=0.01, threshold_mode='abs')
        for scheduler in (rel, abs_):
            scheduler.step(100.0)
            scheduler.step(99.5)
        # 99.5 > 100 · 0.99 but 99.5 < 100 - 0.01
        assert rel.get_lr() == pytest.approx(0.05)
        assert abs_.get_lr() == pytest.approx(0.1)

    def test_unknown_modes(self):
        """Unknown option strings raise ValueError."""
        with pytest.raises(ValueError, match="Unknown mode"):
            make(mode='lowest')
        with pytest.raises(ValueError, match="Unknown threshold_mode"):
            make(threshold_mode='percent')


class TestPlateauCooldown:
    """Cooldown, min_lr and eps handling."""

    def test_cooldown_suspends_counting(self):
        """No bad epochs are counted while cooling down."""
        scheduler = make(cooldown=2)
        scheduler.step(1.0)
        scheduler.step(1.1)
        assert scheduler.get_lr() == pytest.approx(0.05)
        assert scheduler.in_cooldown

        scheduler.step(1.2)
        scheduler.step(1.3)
        assert scheduler.num_bad_epochs == 0
        assert not scheduler.in_cooldown
        assert scheduler.get_lr() == pytest.approx(0.05)

        scheduler.step(1.4)
        assert scheduler.get_lr() == pytest.approx(0.025)

    def test_best_tracked_during_cooldown(self):
        """Improvements during cooldown still update best."""
        scheduler = make(cooldown=3)
        scheduler.step(1.0)
        scheduler.step(1.1)
        scheduler.step(0.5)
        assert scheduler.best == pytest.approx(0.5)
        assert scheduler.cooldown_counter == 2

    def test_no_cooldown(self):
        """cooldown=0 allows back-to-back reductions."""
        scheduler = make()
        scheduler.step(1.0)
        scheduler.step(1.1)
        scheduler.step(1.2)
        assert scheduler.get_lr() == pytest.approx(0.025)

    def test_min_lr_floor(self):
        """The rate never drops below min_lr."""
        scheduler = make(min_lr=0.03)
        scheduler.step(1.0)
        scheduler.step(1.1)
        assert scheduler.get_lr() == pytest.approx(0.05)
        scheduler.step(1.2)
        assert scheduler.get_lr() == pytest.approx(0.03)
        scheduler.step(1.3)
        assert scheduler.get_lr() == pytest.approx(0.03)

    def test_eps_threshold(self):
        """A change below eps is skipped but still enters cooldown."""
        scheduler = make(eps=0.1, cooldown=3)
        scheduler.step(1.0)
        scheduler.step(1.1)

        assert scheduler.get_lr() == 0.1
        assert scheduler.num_reductions == 0
        assert scheduler.num_bad_epochs == 0
        assert scheduler.cooldown_counter == 3

    def test_eps_at_min_lr(self):
        """At min_lr the reduction is a no-op but counters reset."""
        scheduler = make(lr=0.1, min_lr=0.1, cooldown=1)
        scheduler.step(1.0)
        scheduler.step(1.1)
        assert scheduler.get_lr() == 0.1
        assert scheduler.in_cooldown


class TestPlateauReporting:
    """Reduction messages."""

    def test_verbose_prints(self, capsys):
        """verbose=True prints each applied reduction."""
        scheduler = make(verbose=True)
        scheduler.step(1.0)
        scheduler.step(1.1)
        out = capsys.readouterr().out
        assert "reducing LR" in out
        assert "5.00e-02" in out

    def test_silent_by_default(self, capsys):
        """Nothing is printed without verbose or a logger."""
        scheduler = make()
        scheduler.step(1.0)
        scheduler.step(1.1)
        assert capsys.readouterr().out == ""

    def test_logger_receives_reductions(self, tmp_path):
        """Reductions go to the attached logger."""
        logger = ScheduleLogger("plateau", log_dir=str(tmp_path), verbose=False,
                                log_to_file=True, timestamp=False)
        scheduler = make(logger=logger)
        scheduler.step(1.0)
        scheduler.step(1.1)
        logger.finalize()

        text = (tmp_path / "plateau.log").read_text(encoding="utf-8")
        assert "INFO" in text
        assert "reducing LR" in text
