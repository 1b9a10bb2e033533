"""
Tests for forward wave projection.
"""
import pytest

from wavecore.waves.projection import project_waves, round2


class TestRound2:
    """Test round2 half-up rounding."""

    def test_half_rounds_up(self):
        assert round2(1.005 + 1e-9) == 1.01
        assert round2(2.675 + 1e-9) == 2.68

    def test_negative_half_rounds_towards_positive(self):
        assert round2(-1.125) == -1.12

    def test_plain_values(self):
        assert round2(119.99924) == 120.0
        assert round2(-20.652173) == -20.65


class TestMotiveProjection:
    """Test projections inside the first motive cycle."""

    @pytest.fixture
    def projections(self):
        return project_waves(100.0, 10.0, 0, True, 100.0, num_steps=8)

    def test_all_phases_named(self, projections):
        assert [p.step for p in projections] == list(range(1, 9))
        assert [p.label for p in projections] == ['2a', '2b', '2', '3', '4a', '4b', '4', '5']

    def test_targets(self, projections):
        targets = [p.target for p in projections]
        assert targets == pytest.approx([106.18, 108.09, 103.82, 120.0, 116.18, 118.09, 113.82, 123.82])

    def test_minor_points(self, projections):
        minor = [p.wave for p in projections if not p.is_major]
        assert minor == ['Wave 2a', 'Wave 2b', 'Wave 4a', 'Wave 4b']

    def test_pct_change(self, projections):
        assert projections[3].pct_change == pytest.approx(20.0)
        assert projections[2].pct_change == pytest.approx(3.82)

    def test_fib_ratio_strings(self, projections):
        assert projections[0].fib_ratio == '0.382'
        assert projections[3].fib_ratio == '1.618'


class TestCorrectiveProjection:
    """Test projections after the first cycle completes."""

    @pytest.fixture
    def projections(self):
        return project_waves(100.0, 10.0, 8, True, 100.0, num_steps=9)

    def test_unnamed_points_dropped(self, projections):
        assert [p.step for p in projections] == [1, 4, 5, 8, 9]
        assert [p.wave for p in projections] == ['WAVE A', 'WAVE B', 'WAVE C', 'WAVE X', 'WAVE Y']
        assert all(p.is_major for p in projections)

    def test_targets_measured_from_cycle_end(self, projections):
        targets = [p.target for p in projections]
        assert targets == pytest.approx([113.82, 120.0, 103.82, 110.0, 100.0])

    def test_wave_a_fib(self, projections):
        assert projections[0].fib_ratio == '1.000'
        assert projections[0].label == 'A'

    def test_next_motive_cycle_restarts_at_origin(self):
        projections = project_waves(100.0, 10.0, 8, True, 100.0, num_steps=10)
        assert projections[-1].step == 10
        assert projections[-1].wave == 'WAVE 1'
        assert projections[-1].target == pytest.approx(110.0)


class TestBearProjection:
    """Test bearish projections."""

    def test_mirrored_targets(self):
        projections = project_waves(100.0, 10.0, 0, False, 100.0, num_steps=4)
        targets = [p.target for p in projections]
        assert targets == pytest.approx([93.82, 91.91, 96.18, 80.0])

    def test_targets_clamped_above_zero(self):
        projections = project_waves(5.0, 10.0, 0, False, 5.0, num_steps=12)

        assert projections[0].target == 0.01
        assert all(p.target >= 0.01 for p in projections)


class TestProjectionEdges:
    """Test degenerate inputs."""

    def test_zero_current_price_gives_zero_pct(self):
        projections = project_waves(100.0, 10.0, 0, True, 0.0, num_steps=3)
        assert all(p.pct_change == 0 for p in projections)

    def test_step_count(self):
        # Steps 10 and 11 fall on unnamed corrective points
        projections = project_waves(100.0, 10.0, 0, True, 100.0)
        assert len(projections) == 10
        assert [p.step for p in projections] == list(range(1, 10)) + [12]
        assert project_waves(100.0, 10.0, 0, True, 100.0, num_steps=0) == []

    @pytest.mark.parametrize("sim_index", [0, 3, 4, 7, 8])
    @pytest.mark.parametrize("num_steps", [1, 5, 12, 30])
    def test_never_more_than_num_steps(self, sim_index, num_steps):
        projections = project_waves(100.0, 10.0, sim_index, True, 100.0, num_steps=num_steps)

        assert len(projections) <= num_steps
        assert all(1 <= p.step <= num_steps for p in projections)

    def test_deterministic(self):
        a = project_waves(123.4, 7.7, 4, True, 130.0)
        b = project_waves(123.4, 7.7, 4, True, 130.0)
        assert a == b
