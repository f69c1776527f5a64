"""Unit tests for GoalAdjustmentService and the safe deficit tiers."""

import pytest

from domain.nutrition_target.calculation.goal_adjustment_service import (
    GoalAdjustmentService,
    max_safe_deficit,
)
from domain.nutrition_target.core.value_objects import (
    TDEE,
    ActivityLevel,
    GoalPace,
    GoalProfile,
    Sex,
    TargetWarning,
    WeightGoal,
)


def _tdee(value: float) -> TDEE:
    return TDEE(value=value, activity_level=ActivityLevel.MODERATE)


def _goal(weight_goal, pace=GoalPace.MODERATE, target=70.0) -> GoalProfile:
    return GoalProfile(weight_goal=weight_goal, goal_pace=pace, target_weight_kg=target)


class TestMaxSafeDeficit:
    """Test tiered deficit caps by pounds left to lose."""

    @pytest.mark.parametrize(
        "lbs,expected",
        [
            (0.0, 350.0),
            (4.4, 350.0),
            (9.99, 350.0),
            (10.0, 500.0),
            (22.0462, 500.0),
            (24.99, 500.0),
            (25.0, 750.0),
            (44.0, 750.0),
        ],
    )
    def test_tiers(self, lbs, expected):
        """Test tier boundaries (<10, 10-25, >=25)."""
        assert max_safe_deficit(lbs) == expected

    def test_sign_is_ignored(self):
        """Test the absolute amount selects the tier."""
        assert max_safe_deficit(-30.0) == 750.0


class TestGoalAdjustmentService:
    """Test goal and pace driven calorie adjustment."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = GoalAdjustmentService()

    def test_canonical_lose_case(self):
        """Test female 70 kg -> 60 kg at moderate pace gives 1701 kcal."""
        # 10 kg = 22 lb -> cap 500, requested 500
        target = self.service.calculate(
            _tdee(2201.3875),
            _goal(WeightGoal.LOSE, GoalPace.MODERATE, 60.0),
            weight_difference_kg=10.0,
            sex=Sex.FEMALE,
        )

        assert target.daily_calories == 1701
        assert target.adjustment == -500.0
        assert target.warnings == ()

    @pytest.mark.parametrize("pace", list(GoalPace))
    def test_maintain_ignores_pace(self, pace):
        """Test maintain returns round(TDEE) for every pace."""
        target = self.service.calculate(
            _tdee(2759.4),
            GoalProfile(weight_goal=WeightGoal.MAINTAIN, goal_pace=pace),
            weight_difference_kg=0.0,
            sex=Sex.MALE,
        )

        assert target.daily_calories == 2759
        assert target.adjustment == 0.0

    def test_small_loss_caps_aggressive_at_350(self):
        """Test 2 kg (~4.4 lb) to lose caps a 750 request at 350."""
        target = self.service.calculate(
            _tdee(2500.0),
            _goal(WeightGoal.LOSE, GoalPace.AGGRESSIVE),
            weight_difference_kg=2.0,
            sex=Sex.MALE,
        )

        assert target.daily_calories == 2150
        assert target.requested_adjustment == -750.0
        assert target.adjustment == -350.0
        assert target.deficit_capped

    def test_medium_loss_caps_aggressive_at_500(self):
        """Test 7 kg (~15.4 lb) to lose caps a 750 request at 500."""
        target = self.service.calculate(
            _tdee(2500.0),
            _goal(WeightGoal.LOSE, GoalPace.AGGRESSIVE),
            weight_difference_kg=7.0,
            sex=Sex.MALE,
        )

        assert target.daily_calories == 2000
        assert TargetWarning.DEFICIT_CAPPED in target.warnings

    def test_large_loss_allows_aggressive(self):
        """Test 20 kg (~44 lb) to lose allows the full 750."""
        target = self.service.calculate(
            _tdee(2500.0),
            _goal(WeightGoal.LOSE, GoalPace.AGGRESSIVE),
            weight_difference_kg=20.0,
            sex=Sex.MALE,
        )

        assert target.daily_calories == 1750
        assert not target.deficit_capped

    def test_gradual_pace_below_cap_is_untouched(self):
        """Test a request under the cap is applied as is."""
        target = self.service.calculate(
            _tdee(2500.0),
            _goal(WeightGoal.LOSE, GoalPace.GRADUAL),
            weight_difference_kg=2.0,
            sex=Sex.MALE,
        )

        assert target.daily_calories == 2250
        assert target.warnings == ()

    @pytest.mark.parametrize(
        "pace,expected",
        [
            (GoalPace.GRADUAL, 2750),
            (GoalPace.MODERATE, 3000),
            (GoalPace.AGGRESSIVE, 3250),
        ],
    )
    def test_gain_applies_uncapped_surplus(self, pace, expected):
        """Test gain adds the pace surplus with no cap."""
        target = self.service.calculate(
            _tdee(2500.0),
            _goal(WeightGoal.GAIN, pace, target=85.0),
            weight_difference_kg=-2.0,
            sex=Sex.MALE,
        )

        assert target.daily_calories == expected

    @pytest.mark.parametrize("pace", list(GoalPace))
    def test_recomp_always_250_deficit(self, pace):
        """Test recomp ignores pace, even aggressive."""
        target = self.service.calculate(
            _tdee(2500.0),
            _goal(WeightGoal.RECOMP, pace, target=78.0),
            weight_difference_kg=2.0,
            sex=Sex.MALE,
        )

        assert target.daily_calories == 2250
        assert target.adjustment == -250.0
        assert target.requested_adjustment == -250.0

    def test_female_floor_is_1200(self):
        """Test female target is clamped to 1200 and flagged."""
        target = self.service.calculate(
            _tdee(1300.0),
            _goal(WeightGoal.LOSE, GoalPace.MODERATE, target=40.0),
            weight_difference_kg=20.0,
            sex=Sex.FEMALE,
        )

        assert target.daily_calories == 1200
        assert target.below_safe_minimum

    @pytest.mark.parametrize("sex", [Sex.MALE, Sex.OTHER])
    def test_male_and_other_floor_is_1500(self, sex):
        """Test male/other target is clamped to 1500 and flagged."""
        target = self.service.calculate(
            _tdee(1800.0),
            _goal(WeightGoal.LOSE, GoalPace.AGGRESSIVE, target=50.0),
            weight_difference_kg=20.0,
            sex=sex,
        )

        assert target.daily_calories == 1500
        assert TargetWarning.BELOW_SAFE_MINIMUM in target.warnings

    def test_floor_applies_to_maintain(self):
        """Test even maintain is lifted to the floor."""
        target = self.service.calculate(
            _tdee(1100.0),
            GoalProfile(weight_goal=WeightGoal.MAINTAIN),
            weight_difference_kg=0.0,
            sex=Sex.FEMALE,
        )

        assert target.daily_calories == 1200
        assert target.below_safe_minimum

    def test_floor_and_cap_both_reported(self):
        """Test capped deficit that still hits the floor carries both flags."""
        target = self.service.calculate(
            _tdee(1400.0),
            _goal(WeightGoal.LOSE, GoalPace.AGGRESSIVE),
            weight_difference_kg=2.0,
            sex=Sex.FEMALE,
        )

        # 1400 - 350 = 1050 -> 1200
        assert target.daily_calories == 1200
        assert target.warnings == (
            TargetWarning.DEFICIT_CAPPED,
            TargetWarning.BELOW_SAFE_MINIMUM,
        )

    def test_no_warning_exactly_at_floor(self):
        """Test reaching the floor exactly is not flagged."""
        target = self.service.calculate(
            _tdee(1700.0),
            _goal(WeightGoal.LOSE, GoalPace.MODERATE, target=50.0),
            weight_difference_kg=20.0,
            sex=Sex.FEMALE,
        )

        assert target.daily_calories == 1200
        assert not target.below_safe_minimum


class TestGoalAdjustmentPaceOrdering:
    """Test a faster pace never yields a smaller adjustment."""

    PACES = [GoalPace.GRADUAL, GoalPace.MODERATE, GoalPace.AGGRESSIVE]

    def setup_method(self):
        """Set up test fixtures."""
        self.service = GoalAdjustmentService()

    def _magnitudes(self, weight_goal, difference_kg):
        return [
            abs(
                self.service.calculate(
                    _tdee(2800.0),
                    _goal(weight_goal, pace),
                    weight_difference_kg=difference_kg,
                    sex=Sex.MALE,
                ).adjustment
            )
            for pace in self.PACES
        ]

    @pytest.mark.parametrize(
        "difference_kg,expected",
        [
            # <10 lb: cap 350 binds moderate and aggressive
            (2.0, [250.0, 350.0, 350.0]),
            # 10-25 lb: cap 500 binds aggressive
            (7.0, [250.0, 500.0, 500.0]),
            # >=25 lb: no cap binds
            (20.0, [250.0, 500.0, 750.0]),
        ],
    )
    def test_lose_is_non_decreasing_per_tier(self, difference_kg, expected):
        magnitudes = self._magnitudes(WeightGoal.LOSE, difference_kg)

        assert magnitudes == pytest.approx(expected)
        assert magnitudes == sorted(magnitudes)

    @pytest.mark.parametrize("difference_kg", [-2.0, -7.0, -20.0])
    def test_gain_is_strictly_increasing(self, difference_kg):
        magnitudes = self._magnitudes(WeightGoal.GAIN, difference_kg)

        assert magnitudes == pytest.approx([250.0, 500.0, 750.0])

    @pytest.mark.parametrize("difference_kg", [0.5, 4.0, 4.5, 11.3, 11.4, 30.0])
    def test_deficit_never_exceeds_tier(self, difference_kg):
        for pace in self.PACES:
            target = self.service.calculate(
                _tdee(2800.0),
                _goal(WeightGoal.LOSE, pace),
                weight_difference_kg=difference_kg,
                sex=Sex.MALE,
            )

            cap = max_safe_deficit(difference_kg * 2.20462)
            assert 2800.0 - target.daily_calories <= cap + 0.5
