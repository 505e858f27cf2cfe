# server/tests/test_metrics.py
import pytest

from fitsense.services.metrics_service import (
    ACTIVITY_MULTIPLIERS,
    calculate_bmr,
    calculate_daily_calories,
    calculate_metrics,
    classify_bmi,
    convert_height_to_meters,
    round_half_up,
)


class TestHeightConversion:
    """Test cases for height normalization"""

    def test_known_units(self):
        """Test cm, ft and inch are converted to meters"""
        assert convert_height_to_meters(180, "cm") == pytest.approx(1.8)
        assert convert_height_to_meters(6, "ft") == pytest.approx(1.8288)
        assert convert_height_to_meters(70, "inch") == pytest.approx(1.778)

    def test_long_unit_names(self):
        """Test long unit names and casing are accepted"""
        assert convert_height_to_meters(180, "Centimeters") == pytest.approx(1.8)
        assert convert_height_to_meters(6, "feet") == pytest.approx(1.8288)
        assert convert_height_to_meters(70, "INCHES") == pytest.approx(1.778)

    def test_unknown_unit_passes_through(self):
        """Test an unknown unit leaves the value unchanged"""
        assert convert_height_to_meters(1.8, "m") == 1.8
        assert convert_height_to_meters(1.8, "") == 1.8

    def test_units_give_same_bmi(self):
        """Test equivalent heights in every unit give the same BMI"""
        results = [
            calculate_metrics(75, 180, "cm", "Active").bmi,
            calculate_metrics(75, 180 / 30.48, "ft", "Active").bmi,
            calculate_metrics(75, 70.866, "inch", "Active").bmi,
        ]
        assert results == [23.1, 23.1, 23.1]


class TestBMI:
    """Test cases for BMI and category"""

    def test_bmi_from_centimeters(self):
        """Test BMI = w / (h/100)^2 rounded to one decimal"""
        metrics = calculate_metrics(70, 175, "cm", "Active")
        assert metrics.bmi == 22.9
        assert metrics.raw_bmi == pytest.approx(22.857142857)

    def test_round_half_up(self):
        """Test halves round up rather than to even"""
        assert round_half_up(22.25, 1) == 22.3
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4

    @pytest.mark.parametrize("bmi,category", [
        (18.4, "Underweight"),
        (18.5, "Normal weight"),
        (24.9, "Normal weight"),
        (25.0, "Overweight"),
        (29.9, "Overweight"),
        (30.0, "Obese"),
        (45.0, "Obese"),
    ])
    def test_category_boundaries(self, bmi, category):
        """Test fixed category thresholds"""
        assert classify_bmi(bmi) == category

    def test_category_uses_unrounded_bmi(self):
        """Test a BMI displayed as 25.0 can still be Normal weight"""
        metrics = calculate_metrics(24.96, 100, "cm", "Sedentary")
        assert metrics.bmi == 25.0
        assert metrics.bmi_category == "Normal weight"


class TestCalories:
    """Test cases for the daily calorie target"""

    def test_bmr_formula(self):
        """Test BMR for a 30 year old, no sex distinction"""
        assert calculate_bmr(70, 175) == pytest.approx(1695.667)

    def test_active_calories(self):
        """Test 70kg, 175cm, Active -> 2628 kcal"""
        assert calculate_daily_calories(70, 175, "Active") == 2628
        assert calculate_metrics(70, 175, "cm", "Active").daily_calories == 2628

    def test_repeated_calls_match(self):
        """Test the calculation is deterministic"""
        first = calculate_metrics(82.5, 5.9, "ft", "Very Active")
        second = calculate_metrics(82.5, 5.9, "ft", "Very Active")
        assert first == second

    def test_unknown_activity_defaults_to_sedentary(self):
        """Test an unrecognized activity level uses the 1.2 multiplier"""
        sedentary = calculate_daily_calories(70, 175, "Sedentary")
        assert calculate_daily_calories(70, 175, "Couch Potato") == sedentary == 2035
        assert calculate_daily_calories(70, 175, "") == sedentary

    def test_multiplier_table(self):
        """Test the activity multiplier table"""
        assert dict(ACTIVITY_MULTIPLIERS) == {
            "Sedentary": 1.2,
            "Lightly Active": 1.375,
            "Active": 1.55,
            "Very Active": 1.725,
        }
        with pytest.raises(TypeError):
            ACTIVITY_MULTIPLIERS["Extra Active"] = 1.9

    def test_calories_never_negative(self):
        """Test tiny inputs clamp the calorie target at zero"""
        metrics = calculate_metrics(0.1, 1, "cm", "Sedentary")
        assert metrics.daily_calories == 0
        assert isinstance(metrics.daily_calories, int)
