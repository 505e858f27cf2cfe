# fitsense/services/metrics_service.py
"""
Metric calculator: BMI, BMI category and daily calorie target.

All functions are pure. Inputs are assumed validated (positive numbers);
unknown height units and activity levels fall back instead of failing.
"""

import math
from types import MappingProxyType
from typing import Tuple

from fitsense.models.fitness import FitnessMetrics

# Height unit -> conversion to meters
HEIGHT_TO_METERS = MappingProxyType({
    "cm": lambda height: height / 100,
    "ft": lambda height: height * 0.3048,
    "inch": lambda height: height * 0.0254,
})

HEIGHT_UNIT_ALIASES = MappingProxyType({
    "centimeters": "cm",
    "centimetres": "cm",
    "feet": "ft",
    "in": "inch",
    "inches": "inch",
})

ACTIVITY_MULTIPLIERS = MappingProxyType({
    "Sedentary": 1.2,
    "Lightly Active": 1.375,
    "Active": 1.55,
    "Very Active": 1.725,
})
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# (exclusive upper bound, label), checked in order
BMI_CATEGORIES: Tuple[Tuple[float, str], ...] = (
    (18.5, "Underweight"),
    (25.0, "Normal weight"),
    (30.0, "Overweight"),
)
DEFAULT_BMI_CATEGORY = "Obese"

# BMR is estimated for a fixed age, no sex distinction
ASSUMED_AGE_YEARS = 30


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def normalize_height_unit(unit: str) -> str:
    key = (unit or "").strip().lower()
    return HEIGHT_UNIT_ALIASES.get(key, key)


def convert_height_to_meters(height: float, unit: str) -> float:
    """
    Convert height to meters. cm, ft and inch are converted;
    any other unit is passed through unchanged.
    """
    convert = HEIGHT_TO_METERS.get(normalize_height_unit(unit))
    if convert is None:
        return height
    return convert(height)


def calculate_bmi(weight_kg: float, height_m: float) -> float:
    """Unrounded BMI"""
    return weight_kg / (height_m * height_m)


def classify_bmi(bmi: float) -> str:
    for upper_bound, label in BMI_CATEGORIES:
        if bmi < upper_bound:
            return label
    return DEFAULT_BMI_CATEGORY


def activity_multiplier(activity_level: str) -> float:
    return ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def calculate_bmr(weight_kg: float, height_cm: float) -> float:
    return 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * ASSUMED_AGE_YEARS)


def calculate_daily_calories(weight_kg: float, height_cm: float, activity_level: str) -> int:
    calories = calculate_bmr(weight_kg, height_cm) * activity_multiplier(activity_level)
    return max(0, int(round_half_up(calories)))


def calculate_metrics(weight_kg: float, height: float, height_unit: str, activity_level: str) -> FitnessMetrics:
    """
    Compute BMI (1 decimal), its category and the daily calorie target.

    The category is taken from the unrounded BMI.
    """
    height_m = convert_height_to_meters(height, height_unit)
    bmi = calculate_bmi(weight_kg, height_m)

    return FitnessMetrics(
        bmi=round_half_up(bmi, 1),
        bmi_category=classify_bmi(bmi),
        daily_calories=calculate_daily_calories(weight_kg, height_m * 100, activity_level),
        raw_bmi=bmi,
    )
