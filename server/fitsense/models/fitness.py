from typing import List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FALLBACK_SUGGESTIONS = ["Unable to generate suggestions. Please try again later."]


class CamelModel(BaseModel):
    # The form speaks camelCase (heightUnit, activityLevel, bmiCategory, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FitnessRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    weight: float = Field(..., gt=0, le=1000, allow_inf_nan=False, description="Weight in kg")
    height: float = Field(..., ge=0.01, le=1000, allow_inf_nan=False, description="Height in height_unit")
    height_unit: str = Field(default="cm", description="cm | ft | inch")
    activity_level: str = Field(..., min_length=1, description="Sedentary | Lightly Active | Active | Very Active")
    language: str = Field(default="English", min_length=1, description="Language the tips are written in")


class FitnessMetrics(BaseModel):
    bmi: float
    bmi_category: str
    daily_calories: int = Field(..., ge=0)
    raw_bmi: float  # unrounded, sent to the advice service


class AdviceResult(BaseModel):
    suggestions: List[str] = Field(default_factory=list)
    fallback: bool = False

    @classmethod
    def unavailable(cls) -> "AdviceResult":
        return cls(suggestions=list(FALLBACK_SUGGESTIONS), fallback=True)


class FitnessResult(CamelModel):
    bmi: float
    bmi_category: str
    daily_calories: int
    suggestions: List[str] = Field(default_factory=list)


class FormOption(BaseModel):
    value: str
    label: str


class FitnessFormOptions(CamelModel):
    activity_levels: List[FormOption]
    languages: List[FormOption]
    height_units: List[FormOption]
    default_height_unit: str
    default_language: str
