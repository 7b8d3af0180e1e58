"""Pydantic models for API request bodies."""

from pydantic import BaseModel, ConfigDict, Field


class MealUpdate(BaseModel):
    """Partial update for one meal slot."""

    time: str | None = None
    foods: list[str] | None = None
    notes: str | None = None
    photo: str | None = None


class MealTimeUpdate(BaseModel):
    """New time of day for a meal slot."""

    time: str


class FoodCreate(BaseModel):
    """Food item to append to a meal."""

    food: str


class WorkoutUpdate(BaseModel):
    """Partial update for the workout record."""

    model_config = ConfigDict(populate_by_name=True)

    did_workout: bool | None = Field(default=None, alias="didWorkout")
    cardio_duration: str | None = Field(default=None, alias="cardioDuration")
    weight_training: str | None = Field(default=None, alias="weightTraining")


class SleepUpdate(BaseModel):
    """Partial update for the sleep record."""

    model_config = ConfigDict(populate_by_name=True)

    wake_time: str | None = Field(default=None, alias="wakeTime")
    nap_time: str | None = Field(default=None, alias="napTime")
    sleep_time: str | None = Field(default=None, alias="sleepTime")


class WaterUpdate(BaseModel):
    """Partial update for the water record."""

    intake: int | None = None
    goal: int | None = None
    timestamps: list[str] | None = None


class ComplianceUpdate(BaseModel):
    """Whole-day compliance flag."""

    model_config = ConfigDict(populate_by_name=True)

    is_compliant: bool = Field(alias="isCompliant")


class ObservationsUpdate(BaseModel):
    """Free-text observations for a day."""

    observations: str


class ProfileUpdate(BaseModel):
    """Profile name to remember."""

    name: str


class DarkModeUpdate(BaseModel):
    """Dark-mode preference."""

    enabled: bool
