"""Domain models for daily health records."""

import time as _time
from dataclasses import dataclass, field, fields, replace
from typing import TypeVar
from uuid import uuid4

RecordT = TypeVar("RecordT")

MEAL_SLOTS: tuple[str, ...] = (
    "earlyMorning",
    "breakfast",
    "midMorning",
    "lunch",
    "tea",
    "dinner",
    "supper",
)

MEAL_LABELS: dict[str, str] = {
    "earlyMorning": "Early Morning",
    "breakfast": "Breakfast",
    "midMorning": "Mid Morning",
    "lunch": "Lunch",
    "tea": "Teatime",
    "dinner": "Dinner",
    "supper": "Supper",
}

DEFAULT_WEIGHT_PEOPLE: tuple[str, ...] = ("lamisa", "raed")
DEFAULT_WATER_GOAL = 8
MIN_WATER_GOAL = 1
MAX_WATER_GOAL = 20


def now_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(_time.time() * 1000)


@dataclass(frozen=True)
class MealEntry:
    """One logged meal slot."""

    id: str
    time: str = ""
    foods: list[str] = field(default_factory=list)
    notes: str = ""
    timestamp: int = 0
    photo: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the persisted JSON shape."""
        data: dict[str, object] = {
            "id": self.id,
            "time": self.time,
            "foods": list(self.foods),
            "notes": self.notes,
            "timestamp": self.timestamp,
        }
        if self.photo is not None:
            data["photo"] = self.photo
        return data

    @classmethod
    def from_dict(cls, data: object) -> "MealEntry":
        """Build a meal from stored JSON, filling missing fields."""
        raw = _require_mapping(data, "meal")
        foods = raw.get("foods")
        if foods is None:
            foods = raw.get("items", [])
        if not isinstance(foods, list):
            raise ValueError("meal foods must be a list")
        photo = raw.get("photo")
        return cls(
            id=str(raw.get("id") or uuid4()),
            time=_to_str(raw.get("time")),
            foods=[str(food) for food in foods],
            notes=_to_str(raw.get("notes")),
            timestamp=_to_int(raw.get("timestamp"), default=now_ms()),
            photo=str(photo) if photo else None,
        )


@dataclass(frozen=True)
class WorkoutRecord:
    """Workout completion and durations for a day."""

    did_workout: bool = False
    cardio_duration: str = ""
    weight_training: str = ""

    def to_dict(self) -> dict[str, object]:
        """Return the persisted JSON shape."""
        return {
            "didWorkout": self.did_workout,
            "cardioDuration": self.cardio_duration,
            "weightTraining": self.weight_training,
        }

    @classmethod
    def from_dict(cls, data: object) -> "WorkoutRecord":
        """Build a workout record from stored JSON."""
        raw = _require_mapping(data, "workout")
        return cls(
            did_workout=bool(raw.get("didWorkout", False)),
            cardio_duration=_to_str(raw.get("cardioDuration")),
            weight_training=_to_str(raw.get("weightTraining")),
        )


@dataclass(frozen=True)
class SleepRecord:
    """Wake, nap and sleep times for a day."""

    wake_time: str = ""
    nap_time: str = ""
    sleep_time: str = ""

    def to_dict(self) -> dict[str, object]:
        """Return the persisted JSON shape."""
        return {
            "wakeTime": self.wake_time,
            "napTime": self.nap_time,
            "sleepTime": self.sleep_time,
        }

    @classmethod
    def from_dict(cls, data: object) -> "SleepRecord":
        """Build a sleep record from stored JSON."""
        raw = _require_mapping(data, "sleep")
        return cls(
            wake_time=_to_str(raw.get("wakeTime")),
            nap_time=_to_str(raw.get("napTime")),
            sleep_time=_to_str(raw.get("sleepTime")),
        )


@dataclass(frozen=True)
class WaterRecord:
    """Glasses of water consumed against a daily goal."""

    intake: int = 0
    goal: int = DEFAULT_WATER_GOAL
    timestamps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Return the persisted JSON shape."""
        return {
            "intake": self.intake,
            "goal": self.goal,
            "timestamps": list(self.timestamps),
        }

    @classmethod
    def from_dict(cls, data: object) -> "WaterRecord":
        """Build a water record from stored JSON."""
        raw = _require_mapping(data, "water")
        timestamps = raw.get("timestamps") or []
        if not isinstance(timestamps, list):
            raise ValueError("water timestamps must be a list")
        return cls(
            intake=max(_to_int(raw.get("intake"), default=0), 0),
            goal=clamp_water_goal(
                _to_int(raw.get("goal"), default=DEFAULT_WATER_GOAL)
            ),
            timestamps=[str(stamp) for stamp in timestamps],
        )


@dataclass(frozen=True)
class WeightRecord:
    """Weight readings (as entered) keyed by tracked person."""

    readings: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Return the persisted JSON shape."""
        return dict(self.readings)

    @classmethod
    def empty(cls, people: tuple[str, ...]) -> "WeightRecord":
        """Return a record with a blank reading per person."""
        return cls(readings={person: "" for person in people})

    @classmethod
    def from_dict(cls, data: object, people: tuple[str, ...]) -> "WeightRecord":
        """Build a weight record from stored JSON, keeping unknown people."""
        raw = _require_mapping(data, "weight")
        readings = {person: "" for person in people}
        for person, value in raw.items():
            readings[str(person)] = _to_str(value)
        return cls(readings=readings)


@dataclass(frozen=True)
class DayEntry:
    """Aggregate health record for one calendar day."""

    date: str
    is_compliant: bool
    meals: dict[str, MealEntry]
    workout: WorkoutRecord
    sleep: SleepRecord
    water: WaterRecord
    weight: WeightRecord
    observations: str = ""

    def meal(self, slot: str) -> MealEntry:
        """Return the meal stored in a slot."""
        require_meal_slot(slot)
        return self.meals[slot]

    def with_meal(self, slot: str, meal: MealEntry) -> "DayEntry":
        """Return a copy with one meal slot replaced."""
        require_meal_slot(slot)
        return replace(self, meals={**self.meals, slot: meal})

    def to_dict(self) -> dict[str, object]:
        """Return the persisted JSON shape."""
        return {
            "date": self.date,
            "isCompliant": self.is_compliant,
            "meals": {slot: self.meals[slot].to_dict() for slot in MEAL_SLOTS},
            "workout": self.workout.to_dict(),
            "sleep": self.sleep.to_dict(),
            "water": self.water.to_dict(),
            "weight": self.weight.to_dict(),
            "observations": self.observations,
        }

    @classmethod
    def from_dict(
        cls,
        data: object,
        date: str | None = None,
        weight_people: tuple[str, ...] = DEFAULT_WEIGHT_PEOPLE,
    ) -> "DayEntry":
        """Build a day record from stored JSON.

        Sections written by older versions of the app may be missing
        entirely; each one is backfilled with its zero value while every
        stored value is kept.
        """
        raw = _require_mapping(data, "day entry")
        resolved_date = date or raw.get("date")
        if not isinstance(resolved_date, str) or not resolved_date:
            raise ValueError("day entry has no date")
        stored_meals = raw.get("meals")
        if stored_meals is None:
            stored_meals = {}
        stored_meals = _require_mapping(stored_meals, "meals")
        meals = {
            slot: (
                MealEntry.from_dict(stored_meals[slot])
                if stored_meals.get(slot) is not None
                else empty_meal_entry()
            )
            for slot in MEAL_SLOTS
        }
        return cls(
            date=resolved_date,
            is_compliant=bool(raw.get("isCompliant", True)),
            meals=meals,
            workout=(
                WorkoutRecord.from_dict(raw["workout"])
                if raw.get("workout") is not None
                else WorkoutRecord()
            ),
            sleep=(
                SleepRecord.from_dict(raw["sleep"])
                if raw.get("sleep") is not None
                else SleepRecord()
            ),
            water=(
                WaterRecord.from_dict(raw["water"])
                if raw.get("water") is not None
                else WaterRecord()
            ),
            weight=(
                WeightRecord.from_dict(raw["weight"], weight_people)
                if raw.get("weight") is not None
                else WeightRecord.empty(weight_people)
            ),
            observations=_to_str(raw.get("observations")),
        )


def empty_meal_entry() -> MealEntry:
    """Return a blank meal with a fresh id and the current timestamp."""
    return MealEntry(id=str(uuid4()), timestamp=now_ms())


def empty_day_entry(
    date: str, weight_people: tuple[str, ...] = DEFAULT_WEIGHT_PEOPLE
) -> DayEntry:
    """Return a fully populated, blank day record."""
    return DayEntry(
        date=date,
        is_compliant=True,
        meals={slot: empty_meal_entry() for slot in MEAL_SLOTS},
        workout=WorkoutRecord(),
        sleep=SleepRecord(),
        water=WaterRecord(),
        weight=WeightRecord.empty(weight_people),
        observations="",
    )


def clamp_water_goal(goal: int) -> int:
    """Clamp a water goal into the allowed range."""
    return min(max(goal, MIN_WATER_GOAL), MAX_WATER_GOAL)


def require_meal_slot(slot: str) -> str:
    """Return the slot name or raise ValueError for unknown slots."""
    if slot not in MEAL_SLOTS:
        raise ValueError(f"Unknown meal slot: {slot}")
    return slot


def merge_fields(record: RecordT, changes: dict[str, object]) -> RecordT:
    """Shallow-merge changes into a dataclass record.

    Raises ValueError when a change names a field the record lacks.
    """
    names = {item.name for item in fields(record)}  # type: ignore[arg-type]
    unknown = sorted(set(changes) - names)
    if unknown:
        raise ValueError(f"Unknown fields: {', '.join(unknown)}")
    return replace(record, **changes)  # type: ignore[type-var]


def _require_mapping(data: object, label: str) -> dict[str, object]:
    if not isinstance(data, dict):
        raise ValueError(f"{label} must be an object")
    return data


def _to_str(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _to_int(value: object, default: int) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    if isinstance(value, int | float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value))
        except ValueError as exc:
            raise ValueError(f"expected a number, got {value!r}") from exc
    raise ValueError(f"expected a number, got {type(value).__name__}")
