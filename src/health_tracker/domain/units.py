"""Body weight unit conversion."""

LBS_PER_KG = 2.20462
WEIGHT_UNITS = ("lbs", "kg")


def convert_weight(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a weight between pounds and kilograms, rounded to 0.1."""
    for unit in (from_unit, to_unit):
        if unit not in WEIGHT_UNITS:
            raise ValueError(f"Unknown weight unit: {unit}")
    if from_unit == to_unit:
        converted = float(value)
    elif from_unit == "lbs":
        converted = value / LBS_PER_KG
    else:
        converted = value * LBS_PER_KG
    return round(converted, 1)
