"""Scenario record, field lists, and storage-record conversion."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from estimator.defaults import DEFAULT_SCENARIO_ID, DEFAULT_SCENARIO_INPUTS, DEFAULT_SCENARIO_NAME


SCHEMA_VERSION = 1
SCENARIO_COLLECTION_TYPE = "scenario_collection"

INPUT_FIELDS = (
    "arpu",
    "footfall",
    "session_duration",
    "utilization_rate",
    "total_capacity",
    "hourly_rate",
    "hours_per_day",
)

# Field names used by the browser local-storage records.
RECORD_KEY_BY_FIELD = {
    "id": "id",
    "name": "name",
    "arpu": "arpu",
    "footfall": "footfall",
    "session_duration": "sessionDuration",
    "utilization_rate": "utilizationRate",
    "total_capacity": "totalCapacity",
    "hourly_rate": "hourlyRate",
    "hours_per_day": "hoursPerDay",
    "created_at": "createdAt",
}
FIELD_BY_RECORD_KEY = {v: k for k, v in RECORD_KEY_BY_FIELD.items()}

FIELD_LABELS = {
    "arpu": "ARPU",
    "footfall": "Customer Footfall",
    "session_duration": "Avg. Session Duration",
    "utilization_rate": "Capacity Utilization Rate",
    "total_capacity": "Total Capacity",
    "hourly_rate": "Hourly Rate",
    "hours_per_day": "Hours of Operation",
}


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Scenario:
    """A named, complete set of calculator inputs."""

    id: str
    name: str
    arpu: float
    footfall: float
    session_duration: float
    utilization_rate: float
    total_capacity: float
    hourly_rate: float
    hours_per_day: float
    created_at: datetime = field(default_factory=_now_utc)

    def inputs(self) -> dict[str, float]:
        return {k: getattr(self, k) for k in INPUT_FIELDS}

    def with_inputs(self, **changes: float) -> "Scenario":
        unknown = set(changes) - set(INPUT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown scenario inputs: {', '.join(sorted(unknown))}")
        return replace(self, **changes)


def default_scenario() -> Scenario:
    return Scenario(id=DEFAULT_SCENARIO_ID, name=DEFAULT_SCENARIO_NAME, **DEFAULT_SCENARIO_INPUTS)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if value is None or str(value).strip() == "":
        return _now_utc()
    text = str(value).strip()
    # Browser Date.toISOString() ends with "Z".
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def scenario_to_record(scenario: Scenario) -> dict[str, Any]:
    """Serialize to a JSON-ready record using the local-storage key names."""
    data = asdict(scenario)
    record = {RECORD_KEY_BY_FIELD[k]: v for k, v in data.items()}
    record["createdAt"] = scenario.created_at.isoformat()
    return record


def scenario_from_record(record: Any) -> Scenario:
    """Build a Scenario from a stored record.

    Accepts both the camelCase keys written by the browser store and the
    snake_case field names. Raises ValueError when the record is not an
    object, lacks an input field, or holds a non-numeric input.
    """
    if not isinstance(record, dict):
        raise ValueError("Scenario record is not an object.")

    values: dict[str, Any] = {}
    for key, value in record.items():
        name = FIELD_BY_RECORD_KEY.get(key, key)
        if name in RECORD_KEY_BY_FIELD:
            values[name] = value

    missing = [k for k in INPUT_FIELDS if k not in values]
    if missing:
        raise ValueError(f"Scenario record is missing fields: {', '.join(missing)}")

    numeric: dict[str, float] = {}
    for key in INPUT_FIELDS:
        value = values[key]
        if isinstance(value, bool):
            raise ValueError(f"Scenario field {key} is not numeric.")
        try:
            numeric[key] = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Scenario field {key} is not numeric.") from exc

    return Scenario(
        id=str(values.get("id") or ""),
        name=str(values.get("name") or ""),
        created_at=_parse_timestamp(values.get("created_at")),
        **numeric,
    )
