"""Local key/value persistence and the saved-scenario store."""

from __future__ import annotations

import json
import os
import time
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from estimator.runtime_logging import append_runtime_event
from estimator.schema import SCENARIO_COLLECTION_TYPE, SCHEMA_VERSION, Scenario, scenario_from_record, scenario_to_record


STORE_DIR = Path(".local_store")
KEY_VALUE_STORE_FILE = STORE_DIR / "local_storage.json"

SAVED_SCENARIOS_KEY = "savedScenarios"

_DEFAULT_STORE_DIR = Path(".local_store")
_STORAGE_ENV_VAR = "ESTIMATOR_STORAGE_ROOT"

MODE_SINGLE = "single"
MODE_COMPARING = "comparing"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _expand_storage_root(path_value: str | Path | None) -> Path:
    if path_value is None:
        return _DEFAULT_STORE_DIR
    text = str(path_value).strip()
    if not text:
        return _DEFAULT_STORE_DIR
    return Path(os.path.expandvars(os.path.expanduser(text)))


def configure_storage_root(path_value: str | Path | None) -> Path:
    """Point the key/value store at a new root directory."""

    global STORE_DIR, KEY_VALUE_STORE_FILE
    STORE_DIR = _expand_storage_root(path_value)
    KEY_VALUE_STORE_FILE = STORE_DIR / "local_storage.json"
    return STORE_DIR


def storage_root_path() -> str:
    return str(STORE_DIR.resolve())


def storage_root_from_env() -> Path:
    return _expand_storage_root(os.getenv(_STORAGE_ENV_VAR, ""))


def _read_key_values() -> dict[str, str]:
    if not KEY_VALUE_STORE_FILE.exists():
        return {}
    try:
        data = json.loads(KEY_VALUE_STORE_FILE.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        append_runtime_event(
            level="ERROR",
            event="local_storage_unreadable",
            message="Local storage file could not be read; treating it as empty.",
            context={"path": str(KEY_VALUE_STORE_FILE)},
            exc=exc,
        )
        return {}
    if not isinstance(data, dict):
        append_runtime_event(
            level="ERROR",
            event="local_storage_unreadable",
            message="Local storage file is not a JSON object; treating it as empty.",
            context={"path": str(KEY_VALUE_STORE_FILE), "type": type(data).__name__},
        )
        return {}
    values: dict[str, str] = {}
    for k, v in data.items():
        if isinstance(v, str):
            values[str(k)] = v
            continue
        append_runtime_event(
            level="WARNING",
            event="local_storage_unreadable",
            message="Local storage value is not a string and was ignored.",
            context={"path": str(KEY_VALUE_STORE_FILE), "key": str(k), "type": type(v).__name__},
        )
    return values


def _write_key_values(data: dict[str, str]) -> None:
    STORE_DIR.mkdir(parents=True, exist_ok=True)
    tmp = KEY_VALUE_STORE_FILE.with_suffix(f"{KEY_VALUE_STORE_FILE.suffix}.tmp")
    tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
    tmp.replace(KEY_VALUE_STORE_FILE)


def get_item(key: str) -> str | None:
    return _read_key_values().get(key)


def set_item(key: str, value: str) -> None:
    data = _read_key_values()
    data[key] = str(value)
    _write_key_values(data)


def new_scenario_id() -> str:
    return f"scenario-{int(time.time() * 1000)}-{uuid4().hex[:6]}"


def _parse_scenario_records(records: list, source: str) -> list[Scenario]:
    scenarios: list[Scenario] = []
    for idx, record in enumerate(records):
        try:
            scenarios.append(scenario_from_record(record))
        except ValueError as exc:
            append_runtime_event(
                level="WARNING",
                event="scenario_record_skipped",
                message=str(exc),
                context={"index": idx, "source": source},
            )
    return scenarios


class ScenarioStore:
    """Saved scenarios plus the comparison selection.

    The comparison target is held as an id and resolved against the
    collection on every access.
    """

    def __init__(self, key: str = SAVED_SCENARIOS_KEY):
        self.key = key
        self._scenarios: list[Scenario] = []
        self._comparison_id: str | None = None

    @property
    def scenarios(self) -> list[Scenario]:
        return list(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    def load(self) -> list[Scenario]:
        """Read saved scenarios from durable storage.

        Parse failures are logged and yield an empty collection.
        """
        raw = get_item(self.key)
        if raw is None:
            self._scenarios = []
            return []
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            append_runtime_event(
                level="ERROR",
                event="scenario_store_load_failed",
                message="Error parsing saved scenarios.",
                context={"key": self.key},
                exc=exc,
            )
            self._scenarios = []
            return []
        if not isinstance(payload, list):
            append_runtime_event(
                level="ERROR",
                event="scenario_store_load_failed",
                message="Saved scenarios are not a JSON array.",
                context={"key": self.key, "type": type(payload).__name__},
            )
            self._scenarios = []
            return []

        scenarios = []
        seen: set[str] = set()
        for scenario in _parse_scenario_records(payload, source=self.key):
            if not scenario.id or scenario.id in seen:
                scenario = replace(scenario, id=new_scenario_id())
            seen.add(scenario.id)
            scenarios.append(scenario)
        self._scenarios = scenarios
        return list(scenarios)

    def _persist(self) -> None:
        set_item(self.key, json.dumps([scenario_to_record(s) for s in self._scenarios]))

    def save(self, scenario: Scenario, name: str | None = None) -> Scenario | None:
        """Store a copy of the scenario's inputs under a fresh id.

        Returns None without touching storage when the name is blank.
        """
        label = scenario.name if name is None else name
        if not str(label).strip():
            return None
        saved = Scenario(
            id=new_scenario_id(),
            name=str(label),
            created_at=datetime.now(timezone.utc),
            **scenario.inputs(),
        )
        self._scenarios.append(saved)
        self._persist()
        return saved

    def delete(self, scenario_id: str) -> bool:
        remaining = [s for s in self._scenarios if s.id != scenario_id]
        if len(remaining) == len(self._scenarios):
            return False
        self._scenarios = remaining
        if self._comparison_id == scenario_id:
            self.exit_comparison()
        self._persist()
        return True

    def find_by_id(self, scenario_id: str | None) -> Scenario | None:
        if scenario_id is None:
            return None
        for scenario in self._scenarios:
            if scenario.id == scenario_id:
                return scenario
        return None

    def import_scenarios(self, scenarios: list[Scenario]) -> int:
        existing = {s.id for s in self._scenarios}
        added = 0
        for scenario in scenarios:
            if not scenario.id or scenario.id in existing:
                scenario = replace(scenario, id=new_scenario_id())
            existing.add(scenario.id)
            self._scenarios.append(scenario)
            added += 1
        if added:
            self._persist()
        return added

    def select_for_comparison(self, scenario_id: str) -> bool:
        if self.find_by_id(scenario_id) is None:
            return False
        self._comparison_id = scenario_id
        return True

    def exit_comparison(self) -> None:
        self._comparison_id = None

    @property
    def comparison_id(self) -> str | None:
        return self._comparison_id

    def comparison_scenario(self) -> Scenario | None:
        scenario = self.find_by_id(self._comparison_id)
        if scenario is None:
            self._comparison_id = None
        return scenario

    @property
    def mode(self) -> str:
        return MODE_COMPARING if self.comparison_scenario() is not None else MODE_SINGLE


def export_scenarios_json(scenarios: list[Scenario]) -> str:
    bundle = {
        "type": SCENARIO_COLLECTION_TYPE,
        "schema_version": SCHEMA_VERSION,
        "exported_at": _now_iso(),
        "scenarios": [scenario_to_record(s) for s in scenarios],
    }
    return json.dumps(bundle, indent=2)


def parse_import_json(raw_json: str) -> tuple[list[Scenario], list[str]]:
    """Parse an exported bundle or a bare browser array of scenario records."""
    try:
        payload = json.loads(raw_json)
    except json.JSONDecodeError:
        return [], ["Could not parse import JSON."]

    warnings: list[str] = []
    if isinstance(payload, dict) and payload.get("type") == SCENARIO_COLLECTION_TYPE:
        records = payload.get("scenarios")
        version = payload.get("schema_version")
        if version != SCHEMA_VERSION:
            warnings.append(f"Imported schema_version={version}; expected schema_version={SCHEMA_VERSION}.")
    elif isinstance(payload, list):
        records = payload
        warnings.append("Imported browser scenario array without bundle metadata.")
    else:
        return [], ["Import payload is not a scenario collection."]

    if not isinstance(records, list):
        return [], warnings + ["Import payload has no scenario list."]

    scenarios = _parse_scenario_records(records, source="import")
    skipped = len(records) - len(scenarios)
    if skipped:
        warnings.append(f"Skipped {skipped} malformed scenario record(s).")
    return scenarios, warnings


configure_storage_root(storage_root_from_env())
