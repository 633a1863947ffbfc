from __future__ import annotations

from pathlib import Path

import pytest

import estimator.persistence as persistence
import estimator.runtime_logging as runtime_logging
from estimator.schema import Scenario, default_scenario


@pytest.fixture
def base_scenario() -> Scenario:
    return default_scenario()


@pytest.fixture
def peak_scenario() -> Scenario:
    return Scenario(
        id="current",
        name="Peak Hours",
        arpu=65.0,
        footfall=240.0,
        session_duration=1.5,
        utilization_rate=85.0,
        total_capacity=200.0,
        hourly_rate=30.0,
        hours_per_day=12.0,
    )


@pytest.fixture
def isolated_store(tmp_path, monkeypatch) -> Path:
    """Point local storage and the runtime log at a temp folder."""
    root = Path(tmp_path)
    monkeypatch.setattr(persistence, "STORE_DIR", root)
    monkeypatch.setattr(persistence, "KEY_VALUE_STORE_FILE", root / "local_storage.json")
    monkeypatch.setattr(runtime_logging, "LOG_DIR", root)
    monkeypatch.setattr(runtime_logging, "RUNTIME_EVENTS_LOG_FILE", root / "runtime_events.jsonl")
    return root
