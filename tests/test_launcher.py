from __future__ import annotations

from pathlib import Path

import launcher


def test_storage_root_defaults_beside_app(tmp_path, monkeypatch):
    monkeypatch.delenv(launcher.STORAGE_ENV_VAR, raising=False)
    assert launcher.storage_root_for(Path(tmp_path)) == Path(tmp_path) / ".local_store"


def test_storage_root_honours_env(tmp_path, monkeypatch):
    custom = Path(tmp_path) / "shared"
    monkeypatch.setenv(launcher.STORAGE_ENV_VAR, str(custom))
    assert launcher.storage_root_for(Path(tmp_path) / "app") == custom


def test_streamlit_argv_runs_app(tmp_path):
    app_path = Path(tmp_path) / "app.py"
    argv = launcher.streamlit_argv(app_path)
    assert argv[:3] == ["streamlit", "run", str(app_path)]
    assert "--browser.gatherUsageStats=false" in argv
