"""Desktop entry point: starts the revenue estimator dashboard under Streamlit."""

from __future__ import annotations

import os
import pathlib
import sys


STORAGE_ENV_VAR = "ESTIMATOR_STORAGE_ROOT"


def _bundle_root() -> pathlib.Path:
    if getattr(sys, "frozen", False):
        return pathlib.Path(getattr(sys, "_MEIPASS"))
    return pathlib.Path(__file__).resolve().parent


def _runtime_root() -> pathlib.Path:
    if getattr(sys, "frozen", False):
        return pathlib.Path(sys.executable).resolve().parent
    return pathlib.Path(__file__).resolve().parent


def storage_root_for(runtime_root: pathlib.Path) -> pathlib.Path:
    """Saved scenarios and runtime events default to `.local_store` beside the app.

    An explicit ESTIMATOR_STORAGE_ROOT wins.
    """
    configured = os.environ.get(STORAGE_ENV_VAR, "").strip()
    if configured:
        return pathlib.Path(os.path.expandvars(os.path.expanduser(configured)))
    return runtime_root / ".local_store"


def streamlit_argv(app_path: pathlib.Path) -> list[str]:
    return [
        "streamlit",
        "run",
        str(app_path),
        "--browser.gatherUsageStats=false",
        "--theme.base=light",
    ]


def main() -> None:
    runtime_root = _runtime_root()
    storage_root = storage_root_for(runtime_root)
    storage_root.mkdir(parents=True, exist_ok=True)
    os.environ[STORAGE_ENV_VAR] = str(storage_root)
    os.chdir(runtime_root)

    from streamlit.web import cli as stcli

    sys.argv = streamlit_argv(_bundle_root() / "app.py")
    raise SystemExit(stcli.main())


if __name__ == "__main__":
    main()
