from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

HOME_ENV: Final[str] = "HYPERMEDIA_DEMO_HOME"
APP_DIR_NAME: Final[str] = "hypermedia-demo"


@dataclass(frozen=True)
class DemoPaths:
    home: Path
    logs_dir: Path
    config_dir: Path

    @property
    def config_path(self) -> Path:
        return self.config_dir / "demo.json"

    @property
    def log_path(self) -> Path:
        return self.logs_dir / "demo.log"


def _default_home(env: Mapping[str, str]) -> Path:
    data_home = (env.get("XDG_DATA_HOME") or "").strip()
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME


def resolve_demo_home(environ: Mapping[str, str] | None = None) -> Path:
    """Return the demo's home directory.

    ``HYPERMEDIA_DEMO_HOME`` wins; a relative value is taken relative to the
    user's home directory. Otherwise the XDG data directory is used.
    """

    env = os.environ if environ is None else environ

    raw = (env.get(HOME_ENV) or "").strip()
    if not raw:
        return _default_home(env).resolve()

    candidate = Path(raw).expanduser()
    if not candidate.is_absolute():
        candidate = Path.home() / candidate
    return candidate.resolve()


def ensure_demo_layout(home: Path) -> DemoPaths:
    paths = DemoPaths(home=home, logs_dir=home / "logs", config_dir=home / "config")
    for path in (paths.home, paths.logs_dir, paths.config_dir):
        path.mkdir(parents=True, exist_ok=True)
    return paths
