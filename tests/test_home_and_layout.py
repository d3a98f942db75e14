from __future__ import annotations

from pathlib import Path

from hypermedia_demo.home import ensure_demo_layout, resolve_demo_home


def test_resolve_demo_home_from_env(tmp_path: Path) -> None:
    home = resolve_demo_home({"HYPERMEDIA_DEMO_HOME": str(tmp_path)})
    assert home == tmp_path.resolve()


def test_resolve_demo_home_relative_is_under_user_home() -> None:
    home = resolve_demo_home({"HYPERMEDIA_DEMO_HOME": "demo-home"})
    assert home == (Path.home() / "demo-home").resolve()


def test_ensure_demo_layout_creates_required_dirs(tmp_path: Path) -> None:
    paths = ensure_demo_layout(tmp_path)

    assert paths.home.exists()
    assert paths.logs_dir.is_dir()
    assert paths.config_dir.is_dir()
    assert paths.config_path == tmp_path / "config" / "demo.json"
    assert paths.log_path == tmp_path / "logs" / "demo.log"


def test_resolve_demo_home_defaults_to_xdg_data_home(tmp_path: Path) -> None:
    home = resolve_demo_home({"XDG_DATA_HOME": str(tmp_path)})
    assert home == (tmp_path / "hypermedia-demo").resolve()


def test_resolve_demo_home_blank_env_falls_back_to_default(tmp_path: Path) -> None:
    home = resolve_demo_home({"HYPERMEDIA_DEMO_HOME": "  ", "XDG_DATA_HOME": str(tmp_path)})
    assert home == (tmp_path / "hypermedia-demo").resolve()
