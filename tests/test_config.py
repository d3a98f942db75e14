from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from hypermedia_demo.config import DemoConfig, load_demo_config, write_demo_config
from hypermedia_demo.home import ensure_demo_layout


def test_load_demo_config_defaults_when_missing(tmp_path: Path) -> None:
    paths = ensure_demo_layout(tmp_path)
    cfg = load_demo_config(paths)
    assert isinstance(cfg, DemoConfig)
    assert cfg.network.bind_host == "127.0.0.1"
    assert cfg.greeting.default_name == "World"
    assert cfg.enhancement.markers == {"HX-Request": "true", "X-Up-Target": None}


def test_load_demo_config_validation_error(tmp_path: Path) -> None:
    paths = ensure_demo_layout(tmp_path)

    paths.config_path.write_text(
        json.dumps({"network": {"port": "not-an-int"}}),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        load_demo_config(paths)


def test_logging_level_is_normalized() -> None:
    cfg = DemoConfig.model_validate({"logging": {"level": " debug "}})
    assert cfg.logging.level == "DEBUG"


def test_write_demo_config_is_loadable(tmp_path: Path) -> None:
    paths = ensure_demo_layout(tmp_path)
    cfg = DemoConfig.model_validate(
        {
            "greeting": {"welcome_message": "Bonjour"},
            "enhancement": {"markers": {"Turbo-Frame": None}},
        }
    )

    write_demo_config(paths, cfg)
    loaded = load_demo_config(paths)

    assert loaded.greeting.welcome_message == "Bonjour"
    assert loaded.enhancement.markers == {"Turbo-Frame": None}


def test_unknown_logging_level_is_rejected(tmp_path: Path) -> None:
    paths = ensure_demo_layout(tmp_path)

    paths.config_path.write_text(
        json.dumps({"logging": {"level": "LOUD"}}),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        load_demo_config(paths)


def test_empty_marker_value_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DemoConfig.model_validate({"enhancement": {"markers": {"HX-Request": ""}}})


def test_marker_values_are_stripped() -> None:
    cfg = DemoConfig.model_validate({"enhancement": {"markers": {" HX-Request ": " true "}}})
    assert cfg.enhancement.markers == {"HX-Request": "true"}


def test_enhancement_library_must_be_known() -> None:
    assert DemoConfig().enhancement.library == "htmx"
    assert (
        DemoConfig.model_validate({"enhancement": {"library": "unpoly"}}).enhancement.library
        == "unpoly"
    )
    with pytest.raises(ValidationError):
        DemoConfig.model_validate({"enhancement": {"library": "jquery"}})
