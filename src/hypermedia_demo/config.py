from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from hypermedia_demo.home import DemoPaths


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level name.")
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper() or "INFO"
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown logging level: {value!r}")
        return level


class EnhancementConfig(BaseModel):
    """Request markers identifying an enhancement-aware client.

    Each key is a request header; the value is what the header must carry
    (compared case-insensitively), or ``None`` to accept any non-empty value.
    htmx sends ``HX-Request: true`` and Unpoly sends ``X-Up-Target``. Turbo
    frames pick their frame out of a full page, so they need no marker.

    ``library`` selects the client script the page layout loads. Only one is
    loaded at a time since htmx and Unpoly would both handle the same form.
    """

    library: Literal["htmx", "unpoly"] = Field(default="htmx")
    markers: dict[str, str | None] = Field(
        default_factory=lambda: {"HX-Request": "true", "X-Up-Target": None},
    )

    @field_validator("markers")
    @classmethod
    def _non_empty_marker_values(cls, value: dict[str, str | None]) -> dict[str, str | None]:
        out: dict[str, str | None] = {}
        for header, expected in value.items():
            if not header.strip():
                raise ValueError("Marker header name must not be empty")
            if expected is not None and not expected.strip():
                raise ValueError(
                    f"Marker {header!r} has an empty value; use null to accept any value"
                )
            out[header.strip()] = expected.strip() if expected is not None else None
        return out


class GreetingConfig(BaseModel):
    welcome_message: str = Field(default="Welcome to the hypermedia demo")
    default_name: str = Field(default="World")


class DemoConfig(BaseModel):
    version: str = Field(default="1")
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    enhancement: EnhancementConfig = Field(default_factory=EnhancementConfig)
    greeting: GreetingConfig = Field(default_factory=GreetingConfig)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_demo_config(paths: DemoPaths) -> DemoConfig:
    """Load config from ${HYPERMEDIA_DEMO_HOME}/config/demo.json.

    - If missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    config_path = paths.config_path
    if not config_path.exists():
        return DemoConfig()

    raw = _read_json(config_path)
    return DemoConfig.model_validate(raw)


def write_demo_config(paths: DemoPaths, config: DemoConfig) -> None:
    """Persist config to ${HYPERMEDIA_DEMO_HOME}/config/demo.json."""

    payload = config.model_dump(mode="json")
    paths.config_dir.mkdir(parents=True, exist_ok=True)
    paths.config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
