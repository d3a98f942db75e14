from __future__ import annotations

from starlette.datastructures import Headers

from hypermedia_demo.config import EnhancementConfig
from hypermedia_demo.enhancement import is_enhanced_client, vary_header


def test_htmx_marker_detected_case_insensitively() -> None:
    cfg = EnhancementConfig()
    assert is_enhanced_client({"hx-request": "TRUE"}, cfg)
    assert is_enhanced_client(Headers({"HX-Request": "true"}), cfg)


def test_htmx_marker_requires_expected_value() -> None:
    cfg = EnhancementConfig()
    assert not is_enhanced_client({"HX-Request": "false"}, cfg)
    assert not is_enhanced_client({"HX-Request": ""}, cfg)


def test_unpoly_marker_accepts_any_value() -> None:
    cfg = EnhancementConfig()
    assert is_enhanced_client({"X-Up-Target": "#content"}, cfg)
    assert not is_enhanced_client({"X-Up-Target": "  "}, cfg)


def test_plain_client_is_not_enhanced() -> None:
    assert not is_enhanced_client({"Accept": "text/html"}, EnhancementConfig())


def test_custom_markers_replace_defaults() -> None:
    cfg = EnhancementConfig(markers={"Turbo-Frame": None})
    assert is_enhanced_client({"Turbo-Frame": "content"}, cfg)
    assert not is_enhanced_client({"HX-Request": "true"}, cfg)


def test_vary_header_lists_marker_headers() -> None:
    assert vary_header(EnhancementConfig()) == "HX-Request, X-Up-Target"
