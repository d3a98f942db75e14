from __future__ import annotations

from collections.abc import Mapping

from hypermedia_demo.config import EnhancementConfig


def is_enhanced_client(headers: Mapping[str, str], config: EnhancementConfig) -> bool:
    """Return True if any configured marker header is present on the request.

    ``headers`` may be a Starlette ``Headers`` object or a plain dict; lookups
    are case-insensitive either way.
    """

    lowered = {str(k).lower(): str(v) for k, v in headers.items()}
    for header, expected in config.markers.items():
        value = lowered.get(header.lower(), "").strip()
        if not value:
            continue
        if expected is None or value.lower() == expected.strip().lower():
            return True
    return False


def vary_header(config: EnhancementConfig) -> str:
    return ", ".join(config.markers)
