from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from hypermedia_demo.greeting import Fragment, FullPage, Rendering

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"


def _enhancement_library(request: Request) -> dict[str, Any]:
    app = request.scope.get("app")
    config = getattr(getattr(app, "state", None), "demo_config", None)
    library = config.enhancement.library if config is not None else "htmx"
    return {"enhancement_library": library}


templates = Jinja2Templates(
    directory=str(TEMPLATES_DIR),
    context_processors=[_enhancement_library],
)


class FragmentNotFoundError(LookupError):
    def __init__(self, template: str, fragment: str) -> None:
        super().__init__(f"Template {template!r} has no block named {fragment!r}")
        self.template = template
        self.fragment = fragment


def render_fragment(request: Request, target: Fragment, context: Mapping[str, object]) -> str:
    """Render a single named block of a template, without its layout."""

    template = templates.get_template(target.template)
    block = template.blocks.get(target.fragment)
    if block is None:
        raise FragmentNotFoundError(target.template, target.fragment)

    ctx = template.new_context({**context, "request": request})
    return "".join(block(ctx))


def render(
    request: Request,
    rendering: Rendering,
    *,
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> Response:
    target = rendering.target

    if isinstance(target, Fragment):
        html = render_fragment(request, target, rendering.context)
        return HTMLResponse(html, status_code=status_code, headers=headers)

    if isinstance(target, FullPage):
        # Layout is chosen per target and handed to the template's {% extends %}.
        return templates.TemplateResponse(
            request,
            target.template,
            {**rendering.context, "layout": target.layout},
            status_code=status_code,
            headers=headers,
        )

    raise TypeError(f"Unsupported render target: {target!r}")
