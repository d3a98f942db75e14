from __future__ import annotations

import logging

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from hypermedia_demo.config import DemoConfig
from hypermedia_demo.enhancement import is_enhanced_client, vary_header
from hypermedia_demo.greeting import (
    UnknownFragmentError,
    render_greet_form,
    render_home,
    render_lazy_fragment,
    submit_greeting,
)
from hypermedia_demo.ui.rendering import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ui"])


def _get_config(request: Request) -> DemoConfig:
    config = getattr(request.app.state, "demo_config", None)
    if config is None:
        raise HTTPException(status_code=500, detail="Config not initialized")
    return config


@router.get("/", response_class=HTMLResponse)
async def ui_home(request: Request) -> Response:
    config = _get_config(request)
    return render(request, render_home(message=config.greeting.welcome_message))


@router.get("/greet", response_class=HTMLResponse)
async def ui_greet_form(request: Request) -> Response:
    config = _get_config(request)
    return render(request, render_greet_form(default_name=config.greeting.default_name))


@router.post("/greet", response_class=HTMLResponse)
async def ui_greet_submit(request: Request, name: str | None = Form(default=None)) -> Response:
    config = _get_config(request)
    enhanced = is_enhanced_client(request.headers, config.enhancement)

    rendering = submit_greeting(name, enhanced)
    logger.debug("Greeting rendered as %s", rendering.target)

    return render(request, rendering, headers={"Vary": vary_header(config.enhancement)})


@router.get("/logo", response_class=HTMLResponse)
async def ui_logo(request: Request) -> Response:
    return render(request, render_lazy_fragment("logo"))


@router.get("/fragments/{fragment_id}", response_class=HTMLResponse)
async def ui_lazy_fragment(request: Request, fragment_id: str) -> Response:
    try:
        rendering = render_lazy_fragment(fragment_id)
    except UnknownFragmentError as exc:
        raise HTTPException(status_code=404, detail="Fragment not found") from exc
    return render(request, rendering)
