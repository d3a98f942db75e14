"""Choose what to render for the home and greet pages.

Every operation here is independent of HTTP: the caller decides whether the
client is enhancement-aware and passes that in as a plain boolean. The result
is a :class:`Rendering`, pairing the target to render with the context it is
rendered against.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Final

DEFAULT_LAYOUT: Final[str] = "layout.html"
DEFAULT_WELCOME: Final[str] = "Welcome to the hypermedia demo"
DEFAULT_NAME: Final[str] = "World"
SALUTATION: Final[str] = "Hello"


@dataclass(frozen=True)
class FullPage:
    template: str
    layout: str = DEFAULT_LAYOUT


@dataclass(frozen=True)
class Fragment:
    template: str
    fragment: str


type RenderTarget = FullPage | Fragment
type RenderContext = dict[str, Any]


@dataclass(frozen=True)
class Rendering:
    target: RenderTarget
    context: RenderContext = field(default_factory=dict)

    @property
    def is_fragment(self) -> bool:
        return isinstance(self.target, Fragment)


@dataclass(frozen=True)
class GreetingRequest:
    name: str = ""

    @classmethod
    def from_form(cls, raw: str | None) -> GreetingRequest:
        # No validation: anything submitted, including nothing, is a name.
        return cls(name=raw if raw is not None else "")


class UnknownFragmentError(LookupError):
    def __init__(self, fragment_id: str) -> None:
        super().__init__(f"Unknown fragment: {fragment_id!r}")
        self.fragment_id = fragment_id


HOME_PAGE: Final[FullPage] = FullPage("index.html")
GREET_PAGE: Final[FullPage] = FullPage("greet.html")
GREET_CONTENT: Final[Fragment] = Fragment("greet.html", "content")

LAZY_FRAGMENTS: Final[dict[str, Fragment]] = {
    "logo": Fragment("fragments.html", "logo"),
}


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now()


def greeting_for(name: str) -> str:
    return f"{SALUTATION} {name}"


def render_home(*, message: str = DEFAULT_WELCOME, now: datetime | None = None) -> Rendering:
    return Rendering(
        target=HOME_PAGE,
        context={"message": message or DEFAULT_WELCOME, "time": _now(now)},
    )


def render_greet_form(
    *, default_name: str = DEFAULT_NAME, now: datetime | None = None
) -> Rendering:
    return Rendering(
        target=GREET_PAGE,
        context={
            "greeting": greeting_for(default_name),
            "time": _now(now),
            "name": default_name,
        },
    )


def submit_greeting(
    name: str | None, is_enhanced_client: bool, *, now: datetime | None = None
) -> Rendering:
    """Greet ``name`` as a full page, or as the ``content`` fragment only.

    The context is built before the target is chosen, so both response shapes
    carry the same greeting, name and time.
    """

    request = GreetingRequest.from_form(name)
    context: RenderContext = {
        "greeting": greeting_for(request.name),
        "time": _now(now),
        "name": request.name,
    }
    target: RenderTarget = GREET_CONTENT if is_enhanced_client else GREET_PAGE
    return Rendering(target=target, context=context)


def render_lazy_fragment(fragment_id: str) -> Rendering:
    target = LAZY_FRAGMENTS.get(fragment_id)
    if target is None:
        raise UnknownFragmentError(fragment_id)
    return Rendering(target=target)
