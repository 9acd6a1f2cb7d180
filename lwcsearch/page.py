"""Prefill a search box from the page URL.

``init_url_search`` only talks to the page through :class:`PageHost` and the
field through :class:`SearchField`, so it runs the same against a real
request (see ``demo.app``) or the in-memory :class:`StaticPage`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol
from urllib.parse import parse_qs, urlsplit

logger = logging.getLogger(__name__)

DEFAULT_PARAM = "q"
DEFAULT_FIELD_ID = "searchInput"
INPUT_EVENT = "input"


@dataclass
class FieldEvent:
    type: str
    target: "SearchField"
    bubbles: bool = False


Listener = Callable[[FieldEvent], None]


class SearchField(Protocol):
    value: str

    def set_value(self, value: str) -> None: ...

    def dispatch(self, event: str, bubbles: bool = False) -> None: ...


class PageHost(Protocol):
    def query_param(self, name: str) -> Optional[str]: ...

    def find_field(self, field_id: str) -> Optional[SearchField]: ...


@dataclass
class InputField:
    id: str
    value: str = ""
    listeners: Dict[str, List[Listener]] = field(default_factory=dict)
    # listeners of the enclosing page, reached by bubbling events
    parent_listeners: Dict[str, List[Listener]] = field(default_factory=dict)

    def add_listener(self, event: str, fn: Listener) -> None:
        self.listeners.setdefault(event, []).append(fn)

    def set_value(self, value: str) -> None:
        self.value = value

    def dispatch(self, event: str, bubbles: bool = False) -> None:
        ev = FieldEvent(event, self, bubbles)
        for fn in list(self.listeners.get(event, [])):
            fn(ev)
        if bubbles:
            for fn in list(self.parent_listeners.get(event, [])):
                fn(ev)


class StaticPage:
    """A page made of a URL and a set of input fields."""

    def __init__(self, url: str = "", fields: Optional[List[InputField]] = None) -> None:
        self.url = url
        self.fields: Dict[str, InputField] = {}
        self.listeners: Dict[str, List[Listener]] = {}
        for f in fields or []:
            self.add_field(f)

    def add_field(self, f: InputField) -> InputField:
        f.parent_listeners = self.listeners
        self.fields[f.id] = f
        return f

    def add_listener(self, event: str, fn: Listener) -> None:
        self.listeners.setdefault(event, []).append(fn)

    def query_param(self, name: str) -> Optional[str]:
        values = parse_qs(urlsplit(self.url).query, keep_blank_values=True).get(name)
        return values[0] if values else None

    def find_field(self, field_id: str) -> Optional[InputField]:
        return self.fields.get(field_id)


def init_url_search(page: PageHost, param: str = DEFAULT_PARAM,
                    field_id: str = DEFAULT_FIELD_ID) -> None:
    q = page.query_param(param)
    if not q:
        return

    box = page.find_field(field_id)
    if box is None:
        logger.debug("?%s=%r given but page has no #%s field", param, q, field_id)
        return
    box.set_value(q)
    box.dispatch(INPUT_EVENT, bubbles=True)
    logger.debug("prefilled #%s with %r", field_id, q)
