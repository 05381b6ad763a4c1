"""
PageHooks - render-time extension points for public pages.

Three points are exposed while a page is rendered:
- resource hints: filters that receive and return the URL list for a relation type
- head: actions whose output is printed inside <head>
- body open: actions whose output is printed right after <body>

Callbacks run in ascending priority order, registration order breaking ties.
Every callback of a render receives the same RenderContext; start-of-render
callbacks can stash per-request state there for the others to read.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

F = TypeVar("F", bound=Callable[..., Any])


# --- Render Context ---


@dataclass
class RenderContext:
    """State for a single page render."""

    path: str = "/"
    state: dict[str, Any] = field(default_factory=dict)


RenderStartCallback = Callable[[RenderContext], None]
ResourceHintFilter = Callable[[list[str], str, RenderContext], list[str]]
FragmentAction = Callable[[RenderContext], str]


@dataclass
class _Registration(Generic[F]):
    callback: F
    priority: int
    seq: int


# --- Registry ---


class PageHooks:
    """Registry of page render callbacks."""

    def __init__(self) -> None:
        self._seq = 0
        self._render_start: list[_Registration[RenderStartCallback]] = []
        self._resource_hints: list[_Registration[ResourceHintFilter]] = []
        self._head: list[_Registration[FragmentAction]] = []
        self._body_open: list[_Registration[FragmentAction]] = []

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    @staticmethod
    def _ordered(regs: list[_Registration[F]]) -> list[F]:
        return [r.callback for r in sorted(regs, key=lambda r: (r.priority, r.seq))]

    # Registration

    def on_render_start(
        self, callback: RenderStartCallback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._render_start.append(_Registration(callback, priority, self._next_seq()))

    def add_resource_hint_filter(
        self, callback: ResourceHintFilter, priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._resource_hints.append(_Registration(callback, priority, self._next_seq()))

    def add_head_action(self, callback: FragmentAction, priority: int = DEFAULT_PRIORITY) -> None:
        self._head.append(_Registration(callback, priority, self._next_seq()))

    def add_body_open_action(
        self, callback: FragmentAction, priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._body_open.append(_Registration(callback, priority, self._next_seq()))

    def clear(self) -> None:
        self._render_start.clear()
        self._resource_hints.clear()
        self._head.clear()
        self._body_open.clear()

    # Rendering

    def begin_render(self, path: str = "/") -> RenderContext:
        """Create the context for a render and run start-of-render callbacks."""
        ctx = RenderContext(path=path)
        for callback in self._ordered(self._render_start):
            callback(ctx)
        return ctx

    def collect_resource_hints(
        self,
        relation_type: str,
        ctx: RenderContext,
        urls: list[str] | None = None,
    ) -> list[str]:
        """
        Run resource hint filters for a relation type.

        Returns the URLs with duplicates removed, first occurrence kept.
        """
        collected = list(urls or [])
        for callback in self._ordered(self._resource_hints):
            collected = callback(collected, relation_type, ctx)

        seen: set[str] = set()
        unique: list[str] = []
        for url in collected:
            if url not in seen:
                seen.add(url)
                unique.append(url)
        return unique

    def render_head(self, ctx: RenderContext) -> str:
        return "".join(callback(ctx) for callback in self._ordered(self._head))

    def render_body_open(self, ctx: RenderContext) -> str:
        return "".join(callback(ctx) for callback in self._ordered(self._body_open))
