"""
Bootstrap - wires the GTM emission policy into the page hooks.

This is the composition root for rendering: one start-of-render callback
takes the emission decision, and the three output hooks read it back from
the render context.
"""

from __future__ import annotations

import logging

from gtm_embed.components.emission import (
    ContainerIdReaderPort,
    EmissionDecision,
    EnvironmentPort,
    add_dns_prefetch,
    body_fragment,
    decide,
    head_fragment,
)
from gtm_embed.shell.hooks.page_hooks import PageHooks, RenderContext

logger = logging.getLogger(__name__)

DECISION_KEY = "gtm.decision"

# Print the body fallback before anything else that hooks body open.
BODY_OPEN_PRIORITY = 1


def get_decision(ctx: RenderContext) -> EmissionDecision | None:
    """Decision taken for this render, if the hooks were registered."""
    return ctx.state.get(DECISION_KEY)


def register(
    hooks: PageHooks,
    *,
    store: ContainerIdReaderPort,
    environment: EnvironmentPort,
) -> None:
    """
    Register GTM callbacks on a PageHooks registry.

    Args:
        hooks: Registry the public pages render through.
        store: Read access to the stored container ID.
        environment: Environment classifier.
    """

    def _take_decision(ctx: RenderContext) -> None:
        ctx.state[DECISION_KEY] = decide(store=store, environment=environment)

    def _resource_hints(urls: list[str], relation_type: str, ctx: RenderContext) -> list[str]:
        decision = get_decision(ctx)
        if decision is None:
            return urls
        return add_dns_prefetch(urls, relation_type, decision)

    def _head(ctx: RenderContext) -> str:
        decision = get_decision(ctx)
        return head_fragment(decision) if decision is not None else ""

    def _body_open(ctx: RenderContext) -> str:
        decision = get_decision(ctx)
        return body_fragment(decision) if decision is not None else ""

    hooks.on_render_start(_take_decision)
    hooks.add_resource_hint_filter(_resource_hints)
    hooks.add_head_action(_head)
    hooks.add_body_open_action(_body_open, priority=BODY_OPEN_PRIORITY)
    logger.debug("GTM page hooks registered")
