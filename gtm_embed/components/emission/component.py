"""
Emission component - decides whether and what GTM markup a page gets.

Three hook points consume the same EmissionDecision during a render:
- resource hints: adds a dns-prefetch for the GTM host
- head: the inline bootstrap script
- body open: the <noscript> iframe fallback

Invariants:
- I1: Markup is only produced in production with a non-empty stored ID
- I2: The ID is JS-escaped in the script and URL-encoded in the iframe
- I3: Nothing here raises; a disabled decision yields empty output
"""

from __future__ import annotations

import logging

from ._escape import escape_js, escape_url_component
from .models import EmissionDecision, PageFragments
from .ports import ContainerIdReaderPort, EnvironmentPort

logger = logging.getLogger(__name__)

GTM_HOST = "www.googletagmanager.com"
DNS_PREFETCH_URL = f"//{GTM_HOST}"
DNS_PREFETCH_RELATION = "dns-prefetch"
DATA_LAYER_NAME = "dataLayer"


# --- Policy ---


def decide(
    *,
    store: ContainerIdReaderPort,
    environment: EnvironmentPort,
) -> EmissionDecision:
    """
    Snapshot the collaborators for one render.

    Args:
        store: Read access to the stored container ID.
        environment: Environment classifier.

    Returns:
        EmissionDecision shared by all hook points of the render.
    """
    decision = EmissionDecision(
        container_id=store.get() or "",
        environment=environment.current(),
    )
    logger.debug(
        "GTM emission %s (environment=%s, container_id=%r)",
        "enabled" if decision.enabled else "disabled",
        decision.environment.value,
        decision.container_id,
    )
    return decision


# --- Markup ---


def render_head_fragment(container_id: str) -> str:
    """Inline script that loads gtm.js for an accepted container ID."""
    return (
        "<script>(function(w,d,s,l,i){w[l]=w[l]||[];w[l].push({'gtm.start':\n"
        "new Date().getTime(),event:'gtm.js'});var f=d.getElementsByTagName(s)[0],\n"
        "j=d.createElement(s),dl=l!='dataLayer'?'&l='+l:'';j.async=true;j.src=\n"
        f"'https://{GTM_HOST}/gtm.js?id='+i+dl;f.parentNode.insertBefore(j,f);\n"
        f"}})(window,document,'script','{DATA_LAYER_NAME}','{escape_js(container_id)}');"
        "</script>\n"
    )


def render_body_fragment(container_id: str) -> str:
    """Hidden iframe for visitors with JavaScript disabled."""
    return (
        f'<noscript><iframe src="https://{GTM_HOST}/ns.html?id='
        f'{escape_url_component(container_id)}" height="0" width="0" '
        'style="display:none;visibility:hidden"></iframe></noscript>\n'
    )


# --- Hook Callbacks ---


def add_dns_prefetch(
    urls: list[str],
    relation_type: str,
    decision: EmissionDecision,
) -> list[str]:
    """
    Resource hint filter.

    Appends the GTM host to dns-prefetch hints. Duplicates are left for the
    collector to remove.
    """
    if not decision.enabled:
        return urls

    if relation_type == DNS_PREFETCH_RELATION:
        return [*urls, DNS_PREFETCH_URL]

    return urls


def head_fragment(decision: EmissionDecision) -> str:
    """Head hook output for a render."""
    if not decision.enabled:
        return ""
    return render_head_fragment(decision.container_id)


def body_fragment(decision: EmissionDecision) -> str:
    """Body-open hook output for a render."""
    if not decision.enabled:
        return ""
    return render_body_fragment(decision.container_id)


def run(decision: EmissionDecision) -> PageFragments:
    """
    Main entry point for the emission component.

    Produces every fragment for one render from a single decision.
    """
    return PageFragments(
        resource_hints=tuple(add_dns_prefetch([], DNS_PREFETCH_RELATION, decision)),
        head=head_fragment(decision),
        body_open=body_fragment(decision),
    )
