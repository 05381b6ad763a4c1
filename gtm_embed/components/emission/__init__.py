"""
Emission component - GTM markup for page renders.
"""

from ._escape import escape_attr, escape_js, escape_url_component
from .component import (
    DATA_LAYER_NAME,
    DNS_PREFETCH_RELATION,
    DNS_PREFETCH_URL,
    GTM_HOST,
    add_dns_prefetch,
    body_fragment,
    decide,
    head_fragment,
    render_body_fragment,
    render_head_fragment,
    run,
)
from .models import EmissionDecision, PageFragments, should_emit
from .ports import ContainerIdReaderPort, EnvironmentPort

__all__ = [
    # Entry points
    "run",
    "decide",
    "should_emit",
    # Hook callbacks
    "add_dns_prefetch",
    "head_fragment",
    "body_fragment",
    # Markup
    "render_head_fragment",
    "render_body_fragment",
    # Escaping
    "escape_js",
    "escape_url_component",
    "escape_attr",
    # Models
    "EmissionDecision",
    "PageFragments",
    # Ports
    "ContainerIdReaderPort",
    "EnvironmentPort",
    # Constants
    "GTM_HOST",
    "DNS_PREFETCH_URL",
    "DNS_PREFETCH_RELATION",
    "DATA_LAYER_NAME",
]
