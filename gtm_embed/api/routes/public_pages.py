"""
Public pages - server-rendered HTML run through the page hooks.

Each render begins a RenderContext, collects resource hints per relation
type, then prints head and body-open hook output around the page content.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from gtm_embed.api.deps import get_config, get_page_hooks
from gtm_embed.components.emission import escape_attr
from gtm_embed.config.models import AppConfig
from gtm_embed.shell.hooks.page_hooks import PageHooks

router = APIRouter()

RESOURCE_HINT_RELATIONS = ("dns-prefetch", "preconnect", "prefetch", "prerender")


# --- HTML Rendering ---


def render_page(hooks: PageHooks, title: str, path: str = "/", body_content: str = "") -> str:
    """
    Render a complete HTML page through the hooks.

    Returns the page with resource hints and head output inside <head> and
    body-open output immediately after <body>.
    """
    ctx = hooks.begin_render(path)

    hint_parts: list[str] = []
    for relation in RESOURCE_HINT_RELATIONS:
        for url in hooks.collect_resource_hints(relation, ctx):
            hint_parts.append(f'<link rel="{relation}" href="{escape_attr(url)}" />')
    hints_html = "\n    ".join(hint_parts)

    head_html = hooks.render_head(ctx)
    body_open_html = hooks.render_body_open(ctx)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{escape_attr(title)}</title>
    {hints_html}
{head_html}</head>
<body>
{body_open_html}    {body_content}
</body>
</html>"""


# --- Endpoints ---


@router.get("/", response_class=HTMLResponse)
def home_page(
    request: Request,
    hooks: PageHooks = Depends(get_page_hooks),
    config: AppConfig = Depends(get_config),
) -> HTMLResponse:
    """Public home page."""
    body = f"<main><h1>{escape_attr(config.site_title)}</h1></main>"
    return HTMLResponse(render_page(hooks, config.site_title, request.url.path, body))
