"""
Tests for public page rendering through the page hooks.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gtm_embed.adapters.environment import ConfiguredEnvironment
from gtm_embed.adapters.memory_options import InMemoryOptionStore
from gtm_embed.api.deps import get_config, get_environment, get_option_store
from gtm_embed.api.routes.public_pages import render_page, router
from gtm_embed.config.models import AppConfig
from gtm_embed.shell.hooks.page_hooks import PageHooks


def make_client(
    store: InMemoryOptionStore,
    environment: ConfiguredEnvironment,
    config: AppConfig,
) -> TestClient:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_option_store] = lambda: store
    app.dependency_overrides[get_environment] = lambda: environment
    app.dependency_overrides[get_config] = lambda: config
    return TestClient(app)


class TestRenderPage:
    def test_plain_page(self) -> None:
        html = render_page(PageHooks(), "Hello & Co", body_content="<p>hi</p>")

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Hello &amp; Co</title>" in html
        assert "<p>hi</p>" in html
        assert "googletagmanager" not in html

    def test_hints_rendered_as_links(self) -> None:
        hooks = PageHooks()
        hooks.add_resource_hint_filter(
            lambda urls, rel, ctx: [*urls, "//cdn.example"] if rel == "preconnect" else urls
        )

        html = render_page(hooks, "T")

        assert '<link rel="preconnect" href="//cdn.example" />' in html


class TestHomePage:
    def test_production_page_has_gtm(
        self,
        memory_store: InMemoryOptionStore,
        production_env: ConfiguredEnvironment,
        app_config: AppConfig,
    ) -> None:
        memory_store.set("GTM-XXXXXXX")
        client = make_client(memory_store, production_env, app_config)

        response = client.get("/")

        assert response.status_code == 200
        html = response.text
        assert '<link rel="dns-prefetch" href="//www.googletagmanager.com" />' in html
        assert "'GTM-XXXXXXX'" in html
        assert "ns.html?id=GTM-XXXXXXX" in html
        # script inside head, fallback right after <body>
        head, body = html.split("</head>")
        assert "gtm.js?id=" in head
        assert body.split("<body>\n", 1)[1].startswith("<noscript><iframe")

    def test_staging_page_has_no_gtm(
        self,
        memory_store: InMemoryOptionStore,
        staging_env: ConfiguredEnvironment,
        app_config: AppConfig,
    ) -> None:
        memory_store.set("GTM-XXXXXXX")
        client = make_client(memory_store, staging_env, app_config)

        html = client.get("/").text

        assert "googletagmanager" not in html
        assert "GTM-XXXXXXX" not in html

    def test_unset_id_has_no_gtm(
        self,
        memory_store: InMemoryOptionStore,
        production_env: ConfiguredEnvironment,
        app_config: AppConfig,
    ) -> None:
        client = make_client(memory_store, production_env, app_config)

        html = client.get("/").text

        assert "googletagmanager" not in html
        assert "<h1>Test Site</h1>" in html


@pytest.mark.parametrize("env_type", ["local", "development", "staging"])
def test_non_production_environments_emit_nothing(
    env_type: str, memory_store: InMemoryOptionStore, app_config: AppConfig
) -> None:
    memory_store.set("GTM-ABC")
    client = make_client(memory_store, ConfiguredEnvironment(env_type), app_config)

    assert "googletagmanager" not in client.get("/").text
