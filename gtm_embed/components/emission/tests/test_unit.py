"""
Emission component unit tests.

Tests the emission predicate, per-render decisions and the generated markup.
"""

from __future__ import annotations

import pytest

from gtm_embed.components.emission import (
    DNS_PREFETCH_URL,
    EmissionDecision,
    add_dns_prefetch,
    body_fragment,
    decide,
    escape_js,
    escape_url_component,
    head_fragment,
    render_body_fragment,
    render_head_fragment,
    run,
    should_emit,
)
from gtm_embed.domain.entities import EnvironmentKind

# --- Fakes ---


class FakeStore:
    def __init__(self, value: str = "") -> None:
        self.value = value
        self.reads = 0

    def get(self) -> str:
        self.reads += 1
        return self.value


class FakeEnvironment:
    def __init__(self, kind: EnvironmentKind) -> None:
        self.kind = kind
        self.calls = 0

    def current(self) -> EnvironmentKind:
        self.calls += 1
        return self.kind


@pytest.fixture
def enabled() -> EmissionDecision:
    return EmissionDecision(container_id="GTM-XXXXXXX", environment=EnvironmentKind.PRODUCTION)


@pytest.fixture
def disabled() -> EmissionDecision:
    return EmissionDecision(container_id="GTM-XXXXXXX", environment=EnvironmentKind.OTHER)


# --- Predicate ---


class TestShouldEmit:
    def test_empty_id_in_production(self) -> None:
        assert should_emit("", EnvironmentKind.PRODUCTION) is False

    def test_id_outside_production(self) -> None:
        assert should_emit("GTM-ABC123", EnvironmentKind.OTHER) is False

    def test_id_in_production(self) -> None:
        assert should_emit("GTM-ABC123", EnvironmentKind.PRODUCTION) is True

    def test_decision_matches_predicate(self) -> None:
        for kind in EnvironmentKind:
            for value in ("", "GTM-A1"):
                decision = EmissionDecision(container_id=value, environment=kind)
                assert decision.enabled == should_emit(value, kind)

    def test_decision_delegates_to_predicate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Every hook point reads `enabled`, so it must go through should_emit."""
        from gtm_embed.components.emission import models

        calls: list[tuple[str, EnvironmentKind]] = []

        def fake_should_emit(stored_value: str, environment: EnvironmentKind) -> bool:
            calls.append((stored_value, environment))
            return False

        monkeypatch.setattr(models, "should_emit", fake_should_emit)
        decision = EmissionDecision(container_id="GTM-A1", environment=EnvironmentKind.PRODUCTION)

        assert decision.enabled is False
        assert calls == [("GTM-A1", EnvironmentKind.PRODUCTION)]
        assert head_fragment(decision) == ""
        assert body_fragment(decision) == ""


class TestDecide:
    def test_reads_each_collaborator_once(self) -> None:
        store = FakeStore("GTM-ONCE")
        env = FakeEnvironment(EnvironmentKind.PRODUCTION)

        decision = decide(store=store, environment=env)

        assert decision.container_id == "GTM-ONCE"
        assert decision.enabled
        assert store.reads == 1
        assert env.calls == 1

    def test_missing_value_treated_as_empty(self) -> None:
        store = FakeStore()
        store.value = None  # type: ignore[assignment]

        decision = decide(store=store, environment=FakeEnvironment(EnvironmentKind.PRODUCTION))

        assert decision.container_id == ""
        assert not decision.enabled


# --- Markup ---


class TestHeadFragment:
    def test_contains_loader_and_id(self, enabled: EmissionDecision) -> None:
        html = head_fragment(enabled)

        assert html.startswith("<script>")
        assert "https://www.googletagmanager.com/gtm.js?id=" in html
        assert "'dataLayer','GTM-XXXXXXX')" in html
        assert "'gtm.start'" in html
        assert "event:'gtm.js'" in html
        assert html.rstrip().endswith("</script>")

    def test_disabled_is_empty(self, disabled: EmissionDecision) -> None:
        assert head_fragment(disabled) == ""

    def test_id_is_js_escaped(self) -> None:
        html = render_head_fragment("x');alert(1)</script>")

        assert "</script>\n" == html[-10:]
        assert "alert(1)&lt;/script&gt;" in html
        assert "x\\');" in html


class TestBodyFragment:
    def test_contains_iframe(self, enabled: EmissionDecision) -> None:
        html = body_fragment(enabled)

        assert html.startswith("<noscript><iframe")
        assert 'src="https://www.googletagmanager.com/ns.html?id=GTM-XXXXXXX"' in html
        assert 'height="0" width="0"' in html
        assert "display:none;visibility:hidden" in html

    def test_disabled_is_empty(self, disabled: EmissionDecision) -> None:
        assert body_fragment(disabled) == ""

    def test_id_is_url_encoded(self) -> None:
        html = render_body_fragment('a"b c&d')

        assert "ns.html?id=a%22b%20c%26d" in html


# --- Resource Hints ---


class TestDnsPrefetch:
    def test_adds_host_for_dns_prefetch(self, enabled: EmissionDecision) -> None:
        urls = add_dns_prefetch(["//fonts.example"], "dns-prefetch", enabled)

        assert urls == ["//fonts.example", DNS_PREFETCH_URL]
        assert "www.googletagmanager.com" in DNS_PREFETCH_URL

    def test_other_relation_untouched(self, enabled: EmissionDecision) -> None:
        assert add_dns_prefetch(["//a"], "preconnect", enabled) == ["//a"]

    def test_disabled_untouched(self, disabled: EmissionDecision) -> None:
        assert add_dns_prefetch([], "dns-prefetch", disabled) == []

    def test_does_not_mutate_input(self, enabled: EmissionDecision) -> None:
        original: list[str] = []
        add_dns_prefetch(original, "dns-prefetch", enabled)
        assert original == []


# --- Escaping ---


class TestEscaping:
    def test_escape_js(self) -> None:
        assert escape_js("a'b") == "a\\'b"
        assert escape_js('a"b') == "a&quot;b"
        assert escape_js("<&>") == "&lt;&amp;&gt;"
        assert escape_js("a\\b") == "a\\\\b"
        assert escape_js("a\r\nb") == "a\\nb"

    def test_escape_url_component(self) -> None:
        assert escape_url_component("GTM-ABC") == "GTM-ABC"
        assert escape_url_component("a/b?c=d") == "a%2Fb%3Fc%3Dd"


# --- Entry Point ---


class TestRun:
    def test_production_produces_all_fragments(self, enabled: EmissionDecision) -> None:
        fragments = run(enabled)

        assert fragments.resource_hints == (DNS_PREFETCH_URL,)
        assert "GTM-XXXXXXX" in fragments.head
        assert "ns.html?id=GTM-XXXXXXX" in fragments.body_open

    def test_other_environment_produces_nothing(self, disabled: EmissionDecision) -> None:
        fragments = run(disabled)

        assert fragments.resource_hints == ()
        assert fragments.head == ""
        assert fragments.body_open == ""
