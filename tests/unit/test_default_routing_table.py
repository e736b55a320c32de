from __future__ import annotations

import pytest

from landcomp.apps.runtime_support import build_catalog, build_router
from landcomp.core.config.loader import load_app_config
from landcomp.core.orchestrator.decisions import OutOfScopeDecision, RoutedDecision


@pytest.fixture
def cfg(monkeypatch):
    for name in ("LANDCOMP_CONFIG_FILE", "LANDCOMP_LANGUAGE", "LANDCOMP_DEFAULT_AGENT"):
        monkeypatch.delenv(name, raising=False)
    return load_app_config()


@pytest.fixture
def router(cfg):
    return build_router(cfg)


def test_packaged_tables_are_consistent_with_catalog(router):
    assert router.config_issues == []
    assert router.scoring_order == ("gardener", "landscape_designer", "builder", "ecologist")


def test_rose_is_an_exact_gardener_match(router):
    decision = router.route("роза")
    assert isinstance(decision, RoutedDecision)
    assert decision.agent_id == "gardener"
    assert decision.scores["gardener"] == 3
    assert decision.confidence == 0.7
    assert decision.agent.localized_name("ru") == "Садовод"


@pytest.mark.parametrize(
    ("query", "agent_id", "score"),
    [
        ("house foundation", "builder", 4),
        ("compost and rainwater", "ecologist", 4),
        ("landscape design for my plot", "landscape_designer", 5),
        ("Фундамент", "builder", 3),
    ],
)
def test_queries_reach_their_specialist(router, query, agent_id, score):
    decision = router.route(query)
    assert isinstance(decision, RoutedDecision)
    assert decision.agent_id == agent_id
    assert decision.scores[agent_id] == score


def test_unmatched_query_defaults_to_gardener(router):
    decision = router.route("hello there")
    assert isinstance(decision, RoutedDecision)
    assert decision.agent_id == "gardener"
    assert decision.confidence == 0.3
    assert set(decision.scores.values()) == {0}


def test_single_weak_match_defaults_to_gardener(router):
    decision = router.route("what about a nice gazebo idea")
    assert decision.agent_id == "gardener"
    assert decision.scores["landscape_designer"] == 1
    assert decision.confidence == 0.5


def test_out_of_scope_terms_reject_even_gardening_queries(router, cfg):
    decision = router.route("лечение роз")
    assert isinstance(decision, OutOfScopeDecision)
    assert decision.message == cfg.routing.out_of_scope_message("ru")

    assert isinstance(router.route("Help me write Python code for my garden"), OutOfScopeDecision)


def test_english_message_when_built_for_english(cfg):
    router = build_router(cfg, catalog=build_catalog(cfg), language="en")
    decision = router.route("best bank for a mortgage")
    assert isinstance(decision, OutOfScopeDecision)
    assert decision.message.startswith("Sorry")
