from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from landcomp.core.agents.catalog import AgentCatalog
from landcomp.core.orchestrator.decisions import (
    OutOfScopeDecision,
    RoutedDecision,
    RoutingDecision,
    RoutingQuery,
    freeze_scores,
)
from landcomp.core.runtime.errors import CONFIGURATION_INCONSISTENCY, find_catalog_issues
from landcomp.core.telemetry.logging import get_logger

EXACT_MATCH_POINTS = 3
EDGE_MATCH_POINTS = 2
CONTAINS_MATCH_POINTS = 1
MIN_ROUTING_SCORE = 2


def score_keywords(query: str, keywords: Iterable[str]) -> int:
    score = 0
    for keyword in keywords:
        if keyword not in query:
            continue
        if query == keyword:
            score += EXACT_MATCH_POINTS
        elif query.startswith(keyword) or query.endswith(keyword):
            score += EDGE_MATCH_POINTS
        else:
            score += CONTAINS_MATCH_POINTS
    return score


def confidence_for_score(score: int) -> float:
    if score >= 5:
        return 0.9
    if score >= 3:
        return 0.7
    if score >= 1:
        return 0.5
    return 0.3


def normalize_terms(terms: Iterable[str], where: str) -> list[str]:
    out: list[str] = []
    for term in terms:
        normalized = str(term).strip().lower()
        if not normalized:
            raise ValueError(f"empty routing term in {where}")
        out.append(normalized)
    return out


def first_matching_term(query: str, terms: Iterable[str]) -> str | None:
    for term in terms:
        if term in query:
            return term
    return None


class QueryRouter:
    """Pick the specialist agent for a free-text query.

    Holds only read-only tables, so one instance can serve concurrent callers.
    Terms are lowercased and stripped on construction; an empty term raises
    ``ValueError``. ``route`` never raises: unknown agents degrade to an
    out-of-scope decision.
    """

    def __init__(
        self,
        *,
        agent_keywords: Mapping[str, Iterable[str]],
        out_of_scope_terms: Iterable[str],
        catalog: AgentCatalog,
        default_agent_id: str,
        out_of_scope_message: str,
        logger=None,
    ) -> None:
        keywords = {
            agent_id: tuple(normalize_terms(terms, f"agent_keywords.{agent_id}")) for agent_id, terms in agent_keywords.items()
        }
        self.agent_keywords: Mapping[str, tuple[str, ...]] = MappingProxyType(keywords)
        self.out_of_scope_terms: tuple[str, ...] = tuple(normalize_terms(out_of_scope_terms, "out_of_scope_terms"))
        self.catalog = catalog
        self.default_agent_id = default_agent_id
        self.out_of_scope_message = out_of_scope_message
        self.logger = logger or get_logger("landcomp.router")

        catalog_order = [a for a in catalog.list_agent_ids() if a in keywords]
        self.scoring_order: tuple[str, ...] = tuple(catalog_order + [a for a in keywords if a not in catalog_order])

        self.config_issues = find_catalog_issues(keywords, default_agent_id, catalog.resolve)
        for issue in self.config_issues:
            self.logger.warning(
                "routing_config_inconsistency",
                category=issue.category,
                component=issue.component,
                agent_id=issue.agent_id,
            )

    def score(self, query: RoutingQuery) -> dict[str, int]:
        return {agent_id: score_keywords(query.normalized, self.agent_keywords[agent_id]) for agent_id in self.scoring_order}

    def route(self, query: str | None) -> RoutingDecision:
        q = RoutingQuery.from_text(query)

        matched_term = first_matching_term(q.normalized, self.out_of_scope_terms)
        if matched_term is not None:
            self.logger.debug("query_out_of_scope", matched_term=matched_term)
            return OutOfScopeDecision(message=self.out_of_scope_message)

        scores = self.score(q)

        selected_id: str | None = None
        max_score = 0
        for agent_id, value in scores.items():
            if value > max_score:
                max_score = value
                selected_id = agent_id

        if max_score < MIN_ROUTING_SCORE:
            selected_id = self.default_agent_id

        agent = self.catalog.resolve(selected_id)
        if agent is None:
            self.logger.warning(
                "routing_config_inconsistency",
                category=CONFIGURATION_INCONSISTENCY,
                component="catalog_resolve",
                agent_id=selected_id,
            )
            return OutOfScopeDecision(message=self.out_of_scope_message)

        confidence = confidence_for_score(max_score)
        self.logger.debug("query_routed", agent_id=selected_id, score=max_score, confidence=confidence)
        return RoutedDecision(
            agent_id=selected_id,
            agent=agent,
            confidence=confidence,
            scores=freeze_scores(scores),
        )
