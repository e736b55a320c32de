"""Keyword scoring router and its decision types."""

from landcomp.core.orchestrator.decisions import OutOfScopeDecision, RoutedDecision, RoutingDecision, RoutingQuery
from landcomp.core.orchestrator.router import QueryRouter

__all__ = ["QueryRouter", "RoutingQuery", "RoutingDecision", "RoutedDecision", "OutOfScopeDecision"]
