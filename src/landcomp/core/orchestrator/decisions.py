from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from landcomp.core.agents.catalog import AgentProfile


@dataclass(slots=True, frozen=True)
class RoutingQuery:
    original: str
    normalized: str

    @classmethod
    def from_text(cls, text: str | None) -> RoutingQuery:
        original = text or ""
        return cls(original=original, normalized=original.lower().strip())


@dataclass(slots=True, frozen=True)
class RoutedDecision:
    agent_id: str
    agent: AgentProfile
    confidence: float
    scores: Mapping[str, int]

    is_out_of_scope = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "routed",
            "agent_id": self.agent_id,
            "confidence": self.confidence,
            "scores": dict(self.scores),
        }


@dataclass(slots=True, frozen=True)
class OutOfScopeDecision:
    message: str

    is_out_of_scope = True

    def to_dict(self) -> dict[str, Any]:
        return {"status": "out_of_scope", "message": self.message}


RoutingDecision = Union[RoutedDecision, OutOfScopeDecision]


def freeze_scores(scores: Mapping[str, int]) -> Mapping[str, int]:
    return MappingProxyType(dict(scores))
