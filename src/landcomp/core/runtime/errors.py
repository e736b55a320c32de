from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

CONFIGURATION_INCONSISTENCY = "configuration_inconsistency"


@dataclass(slots=True, frozen=True)
class ConfigIssue:
    category: str
    component: str
    agent_id: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "category": self.category,
            "component": self.component,
            "agent_id": self.agent_id,
            "message": self.message,
        }


def find_catalog_issues(
    keyword_agent_ids: Iterable[str],
    default_agent: str,
    resolve: Callable[[str], Any | None],
) -> list[ConfigIssue]:
    """Report agent identifiers the catalog cannot resolve.

    These never fail a routing call; the router degrades to an out-of-scope
    decision when it lands on one of them.
    """
    issues: list[ConfigIssue] = []
    for agent_id in keyword_agent_ids:
        if resolve(agent_id) is None:
            issues.append(
                ConfigIssue(
                    category=CONFIGURATION_INCONSISTENCY,
                    component="keyword_table",
                    agent_id=agent_id,
                    message=f"keyword table agent '{agent_id}' is missing from the agent catalog",
                )
            )
    if resolve(default_agent) is None:
        issues.append(
            ConfigIssue(
                category=CONFIGURATION_INCONSISTENCY,
                component="default_agent",
                agent_id=default_agent,
                message=f"default agent '{default_agent}' is missing from the agent catalog",
            )
        )
    return issues
