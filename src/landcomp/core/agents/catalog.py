from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field


class AgentLocalization(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None
    system_prompt: str | None = None
    quick_start_suggestions: tuple[str, ...] | None = None


class AgentProfile(BaseModel):
    """Display metadata for one specialist agent.

    The base fields hold the English text; ``localized`` carries per-language
    overrides keyed by language code.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    icon: str = "chat"
    primary_color: str = "#4CAF50"
    system_prompt: str = ""
    quick_start_suggestions: tuple[str, ...] = ()
    expertise_areas: tuple[str, ...] = ()
    is_active: bool = True
    localized: dict[str, AgentLocalization] = Field(default_factory=dict)

    def _override(self, language: str) -> AgentLocalization | None:
        return self.localized.get(language.lower()) if language else None

    def localized_name(self, language: str) -> str:
        override = self._override(language)
        return override.name if override and override.name else self.name

    def localized_description(self, language: str) -> str:
        override = self._override(language)
        return override.description if override and override.description else self.description

    def localized_system_prompt(self, language: str) -> str:
        override = self._override(language)
        return override.system_prompt if override and override.system_prompt else self.system_prompt

    def localized_quick_start_suggestions(self, language: str) -> list[str]:
        override = self._override(language)
        if override and override.quick_start_suggestions:
            return list(override.quick_start_suggestions)
        return list(self.quick_start_suggestions)

    def summary(self, language: str = "en") -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.localized_name(language),
            "description": self.localized_description(language),
            "icon": self.icon,
            "primary_color": self.primary_color,
            "is_active": self.is_active,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AgentProfile):
            return NotImplemented
        return other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)


class AgentCatalog:
    """Read-only registry of agent profiles in a fixed enumeration order."""

    def __init__(self, agents: Iterable[AgentProfile], *, default_agent_id: str | None = None) -> None:
        self._agents: dict[str, AgentProfile] = {}
        for agent in agents:
            if agent.id in self._agents:
                raise ValueError(f"duplicate agent id in catalog: {agent.id}")
            self._agents[agent.id] = agent
        self._default_agent_id = default_agent_id

    def resolve(self, agent_id: str) -> AgentProfile | None:
        return self._agents.get(agent_id)

    def list_agent_ids(self) -> list[str]:
        return list(self._agents)

    def list_agents(self, *, active_only: bool = False) -> list[AgentProfile]:
        agents = list(self._agents.values())
        if active_only:
            agents = [a for a in agents if a.is_active]
        return agents

    def default_agent(self) -> AgentProfile | None:
        if self._default_agent_id is not None:
            return self.resolve(self._default_agent_id)
        agents = self.list_agents()
        return agents[0] if agents else None

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __len__(self) -> int:
        return len(self._agents)
