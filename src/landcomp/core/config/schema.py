from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from landcomp.core.agents.catalog import AgentProfile
from landcomp.core.orchestrator.router import normalize_terms


class InstanceConfig(BaseModel):
    name: str = "landcomp"


class TelemetryConfig(BaseModel):
    log_level: str = "INFO"
    json_logs: bool = True


class RoutingConfig(BaseModel):
    default_agent: str = "gardener"
    agent_keywords: dict[str, list[str]] = Field(default_factory=dict)
    out_of_scope_terms: list[str] = Field(default_factory=list)
    out_of_scope_messages: dict[str, str] = Field(default_factory=dict)

    @field_validator("agent_keywords")
    @classmethod
    def _normalize_agent_keywords(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return {agent_id: normalize_terms(terms, f"agent_keywords.{agent_id}") for agent_id, terms in value.items()}

    @field_validator("out_of_scope_terms")
    @classmethod
    def _normalize_out_of_scope_terms(cls, value: list[str]) -> list[str]:
        return normalize_terms(value, "out_of_scope_terms")

    def out_of_scope_message(self, language: str) -> str:
        message = self.out_of_scope_messages.get(language.lower())
        if message:
            return message
        if "en" in self.out_of_scope_messages:
            return self.out_of_scope_messages["en"]
        return next(iter(self.out_of_scope_messages.values()), "This question is outside my expertise area.")


class AppConfig(BaseModel):
    instance: InstanceConfig = Field(default_factory=InstanceConfig)
    language: str = "ru"
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    agents: list[AgentProfile] = Field(default_factory=list)

    @model_validator(mode="after")
    def _default_agent_in_catalog(self) -> AppConfig:
        agent_ids = {a.id for a in self.agents}
        if agent_ids and self.routing.default_agent not in agent_ids:
            raise ValueError(f"default_agent '{self.routing.default_agent}' is not a configured agent")
        return self
