"""Agent profiles and the catalog the router resolves against."""

from landcomp.core.agents.catalog import AgentCatalog, AgentLocalization, AgentProfile

__all__ = ["AgentCatalog", "AgentProfile", "AgentLocalization"]
