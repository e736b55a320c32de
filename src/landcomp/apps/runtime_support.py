from __future__ import annotations

from dataclasses import dataclass

from landcomp.core.agents.catalog import AgentCatalog
from landcomp.core.config.loader import load_app_config
from landcomp.core.config.schema import AppConfig
from landcomp.core.orchestrator.router import QueryRouter
from landcomp.core.telemetry.logging import configure_logging, get_logger


@dataclass(slots=True)
class RoutingRuntime:
    cfg: AppConfig
    language: str
    catalog: AgentCatalog
    router: QueryRouter


def build_catalog(cfg: AppConfig) -> AgentCatalog:
    return AgentCatalog(cfg.agents, default_agent_id=cfg.routing.default_agent)


def build_router(cfg: AppConfig, *, catalog: AgentCatalog | None = None, language: str | None = None) -> QueryRouter:
    lang = language or cfg.language
    return QueryRouter(
        agent_keywords=cfg.routing.agent_keywords,
        out_of_scope_terms=cfg.routing.out_of_scope_terms,
        catalog=catalog if catalog is not None else build_catalog(cfg),
        default_agent_id=cfg.routing.default_agent,
        out_of_scope_message=cfg.routing.out_of_scope_message(lang),
        logger=get_logger("landcomp.router"),
    )


def build_routing_runtime(config_path: str | None = None, language: str | None = None) -> RoutingRuntime:
    cfg = load_app_config(instance_path=config_path)
    configure_logging(cfg.telemetry.log_level, cfg.telemetry.json_logs)
    lang = language or cfg.language
    catalog = build_catalog(cfg)
    router = build_router(cfg, catalog=catalog, language=lang)
    return RoutingRuntime(cfg=cfg, language=lang, catalog=catalog, router=router)
