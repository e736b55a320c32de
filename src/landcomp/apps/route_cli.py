from __future__ import annotations

import argparse
import json

from landcomp.apps.runtime_support import build_routing_runtime
from landcomp.core.orchestrator.decisions import RoutedDecision


def main() -> int:
    parser = argparse.ArgumentParser(prog="landcomp-route", description="Route a query to a LandComp specialist agent")
    parser.add_argument("query", nargs="?", default=None, help="Query text to route")
    parser.add_argument("--config", default=None, help="Config file path")
    parser.add_argument("--language", default=None, help="Language code for agent names and messages")
    parser.add_argument("--validate-config", action="store_true")
    parser.add_argument("--list-agents", action="store_true")
    args = parser.parse_args()

    try:
        runtime = build_routing_runtime(config_path=args.config, language=args.language)
    except ValueError as exc:
        print(f"config-invalid error={exc}")
        return 1

    did_work = False
    cfg = runtime.cfg

    if args.validate_config:
        did_work = True
        print(
            f"config-valid instance={cfg.instance.name} language={cfg.language} "
            f"default_agent={cfg.routing.default_agent} agents={len(cfg.routing.agent_keywords)}"
        )
        if runtime.router.config_issues:
            print("config-issues:")
            for issue in runtime.router.config_issues:
                print(f"- {issue.component}: {issue.message}")

    if args.list_agents:
        did_work = True
        print("agents:")
        for agent in runtime.catalog.list_agents():
            keywords = runtime.router.agent_keywords.get(agent.id, ())
            print(
                f"- {agent.id}: name={agent.localized_name(runtime.language)} "
                f"active={agent.is_active} keywords={len(keywords)}"
            )

    if args.query is not None:
        did_work = True
        decision = runtime.router.route(args.query)
        payload = decision.to_dict()
        if isinstance(decision, RoutedDecision):
            payload["agent"] = decision.agent.summary(runtime.language)
        print(json.dumps(payload, ensure_ascii=False))

    if not did_work:
        print("route-ready (pass a query or use --list-agents/--validate-config)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
