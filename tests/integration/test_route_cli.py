from __future__ import annotations

import json

import pytest

from landcomp.apps import route_cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("LANDCOMP_CONFIG_FILE", "LANDCOMP_LANGUAGE", "LANDCOMP_DEFAULT_AGENT"):
        monkeypatch.delenv(name, raising=False)


def _last_json(out: str) -> dict:
    return json.loads(out.strip().splitlines()[-1])


def test_route_prints_decision_json(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["landcomp-route", "роза"])
    rc = route_cli.main()
    payload = _last_json(capsys.readouterr().out)
    assert rc == 0
    assert payload["status"] == "routed"
    assert payload["agent_id"] == "gardener"
    assert payload["confidence"] == 0.7
    assert payload["scores"]["gardener"] == 3
    assert payload["agent"]["name"] == "Садовод"


def test_route_out_of_scope_in_english(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["landcomp-route", "--language", "en", "find me a good doctor"])
    rc = route_cli.main()
    payload = _last_json(capsys.readouterr().out)
    assert rc == 0
    assert payload["status"] == "out_of_scope"
    assert payload["message"].startswith("Sorry")


def test_list_agents(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["landcomp-route", "--list-agents", "--language", "en"])
    rc = route_cli.main()
    out = capsys.readouterr().out
    assert rc == 0
    assert "agents:" in out
    assert "- gardener: name=Gardener active=True" in out
    assert "- ecologist:" in out


def test_validate_config_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["landcomp-route", "--validate-config"])
    rc = route_cli.main()
    out = capsys.readouterr().out
    assert rc == 0
    assert "config-valid instance=landcomp language=ru default_agent=gardener agents=4" in out


def test_validate_config_invalid(monkeypatch, capsys, tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("routing:\n  default_agent: plumber\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["landcomp-route", "--validate-config", "--config", str(bad)])
    rc = route_cli.main()
    out = capsys.readouterr().out
    assert rc == 1
    assert "config-invalid" in out


def test_validate_config_reports_catalog_issues(monkeypatch, capsys, tmp_path):
    instance = tmp_path / "instance.yaml"
    instance.write_text("routing:\n  agent_keywords:\n    arborist: [stump]\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["landcomp-route", "--validate-config", "--config", str(instance), "stump"])
    rc = route_cli.main()
    out = capsys.readouterr().out
    assert rc == 0
    assert "config-issues:" in out
    assert "arborist" in out
    assert _last_json(out)["status"] == "out_of_scope"


def test_no_arguments_prints_hint(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["landcomp-route"])
    rc = route_cli.main()
    assert rc == 0
    assert "route-ready" in capsys.readouterr().out
