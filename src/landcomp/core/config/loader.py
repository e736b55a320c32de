from __future__ import annotations

import os
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from landcomp.core.config.schema import AppConfig


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _parse_yaml(text: str, source: str) -> dict[str, Any]:
    content = yaml.safe_load(text)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config file must contain a mapping: {source}")
    return content


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    return _parse_yaml(path.read_text(encoding="utf-8"), str(path))


def _load_packaged_defaults() -> dict[str, Any]:
    text = resources.files("landcomp.core.config").joinpath("defaults.yaml").read_text(encoding="utf-8")
    return _parse_yaml(text, "landcomp/core/config/defaults.yaml")


def load_app_config(
    defaults_path: str | Path | None = None,
    instance_path: str | Path | None = None,
) -> AppConfig:
    try:
        defaults = _load_yaml(Path(defaults_path)) if defaults_path is not None else _load_packaged_defaults()
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid LandComp configuration: {exc}") from exc

    explicit_instance = instance_path or os.getenv("LANDCOMP_CONFIG_FILE")
    try:
        instance = _load_yaml(Path(explicit_instance)) if explicit_instance else {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid LandComp configuration: {exc}") from exc

    merged = _deep_merge(defaults, instance)

    env_language = os.getenv("LANDCOMP_LANGUAGE")
    if env_language:
        merged["language"] = env_language

    env_default_agent = os.getenv("LANDCOMP_DEFAULT_AGENT")
    if env_default_agent:
        merged = _deep_merge(merged, {"routing": {"default_agent": env_default_agent}})

    try:
        return AppConfig.model_validate(merged)
    except ValidationError as exc:
        raise ValueError(f"Invalid LandComp configuration: {exc}") from exc
