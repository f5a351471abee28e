"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pw_strength.config.domain.config import CheckerConfig
from pw_strength.config.domain.observer import ConfigObserver
from pw_strength.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)
from pw_strength.criterion.infrastructure.registry import (
    create_criteria,
    supported_kinds,
)


class YamlConfigLoader:
    """Loads, validates, and returns a CheckerConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> CheckerConfig:
        """
        Load, validate, and return a CheckerConfig from a YAML file.

        An empty file yields the default configuration.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read.
            ConfigValidationError: if the YAML is malformed, the schema is
                violated, or any criterion kind is unknown (all collected first).
        """
        raw = _parse_yaml(path=path)
        _check_criterion_kinds(raw=raw)
        cfg = _build_config(raw=raw)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, criteria=list(cfg.criteria))
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"expected a mapping at the top level of {path}, got {type(raw).__name__}"
        )
    return raw


def _check_criterion_kinds(raw: dict[str, Any]) -> None:
    """
    Raise ConfigValidationError listing ALL unknown criterion kinds.

    Non-string entries are left for Pydantic to report.
    """
    criteria = raw.get("criteria") or []
    if not isinstance(criteria, list):
        return

    known = set(supported_kinds())
    unknown = [
        f"unknown criterion '{kind}'"
        for kind in criteria
        if isinstance(kind, str) and kind not in known
    ]
    if unknown:
        supported = ", ".join(supported_kinds())
        raise ConfigValidationError(f"{'; '.join(unknown)} (supported: {supported})")


def _build_config(raw: dict[str, Any]) -> CheckerConfig:
    try:
        return CheckerConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: CheckerConfig, observer: ConfigObserver) -> None:
    max_attainable = sum(
        criterion.descriptor.max_score for criterion in create_criteria(cfg.criteria)
    )
    if max_attainable < cfg.thresholds.very_strong:
        observer.config_max_score_warning(
            max_attainable=max_attainable,
            very_strong_threshold=cfg.thresholds.very_strong,
        )
