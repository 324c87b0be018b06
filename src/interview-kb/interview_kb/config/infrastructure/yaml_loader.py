"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from interview_kb.config.domain.config import KbConfig
from interview_kb.config.domain.observer import ConfigObserver
from interview_kb.config.infrastructure.env_references import (
    find_references,
    resolve,
    unresolved,
)
from interview_kb.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a KbConfig from a YAML file."""

    def __init__(
        self, observer: ConfigObserver, environ: Mapping[str, str] | None = None
    ) -> None:
        self._observer = observer
        self._environ = os.environ if environ is None else environ

    def load(self, path: Path) -> KbConfig:
        """
        Load, interpolate, validate, and return a KbConfig from a YAML file.

        An empty file yields the default configuration.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset; every
                unset variable is reported with the key paths that use it.
            ConfigValidationError: if the file is not valid YAML or violates the schema.
        """
        raw = _parse_yaml(path=path)
        missing = unresolved(find_references(raw), self._environ)
        if missing:
            raise MissingEnvVarsError(missing)
        cfg = _build_config(raw=resolve(raw, self._environ))
        self._observer.config_loaded(name=cfg.name, version=cfg.version)
        return cfg

    def load_optional(self, path: Path | None) -> KbConfig:
        """Load the config at path, or return defaults when no path is given."""
        if path is None:
            self._observer.config_defaults_used()
            return KbConfig.default()
        return self.load(path=path)


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"top level of {path} must be a mapping, got {type(raw).__name__}"
        )
    return raw


def _build_config(raw: Any) -> KbConfig:
    try:
        return KbConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
