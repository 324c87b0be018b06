"""${ENV_VAR} references in raw config data, located by their YAML key path."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_REFERENCE_PATTERN = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True)
class EnvReference:
    """One ``${NAME}`` occurrence and the dotted key path of the value holding it."""

    name: str
    key_path: str


def find_references(raw: Any, key_path: str = "") -> list[EnvReference]:
    """Return every reference in raw, in document order.

    Mapping keys are joined with dots and list items are indexed, so a
    reference in the second allowed language is reported under
    ``integrity.allowed_code_languages[1]``.
    """
    if isinstance(raw, str):
        return [
            EnvReference(name=match.group("name"), key_path=key_path or "<root>")
            for match in _REFERENCE_PATTERN.finditer(raw)
        ]
    if isinstance(raw, dict):
        return [
            reference
            for key, value in raw.items()
            for reference in find_references(value, _child_path(key_path, str(key)))
        ]
    if isinstance(raw, list):
        return [
            reference
            for index, item in enumerate(raw)
            for reference in find_references(item, f"{key_path}[{index}]")
        ]
    return []


def unresolved(
    references: list[EnvReference], environ: Mapping[str, str]
) -> dict[str, list[str]]:
    """Group the references whose variable is unset: name -> key paths."""
    missing: dict[str, list[str]] = {}
    for reference in references:
        if reference.name not in environ:
            missing.setdefault(reference.name, []).append(reference.key_path)
    return missing


def resolve(raw: Any, environ: Mapping[str, str]) -> Any:
    """Return a copy of raw with every reference replaced by its value in environ.

    Raises KeyError for an unset variable; check ``unresolved`` first.
    """
    if isinstance(raw, str):
        return _REFERENCE_PATTERN.sub(lambda match: environ[match.group("name")], raw)
    if isinstance(raw, dict):
        return {key: resolve(value, environ) for key, value in raw.items()}
    if isinstance(raw, list):
        return [resolve(item, environ) for item in raw]
    return raw


def _child_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key
