"""Error types raised by config infrastructure."""

from pathlib import Path

from interview_kb.core.errors import InterviewKbError


class MissingEnvVarsError(InterviewKbError):
    """Raised when one or more referenced environment variables are not set."""

    def __init__(self, missing: dict[str, list[str]]) -> None:
        self.missing = missing
        self.missing_vars = list(missing)
        details = ", ".join(
            f"{name} (at {', '.join(paths)})" for name, paths in sorted(missing.items())
        )
        super().__init__(
            f"Failed to load config: missing environment variables: {details}"
        )


class ConfigValidationError(InterviewKbError):
    """Raised when the config file is not valid YAML or violates the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(InterviewKbError):
    """Raised when the config file cannot be opened."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")
