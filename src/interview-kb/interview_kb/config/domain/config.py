"""Top-level KbConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from interview_kb.config.domain.document import DocumentConfig
from interview_kb.config.domain.export import ExportConfig
from interview_kb.config.domain.integrity import IntegrityConfig


class KbConfig(BaseModel, frozen=True):
    """Root configuration aggregate for interview-kb commands."""

    name: str = Field(default="interview-kb", min_length=1)
    version: str = Field(default="1", min_length=1)
    document: DocumentConfig = Field(default_factory=DocumentConfig)
    integrity: IntegrityConfig = Field(default_factory=IntegrityConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def default(cls) -> "KbConfig":
        return cls()
