"""Supported export formats."""

from enum import Enum


class ExportFormat(str, Enum):
    JSONL = "jsonl"
    JSON = "json"
    MARKDOWN = "markdown"
