"""Pydantic configuration and request models for htmlreader."""

from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class ExtractMode(str, Enum):
    """Output flavours of the extraction pipeline."""

    MARKDOWN = "markdown"
    TEXT = "text"


class ExtractionRequest(BaseModel):
    """
    A single, already-fetched document to extract.

    ``url`` is only used as the base for resolving relative references.
    """

    html: str = Field(..., description="Raw HTML of the whole document")
    url: str = Field(..., description="Source URL of the document")
    mode: ExtractMode = Field(ExtractMode.MARKDOWN, description="Output mode (markdown or text)")

    model_config = {"extra": "forbid", "frozen": True}


class ReaderConfig(BaseModel):
    """
    Root configuration model for htmlreader.

    Example:
        config = ReaderConfig(extractor="readability", max_chars=20000)

    YAML format:
        extractor: heuristic
        char_threshold: 0
        max_chars: 50000
        log_level: INFO
    """

    extractor: Literal["heuristic", "readability"] = Field(
        "heuristic",
        description="Main-content extractor backend",
    )
    char_threshold: int = Field(
        0,
        ge=0,
        description="Minimum visible characters for a region to count as main content (0 = no threshold)",
    )
    max_chars: Optional[int] = Field(
        None,
        ge=1,
        description="Character budget applied by callers after extraction (None = unbounded)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ReaderConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ReaderConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
