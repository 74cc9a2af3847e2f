"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.lmt.layout import SourceLayout
from infrastructure.constants import OUTPUT_DIR


class OutputConfig(BaseModel):
    """Where and how converted LMT files are written."""

    root: Path = Field(
        default_factory=lambda: OUTPUT_DIR,
        description="Directory under which per-run output folders are created.",
    )
    indent: int | None = Field(
        default=2,
        description="JSON indentation; None writes compact JSON.",
    )
    exclude_absent: bool = Field(
        default=True,
        description="Omit optional term/member fields that were not present in the source.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "OutputConfig":
        if self.indent is not None and self.indent < 0:
            raise ValueError("output.indent must be >= 0 or null")
        return self


class ConverterConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from converter.yaml
    - Source layout is shared with the domain layer (read-only during a conversion)
    """

    source: SourceLayout = Field(default_factory=SourceLayout)
    output: OutputConfig = Field(default_factory=OutputConfig)
    tracing: bool = Field(
        default=False,
        description="If true, configure Opik and trace each conversion.",
    )
