"""Pydantic models for the Language Mapping Table (LMT)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _LmtModel(BaseModel):
    """Frozen base: LMT entities are created once per conversion and never mutated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Term(_LmtModel):
    """Single language term (audio and/or visual language variant)."""

    name: str = Field(..., alias="Name", description="Display name taken from termName.")
    code: str = Field(..., alias="Code")
    long_description_1: str = Field(..., alias="LongDescription1")

    audio_language_tag: str | None = Field(default=None, alias="AudioLanguageTag")
    audio_language_display_name_1: str | None = None
    audio_language_display_name_2: str | None = None
    long_description_2: str | None = None
    notes: str | None = None
    visual_language_display_name_1: str | None = Field(default=None, alias="VisualLanguageDisplayName1")
    visual_language_display_name_2: str | None = Field(default=None, alias="VisualLanguageDisplayName2")
    visual_language_tag_1: str | None = Field(default=None, alias="VisualLanguageTag1")
    visual_language_tag_2: str | None = Field(default=None, alias="VisualLanguageTag2")

    @property
    def tag(self) -> str | None:
        """Identity of the term in the source domain: audio tag first, then visual tag 1."""
        if self.audio_language_tag is not None:
            return self.audio_language_tag
        return self.visual_language_tag_1


class GroupMember(_LmtModel):
    """One member of a language group, taken from a relation sub-node."""

    relation_type: str = Field(..., alias="relationType")
    relation_weight: str = Field(..., alias="relationWeight")
    audio_language_tag: str | None = Field(
        default=None,
        alias="AudioLanguageTag",
        description="Audio tag copied from the relation's own notes, if any.",
    )


class Group(_LmtModel):
    """Language group with resolved membership."""

    name: str = Field(..., alias="Name")
    code: str = Field(..., alias="Code")
    group_tag: str = Field(..., alias="GroupTag")
    members: list[GroupMember] = Field(default_factory=list)


class LmtMapping(_LmtModel):
    """Tag -> source identifier lookups."""

    term: dict[str, str] = Field(
        default_factory=dict,
        description="Shared namespace for term tags and group tags.",
    )
    group: dict[str, str] = Field(
        default_factory=dict,
        description="Reserved for future use; always empty.",
    )


class Lmt(_LmtModel):
    """Language Mapping Table: the aggregate root of a conversion."""

    metadata: dict[str, Any] = Field(default_factory=dict, alias="Metadata")
    terms: list[Term] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list)
    mapping: LmtMapping = Field(default_factory=LmtMapping)
