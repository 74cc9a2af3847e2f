"""Mesa XML vocabulary: note labels and the fields they fill."""

from enum import Enum

CONVERTER_NAME = "Mesa XML exported from Synaptica"


class NoteLabel(str, Enum):
    """Every termNote label the converter understands. Anything else is fatal."""

    AUDIO_LANGUAGE_TAG = "Audio Language Tag"
    AUDIO_LANGUAGE_DISPLAY_NAME_1 = "Audio Language Display Name 1"
    AUDIO_LANGUAGE_DISPLAY_NAME_2 = "Audio Language Display Name 2"
    CODE = "Code"
    LONG_DESCRIPTION_1 = "Long Description 1"
    LONG_DESCRIPTION_2 = "Long Description 2"
    NOTES = "Notes"
    VISUAL_LANGUAGE_DISPLAY_NAME_1 = "Visual Language Display Name 1"
    VISUAL_LANGUAGE_DISPLAY_NAME_2 = "Visual Language Display Name 2"
    VISUAL_LANGUAGE_TAG_1 = "Visual Language Tag 1"
    VISUAL_LANGUAGE_TAG_2 = "Visual Language Tag 2"
    LANGUAGE_GROUP_CODE = "Language Group Code"
    LANGUAGE_GROUP_TAG = "Language Group Tag"
    LANGUAGE_GROUP_NAME = "Language Group Name"

    @classmethod
    def parse(cls, raw: object) -> "NoteLabel | None":
        """Return the label for a raw string, or None when it is not part of the vocabulary."""
        try:
            return cls(raw)
        except ValueError:
            return None


# Labels that mark a node as (possibly) a language group
GROUP_LABELS: frozenset[NoteLabel] = frozenset(
    {
        NoteLabel.LANGUAGE_GROUP_CODE,
        NoteLabel.LANGUAGE_GROUP_TAG,
        NoteLabel.LANGUAGE_GROUP_NAME,
    }
)

# termNote label -> Term field
TERM_FIELD_BY_LABEL: dict[NoteLabel, str] = {
    NoteLabel.AUDIO_LANGUAGE_TAG: "audio_language_tag",
    NoteLabel.AUDIO_LANGUAGE_DISPLAY_NAME_1: "audio_language_display_name_1",
    NoteLabel.AUDIO_LANGUAGE_DISPLAY_NAME_2: "audio_language_display_name_2",
    NoteLabel.CODE: "code",
    NoteLabel.LONG_DESCRIPTION_1: "long_description_1",
    NoteLabel.LONG_DESCRIPTION_2: "long_description_2",
    NoteLabel.NOTES: "notes",
    NoteLabel.VISUAL_LANGUAGE_DISPLAY_NAME_1: "visual_language_display_name_1",
    NoteLabel.VISUAL_LANGUAGE_DISPLAY_NAME_2: "visual_language_display_name_2",
    NoteLabel.VISUAL_LANGUAGE_TAG_1: "visual_language_tag_1",
    NoteLabel.VISUAL_LANGUAGE_TAG_2: "visual_language_tag_2",
}

# termNote label -> Group field
GROUP_FIELD_BY_LABEL: dict[NoteLabel, str] = {
    NoteLabel.LANGUAGE_GROUP_CODE: "code",
    NoteLabel.LANGUAGE_GROUP_TAG: "group_tag",
    NoteLabel.LANGUAGE_GROUP_NAME: "name",
}

# (output property, Term field), checked in this order when reporting what is missing
TERM_REQUIRED_PROPS: tuple[tuple[str, str], ...] = (
    ("Name", "name"),
    ("Code", "code"),
    ("LongDescription1", "long_description_1"),
)

GROUP_REQUIRED_PROPS: tuple[tuple[str, str], ...] = (
    ("Name", "name"),
    ("Code", "code"),
    ("GroupTag", "group_tag"),
)
