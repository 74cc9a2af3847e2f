"""Element names of the parsed source document."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROOT_ELEMENT = "Synaptica-ZThes"
DEFAULT_TERM_ELEMENT = "term"


class SourceLayout(BaseModel):
    """Where the top-level term nodes live in the parsed tree."""

    model_config = ConfigDict(frozen=True)

    root_element: str = Field(default=DEFAULT_ROOT_ELEMENT, min_length=1)
    term_element: str = Field(default=DEFAULT_TERM_ELEMENT, min_length=1)


DEFAULT_LAYOUT = SourceLayout()
