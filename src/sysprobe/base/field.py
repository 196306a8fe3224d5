"""Display fields handed from the classifier to a renderer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Emphasis(str, Enum):
    """Hint telling the renderer how prominently to show a field."""

    NORMAL = "normal"
    ALERT = "alert"
    MUTED = "muted"


class DisplayField(BaseModel):
    """One human-readable line of interpreted device output.

    An ordered sequence of DisplayField is the unit handed to the
    rendering layer for a single device directory. Fields carry no
    layout information, only text and an emphasis hint.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="", description="Field label, may be empty")
    value: str = Field(default="", description="Rendered value text")
    emphasis: Emphasis = Field(
        default=Emphasis.NORMAL, description="Rendering emphasis hint"
    )

    @property
    def text(self) -> str:
        """Plain text form of the field, ``label: value`` when labelled."""
        if not self.label:
            return self.value
        return f"{self.label}: {self.value}"

    def __str__(self) -> str:
        return self.text
