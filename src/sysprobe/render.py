"""Plain terminal rendering of display fields."""

import json
from typing import Iterable, List

from sysprobe.base.classifier import Reading
from sysprobe.base.field import DisplayField, Emphasis

CSI = "\033["
CLR_RESET = f"{CSI}0m"
CLR_BOLD = f"{CSI}1m"
CLR_DIM = f"{CSI}2m"
CLR_RED = f"{CSI}31m"
CLR_GRN = f"{CSI}32m"
STYLE_TITLE = f"{CSI}1;34m"

EMPHASIS_STYLES = {
    Emphasis.NORMAL: CLR_GRN,
    Emphasis.ALERT: CLR_RED,
    Emphasis.MUTED: CLR_DIM,
}


def colorize(text: str, style: str, color: bool = True) -> str:
    """Wrap text in an ANSI style unless coloring is off."""
    if not color or not text:
        return text
    return f"{style}{text}{CLR_RESET}"


def render_field(field: DisplayField, color: bool = True) -> str:
    """Render one field, coloring the value by its emphasis."""
    value = colorize(field.value, EMPHASIS_STYLES[field.emphasis], color)
    if not field.label:
        return value
    return f"{colorize(field.label + ':', CLR_BOLD, color)} {value}"


def render_fields(
    fields: Iterable[DisplayField], color: bool = True, indent: str = ""
) -> List[str]:
    """Render fields as text lines with a common indent."""
    return [f"{indent}{render_field(field, color)}" for field in fields]


def render_reading(reading: Reading, color: bool = True) -> List[str]:
    """Render a device heading, its fields and the path footer."""
    lines = [colorize(reading.device.name, STYLE_TITLE, color)]
    lines.extend(render_fields(reading.fields, color, indent="  "))
    lines.append(
        colorize(f"  Path: {reading.device.path}", CLR_DIM, color)
    )
    return lines


def readings_to_json(readings: Iterable[Reading]) -> str:
    """Serialize readings to a JSON array."""
    return json.dumps(
        [reading.model_dump(mode="json") for reading in readings], indent=2
    )
