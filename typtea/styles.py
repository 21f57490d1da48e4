"""Terminal text styling and block layout built on ANSI escape sequences."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
_RESET = "\x1b[0m"


class Align(Enum):
    """Placement of text within a wider or taller block."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def fraction(self) -> float:
        """Share of the free space placed before the content."""
        if self in (Align.LEFT, Align.TOP):
            return 0.0
        if self is Align.CENTER:
            return 0.5
        return 1.0


def visible_width(text: str) -> int:
    """Return the widest line of ``text`` once escape sequences are removed."""
    return max(len(_ANSI_RE.sub("", line)) for line in text.split("\n"))


def _pad_line(line: str, width: int, align: Align) -> str:
    gap = width - visible_width(line)
    if gap <= 0:
        return line
    left = int(gap * align.fraction)
    return " " * left + line + " " * (gap - left)


def _pad_lines(lines: list[str], height: int, width: int, align: Align) -> list[str]:
    gap = height - len(lines)
    if gap <= 0:
        return lines
    top = int(gap * align.fraction)
    blank = " " * width
    return [blank] * top + lines + [blank] * (gap - top)


def _color_code(color: str, background: bool) -> str:
    if color.startswith("#"):
        digits = color[1:]
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        return f"{48 if background else 38};2;{red};{green};{blue}"
    number = int(color)
    if number < 8:
        return str((40 if background else 30) + number)
    if number < 16:
        return str((100 if background else 90) + number - 8)
    return f"{48 if background else 38};5;{number}"


@dataclass(frozen=True)
class Style:
    """A set of colours, attributes and box dimensions applied to text.

    ``width`` and ``height`` include the padding; ``padding`` is
    (vertical, horizontal).
    """

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    underline: bool = False
    padding: tuple[int, int] = (0, 0)
    width: int | None = None
    height: int | None = None
    align: Align = Align.LEFT
    margin_left: int = 0

    def _sgr(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.underline:
            codes.append("4")
        if self.foreground is not None:
            codes.append(_color_code(self.foreground, background=False))
        if self.background is not None:
            codes.append(_color_code(self.background, background=True))
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def render(self, text: str) -> str:
        """Return ``text`` styled and laid out according to this style."""
        pad_v, pad_h = self.padding
        lines = text.split("\n")
        if self.width is not None:
            inner = max(self.width - 2 * pad_h, 0)
        else:
            inner = max(visible_width(line) for line in lines)
        lines = [_pad_line(line, inner, self.align) for line in lines]

        sgr = self._sgr()
        if sgr:
            lines = [f"{sgr}{line}{_RESET}" for line in lines]

        if pad_h:
            lines = [" " * pad_h + line + " " * pad_h for line in lines]
        outer = inner + 2 * pad_h
        blank = " " * outer
        lines = [blank] * pad_v + lines + [blank] * pad_v

        if self.height is not None and len(lines) < self.height:
            lines += [blank] * (self.height - len(lines))

        if self.margin_left:
            lines = [" " * self.margin_left + line for line in lines]
        return "\n".join(lines)


def join_vertical(align: Align, *args: str) -> str:
    """Stack blocks on top of each other, aligned horizontally."""
    lines = [line for block in args for line in block.split("\n")]
    width = max((visible_width(line) for line in lines), default=0)
    return "\n".join(_pad_line(line, width, align) for line in lines)


def join_horizontal(align: Align, *args: str) -> str:
    """Place blocks side by side, aligned vertically."""
    blocks = [block.split("\n") for block in args]
    height = max((len(block) for block in blocks), default=0)
    columns = []
    for block in blocks:
        width = max(visible_width(line) for line in block)
        padded = [_pad_line(line, width, Align.LEFT) for line in block]
        columns.append(_pad_lines(padded, height, width, align))
    return "\n".join("".join(row) for row in zip(*columns))


def place(width: int, height: int, content: str) -> str:
    """Centre ``content`` in an area of ``width`` by ``height`` cells."""
    lines = content.split("\n")
    block_width = max(visible_width(line) for line in lines)
    lines = [_pad_line(line, block_width, Align.LEFT) for line in lines]
    full_width = max(width, block_width)
    lines = [_pad_line(line, full_width, Align.CENTER) for line in lines]
    lines = _pad_lines(lines, height, full_width, Align.CENTER)
    return "\n".join(lines)


TIME = Style(foreground="12", bold=True, margin_left=8)
TEXT_BOX = Style(padding=(1, 3), width=60, height=6, align=Align.LEFT, margin_left=5)
BOLD = Style(bold=True)
MUTED = Style(foreground="8")
ERROR = Style(foreground="9", bold=True, underline=True)
CURSOR = Style(background="15", foreground="#000", bold=True)
RESULTS_CONTAINER = Style(padding=(3, 5), align=Align.LEFT)