"""Rendering of the typing test screen and the results screen."""

from __future__ import annotations

from dataclasses import replace

from .model import Model
from .styles import (
    BOLD,
    CURSOR,
    ERROR,
    MUTED,
    RESULTS_CONTAINER,
    TEXT_BOX,
    TIME,
    Align,
    join_horizontal,
    join_vertical,
    place,
)

STAT_GAP = 5
INSTRUCTIONS = "Press Enter to restart • Esc to quit"


def render(model: Model) -> str:
    """Render the whole screen for the model's current state."""
    if model.show_results:
        return render_results(model)
    content = join_vertical(Align.LEFT, render_timer(model), render_text(model))
    return place(model.width, model.height, content)


def render_timer(model: Model) -> str:
    """Render the seconds remaining."""
    return TIME.render(str(model.game.remaining_time()))


def render_text(model: Model) -> str:
    """Render the visible lines with typed, current and pending characters."""
    return TEXT_BOX.render("\n".join(_format_into_lines(model)))


def _format_into_lines(model: Model) -> list[str]:
    game = model.game
    lines = game.display_lines[: game.lines_per_view]
    plain_length = len(game.display_text())
    styled_lines = []
    char_index = 0

    for number, line in enumerate(lines):
        parts = []
        for char in line:
            if char_index < plain_length:
                parts.append(style_char(model, char, char_index))
                char_index += 1
            else:
                parts.append(MUTED.render(char))

        if number == 0 and game.current_pos == len(line):
            parts.append(CURSOR.render(" "))

        styled_lines.append("".join(parts))

        if char_index < plain_length and number < len(lines) - 1:
            char_index += 1

    return styled_lines


def style_char(model: Model, char: str, index: int) -> str:
    """Style one character by whether it is typed, current or pending."""
    game = model.game
    user_pos = game.current_pos
    if index < user_pos:
        error_index = game.global_pos - (user_pos - index)
        if error_index in game.errors:
            return ERROR.render(char)
        return BOLD.render(char)
    if index == user_pos:
        return CURSOR.render(char)
    return MUTED.render(char)


def _stat(label: str, value: str) -> str:
    return join_vertical(Align.RIGHT, MUTED.render(label), BOLD.render(value))


def render_results(model: Model) -> str:
    """Render the final statistics and the restart instructions."""
    stats = model.final_stats
    gap = " " * STAT_GAP
    stats_row = join_horizontal(
        Align.TOP,
        _stat("acc", f"{stats.accuracy:.0f}%"),
        gap,
        _stat("wpm", f"{stats.wpm:.0f}"),
        gap,
        _stat("time", f"{stats.time_elapsed:.0f}s"),
        gap,
        _stat("lang", model.language),
    )
    instructions = replace(MUTED, align=Align.CENTER).render(INSTRUCTIONS)
    content = join_vertical(Align.CENTER, "", stats_row, "", instructions)
    return place(model.width, model.height, RESULTS_CONTAINER.render(content))