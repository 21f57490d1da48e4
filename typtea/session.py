"""State and statistics of one timed typing session."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

WordSource = Callable[[int], list[str]]

INITIAL_WORDS = 200
EXTRA_WORDS = 100
WORD_RESERVE = 50


@dataclass
class TypingStats:
    """Results of a typing session; time_elapsed is in seconds."""

    wpm: float = 0.0
    accuracy: float = 0.0
    characters_typed: int = 0
    correct_chars: int = 0
    total_chars: int = 0
    time_elapsed: float = 0.0
    is_complete: bool = False
    uncorrected_errors: int = 0


@dataclass
class TypingGame:
    """A typing test showing a few lines of words at a time."""

    duration: int
    words: WordSource
    clock: Callable[[], float] = time.monotonic
    all_words: list[str] = field(init=False)
    display_lines: list[str] = field(init=False)
    user_input: str = field(init=False, default="")
    current_pos: int = field(init=False, default=0)
    global_pos: int = field(init=False, default=0)
    start_time: float = field(init=False, default=0.0)
    is_started: bool = field(init=False, default=False)
    is_finished: bool = field(init=False, default=False)
    errors: set[int] = field(init=False, default_factory=set)
    total_errors_made: int = field(init=False, default=0)
    lines_per_view: int = field(init=False, default=3)
    chars_per_line: int = field(init=False, default=50)
    words_typed: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.all_words = list(self.words(INITIAL_WORDS))
        self._generate_display_lines()

    def reset(self) -> None:
        """Return to a fresh session with new words and the same duration."""
        self.__init__(self.duration, self.words, self.clock)

    def _generate_display_lines(self) -> None:
        lines: list[str] = []
        index = self.words_typed
        total = len(self.all_words)

        while len(lines) < self.lines_per_view and index < total:
            line: list[str] = []
            length = 0
            while index < total:
                word = self.all_words[index]
                needed = len(word) + (1 if line else 0)
                if length + needed > self.chars_per_line:
                    break
                line.append(word)
                length += needed
                index += 1
            lines.append(" ".join(line))

        lines.extend([""] * (self.lines_per_view - len(lines)))
        self.display_lines = lines[: self.lines_per_view]

    def start(self) -> None:
        """Start the clock if it is not already running."""
        if not self.is_started:
            self.start_time = self.clock()
            self.is_started = True

    def add_character(self, char: str) -> None:
        """Take one typed character."""
        if not self.is_started:
            self.start()

        if self.is_finished or self.is_time_up():
            self.is_finished = True
            return

        line = self.display_lines[0]

        if self.current_pos == len(line):
            if char == " ":
                self.user_input += char
                self.current_pos += 1
                self.global_pos += 1
                self._shift_lines()
            return

        if 0 <= self.current_pos < len(line):
            self.user_input += char
            if line[self.current_pos] != char:
                self.errors.add(self.global_pos)
                self.total_errors_made += 1
            self.current_pos += 1
            self.global_pos += 1

    def _shift_lines(self) -> None:
        self.words_typed += len(self.display_lines[0].split())
        self.current_pos = 0
        self._generate_display_lines()
        if self.words_typed > len(self.all_words) - WORD_RESERVE:
            self.all_words.extend(self.words(EXTRA_WORDS))

    def remove_character(self) -> None:
        """Undo the last character typed on the current line."""
        if self.user_input and self.current_pos > 0:
            self.user_input = self.user_input[:-1]
            self.current_pos -= 1
            self.global_pos -= 1
            self.errors.discard(self.global_pos)

    def display_text(self) -> str:
        """Return the visible lines joined by spaces."""
        return " ".join(self.display_lines)

    def stats(self) -> TypingStats:
        """Compute the statistics of the session so far."""
        if not self.is_started:
            return TypingStats()

        elapsed = self.clock() - self.start_time
        minutes = elapsed / 60
        uncorrected = len(self.errors)

        if minutes > 0:
            gross_wpm = self.global_pos / 5 / minutes
            net_wpm = max(gross_wpm - uncorrected / minutes, 0.0)
        else:
            net_wpm = 0.0

        correct = self.global_pos - self.total_errors_made
        accuracy = correct / self.global_pos * 100 if self.global_pos > 0 else 0.0

        return TypingStats(
            wpm=net_wpm,
            accuracy=max(accuracy, 0.0),
            characters_typed=self.global_pos,
            correct_chars=correct,
            total_chars=len(self.display_text()),
            time_elapsed=elapsed,
            is_complete=self.is_finished,
            uncorrected_errors=uncorrected,
        )

    def is_time_up(self) -> bool:
        """Tell whether the session's duration has run out."""
        if not self.is_started:
            return False
        return self.clock() - self.start_time >= self.duration

    def remaining_time(self) -> int:
        """Return whole seconds left in the session."""
        if not self.is_started:
            return self.duration
        return max(self.duration - int(self.clock() - self.start_time), 0)