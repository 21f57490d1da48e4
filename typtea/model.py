"""Application state of the typing test screen and its reactions to input."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import Enum

from .session import TypingGame, TypingStats
from .words import WordGenerator


class Action(Enum):
    """What the event loop should do after an event was handled."""

    NONE = "none"
    TICK = "tick"
    QUIT = "quit"


class Model:
    """Holds a typing session, the window size and the final results."""

    def __init__(
        self,
        duration: int,
        language: str,
        generator: WordGenerator | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.generator = generator if generator is not None else WordGenerator()
        self.generator.set_language(language)
        self.duration = duration
        self.language = language
        self.clock = clock
        self.width = 0
        self.height = 0
        self.show_results = False
        self.final_stats = TypingStats()
        self.game = self._new_game()

    def _new_game(self) -> TypingGame:
        return TypingGame(self.duration, self.generator.generate_words, self.clock)

    def restart(self) -> None:
        """Begin a fresh session with new words."""
        self.game = self._new_game()
        self.show_results = False
        self.final_stats = TypingStats()

    def resize(self, width: int, height: int) -> None:
        """Record the terminal size."""
        self.width = width
        self.height = height

    def _accepting_input(self) -> bool:
        return (
            not self.show_results
            and not self.game.is_finished
            and not self.game.is_time_up()
        )

    def handle_key(self, key: str) -> Action:
        """React to a key given by name ("esc", "enter", "backspace", ...)."""
        if key in ("ctrl+c", "esc"):
            return Action.QUIT

        if key == "enter":
            if self.show_results:
                self.restart()
                return Action.TICK
            return Action.NONE

        if key == "backspace":
            if not self.show_results and not self.game.is_finished:
                self.game.remove_character()
            return Action.NONE

        if self._accepting_input() and len(key) == 1 and 32 <= ord(key) <= 126:
            self.game.add_character(key)
        return Action.NONE

    def tick(self) -> Action:
        """Handle a timer tick, ending the session once its time is up."""
        if self.show_results:
            return Action.NONE
        if self.game.is_time_up() and self.game.is_started:
            self.final_stats = self.game.stats()
            self.show_results = True
            return Action.NONE
        return Action.TICK