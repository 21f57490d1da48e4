import json
import random

import pytest

from typtea.languages import LanguageManager
from typtea.model import Action, Model
from typtea.session import TypingStats
from typtea.words import WordGenerator


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def make_model(tmp_path, clock, language="en", duration=30):
    (tmp_path / "en.json").write_text(
        json.dumps({"name": "english", "words": ["cat"]}), encoding="utf-8"
    )
    generator = WordGenerator(LanguageManager(tmp_path), random.Random(1))
    return Model(duration, language, generator, clock)


def test_new_model_is_fresh(tmp_path, clock):
    model = make_model(tmp_path, clock)
    assert model.show_results is False
    assert model.final_stats == TypingStats()
    assert model.game.display_lines[0].startswith("cat cat")


@pytest.mark.parametrize("key", ["esc", "ctrl+c"])
def test_quit_keys(tmp_path, clock, key):
    model = make_model(tmp_path, clock)
    assert model.handle_key(key) is Action.QUIT


def test_correct_character_advances(tmp_path, clock):
    model = make_model(tmp_path, clock)
    assert model.handle_key("c") is Action.NONE
    assert model.game.current_pos == 1
    assert model.game.errors == set()
    assert model.game.is_started


def test_wrong_character_is_an_error(tmp_path, clock):
    model = make_model(tmp_path, clock)
    model.handle_key("z")
    assert model.game.errors == {0}


def test_backspace_removes_character(tmp_path, clock):
    model = make_model(tmp_path, clock)
    model.handle_key("z")
    model.handle_key("backspace")
    assert model.game.current_pos == 0
    assert model.game.errors == set()


@pytest.mark.parametrize("key", ["up", "\t", "é", "\x7f"])
def test_other_keys_are_ignored(tmp_path, clock, key):
    model = make_model(tmp_path, clock)
    model.handle_key(key)
    assert model.game.current_pos == 0
    assert model.game.is_started is False


def test_enter_during_test_does_nothing(tmp_path, clock):
    model = make_model(tmp_path, clock)
    model.handle_key("c")
    assert model.handle_key("enter") is Action.NONE
    assert model.game.global_pos == 1


def test_tick_before_start_keeps_ticking(tmp_path, clock):
    model = make_model(tmp_path, clock)
    clock.now = 100.0
    assert model.tick() is Action.TICK
    assert model.show_results is False


def test_tick_after_time_up_shows_results(tmp_path, clock):
    model = make_model(tmp_path, clock)
    model.handle_key("c")
    clock.now = 31.0
    assert model.tick() is Action.NONE
    assert model.show_results is True
    assert model.final_stats.characters_typed == 1
    assert model.tick() is Action.NONE


def test_typing_refused_once_time_is_up(tmp_path, clock):
    model = make_model(tmp_path, clock)
    model.handle_key("c")
    clock.now = 30.0
    model.handle_key("a")
    assert model.game.global_pos == 1


def test_enter_after_results_restarts(tmp_path, clock):
    model = make_model(tmp_path, clock)
    model.handle_key("c")
    clock.now = 31.0
    model.tick()
    assert model.handle_key("enter") is Action.TICK
    assert model.show_results is False
    assert model.final_stats == TypingStats()
    assert model.game.global_pos == 0
    assert model.game.is_started is False


def test_restart_keeps_duration(tmp_path, clock):
    model = make_model(tmp_path, clock, duration=45)
    model.restart()
    assert model.game.duration == 45


def test_resize(tmp_path, clock):
    model = make_model(tmp_path, clock)
    model.resize(120, 40)
    assert (model.width, model.height) == (120, 40)


def test_unknown_language_falls_back_to_english_words(tmp_path, clock):
    model = make_model(tmp_path, clock, language="xx")
    assert model.language == "xx"
    assert model.generator.language == "xx"
    assert set(model.game.all_words) == {"cat"}