# typtea

A minimal typing speed test that runs in your terminal.

It shows three lines of words, up to 50 characters each. You type them,
and when the timer runs out it reports your net words per minute, your
accuracy, the time taken and the language you practised with. Words in
the English list (`en`) are drawn with weights that fall with their
position in the list, so words near the top appear more often. Words in
every other language are drawn uniformly at random.

## Installation

```
pip install .
```

This installs the `typtea` command.

## Word lists

Word lists are not included in the package. Each language is a JSON
file named `<code>.json` in the `data` directory inside the installed
`typtea` package (next to `languages.py`), for example `data/en.json`:

```json
{"name": "english", "words": ["the", "be", "of", "and"]}
```

The file name without `.json` is the language code. An `en.json` file
is needed: it is the default language, and a language whose file is
missing falls back to it. Until at least one list is in place,
`typtea start` reports that the language is not available and exits
with status 1.

## Usage

Start a 30-second test in English:

```
typtea start
```

Choose the duration (10 to 300 seconds) and the language:

```
typtea start --duration 60 --lang python
typtea start -d 30 -l javascript
```

List the languages found in the `data` directory:

```
typtea start --list-langs
```

Show the version:

```
typtea version
typtea --version
```

Run with no subcommand, `typtea` prints its help.

## Keys during a test

- Type the characters shown. Mistakes are shown bold, underlined and in
  red.
- `Backspace` removes the last character on the current line.
- At the end of a line, press `Space` to move on to the next one.
- When the results are shown, `Enter` starts a new test.
- `Esc` or `Ctrl+C` quits.

The timer starts with your first keystroke.

## How the score is worked out

- **wpm**: every character typed, divided by five and by the elapsed
  minutes, less the uncorrected errors per minute. It never goes below
  zero.
- **acc**: characters typed without error as a percentage of all
  characters typed. Errors you later correct still count against
  accuracy.

## Using it from Python

The pieces behind the command can be used on their own:

```python
import random

from typtea.languages import LanguageManager
from typtea.words import WordGenerator
from typtea.session import TypingGame

manager = LanguageManager("path/to/word-lists")
generator = WordGenerator(manager, random.Random(1))
generator.set_language("en")

game = TypingGame(30, generator.generate_words)
for char in game.display_lines[0][:5]:
    game.add_character(char)
print(game.stats().accuracy)
```

- `LanguageManager` finds `*.json` word lists in a directory, caches
  them, and raises `LanguageError` when a list cannot be read or parsed.
- `WordGenerator.generate_words(count)` draws words from the current
  language.
- `TypingGame` holds one session; `stats()` returns a `TypingStats`.
- `typtea.model.Model` wraps a session for the terminal screen, and
  `typtea.view.render(model)` draws it as a string with ANSI styling.

## Running the tests

```
pip install ".[test]"
pytest
```