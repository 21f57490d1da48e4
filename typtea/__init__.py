"""A minimal typing speed test in the terminal: word lists, sessions and a screen."""

__version__ = "0.1.0"