"""Chess Master — a two-player chess rules engine with a console front end."""

__version__ = "0.1.0"
