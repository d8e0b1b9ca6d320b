"""SPINWHEEL - spin-the-wheel picker backed by a Notion item list."""

__version__ = "0.1.0"
