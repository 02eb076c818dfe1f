# File: src/combodrill/dummies/display_manager.py
"""Dummy DisplayManager - no-op replacement for headless runs and tests."""


class DisplayManager:
    """Drop-in dummy for DisplayManager. Accepts every call, draws nothing."""

    def __init__(self, *args, **kwargs):
        pass

    def clear(self):
        pass

    def show_round(self, title, score, sequence, index):
        pass

    def show_timed(self, title, score, sequence, index, remaining_ms, elapsed_ms):
        pass

    def show_feedback(self, text):
        pass

    def show_message(self, text):
        pass
