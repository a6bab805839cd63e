"""Exceptions that may cross the structuring boundary."""
from __future__ import annotations


class InvalidScriptInput(ValueError):
    """The caller broke the input contract (e.g. blank script title).

    This is the only error structure_script() raises.
    """


class ProviderError(Exception):
    """A completion provider could not return text."""
