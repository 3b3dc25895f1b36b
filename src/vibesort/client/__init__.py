"""Vibesort clients — async and sync.

Quick start::

    from vibesort.client import Vibesort

    sorter = Vibesort("sk-...", "gpt-4o-mini", "https://api.openai.com/v1")
    sorter.sort([3, 1, 4, 1, 5, 9, 2, 6])
"""

from vibesort.client.client import AsyncVibesort, Vibesort

__all__ = ["AsyncVibesort", "Vibesort"]
