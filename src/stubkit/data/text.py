"""Data – string manipulation helpers for test data."""
from __future__ import annotations

from typing import Callable

from stubkit.data.random_source import default_source


def flip_case(character: str) -> str:
    """Swap the case of one character; characters whose case mapping changes
    length (``"ß"`` → ``"SS"``) are returned unchanged."""
    flipped = character.lower() if character.isupper() else character.upper()
    return flipped if len(flipped) == 1 else character


def random_case(value: str, decide: Callable[[], bool] | None = None) -> str:
    """Randomise the case of each character of *value*.

    *decide* is called once per character; a ``True`` result flips that
    character's case. It defaults to a fair coin flip from the default
    :class:`~stubkit.data.random_source.RandomSource`::

        random_case("select * from users")          # "SeLeCt * fROm UsERs"
        random_case("abc", decide=lambda: True)     # "ABC"
    """
    if not value:
        return value
    if decide is None:
        decide = default_source().coin_flip
    return "".join(flip_case(c) if decide() else c for c in value)


__all__ = ["flip_case", "random_case"]
