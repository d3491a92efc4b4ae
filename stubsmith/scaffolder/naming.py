"""Naming conventions shared by every artifact generator.

Pure string helpers: pluralisation, capitalisation, case conversion and
table-name derivation.  None of them perform I/O and none of them raise on
empty input -- an empty string simply yields an empty-derived result.

The pluraliser is an English heuristic, not a dictionary: ``person`` becomes
``persons`` and ``day`` becomes ``daies``.
"""

from __future__ import annotations

import re

_UPPER = re.compile(r"([A-Z])")
_UNDERSCORE_LOWER = re.compile(r"_([a-z])")

_ES_ENDINGS = ("s", "sh", "ch", "x", "z")


def pluralize(word: str) -> str:
    """Return the heuristic English plural of *word*.

    Examples::

        pluralize("tag")      -> "tags"
        pluralize("category") -> "categories"
        pluralize("bus")      -> "buses"
    """
    if word.endswith("y"):
        return word[:-1] + "ies"
    if word.endswith(_ES_ENDINGS):
        return word + "es"
    return word + "s"


def capitalize(word: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Unlike :meth:`str.capitalize` this keeps inner capitals, so
    ``capitalize("playlistTeam") == "PlaylistTeam"``.
    """
    return word[:1].upper() + word[1:]


def to_snake_case(text: str) -> str:
    """Convert ``PlaylistTeam`` to ``playlist_team``."""
    snake = _UPPER.sub(r"_\1", text).lower()
    if snake.startswith("_"):
        snake = snake[1:]
    return snake


def to_camel_case(text: str) -> str:
    """Convert ``playlist_team`` to ``playlistTeam``."""
    return _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), text)


def table_name(model_name: str) -> str:
    """Derive the database table name for *model_name*.

    ``table_name("PlaylistTeam") == "playlist_teams"``.
    """
    return pluralize(to_snake_case(model_name))


def ensure_suffix(name: str, suffix: str) -> str:
    """Append *suffix* to *name* unless it is already there."""
    if not suffix or name.endswith(suffix):
        return name
    return name + suffix


def strip_suffix(name: str, suffix: str) -> str:
    """Remove a trailing *suffix* from *name* (``SongController`` -> ``Song``)."""
    if suffix and name.endswith(suffix) and name != suffix:
        return name[: -len(suffix)]
    return name
