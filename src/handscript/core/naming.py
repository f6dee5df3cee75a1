"""Canonical glyph names for drawn characters.

Every character falls into exactly one CharacterClass, and each class has
one naming rule:

- LETTER (ASCII A-Z, a-z): the letter itself
- DIGIT (0-9): ``uniXXXX``
- PUNCTUATION (. , ! ?): a fixed symbolic name
- OTHER: ``uniXXXX`` for the BMP, ``uXXXXX`` beyond it

Letters are single characters, symbolic names are words of two or more
lower-case letters and hex names start with ``u``, so no two characters
share a name.
"""

import re
import string
from collections.abc import Callable
from enum import Enum

SUPPORTED_CHARACTERS = (
    string.ascii_uppercase + string.ascii_lowercase + string.digits + ".,!?"
)

PUNCTUATION_NAMES: dict[str, str] = {
    ".": "period",
    ",": "comma",
    "!": "exclam",
    "?": "question",
}

_HEX_NAME = re.compile(r"^(?:uni([0-9A-Fa-f]{4})|u([0-9A-Fa-f]{5,6}))$")


class CharacterClass(Enum):
    """Tag deciding how a character is named."""

    LETTER = "letter"
    DIGIT = "digit"
    PUNCTUATION = "punctuation"
    OTHER = "other"


def _codepoint(character: str) -> int:
    if len(character) != 1:
        raise ValueError(f"Expected a single code point, got {character!r}")
    return ord(character)


def classify_character(character: str) -> CharacterClass:
    """Tag a character with its naming class.

    Raises:
        ValueError: If ``character`` is not exactly one code point
    """
    _codepoint(character)
    if character in string.ascii_letters:
        return CharacterClass.LETTER
    if character in string.digits:
        return CharacterClass.DIGIT
    if character in PUNCTUATION_NAMES:
        return CharacterClass.PUNCTUATION
    return CharacterClass.OTHER


def hex_name(codepoint: int) -> str:
    """Build the ``uniXXXX`` / ``uXXXXX`` name of a code point."""
    if codepoint <= 0xFFFF:
        return f"uni{codepoint:04X}"
    return f"u{codepoint:05X}"


_NAMERS: dict[CharacterClass, Callable[[str], str]] = {
    CharacterClass.LETTER: lambda c: c,
    CharacterClass.DIGIT: lambda c: hex_name(ord(c)),
    CharacterClass.PUNCTUATION: lambda c: PUNCTUATION_NAMES[c],
    CharacterClass.OTHER: lambda c: hex_name(ord(c)),
}


def glyph_name(character: str) -> str:
    """Return the canonical glyph name for a character.

    Examples:
        >>> glyph_name("A")
        'A'
        >>> glyph_name("7")
        'uni0037'
        >>> glyph_name("?")
        'question'

    Raises:
        ValueError: If ``character`` is not exactly one code point
    """
    return _NAMERS[classify_character(character)](character)


def character_for_name(name: str) -> str | None:
    """Resolve a file stem or glyph name back to its character.

    Accepts a single character, a symbolic punctuation name, or a hex
    name. Returns None when the name does not identify a character.

    Examples:
        >>> character_for_name("period")
        '.'
        >>> character_for_name("uni0061")
        'a'
    """
    if len(name) == 1:
        return name

    for character, symbolic in PUNCTUATION_NAMES.items():
        if name == symbolic:
            return character

    match = _HEX_NAME.match(name)
    if match is None:
        return None
    codepoint = int(match.group(1) or match.group(2), 16)
    if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return None
    return chr(codepoint)
