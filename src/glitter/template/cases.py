"""Case transforms that can be applied to single template arguments."""

import re
from collections.abc import Callable

from glitter.exceptions import UnknownCaseError

# Anything that is not a letter or digit, in any script
_SEPARATOR_RE = re.compile(r"[\W_]+")


def split_words(value: str) -> list[str]:
    """Split text into words on separators and camelCase boundaries.

    >>> split_words("addUser_login-page")
    ['add', 'User', 'login', 'page']
    """
    words: list[str] = []
    for piece in _SEPARATOR_RE.split(value):
        if piece:
            words.extend(_split_camel(piece))
    return words


def _split_camel(piece: str) -> list[str]:
    # Break before an upper-case letter that follows a lower-case letter or
    # digit (fooBar), or that starts a word after an acronym (HTTPServer).
    words: list[str] = []
    start = 0
    for i in range(1, len(piece)):
        char = piece[i]
        if not char.isupper():
            continue
        prev = piece[i - 1]
        next_char = piece[i + 1] if i + 1 < len(piece) else ""
        if prev.islower() or prev.isdigit() or (prev.isupper() and next_char.islower()):
            words.append(piece[start:i])
            start = i
    words.append(piece[start:])
    return words


def _snake(value: str) -> str:
    return "_".join(word.lower() for word in split_words(value))


def _screaming_snake(value: str) -> str:
    return "_".join(word.upper() for word in split_words(value))


def _kebab(value: str) -> str:
    return "-".join(word.lower() for word in split_words(value))


def _train(value: str) -> str:
    return "-".join(word.capitalize() for word in split_words(value))


def _sentence(value: str) -> str:
    words = [word.lower() for word in split_words(value)]
    if not words:
        return ""
    words[0] = words[0].capitalize()
    return " ".join(words)


def _title(value: str) -> str:
    return " ".join(word.capitalize() for word in split_words(value))


def _pascal(value: str) -> str:
    return "".join(word.capitalize() for word in split_words(value))


CASE_TRANSFORMS: dict[str, Callable[[str], str]] = {
    "lower": str.lower,
    "upper": str.upper,
    "snake": _snake,
    "screaming-snake": _screaming_snake,
    "kebab": _kebab,
    "train": _train,
    "sentence": _sentence,
    "title": _title,
    "pascal": _pascal,
}

CASE_NAMES = tuple(CASE_TRANSFORMS)


def is_known_case(name: str) -> bool:
    """Return True if ``name`` is a supported transform (case-insensitive)."""
    return name.lower() in CASE_TRANSFORMS


def apply_case(value: str, name: str) -> str:
    """Apply the named case transform to ``value``.

    Args:
        value: The argument text
        name: Transform name, matched case-insensitively

    Returns:
        The transformed text

    Raises:
        UnknownCaseError: If ``name`` is not a supported transform
    """
    transform = CASE_TRANSFORMS.get(name.lower())
    if transform is None:
        raise UnknownCaseError(name)
    return transform(value)
