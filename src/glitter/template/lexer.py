"""Tokenizer for commit message templates.

A template is plain text with positional placeholders:

- ``$N``  refers to the N-th argument (1-based, a single digit 1-9)
- ``$N+`` refers to the N-th argument and every argument after it

Anything else that starts with ``$`` is kept as literal text, including
multi-digit references such as ``$10``.
"""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER_PREFIX = "$"
REST_SUFFIX = "+"


@dataclass(frozen=True)
class Literal:
    """Plain text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class SingleRef:
    """``$N`` - a single argument."""

    index: int

    def __str__(self) -> str:
        return f"{PLACEHOLDER_PREFIX}{self.index}"


@dataclass(frozen=True)
class RestRef:
    """``$N+`` - argument N through the last one, space-joined."""

    index: int

    def __str__(self) -> str:
        return f"{PLACEHOLDER_PREFIX}{self.index}{REST_SUFFIX}"


Token = Literal | SingleRef | RestRef


def _is_index_digit(char: str) -> bool:
    return char in "123456789"


def tokenize(template: str) -> list[Token]:
    """Split a template into literal text and placeholder tokens.

    Args:
        template: The raw template string

    Returns:
        Tokens in source order. Adjacent literal text is merged.
    """
    tokens: list[Token] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            tokens.append(Literal("".join(buffer)))
            buffer.clear()

    pos = 0
    length = len(template)
    while pos < length:
        char = template[pos]
        if char != PLACEHOLDER_PREFIX or pos + 1 >= length:
            buffer.append(char)
            pos += 1
            continue

        digit = template[pos + 1]
        if not _is_index_digit(digit):
            buffer.append(char)
            pos += 1
            continue

        after = template[pos + 2] if pos + 2 < length else ""
        if after.isdigit():
            # Only single-digit indices exist; `$10` is text, not `$1` + "0".
            end = pos + 1
            while end < length and template[end].isdigit():
                end += 1
            if end < length and template[end] == REST_SUFFIX:
                end += 1
            buffer.append(template[pos:end])
            pos = end
            continue

        flush()
        if after == REST_SUFFIX:
            tokens.append(RestRef(int(digit)))
            pos += 3
        else:
            tokens.append(SingleRef(int(digit)))
            pos += 2

    flush()
    return tokens


def placeholders(template: str) -> list[SingleRef | RestRef]:
    """Return the placeholder tokens of a template in first-occurrence order."""
    seen: list[SingleRef | RestRef] = []
    for token in tokenize(template):
        if isinstance(token, Literal) or token in seen:
            continue
        seen.append(token)
    return seen
