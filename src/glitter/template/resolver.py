"""Resolve commit message templates against positional arguments."""

from collections.abc import Mapping, Sequence

from glitter.exceptions import (
    MissingArgumentError,
    MissingTemplateError,
    TooFewArgumentsError,
    UnknownCaseError,
)
from glitter.logging_config import get_logger
from glitter.template.cases import apply_case
from glitter.template.lexer import Literal, RestRef, SingleRef, Token, placeholders, tokenize

logger = get_logger("glitter.template.resolver")

# Default template value meaning "nothing configured"
RAW_COMMIT_MSG = "$RAW_COMMIT_MSG"


def resolve(
    template: str,
    arguments: Sequence[str],
    case_rules: Mapping[int, str] | None = None,
) -> str:
    """Build a commit message from a template and positional arguments.

    Each placeholder is resolved on its own and the pieces are joined, so
    argument values are never re-scanned for placeholders and every
    occurrence of the same placeholder yields the same text.

    Args:
        template: Template containing ``$N`` / ``$N+`` placeholders
        arguments: Positional values; ``$1`` is ``arguments[0]``
        case_rules: Optional mapping of 1-based index to case transform name.
            Only applied to ``$N``, never to ``$N+``.

    Returns:
        The resolved message

    Raises:
        MissingTemplateError: If the template is the unconfigured sentinel
        MissingArgumentError: If a ``$N+`` starts past the last argument
        TooFewArgumentsError: If a ``$N`` indexes past the last argument
    """
    if template == RAW_COMMIT_MSG:
        raise MissingTemplateError()

    rules = case_rules or {}
    resolved: dict[Token, str] = {}
    parts: list[str] = []

    for token in tokenize(template):
        if isinstance(token, Literal):
            parts.append(token.text)
            continue
        if token not in resolved:
            resolved[token] = _resolve_placeholder(token, arguments, rules)
        parts.append(resolved[token])

    return "".join(parts)


def _resolve_placeholder(
    token: SingleRef | RestRef,
    arguments: Sequence[str],
    rules: Mapping[int, str],
) -> str:
    position = token.index - 1

    if isinstance(token, RestRef):
        rest = arguments[position:]
        if not rest:
            raise MissingArgumentError(token.index)
        return " ".join(rest)

    if position >= len(arguments):
        raise TooFewArgumentsError(token.index, len(arguments))

    value = arguments[position]
    case = rules.get(token.index)
    if case is None:
        return value

    try:
        return apply_case(value, case)
    except UnknownCaseError as e:
        logger.warning(f"{e}; using argument {token} unchanged")
        return value


def required_arguments(template: str) -> int:
    """Return the number of arguments a template needs (its highest index)."""
    if template == RAW_COMMIT_MSG:
        return 0
    return max((token.index for token in placeholders(template)), default=0)
