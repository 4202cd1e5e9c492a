"""Commit message template engine."""

from glitter.template.cases import CASE_NAMES, apply_case, is_known_case
from glitter.template.lexer import Literal, RestRef, SingleRef, Token, tokenize
from glitter.template.resolver import RAW_COMMIT_MSG, required_arguments, resolve

__all__ = [
    "CASE_NAMES",
    "RAW_COMMIT_MSG",
    "Literal",
    "RestRef",
    "SingleRef",
    "Token",
    "apply_case",
    "is_known_case",
    "required_arguments",
    "resolve",
    "tokenize",
]
