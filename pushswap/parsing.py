"""Reading the command-line numbers and rejecting malformed input."""

from __future__ import annotations

import re
from collections.abc import Sequence

_WHITESPACE = " \t\n\v\r\f"
_TO_SPACES = str.maketrans({char: " " for char in _WHITESPACE[1:]})
_LEADING_DIGITS = re.compile(r"[0-9]*")
_NUMBER = re.compile(r"-?[0-9]+")

_INT_LIMIT = 2**31
_WORD = 2**32
_MAX_LENGTH = 11


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _digits(text: str) -> str:
    match = _LEADING_DIGITS.match(text)
    return match.group() if match else ""


def is_number(text: str) -> bool:
    """Whether ``text`` is ASCII digits with an optional leading minus."""
    return bool(text) and _NUMBER.fullmatch(text) is not None


def checked_int(text: str) -> int:
    """Read a signed integer, raising InputError outside the 32-bit range.

    Leading whitespace is skipped and one sign is accepted; text that does
    not start with a sign or a digit reads as 0.
    """
    rest = text.lstrip(_WHITESPACE)
    if not rest:
        return 0
    head = rest[0]
    if head in "+-":
        sign = -1 if head == "-" else 1
        rest = rest[1:]
    elif head in "0123456789":
        sign = 1
    else:
        return 0
    magnitude = int(_digits(rest) or "0")
    if sign == 1 and magnitude >= _INT_LIMIT:
        raise InputError()
    if sign == -1 and magnitude > _INT_LIMIT:
        raise InputError()
    return sign * magnitude


def to_int(text: str) -> int:
    """Read a signed integer the way a C ``int`` conversion with wrap-around does."""
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    magnitude = int(_digits(rest) or "0") % _WORD
    if negative:
        if magnitude > _INT_LIMIT:
            return 0
        return -magnitude if magnitude < _INT_LIMIT else -_INT_LIMIT
    return magnitude - _WORD if magnitude >= _INT_LIMIT else magnitude


def split_argument(text: str) -> list[str]:
    """Split a single argument into its whitespace-separated tokens."""
    spaced = text.strip(_WHITESPACE).translate(_TO_SPACES)
    return [token for token in spaced.split(" ") if token]


def _reject_duplicates(tokens: Sequence[str]) -> None:
    seen: set[str] = set()
    for token in tokens:
        if token in seen:
            raise InputError()
        seen.add(token)


def validate_tokens(tokens: Sequence[str]) -> None:
    """Check tokens taken from a single argument; raise InputError if invalid."""
    present = [token for token in tokens if token]
    for token in present:
        if not is_number(token):
            raise InputError()
        checked_int(token)
    _reject_duplicates(present)


def validate_arguments(args: Sequence[str]) -> None:
    """Check separate command-line arguments; raise InputError if invalid."""
    for arg in args:
        length = len(arg)
        if length > _MAX_LENGTH or (length > _MAX_LENGTH - 1 and not arg.startswith("-")):
            raise InputError()
        if not is_number(arg):
            raise InputError()
        checked_int(arg)
    _reject_duplicates(args)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the command-line arguments (program name excluded) into values.

    A single argument is split on whitespace; several are taken one number
    each. Raises InputError on malformed, out-of-range or repeated numbers.
    """
    if not args:
        return []
    if len(args) == 1:
        tokens = split_argument(args[0])
        validate_tokens(tokens)
        return [to_int(token) for token in tokens]
    validate_arguments(args)
    return [to_int(arg) for arg in args]