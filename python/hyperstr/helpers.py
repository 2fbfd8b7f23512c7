"""Iteration and conditional-render helpers for composing templates.

Both helpers return strings meant to be dropped into an enclosing template:

    html(["<ul>", "</ul>"], each(items, lambda item: f"<li>{item}</li>"))
    html(["<main>", "</main>"], when(lambda: user.name, lambda name: f"Hi {name}"))
"""

import inspect
from collections.abc import Collection, Mapping, Sequence
from enum import Enum
from numbers import Number

__all__ = [
    'Emptiness',
    'classify',
    'is_empty',
    'each',
    'when',
    'if_',
]


class Emptiness(Enum):
    """Outcome of the emptiness test for a value."""

    ABSENT = 'absent'
    FALSE = 'false'
    EMPTY_STRING = 'empty-string'
    EMPTY_SEQUENCE = 'empty-sequence'
    EMPTY_MAPPING = 'empty-mapping'
    ZERO = 'zero'
    PRESENT = 'present'


def classify(value) -> Emptiness:
    """Classify a value for the emptiness test.

    Every value maps to exactly one member; only PRESENT means
    "something to render".

    Example:
        >>> classify([])
        <Emptiness.EMPTY_SEQUENCE: 'empty-sequence'>
        >>> classify("x")
        <Emptiness.PRESENT: 'present'>
    """
    match value:
        case None:
            return Emptiness.ABSENT
        case bool():
            return Emptiness.PRESENT if value else Emptiness.FALSE
        case str() | bytes():
            return Emptiness.PRESENT if value else Emptiness.EMPTY_STRING
        case Mapping():
            return Emptiness.PRESENT if value else Emptiness.EMPTY_MAPPING
        case Collection():
            return Emptiness.PRESENT if len(value) else Emptiness.EMPTY_SEQUENCE
        case Number():
            return Emptiness.ZERO if value == 0 else Emptiness.PRESENT
        case _:
            return Emptiness.PRESENT


def is_empty(value) -> bool:
    return classify(value) is not Emptiness.PRESENT


def _wants_key(callback) -> bool:
    """Whether `callback` accepts a second positional argument."""
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError):
        # Some builtins have no introspectable signature
        return False

    positional = 0
    for param in sig.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return True
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


def _entries(collection):
    match collection:
        case bool():
            return None
        case int():
            return ((i, i) for i in range(collection))
        case str() | bytes() | bytearray():
            return None
        case Mapping():
            return ((value, key) for key, value in collection.items())
        case Sequence():
            return ((value, index) for index, value in enumerate(collection))
        case _:
            return None


def each(collection, callback) -> str:
    """Render `callback` for every entry of a collection and concatenate.

    - int n: callback(i, i) for i in 0..n-1
    - sequence: callback(value, index)
    - mapping: callback(value, key), in insertion order

    A callback with a single positional parameter receives only the value.
    Results of None, False or "" are skipped; everything else is str()-ed.
    Unrecognized collections render as "".

    Example:
        >>> each(3, lambda v, i: i)
        '012'
        >>> each({"a": 1, "b": 2}, lambda v, k: f"{k}{v}")
        'a1b2'
    """
    entries = _entries(collection)
    if entries is None:
        return ''

    pass_key = _wants_key(callback)
    parts = []
    for value, key in entries:
        result = callback(value, key) if pass_key else callback(value)
        if result is None or result is False or result == '':
            continue
        parts.append(str(result))
    return ''.join(parts)


def when(condition, render):
    """Call `render(value)` only if the condition has something to render.

    A callable condition is called first; if it raises, the result is ""
    and the error is not propagated. Empty values (see `classify`) also give
    "" without calling `render`. Otherwise render's return value is passed
    back as-is.

    Example:
        >>> when("x", str.upper)
        'X'
        >>> when([], str.upper)
        ''
    """
    value = condition
    if callable(condition):
        try:
            value = condition()
        except Exception:
            return ''

    if is_empty(value):
        return ''

    return render(value)


if_ = when
