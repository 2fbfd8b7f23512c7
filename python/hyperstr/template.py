"""Template evaluation: join literal segments with expression values.

A template invocation is an ordered list of literal strings plus the values
that sit between them:

    html(["<h1>", "</h1>"], title)      # '<h1>' + str(title) + '</h1>'

On Python 3.14+ a t-string can be passed directly:

    html(t"<h1>{title}</h1>")

`html` is deliberately raw. Values are stringified and nothing else:
no escaping (use `safe_html`), no list joining, no calling of callables
(use `render_expanded` if you want that behavior).
"""

from dataclasses import dataclass
from typing import Any

from hyperstr.errors import TemplateShapeError

__all__ = [
    'TemplateCall',
    'as_template_call',
    'html',
    'css',
    'render',
    'render_expanded',
]

_CONVERSIONS = {
    'r': repr,
    's': str,
    'a': ascii,
}


@dataclass(frozen=True, slots=True)
class TemplateCall:
    """Literal segments and the expression values between them."""

    strings: tuple[str, ...]
    values: tuple[Any, ...] = ()

    def __post_init__(self):
        if len(self.strings) != len(self.values) + 1:
            raise TemplateShapeError(
                "Template needs exactly one more literal segment than values",
                segments=len(self.strings),
                values=len(self.values),
            )

    def map_values(self, fn) -> 'TemplateCall':
        """Return a copy with `fn` applied to every expression value."""
        return TemplateCall(self.strings, tuple(fn(v) for v in self.values))


def _is_tstring(obj) -> bool:
    return hasattr(obj, 'strings') and hasattr(obj, 'interpolations')


def _interpolation_value(interpolation):
    value = interpolation.value
    if interpolation.conversion:
        value = _CONVERSIONS[interpolation.conversion](value)
    if interpolation.format_spec:
        value = format(value, interpolation.format_spec)
    return value


def as_template_call(strings, values=()) -> TemplateCall:
    """Resolve any accepted template shape into a TemplateCall.

    Accepts a TemplateCall, a t-string (string.templatelib.Template), or a
    list/tuple of literal segments together with `values`.

    Raises:
        TemplateShapeError: If the input isn't template-shaped, or if the
            segment and value counts don't match.
    """
    if isinstance(strings, TemplateCall):
        if values:
            raise TemplateShapeError("TemplateCall already carries its values")
        return strings

    if _is_tstring(strings):
        if values:
            raise TemplateShapeError("t-string already carries its values")
        return TemplateCall(
            tuple(strings.strings),
            tuple(_interpolation_value(i) for i in strings.interpolations),
        )

    if isinstance(strings, (list, tuple)) and all(isinstance(s, str) for s in strings):
        return TemplateCall(tuple(strings), tuple(values))

    raise TemplateShapeError(
        f"Expected literal segments or a template, got {type(strings).__name__}"
    )


def _join(call: TemplateCall) -> str:
    parts = [call.strings[0]]
    for value, segment in zip(call.values, call.strings[1:]):
        parts.append(str(value))
        parts.append(segment)
    return ''.join(parts)


def html(strings, *values) -> str:
    """Interleave literal segments with stringified values.

    Example:
        >>> html(["<p>", " & ", "</p>"], "a", 1)
        '<p>a & 1</p>'
    """
    return _join(as_template_call(strings, values))


# Same evaluator; the names only document intent at the call site.
css = html
render = html


def _expand(value):
    if callable(value):
        value = value()
    if isinstance(value, (list, tuple)):
        return ' '.join(str(v) for v in value)
    return value


def render_expanded(strings, *values) -> str:
    """Like `html`, but lists are space-joined and callables are called.

    A zero-argument callable is invoked at render time and its return value
    used; a list or tuple (including one returned by a callable) is joined
    with single spaces.

    Example:
        >>> render_expanded(["<ul>", "</ul>"], ["<li>a</li>", "<li>b</li>"])
        '<ul><li>a</li> <li>b</li></ul>'
    """
    return _join(as_template_call(strings, values).map_values(_expand))
