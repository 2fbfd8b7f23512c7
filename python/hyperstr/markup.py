"""HTML escaping and element helpers.

Escaping follows the markupsafe protocol: anything with an ``__html__``
method (such as ``Markup``) is already safe and is passed through untouched.
"""

import re
from collections.abc import Mapping
from numbers import Real

from markupsafe import Markup

from hyperstr.errors import TemplateShapeError
from hyperstr.template import as_template_call, html

__all__ = [
    'Markup',
    'Safe',
    'safe',
    'escape_html',
    'safe_html',
    'tag',
    'div',
    'span',
    'p',
    'remove_html_comments',
]

_ESCAPE_PATTERN = re.compile(r'["&\'<>]')

_ESCAPE_TABLE = str.maketrans({
    '"': '&quot;',
    '&': '&amp;',
    "'": '&#39;',
    '<': '&lt;',
    '>': '&gt;',
})

# Non-greedy and DOTALL so multi-line comments end at the first "-->".
_COMMENT_PATTERN = re.compile(r'<!--.*?-->', re.DOTALL)


def safe(value) -> Markup:
    """Mark a value as safe HTML that should not be escaped.

    Example:
        >>> safe("<b>bold</b>")
        Markup('<b>bold</b>')
        >>> safe(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    return Markup(value)


def escape_html(value) -> str:
    """Escape a value for safe HTML output.

    Replaces HTML special characters with their entity equivalents:
    - " → &quot;
    - & → &amp;
    - ' → &#39;
    - < → &lt;
    - > → &gt;

    A string with nothing to escape is returned as-is (the same object).
    Values with an __html__ method are returned via __html__() unescaped,
    and None becomes an empty string.

    Example:
        >>> escape_html("<b>&'\\"")
        '&lt;b&gt;&amp;&#39;&quot;'
        >>> escape_html(safe("<b>bold</b>"))
        '<b>bold</b>'
    """
    if value is None:
        return ''
    if hasattr(value, '__html__'):
        return value.__html__()

    s = value if isinstance(value, str) else str(value)
    if _ESCAPE_PATTERN.search(s) is None:
        return s
    return s.translate(_ESCAPE_TABLE)


class Safe(str):
    """An escaped string that escape_html passes through unchanged.

    Unlike Markup, concatenating or formatting a Safe string does not escape
    the other operand; the result is an ordinary str.
    """

    __slots__ = ()

    def __html__(self):
        return self


def safe_html(template, *values) -> Safe:
    """Escape HTML, either for a whole template or for a single value.

    Template mode escapes only the expression values, never the literal
    segments:

        >>> safe_html(["Hello, ", "!"], "<script>")
        'Hello, &lt;script&gt;!'

    Plain mode escapes one string or number:

        >>> safe_html("a < b")
        'a &lt; b'

    A list or tuple is only a template when values follow it. A template
    without expressions has to be passed as a TemplateCall or a t-string.

    The result is Safe, so nesting one safe_html result inside another
    does not escape it twice.

    Raises:
        TemplateShapeError: If the input is neither a template nor a single
            string or number (None and bare lists included).
    """
    if isinstance(template, (str, Real)):
        if values:
            raise TemplateShapeError(
                "A plain value can't be combined with template values"
            )
        return Safe(escape_html(template))

    if isinstance(template, (list, tuple)) and not values:
        raise TemplateShapeError(
            "Literal segments need values; use TemplateCall for a template without any"
        )

    call = as_template_call(template, values)
    return Safe(html(call.map_values(escape_html)))


def _render_attributes(attributes) -> str:
    match attributes:
        case str():
            return f' class="{attributes}"'
        case Mapping() if attributes:
            return ' ' + ' '.join(f'{k}="{v}"' for k, v in attributes.items())
        case _:
            return ''


def tag(name: str, attributes=None, content='') -> str:
    """Render a single HTML element.

    `attributes` is a class name (str) or a mapping of attribute names to
    values. Attribute values are NOT escaped; escape untrusted values first.
    List or tuple content is joined with single spaces.

    Example:
        >>> tag("div", "card", "hi")
        '<div class="card">hi</div>'
        >>> tag("ul", {"id": "x"}, ["<li>a</li>", "<li>b</li>"])
        '<ul id="x"><li>a</li> <li>b</li></ul>'
    """
    if isinstance(content, (list, tuple)):
        content = ' '.join(str(c) for c in content)
    elif content is None:
        content = ''

    return f'<{name}{_render_attributes(attributes)}>{content}</{name}>'


def div(attributes=None, content='') -> str:
    return tag('div', attributes, content)


def span(attributes=None, content='') -> str:
    return tag('span', attributes, content)


def p(attributes=None, content='') -> str:
    return tag('p', attributes, content)


def remove_html_comments(text: str) -> str:
    """Remove every <!-- ... --> comment, including multi-line ones.

    An opener without a matching "-->" is left in place.

    Example:
        >>> remove_html_comments("a<!-- c -->b<!--\\nmulti\\n-->c")
        'abc'
    """
    return _COMMENT_PATTERN.sub('', text)
