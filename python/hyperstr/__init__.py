"""hyperstr - string templates and HTML-safety helpers.

Public API exports:
- Template evaluation (from hyperstr.template)
- Escaping and element helpers (from hyperstr.markup)
- Iteration and conditional helpers (from hyperstr.helpers)
"""

__version__ = "0.1.0"

# Template evaluation
from hyperstr.template import (
    TemplateCall,
    html,
    css,
    render,
    render_expanded,
)

# Escaping and element helpers
from hyperstr.markup import (
    Markup,
    Safe,
    safe,
    escape_html,
    safe_html,
    tag,
    div,
    span,
    p,
    remove_html_comments,
)

# Iteration and conditionals
from hyperstr.helpers import (
    Emptiness,
    classify,
    is_empty,
    each,
    when,
    if_,
)

from hyperstr.errors import HyperStrError, TemplateShapeError

# Short alias, mirrors markupsafe.escape
escape = escape_html

__all__ = [
    # Template evaluation
    'TemplateCall',
    'html',
    'css',
    'render',
    'render_expanded',
    # Escaping
    'Markup',
    'Safe',
    'safe',
    'escape',
    'escape_html',
    'safe_html',
    # Elements
    'tag',
    'div',
    'span',
    'p',
    'remove_html_comments',
    # Iteration and conditionals
    'Emptiness',
    'classify',
    'is_empty',
    'each',
    'when',
    'if_',
    # Errors
    'HyperStrError',
    'TemplateShapeError',
]
