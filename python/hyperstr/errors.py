"""Exceptions raised by hyperstr helpers."""


class HyperStrError(Exception):
    """Base exception for all hyperstr errors."""


class TemplateShapeError(HyperStrError, TypeError):
    """A template invocation does not have a usable shape.

    Raised when literal segments and expression values don't line up
    (there must be exactly one more segment than values), or when a
    helper receives something that is neither a template nor a plain value.
    """

    def __init__(
        self,
        message: str,
        segments: int | None = None,
        values: int | None = None,
    ):
        self.segments = segments
        self.values = values

        full_message = message
        if segments is not None and values is not None:
            full_message += f"\n\n  Got {segments} segment(s) and {values} value(s)"

        super().__init__(full_message)
