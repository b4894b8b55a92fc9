"""Base class for immutable, value-compared domain objects."""

from dataclasses import astuple, fields, is_dataclass


class ValueObject:
    """
    Marker base for frozen dataclasses compared by their attributes.

    Subclasses validate themselves in ``__post_init__``; equality and
    hashing come from ``@dataclass(frozen=True)``.
    """

    def to_primitive(self) -> object:
        """Unwrap single-field value objects; multi-field ones become a dict."""
        if not is_dataclass(self):
            return self
        names = [f.name for f in fields(self)]
        values = astuple(self)
        if len(values) == 1:
            return values[0]
        return dict(zip(names, values, strict=True))
