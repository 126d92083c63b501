"""Case-insensitive header field names and the header mapping."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Union

from requests.structures import CaseInsensitiveDict


class HeaderField:
    """A header field name compared and hashed without regard to case.

    The original spelling is kept in ``raw_value`` and is what goes on the
    wire.
    """

    __slots__ = ("raw_value",)

    def __init__(self, raw_value: str | HeaderField) -> None:
        if isinstance(raw_value, HeaderField):
            raw_value = raw_value.raw_value
        if not isinstance(raw_value, str):
            raise TypeError(
                "header field name must be a str, "
                f"not {type(raw_value).__name__}"
            )
        self.raw_value = raw_value

    @property
    def folded(self) -> str:
        return self.raw_value.lower()

    def lower(self) -> str:
        return self.folded

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderField):
            return self.folded == other.folded
        if isinstance(other, str):
            return self.folded == other.lower()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.folded)

    def __str__(self) -> str:
        return self.raw_value

    def __repr__(self) -> str:
        return f"HeaderField({self.raw_value!r})"


FieldName = Union[str, HeaderField]


def _is_field_name(key: object) -> bool:
    return isinstance(key, (str, HeaderField))


class HeaderFields(CaseInsensitiveDict):
    """Header mapping holding at most one entry per case-folded name.

    Keys may be given as ``str`` or ``HeaderField`` and are stored as
    ``HeaderField``. Writing a name that is already present in another case
    replaces the entry, and the most recent spelling is the one kept.
    """

    def __setitem__(self, key: FieldName, value: str) -> None:
        super().__setitem__(HeaderField(key), value)

    def __getitem__(self, key: FieldName) -> str:
        if not _is_field_name(key):
            raise KeyError(key)
        return super().__getitem__(key)

    def __delitem__(self, key: FieldName) -> None:
        if not _is_field_name(key):
            raise KeyError(key)
        super().__delitem__(key)

    def raw_items(self) -> Iterator[tuple[str, str]]:
        """Yield (original spelling, value) pairs."""
        for field, value in self.items():
            yield str(field), value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Mapping) and not all(
            _is_field_name(key) for key in other
        ):
            return False
        return super().__eq__(other)

    def copy(self) -> HeaderFields:
        return type(self)(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.raw_items())!r})"
