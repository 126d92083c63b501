"""The RequestValues aggregate.

RequestValues holds the fixed inputs of an HTTP request (method, URL
components, headers and body) plus a private store of extension values
keyed by ExtensionKey subclasses. Collaborators mutate one instance in turn
and a request builder consumes it at the end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import IO, Any, TypeVar, Union

from urllib3.exceptions import LocationParseError
from urllib3.util import Url, parse_url

from .errors import ExtensionKeyError, InvalidURL
from .headers import HeaderFields
from .keys import ExtensionKey, is_extension_key

logger = logging.getLogger(__name__)

V = TypeVar("V")


class Method(Enum):
    """HTTP request methods."""

    GET = "get"
    HEAD = "head"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    CONNECT = "connect"
    OPTIONS = "options"
    TRACE = "trace"

    @property
    def token(self) -> str:
        """Wire-level method token."""
        return self.value.upper()


@dataclass(frozen=True)
class RawBody:
    """Fixed-length body payload.

    An empty payload is sent the same way as no body.
    """

    data: bytes


@dataclass(frozen=True)
class StreamBody:
    """Body read from a byte stream owned by the caller.

    The stream is handed to the transport untouched; it is never opened,
    read or closed here.
    """

    stream: IO[bytes]


Body = Union[RawBody, StreamBody]


def _require_key(key: Any) -> None:
    if not is_extension_key(key):
        raise ExtensionKeyError(
            f"{key!r} is not a concrete ExtensionKey subclass"
        )


@dataclass
class RequestValues:
    """A collection of values used to make an HTTP request.

    Fixed fields are plain attributes. Extension values are read and written
    by indexing with the key class::

        values = RequestValues(Method.POST)
        values.headers["Accept"] = "application/json"
        values[RetryCount] = 3

    Reading a key that was never written returns the key's default.
    """

    method: Method = Method.GET
    components: Url = field(default_factory=Url)
    headers: HeaderFields = field(default_factory=HeaderFields)
    body: Body | None = None
    _extensions: dict[type, Any] = field(
        default_factory=dict, init=False, repr=False
    )

    # Extension values are only reachable through their keys.
    __iter__ = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "headers" and not isinstance(value, HeaderFields):
            value = HeaderFields(value)
        elif name == "method" and isinstance(value, str):
            value = Method(value.lower())
        super().__setattr__(name, value)

    def __getitem__(self, key: type[ExtensionKey[V]]) -> V:
        _require_key(key)
        try:
            value = self._extensions[key]
        except KeyError:
            return key.default()
        if not key.accepts(value):
            logger.debug(
                "Ignoring stored %r for %s; falling back to default",
                value,
                key.__qualname__,
            )
            return key.default()
        return value

    def __setitem__(self, key: type[ExtensionKey[V]], value: V) -> None:
        _require_key(key)
        if not key.accepts(value):
            raise ExtensionKeyError(
                f"{key.__qualname__} expects {key.value_type!r}, "
                f"got {type(value).__name__}"
            )
        self._extensions[key] = value

    def __delitem__(self, key: type[ExtensionKey[Any]]) -> None:
        _require_key(key)
        self._extensions.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return is_extension_key(key) and key in self._extensions

    @property
    def url(self) -> str | None:
        """The request URL, or None when no components are set."""
        return self.components.url or None

    @url.setter
    def url(self, value: str | None) -> None:
        if value is None:
            self.components = Url()
            return
        try:
            self.components = parse_url(value)
        except LocationParseError as exc:
            raise InvalidURL(f"cannot parse URL {value!r}") from exc

    def copy(self) -> RequestValues:
        """Return a snapshot with independent headers and extension store.

        Body handles and extension values themselves are shared.
        """
        clone = type(self)(
            method=self.method,
            components=self.components,
            headers=self.headers.copy(),
            body=self.body,
        )
        clone._extensions = dict(self._extensions)
        return clone

    __copy__ = copy

    def with_values(self, **changes: Any) -> RequestValues:
        """Return a copy with the given fixed fields replaced."""
        allowed = {f.name for f in fields(self) if f.init}
        unknown = set(changes) - allowed
        if unknown:
            raise TypeError(
                f"unknown request value field(s): {', '.join(sorted(unknown))}"
            )
        clone = self.copy()
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone
