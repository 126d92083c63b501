"""Typed, extensible descriptions of HTTP requests."""

from .builder import RequestBuilder, build_request
from .config import RequestBuilderConfig
from .errors import ExtensionKeyError, InvalidURL, RequestValuesError
from .headers import HeaderField, HeaderFields
from .keys import ExtensionKey, is_extension_key
from .values import Body, Method, RawBody, RequestValues, StreamBody

__all__ = [
    "Body",
    "ExtensionKey",
    "ExtensionKeyError",
    "HeaderField",
    "HeaderFields",
    "InvalidURL",
    "Method",
    "RawBody",
    "RequestBuilder",
    "RequestBuilderConfig",
    "RequestValues",
    "RequestValuesError",
    "StreamBody",
    "build_request",
    "is_extension_key",
]
