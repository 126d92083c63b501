"""Type-identity keys for the RequestValues extension store.

An extension key is a class, never an instance. The class object itself is
the storage token, so two independently written extensions cannot collide
even if they pick the same class name.

Example::

    class RetryCount(ExtensionKey[int]):
        default_value = 0

    values[RetryCount] = 3
"""

from __future__ import annotations

import types
import typing
from typing import Any, Callable, ClassVar, Generic, TypeVar

from .errors import ExtensionKeyError

V = TypeVar("V")


def _runtime_types(value_type: Any) -> tuple[type, ...] | None:
    """Resolve a declared value type into classes usable with isinstance.

    Returns None when the declaration cannot be checked at runtime.
    """
    if value_type is Any or isinstance(value_type, TypeVar):
        return None
    if value_type is None or value_type is type(None):
        return (type(None),)

    origin = typing.get_origin(value_type)
    if origin is typing.Annotated:
        return _runtime_types(typing.get_args(value_type)[0])
    if origin is typing.Union or origin is types.UnionType:
        resolved: list[type] = []
        for arg in typing.get_args(value_type):
            arg_types = _runtime_types(arg)
            if arg_types is None:
                return None
            resolved.extend(arg_types)
        return tuple(resolved)
    if origin is typing.Literal:
        return None
    if origin is not None:
        value_type = origin
    if isinstance(value_type, type):
        return (value_type,)
    return None


def _declared_value_type(cls: type) -> Any | None:
    """Return the generic argument given to ExtensionKey in cls's bases."""
    for base in cls.__dict__.get("__orig_bases__", ()):
        origin = typing.get_origin(base)
        if isinstance(origin, type) and issubclass(origin, ExtensionKey):
            args = typing.get_args(base)
            if args:
                return args[0]
    return None


class ExtensionKey(Generic[V]):
    """Base class for keys into the RequestValues extension store.

    Subclasses declare the value type as the generic argument (or with an
    explicit ``value_type`` attribute) and must provide either
    ``default_value`` or ``default_factory``. Intermediate generic bases can
    opt out of the default requirement with ``abstract=True``.
    """

    value_type: ClassVar[Any] = Any
    default_value: ClassVar[Any]
    default_factory: ClassVar[Callable[[], Any] | None] = None
    _abstract_key: ClassVar[bool] = True

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "value_type" not in cls.__dict__:
            declared = _declared_value_type(cls)
            if declared is not None:
                cls.value_type = declared
        cls._abstract_key = abstract
        if abstract:
            return

        if not hasattr(cls, "default_value") and cls.default_factory is None:
            raise ExtensionKeyError(
                f"extension key {cls.__qualname__} must define "
                "default_value or default_factory"
            )
        if "default_value" in cls.__dict__ and not cls.accepts(
            cls.default_value
        ):
            raise ExtensionKeyError(
                f"default_value {cls.default_value!r} of {cls.__qualname__} "
                f"does not match its value type {cls.value_type!r}"
            )

    def __new__(cls, *args: Any, **kwargs: Any) -> ExtensionKey[V]:
        raise ExtensionKeyError(
            f"{cls.__qualname__} is a type tag and cannot be instantiated"
        )

    @classmethod
    def default(cls) -> V:
        """Return the value read when nothing was stored for this key."""
        if cls.default_factory is not None:
            return cls.default_factory()
        return cls.default_value

    @classmethod
    def accepts(cls, value: object) -> bool:
        """Return True when value matches the declared value type."""
        expected = _runtime_types(cls.value_type)
        if expected is None:
            return True
        # int is acceptable where float or complex is declared.
        if complex in expected:
            expected += (float, int)
        elif float in expected:
            expected += (int,)
        try:
            return isinstance(value, expected)
        except TypeError:
            # Protocols that are not runtime checkable.
            return True


def is_extension_key(obj: object) -> bool:
    """Return True for concrete ExtensionKey subclasses."""
    return (
        isinstance(obj, type)
        and issubclass(obj, ExtensionKey)
        and not obj._abstract_key
    )
