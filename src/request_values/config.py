"""Configuration models for the RequestBuilder."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import AbstractSet, Mapping


def _default_headers() -> Mapping[str, str]:
    """Return immutable empty default headers mapping."""

    return MappingProxyType({})


def _default_schemes() -> AbstractSet[str]:
    return frozenset({"http", "https"})


@dataclass(frozen=True)
class RequestBuilderConfig:
    """Configuration applied when RequestValues become a transport request.

    Headers set on the RequestValues take precedence over ``user_agent`` and
    ``default_headers``.
    """

    user_agent: str | None = None
    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    allowed_schemes: AbstractSet[str] = field(default_factory=_default_schemes)

    def __post_init__(self) -> None:
        if self.user_agent is not None and not self.user_agent.strip():
            raise ValueError("user_agent must not be blank when provided")
        if isinstance(self.allowed_schemes, str):
            raise ValueError("allowed_schemes must be a collection, not a str")
        if not self.allowed_schemes:
            raise ValueError("allowed_schemes must not be empty")
        for name, value in self.default_headers.items():
            if not isinstance(value, str):
                raise ValueError(
                    f"default header {str(name)!r} must have a str value"
                )

        # Freeze copied inputs to avoid post-init mutation side effects.
        object.__setattr__(
            self,
            "default_headers",
            MappingProxyType(
                {
                    str(name): value
                    for name, value in self.default_headers.items()
                }
            ),
        )
        object.__setattr__(
            self,
            "allowed_schemes",
            frozenset(scheme.lower() for scheme in self.allowed_schemes),
        )
