"""Conversion of RequestValues into a transport-level request.

The builder is the one-way boundary between the typed request description
and ``requests``. It produces a ``requests.PreparedRequest`` ready to be sent
by a session; it performs no I/O itself.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from . import fields
from .config import RequestBuilderConfig
from .errors import InvalidURL
from .headers import HeaderFields
from .values import Method, RawBody, RequestValues, StreamBody

logger = logging.getLogger(__name__)


class RequestBuilder:
    """Build ``requests`` prepared requests from RequestValues."""

    def __init__(self, config: RequestBuilderConfig | None = None) -> None:
        """Create a new RequestBuilder.

        Args:
            config: Default headers and URL scheme policy. Defaults to an
                empty configuration.
        """
        self._config = config if config is not None else RequestBuilderConfig()

    def _resolve_url(self, values: RequestValues) -> str:
        """Return the request URL or raise InvalidURL."""
        components = values.components
        url = components.url
        if not url:
            raise InvalidURL("request values have no URL")
        scheme = (components.scheme or "").lower()
        if scheme not in self._config.allowed_schemes:
            raise InvalidURL(f"unsupported URL scheme {scheme!r} in {url!r}")
        if not components.host:
            raise InvalidURL(f"URL {url!r} has no host")
        return url

    def _build_headers(self, values: RequestValues) -> HeaderFields:
        """Merge configured defaults under the request's own headers."""
        headers = HeaderFields(self._config.default_headers)
        if self._config.user_agent:
            headers[fields.USER_AGENT] = self._config.user_agent
        headers.update(values.headers)
        return headers

    @staticmethod
    def _body_data(values: RequestValues) -> Any | None:
        body = values.body
        if body is None:
            return None
        if isinstance(body, RawBody):
            return body.data
        if isinstance(body, StreamBody):
            return body.stream
        raise TypeError(f"unsupported body {body!r}")

    def build(self, values: RequestValues) -> requests.PreparedRequest:
        """Build a prepared request.

        Args:
            values: The finished request description.

        Returns:
            A prepared request with the upper-cased method, the resolved URL,
            every header under its original spelling and the body variant
            attached as given.

        Raises:
            InvalidURL: The URL components do not resolve to a usable URL.
        """
        url = self._resolve_url(values)
        method = Method(values.method).token
        headers = self._build_headers(values)
        request = requests.Request(
            method=method,
            url=url,
            headers=dict(headers.raw_items()),
            data=self._body_data(values),
        )
        try:
            prepared = request.prepare()
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as exc:
            raise InvalidURL(str(exc)) from exc

        logger.debug(
            "Prepared %s %s with %d header(s)",
            prepared.method,
            prepared.url,
            len(headers),
        )
        return prepared


def build_request(
    values: RequestValues, config: RequestBuilderConfig | None = None
) -> requests.PreparedRequest:
    """Build a prepared request from values using a one-off builder."""
    return RequestBuilder(config).build(values)
