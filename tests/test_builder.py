# pyright: reportUnknownParameterType=false, reportUnknownMemberType=false
# pyright: reportMissingParameterType=false
import io
import logging
from unittest.mock import patch

import pytest
import requests
from urllib3.util import Url

from request_values import (
    ExtensionKey,
    InvalidURL,
    Method,
    RawBody,
    RequestBuilder,
    RequestBuilderConfig,
    RequestValues,
    StreamBody,
    build_request,
)


class RetryCount(ExtensionKey[int]):
    default_value = 0


@pytest.fixture
def config():
    return RequestBuilderConfig(
        user_agent="TestAgent/1.0",
        default_headers={"X-Test": "yes"},
    )


@pytest.fixture
def builder(config):
    return RequestBuilder(config)


def _values(url: str = "http://example.com/items", **kwargs) -> RequestValues:
    values = RequestValues(**kwargs)
    values.url = url
    return values


def test_build_applies_user_agent_and_default_headers(builder):
    prepared = builder.build(_values())

    assert prepared.headers["User-Agent"] == "TestAgent/1.0"
    assert prepared.headers["X-Test"] == "yes"


def test_request_headers_override_defaults_case_insensitively(builder):
    values = _values()
    values.headers["user-agent"] = "Custom/2.0"
    values.headers["x-test"] = "no"

    prepared = builder.build(values)

    assert prepared.headers["User-Agent"] == "Custom/2.0"
    assert prepared.headers["X-Test"] == "no"
    assert len(prepared.headers) == 2


def test_headers_keep_their_raw_spelling():
    values = _values()
    values.headers["x-REQUEST-id"] = "abc"

    prepared = build_request(values)

    assert list(prepared.headers.keys()) == ["x-REQUEST-id"]


@pytest.mark.parametrize("method", list(Method))
def test_method_is_upper_cased(method):
    prepared = build_request(_values(method=method))

    assert prepared.method == method.value.upper()


def test_empty_components_raise_invalid_url():
    with pytest.raises(InvalidURL):
        build_request(RequestValues())


def test_relative_components_raise_invalid_url():
    values = RequestValues(components=Url(path="/items"))

    with pytest.raises(InvalidURL):
        build_request(values)


def test_unsupported_scheme_raises_invalid_url():
    with pytest.raises(InvalidURL):
        build_request(_values("ftp://example.com/file"))


def test_allowed_schemes_are_configurable():
    config = RequestBuilderConfig(allowed_schemes={"HTTPS"})

    with pytest.raises(InvalidURL):
        build_request(_values("http://example.com"), config)
    assert build_request(_values("https://example.com"), config).url == (
        "https://example.com/"
    )


def test_missing_host_raises_invalid_url():
    with pytest.raises(InvalidURL):
        build_request(RequestValues(components=Url(scheme="http", path="/x")))


def test_requests_url_errors_are_wrapped():
    error = requests.exceptions.InvalidURL("bad label")

    with patch.object(requests.Request, "prepare", side_effect=error):
        with pytest.raises(InvalidURL) as excinfo:
            build_request(_values())

    assert excinfo.value.__cause__ is error


def test_no_body_is_attached_when_absent():
    prepared = build_request(_values())

    assert prepared.body is None


def test_raw_body_is_attached():
    prepared = build_request(
        _values(method=Method.POST, body=RawBody(b"\x01\x02"))
    )

    assert prepared.body == b"\x01\x02"
    assert prepared.headers["Content-Length"] == "2"


def test_stream_body_is_attached_without_being_consumed():
    stream = io.BytesIO(b"\x01\x02")

    prepared = build_request(
        _values(method=Method.PUT, body=StreamBody(stream))
    )

    assert prepared.body is stream
    assert stream.tell() == 0
    assert not stream.closed


def test_build_logs_prepared_request(builder, caplog):
    with caplog.at_level(logging.DEBUG, logger="request_values.builder"):
        builder.build(_values())

    assert "Prepared GET http://example.com/items" in caplog.text


def test_build_does_not_modify_values(builder):
    values = _values()
    values.headers["Accept"] = "text/html"

    builder.build(values)

    assert dict(values.headers.raw_items()) == {"Accept": "text/html"}


def test_end_to_end_json_request_with_extension():
    values = RequestValues(Method.GET)
    values.headers["Accept"] = "application/json"
    values[RetryCount] = 3

    assert values[RetryCount] == 3
    assert len(values.headers) == 1
    assert "accept" in values.headers

    values.url = "https://api.example.com/v1/items"
    prepared = build_request(values)

    assert prepared.method == "GET"
    assert dict(prepared.headers) == {"Accept": "application/json"}
    assert prepared.body is None


def test_end_to_end_body_replacement_keeps_only_stream():
    values = _values(method=Method.POST)
    values.body = RawBody(bytes([0x01, 0x02]))
    stream = io.BytesIO(b"streamed")
    values.body = StreamBody(stream)

    prepared = build_request(values)

    assert values.body == StreamBody(stream)
    assert prepared.body is stream


def test_empty_raw_body_is_sent_as_no_body():
    prepared = build_request(_values(method=Method.POST, body=RawBody(b"")))

    assert prepared.body is None
    assert prepared.headers["Content-Length"] == "0"
