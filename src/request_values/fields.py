"""Catalog of well-known HTTP header fields."""

from __future__ import annotations

from .headers import HeaderField

ACCEPT = HeaderField("Accept")
ACCEPT_CHARSET = HeaderField("Accept-Charset")
ACCEPT_ENCODING = HeaderField("Accept-Encoding")
ACCEPT_LANGUAGE = HeaderField("Accept-Language")
ACCEPT_RANGES = HeaderField("Accept-Ranges")
AGE = HeaderField("Age")
ALLOW = HeaderField("Allow")
AUTHORIZATION = HeaderField("Authorization")
CACHE_CONTROL = HeaderField("Cache-Control")
CONNECTION = HeaderField("Connection")
CONTENT_ENCODING = HeaderField("Content-Encoding")
CONTENT_LANGUAGE = HeaderField("Content-Language")
CONTENT_LENGTH = HeaderField("Content-Length")
CONTENT_LOCATION = HeaderField("Content-Location")
CONTENT_MD5 = HeaderField("Content-MD5")
CONTENT_RANGE = HeaderField("Content-Range")
CONTENT_TYPE = HeaderField("Content-Type")
DATE = HeaderField("Date")
ETAG = HeaderField("ETag")
EXPECT = HeaderField("Expect")
EXPIRES = HeaderField("Expires")
FROM = HeaderField("From")
HOST = HeaderField("Host")
IF_MATCH = HeaderField("If-Match")
IF_MODIFIED_SINCE = HeaderField("If-Modified-Since")
IF_NONE_MATCH = HeaderField("If-None-Match")
IF_RANGE = HeaderField("If-Range")
IF_UNMODIFIED_SINCE = HeaderField("If-Unmodified-Since")
LAST_MODIFIED = HeaderField("Last-Modified")
LOCATION = HeaderField("Location")
MAX_FORWARDS = HeaderField("Max-Forwards")
PRAGMA = HeaderField("Pragma")
PROXY_AUTHENTICATE = HeaderField("Proxy-Authenticate")
PROXY_AUTHORIZATION = HeaderField("Proxy-Authorization")
RANGE = HeaderField("Range")
REFERER = HeaderField("Referer")
RETRY_AFTER = HeaderField("Retry-After")
SERVER = HeaderField("Server")
TE = HeaderField("TE")
TRAILER = HeaderField("Trailer")
TRANSFER_ENCODING = HeaderField("Transfer-Encoding")
UPGRADE = HeaderField("Upgrade")
USER_AGENT = HeaderField("User-Agent")
VARY = HeaderField("Vary")
VIA = HeaderField("Via")
WARNING = HeaderField("Warning")
WWW_AUTHENTICATE = HeaderField("WWW-Authenticate")
