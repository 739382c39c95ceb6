"""
URL value with a decoded path and a percent-encoded raw path.

urllib.parse only hands back the encoded path, so the decoded form is
computed here and the original text is kept in ``raw_path`` whenever the
default encoding of the decoded path would not reproduce it (e.g. ``%2f``
inside a segment).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from urllib.parse import quote, unquote, urlsplit

# Bytes left alone when encoding a decoded path.
PATH_SAFE = "$&+,/:;=@"

# Bytes tolerated unencoded inside a raw path (pchar sub-delims plus brackets).
RAW_PATH_SAFE = "%!$&'()*+,;=:@[]/"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class URLParseError(ValueError):
    """Raised when a URL or path carries a malformed percent escape."""


def unescape_path(text: str) -> str:
    """Decode %XX escapes in a path. ``+`` is not treated as a space."""
    bad = _BAD_ESCAPE.search(text)
    if bad is not None:
        raise URLParseError(f"invalid URL escape {text[bad.start():bad.start() + 3]!r}")
    return unquote(text, errors="surrogateescape")


def escape_path(path: str) -> str:
    """Percent-encode a decoded path using upper-case hex digits."""
    return quote(path, safe=PATH_SAFE, errors="surrogateescape")


@dataclass(frozen=True)
class URL:
    """Absolute or path-only URL in dual (decoded / raw) representation."""

    scheme: str = ""
    host: str = ""
    path: str = ""
    raw_path: str = ""
    raw_query: str = ""

    def escaped_path(self) -> str:
        """
        Return the encoded path used for serialization.

        ``raw_path`` wins when it decodes to ``path``; escapes already in it
        are kept as written (case included). Otherwise ``path`` is encoded.
        """
        if self.raw_path and _decodes_to(self.raw_path, self.path):
            return quote(self.raw_path, safe=RAW_PATH_SAFE, errors="surrogateescape")
        return escape_path(self.path)

    def geturl(self) -> str:
        out = ""
        if self.scheme:
            out += self.scheme + ":"
        if self.host:
            out += "//" + self.host
        path = self.escaped_path()
        if path and not path.startswith("/") and self.host:
            path = "/" + path
        out += path
        if self.raw_query:
            out += "?" + self.raw_query
        return out

    def __str__(self) -> str:
        return self.geturl()


def _decodes_to(raw_path: str, path: str) -> bool:
    try:
        return unescape_path(raw_path) == path
    except URLParseError:
        return False


def parse_url(text: str) -> URL:
    """
    Parse ``text`` into a URL.

    The fragment, if any, is dropped. Raises URLParseError on a malformed
    percent escape in the path.
    """
    parts = urlsplit(text)
    return _with_path(URL(scheme=parts.scheme, host=parts.netloc, raw_query=parts.query), parts.path)


def parse_request_uri(text: str) -> URL:
    """
    Parse the target of an HTTP request line.

    Origin-form targets (``/a/b?q``) are taken as path and query only, so a
    leading ``//`` never turns the first segment into a host. Absolute-form
    targets are parsed like any URL.
    """
    if not text.startswith("/"):
        return parse_url(text)
    path, _, query = text.partition("?")
    return _with_path(URL(raw_query=query), path)


def _with_path(url: URL, encoded: str) -> URL:
    path = unescape_path(encoded)
    raw_path = encoded if escape_path(path) != encoded else ""
    return replace(url, path=path, raw_path=raw_path)
