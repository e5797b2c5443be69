"""
URL builder for OpenSocial REST requests.

A UrlBuilder accumulates a base endpoint, path segments and query string
parameters, and serializes them into a single URL string.
"""

import logging
from typing import Dict, List, Optional
from urllib.parse import SplitResult, quote_plus, urlsplit

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https", "ftp", "file")


class MalformedUrlError(ValueError):
    """Serialized URL could not be parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed URL {url!r}: {reason}")


class UrlBuilder:
    """
    Incrementally built URL.

    Path segments are appended in order and never encoded. Query parameter
    keys and values are form encoded (UTF-8, space becomes ``+``, ``*`` is
    left as-is) when added.
    Parameters serialize in first-insertion order of their encoded key.

    Examples:
        >>> url = UrlBuilder("https://api.example.com", "people")
        >>> url.add_segment("@me")
        >>> url.add_query_param("oauth_token", "abc 123")
        >>> url.serialize()
        'https://api.example.com/people/@me?oauth_token=abc+123'
    """

    def __init__(self, base: str, first_segment: Optional[str] = None):
        self._base = base
        self.segments: List[str] = []
        self.query_params: Dict[str, str] = {}
        if first_segment is not None:
            self.add_segment(first_segment)

    @property
    def base(self) -> str:
        return self._base

    def add_segment(self, segment: str) -> None:
        """Append a path segment as-is."""
        self.segments.append(segment)

    def add_query_param(self, key: str, value: str) -> None:
        """
        Encode and store a query string parameter.

        A later parameter whose key encodes to the same text replaces the
        earlier one.
        """
        try:
            encoded_key = quote_plus(key, safe="*", encoding="utf-8")
            encoded_value = quote_plus(value, safe="*", encoding="utf-8")
        except UnicodeEncodeError as e:
            # Parameter is skipped; adding never raises
            logger.debug(f"Skipping query parameter that cannot be encoded: {e}")
            return
        self.query_params[encoded_key] = encoded_value

    def serialize(self) -> str:
        """Render base, segments and query string into a URL."""
        url = self._base
        for segment in self.segments:
            if not url.endswith("/"):
                url += "/"
            url += segment

        if self.query_params:
            url += "?" + "&".join(
                f"{key}={value}" for key, value in self.query_params.items()
            )
        return url

    def to_url(self) -> SplitResult:
        """
        Parse the serialized URL.

        Raises:
            MalformedUrlError: scheme missing or unsupported, no host for a
                network scheme, or an invalid port
        """
        url = self.serialize()
        try:
            parsed = urlsplit(url)
            # Port is parsed lazily and raises on out-of-range values
            parsed.port
        except ValueError as e:
            raise MalformedUrlError(url, str(e)) from e

        if not parsed.scheme:
            raise MalformedUrlError(url, "no scheme")
        if parsed.scheme not in SUPPORTED_SCHEMES:
            raise MalformedUrlError(url, f"unsupported scheme {parsed.scheme!r}")
        if parsed.scheme != "file" and not parsed.hostname:
            raise MalformedUrlError(url, "no host")
        return parsed

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"UrlBuilder({self.serialize()!r})"
