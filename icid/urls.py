"""URL helpers shared by the request decoder and the redirect builders."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

import httpx

from .errors import MalformedUrlError

URLInput = Union[str, httpx.URL]


def parse_absolute_url(value: URLInput) -> httpx.URL:
    """Parse a URL, requiring both a scheme and a host.

    An empty path is written as "/", so ``https://rp.example`` and
    ``https://rp.example/`` parse to the same URL.

    Raises:
        MalformedUrlError: If the value cannot be parsed or is relative
    """
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as e:
        raise MalformedUrlError(value, str(e)) from e
    if not url.is_absolute_url:
        raise MalformedUrlError(value)
    # httpx reports an empty path as "/" but serializes it as nothing
    if url.path == "/":
        url = url.copy_with(path="/")
    return url


def normalize_url(value: URLInput) -> str:
    """Return the re-serialized form of an absolute URL."""
    return str(parse_absolute_url(value))


def apply_query_params(url: httpx.URL, params: Iterable[Tuple[str, Optional[str]]]) -> httpx.URL:
    """Return a copy of url with each parameter set, or removed when its value is None.

    Parameters already on the URL and not named in params are kept in place.
    """
    for key, value in params:
        if value is None:
            url = url.copy_remove_param(key)
        else:
            url = url.copy_set_param(key, value)
    return url


__all__ = [
    "URLInput",
    "parse_absolute_url",
    "normalize_url",
    "apply_query_params",
]
