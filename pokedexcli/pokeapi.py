"""Client for the PokeAPI web service, with responses kept in a local cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Callable
from datetime import timedelta
from typing import Any, Optional, TypeVar, Union

from .models import Location, LocationPage, Pokemon
from .pokecache import Cache

BASE_URL = "https://pokeapi.co/api/v2"

Duration = Union[float, int, timedelta]
Fetch = Callable[[str, float], bytes]

_T = TypeVar("_T")


def _seconds(duration: Duration) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def _http_get(url: str, timeout: float) -> bytes:
    """Return the body of a GET request, whatever the response status."""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            return response.read()
    except urllib.error.HTTPError as error:
        with error:
            return error.read()


class Client:
    """Fetches PokeAPI documents, serving repeated requests from a cache."""

    def __init__(
        self,
        timeout: Duration = 5.0,
        cache_interval: Duration = timedelta(minutes=5),
        fetch: Optional[Fetch] = None,
    ) -> None:
        self.timeout = _seconds(timeout)
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        self._fetch: Fetch = fetch if fetch is not None else _http_get
        self._cache = Cache(cache_interval)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def catch(self, name: str) -> Pokemon:
        """Fetch the pokemon called ``name``."""
        return self._get(f"{BASE_URL}/pokemon/{name}", Pokemon.from_dict)

    def explore_location(self, loc: str) -> Location:
        """Fetch the location area called ``loc``."""
        return self._get(f"{BASE_URL}/location-area/{loc}", Location.from_dict)

    def list_locations(self, page_url: Optional[str] = None) -> LocationPage:
        """Fetch a page of location areas: the first one, or ``page_url``."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._get(url, LocationPage.from_dict)

    def list_cache(self) -> None:
        """Print the cached URLs and when each was stored."""
        self._cache.list_cache()

    def close(self) -> None:
        """Stop the cache's background expiry."""
        self._cache.close()

    def _get(self, url: str, build: Callable[[Any], _T]) -> _T:
        cached = self._cache.get(url)
        if cached is not None:
            result = build(json.loads(cached))
            print(">> pulled from cache")
            return result
        body = self._fetch(url, self.timeout)
        self._cache.add(url, body)
        return build(json.loads(body))