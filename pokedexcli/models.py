"""Typed views of the location and pokemon documents served by the API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {value!r}")
    return value


def _opt_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    return _opt_str(data, key) or ""


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected an array, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "NamedResource":
        data = _mapping(data, "named resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "LocationPage":
        data = _mapping(data, "location page")
        return cls(
            count=_int(data, "count"),
            next=_opt_str(data, "next"),
            previous=_opt_str(data, "previous"),
            results=tuple(NamedResource.from_dict(item) for item in _list(data, "results")),
        )


@dataclass(frozen=True)
class Location:
    """A location area and the pokemon that can be met there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Location":
        data = _mapping(data, "location")
        encounters = tuple(
            NamedResource.from_dict(_mapping(item, "pokemon encounter").get("pokemon"))
            for item in _list(data, "pokemon_encounters")
        )
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=encounters,
        )


@dataclass(frozen=True)
class PokemonStat:
    """One base statistic of a pokemon."""

    name: str = ""
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "PokemonStat":
        data = _mapping(data, "stat")
        return cls(
            name=NamedResource.from_dict(data.get("stat")).name,
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class Pokemon:
    """The parts of a pokemon document that the pokedex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    abilities: tuple[str, ...] = ()
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Pokemon":
        data = _mapping(data, "pokemon")
        abilities = tuple(
            NamedResource.from_dict(_mapping(item, "ability").get("ability")).name
            for item in _list(data, "abilities")
        )
        types = tuple(
            NamedResource.from_dict(_mapping(item, "type").get("type")).name
            for item in _list(data, "types")
        )
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=_bool(data, "is_default"),
            species=NamedResource.from_dict(data.get("species")),
            abilities=abilities,
            stats=tuple(PokemonStat.from_dict(item) for item in _list(data, "stats")),
            types=types,
        )