"""The commands understood by the pokedex prompt."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from .models import Pokemon
from .pokeapi import Client


class CommandError(Exception):
    """A command could not be carried out; the message is shown to the user."""


@dataclass
class Config:
    """State shared between commands during one session."""

    client: Client
    next_locations_url: Optional[str] = None
    prev_locations_url: Optional[str] = None
    character_exp: int = 100
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class CliCommand:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def command_help(cfg: Config, *args: str) -> None:
    """Print a usage line for every command."""
    print("\nWelcome to the Pokedex!")
    print("Usage:\n")
    for cmd in get_commands().values():
        print(f"{cmd.name}: {cmd.description}")
    print()


def _show_page(cfg: Config, page_url: Optional[str]) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for loc in page.results:
        print(loc.name)


def command_map(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_page(cfg, cfg.next_locations_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.prev_locations_url)


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye, release the client's resources and leave the program."""
    print("Closing the Pokedex... Goodbye!")
    cfg.client.close()
    sys.exit(0)


def command_list_cache(cfg: Config, *args: str) -> None:
    """Print what the client currently holds in its cache."""
    cfg.client.list_cache()


def command_explore(cfg: Config, *args: str) -> None:
    """List the pokemon found in a location area."""
    if len(args) != 1:
        raise CommandError("need a location to explore")
    name = args[0]
    location = cfg.client.explore_location(name)
    print(f"Exploring {name}... ")
    print("Found Pokemon:")
    for pokemon in location.pokemon_encounters:
        print(f" - {pokemon.name} ")


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a pokeball at a pokemon and add it to the pokedex if caught."""
    if len(args) != 1:
        raise CommandError("need a pokeman name to catch")
    name = args[0]
    pokemon = cfg.client.catch(name)
    skill = cfg.rng.randrange(cfg.character_exp * 4)
    print(f"BaseExperience: {pokemon.base_experience}")
    print(f"RandomCatchVal: {skill}")
    print(f"Throwing a Pokeball at {name}... ")
    if skill > pokemon.base_experience:
        print(f"{name} was caught!")
        print("You can inspect it with the inspect command")
        cfg.pokedex[pokemon.name] = pokemon
    else:
        print(f"{name} escaped!")


def command_inspect(cfg: Config, *args: str) -> None:
    """Print the details of a caught pokemon."""
    if len(args) != 1:
        raise CommandError("Need a pokemon name to inspect.")
    pokemon = cfg.pokedex.get(args[0])
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")
    print("Name:", pokemon.name)
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.name}: {stat.base_stat}")
    print("Types:")
    for type_name in pokemon.types:
        print("  -", type_name)


def command_pokedex(cfg: Config, *args: str) -> None:
    """List the names of every caught pokemon."""
    if not cfg.pokedex:
        raise CommandError("No pokemon caught")
    print("Your Pokedex:")
    for pokemon in cfg.pokedex.values():
        print(f" - {pokemon.name}")


def get_commands() -> dict[str, CliCommand]:
    """Return the available commands keyed by the word that starts them."""
    return {
        "help": CliCommand("help", "Displays a help message", command_help),
        "map": CliCommand("map", "Get the next page of locations", command_map),
        "mapb": CliCommand("mapb", "Get the previous page of locations", command_mapb),
        "exit": CliCommand("exit", "Exit the Pokedex", command_exit),
        "cache": CliCommand("cache", "List all cache entries", command_list_cache),
        "explore": CliCommand(
            "explore <location_name>", "Explore a location by name", command_explore
        ),
        "catch": CliCommand(
            "catch <pokemon_name>", "Catch a pokemon by name", command_catch
        ),
        "inspect": CliCommand(
            "inspect <pokemon_name>", "Inspect a pokemon by name", command_inspect
        ),
        "pokedex": CliCommand(
            "pokedex", "List names of caught pokemon", command_pokedex
        ),
    }