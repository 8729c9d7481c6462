"""Interactive command-line Pokedex backed by PokeAPI, with a response cache."""

__version__ = "0.1.0"