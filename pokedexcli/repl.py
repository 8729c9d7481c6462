"""The interactive prompt and the program's entry point."""

from __future__ import annotations

import argparse
import sys
from datetime import timedelta
from typing import Optional, Sequence, TextIO

from .commands import CommandError, Config, get_commands
from .pokeapi import Client


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stdin: Optional[TextIO] = None) -> None:
    """Read commands line by line and run them until input ends."""
    stream = stdin if stdin is not None else sys.stdin
    commands = get_commands()
    while True:
        print("Pokedex > ", end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            return
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknownn command")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, OSError, ValueError) as err:
            print(err)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive pokedex session."""
    parser = argparse.ArgumentParser(prog="pokedexcli", description="A Pokedex prompt.")
    parser.parse_args(argv)
    client = Client(timeout=5, cache_interval=timedelta(minutes=5))
    try:
        cfg = Config(client=client, character_exp=100)
        start_repl(cfg)
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())