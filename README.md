# pokedexcli

An interactive Pokedex for the terminal. It pages through location areas,
explores them for Pokemon, and lets you try to catch, inspect and list what you
have caught. Data comes from the public PokeAPI. Raw responses are kept in an
in-memory cache for five minutes, so asking again for a page, a location area
or a Pokemon within that time does not go back to the network.

## Installation

```
pip install .
```

There are no third-party runtime dependencies. Python 3.10 or later is needed.

## Usage

Start the prompt:

```
pokedexcli
```

The prompt is `Pokedex > `. Each line is lower-cased and split on whitespace,
so `CATCH Pikachu` is the same as `catch pikachu`. Blank lines are ignored and
an unknown word prints `Unknownn command`. The session ends on `exit` or at the
end of input.

| Command                   | What it does                       |
|---------------------------|------------------------------------|
| `help`                    | Displays a help message            |
| `map`                     | Get the next page of locations     |
| `mapb`                    | Get the previous page of locations |
| `explore <location_name>` | Explore a location by name         |
| `catch <pokemon_name>`    | Catch a pokemon by name            |
| `inspect <pokemon_name>`  | Inspect a pokemon by name          |
| `pokedex`                 | List names of caught pokemon       |
| `cache`                   | List all cache entries             |
| `exit`                    | Exit the Pokedex                   |

`mapb` before any page with a previous link prints `you're on the first page`.
`inspect` only works on Pokemon you have caught, and `pokedex` prints
`No pokemon caught` while the Pokedex is empty. Network and decoding errors are
printed and the prompt carries on.

An example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 ...
Pokedex > catch tentacool
BaseExperience: 67
RandomCatchVal: 212
Throwing a Pokeball at tentacool...
tentacool was caught!
You can inspect it with the inspect command
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
  -hp: 40
  ...
Types:
  - water
  - poison
Pokedex > pokedex
Your Pokedex:
 - tentacool
Pokedex > exit
Closing the Pokedex... Goodbye!
```

Catching is random. Your character's experience is 100. A throw rolls a
random whole number from 0 up to (but not including) four times that value and
succeeds when the roll is higher than the Pokemon's base experience, so
Pokemon with a high base experience escape more often.

Answers served from the cache print `>> pulled from cache`. The cache's
background reaper also prints what it holds each time it wakes (every five
minutes) and notes each entry it removes.

## What it does not do

The Pokedex lives only in memory: caught Pokemon are lost when the session
ends, and nothing is saved to disk. There is no way to set the character's
experience, the request timeout or the cache lifetime from the command line.

## Using the pieces

The modules can also be used as a library:

- `pokedexcli.pokecache.Cache(interval)` is a thread-safe key/value store of
  bytes. `add(key, val)` stores, `get(key)` returns the bytes or `None` when the
  key is absent or older than the interval, `list_cache()` prints the keys and
  their creation times, and `len()` counts the entries. A background thread
  removes stale entries every interval; `close()` stops it, and the cache is
  also a context manager.
- `pokedexcli.pokeapi.Client(timeout, cache_interval, fetch)` has `catch(name)`,
  `explore_location(loc)`, `list_locations(page_url)`, `list_cache()` and
  `close()`. `fetch` is an optional callable taking a URL and a timeout in
  seconds and returning the body as bytes; by default it does an HTTP GET.
- `pokedexcli.models` holds the parsed response types: `NamedResource`,
  `LocationPage`, `Location`, `PokemonStat` and `Pokemon`, each built with
  `from_dict`.
- `pokedexcli.commands` holds `Config`, the `command_*` functions,
  `get_commands()` and `CommandError`.
- `pokedexcli.repl` holds `clean_input(text)`, `start_repl(cfg, stdin)` and
  `main()`.

## Running the tests

```
pip install .[test]
pytest
```