import json

import pytest

from pokedexcli.models import (
    Location,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonStat,
)

PAGE = {
    "count": 1089,
    "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": "https://pokeapi.co/api/v2/location-area/1/"},
        {"name": "eterna-city-area", "url": "https://pokeapi.co/api/v2/location-area/2/"},
    ],
}

LOCATION = {
    "id": 1,
    "name": "canalave-city-area",
    "game_index": 1,
    "location": {"name": "canalave-city", "url": "https://pokeapi.co/api/v2/location/1/"},
    "encounter_method_rates": [],
    "pokemon_encounters": [
        {
            "pokemon": {"name": "tentacool", "url": "https://pokeapi.co/api/v2/pokemon/72/"},
            "version_details": [],
        },
        {
            "pokemon": {"name": "tentacruel", "url": "https://pokeapi.co/api/v2/pokemon/73/"},
            "version_details": [],
        },
    ],
}

POKEMON = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "order": 35,
    "is_default": True,
    "species": {"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-species/25/"},
    "abilities": [
        {"ability": {"name": "static", "url": "u"}, "is_hidden": False, "slot": 1},
        {"ability": {"name": "lightning-rod", "url": "u"}, "is_hidden": True, "slot": 3},
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": "u"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
    "sprites": {"front_default": None},
}


def test_named_resource_from_dict():
    res = NamedResource.from_dict({"name": "hp", "url": "https://example.com/stat/1"})
    assert res == NamedResource("hp", "https://example.com/stat/1")


def test_location_page_fields():
    page = LocationPage.from_dict(PAGE)
    assert page.count == PAGE["count"]
    assert page.next == PAGE["next"]
    assert page.previous is None
    assert [r.name for r in page.results] == [r["name"] for r in PAGE["results"]]
    assert [r.url for r in page.results] == [r["url"] for r in PAGE["results"]]


def test_location_page_from_json_text():
    page = LocationPage.from_dict(json.loads(json.dumps(PAGE)))
    assert page == LocationPage.from_dict(PAGE)


def test_location_page_empty_document():
    page = LocationPage.from_dict({})
    assert page.next is None and page.previous is None
    assert page.results == ()
    assert page.count == 0


def test_location_fields():
    loc = Location.from_dict(LOCATION)
    assert loc.name == LOCATION["name"]
    assert loc.id == LOCATION["id"]
    assert loc.location.name == LOCATION["location"]["name"]
    assert [p.name for p in loc.pokemon_encounters] == [
        e["pokemon"]["name"] for e in LOCATION["pokemon_encounters"]
    ]


def test_pokemon_stat_from_dict():
    stat = PokemonStat.from_dict(POKEMON["stats"][1])
    assert stat == PokemonStat(name="speed", base_stat=90, effort=2)


def test_pokemon_fields():
    mon = Pokemon.from_dict(POKEMON)
    assert mon.name == POKEMON["name"]
    assert mon.base_experience == POKEMON["base_experience"]
    assert mon.height == POKEMON["height"]
    assert mon.weight == POKEMON["weight"]
    assert mon.is_default is True
    assert mon.species.name == POKEMON["species"]["name"]
    assert mon.abilities == ("static", "lightning-rod")
    assert mon.types == ("electric",)
    assert [(s.name, s.base_stat) for s in mon.stats] == [("hp", 35), ("speed", 90)]


def test_pokemon_null_document_gives_empty_pokemon():
    assert Pokemon.from_dict(None) == Pokemon()


def test_pokemon_missing_fields_default():
    mon = Pokemon.from_dict({"name": "ditto"})
    assert mon.name == "ditto"
    assert mon.stats == () and mon.types == ()
    assert mon.base_experience == Pokemon().base_experience


@pytest.mark.parametrize(
    "doc",
    [
        {"base_experience": "lots"},
        {"base_experience": 1.5},
        {"height": True},
        {"name": 7},
        {"stats": {"hp": 1}},
        {"is_default": "yes"},
    ],
)
def test_pokemon_rejects_wrong_types(doc):
    with pytest.raises(ValueError):
        Pokemon.from_dict(doc)


@pytest.mark.parametrize("doc", [[], "text", 3])
def test_non_object_documents_rejected(doc):
    with pytest.raises(ValueError):
        LocationPage.from_dict(doc)
    with pytest.raises(ValueError):
        Location.from_dict(doc)


def test_location_page_rejects_bad_results():
    with pytest.raises(ValueError):
        LocationPage.from_dict({"results": ["not-an-object"]})