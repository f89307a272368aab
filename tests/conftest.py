"""Shared Scryfall payload fixtures.

Each fixture returns a fresh dict so tests can mutate it freely.
"""

import copy

import pytest

BASE_URL = "https://api.scryfall.com"

DUSK_DAWN = {
    "object": "card",
    "id": "f295b713-1d6a-43fd-910d-fb35414bf58a",
    "oracle_id": "7bc3f92f-68a2-4934-afc4-89f6d0e8cf98",
    "multiverse_ids": [567508],
    "tcgplayer_id": 273737,
    "name": "Dusk // Dawn",
    "lang": "en",
    "released_at": "2022-06-10",
    "uri": "http://some.url",
    "scryfall_uri": "http://some.url",
    "layout": "split",
    "highres_image": False,
    "image_status": "lowres",
    "image_uris": {
        "small": "http://some.url",
        "normal": "http://some.url",
        "large": "http://some.url",
        "png": "http://some.url",
        "art_crop": "http://some.url",
        "border_crop": "http://some.url",
    },
    "mana_cost": "{2}{W}{W} // {3}{W}{W}",
    "cmc": 9,
    "type_line": "Sorcery // Sorcery",
    "colors": ["W"],
    "color_identity": ["W"],
    "keywords": ["Aftermath"],
    "card_faces": [
        {
            "object": "card_face",
            "name": "Dusk",
            "mana_cost": "{2}{W}{W}",
            "type_line": "Sorcery",
            "oracle_text": "Destroy all creatures with power 3 or greater.",
            "artist": "Kasia 'Kafis' Zielińska",
            "artist_id": "a662cb71-4770-4b49-8b03-2cf8497049a7",
            "illustration_id": "3134f77c-7a7d-48e0-99a6-4f323868e1ef",
        }
    ],
    "legalities": {
        "standard": "not_legal",
        "future": "not_legal",
        "historic": "legal",
        "pioneer": "legal",
        "modern": "legal",
        "legacy": "legal",
        "pauper": "not_legal",
        "vintage": "legal",
        "commander": "legal",
        "oldschool": "not_legal",
    },
    "games": ["paper"],
    "reserved": False,
    "foil": False,
    "nonfoil": True,
    "finishes": ["nonfoil"],
    "oversized": False,
    "promo": False,
    "reprint": True,
    "variation": False,
    "set_id": "5e4c3fe8-fd57-4b20-ad56-c03790a16cea",
    "set": "clb",
    "set_name": "Commander Legends: Battle for Baldur's Gate",
    "set_type": "draft_innovation",
    "set_uri": "http://some.url",
    "set_search_uri": "http://some.url",
    "scryfall_set_uri": "http://some.url",
    "rulings_uri": "http://some.url",
    "prints_search_uri": "http://some.url",
    "collector_number": "691",
    "digital": False,
    "rarity": "rare",
    "card_back_id": "0aeebaf5-8c7d-4636-9e82-8c27447861f7",
    "artist": "Kasia 'Kafis' Zielińska",
    "artist_ids": ["a662cb71-4770-4b49-8b03-2cf8497049a7"],
    "illustration_id": "3134f77c-7a7d-48e0-99a6-4f323868e1ef",
    "border_color": "black",
    "frame": "2015",
    "security_stamp": "oval",
    "full_art": False,
    "textless": False,
    "booster": False,
    "story_spotlight": False,
    "edhrec_rank": 904,
    "penny_rank": 2681,
    "prices": {
        "usd": "0.13",
        "usd_foil": None,
        "usd_etched": None,
        "eur": None,
        "eur_foil": None,
        "tix": None,
    },
    "related_uris": {
        "gatherer": "http://some.url",
        "tcgplayer_infinite_articles": "http://some.url",
        "tcgplayer_infinite_decks": "http://some.url",
        "edhrec": "http://some.url",
    },
    "purchase_uris": {
        "tcgplayer": "http://some.url",
        "cardmarket": "http://some.url",
        "cardhoarder": "http://some.url",
    },
}

ORACLE_CARDS_ENTRY = {
    "object": "bulk_data",
    "id": "27bf3214-1271-490b-bdfe-c0be6c23d02e",
    "type": "oracle_cards",
    "updated_at": "2022-06-18T09:02:10.928+00:00",
    "uri": "https://some-url.com",
    "name": "Oracle Cards",
    "description": "A description",
    "compressed_size": 13976935,
    "download_uri": "https://some-url.com",
    "content_type": "application/json",
    "content_encoding": "gzip",
}

BROTHERS_WAR = {
    "object": "set",
    "id": "4219a14e-6701-4ddd-a185-21dc054ab19b",
    "code": "bro",
    "mtgo_code": "bro",
    "arena_code": "bro",
    "name": "The Brothers' War",
    "uri": "https://some-url.com",
    "scryfall_uri": "https://some-url.com",
    "search_uri": "https://some-url.com",
    "released_at": "2022-11-18",
    "set_type": "expansion",
    "card_count": 0,
    "digital": False,
    "nonfoil_only": True,
    "foil_only": True,
    "icon_svg_uri": "https://some-url.com",
}

SYMBOLS = [
    {
        "object": "card_symbol",
        "symbol": "{T}",
        "svg_uri": "https://some-url.com",
        "loose_variant": None,
        "english": "tap this permanent",
        "transposable": False,
        "represents_mana": False,
        "appears_in_mana_costs": False,
        "cmc": 0,
        "funny": False,
        "colors": [],
        "gatherer_alternates": None,
    },
    {
        "object": "card_symbol",
        "symbol": "{0}",
        "svg_uri": "https://some-url.com",
        "loose_variant": "0",
        "english": "zero mana",
        "transposable": False,
        "represents_mana": True,
        "appears_in_mana_costs": True,
        "cmc": 0,
        "funny": False,
        "colors": ["B", "G"],
        "gatherer_alternates": ["o0"],
    },
]

MANA_COST = {
    "object": "mana_cost",
    "cost": "1UR",
    "colors": ["U", "R"],
    "cmc": 1,
    "colorless": False,
    "monocolored": False,
    "multicolored": True,
}

RULING = {
    "object": "ruling",
    "oracle_id": "7bc3f92f-68a2-4934-afc4-89f6d0e8cf98",
    "source": "wotc",
    "published_at": "2017-04-18",
    "comment": "Aftermath cards have two halves.",
}

CREATURE_TYPES = {
    "object": "catalog",
    "uri": "https://api.scryfall.com/catalog/creature-types",
    "total_values": 3,
    "data": ["Goblin", "Human", "Zombie"],
}

NOT_FOUND = {
    "object": "error",
    "code": "not_found",
    "status": 404,
    "details": "No card found with the given ID or set code and collector number.",
}


def listing(*items, **extra):
    """Wrap items in a Scryfall list object."""
    payload = {"object": "list", "has_more": False, "data": list(items)}
    payload.update(extra)
    return payload


@pytest.fixture
def card_json():
    return copy.deepcopy(DUSK_DAWN)


@pytest.fixture
def bulk_entry_json():
    return copy.deepcopy(ORACLE_CARDS_ENTRY)


@pytest.fixture
def card_set_json():
    return copy.deepcopy(BROTHERS_WAR)


@pytest.fixture
def symbols_json():
    return listing(*copy.deepcopy(SYMBOLS))


@pytest.fixture
def mana_cost_json():
    return copy.deepcopy(MANA_COST)


@pytest.fixture
def ruling_json():
    return copy.deepcopy(RULING)


@pytest.fixture
def catalog_json():
    return copy.deepcopy(CREATURE_TYPES)


@pytest.fixture
def not_found_json():
    return copy.deepcopy(NOT_FOUND)
