"""Tests for card resources: paths, search parameters and collection bodies."""

import json

import httpx
import pytest
import respx

from scryfall_sdk import Method, Ok, ScryfallBlocking
from scryfall_sdk.resources import cards
from scryfall_sdk.resources.catalog import Catalog


@pytest.mark.parametrize("resource, expected", [
    (cards.ById("f295b713-1d6a-43fd-910d-fb35414bf58a"), "cards/f295b713-1d6a-43fd-910d-fb35414bf58a"),
    (cards.ByArenaId(67330), "cards/arena/67330"),
    (cards.ByCardmarketId(379041), "cards/cardmarket/379041"),
    (cards.ByCode("clb", "691"), "cards/clb/691"),
    (cards.ByMtgoId(54957), "cards/mtgo/54957"),
    (cards.ByMultiverseId(409574), "cards/multiverse/409574"),
    (cards.ByTcgplayerId(162145), "cards/tcgplayer/162145"),
    (cards.NamedExact("Lightning Bolt"), "cards/named?exact=Lightning%20Bolt"),
    (cards.NamedFuzzy("aust com"), "cards/named?fuzzy=aust%20com"),
    (cards.Random(), "cards/random"),
    (cards.Random("t:goblin"), "cards/random?q=t%3Agoblin"),
])
def test_card_paths(resource, expected):
    assert resource.path() == expected
    assert resource.method() is Method.GET
    assert resource.body() is None


def test_path_values_are_percent_encoded():
    assert cards.NamedExact("Dusk // Dawn").path() == "cards/named?exact=Dusk%20%2F%2F%20Dawn"
    assert cards.ByCode("plst", "KTK/35").path() == "cards/plst/KTK%2F35"
    assert cards.NamedExact("Ach! Hans & Fritz?").path() == (
        "cards/named?exact=Ach%21%20Hans%20%26%20Fritz%3F"
    )


def test_named_path_without_query():
    assert cards.NamedExact("Lightning Bolt").path_without_query() == "cards/named"
    assert cards.Random("c:r").path_without_query() == "cards/random"
    assert cards.ById("abc").path_without_query() == "cards/abc"


def test_unknown_card_variant_rejected():
    class Orphan(cards.CardResource):
        pass

    with pytest.raises(TypeError):
        Orphan().path()


def test_card_resources_decode_to_card():
    assert cards.ById("x").model is cards.Card
    assert cards.Search(cards.SearchQueryParams(q="x")).model is cards.CardPage
    assert cards.Autocomplete("x").model is Catalog
    assert cards.Collection([]).model is cards.CardCollection


# ------------------------------------------------------------------
# Search
# ------------------------------------------------------------------


def test_search_query_only_q():
    params = cards.SearchQueryParams(q="c:r t:goblin")
    assert cards.Search(params).path() == "cards/search?q=c%3Ar%20t%3Agoblin"


def test_search_query_all_params_in_order():
    params = cards.SearchQueryParams(
        q="f:standard",
        unique=cards.UniqueMode.PRINTS,
        order=cards.SortOrder.CMC,
        dir=cards.SortDirection.DESC,
        include_extras=True,
        include_multilingual=False,
        include_variations=True,
        page=3,
    )
    assert params.to_query() == (
        "q=f%3Astandard&unique=prints&order=cmc&dir=desc"
        "&include_extras=true&include_multilingual=false&include_variations=true&page=3"
    )


def test_search_omits_unset_params():
    params = cards.SearchQueryParams(q="bolt", order=cards.SortOrder.NAME, page=1)
    assert params.to_query() == "q=bolt&order=name&page=1"
    assert cards.Search(params).path_without_query() == "cards/search"


def test_autocomplete_paths():
    assert cards.Autocomplete("thal").path() == "cards/autocomplete?q=thal"
    assert cards.Autocomplete("thal", include_extras=True).path() == (
        "cards/autocomplete?q=thal&include_extras=true"
    )
    assert cards.Autocomplete("a b", include_extras=False).path() == (
        "cards/autocomplete?q=a%20b&include_extras=false"
    )


# ------------------------------------------------------------------
# Collection
# ------------------------------------------------------------------


def test_collection_request_shape():
    resource = cards.Collection([cards.ScryfallId("123")])
    assert resource.method() is Method.POST
    assert resource.path() == "cards/collection"
    assert resource.body() == '{"identifiers":[{"id":"123"}]}'


def test_collection_identifiers_are_untagged():
    resource = cards.Collection([
        cards.ScryfallId("683a5707-cddb-494d-9b41-51b4584ded69"),
        cards.OracleId("7bc3f92f"),
        cards.MtgoId(54957),
        cards.MultiverseId(409574),
        cards.IllustrationId("3134f77c"),
        cards.Name("Ancient Tomb"),
        cards.NameAndSet("Lightning Bolt", "prm"),
        cards.CollectorNumberAndSet("150", "mrd"),
    ])
    assert json.loads(resource.body()) == {"identifiers": [
        {"id": "683a5707-cddb-494d-9b41-51b4584ded69"},
        {"oracle_id": "7bc3f92f"},
        {"mtgo_id": 54957},
        {"multiverse_id": 409574},
        {"illustration_id": "3134f77c"},
        {"name": "Ancient Tomb"},
        {"name": "Lightning Bolt", "set": "prm"},
        {"collector_number": "150", "set": "mrd"},
    ]}


def test_empty_collection_body():
    assert cards.Collection([]).body() == '{"identifiers":[]}'


# ------------------------------------------------------------------
# Over the wire
# ------------------------------------------------------------------


@respx.mock(base_url="https://api.scryfall.com")
def test_named_card_roundtrip(respx_mock, card_json):
    route = respx_mock.get("/cards/named", params={"exact": "Dusk // Dawn"}).mock(
        return_value=httpx.Response(200, json=card_json)
    )
    with ScryfallBlocking() as client:
        result = client.request(cards.NamedExact("Dusk // Dawn"))

    assert isinstance(result, Ok)
    card = result.value
    assert card.name == "Dusk // Dawn"
    assert card.cmc == 9.0
    assert card.legalities["modern"] is cards.Legality.LEGAL
    assert card.card_faces[0].name == "Dusk"
    assert card.prices.usd == "0.13"
    assert route.calls.last.request.url.raw_path == b"/cards/named?exact=Dusk%20%2F%2F%20Dawn"


@respx.mock(base_url="https://api.scryfall.com")
def test_search_page(respx_mock, card_json):
    respx_mock.get("/cards/search", params={"q": "dawn", "page": "2"}).mock(
        return_value=httpx.Response(200, json={
            "object": "list",
            "total_cards": 176,
            "has_more": True,
            "next_page": "https://api.scryfall.com/cards/search?page=3&q=dawn",
            "data": [card_json],
            "warnings": ["Invalid expression"],
        })
    )
    with ScryfallBlocking() as client:
        page = client.request(
            cards.Search(cards.SearchQueryParams(q="dawn", page=2))
        ).unwrap()

    assert page.total_cards == 176
    assert page.has_more is True
    assert page.next_page.endswith("page=3&q=dawn")
    assert [c.name for c in page.data] == ["Dusk // Dawn"]
    assert page.warnings == ["Invalid expression"]


@respx.mock(base_url="https://api.scryfall.com")
def test_collection_roundtrip(respx_mock, card_json):
    route = respx_mock.post("/cards/collection").mock(
        return_value=httpx.Response(200, json={
            "object": "list",
            "not_found": [{"name": "Not A Card"}],
            "data": [card_json],
        })
    )
    with ScryfallBlocking() as client:
        result = client.request(
            cards.Collection([cards.Name("Dusk // Dawn"), cards.Name("Not A Card")])
        )

    collection = result.unwrap()
    assert len(collection.data) == 1
    assert collection.not_found == [{"name": "Not A Card"}]
    request = route.calls.last.request
    assert request.method == "POST"
    assert json.loads(request.content) == {
        "identifiers": [{"name": "Dusk // Dawn"}, {"name": "Not A Card"}]
    }


@respx.mock(base_url="https://api.scryfall.com")
def test_autocomplete_roundtrip(respx_mock):
    respx_mock.get("/cards/autocomplete", params={"q": "thal"}).mock(
        return_value=httpx.Response(200, json={
            "object": "catalog",
            "total_values": 2,
            "data": ["Thalia, Guardian of Thraben", "Thallid"],
        })
    )
    with ScryfallBlocking() as client:
        catalog = client.request(cards.Autocomplete("thal")).unwrap()
    assert catalog.total_values == 2
    assert catalog.data[1] == "Thallid"
