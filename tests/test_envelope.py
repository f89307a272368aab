"""Tests for response envelope decoding and path handling."""

from dataclasses import dataclass

import pytest

from scryfall_sdk import Err, ErrorBody, HttpResource, Ok, ScryfallError, decode_response
from scryfall_sdk.models import DecodeError, expect_object
from scryfall_sdk.resources import bulk_data, card_sets, cards, rulings
from scryfall_sdk.resources.card_symbols import CardSymbolsResource, ManaCostResource
from scryfall_sdk.resources.catalog import Catalog, CatalogResource, Catalogs


@dataclass
class Anything:
    """Accepts any JSON object."""

    raw: dict

    @classmethod
    def from_dict(cls, raw):
        return cls(expect_object(raw, "anything"))


@dataclass(frozen=True)
class FixedPath(HttpResource[Anything]):
    value: str

    model = Anything

    def path(self):
        return self.value


def test_resource_without_path_cannot_be_created():
    class NoPath(HttpResource[Anything]):
        model = Anything

    with pytest.raises(TypeError):
        NoPath()
    with pytest.raises(TypeError):
        HttpResource()


def test_model_wins_when_payload_matches(catalog_json):
    result = decode_response(catalog_json, Catalog)
    assert isinstance(result, Ok)
    assert result.is_ok
    assert result.unwrap().total_values == 3


def test_error_payload_decodes_to_err(not_found_json):
    result = decode_response(not_found_json, Catalog)
    assert isinstance(result, Err)
    assert not result.is_ok
    assert result.error.code == "not_found"
    assert result.error.status == 404


def test_error_payload_never_accepted_by_lenient_model(not_found_json):
    result = decode_response(not_found_json, Anything)
    assert isinstance(result, Err)
    assert result.error.details.startswith("No card found")


def test_lenient_model_still_takes_non_error_payload():
    result = decode_response({"object": "thing", "code": "x"}, Anything)
    assert isinstance(result, Ok)
    assert result.value.raw["code"] == "x"


def test_incomplete_error_payload_raises(not_found_json):
    del not_found_json["details"]
    with pytest.raises(DecodeError):
        decode_response(not_found_json, Anything)


@pytest.mark.parametrize("payload", [
    {"object": "card", "name": "Half a card"},
    {"object": "catalog", "data": []},
    [],
    "not found",
    None,
])
def test_payload_matching_neither_shape_raises(payload):
    with pytest.raises(DecodeError):
        decode_response(payload, Catalog)


def test_error_body_reads_type_field(not_found_json):
    not_found_json["type"] = "ambiguous"
    not_found_json["warnings"] = ["careful"]
    body = ErrorBody.from_dict(not_found_json)
    assert body.error_type == "ambiguous"
    assert body.warnings == ["careful"]
    assert ErrorBody.from_dict(body.to_dict()) == body


def test_error_body_encodes_error_type(not_found_json):
    not_found_json["error_type"] = "ambiguous"
    encoded = ErrorBody.from_dict(not_found_json).to_dict()
    assert encoded["error_type"] == "ambiguous"
    assert "type" not in encoded


def test_unwrap_err_raises_scryfall_error(not_found_json):
    result = decode_response(not_found_json, Catalog)
    with pytest.raises(ScryfallError) as exc_info:
        result.unwrap()
    assert exc_info.value.code == "not_found"
    assert exc_info.value.status == 404
    assert "not_found" in str(exc_info.value)


def test_transport_error_body():
    body = ErrorBody.from_transport_error(ConnectionRefusedError("Connection refused"))
    assert body.code == "CLIENT_ERR"
    assert body.status == 599
    assert body.details == "Connection refused"
    assert body.is_client_error


def test_transport_error_body_without_message():
    body = ErrorBody.from_transport_error(TimeoutError())
    assert body.details == "TimeoutError"


# ------------------------------------------------------------------
# path_without_query
# ------------------------------------------------------------------

RESOURCES = [
    bulk_data.All(),
    bulk_data.Filter("rulings"),
    CatalogResource(Catalogs.POWERS),
    CardSymbolsResource(),
    ManaCostResource("1b"),
    card_sets.CardSetListResource(),
    card_sets.WithTcgPlayerId("1909"),
    rulings.ByMtgoId(1),
    cards.NamedFuzzy("jac bele"),
    cards.Random("c:u"),
    cards.Search(cards.SearchQueryParams(q="o:draw", page=2)),
    cards.Autocomplete("bol", include_extras=True),
    cards.Collection([cards.ScryfallId("1")]),
]


@pytest.mark.parametrize("resource", RESOURCES, ids=lambda r: type(r).__name__)
def test_path_without_query_is_query_free_prefix(resource):
    stripped = resource.path_without_query()
    assert "?" not in stripped
    assert resource.path().startswith(stripped)
    assert not resource.path().startswith("/")


@pytest.mark.parametrize("resource", RESOURCES, ids=lambda r: type(r).__name__)
def test_path_without_query_is_idempotent(resource):
    stripped = resource.path_without_query()
    assert FixedPath(stripped).path_without_query() == stripped


def test_path_without_query_splits_on_first_question_mark():
    assert FixedPath("a/b?x=1?y=2").path_without_query() == "a/b"
    assert FixedPath("a/b?").path_without_query() == "a/b"
