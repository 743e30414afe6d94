"""Tests for speclint.parser.resolver."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from speclint.parser.resolver import lookup, resolve_ref, split_pointer


@pytest.fixture
def document() -> dict[str, Any]:
    return {
        "definitions": {
            "Pets": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
            "Pet": {"type": "object"},
            "a/b": {"type": "string"},
            "til~de": {"type": "integer"},
            "Node": {"type": "object", "properties": {"child": {"$ref": "#/definitions/Node"}}},
        },
        "parameters": {
            "Limit": {"name": "limit", "in": "query", "required": False},
        },
        "tags": [{"name": "pets"}, {"name": "stores"}],
    }


# ---------------------------------------------------------------------------
# resolve_ref
# ---------------------------------------------------------------------------


class TestResolveRef:
    """Test single-hop pointer resolution."""

    def test_non_ref_returned_unchanged(self, document: dict[str, Any]) -> None:
        node = {"type": "array"}
        assert resolve_ref(node, document) is node

    def test_scalar_returned_unchanged(self, document: dict[str, Any]) -> None:
        assert resolve_ref("text", document) == "text"
        assert resolve_ref(None, document) is None

    def test_resolves_local_ref(self, document: dict[str, Any]) -> None:
        resolved = resolve_ref({"$ref": "#/definitions/Pets"}, document)
        assert resolved["type"] == "array"

    def test_resolves_only_one_hop(self, document: dict[str, Any]) -> None:
        resolved = resolve_ref({"$ref": "#/definitions/Pets"}, document)
        # The nested pointer is left as-is
        assert resolved["items"] == {"$ref": "#/definitions/Pet"}

    def test_self_referencing_schema_terminates(self, document: dict[str, Any]) -> None:
        resolved = resolve_ref({"$ref": "#/definitions/Node"}, document)
        assert resolved["properties"]["child"] == {"$ref": "#/definitions/Node"}

    def test_external_ref_resolves_to_empty_mapping(self, document: dict[str, Any]) -> None:
        assert resolve_ref({"$ref": "other.yaml#/definitions/Pet"}, document) == {}
        assert resolve_ref({"$ref": "https://example.com/pet.json"}, document) == {}

    def test_non_string_ref_resolves_to_empty_mapping(self, document: dict[str, Any]) -> None:
        assert resolve_ref({"$ref": 42}, document) == {}

    def test_missing_target_resolves_to_none(self, document: dict[str, Any]) -> None:
        assert resolve_ref({"$ref": "#/definitions/Missing"}, document) is None

    def test_escaped_slash_is_literal_key(self, document: dict[str, Any]) -> None:
        resolved = resolve_ref({"$ref": "#/definitions/a~1b"}, document)
        assert resolved == {"type": "string"}

    def test_escaped_tilde_is_literal_key(self, document: dict[str, Any]) -> None:
        resolved = resolve_ref({"$ref": "#/definitions/til~0de"}, document)
        assert resolved == {"type": "integer"}

    def test_dotted_key_is_not_split(self) -> None:
        document = {"definitions": {"v1.Pet": {"type": "array"}}}
        assert resolve_ref({"$ref": "#/definitions/v1.Pet"}, document) == {"type": "array"}

    def test_does_not_mutate_document(self, document: dict[str, Any]) -> None:
        snapshot = copy.deepcopy(document)
        resolve_ref({"$ref": "#/definitions/Pets"}, document)
        assert document == snapshot


# ---------------------------------------------------------------------------
# split_pointer / lookup
# ---------------------------------------------------------------------------


class TestSplitPointer:
    def test_splits_segments(self) -> None:
        assert split_pointer("#/definitions/Pet") == ["definitions", "Pet"]

    def test_unescapes_segments(self) -> None:
        assert split_pointer("#/paths/~1pets~1{id}") == ["paths", "/pets/{id}"]

    def test_tilde_one_decoded_before_tilde_zero(self) -> None:
        # "~01" is a literal "~1", not "/"
        assert split_pointer("#/a/~01") == ["a", "~1"]


class TestLookup:
    """Test the pure lookup-by-path helper."""

    def test_mapping_path(self, document: dict[str, Any]) -> None:
        assert lookup(document, ["parameters", "Limit", "name"]) == "limit"

    def test_sequence_index(self, document: dict[str, Any]) -> None:
        assert lookup(document, ["tags", "1", "name"]) == "stores"

    def test_out_of_range_index(self, document: dict[str, Any]) -> None:
        assert lookup(document, ["tags", "5"]) is None

    def test_negative_index_is_a_miss(self, document: dict[str, Any]) -> None:
        assert lookup(document, ["tags", "-1"]) is None

    def test_non_numeric_index(self, document: dict[str, Any]) -> None:
        assert lookup(document, ["tags", "first"]) is None

    def test_cannot_descend_into_scalar(self, document: dict[str, Any]) -> None:
        assert lookup(document, ["parameters", "Limit", "name", "x"]) is None

    def test_empty_path_returns_root(self, document: dict[str, Any]) -> None:
        assert lookup(document, []) is document

    @pytest.mark.parametrize("segment", ["²", "١", "0x1", " 1"])
    def test_non_ascii_or_non_decimal_index_is_a_miss(
        self, document: dict[str, Any], segment: str
    ) -> None:
        assert lookup(document, ["tags", segment]) is None

    def test_numeric_segment_matches_integer_key(self) -> None:
        responses = {200: {"schema": {"type": "array"}}}
        assert lookup(responses, ["200", "schema"]) == {"type": "array"}

    def test_string_key_wins_over_integer_key(self) -> None:
        assert lookup({"200": "text", 200: "int"}, ["200"]) == "text"
