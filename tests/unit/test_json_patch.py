"""Unit tests for patch document application."""

import pytest
from pydantic import ValidationError

from filmes_api.schemas.patch import PatchOperation
from filmes_api.services.json_patch import JsonPatchError, apply_patch


def ops(*raw: dict) -> list[PatchOperation]:
    return [PatchOperation.model_validate(item) for item in raw]


@pytest.fixture
def document() -> dict:
    return {"title": "Nosferatu", "director": "F. W. Murnau", "genre": None, "duration": 94}


class TestApplyPatch:
    def test_replace_sets_value(self, document: dict) -> None:
        result = apply_patch(document, ops({"op": "replace", "path": "/duration", "value": 81}))
        assert result["duration"] == 81

    def test_add_sets_value(self, document: dict) -> None:
        result = apply_patch(document, ops({"op": "add", "path": "/genre", "value": "Horror"}))
        assert result["genre"] == "Horror"

    def test_remove_deletes_key(self, document: dict) -> None:
        result = apply_patch(document, ops({"op": "remove", "path": "/director"}))
        assert "director" not in result

    def test_move_transfers_value(self, document: dict) -> None:
        result = apply_patch(
            document, ops({"op": "move", "from": "/director", "path": "/genre"})
        )
        assert result["genre"] == "F. W. Murnau"
        assert "director" not in result

    def test_copy_duplicates_value(self, document: dict) -> None:
        result = apply_patch(document, ops({"op": "copy", "from": "/title", "path": "/genre"}))
        assert result["genre"] == "Nosferatu"
        assert result["title"] == "Nosferatu"

    def test_passing_test_operation_changes_nothing(self, document: dict) -> None:
        result = apply_patch(document, ops({"op": "test", "path": "/duration", "value": 94}))
        assert result == document

    def test_failing_test_operation_raises(self, document: dict) -> None:
        with pytest.raises(JsonPatchError) as exc_info:
            apply_patch(document, ops({"op": "test", "path": "/duration", "value": 90}))
        assert exc_info.value.path == "/duration"

    def test_test_operation_on_removed_field_fails(self, document: dict) -> None:
        with pytest.raises(JsonPatchError):
            apply_patch(
                document,
                ops(
                    {"op": "remove", "path": "/director"},
                    {"op": "test", "path": "/director", "value": None},
                ),
            )

    def test_test_operation_on_null_field_passes(self, document: dict) -> None:
        result = apply_patch(document, ops({"op": "test", "path": "/genre", "value": None}))
        assert result["genre"] is None

    def test_test_operation_does_not_equate_booleans_and_numbers(self) -> None:
        with pytest.raises(JsonPatchError):
            apply_patch({"duration": 1}, ops({"op": "test", "path": "/duration", "value": True}))

    def test_operations_apply_in_order(self, document: dict) -> None:
        result = apply_patch(
            document,
            ops(
                {"op": "remove", "path": "/title"},
                {"op": "add", "path": "/title", "value": "Nosferatu, eine Symphonie des Grauens"},
            ),
        )
        assert result["title"] == "Nosferatu, eine Symphonie des Grauens"

    def test_original_document_is_untouched(self, document: dict) -> None:
        apply_patch(document, ops({"op": "remove", "path": "/title"}))
        assert document["title"] == "Nosferatu"

    def test_paths_match_case_insensitively(self, document: dict) -> None:
        result = apply_patch(document, ops({"op": "replace", "path": "/TITLE", "value": "X"}))
        assert result["title"] == "X"

    def test_unknown_field_raises(self, document: dict) -> None:
        with pytest.raises(JsonPatchError, match="budget"):
            apply_patch(document, ops({"op": "replace", "path": "/budget", "value": 1}))

    def test_nested_path_raises(self, document: dict) -> None:
        with pytest.raises(JsonPatchError):
            apply_patch(document, ops({"op": "replace", "path": "/title/0", "value": "X"}))

    def test_path_without_leading_slash_raises(self, document: dict) -> None:
        with pytest.raises(JsonPatchError):
            apply_patch(document, ops({"op": "replace", "path": "title", "value": "X"}))

    def test_move_from_removed_field_raises(self, document: dict) -> None:
        with pytest.raises(JsonPatchError):
            apply_patch(
                document,
                ops(
                    {"op": "remove", "path": "/director"},
                    {"op": "move", "from": "/director", "path": "/genre"},
                ),
            )


class TestPatchOperation:
    def test_from_alias_is_accepted(self) -> None:
        operation = PatchOperation.model_validate({"op": "copy", "from": "/a", "path": "/b"})
        assert operation.from_ == "/a"

    def test_move_requires_from(self) -> None:
        with pytest.raises(ValidationError):
            PatchOperation.model_validate({"op": "move", "path": "/title"})

    def test_unknown_op_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PatchOperation.model_validate({"op": "increment", "path": "/duration"})
