"""Apply patch documents to flat field dictionaries."""

import copy
from collections.abc import Iterable
from typing import Any

from filmes_api.schemas.patch import PatchOperation


class JsonPatchError(ValueError):
    """Raised when a patch operation cannot be applied."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def apply_patch(
    document: dict[str, Any],
    operations: Iterable[PatchOperation],
) -> dict[str, Any]:
    """
    Apply operations in order to a copy of a flat document.

    Paths address top-level fields only (``/title``) and are matched against
    the document's keys case-insensitively. ``remove`` deletes the key, so a
    removed required field surfaces as a missing field when the result is
    validated.

    Args:
        document: Field name to value mapping, left untouched
        operations: Patch operations to apply

    Returns:
        The patched copy

    Raises:
        JsonPatchError: if a path does not name a field, a ``move``/``copy``
            source is absent, or a ``test`` operation fails
    """
    patched = copy.deepcopy(document)
    fields = {name.lower(): name for name in document}

    for operation in operations:
        target = _resolve(fields, operation.path)

        if operation.op in ("add", "replace"):
            patched[target] = operation.value
        elif operation.op == "remove":
            patched.pop(target, None)
        elif operation.op in ("move", "copy"):
            source = _resolve(fields, operation.from_ or "")
            if source not in patched:
                raise JsonPatchError(operation.from_ or "", "The source location has no value.")
            if operation.op == "move":
                patched[target] = patched.pop(source)
            else:
                patched[target] = copy.deepcopy(patched[source])
        elif operation.op == "test":
            if target not in patched:
                raise JsonPatchError(operation.path, "The target location has no value.")
            if not _json_equal(patched[target], operation.value):
                raise JsonPatchError(
                    operation.path,
                    f"The current value {patched[target]!r} is not equal to "
                    f"the test value {operation.value!r}.",
                )

    return patched


def _json_equal(left: Any, right: Any) -> bool:
    """Compare JSON values; booleans never equal numbers."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def _resolve(fields: dict[str, str], pointer: str) -> str:
    """Map a single-segment JSON pointer onto a document field name."""
    if not pointer.startswith("/") or "/" in pointer[1:]:
        raise JsonPatchError(pointer, "The path must name a single top-level field.")

    segment = pointer[1:].replace("~1", "/").replace("~0", "~")
    field = fields.get(segment.lower())
    if field is None:
        raise JsonPatchError(
            pointer,
            f"The target location specified by path segment '{segment}' was not found.",
        )
    return field
