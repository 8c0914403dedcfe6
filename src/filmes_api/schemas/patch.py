"""Pydantic schema for patch document operations."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

PatchOp = Literal["add", "remove", "replace", "move", "copy", "test"]


class PatchOperation(BaseModel):
    """
    One field-level edit in a patch document.

    Follows the JSON Patch wire shape: ``{"op", "path", "value", "from"}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    op: PatchOp
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")

    @model_validator(mode="after")
    def check_source_path(self) -> "PatchOperation":
        if self.op in ("move", "copy") and self.from_ is None:
            raise ValueError(f"'from' is required for the '{self.op}' operation")
        return self
