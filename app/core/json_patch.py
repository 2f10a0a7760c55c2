"""JSON Patch (RFC 6902) for flat update documents.

Only top-level members are addressable (`/name`, `/age`); that is all the
update DTOs expose. DTO members cannot disappear, so `remove` (and the
source of a `move`) resets the member to null and the DTO's own validation
decides whether that is acceptable.
"""

from __future__ import annotations

import copy
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from app.core.exceptions import ValidationError


class PatchOperation(BaseModel):
    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str
    value: Any = None
    from_: Optional[str] = Field(default=None, alias="from")

    model_config = {"populate_by_name": True}


def _member(pointer: Optional[str], document: dict[str, Any]) -> str:
    if not pointer or not pointer.startswith("/") or "/" in pointer[1:]:
        raise ValidationError(f"Unsupported JSON Pointer '{pointer}'")
    # RFC 6901 escapes
    name = pointer[1:].replace("~1", "/").replace("~0", "~")
    if name not in document:
        raise ValidationError(f"Path '{pointer}' does not exist")
    return name


def _value(operation: PatchOperation) -> Any:
    if "value" not in operation.model_fields_set:
        raise ValidationError(f"'{operation.op}' operation on '{operation.path}' requires a value")
    return operation.value


def apply_patch(document: dict[str, Any], operations: list[PatchOperation]) -> dict[str, Any]:
    """Return a patched copy of *document*; the input is left untouched.

    Raises ValidationError for unknown members, missing values or a failed
    `test` operation. Operations apply in order and stop at the first error.
    """
    patched = copy.deepcopy(document)
    for operation in operations:
        target = _member(operation.path, patched)
        if operation.op in ("add", "replace"):
            patched[target] = _value(operation)
        elif operation.op == "remove":
            patched[target] = None
        elif operation.op == "test":
            if patched[target] != _value(operation):
                raise ValidationError(f"Test failed for path '{operation.path}'")
        else:
            source = _member(operation.from_, patched)
            patched[target] = copy.deepcopy(patched[source])
            if operation.op == "move" and source != target:
                patched[source] = None
    return patched
