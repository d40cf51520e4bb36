# src/tasklist/tasks/task_schemas.py

"""
Input contracts for task operations.

Each operation accepts a raw mapping (e.g. decoded JSON) and gets back a typed,
normalized model, or a tasklist ValidationError. Unknown keys are rejected so the
input surface of each operation stays exactly what is declared here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class _Input(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class CreateTaskInput(_Input):
    text: StrictStr

    @field_validator("text")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Task text cannot be empty")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("Task text must be valid UTF-8") from None
        return value


class UpdateTaskInput(_Input):
    # Only completion is mutable; text stays as created.
    id: StrictInt
    completed: StrictBool


class DeleteTaskInput(_Input):
    id: StrictInt


def parse_input(model: type[ModelT], raw: Any) -> ModelT:
    """
    Validate `raw` against `model`.

    Already-built instances pass through unchanged.
    """
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(
            f"{model.__name__} expects an object, got {type(raw).__name__}",
            errors=[{"type": "model_type", "loc": (), "msg": "Input should be an object"}],
        )

    try:
        return model.model_validate(dict(raw))
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        summary = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}" for e in errors
        )
        logger.debug("%s rejected: %s", model.__name__, summary)
        raise ValidationError(f"Invalid {model.__name__}: {summary}", errors=errors) from exc
