"""Pydantic option models for the public ``Duration`` methods.

Options are validated here before they reach the engine; a failed
validation surfaces as :class:`~temporal.TemporalRangeError`.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from temporal._exceptions import TemporalRangeError
from temporal.units import RoundingMode, to_singular_unit

M = TypeVar("M", bound=BaseModel)


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("must be a number, not a bool")
    return value


class RoundingOptions(BaseModel):
    """Options of ``Duration.round``."""

    model_config = {"frozen": True, "extra": "forbid"}

    smallest_unit: str | None = None
    largest_unit: str | None = None
    rounding_increment: int = Field(default=1, ge=1, le=1_000_000_000)
    rounding_mode: RoundingMode = "halfExpand"

    @field_validator("smallest_unit", "largest_unit")
    @classmethod
    def _singular(cls, value: str | None) -> str | None:
        if value is None or value == "auto":
            return value
        return to_singular_unit(value)

    @field_validator("rounding_increment", mode="before")
    @classmethod
    def _increment_not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)


class ToStringOptions(BaseModel):
    """Options of ``Duration.to_string``."""

    model_config = {"frozen": True, "extra": "forbid"}

    fractional_second_digits: Union[Literal["auto"], int] = "auto"
    smallest_unit: str | None = None
    rounding_mode: RoundingMode = "trunc"

    @field_validator("smallest_unit")
    @classmethod
    def _singular(cls, value: str | None) -> str | None:
        return None if value is None else to_singular_unit(value)

    @field_validator("fractional_second_digits", mode="before")
    @classmethod
    def _digits_not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)

    @field_validator("fractional_second_digits")
    @classmethod
    def _digits_range(cls, value: Union[str, int]) -> Union[str, int]:
        if value != "auto" and not 0 <= value <= 9:
            raise ValueError("must be 'auto' or between 0 and 9")
        return value


def validate_options(model: type[M], **values: Any) -> M:
    """Build ``model`` from ``values``; ``TemporalRangeError`` when invalid."""
    try:
        return model(**values)
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(p) for p in first["loc"])
        raise TemporalRangeError(f"Invalid {where}: {first['msg']}") from exc
