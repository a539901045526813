# MIT License
"""Completeness checks for raw scenario input.

The builder form posts a loose mapping (camelCase keys, numbers possibly
as strings).  :func:`validate_scenario_input` reports *every* missing
field at once and otherwise returns a normalised
:class:`~transport_core.params.ScenarioInput`.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pydantic
from pydantic.alias_generators import to_snake

from .params import ScenarioInput

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: Sequence[str] = (
    "name",
    "tonnage",
    "transportMode",
    "trainFrequency",
    "distanceToTerminal",
    "distanceToCustomer",
)
NUMERIC_FIELDS = frozenset({"tonnage", "trainFrequency", "distanceToTerminal", "distanceToCustomer"})


class ValidationError(ValueError):
    """Raised when a scenario input is incomplete or out of range.

    ``missing_fields`` lists absent/empty/non-numeric fields in form
    order, ``invalid_fields`` maps present-but-rejected fields to the
    reason.  Both use the camelCase field names of the form.
    """

    def __init__(self, missing_fields: Sequence[str] = (), invalid_fields: Optional[Mapping[str, str]] = None):
        self.missing_fields: List[str] = list(missing_fields)
        self.invalid_fields: Dict[str, str] = dict(invalid_fields or {})
        parts = []
        if self.missing_fields:
            parts.append(f"Missing required fields: {', '.join(self.missing_fields)}")
        if self.invalid_fields:
            parts.append(
                "Invalid fields: " + ", ".join(f"{k} ({v})" for k, v in self.invalid_fields.items())
            )
        super().__init__("; ".join(parts))

    @property
    def fields(self) -> List[str]:
        return self.missing_fields + [f for f in self.invalid_fields if f not in self.missing_fields]


def _lookup(raw: Mapping[str, Any], field: str) -> Any:
    if field in raw:
        return raw[field]
    return raw.get(to_snake(field))


def _as_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or None when it is not one.

    Booleans are not numbers here even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def validate_scenario_input(raw: Mapping[str, Any]) -> ScenarioInput:
    """Check a raw form payload and build a :class:`ScenarioInput`.

    A numeric field supplied as ``0`` is present.  A field is missing
    when it is absent, ``None``, an empty string or, for numeric fields,
    not coercible to a finite number.

    Raises
    ------
    ValidationError
        Listing every missing field, or every field that fails the
        model constraints (e.g. negative distance, unknown mode).
    """
    if isinstance(raw, ScenarioInput):
        return raw
    missing: List[str] = []
    normalised: Dict[str, Any] = {}
    for field in REQUIRED_FIELDS:
        value = _lookup(raw, field)
        if _is_blank(value):
            missing.append(field)
            continue
        if field in NUMERIC_FIELDS:
            number = _as_number(value)
            if number is None:
                missing.append(field)
                continue
            value = number
        normalised[field] = value
    if missing:
        logger.info("Rejected scenario input, missing: %s", missing)
        raise ValidationError(missing_fields=missing)

    description = _lookup(raw, "description")
    if description is not None:
        normalised["description"] = str(description)
    try:
        return ScenarioInput.model_validate(normalised)
    except pydantic.ValidationError as exc:
        invalid = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "input"
            invalid.setdefault(field, err["msg"])
        logger.info("Rejected scenario input, invalid: %s", invalid)
        raise ValidationError(invalid_fields=invalid) from exc
