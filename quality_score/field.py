"""Scoring field: one weighted property of a scored object and its validators."""

import logging
import math
import numbers
from decimal import Decimal
from typing import Any, Callable

log = logging.getLogger(__name__)

Validator = tuple[Callable[[Any], Any], str | None, bool]


class WeightTypeError(TypeError):
    """Raised when a field weight is not a number."""


def _check_weight(value: Any) -> None:
    # bool is an int subclass but is not a weight
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise WeightTypeError(f"Weight must be a number, got {type(value).__name__}: {value!r}")
    if isinstance(value, Decimal):
        finite = value.is_finite()
    else:
        finite = not isinstance(value, float) or math.isfinite(value)
    if not finite:
        raise WeightTypeError(f"Weight must be finite, got {value!r}")


class ScoringField:
    """
    A named, weighted scoring unit.

    The weight is split into len(validators) + 1 equal shares: one for the
    value being present, one per validator that passes.
    """

    def __init__(self, name: str, weight: float = 1.0, required: bool = False):
        _check_weight(weight)
        self.name = name
        self.weight = weight
        self.required = required
        self._validators: list[Validator] = []

    def __repr__(self) -> str:
        return (
            f"ScoringField(name={self.name!r}, weight={self.weight!r}, "
            f"required={self.required!r}, validators={len(self._validators)})"
        )

    @property
    def validators(self) -> tuple[Validator, ...]:
        return tuple(self._validators)

    def set_weight(self, value: float) -> "ScoringField":
        """Set the max score of this field. Raises WeightTypeError if value is not numeric."""
        _check_weight(value)
        self.weight = value
        return self

    def validator(
        self, func: Callable[[Any], Any], message: str | None = None, required: bool = False
    ) -> "ScoringField":
        """
        Append a validator. func is called with the field value at scoring time;
        message is reported when it fails. A failing required validator
        invalidates the field and zeroes its score.
        """
        self._validators.append((func, message, required))
        return self

    def score(self, value: Any) -> dict:
        """Score a value against this field. Returns {score, messages, valid}."""
        if value is None:
            return {
                "score": 0,
                "messages": [f"Field {self.name} is not defined."],
                "valid": not self.required,
            }

        messages = []
        valid = True
        passed = 1  # presence share

        for func, message, required in self._validators:
            if bool(func(value)):
                passed += 1
                continue
            if message is not None:
                messages.append(message)
            if required:
                valid = False

        if not valid:
            log.debug("Field %s failed a required validator; score reset to 0", self.name)
            return {"score": 0, "messages": messages, "valid": False}

        shares = len(self._validators) + 1
        score = self.weight if passed == shares else self.weight * passed / shares
        return {"score": score, "messages": messages, "valid": True}
