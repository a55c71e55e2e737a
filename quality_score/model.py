"""Scoring model: an ordered, name-keyed set of fields scored as a whole."""

import logging
from collections.abc import Mapping
from typing import Any

from quality_score.field import ScoringField

log = logging.getLogger(__name__)


def _lookup(data: Any, name: str) -> Any:
    """Value for a field name: key for mappings, attribute otherwise. Missing = None."""
    if isinstance(data, Mapping):
        return data.get(name)
    return getattr(data, name, None)


class ScoringModel:
    """A model that determines how an object is scored."""

    def __init__(self, name: str):
        self.name = name
        self._fields: dict[str, ScoringField] = {}

    def __repr__(self) -> str:
        return f"ScoringModel(name={self.name!r}, fields={list(self._fields)})"

    @staticmethod
    def create(name: str) -> "ScoringModel":
        return ScoringModel(name)

    @property
    def fields(self) -> tuple[ScoringField, ...]:
        return tuple(self._fields.values())

    @property
    def weights(self) -> float:
        """Total weight of all fields. Not cached."""
        return sum(f.weight for f in self._fields.values())

    def field(self, name: str, weight: float = 1.0, required: bool = False) -> ScoringField:
        """
        Return the field called name, creating it if absent.
        On repeat calls weight and required are ignored; the existing field is returned as is.
        """
        field = self._fields.get(name)
        if field is None:
            field = ScoringField(name, weight, required)
            self._fields[name] = field
            log.debug("Model %s: added field %s (weight=%s, required=%s)", self.name, name, weight, required)
        return field

    def score(self, data: Any, show_messages: bool = False) -> float | dict:
        """
        Score an object against every field in declaration order.
        Any invalid field forces the total to 0.
        Returns the total, or {score, fields, valid} when show_messages is set.
        """
        score = 0
        valid = True
        field_results = {}

        for field in self._fields.values():
            result = field.score(_lookup(data, field.name))
            score += result["score"]
            field_results[field.name] = result
            if not result["valid"]:
                valid = False

        if not valid:
            score = 0

        if show_messages:
            return {"score": score, "fields": field_results, "valid": valid}
        return score
