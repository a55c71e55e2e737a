"""Weighted, explainable quality scoring of data objects against field rules."""

from quality_score.field import ScoringField, WeightTypeError
from quality_score.model import ScoringModel

__all__ = ["ScoringField", "ScoringModel", "WeightTypeError"]
