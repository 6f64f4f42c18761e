"""
Domain models and value objects.

Contains the labeled pair model and statistics over labeled sequences.
"""

from probability_engine.core.domain.labeled import (
    LabeledItem,
    LabeledValue,
    labeled_average,
    labeled_max_value,
    labeled_standard_deviation,
    labeled_sum,
    labeled_variance,
)

__all__ = [
    "LabeledItem",
    "LabeledValue",
    "labeled_average",
    "labeled_max_value",
    "labeled_standard_deviation",
    "labeled_sum",
    "labeled_variance",
]
