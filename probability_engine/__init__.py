"""
probability_engine — PMF/CDF helpers, elementwise arithmetic and descriptive statistics
over finite sequences of real numbers.
"""

from probability_engine.core.domain import (
    LabeledItem,
    LabeledValue,
    labeled_average,
    labeled_max_value,
    labeled_standard_deviation,
    labeled_sum,
    labeled_variance,
)
from probability_engine.core.math import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PROBABILITY_SUM,
    DescriptiveSummary,
    StatisticsDomainViolation,
    add,
    autocorrelation,
    average,
    average_non_zero,
    correlation,
    covariance,
    describe,
    divide,
    divide_or_zero,
    expectation,
    flatten,
    get_cdf_bin,
    get_cdf_value,
    given,
    given_pmf,
    given_pmf_with_condition,
    given_with_condition,
    is_cdf,
    is_close,
    is_pmf,
    is_valid_float,
    multiply,
    standard_deviation,
    subtract,
    to_cdf,
    to_pmf,
    validate_non_empty,
    validate_tolerance,
    variance,
)

__version__ = "0.1.0"

__all__ = [
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PROBABILITY_SUM",
    "DescriptiveSummary",
    "LabeledItem",
    "LabeledValue",
    "StatisticsDomainViolation",
    "add",
    "autocorrelation",
    "average",
    "average_non_zero",
    "correlation",
    "covariance",
    "describe",
    "divide",
    "divide_or_zero",
    "expectation",
    "flatten",
    "get_cdf_bin",
    "get_cdf_value",
    "given",
    "given_pmf",
    "given_pmf_with_condition",
    "given_with_condition",
    "is_cdf",
    "is_close",
    "is_pmf",
    "is_valid_float",
    "labeled_average",
    "labeled_max_value",
    "labeled_standard_deviation",
    "labeled_sum",
    "labeled_variance",
    "multiply",
    "standard_deviation",
    "subtract",
    "to_cdf",
    "to_pmf",
    "validate_non_empty",
    "validate_tolerance",
    "variance",
    "__version__",
]
