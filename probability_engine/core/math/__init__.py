"""
Core math modules для probability_engine

Поэлементная арифметика, описательная статистика и построение PMF/CDF.
"""

# Numerical Safeguards
from probability_engine.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PROBABILITY_SUM,
    # Division
    divide_or_zero,
    # Float checks
    is_close,
    is_valid_float,
    # Validation
    validate_non_empty,
    validate_tolerance,
)

# Elementwise
from probability_engine.core.math.elementwise import (
    add,
    divide,
    multiply,
    subtract,
)

# Descriptive
from probability_engine.core.math.descriptive import (
    DescriptiveSummary,
    StatisticsDomainViolation,
    autocorrelation,
    average,
    average_non_zero,
    correlation,
    covariance,
    describe,
    expectation,
    standard_deviation,
    variance,
)

# Distribution
from probability_engine.core.math.distribution import (
    flatten,
    get_cdf_bin,
    get_cdf_value,
    given,
    given_pmf,
    given_pmf_with_condition,
    given_with_condition,
    is_cdf,
    is_pmf,
    to_cdf,
    to_pmf,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PROBABILITY_SUM",
    # Numerical Safeguards — Functions
    "divide_or_zero",
    "is_close",
    "is_valid_float",
    "validate_non_empty",
    "validate_tolerance",
    # Elementwise
    "add",
    "divide",
    "multiply",
    "subtract",
    # Descriptive — Exceptions
    "StatisticsDomainViolation",
    # Descriptive — Types
    "DescriptiveSummary",
    # Descriptive — Functions
    "autocorrelation",
    "average",
    "average_non_zero",
    "correlation",
    "covariance",
    "describe",
    "expectation",
    "standard_deviation",
    "variance",
    # Distribution
    "flatten",
    "get_cdf_bin",
    "get_cdf_value",
    "given",
    "given_pmf",
    "given_pmf_with_condition",
    "given_with_condition",
    "is_cdf",
    "is_pmf",
    "to_cdf",
    "to_pmf",
]
