"""Molar mass calculator for flat chemical sum formulas"""
from pint import UnitRegistry

ureg = UnitRegistry()
Q_ = ureg.Quantity

MOLAR_MASS_UNIT = ureg.gram / ureg.mole

from .atomic_weights import ATOMIC_WEIGHTS, atomic_weight  # noqa: E402
from .errors import (  # noqa: E402
    FormulaError,
    MalformedFormulaError,
    UnknownElementError,
)
from .sum_formula import (  # noqa: E402
    MAX_COUNT,
    Segment,
    compute_mass,
    format_formula,
    molar_mass,
    parse_sum_formula,
    split_formula,
    tokenize_formula,
)

__version__ = "1.0"

__all__ = [
    "ATOMIC_WEIGHTS",
    "FormulaError",
    "MAX_COUNT",
    "MOLAR_MASS_UNIT",
    "MalformedFormulaError",
    "Q_",
    "Segment",
    "UnknownElementError",
    "atomic_weight",
    "compute_mass",
    "format_formula",
    "molar_mass",
    "parse_sum_formula",
    "split_formula",
    "tokenize_formula",
    "ureg",
]
