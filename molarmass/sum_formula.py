"""Functions for working with (chemical) sum formulas

A sum formula is a flat concatenation of element symbols, each optionally
followed by a count, e.g. ``C6H12O6``. Grouping, charges, isotopes and
multiplicative prefixes are not supported.
"""
import re
from typing import Dict, Iterable, List, Mapping, NamedTuple, Union

import numpy as np
import pint

from . import MOLAR_MASS_UNIT, Q_
from .atomic_weights import ATOMIC_WEIGHTS
from .errors import MalformedFormulaError, UnknownElementError

__all__ = [
    "MAX_COUNT",
    "Segment",
    "compute_mass",
    "format_formula",
    "molar_mass",
    "parse_sum_formula",
    "split_formula",
    "tokenize_formula",
]

# counts are 16-bit unsigned integers
MAX_COUNT = 2**16 - 1

# symbol followed by the longest trailing run of ASCII digits
_symbol_count_re = re.compile(r"(.*?)([0-9]*)", re.DOTALL)


class Segment(NamedTuple):
    """An element symbol and its count as written in a formula"""

    symbol: str
    count: int = 1

    def __str__(self):
        if self.count == 1:
            return self.symbol
        return f"{self.symbol}{self.count}"


def split_formula(formula: str) -> List[str]:
    """Split a formula into runs that each start at an uppercase letter.

    Characters before the first uppercase letter form a run of their own.

    >>> split_formula("NaCl2")
    ['Na', 'Cl2']
    """
    if not formula:
        return []

    starts = [i for i, char in enumerate(formula) if char.isupper()]
    if not starts or starts[0] != 0:
        starts.insert(0, 0)
    ends = starts[1:] + [len(formula)]
    return [formula[start:end] for start, end in zip(starts, ends)]


def _to_segment(run: str, formula: str) -> Segment:
    """Split a run into symbol and count"""
    symbol, digits = _symbol_count_re.fullmatch(run).groups()
    if not digits:
        return Segment(symbol)

    # compare lengths first, int() refuses very long digit strings
    significant = digits.lstrip("0")
    if (
        len(significant) > len(str(MAX_COUNT))
        or int(significant or "0") > MAX_COUNT
    ):
        raise MalformedFormulaError(
            f"Count {digits} of {symbol} in {formula} exceeds the maximum "
            f"of {MAX_COUNT}.",
            formula=formula,
        )
    return Segment(symbol, int(significant or "0"))


def tokenize_formula(formula: str) -> List[Segment]:
    """Convert a sum formula to a list of segments in left-to-right order.

    Counts default to 1. An empty formula yields no segments.

    :raises MalformedFormulaError:
        If the formula does not start with a letter, or if a count exceeds
        ``MAX_COUNT``.
    """
    if formula and not formula[0].isalpha():
        raise MalformedFormulaError(
            f"Formula must start with an element symbol: {formula}",
            formula=formula,
        )
    return [_to_segment(run, formula) for run in split_formula(formula)]


def compute_mass(formula: str) -> np.float32:
    """Compute the molar mass (g/mol) of the given sum formula.

    Weights and the running total are single precision.

    :raises UnknownElementError:
        For the first symbol (left to right) that is not in the table. No
        partial mass is returned.
    :raises MalformedFormulaError: See :func:`tokenize_formula`.
    """
    total = np.float32(0)
    for symbol, count in tokenize_formula(formula):
        try:
            weight = ATOMIC_WEIGHTS[symbol]
        except KeyError:
            raise UnknownElementError(symbol, formula=formula) from None
        total += weight * np.float32(count)
    return total


def molar_mass(
    formula: str, unit: Union[str, pint.Unit] = MOLAR_MASS_UNIT
) -> pint.Quantity:
    """Compute the molar mass of the given sum formula as a quantity

    >>> molar_mass("H2", "kg/mol")  # doctest: +SKIP
    <Quantity(0.002016, 'kilogram / mole')>
    """
    return Q_(float(compute_mass(formula)), MOLAR_MASS_UNIT).to(unit)


def parse_sum_formula(formula: str) -> Dict[str, int]:
    """Convert sum formula to dict (element -> count)

    Repeated symbols are summed up, keys are in order of first occurrence.
    """
    composition = {}
    for symbol, count in tokenize_formula(formula):
        if symbol not in ATOMIC_WEIGHTS:
            raise UnknownElementError(symbol, formula=formula)
        composition[symbol] = composition.get(symbol, 0) + count
    return composition


def format_formula(
    segments: Union[Iterable[Segment], Mapping[str, int]]
) -> str:
    """Serialize segments (or an element -> count dict) to a sum formula.

    Counts of 1 are omitted.
    """
    if isinstance(segments, Mapping):
        segments = (Segment(*item) for item in segments.items())
    return "".join(map(str, segments))
