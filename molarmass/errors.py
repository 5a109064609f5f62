"""Exceptions raised while evaluating sum formulas"""
from typing import Optional


class FormulaError(ValueError):
    """Base class for errors in a single sum formula.

    Attributes:
        formula: The formula that could not be evaluated, if known
    """

    def __init__(self, message: str, formula: Optional[str] = None):
        super().__init__(message)
        self.formula = formula


class UnknownElementError(FormulaError):
    """An element symbol is not present in the atomic weight table

    Attributes:
        symbol: The first symbol (left to right) that could not be resolved
    """

    def __init__(self, symbol: str, formula: Optional[str] = None):
        super().__init__(
            f'Atom "{symbol}" doesn\'t exist. (for as far as I know...)',
            formula=formula,
        )
        self.symbol = symbol


class MalformedFormulaError(FormulaError):
    """The formula does not start with an element symbol or contains a count
    that does not fit the supported range"""
