import re

import numpy as np
import pytest

from molarmass.atomic_weights import *
from molarmass.errors import FormulaError, UnknownElementError


def test_atomic_weights_table():
    # 118 elements + ununennium
    assert len(ATOMIC_WEIGHTS) == 119
    for symbol, weight in ATOMIC_WEIGHTS.items():
        assert re.fullmatch(r"[A-Z][a-z]{0,2}", symbol)
        assert isinstance(weight, np.float32)
        assert weight > 0

    assert ATOMIC_WEIGHTS["H"] == np.float32(1.008)
    assert ATOMIC_WEIGHTS["Og"] == 294


def test_atomic_weights_read_only():
    with pytest.raises(TypeError):
        ATOMIC_WEIGHTS["H"] = 1.0

    with pytest.raises(TypeError):
        del ATOMIC_WEIGHTS["H"]


def test_atomic_weight():
    assert atomic_weight("C") == np.float32(12.011)
    assert atomic_weight("Uue") == 315

    with pytest.raises(UnknownElementError) as e:
        atomic_weight("c")
    assert e.value.symbol == "c"
    assert isinstance(e.value, FormulaError)
    assert isinstance(e.value, ValueError)
    assert str(e.value) == 'Atom "c" doesn\'t exist. (for as far as I know...)'
