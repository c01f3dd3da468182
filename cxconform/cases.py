# Copyright 2023 NVIDIA Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""The edge-case test vectors, and a classification of complex inputs into
the categories the special-value rules are written in terms of.

"""
from __future__ import annotations

from enum import Enum
from itertools import product
from math import inf, nan, pi
from typing import Any

import numpy as np

from . import EDGE_PRECISION
from .types import Complex
from .values import components, make_complex


class Category(str, Enum):
    """Special-value category of a real or complex input."""

    ZERO = "zero"
    NON_ZERO = "non_zero"
    INF = "inf"
    NAN = "nan"
    NON_ZERO_NAN = "non_zero_nan"


#: Component values whose pairwise combinations make up the test vectors:
#: signed zeros, tiny and huge magnitudes, values near the zeros of cos,
#: infinities, and NaN.
COMPONENT_VALUES: tuple[float, ...] = (
    0.0,
    -0.0,
    1.0e-6,
    -1.0e-6,
    1.0,
    -1.0,
    pi / 2,
    -pi / 2,
    1.0e6,
    -1.0e6,
    inf,
    -inf,
    nan,
)

#: Double precision edge-case test vectors, every (real, imag) combination
#: of COMPONENT_VALUES.
TESTCASES: tuple[Any, ...] = tuple(
    make_complex(real, imag, EDGE_PRECISION)
    for real, imag in product(COMPONENT_VALUES, repeat=2)
)


def classify_real(x: Any) -> Category:
    """Classify a real scalar as zero, inf, nan or non_zero."""
    if x == 0:
        return Category.ZERO
    if np.isinf(x):
        return Category.INF
    if np.isnan(x):
        return Category.NAN
    return Category.NON_ZERO


def classify(z: Complex) -> Category:
    """Classify a complex scalar.

    A value with an infinite component is ``inf`` even if the other component
    is NaN. A NaN paired with a zero is ``nan``; a NaN paired with a finite
    non-zero value is ``non_zero_nan``.

    """
    real, imag = components(z)
    if real == 0 and imag == 0:
        return Category.ZERO
    if np.isinf(real) or np.isinf(imag):
        return Category.INF
    if np.isnan(real) and np.isnan(imag):
        return Category.NAN
    if np.isnan(real):
        return Category.NAN if imag == 0 else Category.NON_ZERO_NAN
    if np.isnan(imag):
        return Category.NAN if real == 0 else Category.NON_ZERO_NAN
    return Category.NON_ZERO
