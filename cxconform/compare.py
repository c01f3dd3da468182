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
"""NaN-aware, sign-aware comparison of complex results.

Ordinary equality is not enough to compare two results of a complex
transcendental function: ``0.0 == -0.0`` holds even though the two zeros
sit on different sides of a branch cut, and ``nan == nan`` never holds.

"""
from __future__ import annotations

from typing import Any

import numpy as np

from .types import Complex
from .values import components

COMPONENT_NAMES = ("real", "imag")


def same_component(x: Any, y: Any) -> bool:
    """Compare a single component of a result against the expected one.

    If ``x`` is NaN, ``y`` only has to be NaN too (NaN sign and payload are
    not compared). Otherwise the two must compare equal and have the same
    sign bit, which tells ``+0`` and ``-0`` apart.

    Parameters
    ----------
    x : float
        Component of the result being checked

    y : float
        Component of the expected result

    """
    if np.isnan(x):
        return bool(np.isnan(y))
    return bool(x == y) and bool(np.signbit(x) == np.signbit(y))


def describe(x: Any) -> str:
    """Render a component with its sign bit, e.g. ``-0.0 (signbit=1)``."""
    return f"{x} (signbit={int(np.signbit(x))})"


def mismatches(r: Complex, w: Complex) -> list[str]:
    """List the components on which ``r`` and ``w`` disagree.

    Parameters
    ----------
    r : complex
        The result being checked

    w : complex
        The expected result

    Returns
    -------
    list[str]
        One line per mismatching component; empty if both agree

    """
    lines = []
    for name, x, y in zip(COMPONENT_NAMES, components(r), components(w)):
        if not same_component(x, y):
            lines.append(f"{name}: got {describe(x)}, expected {describe(y)}")
    return lines


def agree(r: Complex, w: Complex) -> bool:
    """True if ``r`` and ``w`` agree on both components."""
    return not mismatches(r, w)
