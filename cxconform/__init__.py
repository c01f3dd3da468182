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
"""Conformance checks for complex cosine implementations.

Verifies ``cos(0) == 1`` exactly in every precision, and the identity
``cos(z) == cosh(i*z)`` on a table of edge-case inputs, bit for bit on
the sign of zero and on NaN placement.

"""
from __future__ import annotations

from typing import Union
from typing_extensions import Literal, TypeAlias

__version__ = "23.09.00"

#: Define the available floating point precisions
PrecisionType: TypeAlias = Union[
    Literal["single"], Literal["double"], Literal["extended"]
]

#: Define the available implementations under test
ImplementationType: TypeAlias = Union[Literal["numpy"], Literal["cmath"]]

#: Precision values accepted for --precision, in the order the basic value
#: checks execute in
PRECISIONS: tuple[PrecisionType, ...] = (
    "single",
    "double",
    "extended",
)

#: Implementation values accepted for --use, in the order they are checked
IMPLEMENTATIONS: tuple[ImplementationType, ...] = (
    "numpy",
    "cmath",
)

#: Precision of the edge-case test vectors
EDGE_PRECISION: PrecisionType = "double"

#: Width for terminal ouput headers and footers.
UI_WIDTH = 65
