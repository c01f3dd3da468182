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
"""Wrap the complex cosine implementations that can be put under test.

Each implementation supplies the cosine being checked together with the
hyperbolic cosine used as the oracle for it.

"""
from __future__ import annotations

import cmath
from typing import Any, Dict, Type

import numpy as np

from . import ImplementationType, PrecisionType
from .types import Complex
from .values import make_complex


class Implementation:
    """A complex cosine under test, and its hyperbolic cosine."""

    #: Name used to select this implementation with --use
    kind: ImplementationType

    #: Precisions this implementation can evaluate in
    precisions: tuple[PrecisionType, ...] = ()

    #: Exceptions the implementation uses to signal domain or range errors
    #: in place of returning a special value
    raises: tuple[Type[Exception], ...] = ()

    def cos(self, z: Complex) -> Complex:
        raise NotImplementedError

    def cosh(self, z: Complex) -> Complex:
        raise NotImplementedError

    def make(self, real: Any, imag: Any, precision: PrecisionType) -> Complex:
        """Build an input value for this implementation.

        Raises
        ------
        ValueError
            If this implementation does not support ``precision``

        """
        if not self.supports(precision):
            raise ValueError(
                f"{self.name} does not support {precision} precision"
            )
        return make_complex(real, imag, precision)

    def supports(self, precision: PrecisionType) -> bool:
        return precision in self.precisions

    @property
    def name(self) -> str:
        """A name to display for checks of this implementation."""
        return self.kind


class NumPy(Implementation):
    kind: ImplementationType = "numpy"

    precisions = ("single", "double", "extended")

    def cos(self, z: Complex) -> Complex:
        with np.errstate(all="ignore"):
            return np.cos(z)

    def cosh(self, z: Complex) -> Complex:
        with np.errstate(all="ignore"):
            return np.cosh(z)


class CMath(Implementation):
    kind: ImplementationType = "cmath"

    precisions = ("double",)

    raises = (ValueError, OverflowError)

    def cos(self, z: Complex) -> Complex:
        return cmath.cos(z)

    def cosh(self, z: Complex) -> Complex:
        return cmath.cosh(z)

    def make(self, real: Any, imag: Any, precision: PrecisionType) -> Complex:
        z = super().make(real, imag, precision)
        return complex(z.real, z.imag)


#: All the available implementations that can be selected
REGISTRY: Dict[ImplementationType, Type[Implementation]] = {
    "numpy": NumPy,
    "cmath": CMath,
}
