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
"""Construct and take apart complex scalars without disturbing the sign of
zero or NaN payloads.

Arithmetic such as ``a + b*1j`` is not safe for this: ``0.0 + (-0.0)*1j``
already loses the sign of the imaginary zero, and ``inf*1j`` produces a NaN
real part. Every value here is assembled component by component instead.

"""
from __future__ import annotations

from typing import Any

import numpy as np

from . import PrecisionType
from .types import Complex

#: NumPy complex type for each precision
COMPLEX_TYPES: dict[PrecisionType, type[np.complexfloating[Any, Any]]] = {
    "single": np.complex64,
    "double": np.complex128,
    "extended": np.clongdouble,
}


def complex_type(precision: PrecisionType) -> np.dtype[Any]:
    """Look up the NumPy complex dtype for a precision.

    Parameters
    ----------
    precision : PrecisionType
        One of "single", "double" or "extended"

    Raises
    ------
    ValueError
        If ``precision`` is not a known precision

    """
    try:
        return np.dtype(COMPLEX_TYPES[precision])
    except KeyError:
        raise ValueError(f"unknown precision: {precision!r}")


def make_complex(real: Any, imag: Any, precision: PrecisionType) -> Any:
    """Build a NumPy complex scalar of the given precision from its
    components, bit for bit.

    """
    z = np.empty((), dtype=complex_type(precision))
    z.real = real
    z.imag = imag
    return z[()]


def components(z: Complex) -> tuple[Any, Any]:
    """Split a complex scalar into its (real, imaginary) components."""
    return z.real, z.imag


def rotate(z: Complex) -> Complex:
    """Return ``i*z``, i.e. ``(-imag, real)``, with the same type as ``z``.

    The negation is applied to the component directly so that zeros flip
    sign and NaNs stay NaN.

    """
    real, imag = components(z)
    if type(z) is complex:
        return complex(-imag, real)
    z2 = np.empty((), dtype=np.asarray(z).dtype)
    z2.real = -imag
    z2.imag = real
    return z2[()]
