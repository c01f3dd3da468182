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
"""The two conformance checks: the exact value of cos at the origin, and the
``cos(z) == cosh(i*z)`` identity on the edge-case test vectors.

Checks never raise on nonconformance. Each one produces a CheckResult, and
callers decide whether to stop at the first failure or to collect them all.

"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence, Tuple, Type, Union

from typing_extensions import TypeAlias

from . import PrecisionType
from .cases import TESTCASES, classify
from .compare import mismatches
from .implementations import Implementation
from .types import CheckResult, ComplexFunc, ConformanceError, Complex
from .values import components, rotate

#: Either the value returned by a function, or the exception class it raised
Outcome: TypeAlias = Tuple[Any, Union[Type[Exception], None]]


def format_complex(z: Complex) -> str:
    real, imag = components(z)
    return f"({real}, {imag})"


def check_basic(impl: Implementation, precision: PrecisionType) -> CheckResult:
    """Check that ``cos(0 + 0i)`` is exactly ``1 + 0i`` in a precision.

    The result must also keep the precision of its argument. The sign of the
    imaginary zero is not checked here.

    Parameters
    ----------
    impl : Implementation
        The implementation under test

    precision : PrecisionType
        Precision to evaluate in

    """
    name = f"({impl.name}) cos(0) == 1 [{precision}]"

    if not impl.supports(precision):
        return CheckResult(
            name,
            ok=True,
            details=(f"{impl.name} has no {precision} precision",),
            skipped=True,
        )

    zero = impl.make(0, 0, precision)
    one = impl.make(1, 0, precision)
    r = impl.cos(zero)

    details = []
    if type(r) is not type(one):
        details.append(
            f"type: got {type(r).__name__}, expected {type(one).__name__}"
        )
    if not r == one:
        details.append(
            f"value: got {format_complex(r)}, expected {format_complex(one)}"
        )

    return CheckResult(name, ok=not details, details=tuple(details))


def _evaluate(
    func: ComplexFunc, z: Complex, raises: tuple[Type[Exception], ...]
) -> Outcome:
    try:
        return func(z), None
    except raises as e:
        return None, type(e)


def _format_outcome(label: str, outcome: Outcome) -> str:
    value, exc = outcome
    if exc is not None:
        return f"{label}: raised {exc.__name__}"
    return f"{label}: {format_complex(value)}"


def check_edge(impl: Implementation, z: Complex) -> CheckResult:
    """Check ``cos(z)`` against ``cosh(i*z)`` for one test vector.

    Each component of the two results must agree: if the cos component is
    NaN the cosh component must be NaN, otherwise the two must be equal and
    carry the same sign bit.

    If the implementation reports domain or range errors by raising, the
    check passes only when both evaluations raise the same exception.

    """
    iz = rotate(z)
    name = (
        f"({impl.name}) cos{format_complex(z)} "
        f"== cosh{format_complex(iz)}"
    )

    r = _evaluate(impl.cos, z, impl.raises)
    w = _evaluate(impl.cosh, iz, impl.raises)

    if r[1] is not None or w[1] is not None:
        ok = r[1] is w[1]
        details: Sequence[str] = (
            ()
            if ok
            else (_format_outcome("cos", r), _format_outcome("cosh", w))
        )
    else:
        details = mismatches(r[0], w[0])
        ok = not details

    return CheckResult(
        name, ok=ok, details=tuple(details), category=classify(z).value
    )


def check_edges(
    impl: Implementation, cases: Sequence[Complex] = TESTCASES
) -> Iterator[CheckResult]:
    """Run check_edge over every test vector, in order.

    Raises
    ------
    ValueError
        If ``cases`` is empty

    """
    if len(cases) == 0:
        raise ValueError("no edge-case test vectors to check")

    for z in cases:
        yield check_edge(impl, z)


def assert_conforms(results: Iterable[CheckResult]) -> int:
    """Raise on the first failing result.

    Skipped results are ignored.

    Returns
    -------
    int
        The number of results that passed

    Raises
    ------
    ConformanceError
        For the first result that did not pass

    """
    count = 0
    for result in results:
        if result.skipped:
            continue
        if not result.ok:
            raise ConformanceError(result)
        count += 1
    return count
