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
"""Provide types that are useful throughout the conformance checks.

"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Union

from typing_extensions import TypeAlias

#: A complex scalar of any supported precision
Complex: TypeAlias = Union[complex, Any]

#: A complex function of one complex argument, e.g. cos or cosh
ComplexFunc: TypeAlias = Callable[[Any], Any]

#: Represent command line arguments
ArgList = List[str]


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single conformance check."""

    #: Short description of what was checked
    name: str

    #: Whether the check passed
    ok: bool

    #: Diagnostic lines explaining a failure (or noting a skip)
    details: tuple[str, ...] = field(default_factory=tuple)

    #: Case category of the checked input, if any
    category: str | None = None

    #: True if the check could not be run for this configuration
    skipped: bool = False


class ConformanceError(AssertionError):
    """Raised when an implementation does not conform."""

    def __init__(self, result: CheckResult) -> None:
        lines = (result.name,) + result.details
        super().__init__("\n".join(lines))
        self.result = result
