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
"""Consolidate run configuration from command-line and environment.

"""
from __future__ import annotations

import os
from argparse import Namespace

from . import (
    IMPLEMENTATIONS,
    PRECISIONS,
    ImplementationType,
    PrecisionType,
)
from .args import parser
from .types import ArgList


class Config:
    """A centralized configuration object that provides the information
    needed by the check plan in order to run.

    Parameters
    ----------
    argv : ArgList
        command-line arguments to use when building the configuration

    """

    def __init__(self, argv: ArgList) -> None:
        args, self._extra_args = parser.parse_known_args(argv[1:])

        # what to check
        self.implementations = self._compute_implementations(args)
        self.precisions = self._compute_precisions(args)

        # run configuration
        self.keep_going = args.keep_going
        self.dry_run = args.dry_run
        self.verbose = args.verbose

    @property
    def extra_args(self) -> ArgList:
        """Extra command-line arguments that were not recognized."""
        return self._extra_args

    @property
    def fail_fast(self) -> bool:
        """Whether to stop at the first failing check."""
        return not self.keep_going

    def _compute_implementations(
        self, args: Namespace
    ) -> tuple[ImplementationType, ...]:
        if args.implementations is not None:
            computed = args.implementations
        else:
            computed = [
                impl
                for impl in IMPLEMENTATIONS
                if os.environ.get(f"USE_{impl.upper()}", None) == "1"
            ]

        # if nothing is specified any other way, at least check numpy
        if len(computed) == 0:
            computed.append("numpy")

        # keep the canonical order, without duplicates
        return tuple(impl for impl in IMPLEMENTATIONS if impl in computed)

    def _compute_precisions(
        self, args: Namespace
    ) -> tuple[PrecisionType, ...]:
        if args.precisions is None:
            return PRECISIONS
        return tuple(p for p in PRECISIONS if p in args.precisions)
