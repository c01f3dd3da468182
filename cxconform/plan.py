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
"""Provide a CheckPlan class to coordinate the checks of several
implementations.

"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, Sequence

from .cases import TESTCASES
from .checks import check_basic, check_edges
from .config import Config
from .implementations import REGISTRY, Implementation
from .logger import LOG, Log
from .types import CheckResult, Complex
from .ui import banner, failed, passed, rule, skipped, summary, yellow


@dataclass(frozen=True)
class PlanResult:
    """Collect results from all checks in a CheckPlan run."""

    #: Individual check results, in the order they ran
    results: list[CheckResult]

    #: Cumulative execution time for all checks
    time: timedelta

    #: True if the run stopped early at a failing check
    stopped: bool = False

    @property
    def total(self) -> int:
        """The number of checks that ran, not counting skips."""
        return sum(not r.skipped for r in self.results)

    @property
    def passed(self) -> int:
        """The number of checks that passed."""
        return sum(r.ok and not r.skipped for r in self.results)

    @property
    def categories(self) -> Counter[str]:
        """How many test vectors were checked in each case category."""
        return Counter(r.category for r in self.results if r.category)


class CheckPlan:
    """Encapsulate an entire conformance run over several implementations.

    Parameters
    ----------
    config: Config
        Run configuration

    implementations: Sequence[Implementation], optional
        Implementations to check, instead of the configured ones

    cases: Sequence[complex], optional
        Edge-case test vectors (default: TESTCASES)

    log: Log, optional
        Where to record output (default: LOG)

    """

    def __init__(
        self,
        config: Config,
        *,
        implementations: Sequence[Implementation] | None = None,
        cases: Sequence[Complex] = TESTCASES,
        log: Log = LOG,
    ) -> None:
        self._config = config
        self._cases = cases
        self._log = log
        if implementations is None:
            implementations = [
                REGISTRY[kind]() for kind in config.implementations
            ]
        self._implementations = tuple(implementations)
        self.result: PlanResult | None = None

    def execute(self) -> int:
        """Execute the configured checks.

        Returns
        -------
        int
            0 if every check that ran passed, 1 otherwise

        """
        self._log.clear()

        self._log(self.intro)

        if self._config.dry_run:
            return 0

        results: list[CheckResult] = []
        stopped = False

        t0 = datetime.now()
        for impl in self._implementations:
            self._log(banner(f"Checking: {impl.name}"))
            for result in self.checks(impl):
                results.append(result)
                self._log_result(result)
                if not result.ok and self._config.fail_fast:
                    stopped = True
                    break
            if stopped:
                break
        t1 = datetime.now()

        self.result = PlanResult(results, t1 - t0, stopped)

        self._log(self.outro(self.result))

        return int(self.result.passed < self.result.total)

    def checks(self, impl: Implementation) -> Iterator[CheckResult]:
        """Generate all check results for one implementation: the cos(0)
        check in every configured precision, then the edge-case checks.

        """
        for precision in self._config.precisions:
            yield check_basic(impl, precision)
        yield from check_edges(impl, self._cases)

    @property
    def intro(self) -> str:
        """An informative banner to display at run start."""
        impls = ", ".join(yellow(impl.name) for impl in self._implementations)
        precisions = ", ".join(yellow(p) for p in self._config.precisions)
        mode = "fail fast" if self._config.fail_fast else "keep going"
        details = (
            f"* Implementations   : {impls}",
            f"* cos(0) precisions : {precisions}",
            f"* Edge-case vectors : {yellow(str(len(self._cases)))}",
            f"* On failure        : {yellow(mode)}",
        )
        return banner("Complex cos conformance", details=details)

    def outro(self, result: PlanResult) -> str:
        """An informative banner to display at run end."""
        lines = [f"\n{rule()}"]
        if result.stopped:
            lines.append(yellow("Stopped at the first failure"))
        counts = result.categories
        if counts:
            lines.append(
                "Edge cases by category: "
                + ", ".join(f"{k}={counts[k]}" for k in sorted(counts))
            )
        lines.append(
            summary("All checks", result.total, result.passed, result.time)
        )
        return "\n".join(lines) + "\n"

    def _log_result(self, result: CheckResult) -> None:
        if result.skipped:
            self._log(skipped(f"{result.name}: {'; '.join(result.details)}"))
        elif not result.ok:
            self._log(failed(result.name, details=result.details))
        elif result.category is None or self._config.verbose > 0:
            self._log(passed(result.name))
