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
from __future__ import annotations

from datetime import timedelta

import numpy as np
import pytest

import cxconform.plan as m  # module under test
from cxconform.cases import TESTCASES
from cxconform.config import Config
from cxconform.implementations import CMath, NumPy
from cxconform.logger import Log
from cxconform.types import CheckResult


class FlipsImagSign(NumPy):
    def cos(self, z):
        return np.conj(super().cos(z))


def _plan(argv, **kwargs):
    log = Log(echo=False)
    plan = m.CheckPlan(Config(["cxconform"] + argv), log=log, **kwargs)
    return plan, log


class TestPlanResult:
    def test_counts(self) -> None:
        result = m.PlanResult(
            [
                CheckResult("a", True),
                CheckResult("b", False),
                CheckResult("c", True, skipped=True),
                CheckResult("d", True, category="inf"),
                CheckResult("e", True, category="inf"),
                CheckResult("f", True, category="zero"),
            ],
            timedelta(seconds=1),
        )
        assert result.total == 5
        assert result.passed == 4
        assert result.categories == {"inf": 2, "zero": 1}
        assert result.stopped is False


class TestCheckPlan:
    def test_default_implementations(self) -> None:
        plan, log = _plan(["--use", "numpy,cmath"])
        assert plan.execute() == 0
        assert plan.result is not None
        # cmath skips single and extended
        assert plan.result.total == 3 + 1 + 2 * len(TESTCASES)
        assert plan.result.passed == plan.result.total

    def test_log(self) -> None:
        plan, log = _plan(["--use", "cmath"])
        plan.execute()
        text = log.dump()
        assert "Complex cos conformance" in text
        assert "Checking: cmath" in text
        assert "[PASS] (cmath) cos(0) == 1 [double]" in text
        assert "[SKIP] (cmath) cos(0) == 1 [single]" in text
        assert "Passed" in text
        # passing edge cases are only listed when verbose
        assert "== cosh(" not in text

    def test_verbose(self) -> None:
        plan, log = _plan(["--use", "numpy", "-v"])
        plan.execute()
        lines = log.dump().split("\n")
        passes = [line for line in lines if "== cosh(" in line]
        assert len(passes) == len(TESTCASES)

    def test_dry_run(self) -> None:
        plan, log = _plan(["--dry-run"])
        assert plan.execute() == 0
        assert plan.result is None
        assert "Edge-case vectors" in log.dump()
        assert "Checking" not in log.dump()

    def test_precisions(self) -> None:
        plan, log = _plan(["--precision", "single"])
        plan.execute()
        assert "[single]" in log.dump()
        assert "[double]" not in log.dump()

    def test_fail_fast(self) -> None:
        plan, log = _plan([], implementations=[FlipsImagSign()])
        assert plan.execute() == 1
        assert plan.result is not None
        assert plan.result.stopped
        assert plan.result.results[-1].ok is False
        assert sum(not r.ok for r in plan.result.results) == 1
        assert "[FAIL]" in log.dump()
        assert "Stopped at the first failure" in log.dump()

    def test_keep_going(self) -> None:
        plan, log = _plan(
            ["--keep-going"], implementations=[FlipsImagSign(), CMath()]
        )
        assert plan.execute() == 1
        assert plan.result is not None
        assert not plan.result.stopped
        assert sum(not r.ok for r in plan.result.results) > 1
        # the second implementation still ran
        assert "Checking: cmath" in log.dump()

    def test_custom_cases(self) -> None:
        plan, log = _plan([], cases=TESTCASES[:5])
        assert plan.execute() == 0
        assert plan.result is not None
        assert plan.result.total == 3 + 5

    def test_empty_cases(self) -> None:
        plan, log = _plan([], cases=())
        with pytest.raises(ValueError):
            plan.execute()

    def test_rerun(self) -> None:
        plan, log = _plan([])
        assert plan.execute() == 0
        first = log.lines
        assert plan.execute() == 0
        assert len(log.lines) == len(first)
