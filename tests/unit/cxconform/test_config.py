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

import pytest

import cxconform.config as m  # module under test
from cxconform import IMPLEMENTATIONS, PRECISIONS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for impl in IMPLEMENTATIONS:
        monkeypatch.delenv(f"USE_{impl.upper()}", raising=False)


class TestConfig:
    def test_default_init(self) -> None:
        c = m.Config([])

        assert c.implementations == ("numpy",)
        assert c.precisions == PRECISIONS

        assert c.keep_going is False
        assert c.fail_fast is True
        assert c.dry_run is False
        assert c.verbose == 0

        assert c.extra_args == []

    @pytest.mark.parametrize("impl", IMPLEMENTATIONS)
    def test_env_implementations(
        self, monkeypatch: pytest.MonkeyPatch, impl: str
    ) -> None:
        monkeypatch.setenv(f"USE_{impl.upper()}", "1")

        # test default config
        c = m.Config([])
        assert c.implementations == (impl,)

        # also test with a --use value provided
        c = m.Config(["cxconform", "--use", "cmath"])
        assert c.implementations == ("cmath",)

    @pytest.mark.parametrize("impl", IMPLEMENTATIONS)
    def test_cmd_implementations(self, impl: str) -> None:
        c = m.Config(["cxconform", "--use", impl])
        assert c.implementations == (impl,)

        # also test with multiple / duplication
        c = m.Config(["cxconform", "--use", f"numpy,{impl}", "--use", impl])
        assert set(c.implementations) == {"numpy", impl}
        assert len(c.implementations) == len(set(c.implementations))

    def test_implementations_order(self) -> None:
        c = m.Config(["cxconform", "--use", "cmath,numpy"])
        assert c.implementations == IMPLEMENTATIONS

    def test_bad_implementation(self) -> None:
        with pytest.raises(SystemExit):
            m.Config(["cxconform", "--use", "mpmath"])

    def test_precisions(self) -> None:
        c = m.Config(["cxconform", "--precision", "extended,single"])
        assert c.precisions == ("single", "extended")

    def test_bad_precision(self) -> None:
        with pytest.raises(SystemExit):
            m.Config(["cxconform", "--precision", "half"])

    def test_keep_going(self) -> None:
        c = m.Config(["cxconform", "--keep-going"])
        assert c.keep_going is True
        assert c.fail_fast is False

    def test_dry_run(self) -> None:
        c = m.Config(["cxconform", "--dry-run"])
        assert c.dry_run is True

    @pytest.mark.parametrize("arg", ("-v", "--verbose"))
    def test_verbose1(self, arg: str) -> None:
        c = m.Config(["cxconform", arg])
        assert c.verbose == 1

    def test_verbose2(self) -> None:
        c = m.Config(["cxconform", "-vv"])
        assert c.verbose == 2

    def test_extra_args(self) -> None:
        extra = ["-foo", "--bar", "--baz", "10"]
        c = m.Config(["cxconform"] + extra)
        assert c.extra_args == extra
