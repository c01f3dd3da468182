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

from cxconform import (
    EDGE_PRECISION,
    IMPLEMENTATIONS,
    PRECISIONS,
    UI_WIDTH,
)


class TestConsts:
    def test_PRECISIONS(self) -> None:
        assert PRECISIONS == ("single", "double", "extended")

    def test_IMPLEMENTATIONS(self) -> None:
        assert IMPLEMENTATIONS == ("numpy", "cmath")

    def test_EDGE_PRECISION(self) -> None:
        assert EDGE_PRECISION == "double"
        assert EDGE_PRECISION in PRECISIONS

    def test_UI_WIDTH(self) -> None:
        assert UI_WIDTH == 65
