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

import sys

from .config import Config
from .plan import CheckPlan
from .types import ArgList


def main(argv: ArgList | None = None) -> int:
    config = Config(sys.argv if argv is None else argv)
    return CheckPlan(config).execute()


if __name__ == "__main__":
    sys.exit(main())
