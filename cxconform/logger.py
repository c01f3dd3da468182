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
"""Provide a basic log of check output that can scrub ANSI color codes.

"""
from __future__ import annotations

import re

# ref: https://stackoverflow.com/a/14693789
_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class Log:
    """Record output lines, optionally echoing them to stdout as they come.

    Parameters
    ----------
    echo : bool, optional
        Whether to print each line as it is recorded (default: True)

    """

    def __init__(self, *, echo: bool = True) -> None:
        self.echo = echo
        self._record: list[str] = []

    def __call__(self, *lines: str) -> tuple[int, int]:
        return self.record(*lines)

    def record(self, *lines: str) -> tuple[int, int]:
        """Append lines to the log.

        A single argument containing newlines is split into separate lines.

        Returns
        -------
        tuple[int, int]
            The (start, end) span of the new lines, for use with ``dump``

        """
        if len(lines) == 1 and "\n" in lines[0]:
            lines = tuple(lines[0].split("\n"))

        start = len(self._record)
        self._record.extend(lines)
        if self.echo:
            for line in lines:
                print(line, flush=True)
        return (start, len(self._record))

    def clear(self) -> None:
        self._record = []

    def dump(
        self,
        *,
        start: int = 0,
        end: int | None = None,
        filter_ansi: bool = True,
    ) -> str:
        text = "\n".join(self._record[start:end])
        return _ANSI_ESCAPE.sub("", text) if filter_ansi else text

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._record)


LOG = Log()
