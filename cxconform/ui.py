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
"""Helper functions for simple text UI output.

"""
from __future__ import annotations

import sys
from datetime import timedelta
from typing import Iterable

import colorama
from typing_extensions import TypeAlias

from . import UI_WIDTH

Details: TypeAlias = Iterable[str]

if sys.platform == "win32":
    colorama.init()


def _text(text: str) -> str:
    return text


def bright(text: str) -> str:
    return f"{colorama.Style.BRIGHT}{text}{colorama.Style.RESET_ALL}"


def cyan(text: str) -> str:
    return f"{colorama.Fore.CYAN}{text}{colorama.Style.RESET_ALL}"


def red(text: str) -> str:
    return f"{colorama.Fore.RED}{text}{colorama.Style.RESET_ALL}"


def green(text: str) -> str:
    return f"{colorama.Fore.GREEN}{text}{colorama.Style.RESET_ALL}"


def yellow(text: str) -> str:
    return f"{colorama.Fore.YELLOW}{text}{colorama.Style.RESET_ALL}"


def _format_details(details: Details | None = None, pre: str = "   ") -> str:
    if details:
        return f"{pre}" + f"\n{pre}".join(f"{line}" for line in details)
    return ""


def banner(
    heading: str,
    *,
    char: str = "#",
    width: int = UI_WIDTH,
    details: Details | None = None,
) -> str:
    """Generate a title banner, with optional details included.

    Parameters
    ----------
    heading : str
        Text to use for the title

    char : str, optional
        A character to use to frame the banner. (default: "#")

    width : int, optional
        How wide to draw the banner. (Note: user-supplied heading or
        details will not be truncated if they exceed this width)

    details : Iterable[str], optional
        A list of lines to display inside the banner area below the heading

    """
    pre = f"{char*3} "
    divider = char * width
    if not details:
        return f"\n{divider}\n{pre}{heading}\n{divider}"
    return f"""
{divider}
{pre}
{pre}{heading}
{pre}
{_format_details(details, pre)}
{pre}
{divider}"""


def failed(msg: str, *, details: Details | None = None) -> str:
    """Report a failed check with a bright red [FAIL].

    Parameters
    ----------
    msg : str
        Text to display after [FAIL]

    details : Iterable[str], optional
        A sequence of text lines to display below the ``msg`` line

    """
    if details:
        return f"{bright(red('[FAIL]'))} {msg}\n{_format_details(details)}"
    return f"{bright(red('[FAIL]'))} {msg}"


def passed(msg: str, *, details: Details | None = None) -> str:
    """Report a passed check with a bright green [PASS]."""
    if details:
        return f"{bright(green('[PASS]'))} {msg}\n{_format_details(details)}"
    return f"{bright(green('[PASS]'))} {msg}"


def skipped(msg: str) -> str:
    """Report a skipped check with a cyan [SKIP]"""
    return f"{cyan('[SKIP]')} {msg}"


def rule(pad: int = 4, char: str = "~") -> str:
    """Generate a horizontal rule.

    Parameters
    ----------
    pad : int, optional
        How much whitespace to precede the rule. (default: 4)

    char : str, optional
        A character to use to "draw" the rule. (default: "~")

    """
    w = UI_WIDTH - pad
    return f"{char*w: >{UI_WIDTH}}"


def summary(
    name: str,
    total: int,
    passed: int,
    time: timedelta,
    *,
    justify: bool = True,
) -> str:
    """Generate a check result summary line.

    The output is bright green if all checks passed, otherwise bright red.

    Parameters
    ----------
    name : str
        A name to display in this summary line.

    total : int
        The total number of checks to report.

    passed : int
        The number of passed checks to report.

    time : timedelta
        The time taken to run the checks

    justify : bool, optional
        Whether to right-justify the line to UI_WIDTH (default: True)

    """
    percent = passed / total * 100 if total else 100.0
    summary = (
        f"{name}: Passed {passed} of {total} checks ({percent:0.1f}%) "
        f"in {time.total_seconds():0.2f}s"
    )
    color = green if passed == total else red
    text = f"{summary: >{UI_WIDTH}}" if justify else summary
    return bright(color(text))
