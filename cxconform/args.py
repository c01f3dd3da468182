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
"""Provide an argparse ArgumentParser for the conformance runner.

"""
from __future__ import annotations

from argparse import Action, ArgumentParser, Namespace
from typing import Any, Generic, Iterable, Iterator, Sequence, TypeVar, Union

from . import IMPLEMENTATIONS, PRECISIONS

T = TypeVar("T")


class MultipleChoices(Generic[T]):
    """A container that reports True for any item or subset inclusion.

    Parameters
    ----------
    choices: Iterable[T]
        The values to populate the containter.

    Examples
    --------

    >>> choices = MultipleChoices(["a", "b", "c"])

    >>> "a" in choices
    True

    >>> ("b", "c") in choices
    True

    """

    def __init__(self, choices: Iterable[T]) -> None:
        self.choices = set(choices)

    def __contains__(self, x: Union[T, Iterable[T]]) -> bool:
        if isinstance(x, (list, tuple)):
            return set(x).issubset(self.choices)
        return x in self.choices

    def __iter__(self) -> Iterator[T]:
        return self.choices.__iter__()


class ExtendAction(Action):
    """A custom argparse action to collect multiple values into a list."""

    def __call__(
        self,
        parser: ArgumentParser,
        namespace: Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Union[str, None] = None,
    ) -> None:
        items = getattr(namespace, self.dest, None) or []
        if isinstance(values, list):
            items.extend(values)
        else:
            items.append(values)
        setattr(namespace, self.dest, items)


#: The argument parser for the conformance runner
parser = ArgumentParser(
    prog="cxconform",
    description="Check complex cosine implementations for conformance",
    epilog="Any extra arguments are ignored",
)


selection = parser.add_argument_group("Check selection")


selection.add_argument(
    "--use",
    dest="implementations",
    action=ExtendAction,
    choices=MultipleChoices(sorted(IMPLEMENTATIONS)),
    # argpase evidently only expects string returns from the type converter
    # here, but returning a list of strings seems to work in practice
    type=lambda s: s.split(","),  # type: ignore[return-value, arg-type]
    help="Implementations to check (also via USE_*)",
)


selection.add_argument(
    "--precision",
    dest="precisions",
    action=ExtendAction,
    choices=MultipleChoices(sorted(PRECISIONS)),
    type=lambda s: s.split(","),  # type: ignore[return-value, arg-type]
    help="Precisions for the cos(0) check (default: all)",
)


run_opts = parser.add_argument_group("Run configuration options")


run_opts.add_argument(
    "--keep-going",
    dest="keep_going",
    action="store_true",
    default=False,
    help="Report every failure instead of stopping at the first one",
)


run_opts.add_argument(
    "-v",
    "--verbose",
    dest="verbose",
    action="count",
    default=0,
    help="Display verbose output. Use -v to also list passing test vectors",
)


run_opts.add_argument(
    "--dry-run",
    dest="dry_run",
    action="store_true",
    help="Print the check plan but don't run anything",
)
