"""Build and platform banner for the library, and a helper to print lines under its name."""

from __future__ import annotations

import platform
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

NAME = "cbormodel"
VERSION = "0.1"
PREFIX = f"{NAME}/{VERSION}"


def _build_kind() -> str:
    # Assertions are stripped under -O, the counterpart of a release build.
    return "Debug" if __debug__ else "Release"


def _subsystem() -> str | None:
    if sys.platform == "cygwin":
        return "cygwin"
    if sys.platform == "msys":
        return "msys"
    return None


def banner_lines() -> list[str]:
    """Return the banner: a greeting line followed by indented detail lines."""
    lines = [f"{PREFIX}: Hello World {_build_kind()}!"]
    details: list[tuple[str, str]] = []
    machine = platform.machine()
    if machine:
        details.append(("machine", machine))
    details.append(("implementation", platform.python_implementation()))
    details.append(("version", platform.python_version()))
    compiler = platform.python_compiler()
    if compiler:
        details.append(("compiler", compiler))
    subsystem = _subsystem()
    if subsystem:
        details.append(("subsystem", subsystem))
    lines.extend(f"  {PREFIX}: {key} {value}" for key, value in details)
    return lines


def print_banner(file: TextIO | None = None) -> None:
    """Write the banner to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    for line in banner_lines():
        print(line, file=out)


def print_vector(strings: Iterable[str], file: TextIO | None = None) -> None:
    """Write each string on its own line, prefixed with the library name."""
    out = sys.stdout if file is None else file
    for text in strings:
        print(f"{PREFIX} {text}", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the banner, then the given strings (``test_package`` if none)."""
    strings = list(argv) if argv else ["test_package"]
    print_banner()
    print_vector(strings)
    return 0