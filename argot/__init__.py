"""
argot: declarative command-line options and arguments, parsed into a
read-only result.

    from argot import Registry, Parser, Kind

    registry = Registry()
    registry.register_option("v", "verbose", kind=Kind.SWITCH)
    registry.register_argument("FILE", kind=Kind.MANDATORY)
    result = Parser(registry).parse(["prog", "-v", "notes.txt"]).result

Program wraps the same pieces into a runnable command with -h/--help,
-V/--version and -v/--verbose.
"""
__title__ = "argot"
__license__ = "MIT"
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from typing import NamedTuple

from .definitions import *
from .faults import *
from .parser import *
from .programs import *
from .registry import *
from .results import *


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int


version_info = VersionInfo(*map(int, __version__.split(".")[:3]))

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info",
)
__all__ += definitions.__all__  # type: ignore[name-defined]
__all__ += faults.__all__  # type: ignore[name-defined]
__all__ += parser.__all__  # type: ignore[name-defined]
__all__ += programs.__all__  # type: ignore[name-defined]
__all__ += registry.__all__  # type: ignore[name-defined]
__all__ += results.__all__  # type: ignore[name-defined]
