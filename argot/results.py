"""
Parse results and parse outcomes.

- ParseResult: immutable lookup of bound option and argument values, read
  through get_option()/get_argument()/is_set(). Reads never mutate and never
  fail, so they may be repeated freely for the life of the program.
- Continue / Halted: the two outcomes of Parser.parse(). Halted means a
  FUNCTION option (help, version, ...) ran its handler and parsing stopped
  there; the caller decides whether to exit with the suggested status.

Option values
- SWITCH    → False unless present, then True
- OPTIONAL  → the consumed string, or True when no value was supplied
- MANDATORY → the consumed string
Options are keyed by their long name if they have one, else by the short name.

Argument values are keyed by 0-based position, counting only positional slots
in the order values were bound.
"""
from types import MappingProxyType
from typing import NamedTuple

from .utils import mirror


class ParseResult:
    program = mirror("program")
    options = mirror("options")

    def __init__(self, registry, program, options, arguments):
        self._registry = registry
        self._program = program
        self._options = MappingProxyType(dict(options))
        self._arguments = MappingProxyType(dict(arguments))

    @property
    def arguments(self):
        """Bound positional values in index order."""
        return tuple(self._arguments[index] for index in sorted(self._arguments))

    def get_argument(self, index, default=None, /):
        """Return the value bound at `index`, or `default` when nothing was bound there."""
        return self._arguments.get(index, default)

    def get_option(self, name, default=None, /):
        """
        Return the value bound to an option, or `default`.

        `name` may be either the long or the short name; the long name is
        tried first. Unknown names and declared-but-unbound options yield the
        default.
        """
        option = self._registry.find_option(long=name)
        if option is None:
            option = self._registry.find_option(short=name)
        if option is None:
            return default
        return self._options.get(option.key, default)

    def is_set(self, name, /):
        """True when the option was bound to anything other than False."""
        return self.get_option(name, False) is not False

    def __getitem__(self, key):
        if isinstance(key, int):
            return self._arguments[key]
        option = self._registry.find_option(long=key)
        if option is None:
            option = self._registry.find_option(short=key)
        if option is None or option.key not in self._options:
            raise KeyError(key)
        return self._options[option.key]

    def __repr__(self):
        return "%s(program=%r, options=%r, arguments=%r)" % (
            type(self).__name__, self._program, dict(self._options), self.arguments
        )


class Continue(NamedTuple):
    """Parsing consumed every token; `result` holds the bound values."""
    result: ParseResult

    halted = False


class Halted(NamedTuple):
    """A FUNCTION option ran and stopped parsing; `status` is the suggested exit status."""
    option: object
    status: int = 0

    halted = True


__all__ = (
    "ParseResult",
    "Continue",
    "Halted",
)
