"""
Argot faults (definition and parse errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
  Codes are grouped by domain to keep copy consistent and make logs/searches
  predictable.
- CommandException: base type that carries message + hint + code and knows how
  to render itself with rich.
- DefinitionError: the program declared its options/arguments wrongly. This is
  a bug in the program built on argot, never a user error.
- ParseError (and subclasses): the user supplied malformed tokens. Parsing
  stops at the first one.
- trigger(): central entry point to surface a fault (raise, or print and exit
  in shell mode).

Integration
- The parser raises faults synchronously; nothing here prints on its own.
- Program.run() catches CommandException and triggers it in shell mode, which
  prints a one-line "* ERROR: ..." message to stderr and exits with status 1.
- Validators reject a value by raising ParseError (any subclass).
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across argot (stable identifiers).

    grouping
    - definitions (101xx)
      • MALFORMED_DEFINITION, DUPLICATED_OPTION, SEALED_REGISTRY, EMPTY_VECTOR
    - parsing (111xx)
      • PARSE_ERROR (generic, e.g. raised by validators), UNKNOWN_OPTION,
        OPTION_ORDER, MISSING_PARAMETER, TOO_MANY_ARGUMENTS, MISSING_ARGUMENT,
        INVALID_VALUE

    normalize() allows the host to remap codes to custom labels while keeping
    the numeric values stable.
    """
    # --- definition errors (101xx) ---
    MALFORMED_DEFINITION        = 10101
    DUPLICATED_OPTION           = 10102
    SEALED_REGISTRY             = 10103
    EMPTY_VECTOR                = 10104

    # --- parse errors (111xx) ---
    PARSE_ERROR                 = 11100
    UNKNOWN_OPTION              = 11112
    OPTION_ORDER                = 11113
    MISSING_PARAMETER           = 11117
    TOO_MANY_ARGUMENTS          = 11121
    MISSING_ARGUMENT            = 11125
    INVALID_VALUE               = 11131

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandException(Exception):
    """
    Base of every argot fault.

    Attributes
    - message: one-line, lowercase description of the problem.
    - hint: optional one-line suggestion (None when absent).
    - code: FaultCode; defaults to the class-level code.
    - title: short header used by fancy rendering.
    - context: read-only mapping with extra details (input token, position, ...).
    """
    code = FaultCode.PARSE_ERROR
    title = "error"

    def __init__(self, message, /, *, hint=Unset, code=Unset, title=Unset, **context):
        if not isinstance(message, str):
            raise TypeError("%s() message must be a string" % type(self).__name__)
        super().__init__(message)
        self.message = message
        self.hint = coalesce(hint)
        self.code = coalesce(code, type(self).code)
        self.title = coalesce(title, type(self).title)
        self.context = MappingProxyType(context)

    def __str__(self):
        return self.message

    def render(self, *, prog=Unset, colorful=False, fancy=False):
        """
        Build a rich renderable for this fault.

        Plain form (fancy=False)
            * ERROR: <message>
              → <hint>
        Fancy form wraps message and hint in a panel titled
        "[ <prog> — <code> | <title> ]".

        Styles may be overridden through a __styles__ mapping in __main__.
        """
        main = __import__("__main__")

        styles = defaultdict(str, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-marker": "bold #FF4DA6",
            "error-title": "bold #FF4DA6",
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = coalesce(prog, getattr(main, "__prog__", "argot"))
        hint = Text.assemble("  ", text("→ ", styler("hint-arrow")), text(self.hint, styler("hint"))) if self.hint else None

        if fancy:
            header = Text.assemble(
                "[ ",
                text(prog, styler("prog-name")),
                " — ",
                text(self.code.normalize(), styler("code")),
                " | ",
                text(self.title.title(), styler("error-title")),
                " ]"
            )
            body = text(self.message, styler("error-message"))
            return Panel(Group(body, hint) if hint else body, title=header, title_align="left")

        line = Text.assemble(text("* ERROR:", styler("error-marker")), " ", text(self.message, styler("error-message")))
        return Group(line, hint) if hint else line

    def __rich__(self):
        return self.render()

    def __trigger__(self, *, shell=False, soft=False, console=Unset, **options):
        if not shell:
            raise self from None
        coalesce(console, globals()["console"]).print(self.render(**options))
        if soft:
            return
        sys.exit(1)


class DefinitionError(CommandException):
    """A malformed option/argument declaration or parser setup."""
    code = FaultCode.MALFORMED_DEFINITION
    title = "bad definition"


class ParseError(CommandException):
    """Malformed user input. Validators raise this to reject a value."""
    code = FaultCode.PARSE_ERROR
    title = "bad input"


class UnknownOptionError(ParseError):
    code = FaultCode.UNKNOWN_OPTION
    title = "unknown option"


class OptionOrderError(ParseError):
    code = FaultCode.OPTION_ORDER
    title = "option after argument"


class MissingParameterError(ParseError):
    code = FaultCode.MISSING_PARAMETER
    title = "missing parameter"


class TooManyArgumentsError(ParseError):
    code = FaultCode.TOO_MANY_ARGUMENTS
    title = "too many arguments"


class MissingArgumentError(ParseError):
    code = FaultCode.MISSING_ARGUMENT
    title = "missing argument"


class InvalidValueError(ParseError):
    code = FaultCode.INVALID_VALUE
    title = "invalid value"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide a callable __trigger__ method.
    - outside shell mode (the default) the fault is raised.
    - in shell mode it is printed to stderr and the process exits with 1,
      unless soft=True.

    typical options
    - shell, soft, prog, colorful, fancy, console.
    """
    if not hasattr(fault, "__trigger__") or not callable(fault.__trigger__):
        raise TypeError("trigger() argument must implement __trigger__ method")
    fault.__trigger__(**options)


__all__ = (
    "FaultCode",
    "CommandException",
    "DefinitionError",
    "ParseError",
    "UnknownOptionError",
    "OptionOrderError",
    "MissingParameterError",
    "TooManyArgumentsError",
    "MissingArgumentError",
    "InvalidValueError",
    "trigger",
)
