"""
Argot program layer: declare a CLI, run it, render help/usage/version.

What this module provides
- Program: base class for command-line programs.
  • Registers -v/--verbose (switch), -h/--help and -V/--version (function
    options) before the subclass hook define() adds its own definitions.
  • run(argv): build, parse, dispatch; faults are printed as
    "* ERROR: <message>" to stderr with exit status 1.
  • print_usage(), print_help(), print_version(): rich-based renderers.

Quick start
    from argot import Program, Kind

    class Copy(Program):
        version = "1.2.0"
        summary = "Copy SOURCE to TARGET."

        def define(self):
            self.add_option("f", "force", kind=Kind.SWITCH, descr="Overwrite TARGET.")
            self.add_argument("SOURCE", kind=Kind.MANDATORY)
            self.add_argument("TARGET", kind=Kind.MANDATORY)

        def execute(self, result):
            ...

    if __name__ == "__main__":
        Copy.run()

Customization
- colorful / fancy: class attributes or constructor keywords.
- __styles__ in __main__ overrides palette entries, __prog__ the program name.
"""
import datetime
import logging
import logging.handlers
import os.path
import sys
from abc import ABC, abstractmethod
from collections import defaultdict

from rich.console import Console, Group
from rich.logging import RichHandler
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .definitions import Kind
from .faults import CommandException, trigger
from .parser import Parser
from .registry import Registry
from .utils import Unset, coalesce, mirror

logger = logging.getLogger(__name__)


class Program(ABC):
    version = None
    summary = None
    footer = None
    colorful = False
    fancy = False

    registry = mirror("registry")
    result = mirror("result")

    def __init__(self, *, colorful=Unset, fancy=Unset, console=Unset, stderr=Unset):
        self.colorful = coalesce(colorful, type(self).colorful)
        self.fancy = coalesce(fancy, type(self).fancy)
        self._console = coalesce(console, Console())
        self._stderr = coalesce(stderr, Console(stderr=True))
        self._registry = Registry()
        self._program = None
        self._result = None

        self.add_option("v", "verbose", kind=Kind.SWITCH, descr="Make the program more talkative.")
        self.add_option("h", "help", kind=Kind.FUNCTION, handler=self.print_help, descr="This help text.")
        self.add_option("V", "version", kind=Kind.FUNCTION, handler=self.print_version, descr="Show version and quit.")

        self.define()

    def define(self):
        """Hook for subclasses: add options and arguments here."""

    @abstractmethod
    def execute(self, result):
        """
        Called with the ParseResult once the vector was parsed successfully.

        Raise a CommandException (for example ParseError from a late
        validation) to report a failure; run() prints it and exits with 1.
        """

    @property
    def name(self):
        return getattr(__import__("__main__"), "__prog__", None) or self._program or "argot"

    def add_option(self, *args, **kwargs):
        self._registry.register_option(*args, **kwargs)
        return self

    def add_argument(self, *args, **kwargs):
        self._registry.register_argument(*args, **kwargs)
        return self

    def set_version(self, version, /):
        self.version = version
        return self

    def set_summary(self, summary, /):
        self.summary = summary
        return self

    def set_footer(self, footer, /):
        self.footer = footer
        return self

    def parse(self, argv, /):
        """
        Parse a full argument vector and remember the result.

        Parser records are held back while parsing; once -v/--verbose turns
        out to be set they are replayed to a RichHandler on stderr, which
        then stays attached to the "argot" logger. Without -v they are
        dropped.

        Returns the parser outcome (Continue or Halted).
        """
        argv = list(argv)
        if argv:
            self._program = argv[0]

        package = logging.getLogger(__package__)
        buffer = logging.handlers.BufferingHandler(sys.maxsize)
        level, propagate = package.level, package.propagate

        package.addHandler(buffer)
        package.setLevel(logging.DEBUG)
        package.propagate = False
        try:
            outcome = Parser(self._registry).parse(argv)
        finally:
            package.removeHandler(buffer)
            package.setLevel(level)
            package.propagate = propagate
            records = list(buffer.buffer)
            buffer.close()

        if not outcome.halted:
            self._result = outcome.result
            if outcome.result.is_set("verbose"):
                handler = self._verbose(package)
                for record in records:
                    handler.handle(record)
                logger.debug("verbose output enabled for %s", self.name)
        return outcome

    def _verbose(self, package):
        handler = RichHandler(console=self._stderr, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package.addHandler(handler)
        package.setLevel(logging.DEBUG)
        return handler

    @classmethod
    def run(cls, argv=Unset, /, **options):
        """
        Create the program, parse argv (sys.argv by default) and execute it.

        - Halted (help, version, ...): exit with the option's status.
        - CommandException: print "* ERROR: ..." to stderr, exit with 1.
        - otherwise: return what execute() returns.
        """
        program = cls(**options)

        try:
            outcome = program.parse(sys.argv if argv is Unset else argv)
            if outcome.halted:
                sys.exit(outcome.status)
            return program.execute(outcome.result)
        except CommandException as exception:
            trigger(
                exception,
                shell=True,
                console=program._stderr,
                prog=program.name,
                colorful=program.colorful,
                fancy=program.fancy,
            )

    def _palette(self):
        styles = defaultdict(str, {
            "usage-label": "bold #00E6FF",
            "program-name": "bold #FF4D94",
            "usage-section": "bold #36C5F0",
            "summary-section": "italic #A3A3A3",
            "footer-section": "#737373",
            "group-label": "bold #FFFFFF",
            "option-name": "bold #00E6FF",
            "switch-name": "bold #22C55E",
            "metavar": "bold #FFD600",
            "argument": "bold #FFD600",
            "description": "#9CA3AF",
            "program-version": "bold #00E6FF",
            "panel-title": "bold #FF4D94",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if self.colorful else ""

        return styler

    def _emit(self, renders, title):
        if self.fancy:
            self._console.print(Panel(Group(*renders), title=Text(title, self._palette()("panel-title")), title_align="left"))
        else:
            self._console.print(Group(*renders))

    def _usage(self):
        styler = self._palette()

        usage = Text()
        usage.append("USAGE", styler("usage-label")).append(":")
        usage.append(" ")
        usage.append(self.name, styler("program-name"))

        if self._registry.options:
            usage.append(" ")
            usage.append("[OPTIONS...]", styler("usage-section"))

        for argument in self._registry.arguments:
            if argument.kind is Kind.MANDATORY:
                usage.append(" ")
                usage.append(argument.name.upper(), styler("argument"))

        for argument in self._registry.arguments:
            if argument.kind is Kind.OPTIONAL:
                usage.append(" [")
                usage.append(argument.name.upper(), styler("argument"))
                usage.append("]")

        renders = [usage]
        if self.summary:
            renders.append(Text(self.summary, styler("summary-section")))
        return renders

    def print_usage(self):
        self._emit(self._usage(), self.name)

    def print_help(self):
        """
        Render usage, summary, the OPTIONS table and the footer.

        Option rows read "-s, --long VALUE" for mandatory values and
        "-s, --long [VALUE]" for optional ones; rows are sorted by name,
        ignoring the leading dashes and case. Options without a description
        are left out.
        """
        styler = self._palette()
        renders = self._usage()

        rows = []
        for option in self._registry.options:
            if not option.descr:
                continue

            key = Text()
            style = styler("switch-name" if option.kind is Kind.SWITCH else "option-name")
            if option.short is not None:
                key.append("-" + option.short, style)
            if option.long is not None:
                key.append(", " if option.short is not None else "    ")
                key.append("--" + option.long, style)

            match option.kind:
                case Kind.OPTIONAL:
                    key.append(" [").append(option.metavar.upper(), styler("metavar")).append("]")
                case Kind.MANDATORY:
                    key.append(" ").append(option.metavar.upper(), styler("metavar"))

            rows.append((key, Text(option.descr, styler("description"))))

        if rows:
            rows.sort(key=lambda row: row[0].plain.lstrip(" -").lower())

            table = Table.grid(padding=(0, 2))
            table.add_column(no_wrap=True)
            table.add_column()
            for key, descr in rows:
                table.add_row(key, descr)

            renders.append(Text(""))
            renders.append(Text("OPTIONS:", styler("group-label")))
            renders.append(Padding(table, (0, 0, 0, 2)))

        if self.footer:
            renders.append(Text(""))
            renders.append(Text(self.footer, styler("footer-section")))

        self._emit(renders, self.name)

    def print_version(self):
        """
        Render "<name> v<version>".

        Without a declared version the modification time of the program file
        stands in for it.
        """
        styler = self._palette()

        version = self.version
        if not version:
            try:
                version = datetime.datetime.fromtimestamp(os.path.getmtime(self._program or "")).strftime("%Y-%m-%d %H:%M:%S")
            except OSError:
                version = "unknown"

        line = Text.assemble((self.name, styler("program-name")), " v", (str(version), styler("program-version")))
        self._emit([line], self.name)


__all__ = (
    "Program",
)
