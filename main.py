from rich.pretty import pprint

from argot import *


def _threads(value):
    if not value.isdigit() or int(value) < 1:
        raise ParseError("threads must be a positive number, got %r" % value)


class Tool(Program):
    version = "0.0.0"
    summary = "Show how a vector binds against a few options and arguments."
    footer = "Options must come before arguments."

    def define(self):
        self.add_option("d", "debug", kind=Kind.SWITCH, descr="Turn on debugging.")
        self.add_option("t", "threads", kind=Kind.MANDATORY, metavar="count", validator=_threads, descr="Worker threads.")
        self.add_option(long="color", kind=Kind.OPTIONAL, metavar="when", descr="Colorize output.")
        self.add_argument("file", kind=Kind.MANDATORY)
        self.add_argument("extra...", kind=Kind.OPTIONAL)

    def execute(self, result):
        pprint(result)


if __name__ == '__main__':
    Tool.run()
