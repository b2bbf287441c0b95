"""
Argot parser: tokenize an argument vector and bind it against a registry.

phases
- setup
  • element 0 of the vector is the program name; an empty vector is a
    DefinitionError (the caller wired things wrongly, the user did not).
  • the registry is sealed, every SWITCH option is pre-seeded with False.
- loop (one token at a time, left to right, from a deque)
  • '--name' / '--name=value' → long option. an inline value is pushed back
    to the front of the deque and consumed by a valued option like a spaced
    one; after a SWITCH it is read as the next token (usually positional).
  • '-abc' → cluster; every character is a short option, in order.
  • anything else (including a lone '-') → positional value.
- option binding
  • any option after the first positional value is an OptionOrderError.
  • FUNCTION runs its handler and the parse returns Halted right away.
  • SWITCH binds True, OPTIONAL binds the next token when more than one
    token remains (or an inline value) and True otherwise, MANDATORY binds
    the next token or fails with MissingParameterError.
- positional binding
  • first unbound MANDATORY slot, then first unbound OPTIONAL slot; a variadic
    OPTIONAL slot (name ending in "...") takes every value from there on.
  • TooManyArgumentsError when no slot accepts the value.
- post-parse
  • check_argument_count(): every MANDATORY argument must have been bound.

indexing
- messages lead with the ordinal position of the offending token in the
  vector ("at third position"), the program name not counted.
"""
import logging
from collections import deque

from .definitions import Kind
from .faults import *
from .registry import Registry
from .results import Continue, Halted, ParseResult
from .utils import Unset, mirror, ordinal

logger = logging.getLogger(__name__)


class ParseState:
    """
    Mutable state of one parse pass.

    - tokens: deque of the tokens not consumed yet.
    - index: 1-based position of the last consumed token in the vector.
    - options: option key → bound value.
    - arguments: positional index → bound value.
    - inline: the front token was split off a '--name=value' token.
    """

    def __init__(self, tokens, options=()):
        self.tokens = deque(tokens)
        self.index = 0
        self.options = dict(options)
        self.arguments = {}
        self.inline = False

    @property
    def positional(self):
        """True once the first positional value was bound (options are closed)."""
        return 0 in self.arguments

    def pop(self):
        token = self.tokens.popleft()
        # an inline value shares the position of its option
        if self.inline:
            self.inline = False
        else:
            self.index += 1
        return token

    def push(self, token):
        self.tokens.appendleft(token)
        self.inline = True


class Parser:
    """
    Parse argument vectors against a Registry.

    Usage
        registry = Registry()
        registry.register_option("v", "verbose", kind=Kind.SWITCH)
        registry.register_argument("FILE", kind=Kind.MANDATORY)

        outcome = Parser(registry).parse(["prog", "-v", "x.txt"])
        if not outcome.halted:
            outcome.result.get_argument(0)  # "x.txt"
    """
    registry = mirror("registry")

    def __init__(self, registry=Unset, /):
        self._registry = Registry() if registry is Unset else registry
        if not isinstance(self._registry, Registry):
            raise TypeError("Parser() argument must be a registry")

    def parse(self, argv, /, *, check=True):
        """
        Parse a full argument vector (program name first).

        Returns Continue(ParseResult) when every token was consumed, or
        Halted(option, status) when a FUNCTION option stopped the parse.
        With check=False the mandatory-argument completeness check is left to
        the caller (see check_argument_count()).
        """
        if isinstance(argv, str):
            raise TypeError("parse() argument must be a sequence of strings, not a string")
        argv = list(argv)
        if not all(isinstance(token, str) for token in argv):
            raise TypeError("parse() argument must only contain strings")
        if not argv:
            raise DefinitionError(
                "argument vector must contain the program name as first entry",
                code=FaultCode.EMPTY_VECTOR,
            )

        program, *tokens = argv
        self._registry.seal()

        state = ParseState(tokens, (
            (option.key, False) for option in self._registry.options if option.kind is Kind.SWITCH
        ))
        logger.debug("parsing %d token(s) for %r", len(tokens), program)

        while state.tokens:
            token = state.pop()

            if token.startswith("--") and len(token) > 2:
                halted = self._parse_long(token[2:], state)
            elif token.startswith("-") and len(token) > 1:
                halted = self._parse_cluster(token[1:], state)
            else:
                halted = self._bind_positional(token, state)

            if halted:
                logger.debug("parse halted by %r", halted.option)
                return halted

        result = ParseResult(self._registry, program, state.options, state.arguments)
        if check:
            self.check_argument_count(result)
        return Continue(result)

    def check_argument_count(self, result, /):
        """
        Raise MissingArgumentError naming the first MANDATORY argument whose
        positional index was never bound.
        """
        index = 0
        for argument in self._registry.arguments:
            if argument.kind is Kind.MANDATORY:
                if result.get_argument(index, Unset) is Unset:
                    raise MissingArgumentError(
                        "%r is a required argument" % argument.name,
                        hint="pass a value for %s after the options" % argument.name,
                        argument=argument,
                    )
                index += 1
        return result

    def _parse_long(self, body, state):
        name, separator, value = body.partition("=")
        if separator:
            state.push(value)
        logger.debug("long option %r at %s position", name, ordinal(state.index))
        return self._resolve_option("long", name, state)

    def _parse_cluster(self, body, state):
        logger.debug("short option cluster %r at %s position", body, ordinal(state.index))
        for name in body:
            if halted := self._resolve_option("short", name, state):
                return halted
        return None

    def _resolve_option(self, kind, name, state):
        """
        Bind one option token; `kind` is "short" or "long".

        Returns Halted for FUNCTION options, None otherwise.
        """
        spelling = ("--" if kind == "long" else "-") + name
        index = state.index

        if state.positional:
            raise OptionOrderError(
                "options must come before arguments, but %r at %s position follows %r" % (
                    spelling, ordinal(index), state.arguments[0]
                ),
                hint="move %r in front of the first argument" % spelling,
                input=spelling,
                index=index,
            )

        option = self._registry.find_option(**{kind: name})
        if option is None:
            raise UnknownOptionError(
                "unknown option %r at %s position" % (spelling, ordinal(index)),
                hint="try '--help' to see all available options",
                input=spelling,
                index=index,
            )

        match option.kind:
            case Kind.FUNCTION:
                logger.debug("running handler of %r", option)
                option.handler()
                return Halted(option, option.status)
            case Kind.SWITCH:
                # a pushed back inline value keeps the switch's position
                value = True
            case Kind.OPTIONAL:
                # a trailing spaced token is left to the positional arguments
                if state.inline or len(state.tokens) > 1:
                    value = self._validate(option, state.pop(), spelling, state)
                else:
                    value = True
            case Kind.MANDATORY:
                if not state.tokens:
                    raise MissingParameterError(
                        "missing parameter for option %r at %s position" % (spelling, ordinal(index)),
                        hint="pass a value after it (for example: %s <%s>)" % (spelling, option.metavar),
                        input=spelling,
                        index=index,
                    )
                value = self._validate(option, state.pop(), spelling, state)

        state.options[option.key] = value
        logger.debug("bound option %r to %r", option.key, value)
        return None

    def _bind_positional(self, value, state):
        index = 0

        for argument in self._registry.arguments:
            if argument.kind is Kind.MANDATORY:
                if index not in state.arguments:
                    return self._bind_argument(argument, index, value, state)
                index += 1

        for argument in self._registry.arguments:
            if argument.kind is Kind.OPTIONAL:
                if argument.variadic:
                    while index in state.arguments:
                        index += 1
                    return self._bind_argument(argument, index, value, state)
                if index not in state.arguments:
                    return self._bind_argument(argument, index, value, state)
                index += 1

        raise TooManyArgumentsError(
            "too many arguments, %r at %s position is not expected" % (value, ordinal(state.index)),
            hint="remove it, or quote values containing spaces",
            input=value,
            index=state.index,
        )

    def _bind_argument(self, argument, index, value, state):
        state.arguments[index] = self._validate(argument, value, argument.name, state)
        logger.debug("bound argument %r to index %d", argument.name, index)
        return None

    def _validate(self, definition, value, subject, state):
        """
        Run the definition's validator on a raw string value.

        ParseError raised by a validator propagates unchanged; ValueError and
        TypeError are reported as InvalidValueError.
        """
        if definition.validator is None:
            return value
        try:
            definition.validator(value)
        except ParseError:
            raise
        except (ValueError, TypeError) as exception:
            raise InvalidValueError(
                "invalid value %r for %r at %s position" % (value, subject, ordinal(state.index)),
                hint=str(exception) or Unset,
                input=value,
                index=state.index,
            ) from exception
        return value


__all__ = (
    "ParseState",
    "Parser",
)
