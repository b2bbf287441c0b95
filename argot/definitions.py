r"""
Argot option and argument definitions.

Overview
- Kind: discriminant shared by options and arguments.
  • SWITCH     presence-only option, False by default and True once seen.
  • OPTIONAL   option with an optional value, or optional positional argument.
  • MANDATORY  option with a required value, or required positional argument.
  • FUNCTION   option whose handler runs as soon as it is parsed, halting the parse.
- OptionDefinition: named option (-v, --verbose) of any Kind.
- ArgumentDefinition: positional argument, MANDATORY or OPTIONAL. A name ending
  with "..." marks it variadic (it accepts every remaining positional value).
- Validator: protocol for objects validating a raw string value.

Validation (on construction, raising DefinitionError)
- Options need a short (single character) or a long name, or both.
- Names must not start with '-' nor contain '=' or whitespace.
- OPTIONAL/MANDATORY options need a metavar (the value's display name).
- FUNCTION options need a callable handler.
- Arguments need a non-empty name and a MANDATORY or OPTIONAL kind.
- Validators are resolved once: a callable is used as-is, an object with a
  callable validate() contributes that bound method.

Quick example:
    >>> OptionDefinition("o", "output", kind=Kind.MANDATORY, metavar="FILE")
    OptionDefinition(-o, --output, kind=mandatory)
    >>> ArgumentDefinition("FILES...", kind="optional").variadic
    True
"""
import re
from enum import Enum
from typing import Protocol, runtime_checkable

from .faults import DefinitionError
from .utils import Unset, coalesce, mirror

VARIADIC = "..."


class Kind(Enum):
    SWITCH = "switch"
    OPTIONAL = "optional"
    MANDATORY = "mandatory"
    FUNCTION = "function"

    def __str__(self):
        return self.value


VALUED = frozenset({Kind.OPTIONAL, Kind.MANDATORY})


@runtime_checkable
class Validator(Protocol):
    def validate(self, value, /): ...


def _resolve_kind(kind, subject, accepted):
    if kind is Unset or kind is None:
        raise DefinitionError("%s must have a kind" % subject)
    try:
        resolved = Kind(kind)
    except ValueError:
        raise DefinitionError("%r is no valid kind for %s" % (kind, subject)) from None
    if resolved not in accepted:
        raise DefinitionError("kind %r is not valid for %s" % (resolved.value, subject))
    return resolved


def _resolve_validator(validator, subject):
    if validator is Unset or validator is None:
        return None
    if isinstance(validator, Validator) and callable(validator.validate):
        return validator.validate
    if callable(validator):
        return validator
    raise DefinitionError("validator of %s must be callable or implement validate()" % subject)


def _resolve_descr(descr, subject):
    if descr is Unset or descr is None:
        return None
    if not isinstance(descr, str):
        raise DefinitionError("description of %s must be a string" % subject)
    return descr.strip() or None


class OptionDefinition:
    """
    A named option.

    Parameters
    - short: single character name, used as "-x" (optional).
    - long: word name, used as "--word" (optional; one of short/long required).
    - kind: Kind or its string value.
    - metavar: value display name, required for OPTIONAL/MANDATORY.
    - handler: zero-argument callable, required for FUNCTION.
    - status: exit status suggested when a FUNCTION option halts parsing.
    - validator: callable(value) or Validator, run on raw string values.
    - descr: help text.
    """
    short = mirror("short")
    long = mirror("long")
    kind = mirror("kind")
    metavar = mirror("metavar")
    handler = mirror("handler")
    status = mirror("status")
    validator = mirror("validator")
    descr = mirror("descr")

    def __init__(
            self,
            short=Unset,
            long=Unset,
            *,
            kind=Unset,
            metavar=Unset,
            handler=Unset,
            status=0,
            validator=Unset,
            descr=Unset,
    ):
        short = coalesce(short)
        long = coalesce(long)

        if not short and not long:
            raise DefinitionError("an option must at least have a short or long name")

        if short is not None:
            if not isinstance(short, str) or len(short) != 1 or short in "-=" or short.isspace():
                raise DefinitionError("short name %r must be a single character other than '-' and '='" % (short,))
        if long is not None:
            if not isinstance(long, str) or not re.fullmatch(r"[^\s=-][^\s=]*", long):
                raise DefinitionError("long name %r must be a word not starting with '-' nor containing '='" % (long,))

        subject = "option %r" % (long or short)
        kind = _resolve_kind(kind, subject, frozenset(Kind))

        metavar = coalesce(metavar)
        if kind in VALUED:
            if not isinstance(metavar, str) or not metavar.strip():
                raise DefinitionError("%s, of kind %s, must have a metavar" % (subject, kind))
            metavar = metavar.strip()
        else:
            metavar = None

        handler = coalesce(handler)
        if kind is Kind.FUNCTION:
            if not callable(handler):
                raise DefinitionError("%s, of kind %s, must have a callable handler" % (subject, kind))
        else:
            handler = None

        if isinstance(status, bool) or not isinstance(status, int):
            raise DefinitionError("status of %s must be an integer" % subject)

        self._short = short
        self._long = long
        self._kind = kind
        self._metavar = metavar
        self._handler = handler
        self._status = status
        self._validator = _resolve_validator(validator, subject)
        self._descr = _resolve_descr(descr, subject)

    @property
    def key(self):
        """Identity of the option in parse results: long name if present, else short name."""
        return self._long if self._long is not None else self._short

    @property
    def flags(self):
        """Command-line spellings, short first: ("-v", "--verbose")."""
        return tuple(flag for flag in (
            "-" + self._short if self._short is not None else None,
            "--" + self._long if self._long is not None else None,
        ) if flag)

    def matches(self, *, short=Unset, long=Unset):
        if short is not Unset and short is not None and self._short == short:
            return True
        if long is not Unset and long is not None and self._long == long:
            return True
        return False

    def __repr__(self):
        return "%s(%s, kind=%s)" % (type(self).__name__, ", ".join(self.flags), self._kind)


class ArgumentDefinition:
    """
    A positional argument; order of registration decides binding priority.
    """
    name = mirror("name")
    kind = mirror("kind")
    validator = mirror("validator")
    descr = mirror("descr")

    def __init__(self, name=Unset, *, kind=Unset, validator=Unset, descr=Unset):
        name = coalesce(name)
        if not isinstance(name, str) or not name.strip():
            raise DefinitionError("arguments must have a name")
        name = name.strip()

        subject = "argument %r" % name

        self._name = name
        self._kind = _resolve_kind(kind, subject, VALUED)
        self._validator = _resolve_validator(validator, subject)
        self._descr = _resolve_descr(descr, subject)

    @property
    def variadic(self):
        return self._name.endswith(VARIADIC)

    def __repr__(self):
        return "%s(%r, kind=%s)" % (type(self).__name__, self._name, self._kind)


__all__ = (
    "Kind",
    "Validator",
    "OptionDefinition",
    "ArgumentDefinition",
)
