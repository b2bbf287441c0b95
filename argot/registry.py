"""
Definition registry: the ordered, append-only store of option and argument
definitions a parser works against.

Registration validates eagerly and raises DefinitionError, so a malformed CLI
declaration surfaces before any user input is looked at. Once a parser starts
it seals the registry and further registrations are rejected.
"""
import logging

from .definitions import ArgumentDefinition, OptionDefinition
from .faults import DefinitionError, FaultCode
from .utils import Unset, mirror

logger = logging.getLogger(__name__)


class Registry:
    options = mirror("options")
    arguments = mirror("arguments")
    sealed = mirror("sealed")

    def __init__(self):
        self._options = []
        self._arguments = []
        self._sealed = False

    def _ensure_open(self, subject):
        if self._sealed:
            raise DefinitionError(
                "cannot register %s once parsing has started" % subject,
                code=FaultCode.SEALED_REGISTRY,
            )

    def register_option(self, definition=Unset, /, *args, **kwargs):
        """
        Append an option definition.

        Accepts either a ready OptionDefinition or the OptionDefinition
        constructor arguments:

            registry.register_option("v", "verbose", kind=Kind.SWITCH)

        Raises DefinitionError when the definition is malformed, or when its
        short or long name is already taken by another option. Returns the
        registry for chaining.
        """
        if definition is Unset:
            definition = OptionDefinition(*args, **kwargs)
        elif not isinstance(definition, OptionDefinition):
            definition = OptionDefinition(definition, *args, **kwargs)
        elif args or kwargs:
            raise TypeError("register_option() takes no extra arguments with a ready definition")

        self._ensure_open("option %r" % definition.key)

        if self.find_option(short=definition.short, long=definition.long) is not None:
            raise DefinitionError(
                "the short or long name for %r is already taken by another option" % definition.key,
                code=FaultCode.DUPLICATED_OPTION,
            )

        self._options.append(definition)
        logger.debug("registered %r", definition)
        return self

    def register_argument(self, definition=Unset, /, **kwargs):
        """
        Append a positional argument definition; order is binding priority.

        A variadic OPTIONAL argument should be the last optional one, any
        optional argument registered after it never receives a value.
        """
        if definition is Unset:
            definition = ArgumentDefinition(**kwargs)
        elif not isinstance(definition, ArgumentDefinition):
            definition = ArgumentDefinition(definition, **kwargs)
        elif kwargs:
            raise TypeError("register_argument() takes no extra arguments with a ready definition")

        self._ensure_open("argument %r" % definition.name)

        self._arguments.append(definition)
        logger.debug("registered %r", definition)
        return self

    def find_option(self, *, short=Unset, long=Unset):
        """
        Return the first option whose short or long name matches, else None.
        """
        for option in self._options:
            if option.matches(short=short, long=long):
                return option
        return None

    def seal(self):
        self._sealed = True
        return self

    def __len__(self):
        return len(self._options) + len(self._arguments)

    def __repr__(self):
        return "%s(options=%d, arguments=%d%s)" % (
            type(self).__name__, len(self._options), len(self._arguments), ", sealed" * self._sealed
        )


__all__ = (
    "Registry",
)
