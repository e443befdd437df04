"""
cliargs registry: the read-only set of commands a commander dispatches to.

Lifecycle
- Built once from an ordered sequence of Command objects; there is no way to add
  or remove commands afterwards.
- Each command's information is read once, at registration, and reused for
  resolution, validation and help.

Faults
- DuplicateCommandError: two commands share a name (raised at construction).
- ReservedCommandError: a command uses a reserved name such as "help".
- UnknownCommandError: resolve()/information() on a name that is not registered.
- MissingRequiredFlagError: validate() found a required flag absent or empty.
"""
import difflib
import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .commands import Command, CommandInformation
from .faults import *

logger = logging.getLogger(__name__)


class Registry:
    """
    Name → Command mapping kept in registration order.

    The container protocol works on names:
        >>> "hello" in registry
        True
        >>> list(registry)
        ['hello', 'bye']
    """
    reserved = frozenset({"help"})

    def __init__(self, commands=(), /):
        if not isinstance(commands, Iterable):
            raise TypeError(f"{type(self).__name__} 'commands' must be an iterable of commands")
        self._commands = {}
        self._informations = {}
        for command in commands:
            self._register(command)

    def _register(self, command):
        if not isinstance(command, Command):
            raise TypeError(f"{type(self).__name__} 'commands' must be an iterable of commands")
        if not isinstance(information := command.get_information(), CommandInformation):
            raise TypeError(f"get_information() of {command!r} must return a command-information")

        if (name := information.name) in self.reserved:
            raise ReservedCommandError(
                "command name %r is reserved" % name,
                title="reserved command name",
                code=FaultCode.RESERVED_COMMAND,
                input=name,
                hint="rename the command; %r is provided by the interpreter" % name,
                docs=getdoc(FaultCode.RESERVED_COMMAND),
            )
        if name in self._commands:
            raise DuplicateCommandError(
                "command name %r is already in use" % name,
                title="duplicate command name",
                code=FaultCode.DUPLICATE_COMMAND,
                input=name,
                hint="give every command a unique name (names are case-sensitive)",
                docs=getdoc(FaultCode.DUPLICATE_COMMAND),
            )

        self._commands[name] = command
        self._informations[name] = information
        logger.debug("registered command %r with %d flag(s)", name, len(information.flags))

    @property
    def commands(self) -> Mapping[str, Command]:
        return MappingProxyType(self._commands)

    @property
    def informations(self) -> Mapping[str, CommandInformation]:
        return MappingProxyType(self._informations)

    def __len__(self):
        return len(self._commands)

    def __iter__(self):
        return iter(self._commands)

    def __contains__(self, name):
        return name in self._commands

    def __repr__(self):
        return f"registry({", ".join(map(repr, self._commands))})"

    def _unknown(self, name):
        suggestions = difflib.get_close_matches(name, [*self._commands, *self.reserved], 5)
        try:
            hint = "did you mean %r? you can also run 'help' to see all commands" % suggestions[0]
        except IndexError:
            hint = "run 'help' to see all available commands"
        return UnknownCommandError(
            "unknown command %r" % name,
            title="unknown command",
            code=FaultCode.UNKNOWN_COMMAND,
            input=name,
            suggestions=suggestions,
            hint=hint,
            docs=getdoc(FaultCode.UNKNOWN_COMMAND),
        )

    def resolve(self, name, /) -> Command:
        """
        Return the command registered under name.

        Raises
        - UnknownCommandError (with close-match suggestions) when absent.
        """
        try:
            return self._commands[name]
        except KeyError:
            raise self._unknown(name) from None

    def information(self, name, /) -> CommandInformation:
        """
        Return the information captured for name at registration.

        Raises
        - UnknownCommandError when absent.
        """
        try:
            return self._informations[name]
        except KeyError:
            raise self._unknown(name) from None

    def validate(self, information, flags, /):
        """
        Check flag values against a command's declared flags.

        Declared flags are walked in declaration order; the first required flag
        that is missing or empty raises MissingRequiredFlagError. Extra flags in
        the mapping are not an error.
        """
        for flag in information.flags:
            if flag.required and not flags.get(flag.identifier):
                raise MissingRequiredFlagError(
                    "missing required flag '-%s' for command %r" % (flag.identifier, information.name),
                    title="missing required flag",
                    code=FaultCode.MISSING_REQUIRED_FLAG,
                    input=flag.identifier,
                    command=information.name,
                    flag=flag,
                    hint="add it with a value (for example: %s -%s <value>); run 'help -c %s' for details" % (
                        information.name, flag.identifier, information.name
                    ),
                    docs=getdoc(FaultCode.MISSING_REQUIRED_FLAG),
                )

    def undeclared(self, information, flags, /):
        """Identifiers present in flags that the command does not declare, in input order."""
        declared = {flag.identifier for flag in information.flags}
        return tuple(identifier for identifier in flags if identifier not in declared)


__all__ = (
    "Registry",
)
