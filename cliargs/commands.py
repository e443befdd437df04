"""
cliargs command layer: describe commands and bind them to behavior.

What this module provides
- CommandInformation: immutable descriptor of one command (name, short help and
  the ordered flags it declares). Used for resolution, validation and help.
- Command: abstract capability every registered command implements:
  • get_information() → CommandInformation
  • execute_command(flags) → None, with flags a dict[str, str] of raw values.
- command(...): wrap a plain callable into a Command, directly or as a decorator.

Quick start
    from cliargs import Commander, Flag, command

    @command(flags=[Flag("a", "who to greet", required=True)])
    def hello(flags):
        '''Greets someone.'''
        print("hello", flags["a"])

    commander = Commander([hello])
    commander.handle_input("hello -a world")

Design notes
- Commands never see the tokenizer or the registry; they receive a fresh dict
  per call, validated against their own descriptor.
- Undeclared flags typed by the user still reach execute_command; commands
  should read the identifiers they declared and ignore the rest.
"""
import inspect
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .flags import Flag
from .utils import *
from .utils import DescriptorType


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate and normalize command metadata in place.

    - name: non-empty string without whitespace.
    - descr: string (trimmed); Unset becomes "".
    - flags: iterable of Flag, identifiers unique within the command; stored as a tuple.

    Raises
    - TypeError on wrong types, ValueError on empty names or duplicate identifiers.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not name:
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    elif re.search(r"\s", name):
        raise ValueError(f"{cls.__typename__} 'name' {name!r} cannot contain whitespace")

    if not isinstance(descr := coalesce(metadata["descr"], ""), str):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = descr.strip()

    if not isinstance(flags := metadata["flags"], Iterable) or isinstance(flags, str):
        raise TypeError(f"{cls.__typename__} 'flags' must be an iterable of flags")

    seen = set()
    for flag in (flags := tuple(flags)):
        if not isinstance(flag, Flag):
            raise TypeError(f"{cls.__typename__} 'flags' must be an iterable of flags")
        if flag.identifier in seen:
            raise ValueError(f"{cls.__typename__} flag identifier {flag.identifier!r} is already in use")
        seen.add(flag.identifier)
    metadata["flags"] = flags


class CommandInformation(metaclass=DescriptorType):
    """
    Static metadata for one command.

    Fields
    - name: unique (case-sensitive) name typed as the first token of a line.
    - descr: one-line help shown by the help command.
    - flags: declared flags, in declaration order.
    """
    __introspectable__ = (
        "name",
        "descr",
        "flags",
    )

    def __new__(cls, name, descr=Unset, /, flags=()):
        metadata = {
            "name": name,
            "descr": descr,
            "flags": flags,
        }
        _sanitize_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    def find(self, identifier, /):
        """Return the declared flag with this identifier, or None."""
        for flag in self._flags:
            if flag.identifier == identifier:
                return flag
        return None

    @property
    def required(self):
        """Identifiers of the required flags, in declaration order."""
        return tuple(flag.identifier for flag in self._flags if flag.required)


class Command(ABC):
    """
    Capability implemented by every registered command.

    Contract
    - get_information() must keep returning equivalent metadata for the lifetime
      of the process; the registry reads it once at registration.
    - execute_command() runs with values for every required flag already present
      and non-empty. It produces side effects only; its return value is ignored.
    - Raising a cliargs CommandException from execute_command() renders it as a
      diagnostic instead of propagating.
    """

    @abstractmethod
    def get_information(self) -> CommandInformation: ...

    @abstractmethod
    def execute_command(self, flags: dict[str, str]) -> None: ...


class CallbackCommand(Command):
    """
    Command backed by a plain callable receiving the flag mapping.

    Built by command(...); the callable stays reachable through __wrapped__ so the
    decorated name keeps working as a normal function in tests.
    """

    def __init__(self, callback, information, /):
        if not callable(callback):
            raise TypeError(f"{type(self).__name__} 'callback' must be callable")
        if not isinstance(information, CommandInformation):
            raise TypeError(f"{type(self).__name__} 'information' must be a command-information")
        self._callback = callback
        self._information = information
        self.__wrapped__ = callback

    def get_information(self):
        return self._information

    def execute_command(self, flags):
        self._callback(flags)

    def __repr__(self):
        return f"command(name={self._information.name!r}, callback={getattr(self._callback, "__qualname__", self._callback)!s})"


def command(source=Unset, /, *, name=Unset, descr=Unset, flags=()):
    """
    Create a Command from a callable, or return a decorator that does.

    Invocation modes
    - Direct callback:
        hello = command(func, name="hello", flags=[Flag("a")])
    - Decorator:
        @command(flags=[Flag("a", required=True)])
        def hello(flags): ...
    - Bare decorator:
        @command
        def ping(flags): ...

    Defaults
    - name: the callable's __name__.
    - descr: the callable's docstring (first paragraph), else "".

    Returns
    - Command | Callable[[Callable], Command]
    """
    @rename("command")
    def wrapper(source, /):
        if not callable(source):
            raise TypeError("@command() must be applied to a callable")
        docstring = inspect.getdoc(source) or ""
        information = CommandInformation(
            coalesce(name, getattr(source, "__name__", Unset)),
            coalesce(descr, docstring.split("\n\n", 1)[0].replace("\n", " ")),
            flags,
        )
        return CallbackCommand(source, information)

    return wrapper(source) if source is not Unset else wrapper


__all__ = (
    "CommandInformation",
    "Command",
    "command",
)
