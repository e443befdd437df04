"""
cliargs faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  (errors and warnings), grouped by domain.
- CommandException / CommandWarning: base types that carry message + options and
  know how to render themselves through rich.
- trigger(): central entry point to surface any fault.
- getdoc(): optional description lookup for a code from the host application.

Policy
- Registry faults (duplicate or reserved names) are raised at construction.
- Everything surfaced while handling a line is rendered, never raised: the
  interpreter keeps accepting input after a diagnostic.

Integration
- The commander merges runtime options (tool, prog, console, fancy, colorful)
  into a fault with copy.replace() and then calls trigger(fault).
"""
import copy
import os.path
import sys
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - routing (1110x): UNKNOWN_COMMAND, UNKNOWN_HELP_COMMAND
    - flags (1111x): MISSING_REQUIRED_FLAG, UNKNOWN_HELP_FLAG
    - registry (1112x): DUPLICATE_COMMAND, RESERVED_COMMAND
    - delegated (11131 / 12131): DELEGATED_ERROR, DELEGATED_WARNING
    - warnings (1211x): UNKNOWN_FLAG, LEFTOVER_VALUES

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- routing errors (11xxx) ---
    UNKNOWN_COMMAND             = 11101
    UNKNOWN_HELP_COMMAND        = 11102

    # --- flag errors (11xxx) ---
    MISSING_REQUIRED_FLAG       = 11111
    UNKNOWN_HELP_FLAG           = 11112

    # --- registry errors (11xxx) ---
    DUPLICATE_COMMAND           = 11121
    RESERVED_COMMAND            = 11122

    # --- delegated errors (11xxx) ---
    DELEGATED_ERROR             = 11131

    # --- warnings (12xxx) ---
    UNKNOWN_FLAG                = 12111
    LEFTOVER_VALUES             = 12112
    DELEGATED_WARNING           = 12131

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, /):
    """
    Shared rich layout for exceptions and warnings.

    [ prog — code | Title ]
    message
     → hint
    """
    main = __import__("__main__")
    options = fault.options
    colorful = options.get("colorful", False)
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), styles[style] if colorful else "")

    prog = options.get("prog") or getattr(main, "__prog__", os.path.basename(sys.argv[0]))
    parts = ["[ ", text(prog, "prog-name")]
    if code := options.get("code"):
        parts += [" — ", text(code.normalize(), "code")]
    if title := options.get("title"):
        parts += [" | ", text(title.title(), "title")]
    header = Text.assemble(*parts, " ]")

    message = text(_message(fault), "message")
    renders = [message]
    if hint := options.get("hint"):
        renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

    if options.get("fancy", False):
        return Panel(Group(*renders), title=header, title_align="left")
    return Group(header, *renders)


def _message(fault, /):
    return fault.message if fault.message is not Unset else ""


class CommandException(Exception):
    """
    Base of every cliargs error.

    Carries a lowercase, one-sentence message and read-only options such as
    title, code, hint and the offending input. Renders itself via __rich__.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

    def __trigger__(self) -> None:
        self.options.get("console", console).print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateCommandError(CommandException, ValueError): ...
class ReservedCommandError(DuplicateCommandError): ...
class UnknownCommandError(CommandException): ...
class UnknownHelpCommandError(UnknownCommandError): ...
class MissingRequiredFlagError(CommandException): ...
class UnknownHelpFlagError(CommandException): ...
class DelegatedCommandError(CommandException): ...


class CommandWarning(ABC, Warning):
    """
    Base of every cliargs warning; rendered like an exception but never stops a command.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title for warnings
            "message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        })

    def __trigger__(self) -> None:
        self.options.get("console", console).print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownFlagWarning(CommandWarning): ...
class LeftoverValuesWarning(CommandWarning): ...
class DelegatedCommandWarning(CommandWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace() before triggering.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "CommandException",
    "DuplicateCommandError",
    "ReservedCommandError",
    "UnknownCommandError",
    "UnknownHelpCommandError",
    "MissingRequiredFlagError",
    "UnknownHelpFlagError",
    "DelegatedCommandError",
    "CommandWarning",
    "UnknownFlagWarning",
    "LeftoverValuesWarning",
    "DelegatedCommandWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
