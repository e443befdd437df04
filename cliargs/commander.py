"""
cliargs commander: one input line in, one dispatch (or one diagnostic) out.

Flow of handle_input(line)
1. tokenize(line); an empty command name is a no-op (no output, no execution).
2. "help" runs the built-in HelpCommand instead of a registered command.
3. Otherwise resolve the name in the registry (unknown → diagnostic).
4. Validate required flags (missing or empty → diagnostic, nothing executed).
5. In strict mode, warn about undeclared flags and values preceding any flag.
6. command.execute_command(dict(flags)).

Faults detected along the way are rendered through trigger(), never raised:
every call is an independent transaction and the embedding loop keeps going.
A CommandException raised by a command's own execute_command() is rendered the
same way; any other exception belongs to the embedding application.

Runtime options (keyword-only)
- prog: label for fault headers (default: __prog__ in __main__, else argv[0]).
- console: rich Console for help output (default: stdout).
- stderr: rich Console for diagnostics (default: stderr).
- colorful / fancy: palette and panel chrome for help and diagnostics.
- strict: warn, without failing, on undeclared flags and stray values.
"""
import copy
import logging

from rich.console import Console

from .faults import *
from .help import HelpCommand
from .registry import Registry
from .tokenizer import tokenize
from .utils import *

logger = logging.getLogger(__name__)


class Commander:
    """
    Dispatcher over a registry built once from the supplied commands.

    Construction
    - Commander(commands) registers every command in order and raises
      DuplicateCommandError (or ReservedCommandError for "help") on bad input.

    Steady state
    - handle_input(line) is the only entry point; it returns None.
    """

    def __init__(
            self,
            commands=(),
            /,
            *,
            prog=Unset,
            console=Unset,
            stderr=Unset,
            colorful=False,
            fancy=False,
            strict=False,
    ):
        if not isinstance(prog, str | Unset):
            raise TypeError(f"{type(self).__name__} 'prog' must be a string")
        if not isinstance(console, Console | Unset):
            raise TypeError(f"{type(self).__name__} 'console' must be a rich console")
        if not isinstance(stderr, Console | Unset):
            raise TypeError(f"{type(self).__name__} 'stderr' must be a rich console")

        self._registry = Registry(commands)
        self._prog = coalesce(prog)
        self._console = coalesce(console, Console())
        self._stderr = coalesce(stderr, Console(stderr=True))
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)
        self._strict = bool(strict)
        self._fallback = Unset
        self._help = HelpCommand(self._registry, console=self._console, colorful=self._colorful, fancy=self._fancy)

    @property
    def registry(self):
        return self._registry

    @property
    def help(self):
        return self._help

    @property
    def strict(self):
        return self._strict

    def __repr__(self):
        return f"commander(commands={list(self._registry)!r}, strict={self._strict!r})"

    def fallback(self, fallback, /):
        """
        Register a one-time handler that receives every fault instead of the console.

        Rules
        - Must be callable; can be set only once per commander.

        Returns
        - The same callable, enabling decorator-style usage: @commander.fallback
        """
        if not callable(fallback):
            raise TypeError(f"{type(self).__name__} fallback must be callable")
        if self._fallback is not Unset:
            raise TypeError(f"{type(self).__name__} fallback cannot be overridden")
        self._fallback = fallback
        return fallback

    def trigger(self, fault, /, **options):
        """
        Surface a fault with this commander's runtime options merged in.

        The fallback (when registered) receives the enriched fault; otherwise it
        is rendered on the diagnostic console.
        """
        if (
                not hasattr(fault, "__trigger__") or
                not callable(fault.__trigger__) or
                not hasattr(fault, "__replace__") or
                not callable(fault.__replace__)
        ):
            raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
        fault = copy.replace(
            fault,
            **options,
            tool=self,
            prog=self._prog,
            console=self._stderr,
            colorful=self._colorful,
            fancy=self._fancy,
        )
        logger.debug("fault %s: %s", type(fault).__name__, fault.message)
        if self._fallback:
            self._fallback(fault)
        else:
            trigger(fault)

    def _resolve(self, name):
        if name == HelpCommand.name:
            return self._help, self._help.get_information()
        return self._registry.resolve(name), self._registry.information(name)

    def _warn(self, information, invocation):
        for identifier in self._registry.undeclared(information, invocation.flags):
            self.trigger(UnknownFlagWarning(
                "flag '-%s' is not declared by command %r" % (identifier, information.name),
                title="unknown flag",
                code=FaultCode.UNKNOWN_FLAG,
                input=identifier,
                command=information.name,
                hint="run 'help -c %s' to see its flags" % information.name,
                docs=getdoc(FaultCode.UNKNOWN_FLAG),
            ))
        if invocation.leftover:
            self.trigger(LeftoverValuesWarning(
                "values %r do not follow any flag and were ignored" % " ".join(invocation.leftover),
                title="leftover values",
                code=FaultCode.LEFTOVER_VALUES,
                leftover=invocation.leftover,
                command=information.name,
                hint="put values after a flag (for example: %s -<flag> <value>)" % information.name,
                docs=getdoc(FaultCode.LEFTOVER_VALUES),
            ))

    def handle_input(self, line, /):
        """
        Tokenize, resolve, validate and dispatch one line of input.

        Returns None; every outcome is a side effect (command execution, help
        output or a rendered diagnostic).
        """
        invocation = tokenize(line)
        if not invocation.name:
            return

        try:
            command, information = self._resolve(invocation.name)
            self._registry.validate(information, invocation.flags)
        except CommandException as fault:
            return self.trigger(fault)

        if self._strict:
            self._warn(information, invocation)

        logger.debug("dispatching %r with flags %r", information.name, dict(invocation.flags))
        try:
            command.execute_command(dict(invocation.flags))
        except (CommandException, CommandWarning) as fault:
            self.trigger(fault)


__all__ = (
    "Commander",
)
