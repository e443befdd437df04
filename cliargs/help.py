"""
cliargs help: the built-in "help" command.

Three tiers, keyed by the flags given on the line:
- help                  → every command: "name, descr, # Flags: N"
- help -c NAME          → one command, then each of its flags in declaration order
- help -c NAME -f FLAG  → one flag of one command

"-f" without "-c" falls back to the first tier. The help command lists itself
first, so "help -c help" describes it like any other command.

Rendering
- Plain lines built as rich Text and printed in one shot (optionally inside a
  Panel when fancy=True). Palette entries can be overridden with a __styles__
  mapping in __main__; styling applies only when colorful=True.
"""
from collections import defaultdict

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .commands import Command, CommandInformation
from .faults import *
from .flags import Flag
from .tokenizer import FLAG_PREFIX
from .utils import *


class HelpCommand(Command):
    """
    Help flow over a registry's captured command information.

    Pure read + format: never touches the registry beyond lookups.
    """
    name = "help"

    information = CommandInformation(
        name,
        "Displays help information about commands and their flags.",
        (
            Flag("c", "Displays information about the specified command and its flags"),
            Flag("f", "Displays information about a flag specific to the specified command"),
        ),
    )

    def __init__(self, registry, /, *, console=Unset, colorful=False, fancy=False):
        self._registry = registry
        self._console = coalesce(console, Console())
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)

    def get_information(self):
        return self.information

    @property
    def informations(self):
        """Help's own information followed by every registered command, in order."""
        return (self.information, *self._registry.informations.values())

    def execute_command(self, flags):
        if "c" not in flags:
            return self._print(self._render_all())

        information = self._lookup(flags["c"])
        if "f" not in flags:
            return self._print(self._render_command(information))

        if (flag := information.find(identifier := flags["f"])) is None:
            raise UnknownHelpFlagError(
                "command %r does not have a flag '-%s'" % (information.name, identifier),
                title="unknown flag",
                code=FaultCode.UNKNOWN_HELP_FLAG,
                input=identifier,
                command=information.name,
                hint="run 'help -c %s' to see its flags" % information.name,
                docs=getdoc(FaultCode.UNKNOWN_HELP_FLAG),
            )
        return self._print(self._render_flag(information, flag))

    def _lookup(self, name):
        for information in self.informations:
            if information.name == name:
                return information
        raise UnknownHelpCommandError(
            "%r is not a registered command" % name,
            title="unknown command",
            code=FaultCode.UNKNOWN_HELP_COMMAND,
            input=name,
            hint="run 'help' to see all available commands",
            docs=getdoc(FaultCode.UNKNOWN_HELP_COMMAND),
        )

    def _styler(self):
        styles = defaultdict(str, {
            "command-name": "bold #36C5F0",  # SKY-BLUE commands
            "description": "#9CA3AF",  # Muted gray
            "count": "#737373",  # Dim gray
            "title": "bold #FF4D94",  # MAGENTA-PINK headers
            "flag-name": "bold #22C55E",  # GREEN flags
            "required": "bold #FFD600",  # AMBER required marker
            "optional": "#737373",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def text(fragment, style=""):
            return Text(str(fragment), styles[style] if self._colorful else "")
        return text

    def _render_all(self):
        text = self._styler()
        return [
            Text.assemble(
                text(information.name, "command-name"), ", ",
                text(information.descr, "description"), ", ",
                text("# Flags: %d" % len(information.flags), "count"),
            )
            for information in self.informations
        ]

    def _render_command(self, information):
        text = self._styler()
        lines = [
            text("'%s' help" % information.name, "title"),
            text(information.descr, "description"),
            Text(""),
        ]
        for flag in information.flags:
            lines.append(Text.assemble(
                text(FLAG_PREFIX + flag.identifier, "flag-name"), ", ",
                text(flag.descr, "description"), ", ",
                self._required(flag, text),
            ))
        return lines

    def _render_flag(self, information, flag):
        text = self._styler()
        return [
            Text.assemble(text(information.name, "command-name"), " ", text(FLAG_PREFIX + flag.identifier, "flag-name")),
            text(flag.descr, "description"),
            self._required(flag, text),
        ]

    @staticmethod
    def _required(flag, text):
        return text("required: %s" % str(flag.required).lower(), "required" if flag.required else "optional")

    def _print(self, lines):
        renderable = Group(*lines)
        if self._fancy:
            renderable = Panel(renderable, title=Text("[ HELP ]"), title_align="left")
        self._console.print(renderable)


__all__ = (
    "HelpCommand",
)
