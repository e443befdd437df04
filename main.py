import logging

from rich.logging import RichHandler
from rich.pretty import pprint

from cliargs import *

__prog__ = "cliargs-demo"


@command(flags=[Flag("a", "who to greet", required=True), Flag("l", "greeting language")])
def hello(flags):
    """Greets someone."""
    greeting = {"es": "hola", "fr": "bonjour"}.get(flags.get("l", ""), "hello")
    print(greeting, flags["a"])


@command(name="echo", flags=[Flag("t", "text to repeat")])
def repeat(flags):
    """Prints its text back."""
    print(flags.get("t", ""))


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[RichHandler()])

    commander = Commander([hello, repeat], colorful=True)
    pprint(commander.registry.informations)

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip() in ("exit", "quit"):
            break
        commander.handle_input(line)
