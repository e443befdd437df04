"""
cliargs tokenizer: one raw input line → Invocation.

Grammar (whitespace only, no quoting or escaping)
    line   := name (value)* (key (value)*)*
    key    := FLAG_PREFIX identifier
    value  := any token not starting with FLAG_PREFIX

Rules
- Token 0 is the command name; an empty or blank line yields name "".
- A key's value is every value token up to the next key, joined by one space;
  no value token means "".
- A repeated key overwrites the earlier one (last occurrence wins).
- Value tokens seen before the first key are kept in Invocation.leftover.
- Punctuation inside values passes through verbatim.

Example
    >>> tokenize("hello -a -b two words")
    Invocation(name='hello', flags=mappingproxy({'a': '', 'b': 'two words'}), leftover=())
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple

FLAG_PREFIX = "-"


class Invocation(NamedTuple):
    """Parsed form of one input line; built per call and then discarded."""
    name: str
    flags: Mapping[str, str]
    leftover: tuple[str, ...] = ()


def tokenize(line, /):
    if not isinstance(line, str):
        raise TypeError("tokenize() argument must be a string")

    tokens = line.split()
    if not tokens:
        return Invocation("", MappingProxyType({}))

    name, *tokens = tokens
    flags = {}
    leftover = []
    identifier = None
    values = []

    for token in tokens:
        if token.startswith(FLAG_PREFIX):
            if identifier is not None:
                flags[identifier] = " ".join(values)
            identifier = token.removeprefix(FLAG_PREFIX)
            values = []
        elif identifier is None:
            leftover.append(token)
        else:
            values.append(token)

    if identifier is not None:
        flags[identifier] = " ".join(values)

    return Invocation(name, MappingProxyType(flags), tuple(leftover))


__all__ = (
    "FLAG_PREFIX",
    "Invocation",
    "tokenize",
)
