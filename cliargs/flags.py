r"""
cliargs flag descriptors.

Overview
- Flag: static metadata for one named flag of a command (identifier, short help,
  required-ness). Flags carry no behavior; values are plain text collected by the
  tokenizer and handed to the command as a mapping.

Metadata (sanitized on construction)
- identifier: str, non-empty, no whitespace, must not start with the flag prefix.
  The identifier is what follows the prefix on the input line ("-a value" → "a").
- descr: str, trimmed (may be empty).
- required: bool, whether the command refuses to run without a non-empty value.

Quick example:
    >>> from cliargs.flags import Flag
    >>> Flag("a", "value to greet", required=True)
    flag(identifier='a', descr='value to greet', required=True)
"""
import re

from .tokenizer import FLAG_PREFIX
from .utils import DescriptorType


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate and normalize flag metadata in place.

    Raises
    - TypeError: identifier/descr are not strings, required is not a bool.
    - ValueError: identifier is empty, contains whitespace or starts with the prefix.
    """
    if not isinstance(identifier := metadata["identifier"], str):
        raise TypeError(f"{cls.__typename__} 'identifier' must be a string")
    elif not identifier:
        raise ValueError(f"{cls.__typename__} 'identifier' cannot be empty")
    elif re.search(r"\s", identifier):
        raise ValueError(f"{cls.__typename__} 'identifier' {identifier!r} cannot contain whitespace")
    elif identifier.startswith(FLAG_PREFIX):
        raise ValueError(f"{cls.__typename__} 'identifier' {identifier!r} must not include the {FLAG_PREFIX!r} prefix")

    if not isinstance(descr := metadata["descr"], str):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = descr.strip()

    if not isinstance(metadata["required"], bool):
        raise TypeError(f"{cls.__typename__} 'required' must be a boolean")


class Flag(metaclass=DescriptorType):
    """
    Named flag of a command.

    Lifecycle
    - Built once by the embedding application and attached to a CommandInformation.
    - Immutable: every field is exposed through a read-only property.

    Notes
    - "-h" is not special here; help lives in the reserved "help" command.
    """
    __introspectable__ = (
        "identifier",
        "descr",
        "required",
    )

    def __new__(cls, identifier, descr="", /, *, required=False):
        metadata = {
            "identifier": identifier,
            "descr": descr,
            "required": required,
        }
        _sanitize_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    def __eq__(self, other):
        if not isinstance(other, Flag):
            return NotImplemented
        return (self.identifier, self.descr, self.required) == (other.identifier, other.descr, other.required)

    def __hash__(self):
        return hash((type(self), self.identifier, self.descr, self.required))


__all__ = (
    "Flag",
)
