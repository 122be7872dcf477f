"""
Naming utilities for type generation.

Handles word splitting and case conversion, and derives the type names
used for components and shared Storyblok field types.
"""

import re
from typing import Dict, List
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName


# Runs of letters and digits in any script
_ALNUM_RUN = re.compile(r"[^\W_]+")


def _starts_word(previous: str, char: str, following: str) -> bool:
    if char.isdigit() != previous.isdigit():
        return True
    if char.isupper() and previous.islower():
        return True
    # Last capital of an acronym followed by a lowercase letter: HTML|Block
    return char.isupper() and previous.isupper() and following.islower()


def split_words(name: str) -> List[str]:
    """
    Split a name into words.

    Separators are any non-alphanumeric characters (letters of every
    script count as alphanumeric); case transitions
    (`myBlok`), acronym boundaries (`HTMLBlock`) and letter/digit
    transitions (`grid2col`) also start a new word.
    """
    words = []
    for run in _ALNUM_RUN.findall(name):
        start = 0
        for i in range(1, len(run)):
            following = run[i + 1] if i + 1 < len(run) else ""
            if _starts_word(run[i - 1], run[i], following):
                words.append(run[start:i])
                start = i
        words.append(run[start:])
    return words


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(name))


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    pascal = to_pascal_case(name)
    words = split_words(name)
    if not words:
        return pascal
    return words[0].lower() + pascal[len(words[0]):]


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    return "_".join(word.lower() for word in split_words(name))


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert name to target case style."""
    if target_case == NamingCase.SNAKE_CASE:
        return to_snake_case(name)
    elif target_case == NamingCase.CAMEL_CASE:
        return to_camel_case(name)
    return to_pascal_case(name)


def format_type_name(prefix: str, raw_name: str, suffix: str) -> str:
    """Derive the PascalCase type name for `prefix + raw_name + suffix`."""
    return to_pascal_case(f"{prefix or ''}{raw_name}{suffix or ''}")


class TypeNameFormatter:
    """Derives output type names from component and field-kind identifiers."""

    def __init__(self, prefix: str = "", suffix: str = ""):
        """
        Initialize formatter.

        Args:
            prefix: Prepended to every raw name before case conversion
            suffix: Appended to every raw name before case conversion
        """
        self.prefix = prefix or ""
        self.suffix = suffix or ""
        self._name_cache: Dict[str, str] = {}

    def format(self, raw_name: str) -> str:
        """Return the type name for a component or shared field kind."""
        if raw_name not in self._name_cache:
            self._name_cache[raw_name] = format_type_name(self.prefix, raw_name, self.suffix)
        return self._name_cache[raw_name]

    __call__ = format
