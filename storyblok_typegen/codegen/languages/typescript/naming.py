"""
TypeScript-specific naming utilities.

Handles reserved words and identifier rules for type names and
property keys.
"""

import json

# Words that cannot be used as a type name
TS_RESERVED_TYPE_NAMES = {
    "any",
    "bigint",
    "boolean",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "never",
    "new",
    "null",
    "number",
    "object",
    "return",
    "string",
    "super",
    "switch",
    "symbol",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "undefined",
    "unknown",
    "var",
    "void",
    "while",
    "with",
}


def is_valid_identifier(name: str) -> bool:
    """Check whether `name` is a syntactically valid identifier."""
    # Unicode identifier rules, plus `$` which TypeScript also allows
    return bool(name) and name.replace("$", "_").isidentifier()


def is_valid_type_name(name: str) -> bool:
    """Check whether `name` can name an interface or type alias."""
    return is_valid_identifier(name) and name not in TS_RESERVED_TYPE_NAMES


def property_key(key: str) -> str:
    """Render a property key, quoting it when it is not an identifier."""
    if is_valid_identifier(key):
        return key
    return json.dumps(key, ensure_ascii=False)
