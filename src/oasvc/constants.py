"""Default design inputs for the extraction engine.

These sets describe the *target* of code generation rather than the input
document: which identifiers the generated client must not use, which media
types a generated client knows how to send, and which parameters are pinned by
the transport instead of being supplied by a caller. The defaults describe a
TypeScript/JavaScript target. Every constant can be replaced per project via
:class:`~oasvc.models.ExtractorConfig`.
"""

from typing import Final

# Operation names that must be disambiguated (whole-identifier match).
OPERATION_RESERVED_WORDS: Final = frozenset(
    {
        # Keywords
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
        "let",
        "new",
        "null",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
        "await",
        # Strict mode and future reserved words
        "implements",
        "interface",
        "package",
        "private",
        "protected",
        "public",
        "static",
        "abstract",
        "boolean",
        "byte",
        "char",
        "double",
        "final",
        "float",
        "goto",
        "int",
        "long",
        "native",
        "short",
        "synchronized",
        "throws",
        "transient",
        "volatile",
        # Ambient names
        "arguments",
        "async",
        "eval",
        "get",
        "set",
        "any",
        "constructor",
        "declare",
        "module",
        "require",
        "number",
        "string",
        "of",
    }
)

# Parameter names that get an underscore prefix (exact match after camel-casing).
PARAMETER_RESERVED_WORDS: Final = frozenset(
    {
        "arguments",
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
        "eval",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "implements",
        "import",
        "in",
        "instanceof",
        "interface",
        "let",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "static",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }
)

# Request/response media types in order of preference.
BASIC_MEDIA_TYPES: Final = (
    "application/json-patch+json",
    "application/json",
    "application/x-www-form-urlencoded",
    "text/json",
    "text/plain",
    "multipart/form-data",
    "multipart/mixed",
    "multipart/related",
    "multipart/batch",
)

# Media types whose request body is sent as form fields.
FORM_MEDIA_TYPES: Final = frozenset(
    {
        "application/x-www-form-urlencoded",
        "multipart/form-data",
    }
)

# HTTP methods considered on a path item, in the order operations are emitted.
HTTP_METHODS: Final = ("get", "post", "put", "delete", "patch", "options", "head")

# Parameters pinned by the transport, never exposed to callers.
IGNORED_PARAMETERS: Final = frozenset({"api-version"})

# Path placeholder marking a version segment dropped from synthesized names.
VERSION_PLACEHOLDER: Final = "{api-version}"
