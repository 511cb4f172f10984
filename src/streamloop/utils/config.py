"""
Configuration constants for streamloop naming
"""

import os
import tempfile

# Fallback name when a variable ends up with no candidates at all
DEFAULT_VARIABLE_NAME = "val"

# Registry disambiguation: first numeric suffix tried once every plain candidate is taken
DISAMBIGUATION_START = 1

# Diagnostic text rendered by the stub variable and by unregistered variables
STUB_TEXT = "###STUB###"
UNREGISTERED_TEMPLATE = "###(unregistered: {best}|{other})###"

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "streamloop_type_parser.cache")

# Separators used by canonical type text
QUALIFIED_NAME_SEPARATOR = "."
TYPE_ARGUMENT_SEPARATOR = ","
ARRAY_DIMENSION_SUFFIX = "[]"

# Names that can never be committed for a generated local
JAVA_KEYWORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "var", "yield", "record",
    "true", "false", "null", "_",
})

PRIMITIVE_TYPE_NAMES = frozenset({
    "boolean", "byte", "char", "short", "int", "long", "float", "double", "void",
})

# Primitive types are named after their first letter, as hand-written loops do
PRIMITIVE_NAME_SUGGESTIONS = {
    "boolean": ["b"],
    "byte": ["b"],
    "char": ["c"],
    "short": ["i"],
    "int": ["i"],
    "long": ["l"],
    "float": ["f"],
    "double": ["d"],
    "void": [],
}

# Short names preferred before the class-derived ones
TYPE_ABBREVIATIONS = {
    "String": ["s"],
    "Object": ["o"],
    "Integer": ["integer"],
    "Character": ["c"],
    "StringBuilder": ["sb"],
}

# Element-carrying types whose type argument contributes pluralized names
COLLECTION_TYPE_NAMES = frozenset({
    "Collection", "List", "ArrayList", "LinkedList", "Set", "HashSet",
    "LinkedHashSet", "TreeSet", "SortedSet", "NavigableSet", "Iterable",
    "Iterator", "Queue", "Deque", "ArrayDeque", "Stream", "Spliterator",
})

ARRAY_NAME_SUFFIX = "arr"
