"""Grammar node kinds the context tracker reacts to on reduction.

The host grammar owns the full set of node types. Only the kinds that close
a bracketed construct or a string literal matter to the lexer: completing one
of them pops the context frame that its opening token pushed.

Thread Safety:
All data is immutable (enum members and frozensets).

"""

from enum import Enum, auto


class NodeType(Enum):
    """Grammar node kinds that can trigger a context pop."""

    # Bracketed constructs
    PARENTHESIZED_EXPRESSION = auto()
    TUPLE_EXPRESSION = auto()
    COMPREHENSION_EXPRESSION = auto()
    IMPORT_LIST = auto()
    ARG_LIST = auto()
    PARAM_LIST = auto()
    ARRAY_EXPRESSION = auto()
    ARRAY_COMPREHENSION_EXPRESSION = auto()
    SUBSCRIPT = auto()
    SET_EXPRESSION = auto()
    SET_COMPREHENSION_EXPRESSION = auto()
    DICTIONARY_EXPRESSION = auto()
    DICTIONARY_COMPREHENSION_EXPRESSION = auto()
    FORMAT_REPLACEMENT = auto()
    NESTED_FORMAT_REPLACEMENT = auto()
    SEQUENCE_PATTERN = auto()
    MAPPING_PATTERN = auto()
    PATTERN_ARG_LIST = auto()
    TYPE_PARAM_LIST = auto()

    # String literals
    STRING = auto()
    FORMAT_STRING = auto()


# Completing any of these while the top context is bracketed pops it.
# FORMAT_STRING is listed too: an f-string opened inside brackets carries
# the bracketed bit and closes through this path.
BRACKETED_NODES: frozenset[NodeType] = frozenset(
    {
        NodeType.PARENTHESIZED_EXPRESSION,
        NodeType.TUPLE_EXPRESSION,
        NodeType.COMPREHENSION_EXPRESSION,
        NodeType.IMPORT_LIST,
        NodeType.ARG_LIST,
        NodeType.PARAM_LIST,
        NodeType.ARRAY_EXPRESSION,
        NodeType.ARRAY_COMPREHENSION_EXPRESSION,
        NodeType.SUBSCRIPT,
        NodeType.SET_EXPRESSION,
        NodeType.SET_COMPREHENSION_EXPRESSION,
        NodeType.FORMAT_STRING,
        NodeType.FORMAT_REPLACEMENT,
        NodeType.NESTED_FORMAT_REPLACEMENT,
        NodeType.DICTIONARY_EXPRESSION,
        NodeType.DICTIONARY_COMPREHENSION_EXPRESSION,
        NodeType.SEQUENCE_PATTERN,
        NodeType.MAPPING_PATTERN,
        NodeType.PATTERN_ARG_LIST,
        NodeType.TYPE_PARAM_LIST,
    }
)

STRING_NODES: frozenset[NodeType] = frozenset({NodeType.STRING, NodeType.FORMAT_STRING})
