"""
Constants for funcstats.

Centralizes file naming rules, comment markers and the tree-sitter node
types the calculators react to.
"""

from typing import Set, FrozenSet


# ============================================================================
# FILE SELECTION
# ============================================================================

GO_EXTENSION = '.go'
TEST_FILE_SUFFIX = '_test.go'

# A path ending with this suffix is analyzed recursively
RECURSIVE_SUFFIX = '/...'

VENDOR_DIR = 'vendor'

DEFAULT_PATHS = ['./...']


# ============================================================================
# LINE COUNTING
# ============================================================================

# Lines ignored when counting code lines
CODE_IGNORED_LINES = ('', '}')

# Lines ignored when counting comment lines
COMMENT_IGNORED_LINES = ('', '//', '/*', '*/')

TODO_TAGS: FrozenSet[str] = frozenset({
    'HACK',
    'TODO',
    'NOTE',
    'FIXME',
    'ASAP',
    'ISSUE',
    'BUG',
    'WTF',
})


# ============================================================================
# TREE-SITTER NODE TYPES (Go grammar)
# ============================================================================

FUNCTION_NODES: Set[str] = {'function_declaration', 'method_declaration'}

COMMENT_NODE = 'comment'

# Each occurrence adds one to cyclomatic complexity
DECISION_NODES: Set[str] = {
    'if_statement',
    'for_statement',
    'expression_case',
    'type_case',
    'communication_case',
}

BOOLEAN_OPERATORS: Set[str] = {'&&', '||'}

# Case bodies are not blocks, so switches open a nesting level themselves
NESTING_NODES: Set[str] = {
    'block',
    'expression_switch_statement',
    'type_switch_statement',
    'select_statement',
}

# Directive comments dropped from doc text, e.g. //go:generate
DIRECTIVE_PREFIXES = ('line ', 'extern ', 'export ')
