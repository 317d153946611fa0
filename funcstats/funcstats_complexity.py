"""
Control flow measurements for funcstats.

Implements per-function cyclomatic complexity, nesting depth and local
variable counting over tree-sitter Go syntax trees. Function literals
inside a body are folded into the enclosing function.
"""

from typing import Iterator, List, Set

from tree_sitter import Node

from .funcstats_ast import node_text, walk
from .funcstats_constants import BOOLEAN_OPERATORS, DECISION_NODES, NESTING_NODES
from .funcstats_measurements import FunctionStats, MeasurementKind


def _body(fun: Node):
    return fun.child_by_field_name('body')


def _body_nodes(fun: Node) -> Iterator[Node]:
    body = _body(fun)
    if body is None:
        return iter(())
    return walk(body)


def _has_token(node: Node, token: str) -> bool:
    return any(child.type == token for child in node.children)


def is_boolean_operation(node: Node) -> bool:
    if node.type != 'binary_expression':
        return False
    operator = node.child_by_field_name('operator')
    return operator is not None and operator.type in BOOLEAN_OPERATORS


def calculate_complexity(stats: FunctionStats, fun: Node) -> None:
    """
    Calculate McCabe Cyclomatic Complexity v(G) of a function.

    Formula: v(G) = #decisions + 1, where decisions are if and for
    statements, case clauses (not default) and && / || operators.
    """
    complexity = 1
    for node in _body_nodes(fun):
        if node.type in DECISION_NODES or is_boolean_operation(node):
            complexity += 1

    stats.set(MeasurementKind.COMPLEXITY, complexity)


def max_nesting(body: Node) -> int:
    """
    Maximum depth of nested blocks below body, body itself being depth 0.

    Switch and select statements count as a level of their own since
    their case clauses are not blocks.
    """
    max_depth = 0
    stack = [(child, 0) for child in body.children]
    while stack:
        node, depth = stack.pop()
        if node.type in NESTING_NODES:
            depth += 1
            max_depth = max(max_depth, depth)
        stack.extend((child, depth) for child in node.children)
    return max_depth


def calculate_nesting(stats: FunctionStats, fun: Node) -> None:
    body = _body(fun)
    stats.set(MeasurementKind.NESTING, max_nesting(body) if body is not None else 0)


def _bound_identifiers(node: Node) -> List[Node]:
    """Identifier nodes a statement declares, empty for other nodes."""
    if node.type == 'var_spec':
        return node.children_by_field_name('name')

    if node.type == 'short_var_declaration':
        left = node.child_by_field_name('left')
    elif node.type in ('range_clause', 'receive_statement') and _has_token(node, ':='):
        left = node.child_by_field_name('left')
    elif node.type == 'type_switch_statement':
        left = node.child_by_field_name('alias')
    else:
        return []

    if left is None:
        return []
    return [child for child in left.named_children if child.type == 'identifier']


def local_variables(fun: Node, contents: bytes) -> Set[str]:
    """Names of the local variables declared in a function body."""
    names = set()
    for node in _body_nodes(fun):
        for ident in _bound_identifiers(node):
            name = node_text(contents, ident)
            if name != '_':
                names.add(name)
    return names


def calculate_variables(stats: FunctionStats, fun: Node, contents: bytes) -> None:
    """
    Count distinct local variables. Parameters, results, the receiver,
    constants and the blank identifier are not counted.
    """
    stats.set(MeasurementKind.VARIABLES, len(local_variables(fun, contents)))
