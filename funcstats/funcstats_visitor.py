"""
Syntax tree visitor for funcstats.

Walks a parsed Go file and builds one FunctionStats record per
function or method declaration.
"""

from typing import List, Optional

from tree_sitter import Node

from .funcstats_ast import ParsedFile, find_doc_group, node_text
from .funcstats_complexity import calculate_complexity, calculate_nesting, calculate_variables
from .funcstats_config import FuncStatsConfig, get_config
from .funcstats_constants import FUNCTION_NODES
from .funcstats_lines import calculate_lines
from .funcstats_measurements import FunctionStats


class Visitor:
    """
    Collects function statistics from one parsed file.

    Usage:
        visitor = Visitor(config, parsed)
        visitor.visit(parsed.root)
        visitor.stats
    """

    def __init__(self, config: Optional[FuncStatsConfig], parsed: ParsedFile,
                 stats: Optional[List[FunctionStats]] = None):
        self.config = config or get_config()
        self.parsed = parsed
        self.contents = parsed.contents
        # tree-sitter positions are already offsets into contents
        self.offset = 0
        self.stats: List[FunctionStats] = stats if stats is not None else []

    def visit(self, node: Node) -> List[FunctionStats]:
        """Visit node and everything below it, returning the collected stats."""
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type in FUNCTION_NODES:
                self.visit_function(current)
            else:
                stack.extend(reversed(current.children))
        return self.stats

    def visit_function(self, fun: Node) -> None:
        name_node = fun.child_by_field_name('name')
        name = node_text(self.contents, name_node) if name_node is not None else ''

        if self.config.ignore_funcs is not None and self.config.ignore_funcs.search(name):
            return

        stats = FunctionStats(name=name, location=self.location(fun))
        self.config.printf('Visiting %s in %s', name, stats.location)

        if fun.type == 'method_declaration':
            stats.receiver = self.receiver_type(fun)

        doc = find_doc_group(self.parsed.comments, self.contents, fun)
        function_docs = doc.text() if doc is not None else ''

        calculate_lines(stats, self.offset, fun, self.contents, self.parsed.comments, function_docs)
        calculate_complexity(stats, fun)
        calculate_nesting(stats, fun)
        calculate_variables(stats, fun, self.contents)
        self.stats.append(stats)

    def location(self, node: Node) -> str:
        """Position as file:line:column, 1-based like the Go toolchain prints it."""
        row, column = node.start_point
        return '%s:%d:%d' % (self.parsed.filename, row + 1, column + 1)

    def receiver_type(self, fun: Node) -> str:
        """
        Type name of a method receiver, '*T' for pointer receivers.

        Returns an empty string when the receiver list is empty.
        """
        receiver = fun.child_by_field_name('receiver')
        if receiver is None:
            return ''
        params = [p for p in receiver.named_children if p.type == 'parameter_declaration']
        if not params:
            return ''
        ty = params[0].child_by_field_name('type')
        if ty is None:
            return ''
        if ty.type == 'pointer_type' and ty.named_children:
            return '*' + node_text(self.contents, ty.named_children[0])
        return node_text(self.contents, ty)
