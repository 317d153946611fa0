"""
Go syntax tree access for funcstats.

Wraps the tree-sitter Go grammar: parsing, node traversal helpers
inspired by Python's ast module, and comment groups grouped the way
the Go toolchain groups them.
"""

import bisect
import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from .funcstats_constants import COMMENT_NODE, DIRECTIVE_PREFIXES


GO_LANGUAGE = Language(tree_sitter_go.language())

_DIRECTIVE_RE = re.compile(r'[a-z0-9]+:[a-z0-9]')


class GoSyntaxError(Exception):
    """Raised when a Go source file contains syntax errors."""

    def __init__(self, filename: str, line: int, column: int):
        super().__init__('%s:%d:%d: syntax error' % (filename, line, column))
        self.filename = filename
        self.line = line
        self.column = column


# =============================================================================
# Comment groups
# =============================================================================

@dataclass
class CommentGroup:
    """A run of adjacent comments treated as one unit of documentation."""
    start_byte: int
    end_byte: int
    start_row: int
    end_row: int
    comments: List[str] = field(default_factory=list)
    trailing: bool = False  # Line comment following code on the same line

    def text(self) -> str:
        """
        Return the comment text without comment markers.

        Mirrors go/ast CommentGroup.Text(): markers, directive lines and
        trailing whitespace are removed, leading and trailing blank lines
        are dropped and interior runs of blank lines are collapsed.
        """
        lines = []
        for comment in self.comments:
            if comment.startswith('//'):
                body = comment[2:]
                if _is_directive(body):
                    continue
                if body.startswith(' '):
                    body = body[1:]
            else:
                body = comment[2:-2]
            lines.extend(line.rstrip() for line in body.split('\n'))

        result = []
        for line in lines:
            if line or (result and result[-1]):
                result.append(line)
        while result and not result[-1]:
            result.pop()

        if not result:
            return ''
        return '\n'.join(result) + '\n'


def _is_directive(comment: str) -> bool:
    return comment.startswith(DIRECTIVE_PREFIXES) or _DIRECTIVE_RE.match(comment) is not None


def _previous_token_row(contents: bytes, start: int, stop: int) -> Optional[int]:
    """Row of the last non-blank byte in contents[start:stop], None if all blank."""
    segment = contents[start:stop].rstrip()
    if not segment:
        return None
    return contents.count(b'\n', 0, start + len(segment) - 1)


def _take_group(run: List[Node], start: int, max_gap: int) -> int:
    """Return the index after the last comment belonging to the group at start."""
    end_row = run[start].start_point[0]
    index = start
    while index < len(run) and run[index].start_point[0] <= end_row + max_gap:
        end_row = run[index].end_point[0]
        index += 1
    return index


def _make_group(contents: bytes, nodes: List[Node], trailing: bool) -> CommentGroup:
    return CommentGroup(
        start_byte=nodes[0].start_byte,
        end_byte=nodes[-1].end_byte,
        start_row=nodes[0].start_point[0],
        end_row=nodes[-1].end_point[0],
        comments=[node_text(contents, node) for node in nodes],
        trailing=trailing,
    )


def group_comments(comments: List[Node], contents: bytes) -> List[CommentGroup]:
    """
    Group comment nodes the way go/parser builds comment groups.

    Comments separated only by whitespace form a run. Within a run, a
    comment on the same line as the preceding code starts a trailing group
    that only takes comments on that line; every other group takes
    successive comments starting at most one line after the previous
    comment ends.

    Args:
        comments: Comment nodes sorted by position
        contents: Source the nodes were parsed from

    Returns:
        Comment groups in source order
    """
    groups: List[CommentGroup] = []
    previous_end = 0
    i = 0
    while i < len(comments):
        j = i + 1
        while j < len(comments) and not contents[comments[j - 1].end_byte:comments[j].start_byte].strip():
            j += 1
        run = comments[i:j]

        index = 0
        token_row = _previous_token_row(contents, previous_end, run[0].start_byte)
        if token_row is not None and run[0].start_point[0] == token_row:
            index = _take_group(run, 0, 0)
            groups.append(_make_group(contents, run[:index], trailing=True))
        while index < len(run):
            end = _take_group(run, index, 1)
            groups.append(_make_group(contents, run[index:end], trailing=False))
            index = end

        previous_end = run[-1].end_byte
        i = j

    return groups


def find_doc_group(groups: List[CommentGroup], contents: bytes, node: Node) -> Optional[CommentGroup]:
    """
    Find the doc comment of a declaration.

    The doc comment is the group ending on the line right before the
    declaration with nothing but whitespace in between.
    """
    ends = [group.end_byte for group in groups]
    index = bisect.bisect_right(ends, node.start_byte) - 1
    if index < 0:
        return None

    group = groups[index]
    if contents[group.end_byte:node.start_byte].strip():
        return None
    if group.trailing or group.end_row + 1 != node.start_point[0]:
        return None
    return group


# =============================================================================
# Parsed files
# =============================================================================

@dataclass
class ParsedFile:
    """A Go source file together with its syntax tree and comment groups."""
    filename: str
    contents: bytes
    tree: Tree
    comments: List[CommentGroup] = field(default_factory=list)

    @property
    def root(self) -> Node:
        return self.tree.root_node


def parse_go_source(contents: bytes) -> Tree:
    parser = Parser(GO_LANGUAGE)
    return parser.parse(contents)


def parse_file(filename: str, contents: bytes) -> ParsedFile:
    """
    Parse Go source and collect its comment groups.

    Args:
        filename: Name used in error messages
        contents: Raw file contents

    Returns:
        ParsedFile for the source

    Raises:
        GoSyntaxError: if the source does not parse cleanly
    """
    tree = parse_go_source(contents)
    root = tree.root_node
    if root.has_error:
        error = first_error(root)
        row, column = error.start_point if error is not None else root.start_point
        raise GoSyntaxError(filename, row + 1, column + 1)

    comment_nodes = sorted((n for n in walk(root) if n.type == COMMENT_NODE), key=lambda n: n.start_byte)
    return ParsedFile(
        filename=filename,
        contents=contents,
        tree=tree,
        comments=group_comments(comment_nodes, contents),
    )


# =============================================================================
# Tree utilities
# =============================================================================

def walk(node: Node) -> Iterator[Node]:
    """
    Recursively yield all nodes in the tree starting at node.
    Similar to Python's ast.walk(), but depth-first in source order.
    """
    # Explicit stack: long binary expression chains nest deeper than the recursion limit
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the named direct children of node."""
    for child in node.children:
        if child.is_named:
            yield child


def first_error(node: Node) -> Optional[Node]:
    """Return the first ERROR or missing node below node, if any."""
    for n in walk(node):
        if n.type == 'ERROR' or n.is_missing:
            return n
    return None


def node_text(contents: bytes, node: Node) -> str:
    return contents[node.start_byte:node.end_byte].decode('utf-8', errors='replace')
