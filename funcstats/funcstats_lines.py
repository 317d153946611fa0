"""
Line, length, comment and TODO measurements for funcstats.
"""

from typing import List

from tree_sitter import Node

from .funcstats_ast import CommentGroup
from .funcstats_constants import CODE_IGNORED_LINES, COMMENT_IGNORED_LINES
from .funcstats_helpers import count_lines, count_todos
from .funcstats_measurements import FunctionStats, MeasurementKind
from .funcstats_spans import extract_function_spans


def calculate_lines(
    stats: FunctionStats,
    offset: int,
    fun: Node,
    contents: bytes,
    comments: List[CommentGroup],
    func_docs: str,
) -> None:
    """
    Set the line, length, comment and TODO measurements of a function.

    Comments is the number of comment groups in the whole file, not only
    the ones inside the function.

    Args:
        stats: Record to fill
        offset: Base subtracted from node positions to index contents
        fun: Function or method declaration node
        contents: Full file contents
        comments: All comment groups of the file
        func_docs: Doc comment text of the function
    """
    spans = extract_function_spans(contents, fun.start_byte, fun.end_byte, comments, offset)

    stats.set(MeasurementKind.COMMENTS, len(comments))

    case_sensitive, case_insensitive = count_todos(func_docs, spans.only_comments)
    stats.set(MeasurementKind.TODOS, case_sensitive)
    stats.set(MeasurementKind.TODOS_CASE_INSENSITIVE, case_insensitive)

    stats.set(MeasurementKind.LEN, len(spans.without_comments))
    stats.set(MeasurementKind.TOTAL_LEN, len(spans.func_body))
    stats.set(MeasurementKind.TOTAL_LINES, count_lines(spans.func_body))
    stats.set(MeasurementKind.LINES, count_lines(spans.without_comments, *CODE_IGNORED_LINES))
    stats.set(MeasurementKind.COMMENT_LINES, count_lines(spans.only_comments, *COMMENT_IGNORED_LINES))
