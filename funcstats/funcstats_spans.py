"""
Function span extraction for funcstats.

Cuts a function's source text out of a file and separates its code from
the comments inside it.
"""

from dataclasses import dataclass
from typing import List

from .funcstats_ast import CommentGroup


@dataclass
class FunctionSpans:
    """Source text of one function declaration."""
    func_body: str         # The declaration exactly as written
    without_comments: str  # func_body with every contained comment group cut out
    only_comments: str     # Contained comment groups, each followed by a newline


def _decode(data: bytes) -> str:
    return data.decode('utf-8', errors='replace')


def extract_function_spans(
    contents: bytes,
    start: int,
    end: int,
    comments: List[CommentGroup],
    offset: int = 0,
) -> FunctionSpans:
    """
    Extract the text of a function and split it into code and comments.

    Only comment groups lying fully inside [start, end] are cut. Groups
    are processed from the last one to the first, so the bounds of groups
    not processed yet still refer to unmodified text.

    Args:
        contents: Full file contents
        start: Position where the declaration starts
        end: Position where the declaration ends
        comments: All comment groups of the file
        offset: Base subtracted from positions to get offsets into contents

    Returns:
        FunctionSpans for the declaration
    """
    func_body = contents[start - offset:end - offset]
    without_comments = func_body
    only_comments = b''

    for group in sorted(comments, key=lambda g: g.start_byte, reverse=True):
        if group.start_byte >= start and group.end_byte <= end:
            without_comments = without_comments[:group.start_byte - start] + without_comments[group.end_byte - start:]
            only_comments = contents[group.start_byte - offset:group.end_byte - offset] + b'\n' + only_comments

    return FunctionSpans(
        func_body=_decode(func_body),
        without_comments=_decode(without_comments),
        only_comments=_decode(only_comments),
    )
