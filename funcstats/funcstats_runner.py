"""
File and directory drivers for funcstats.

Resolves the given paths into Go files, analyzes each file and merges
the results into one sorted list.
"""

import functools
import os
import sys
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Optional

from .funcstats_ast import GoSyntaxError, parse_file
from .funcstats_config import FuncStatsConfig, get_config
from .funcstats_constants import RECURSIVE_SUFFIX
from .funcstats_helpers import is_dir, is_source_file, is_test_file, is_vendor_dir
from .funcstats_measurements import FunctionStats, FunctionStatsList
from .funcstats_visitor import Visitor


class AnalysisError(Exception):
    """Fatal error while resolving or reading the analyzed paths."""


def do(config: Optional[FuncStatsConfig], paths: Iterable[str]) -> List[FunctionStats]:
    """
    Analyze all paths and return the function stats sorted by the first
    requested measurement.

    Args:
        config: Run configuration, the global one if None
        paths: Files, directories, or directories with a '/...' suffix
            to analyze recursively

    Returns:
        Sorted list of function stats

    Raises:
        AnalysisError: if a directory or selected file cannot be read
    """
    config = config or get_config()

    stats: List[FunctionStats] = []
    for path in paths:
        if path.endswith(RECURSIVE_SUFFIX):
            stats.extend(analyze_dir_recursively(config, path[:-len(RECURSIVE_SUFFIX)] or os.sep))
        elif is_dir(path):
            stats.extend(analyze_dir(config, path))
        else:
            stats.extend(analyze_file(config, path))

    stats_list = FunctionStatsList(sort_type=config.sort_type, stats=stats)
    stats_list.sort()

    return stats_list.stats


def analyze_file(config: FuncStatsConfig, fname: str) -> List[FunctionStats]:
    """
    Analyze a single Go file.

    Non-Go files, files matching the ignore pattern and test files (unless
    included) are skipped silently. Files with syntax errors are reported
    on stderr and skipped.
    """
    if not is_source_file(fname):
        return []

    if config.ignore is not None and config.ignore.search(fname):
        config.printf('Ignored file %s', fname)
        return []

    if is_test_file(fname) and not config.include_tests:
        return []

    try:
        with open(fname, 'rb') as f:
            contents = f.read()
    except OSError as e:
        raise AnalysisError('Error reading %s: %s' % (fname, e)) from e

    try:
        parsed = parse_file(fname, contents)
    except GoSyntaxError as e:
        print('Error parsing %s: %s' % (fname, e), file=sys.stderr)
        return []

    visitor = Visitor(config, parsed)
    return visitor.visit(parsed.root)


def analyze_files(config: FuncStatsConfig, fnames: List[str]) -> List[FunctionStats]:
    """Analyze files in order, in worker processes when configured."""
    stats: List[FunctionStats] = []
    if config.processes > 1 and len(fnames) > 1:
        with ProcessPoolExecutor(max_workers=config.processes) as executor:
            # map() keeps input order, so the merge is deterministic
            for file_stats in executor.map(functools.partial(analyze_file, config), fnames):
                stats.extend(file_stats)
    else:
        for fname in fnames:
            stats.extend(analyze_file(config, fname))
    return stats


def analyze_dir(config: FuncStatsConfig, dirname: str) -> List[FunctionStats]:
    """Analyze the files directly inside dirname, without descending."""
    try:
        entries = sorted(os.listdir(dirname))
    except OSError as e:
        raise AnalysisError('Error reading %s: %s' % (dirname, e)) from e

    fnames = [os.path.join(dirname, name) for name in entries]
    return analyze_files(config, [f for f in fnames if os.path.isfile(f)])


def analyze_dir_recursively(config: FuncStatsConfig, dirname: str) -> List[FunctionStats]:
    """
    Analyze every Go file below dirname.

    Vendor directories are skipped unless include_vendor is set.
    """
    def onerror(e: OSError):
        raise AnalysisError('Error walking through files %s' % e) from e

    fnames = []
    for root, dirs, files in os.walk(dirname, onerror=onerror):
        dirs.sort()
        if not config.include_vendor:
            dirs[:] = [d for d in dirs if not is_vendor_dir(d)]
        for name in sorted(files):
            path = os.path.join(root, name)
            if is_source_file(path):
                fnames.append(path)

    return analyze_files(config, fnames)
