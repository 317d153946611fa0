"""
funcstats - per-function metrics for Go source code

Measures line counts, comment and TODO density, cyclomatic complexity,
nesting depth and local variables of every function declaration, and
ranks functions by the chosen measurement.
"""

# Configuration
from .funcstats_config import (
    FuncStatsConfig,
    get_config,
    set_config,
)

# Measurement model
from .funcstats_measurements import (
    MeasurementKind,
    FunctionStats,
    FunctionStatsList,
    UnknownMeasurementError,
    MeasurementNotSetError,
    parse_measurement_kind,
    parse_measurement_list,
)

# Utilities
from .funcstats_helpers import (
    count_lines,
    count_todos,
)

# Parsing
from .funcstats_ast import (
    CommentGroup,
    GoSyntaxError,
    ParsedFile,
    find_doc_group,
    group_comments,
    parse_file,
    walk,
    iter_child_nodes,
)
from .funcstats_spans import (
    FunctionSpans,
    extract_function_spans,
)

# Metrics
from .funcstats_lines import calculate_lines
from .funcstats_complexity import (
    calculate_complexity,
    calculate_nesting,
    calculate_variables,
)

# Analysis
from .funcstats_visitor import Visitor
from .funcstats_runner import (
    AnalysisError,
    do,
    analyze_file,
    analyze_dir,
    analyze_dir_recursively,
)

# Output
from .funcstats_export import StatsExporter, select_stats

__version__ = '1.0.0'

__all__ = [
    'FuncStatsConfig', 'get_config', 'set_config',
    'MeasurementKind', 'FunctionStats', 'FunctionStatsList',
    'UnknownMeasurementError', 'MeasurementNotSetError',
    'parse_measurement_kind', 'parse_measurement_list',
    'count_lines', 'count_todos',
    'CommentGroup', 'GoSyntaxError', 'ParsedFile', 'find_doc_group',
    'group_comments', 'parse_file', 'walk', 'iter_child_nodes',
    'FunctionSpans', 'extract_function_spans',
    'calculate_lines', 'calculate_complexity', 'calculate_nesting', 'calculate_variables',
    'Visitor', 'AnalysisError', 'do', 'analyze_file', 'analyze_dir', 'analyze_dir_recursively',
    'StatsExporter', 'select_stats',
]
