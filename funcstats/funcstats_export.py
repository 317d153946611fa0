"""
Output module for funcstats.

Renders sorted function statistics as a text table, JSON or YAML.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .funcstats_config import FuncStatsConfig, get_config
from .funcstats_measurements import FunctionStats, MeasurementKind


def select_stats(stats: List[FunctionStats], sort_type: MeasurementKind,
                 top: int = 0, threshold: float = 0.0) -> List[FunctionStats]:
    """
    Keep the records worth reporting.

    Args:
        stats: Records sorted by sort_type, highest first
        sort_type: Measurement the threshold applies to
        top: Maximum number of records, 0 for no limit
        threshold: Records whose sort_type value is lower are dropped

    Returns:
        Selected records in their original order
    """
    selected = [s for s in stats if s.get(sort_type) >= threshold]
    if top > 0:
        selected = selected[:top]
    return selected


def format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return '%.2f' % value


class StatsExporter:
    """
    Renders function statistics in the configured output format.
    """

    def __init__(self, stats: List[FunctionStats], config: Optional[FuncStatsConfig] = None):
        """
        Initialize the exporter.

        Args:
            stats: Sorted function statistics
            config: Run configuration, the global one if None
        """
        self.config = config or get_config()
        self.types: Sequence[MeasurementKind] = self.config.types
        self.stats = select_stats(stats, self.config.sort_type, self.config.top, self.config.threshold)

    def render(self) -> str:
        if self.config.output_format == 'json':
            return self.to_json()
        if self.config.output_format == 'yaml':
            return self.to_yaml()
        return self.to_text()

    def get_records(self) -> List[Dict[str, Any]]:
        return [s.to_dict(self.types) for s in self.stats]

    def to_json(self, pretty: bool = True) -> str:
        if pretty:
            return json.dumps(self.get_records(), indent=2, ensure_ascii=False) + '\n'
        return json.dumps(self.get_records(), ensure_ascii=False) + '\n'

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.get_records(), default_flow_style=False,
                              allow_unicode=True, sort_keys=False)

    def to_text(self) -> str:
        """
        Text table: one column per requested measurement, then the
        function name and its location.
        """
        widths = [max(len(kind.value), 8) for kind in self.types]
        header = ' '.join(kind.value.rjust(w) for kind, w in zip(self.types, widths))
        lines = ['%s  %s' % (header, 'Function')]
        for s in self.stats:
            values = ' '.join(format_value(s.get(kind)).rjust(w) for kind, w in zip(self.types, widths))
            lines.append('%s  %s %s' % (values, s.display_name, s.location))
        return '\n'.join(lines) + '\n'
