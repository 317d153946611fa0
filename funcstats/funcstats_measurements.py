"""
Measurement model for funcstats.

Defines the measurement kinds, the per-function statistics record and
the list type used to sort records by a chosen measurement.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class MeasurementKind(Enum):
    """Metric identifiers. The value doubles as the user-facing selector."""
    LINES = 'Lines'
    TOTAL_LINES = 'TotalLines'
    LEN = 'Len'
    TOTAL_LEN = 'TotalLen'
    COMMENTS = 'Comments'
    COMMENT_LINES = 'CommentLines'
    TODOS = 'Todos'
    TODOS_CASE_INSENSITIVE = 'TodosCaseInsensitive'
    COMPLEXITY = 'Complexity'
    NESTING = 'Nesting'
    VARIABLES = 'Variables'

    def __str__(self) -> str:
        return self.value


class UnknownMeasurementError(ValueError):
    """Raised when a measurement name is not one of MeasurementKind."""

    def __init__(self, name: str):
        super().__init__('Invalid type: %r (valid types: %s)' % (
            name, ', '.join(kind.value for kind in MeasurementKind)))
        self.name = name


class MeasurementNotSetError(KeyError):
    """Raised when reading a measurement that was never calculated."""


def parse_measurement_kind(name: str) -> MeasurementKind:
    """
    Look up a single measurement kind by its exact (case-sensitive) name.

    Raises:
        UnknownMeasurementError: if the name is not a known kind
    """
    try:
        return MeasurementKind(name)
    except ValueError:
        raise UnknownMeasurementError(name) from None


def parse_measurement_list(types: str) -> List[MeasurementKind]:
    """
    Parse a comma-separated list of measurement names.

    Example:
        parse_measurement_list('Lines, Complexity')
        -> [MeasurementKind.LINES, MeasurementKind.COMPLEXITY]

    Args:
        types: Comma-separated measurement names

    Returns:
        List of measurement kinds in the given order

    Raises:
        UnknownMeasurementError: for the first unrecognized name. An empty
            string is a single empty name and is rejected as well.
    """
    return [parse_measurement_kind(part.strip()) for part in types.split(',')]


@dataclass
class FunctionStats:
    """Measurements for one function declaration."""
    name: str
    location: str
    receiver: str = ''
    measurements: Dict[MeasurementKind, float] = field(default_factory=dict)

    def set(self, kind: MeasurementKind, value: float) -> None:
        self.measurements[kind] = float(value)

    def get(self, kind: MeasurementKind) -> float:
        try:
            return self.measurements[kind]
        except KeyError:
            raise MeasurementNotSetError(
                '%s not calculated for %s' % (kind.value, self.location)) from None

    @property
    def display_name(self) -> str:
        if self.receiver:
            return '(%s).%s' % (self.receiver, self.name)
        return self.name

    def to_dict(self, kinds: Optional[Iterable[MeasurementKind]] = None) -> Dict[str, Any]:
        """
        Convert the record to a plain dictionary (for export).

        Args:
            kinds: Measurements to include, all calculated ones if None

        Returns:
            Dictionary with name, receiver, location and measurements
        """
        if kinds is None:
            kinds = list(self.measurements)
        return {
            'name': self.name,
            'receiver': self.receiver,
            'location': self.location,
            'measurements': {kind.value: self.get(kind) for kind in kinds},
        }


@dataclass
class FunctionStatsList:
    """Function statistics together with the measurement used to sort them."""
    sort_type: MeasurementKind
    stats: List[FunctionStats] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.stats)

    def sort(self) -> None:
        """
        Sort in place: highest value of sort_type first, ties by name
        then location.
        """
        # Two stable passes: secondary keys first, then the primary key
        self.stats.sort(key=lambda s: (s.name, s.location))
        self.stats.sort(key=lambda s: s.get(self.sort_type), reverse=True)
