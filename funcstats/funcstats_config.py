"""
Configuration module for funcstats.

Provides a dataclass-based configuration with sensible defaults
and a global configuration accessor.
"""

import sys
from dataclasses import dataclass, field
from typing import List, Optional, Pattern

from .funcstats_measurements import MeasurementKind


OUTPUT_FORMATS = ('text', 'json', 'yaml')


@dataclass
class FuncStatsConfig:
    """Configuration settings for a funcstats run."""

    # Requested measurements, the first one is the sort key
    types: List[MeasurementKind] = field(default_factory=lambda: [MeasurementKind.LINES])

    # File selection
    include_tests: bool = False
    include_vendor: bool = False
    ignore: Optional[Pattern] = None
    ignore_funcs: Optional[Pattern] = None

    # Output settings
    top: int = 20  # 0 means no limit
    threshold: float = 0.0
    output_format: str = 'text'

    # Processing settings
    processes: int = 1

    # Debug settings
    verbose: bool = False

    @property
    def sort_type(self) -> MeasurementKind:
        return self.types[0]

    def printf(self, msg: str, *params) -> None:
        """Print a diagnostic line to stderr when verbose output is enabled."""
        if self.verbose:
            print(msg % params if params else msg, file=sys.stderr)


# Global configuration instance
_config: FuncStatsConfig = FuncStatsConfig()


def get_config() -> FuncStatsConfig:
    """Get the global configuration instance."""
    return _config


def set_config(config: FuncStatsConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
