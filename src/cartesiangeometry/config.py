"""
Configuration & Global Constants
================================
This module serves as the central registry for constants shared across the
package.

Why is this file needed?
------------------------
1. Bounds layout: Every bounds table is indexed ``[dimension][column]``. The
   column meaning lives here so no caller hardcodes ``0``/``1``.
2. Logging: The package logger name and record format are defined once and
   reused by ``logging_config``.

Exports:
    MIN_BOUND_IDX (int): Column of the minimum value in a bounds table.
    MAX_BOUND_IDX (int): Column of the maximum value in a bounds table.
    DEFAULT_TOLERANCE (float): Absolute tolerance for coordinate comparison.
"""

# Bounds table columns
MIN_BOUND_IDX: int = 0
MAX_BOUND_IDX: int = 1

DEFAULT_TOLERANCE: float = 1e-9

# Logging
LOGGER_NAME: str = "cartesiangeometry"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
