"""
minspan package initialization.

Exports the public span search functions for package-level use.
"""

__version__ = "0.1.0"

from . import util

from .span import (
    span,
    span_length
)

from .array_span import (
    array_span
)
