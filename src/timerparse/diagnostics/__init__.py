"""Diagnostic system for timerparse errors.

Provides structured error diagnostics with codes, hints, and the exception
hierarchy raised by parsing and resolution.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import TimerError, TimerFormatError, TimerResolutionError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "TimerError",
    "TimerFormatError",
    "TimerResolutionError",
]
