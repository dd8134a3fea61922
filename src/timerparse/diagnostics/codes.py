"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for parse and resolution failures.
Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Unique error codes for diagnostics.

    Organized by category:
        1000-1999: Input errors (rejected before any pattern runs)
        2000-2999: Grammar errors (no pattern matched, or matched fields invalid)
        3000-3999: Resolution errors (valid token, no usable end time)
    """

    # Input errors (1000-1999)
    INPUT_EMPTY = 1000
    INPUT_TOO_LONG = 1001
    INPUT_TYPE_INVALID = 1002

    # Grammar errors (2000-2999)
    NO_PATTERN_MATCHED = 2000
    TOKEN_FIELDS_INVALID = 2001
    NUMBER_INVALID = 2002

    # Resolution errors (3000-3999)
    TOKEN_INVALID = 3000
    END_TIME_BEFORE_START = 3001
    ARITHMETIC_OVERFLOW = 3002
    DATE_UNREACHABLE = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: The user text involved, if any
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Control characters in the message and input are escaped so that
        user-typed text cannot forge extra log lines.

        Example output:
            error[NO_PATTERN_MATCHED]: No timer pattern matches 'blah'
              = input: blah
              = help: Try a duration such as '5 minutes' or a time such as '5:30pm'

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.input_value is not None:
            lines.append(f"  = input: {_escape(self.input_value)}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return "".join(
        ch if ch.isprintable() else ch.encode("unicode_escape").decode("ascii") for ch in text
    )
