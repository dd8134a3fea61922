"""Timer exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Two failure kinds exist: format errors, which are expected and
recoverable (ask the user again), and resolution errors, raised when a token
parsed successfully but cannot be turned into a forward-looking end time.

Python 3.13+.
"""

from .codes import Diagnostic


class TimerError(Exception):
    """Base exception for all timerparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TimerError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TimerFormatError(TimerError, ValueError):
    """Input text does not describe a timer start.

    Raised when no pattern matches the whole input, or when the matched
    fields are out of range or jointly invalid (day 30 in February).
    Subclasses ValueError so callers treating bad input generically still
    catch it.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
        parse_type: Grammar that rejected the input ('duration', 'datetime',
            'date', 'time', or '' for the top level)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize TimerFormatError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            parse_type: Grammar that rejected the input
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.parse_type = parse_type


class TimerResolutionError(TimerError):
    """A parsed token cannot be resolved to a usable end time.

    Examples:
    - A fixed date in the past ("1 Jan 2020")
    - A duration that overflows the supported date range
    - Resolving or rendering a token that fails its own validity check

    These are never coerced into a guessed end time.
    """


__all__ = [
    "TimerError",
    "TimerFormatError",
    "TimerResolutionError",
]
