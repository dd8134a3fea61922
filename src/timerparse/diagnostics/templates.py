"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from datetime import datetime

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here, so exception constructors never build
    their own text.
    """

    _EXAMPLES_HINT = "Try a duration such as '5 minutes' or a time such as '5:30pm'"

    @staticmethod
    def input_empty() -> Diagnostic:
        """Input is empty or whitespace only.

        Returns:
            Diagnostic for INPUT_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.INPUT_EMPTY,
            message="Timer input is empty",
            hint=ErrorTemplate._EXAMPLES_HINT,
        )

    @staticmethod
    def input_too_long(length: int, limit: int) -> Diagnostic:
        """Input exceeds the accepted length.

        Args:
            length: Length of the rejected input
            limit: Maximum accepted length

        Returns:
            Diagnostic for INPUT_TOO_LONG
        """
        msg = f"Timer input is {length} characters long (limit {limit})"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LONG,
            message=msg,
            hint="Shorten the input to a single duration or date and time",
        )

    @staticmethod
    def input_type_invalid(received: object) -> Diagnostic:
        """Input is not a string.

        Args:
            received: The rejected value

        Returns:
            Diagnostic for INPUT_TYPE_INVALID
        """
        msg = f"Timer input must be str, got {type(received).__name__}"
        return Diagnostic(code=DiagnosticCode.INPUT_TYPE_INVALID, message=msg)

    @staticmethod
    def no_pattern_matched(text: str, parse_type: str) -> Diagnostic:
        """No pattern of a grammar matches the whole input.

        Args:
            text: The input text
            parse_type: Grammar name, or '' for the top level

        Returns:
            Diagnostic for NO_PATTERN_MATCHED
        """
        target = f"{parse_type} " if parse_type else "timer "
        msg = f"No {target}pattern matches '{text}'"
        return Diagnostic(
            code=DiagnosticCode.NO_PATTERN_MATCHED,
            message=msg,
            hint=ErrorTemplate._EXAMPLES_HINT,
            input_value=text,
        )

    @staticmethod
    def token_fields_invalid(text: str, token: object) -> Diagnostic:
        """A pattern matched but the captured fields are out of range.

        Args:
            text: The matched text
            token: The rejected token

        Returns:
            Diagnostic for TOKEN_FIELDS_INVALID
        """
        msg = f"'{text}' matched but yields an invalid value: {token!r}"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_FIELDS_INVALID,
            message=msg,
            hint="Check the day, month and hour ranges",
            input_value=text,
        )

    @staticmethod
    def number_invalid(text: str, locale_code: str) -> Diagnostic:
        """A numeric field cannot be read in the active locale.

        Args:
            text: The numeric text
            locale_code: Active locale

        Returns:
            Diagnostic for NUMBER_INVALID
        """
        msg = f"'{text}' is not a number in locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_INVALID,
            message=msg,
            input_value=text,
        )

    @staticmethod
    def token_invalid(token: object) -> Diagnostic:
        """Resolution or rendering attempted on an invalid token.

        Args:
            token: The invalid token

        Returns:
            Diagnostic for TOKEN_INVALID
        """
        msg = f"Token is not valid: {token!r}"
        return Diagnostic(code=DiagnosticCode.TOKEN_INVALID, message=msg)

    @staticmethod
    def end_time_before_start(end: datetime, start: datetime) -> Diagnostic:
        """Computed end time precedes the start instant.

        Args:
            end: Computed end time
            start: Start instant

        Returns:
            Diagnostic for END_TIME_BEFORE_START
        """
        msg = f"End time {end.isoformat()} is before start {start.isoformat()}"
        return Diagnostic(
            code=DiagnosticCode.END_TIME_BEFORE_START,
            message=msg,
            hint="Enter a date or time that has not passed yet",
        )

    @staticmethod
    def arithmetic_overflow(start: datetime, detail: str) -> Diagnostic:
        """End time falls outside the supported date range.

        Args:
            start: Start instant
            detail: Underlying error text

        Returns:
            Diagnostic for ARITHMETIC_OVERFLOW
        """
        msg = f"End time from {start.isoformat()} is out of range: {detail}"
        return Diagnostic(code=DiagnosticCode.ARITHMETIC_OVERFLOW, message=msg)

    @staticmethod
    def date_unreachable(token: object, start: datetime) -> Diagnostic:
        """No calendar-valid date satisfies a token.

        Args:
            token: The date token
            start: Reference instant

        Returns:
            Diagnostic for DATE_UNREACHABLE
        """
        msg = f"No valid date on or after {start.date().isoformat()} matches {token!r}"
        return Diagnostic(code=DiagnosticCode.DATE_UNREACHABLE, message=msg)
