"""Quickstart example for timerparse.

This example demonstrates parsing timer start phrases and resolving them
against a fixed start instant.

Note: Examples pass an explicit locale. Without one, the system locale is
used, which changes how numeric dates such as 02/03/2024 are read.
"""

from datetime import datetime

from timerparse import TimerFormatError, TimerResolutionError, TimerStart, parse, try_parse

START = datetime(2024, 1, 1, 9, 0)  # Monday morning

# Example 1: Durations
print("=" * 50)
print("Example 1: Durations")
print("=" * 50)

for text in ("5", "5:30:00", "2 hours and 15 minutes", "1.5 weeks"):
    token = parse(text, "en_US")
    print(f"{text!r:28} -> {token.to_string('en_US'):24} ends {token.get_end_time(START)}")
# Output: '5' -> 5 minutes ends 2024-01-01 09:05:00
# ...

# Example 2: Dates and times
print("\n" + "=" * 50)
print("Example 2: Dates and Times")
print("=" * 50)

for text in ("5:30pm", "next friday", "friday after next at noon", "christmas", "the 14th"):
    token = parse(text, "en_US")
    print(f"{text!r:28} -> {token.to_string('en_US'):32} ends {token.get_end_time(START)}")

# Example 3: Locale-dependent numeric dates
print("\n" + "=" * 50)
print("Example 3: Numeric Date Order")
print("=" * 50)

for locale_code in ("en_US", "en_GB", "ja_JP"):
    token = parse("02/03/04", locale_code)
    print(f"{locale_code}: 02/03/04 -> {token.to_string(locale_code)}")
# Output:
# en_US: 02/03/04 -> February 3, 2004
# en_GB: 02/03/04 -> 2 March 2004
# ja_JP: 02/03/04 -> 4 March 2002

# Example 4: Decimal symbols
print("\n" + "=" * 50)
print("Example 4: Decimal Symbols")
print("=" * 50)

print(parse("1,5 h", "de_DE").to_string("de_DE"))
# Output: 1,5 hours
print(try_parse("1,5 h", "en_US"))
# Output: None

# Example 5: Errors
print("\n" + "=" * 50)
print("Example 5: Error Handling")
print("=" * 50)

try:
    parse("banana", "en_US")
except TimerFormatError as e:
    print(e)

try:
    parse("1 jan 2020", "en_US").get_end_time(START)
except TimerResolutionError as e:
    print(e)

# Example 6: TimerStart for applications
print("\n" + "=" * 50)
print("Example 6: TimerStart")
print("=" * 50)

start = TimerStart.from_string("tomorrow at 1430h", "en_GB")
print(f"input={start.input!r} type={start.type} display={start}")
print(f"current: {start.is_current(START)}")
print(f"default: {TimerStart.default()}")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
