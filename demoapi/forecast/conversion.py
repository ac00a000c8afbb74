"""Celsius to Fahrenheit conversion used by forecast entries."""

# Rounded reciprocal of 9/5. Results can sit 1-2 degrees off the exact
# conversion at larger magnitudes; clients already depend on these values.
FAHRENHEIT_DIVISOR = 0.5556

# Supported width: integers a float represents exactly.
MAX_CELSIUS = 2**53


def to_fahrenheit(celsius: int) -> int:
    """Convert whole degrees Celsius to whole degrees Fahrenheit.

    The quotient is truncated toward zero, so -1°C gives 31°F, not 30°F.

    Raises:
        ValueError: If |celsius| exceeds MAX_CELSIUS.
    """
    if not -MAX_CELSIUS <= celsius <= MAX_CELSIUS:
        raise ValueError(f"celsius must be within ±2**53, got {celsius}")
    return 32 + int(celsius / FAHRENHEIT_DIVISOR)
