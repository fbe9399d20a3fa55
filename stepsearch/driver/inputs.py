import re
import random
from typing import List, Optional, Tuple

# Optional sign and digits at the start of a token, anything after is ignored
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DriverError(Exception):
    """Base exception for driver-related errors."""
    pass


class InputValidationError(DriverError):
    """Raised when user supplied values cannot be used for a run."""
    pass


class SessionStateError(DriverError):
    """Raised when a session operation is not allowed in its current state."""
    pass


def _leading_int(text: str) -> Optional[int]:
    match = LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_array(text: str, min_length: int = 1, max_length: int = 40) -> List[int]:
    """
    Parse a comma separated list of integers into a sorted array.

    Each token is read up to its first non-digit, so "3.7" gives 3 and
    "12abc" gives 12. Tokens that do not start with an integer are dropped,
    the remaining values are sorted ascending so every algorithm can run on
    them.

    Args:
        text (str): Raw input such as "7, 3, 11".
        min_length (int): Fewest values accepted.
        max_length (int): Most values accepted.

    Returns:
        List[int]: The parsed values in ascending order.

    Raises:
        InputValidationError: If the number of values is outside the limits.
    """
    values = []
    for token in (text or "").split(","):
        value = _leading_int(token)
        if value is not None:
            values.append(value)

    if not (min_length <= len(values) <= max_length):
        raise InputValidationError(f"Array must have between {min_length} and {max_length} numbers.")
    return sorted(values)


def parse_target(text: str) -> int:
    value = _leading_int(str(text))
    if value is None:
        raise InputValidationError("Please enter a valid target value.")
    return value


def random_array(
    rng: random.Random,
    min_length: int = 20,
    max_length: int = 30,
    min_value: int = 1,
    max_value: int = 40,
) -> Tuple[List[int], int]:
    """
    Generate a sorted random array and a target picked from it.

    Returns:
        Tuple[List[int], int]: The array and a value it contains.
    """
    length = rng.randint(min_length, max_length)
    values = sorted(rng.randint(min_value, max_value) for _ in range(length))
    return values, rng.choice(values)
