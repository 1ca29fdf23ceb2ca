"""Input rules for a Countdown numbers round.

The solver itself accepts any integers; these checks belong to whatever
collects the target and the chosen numbers before handing them over.
"""

from typing import Sequence, Tuple

NUM_CHOSEN_NUMBERS = 6
TARGET_MIN = 0
TARGET_MAX = 999
SMALL_NUMBERS = tuple(range(1, 11))
LARGE_NUMBERS = (25, 50, 75, 100)


class InvalidInputError(ValueError):
  pass


def validate_target(target) -> int:
  try:
    value = int(target)
  except (TypeError, ValueError) as e:
    raise InvalidInputError(f"Target must be a whole number, got {target!r}") from e

  if not TARGET_MIN <= value <= TARGET_MAX:
    raise InvalidInputError(f"Target must be between {TARGET_MIN} and {TARGET_MAX}, got {value}")
  return value


def validate_numbers(numbers: Sequence) -> Tuple[int, ...]:
  """Small numbers may repeat, each large number may be chosen once"""
  if len(numbers) != NUM_CHOSEN_NUMBERS:
    raise InvalidInputError(f"Exactly {NUM_CHOSEN_NUMBERS} numbers are required, got {len(numbers)}")

  chosen = []
  for position, number in enumerate(numbers, start=1):
    try:
      value = int(number)
    except (TypeError, ValueError) as e:
      raise InvalidInputError(f"Chosen number #{position} is not a whole number: {number!r}") from e

    if value not in SMALL_NUMBERS and value not in LARGE_NUMBERS:
      raise InvalidInputError(f"Chosen number #{position} must be 1-10 or one of "
                              f"{', '.join(map(str, LARGE_NUMBERS))}, got {value}")
    if value in LARGE_NUMBERS and value in chosen:
      raise InvalidInputError(f"Large number {value} can only be chosen once")
    chosen.append(value)

  return tuple(chosen)
