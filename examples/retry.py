# EXAMPLE: Retry
#
# read() never loops by itself. Retrying on bad input is up to the caller.

from enum import Enum
from typing import Literal

from tinyinput.exceptions import IoError, ParseError
from tinyinput.reader import read


class Size(Enum):
    small = 1
    medium = 2
    large = 3


def ask_age() -> int | None:
    while True:
        try:
            return read("Age: ", int)
        except ParseError as e:
            print(f"Not a whole number: {e}")
        except IoError as e:
            # stdin is gone, asking again won't help
            print(f"Could not read input: {e}")
            return None


age = ask_age()

try:
    # Enums parse by member name, Literals by value
    size = read("Size (small/medium/large): ", Size)
    confirm = read("Confirm? (y/n): ", Literal["y", "n"])
    scores = read("Scores, comma separated: ", list[float])
except ParseError as e:
    print(f"Invalid input: {e}")
else:
    if confirm == "y":
        print(f"Ordered a {size.name} shirt (age {age})")
        print(f"average score: {sum(scores) / max(len(scores), 1):.2f}")
