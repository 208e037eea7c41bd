"""Four-character captcha codes."""

from __future__ import annotations

import random
import string
from typing import Optional

from .observable import Observable, Property
from .textstyle import Font, FontWeight, default_family

CODE_LENGTH = 4


def generate_code(rng: Optional[random.Random] = None) -> str:
    """Return four characters, each a digit, upper- or lower-case letter at random."""
    rng = rng if rng is not None else random.Random()
    chars = []
    for _ in range(CODE_LENGTH):
        kind = rng.randrange(3)
        if kind == 0:
            chars.append(str(rng.randrange(10)))
        elif kind == 1:
            chars.append(string.ascii_uppercase[rng.randrange(26)])
        else:
            chars.append(string.ascii_lowercase[rng.randrange(26)])
    return "".join(chars)


class Captcha(Observable):
    """Holds a random code and checks answers against it."""

    font = Property(None)
    ignore_case = Property(False)

    def __init__(self, ignore_case: bool = False, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.ignore_case = ignore_case
        self.font = Font(default_family(), 28, FontWeight.BOLD, bold=True)
        self.width = 180
        self.height = 80
        self._code = ""
        self.refresh()

    @property
    def code(self) -> str:
        return self._code

    def refresh(self) -> None:
        """Draw a new code."""
        self._code = generate_code(self._rng)
        self.signal("updated").emit()

    def verify(self, code: str) -> bool:
        """Check an answer, ignoring case if ``ignore_case`` is set."""
        if self.ignore_case:
            return self._code.upper() == code.upper()
        return self._code == code