"""Request records passed from the dispatcher to item handlers."""

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config
    from .random_generator import RandomGenerator

# ASCII only, like C isspace/isdigit in the "C" locale
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass(frozen=True)
class ItemRequest:
    """A single item query.

    Attributes:
        key: Item key without parameters (e.g., "stress.random").
        params: Parameters in the order the caller supplied them.
        timeout: Seconds the host allows for this query, 0 means no limit.
            Informational only; the host enforces it.

    Example:
        >>> request = ItemRequest("stress.random", ("1", "1000"))
        >>> request.nparam
        2
        >>> request.get_param(1)
        '1000'
    """

    key: str
    params: tuple[str, ...] = ()
    timeout: int = 0

    @property
    def nparam(self) -> int:
        return len(self.params)

    def get_param(self, index: int) -> str:
        """Return the parameter at `index`. Check nparam first."""
        return self.params[index]


@dataclass(frozen=True)
class ItemContext:
    """Collaborators a handler may use besides its request."""

    rng: "RandomGenerator"
    config: "Config" = field(repr=False)


def parse_int(text: str) -> int:
    """Parse a leading integer the way C's atoi does.

    Leading ASCII whitespace and a sign are accepted, only ASCII digits
    count, trailing garbage is ignored, and text with no leading digits
    parses as 0:

        >>> parse_int(" 42abc")
        42
        >>> parse_int("x")
        0
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))
