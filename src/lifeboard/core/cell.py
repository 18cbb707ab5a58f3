"""Two-valued cell state for the Game of Life board."""

from enum import Enum


class Cell(Enum):
    """State of a single board cell.

    The enum value is the glyph used when rendering the cell.
    """

    DEAD = "."
    ALIVE = "#"

    @classmethod
    def from_bool(cls, alive: bool) -> 'Cell':
        """Map a boolean state (True=alive) to a Cell."""
        return cls.ALIVE if alive else cls.DEAD

    @classmethod
    def from_glyph(cls, glyph: str) -> 'Cell':
        """Parse a rendered glyph back into a Cell.

        Raises:
            ValueError: If glyph is not '.' or '#'
        """
        try:
            return cls(glyph)
        except ValueError:
            raise ValueError(f"Unknown cell glyph {glyph!r}") from None

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def is_alive(self) -> bool:
        return self is Cell.ALIVE

    @property
    def is_dead(self) -> bool:
        return self is Cell.DEAD

    def __str__(self) -> str:
        return self.value
