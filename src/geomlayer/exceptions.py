from __future__ import annotations


class GeomError(Exception):
    """Base error of the package."""


class AestheticLengthError(GeomError, ValueError):
    """An aesthetic given as a parameter is neither length 1 nor the row count."""

    def __init__(self, aesthetics: list[str], n: int) -> None:
        self.aesthetics = list(aesthetics)
        self.n = n
        super().__init__(
            f"Aesthetics must be either length 1 or the same as the data ({n}): "
            f"{', '.join(self.aesthetics)}"
        )
