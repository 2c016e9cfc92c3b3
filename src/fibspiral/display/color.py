from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in self.tuple():
            if not 0 <= component <= 255:
                raise ValueError(
                    f"Expected all color values to be between 0 and 255. Found {self.tuple()}"
                )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a #rrggbb color. Found {value!r}")
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    def tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tuple())

    def __getitem__(self, index: int) -> int:
        return self.tuple()[index]


BLACK = Color(0, 0, 0)
