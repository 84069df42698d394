"""ANSI colors and styles for painting text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

_RESET = "\x1b[0m"

_STANDARD_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "purple": 35,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "default": 39,
    "dark_gray": 90,
    "light_red": 91,
    "light_green": 92,
    "light_yellow": 93,
    "light_blue": 94,
    "light_purple": 95,
    "light_magenta": 95,
    "light_cyan": 96,
    "light_gray": 97,
}


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"color component out of range: {value}")
    return value


@dataclass(frozen=True)
class Color:
    """A terminal color: a named palette entry, a 256-color index or an RGB triple."""

    name: str
    params: tuple[int, ...] = ()

    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    PURPLE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    DEFAULT: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_RED: ClassVar[Color]
    LIGHT_GREEN: ClassVar[Color]
    LIGHT_YELLOW: ClassVar[Color]
    LIGHT_BLUE: ClassVar[Color]
    LIGHT_PURPLE: ClassVar[Color]
    LIGHT_MAGENTA: ClassVar[Color]
    LIGHT_CYAN: ClassVar[Color]
    LIGHT_GRAY: ClassVar[Color]

    def __post_init__(self) -> None:
        if self.name == "fixed":
            if len(self.params) != 1:
                raise ValueError("a fixed color takes one index")
        elif self.name == "rgb":
            if len(self.params) != 3:
                raise ValueError("an rgb color takes three components")
        elif self.name not in _STANDARD_CODES:
            raise ValueError(f"unknown color: {self.name}")
        for value in self.params:
            _check_byte(value)

    @classmethod
    def fixed(cls, index: int) -> Color:
        """A color from the 256-color palette."""
        return cls("fixed", (index,))

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Color:
        """A 24-bit color."""
        return cls("rgb", (red, green, blue))

    def _code(self, offset: int) -> str:
        extended = 38 + offset
        if self.name == "fixed":
            return f"{extended};5;{self.params[0]}"
        if self.name == "rgb":
            red, green, blue = self.params
            return f"{extended};2;{red};{green};{blue}"
        return str(_STANDARD_CODES[self.name] + offset)

    def foreground_code(self) -> str:
        """The SGR parameters that select this color as foreground."""
        return self._code(0)

    def background_code(self) -> str:
        """The SGR parameters that select this color as background."""
        return self._code(10)


for _name in _STANDARD_CODES:
    setattr(Color, _name.upper(), Color(_name))


@dataclass(frozen=True)
class Style:
    """A set of text attributes and colors."""

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False

    def fg(self, color: Color) -> Style:
        """Return a copy of this style with the given foreground color."""
        return replace(self, foreground=color)

    def on(self, color: Color) -> Style:
        """Return a copy of this style with the given background color."""
        return replace(self, background=color)

    @property
    def is_plain(self) -> bool:
        return self == Style()

    def prefix(self) -> str:
        """The escape sequence that switches this style on; empty for a plain style."""
        if self.is_plain:
            return ""
        codes = [
            code
            for flag, code in (
                (self.bold, "1"),
                (self.dimmed, "2"),
                (self.italic, "3"),
                (self.underline, "4"),
            )
            if flag
        ]
        if self.background is not None:
            codes.append(self.background.background_code())
        if self.foreground is not None:
            codes.append(self.foreground.foreground_code())
        return f"\x1b[{';'.join(codes)}m"

    def paint(self, text: str) -> str:
        """Wrap ``text`` in this style's escape sequences."""
        if self.is_plain:
            return text
        return f"{self.prefix()}{text}{_RESET}"