from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# Named codes used by older devices, mapped mostly onto the
# matching iPhone 5c and iPod touch (6th generation) finishes
NAMED_COLOR_CODES: Dict[str, str] = {
    "white": "f5f4f7",
    "silver": "f5f4f7",
    "black": "3b3b3c",
    "slate": "3b3b3c",
    "sparrow": "3b3b3c",
    "blue": "46abe0",
    "red": "c6353f",
    "yellow": "faf189",
    "pink": "fe767a",
}

_HEXDIGITS = set("0123456789abcdefABCDEF")


@dataclass
class DeviceColor:
    """Represents an sRGB color"""

    red: int = 0
    green: int = 0
    blue: int = 0

    def as_tuple(self) -> Tuple[int, int, int]:
        """Returns (r, g, b)"""
        return (self.red, self.green, self.blue)

    def as_json_object(self) -> Dict[str, int]:
        """Returns {"r":r, "g":g, "b":b}"""
        return {"r": self.red, "g": self.green, "b": self.blue}

    def as_hex(self) -> str:
        """Returns "#rrggbb" """
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @staticmethod
    def from_hex(code: str) -> Optional["DeviceColor"]:
        """Parses "rrggbb" or "#rrggbb". Returns None unless exactly
        six hex digits remain"""
        code = code[1:] if code.startswith("#") else code
        if len(code) != 6 or not set(code) <= _HEXDIGITS:
            return None
        return DeviceColor(
            red=int(code[0:2], 16),
            green=int(code[2:4], 16),
            blue=int(code[4:6], 16),
        )


def color_for_code(code: str) -> Optional[DeviceColor]:
    """Computes a swatch color for a device color code. Older devices
    report names like "white" or "slate", newer ones a hex code such
    as "#d6c8b9". Apple Watch only reports a number, which has no
    known color, so that gives None"""
    return DeviceColor.from_hex(NAMED_COLOR_CODES.get(code, code))
