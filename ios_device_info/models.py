from dataclasses import dataclass, field
from string import Formatter
from typing import Generic, Mapping, NamedTuple, Optional, Tuple, TypeVar, Union

DEFAULT_COLOR_TOKEN = "default"

TEMPLATE_SLOTS = {"generation", "ordinal"}

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """A successful lookup"""

    value: T


class Unresolved:
    """A lookup that found nothing. Use the UNRESOLVED singleton"""

    _instance: Optional["Unresolved"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNRESOLVED"


UNRESOLVED = Unresolved()

Resolution = Union[Resolved[T], Unresolved]


def ordinal(number: int) -> str:
    """1 -> "1st", 2 -> "2nd", 11 -> "11th", 23 -> "23rd" """
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


@dataclass(frozen=True)
class DeviceRecord:
    """Describes what we know about a given device model"""

    name: str
    short_name_template: Optional[str] = None
    generation: Optional[int] = None
    colors: Tuple[str, ...] = ()
    default_color: Optional[str] = None
    icons: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.short_name_template is None:
            return
        slots = {
            name
            for _, name, _, _ in Formatter().parse(self.short_name_template)
            if name is not None
        }
        if unknown := slots - TEMPLATE_SLOTS:
            raise ValueError(f"unknown short name slots {sorted(unknown)}")
        if slots and self.generation is None:
            raise ValueError(
                f"short name {self.short_name_template!r} needs a generation"
            )
        # Catches bad format specs, e.g. "{generation:q}"
        self.render_short_name()

    @property
    def declared_default_color(self) -> Optional[str]:
        """The color used when none, or an unknown one, is requested"""
        if self.default_color is not None and self.default_color in self.colors:
            return self.default_color
        if self.colors:
            return self.colors[0]
        return None

    def resolve_color(self, requested: Optional[str]) -> Optional[str]:
        """Validate requested against our colors. If no colors are
        declared, the request is passed through untouched"""
        if not self.colors:
            return requested
        if requested and requested in self.colors:
            return requested
        return self.declared_default_color

    def render_short_name(self) -> Optional[str]:
        """Fill in the explicit short name, if the catalog provided one"""
        if self.short_name_template is None:
            return None
        if self.generation is None:
            return self.short_name_template.format()
        return self.short_name_template.format(
            generation=self.generation, ordinal=ordinal(self.generation)
        )


class CatalogEntry(NamedTuple):
    """One catalog row: every identifier listed shares the record"""

    identifiers: Tuple[str, ...]
    record: DeviceRecord
