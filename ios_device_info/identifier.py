from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Optional


class DeviceFamily(Enum):
    """The hardware family encoded in a model identifier"""

    IPHONE = "iPhone"
    IPAD = "iPad"
    IPOD = "iPod"
    WATCH = "Watch"
    APPLE_TV = "AppleTV"
    SIMULATOR_X86 = "SimulatorX86"
    SIMULATOR_ARM = "SimulatorARM"
    UNKNOWN = "Unknown"


SIMULATOR_IDENTIFIERS = {
    "i386": DeviceFamily.SIMULATOR_X86,
    "x86_64": DeviceFamily.SIMULATOR_X86,
    "arm64": DeviceFamily.SIMULATOR_ARM,
}

SIMULATOR_SUFFIX = ";Simulator"

_IDENTIFIER_RE = re.compile(r"^(iPhone|iPad|iPod|Watch|AppleTV)(\d+),(\d+)$")


@dataclass(frozen=True)
class StructuredKey:
    """A parsed model identifier. Two keys compare equal when they
    denote the same catalog slot; the raw text only takes part in
    the comparison for identifiers we could not parse"""

    family: DeviceFamily
    major: Optional[int] = None
    minor: Optional[int] = None
    unparsed: Optional[str] = None
    raw: str = field(default="", compare=False)
    simulated: bool = field(default=False, compare=False)

    @property
    def is_simulator(self) -> bool:
        return self.family in (DeviceFamily.SIMULATOR_X86, DeviceFamily.SIMULATOR_ARM)


def normalize(raw) -> StructuredKey:
    """Parse a raw identifier such as "iPhone8,1" into a StructuredKey.
    Never raises: text that isn't recognized yields an UNKNOWN key
    that retains the (trimmed) original string"""
    text = raw if isinstance(raw, str) else str(raw)
    candidate = text.strip()

    simulated = False
    if candidate.endswith(SIMULATOR_SUFFIX) and len(candidate) > len(SIMULATOR_SUFFIX):
        candidate = candidate[: -len(SIMULATOR_SUFFIX)]
        simulated = True

    if family := SIMULATOR_IDENTIFIERS.get(candidate, None):
        return StructuredKey(family, raw=text, simulated=True)

    if match := _IDENTIFIER_RE.match(candidate):
        prefix, major, minor = match.groups()
        return StructuredKey(
            DeviceFamily(prefix),
            major=int(major),
            minor=int(minor),
            raw=text,
            simulated=simulated,
        )

    return StructuredKey(
        DeviceFamily.UNKNOWN, unparsed=candidate, raw=text, simulated=simulated
    )


def is_simulator_identifier(raw) -> bool:
    """Returns True for the pseudo-identifiers reported by the simulator"""
    return normalize(raw).is_simulator
