"""Short display names.

Catalog names carry model numbers and cellular details, for instance
"iPhone 6s (Model A1633, A1688, A1700)" or "iPad Air 2 (Wi-Fi + Cellular)".
The short form drops those two kinds of qualifier and nothing else, so
generation numbers such as "iPad 3" or "(5th generation)" survive.
"""

import re
from typing import List

CONNECTIVITY_TERMS = {
    "gsm",
    "cdma",
    "wi-fi",
    "wifi",
    "cellular",
    "lte",
    "gps",
    "umts",
}

_MODEL_NUMBER_RE = re.compile(
    r"^(?:models?\s+)?A\d{4}(?:\s*(?:/|&|and)\s*A\d{4})*$", re.IGNORECASE
)
_CONNECTIVITY_SPLIT_RE = re.compile(r"\s*(?:\+|/|&|\band\b)\s*", re.IGNORECASE)
_PARENTHETICAL_RE = re.compile(r"\s*\(([^()]*)\)")
_WHITESPACE_RE = re.compile(r"\s+")


def is_model_number(segment: str) -> bool:
    """True for "A1633", "Model A1633" or "Models A1633/A1688" """
    return bool(_MODEL_NUMBER_RE.match(segment.strip()))


def is_connectivity(segment: str) -> bool:
    """True for "GSM", "Wi-Fi + Cellular", "GSM/CDMA" and the like"""
    parts = [part for part in _CONNECTIVITY_SPLIT_RE.split(segment.strip()) if part]
    return bool(parts) and all(part.lower() in CONNECTIVITY_TERMS for part in parts)


def is_qualifier(segment: str) -> bool:
    return is_model_number(segment) or is_connectivity(segment)


def _strip_group(match: "re.Match") -> str:
    kept = _unqualified_segments(match.group(1))
    if not kept:
        return ""
    return f" ({', '.join(kept)})"


def _unqualified_segments(text: str) -> List[str]:
    segments = [segment.strip() for segment in text.split(",")]
    return [segment for segment in segments if segment and not is_qualifier(segment)]


def strip_qualifiers(name: str) -> str:
    """Remove every model number and connectivity qualifier from name,
    whether it sits in parentheses or trails after a comma"""
    stripped = _PARENTHETICAL_RE.sub(_strip_group, name)

    # Trailing ", Wi-Fi" style segments outside of parentheses
    head, *tail = stripped.split(",")
    while tail and is_qualifier(tail[-1]):
        tail.pop()
    stripped = ",".join([head, *tail])

    stripped = _WHITESPACE_RE.sub(" ", stripped).strip(" ,")
    return stripped or name
