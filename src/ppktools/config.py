"""
Runtime configuration.

Settings are read from the environment on each call, so tests and callers can
flip them without reloading modules.

Environment flags
----------------------------------------
PPKTOOLS_CURIE_SUFFIX=alphanumeric : CURIE suffixes may hold letters and digits (default).
PPKTOOLS_CURIE_SUFFIX=numeric      : CURIE suffixes must be digits only (e.g. strict HPO/OMIM style).
"""

import os
from enum import Enum

CURIE_SUFFIX_ENV = "PPKTOOLS_CURIE_SUFFIX"


class SuffixPolicy(Enum):
    """Which characters a CURIE suffix may contain."""
    ALPHANUMERIC = "alphanumeric"
    NUMERIC = "numeric"

    @classmethod
    def from_label(cls, label: str) -> "SuffixPolicy":
        key = label.strip().lower()
        for policy in cls:
            if policy.value == key:
                return policy
        raise ValueError(f"Unknown CURIE suffix policy: {label!r}")


def curie_suffix_policy() -> SuffixPolicy:
    """Return the suffix policy from PPKTOOLS_CURIE_SUFFIX, defaulting to alphanumeric."""
    raw = os.getenv(CURIE_SUFFIX_ENV, "").strip()
    if not raw:
        return SuffixPolicy.ALPHANUMERIC
    return SuffixPolicy.from_label(raw)
