"""
CURIE (compact URI) validation.

A valid CURIE has exactly one ':' separating a non-empty prefix from a non-empty
suffix, and contains no whitespace. The rules are applied in a fixed order and
the first failing rule determines the reported ErrorKind.
"""

from typing import Optional

import phenopackets.schema.v2 as pps2

from .config import SuffixPolicy, curie_suffix_policy
from .errors import CurieError, ErrorKind


def _suffix_ok(suffix: str, policy: SuffixPolicy) -> bool:
    if policy is SuffixPolicy.NUMERIC:
        return all(c.isdigit() for c in suffix)
    return all(c.isalnum() for c in suffix)


def validate_curie(s: str, suffix_policy: Optional[SuffixPolicy] = None) -> None:
    """
    Check that `s` is a well-formed CURIE, raising CurieError otherwise.

    `suffix_policy` overrides the configured policy (see config.curie_suffix_policy).
    """
    if not s:
        raise CurieError(ErrorKind.EMPTY_IDENTIFIER, s, "Empty CURIE")
    pos = s.find(":")
    if pos < 0:
        raise CurieError(ErrorKind.MISSING_SEPARATOR, s, f"Invalid CURIE with no colon: {s!r}")
    if any(c.isspace() for c in s):
        raise CurieError(ErrorKind.STRAY_WHITESPACE, s, f"Contains stray whitespace: {s!r}")
    if s.count(":") != 1:
        raise CurieError(
            ErrorKind.MULTIPLE_SEPARATORS, s, f"Invalid CURIE with more than one colon: {s!r}"
        )
    if pos == 0:
        raise CurieError(ErrorKind.EMPTY_PREFIX, s, f"Invalid CURIE with no prefix: {s!r}")
    if pos == len(s) - 1:
        raise CurieError(ErrorKind.EMPTY_SUFFIX, s, f"Invalid CURIE with no suffix: {s!r}")

    policy = suffix_policy if suffix_policy is not None else curie_suffix_policy()
    suffix = s[pos + 1:]
    if not _suffix_ok(suffix, policy):
        raise CurieError(
            ErrorKind.INVALID_SUFFIX_CHARACTERS,
            s,
            f"Invalid CURIE with non-{policy.value} characters in suffix: {s!r}",
        )


def is_valid_curie(s: str, suffix_policy: Optional[SuffixPolicy] = None) -> bool:
    """Boolean convenience wrapper around validate_curie."""
    try:
        validate_curie(s, suffix_policy)
    except CurieError:
        return False
    return True


def make_identifier(
    id: str, label: str, suffix_policy: Optional[SuffixPolicy] = None
) -> pps2.OntologyClass:
    """
    Build an OntologyClass after validating its id.
    Any CurieError propagates to the caller untouched.
    """
    validate_curie(id, suffix_policy)
    return pps2.OntologyClass(id=id, label=label)
