"""
HPO onset vocabulary.

A fixed table of the 18 terms under "Onset" (HP:0003674) that a TimeElement may
reference. The table is built on first access and never modified afterwards;
lookups hand out copies so callers cannot mutate the shared entries.
"""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

import phenopackets.schema.v2 as pps2

from ..config import SuffixPolicy
from ..curie import make_identifier

logger = logging.getLogger(__name__)

# (id, label) in developmental order
_ONSET_TERMS = (
    ("HP:0030674", "Antenatal onset"),
    ("HP:0011460", "Embryonal onset"),
    ("HP:0011461", "Fetal onset"),
    ("HP:0034199", "Late first trimester onset"),
    ("HP:0034198", "Second trimester onset"),
    ("HP:0034197", "Third trimester onset"),
    ("HP:0003577", "Congenital onset"),
    ("HP:0003623", "Neonatal onset"),
    ("HP:0003593", "Infantile onset"),
    ("HP:0011463", "Childhood onset"),
    ("HP:0003621", "Juvenile onset"),
    ("HP:0003581", "Adult onset"),
    ("HP:0011462", "Young adult onset"),
    ("HP:0025708", "Early young adult onset"),
    ("HP:0025709", "Intermediate young adult onset"),
    ("HP:0025710", "Late young adult onset"),
    ("HP:0003596", "Middle age onset"),
    ("HP:0003584", "Late onset"),
)


@lru_cache(maxsize=None)
def _onset_table() -> Mapping[str, pps2.OntologyClass]:
    table = {
        label: make_identifier(term_id, label, SuffixPolicy.NUMERIC)
        for term_id, label in _ONSET_TERMS
    }
    logger.debug("Initialized onset vocabulary with %d terms", len(table))
    return MappingProxyType(table)


def _copy(clz: pps2.OntologyClass) -> pps2.OntologyClass:
    out = pps2.OntologyClass()
    out.CopyFrom(clz)
    return out


def get_onset_by_label(label: str) -> Optional[pps2.OntologyClass]:
    """Exact, case-sensitive lookup. Returns a copy of the entry, or None."""
    clz = _onset_table().get(label)
    return _copy(clz) if clz is not None else None


def onset_labels() -> tuple[str, ...]:
    return tuple(label for _, label in _ONSET_TERMS)


def onset_terms() -> list[pps2.OntologyClass]:
    """All onset terms, in developmental order."""
    return [_copy(_onset_table()[label]) for label in onset_labels()]


def _by_label(label: str) -> pps2.OntologyClass:
    return _copy(_onset_table()[label])


def antenatal_onset() -> pps2.OntologyClass:
    return _by_label("Antenatal onset")


def embryonal_onset() -> pps2.OntologyClass:
    return _by_label("Embryonal onset")


def fetal_onset() -> pps2.OntologyClass:
    return _by_label("Fetal onset")


def late_first_trimester_onset() -> pps2.OntologyClass:
    return _by_label("Late first trimester onset")


def second_trimester_onset() -> pps2.OntologyClass:
    return _by_label("Second trimester onset")


def third_trimester_onset() -> pps2.OntologyClass:
    return _by_label("Third trimester onset")


def congenital_onset() -> pps2.OntologyClass:
    return _by_label("Congenital onset")


def neonatal_onset() -> pps2.OntologyClass:
    return _by_label("Neonatal onset")


def infantile_onset() -> pps2.OntologyClass:
    return _by_label("Infantile onset")


def childhood_onset() -> pps2.OntologyClass:
    return _by_label("Childhood onset")


def juvenile_onset() -> pps2.OntologyClass:
    return _by_label("Juvenile onset")


def adult_onset() -> pps2.OntologyClass:
    return _by_label("Adult onset")


def young_adult_onset() -> pps2.OntologyClass:
    return _by_label("Young adult onset")


def early_young_adult_onset() -> pps2.OntologyClass:
    return _by_label("Early young adult onset")


def intermediate_young_adult_onset() -> pps2.OntologyClass:
    return _by_label("Intermediate young adult onset")


def late_young_adult_onset() -> pps2.OntologyClass:
    return _by_label("Late young adult onset")


def middle_age_onset() -> pps2.OntologyClass:
    return _by_label("Middle age onset")


def late_onset() -> pps2.OntologyClass:
    return _by_label("Late onset")
