"""
Phenotypic feature domain model.

Defines the PhenotypicFeatureRecord class for HPO term annotations of an
individual, and its conversion to a PhenotypicFeature message.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import phenopackets.schema.v2 as pps2

from .curie import make_identifier, validate_curie
from .time_elements import TimeLike, as_time_element


@dataclass
class PhenotypicFeatureRecord:
    """
    Represents a single phenotypic feature observed in (or excluded from) an individual.

    Attributes:
        type_id: CURIE of the feature term (e.g. “HP:0001250”).
        type_label: Human-readable term label.
        excluded: True if the feature was explicitly looked for and not found.
        onset: When the feature began; a string for parse_temporal or a TimeElement.
        resolution: When the feature resolved.
        severity: Optional severity term (HP:0012824 subtree).
        modifiers: Clinical modifier terms (e.g. laterality).
        evidence: Supporting Evidence messages.
        description: Free-text description.
    """

    type_id: str
    type_label: str
    excluded: bool = False
    onset: Optional[TimeLike] = None
    resolution: Optional[TimeLike] = None
    severity: Optional[pps2.OntologyClass] = None
    modifiers: List[pps2.OntologyClass] = field(default_factory=list)
    evidence: List[pps2.Evidence] = field(default_factory=list)
    description: str = ""

    def __post_init__(self):
        validate_curie(self.type_id)

        if not isinstance(self.excluded, bool):
            raise ValueError(
                f"excluded must be a boolean, got {type(self.excluded).__name__}"
            )

        self.onset = as_time_element(self.onset)
        self.resolution = as_time_element(self.resolution)

    @classmethod
    def observed(cls, type_id: str, type_label: str) -> "PhenotypicFeatureRecord":
        return cls(type_id=type_id, type_label=type_label)

    @classmethod
    def of_excluded(cls, type_id: str, type_label: str) -> "PhenotypicFeatureRecord":
        return cls(type_id=type_id, type_label=type_label, excluded=True)

    def to_phenotypic_feature(self) -> pps2.PhenotypicFeature:
        feature = pps2.PhenotypicFeature(
            type=make_identifier(self.type_id, self.type_label),
            excluded=self.excluded,
            description=self.description,
        )
        if self.onset is not None:
            feature.onset.CopyFrom(self.onset)
        if self.resolution is not None:
            feature.resolution.CopyFrom(self.resolution)
        if self.severity is not None:
            feature.severity.CopyFrom(self.severity)
        feature.modifiers.extend(self.modifiers)
        feature.evidence.extend(self.evidence)
        return feature


def evidence(code_id: str, code_label: str, reference: Optional[pps2.ExternalReference] = None) -> pps2.Evidence:
    """Evidence with an ECO code and an optional supporting reference."""
    ev = pps2.Evidence(evidence_code=make_identifier(code_id, code_label))
    if reference is not None:
        ev.reference.CopyFrom(reference)
    return ev
