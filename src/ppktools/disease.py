"""
Disease domain model.

Defines the DiseaseRecord dataclass for capturing disease annotations.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import phenopackets.schema.v2 as pps2

from .curie import make_identifier, validate_curie
from .time_elements import TimeLike, as_time_element


@dataclass
class DiseaseRecord:
    """
    Represents a disease diagnosed in (or excluded for) an individual.

    Attributes:
        term_id: CURIE of the disease term (e.g. 'OMIM:164400', 'MONDO:0004994').
        term_label: Human-readable label for the disease.
        excluded: True if the disease was ruled out.
        onset: Onset as a string for parse_temporal (e.g. 'P38Y7M') or a TimeElement.
        resolution: Resolution time, same forms as onset.
        disease_stage: Stage terms (e.g. NYHA class).
        clinical_tnm_finding: TNM findings for cancers.
        primary_site: Anatomical site of origin.
        laterality: Side of the body (see constants.laterality).
    """

    term_id: str
    term_label: str
    excluded: bool = False
    onset: Optional[TimeLike] = None
    resolution: Optional[TimeLike] = None
    disease_stage: List[pps2.OntologyClass] = field(default_factory=list)
    clinical_tnm_finding: List[pps2.OntologyClass] = field(default_factory=list)
    primary_site: Optional[pps2.OntologyClass] = None
    laterality: Optional[pps2.OntologyClass] = None

    def __post_init__(self):
        validate_curie(self.term_id)
        self.onset = as_time_element(self.onset)
        self.resolution = as_time_element(self.resolution)

    def to_disease(self) -> pps2.Disease:
        disease = pps2.Disease(
            term=make_identifier(self.term_id, self.term_label),
            excluded=self.excluded,
        )
        if self.onset is not None:
            disease.onset.CopyFrom(self.onset)
        if self.resolution is not None:
            disease.resolution.CopyFrom(self.resolution)
        disease.disease_stage.extend(self.disease_stage)
        disease.clinical_tnm_finding.extend(self.clinical_tnm_finding)
        if self.primary_site is not None:
            disease.primary_site.CopyFrom(self.primary_site)
        if self.laterality is not None:
            disease.laterality.CopyFrom(self.laterality)
        return disease
