"""
Interpretation domain model.

Wraps variation descriptors into the interpretation hierarchy:

    Interpretation
      └─ Diagnosis (disease term)
           └─ GenomicInterpretation (one per subject/biosample finding)
                └─ gene: GeneDescriptor  OR  variant_interpretation: VariantInterpretation

A GenomicInterpretation must carry exactly one call (gene or variant) and a
status other than UNKNOWN_STATUS; anything else raises BuilderError.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

import phenopackets.schema.v2 as pps2

from .curie import make_identifier
from .errors import BuilderError
from .genotype import VariationDescriptorRecord

_ALLOWED_ACMG = {
    "NOT_PROVIDED",
    "BENIGN",
    "LIKELY_BENIGN",
    "UNCERTAIN_SIGNIFICANCE",
    "LIKELY_PATHOGENIC",
    "PATHOGENIC",
}
_ALLOWED_ACTIONABILITY = {"UNKNOWN_ACTIONABILITY", "NOT_ACTIONABLE", "ACTIONABLE"}
_ALLOWED_INTERPRETATION_STATUS = {"UNKNOWN_STATUS", "REJECTED", "CANDIDATE", "CONTRIBUTORY", "CAUSATIVE"}
_ALLOWED_PROGRESS_STATUS = {"UNKNOWN_PROGRESS", "IN_PROGRESS", "COMPLETED", "SOLVED", "UNSOLVED"}


@dataclass
class VariantInterpretationRecord:
    """
    A variant with its ACMG pathogenicity class and therapeutic actionability.
    `variant` may be a VariationDescriptorRecord or a ready VariationDescriptor.
    """

    variant: Union[VariationDescriptorRecord, pps2.VariationDescriptor]
    acmg: str = "NOT_PROVIDED"
    actionability: str = "UNKNOWN_ACTIONABILITY"

    def __post_init__(self) -> None:
        if self.acmg not in _ALLOWED_ACMG:
            raise ValueError(f"Invalid ACMG pathogenicity classification: {self.acmg!r}")
        if self.actionability not in _ALLOWED_ACTIONABILITY:
            raise ValueError(f"Invalid therapeutic actionability: {self.actionability!r}")

    def _descriptor(self) -> pps2.VariationDescriptor:
        if isinstance(self.variant, VariationDescriptorRecord):
            return self.variant.to_variation_descriptor()
        return self.variant

    def to_variant_interpretation(self) -> pps2.VariantInterpretation:
        vi = pps2.VariantInterpretation(
            acmg_pathogenicity_classification=pps2.AcmgPathogenicityClassification.Value(self.acmg),
            therapeutic_actionability=pps2.TherapeuticActionability.Value(self.actionability),
        )
        vi.variation_descriptor.CopyFrom(self._descriptor())
        return vi


@dataclass
class GenomicInterpretationRecord:
    """
    One genomic finding for a subject or biosample.

    Attributes:
        subject_or_biosample_id: Id of the individual or biosample the call refers to.
        status: REJECTED, CANDIDATE, CONTRIBUTORY or CAUSATIVE.
        gene: GeneDescriptor, when the finding is at gene level.
        variant_interpretation: VariantInterpretationRecord, when the finding is a variant.
    """

    subject_or_biosample_id: str
    status: str = "UNKNOWN_STATUS"
    gene: Optional[pps2.GeneDescriptor] = None
    variant_interpretation: Optional[VariantInterpretationRecord] = None

    def __post_init__(self) -> None:
        if self.status not in _ALLOWED_INTERPRETATION_STATUS:
            raise ValueError(f"Invalid interpretation status: {self.status!r}")

    def to_genomic_interpretation(self) -> pps2.GenomicInterpretation:
        if self.status == "UNKNOWN_STATUS":
            raise BuilderError("Interpretation status not initialized")
        if self.gene is not None and self.variant_interpretation is not None:
            raise BuilderError("Can only use one of GeneDescriptor or VariantInterpretation")
        if self.gene is None and self.variant_interpretation is None:
            raise BuilderError("Neither GeneDescriptor or VariantInterpretation was initialized")

        gi = pps2.GenomicInterpretation(
            subject_or_biosample_id=self.subject_or_biosample_id,
            interpretation_status=pps2.GenomicInterpretation.InterpretationStatus.Value(self.status),
        )
        if self.gene is not None:
            gi.gene.CopyFrom(self.gene)
        else:
            gi.variant_interpretation.CopyFrom(self.variant_interpretation.to_variant_interpretation())
        return gi


@dataclass
class DiagnosisRecord:
    """Disease term plus the genomic interpretations that support it."""

    disease_id: str
    disease_label: str
    genomic_interpretations: List[GenomicInterpretationRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        # fail early on a malformed disease id
        self._disease = make_identifier(self.disease_id, self.disease_label)

    def add_genomic_interpretation(self, gi: GenomicInterpretationRecord) -> "DiagnosisRecord":
        self.genomic_interpretations.append(gi)
        return self

    def to_diagnosis(self) -> pps2.Diagnosis:
        diagnosis = pps2.Diagnosis()
        diagnosis.disease.CopyFrom(self._disease)
        for gi in self.genomic_interpretations:
            diagnosis.genomic_interpretations.append(gi.to_genomic_interpretation())
        return diagnosis


@dataclass
class InterpretationRecord:
    """Top-level interpretation of a case: its progress and (optional) diagnosis."""

    id: str
    progress_status: str = "UNKNOWN_PROGRESS"
    diagnosis: Optional[DiagnosisRecord] = None
    summary: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("id must be a nonempty string")
        if self.progress_status not in _ALLOWED_PROGRESS_STATUS:
            raise ValueError(f"Invalid progress status: {self.progress_status!r}")

    @classmethod
    def in_progress(cls, id: str, summary: str = "") -> "InterpretationRecord":
        return cls(id=id, progress_status="IN_PROGRESS", summary=summary)

    @classmethod
    def completed(cls, id: str, diagnosis: DiagnosisRecord, summary: str = "") -> "InterpretationRecord":
        return cls(id=id, progress_status="COMPLETED", diagnosis=diagnosis, summary=summary)

    @classmethod
    def solved(cls, id: str, diagnosis: DiagnosisRecord, summary: str = "") -> "InterpretationRecord":
        return cls(id=id, progress_status="SOLVED", diagnosis=diagnosis, summary=summary)

    @classmethod
    def unsolved(cls, id: str, diagnosis: DiagnosisRecord, summary: str = "") -> "InterpretationRecord":
        return cls(id=id, progress_status="UNSOLVED", diagnosis=diagnosis, summary=summary)

    def to_interpretation(self) -> pps2.Interpretation:
        interpretation = pps2.Interpretation(
            id=self.id,
            progress_status=pps2.Interpretation.ProgressStatus.Value(self.progress_status),
            summary=self.summary,
        )
        if self.diagnosis is not None:
            interpretation.diagnosis.CopyFrom(self.diagnosis.to_diagnosis())
        return interpretation
