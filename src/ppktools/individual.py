"""
Individual domain model.

Defines the IndividualRecord (the subject of a phenopacket) and its
VitalStatusRecord.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional, Union

import phenopackets.schema.v2 as pps2
from google.protobuf.timestamp_pb2 import Timestamp

from .curie import make_identifier, validate_curie
from .time_elements import TimeLike, as_time_element, parse_timestamp

_ALLOWED_SEXES = {"UNKNOWN_SEX", "FEMALE", "MALE", "OTHER_SEX"}
_ALLOWED_KARYOTYPES = {
    "UNKNOWN_KARYOTYPE",
    "XX",
    "XY",
    "XO",
    "XXY",
    "XXX",
    "XXYY",
    "XXXY",
    "XXXX",
    "XYY",
    "OTHER_KARYOTYPE",
}
_ALLOWED_VITAL_STATUSES = {"UNKNOWN_STATUS", "ALIVE", "DECEASED"}

HOMO_SAPIENS = ("NCBITaxon:9606", "Homo sapiens")


@dataclass
class VitalStatusRecord:
    """
    Represents whether an individual is alive, and if not, when and why they died.

    Attributes:
        status: One of UNKNOWN_STATUS, ALIVE, DECEASED.
        time_of_death: Only meaningful when DECEASED.
        cause_of_death: Only meaningful when DECEASED.
        survival_time_in_days: Days alive after the primary diagnosis.
    """

    status: str = "UNKNOWN_STATUS"
    time_of_death: Optional[TimeLike] = None
    cause_of_death: Optional[pps2.OntologyClass] = None
    survival_time_in_days: Optional[int] = None

    def __post_init__(self) -> None:
        if self.status not in _ALLOWED_VITAL_STATUSES:
            raise ValueError(f"Invalid vital status: {self.status!r}")

        if self.survival_time_in_days is not None and (
            not isinstance(self.survival_time_in_days, int) or self.survival_time_in_days < 0
        ):
            raise ValueError(
                f"survival_time_in_days must be a non-negative integer, got {self.survival_time_in_days!r}"
            )

        self.time_of_death = as_time_element(self.time_of_death)

    @classmethod
    def alive(cls) -> "VitalStatusRecord":
        return cls(status="ALIVE")

    @classmethod
    def deceased(
        cls,
        time_of_death: Optional[TimeLike] = None,
        cause_of_death: Optional[pps2.OntologyClass] = None,
    ) -> "VitalStatusRecord":
        return cls(status="DECEASED", time_of_death=time_of_death, cause_of_death=cause_of_death)

    def to_vital_status(self) -> pps2.VitalStatus:
        vital_status = pps2.VitalStatus(status=pps2.VitalStatus.Status.Value(self.status))
        if self.time_of_death is not None:
            vital_status.time_of_death.CopyFrom(self.time_of_death)
        if self.cause_of_death is not None:
            vital_status.cause_of_death.CopyFrom(self.cause_of_death)
        if self.survival_time_in_days is not None:
            vital_status.survival_time_in_days = self.survival_time_in_days
        return vital_status


def date_to_timestamp(day: date) -> Timestamp:
    """Midnight UTC of `day` as a protobuf Timestamp."""
    ts = Timestamp()
    ts.FromDatetime(datetime(day.year, day.month, day.day, tzinfo=timezone.utc))
    return ts


@dataclass
class IndividualRecord:
    """
    Represents the subject of a phenopacket.

    Attributes:
        id: Identifier of the individual (free text, e.g. 'proband A').
        alternate_ids: Alternative identifiers, each a CURIE.
        date_of_birth: A date, an RFC-3339 instant string or a Timestamp.
            Stored as a Timestamp after construction.
        time_at_last_encounter: Age/onset string or TimeElement.
        vital_status: Optional VitalStatusRecord.
        sex: Phenotypic sex (UNKNOWN_SEX, FEMALE, MALE, OTHER_SEX).
        karyotypic_sex: Karyotype (XX, XY, ...).
        gender: Self-identified gender term.
        taxonomy: Species term (see homo_sapiens()).
    """

    id: str
    alternate_ids: List[str] = field(default_factory=list)
    date_of_birth: Optional[Union[date, str, Timestamp]] = None
    time_at_last_encounter: Optional[TimeLike] = None
    vital_status: Optional[VitalStatusRecord] = None
    sex: str = "UNKNOWN_SEX"
    karyotypic_sex: str = "UNKNOWN_KARYOTYPE"
    gender: Optional[pps2.OntologyClass] = None
    taxonomy: Optional[pps2.OntologyClass] = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("id must be a nonempty string")

        for alt_id in self.alternate_ids:
            validate_curie(alt_id)

        if self.sex not in _ALLOWED_SEXES:
            raise ValueError(f"Invalid sex: {self.sex!r}")

        if self.karyotypic_sex not in _ALLOWED_KARYOTYPES:
            raise ValueError(f"Invalid karyotypic sex: {self.karyotypic_sex!r}")

        self.time_at_last_encounter = as_time_element(self.time_at_last_encounter)
        self.date_of_birth = self._date_of_birth_timestamp()

    @classmethod
    def homo_sapiens(cls, id: str, **kwargs) -> "IndividualRecord":
        """An individual with taxonomy NCBITaxon:9606."""
        return cls(id=id, taxonomy=make_identifier(*HOMO_SAPIENS), **kwargs)

    def _date_of_birth_timestamp(self) -> Optional[Timestamp]:
        if self.date_of_birth is None:
            return None
        if isinstance(self.date_of_birth, Timestamp):
            ts = Timestamp()
            ts.CopyFrom(self.date_of_birth)
            return ts
        if isinstance(self.date_of_birth, str):
            return parse_timestamp(self.date_of_birth)
        return date_to_timestamp(self.date_of_birth)

    def to_individual(self) -> pps2.Individual:
        individual = pps2.Individual(
            id=self.id,
            sex=pps2.Sex.Value(self.sex),
            karyotypic_sex=pps2.KaryotypicSex.Value(self.karyotypic_sex),
        )
        individual.alternate_ids.extend(self.alternate_ids)

        if self.date_of_birth is not None:
            individual.date_of_birth.CopyFrom(self.date_of_birth)
        if self.time_at_last_encounter is not None:
            individual.time_at_last_encounter.CopyFrom(self.time_at_last_encounter)
        if self.vital_status is not None:
            individual.vital_status.CopyFrom(self.vital_status.to_vital_status())
        if self.gender is not None:
            individual.gender.CopyFrom(self.gender)
        if self.taxonomy is not None:
            individual.taxonomy.CopyFrom(self.taxonomy)
        return individual
