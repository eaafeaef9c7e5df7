"""
Phenopacket assembly.

PhenopacketBuilder collects the parts of a case report and emits a single
pps2.Phenopacket. Each add_* method accepts either a ppktools record (which is
converted with its to_*() method) or a ready protobuf message, and returns the
builder so calls can be chained:

    ppkt = (
        PhenopacketBuilder("proband A", metadata)
        .individual(IndividualRecord.homo_sapiens("proband A", sex="MALE"))
        .add_phenotypic_feature_from_str("HP:0001629", "Ventricular septal defect")
        .add_interpretation(interpretation)
        .build()
    )
"""

import logging
from typing import Iterable, List, Optional, Union

import phenopackets.schema.v2 as pps2

from .disease import DiseaseRecord
from .individual import IndividualRecord
from .interpretation import InterpretationRecord
from .metadata import MetaDataRecord
from .phenotype import PhenotypicFeatureRecord

logger = logging.getLogger(__name__)


class PhenopacketBuilder:
    """Fluent assembler for a pps2.Phenopacket."""

    def __init__(self, id: str, meta_data: Union[MetaDataRecord, pps2.MetaData]):
        if not isinstance(id, str) or not id.strip():
            raise ValueError("id must be a nonempty string")
        self.id = id
        self.meta_data = meta_data.to_meta_data() if isinstance(meta_data, MetaDataRecord) else meta_data
        self.subject: Optional[pps2.Individual] = None
        self.phenotypic_features: List[pps2.PhenotypicFeature] = []
        self.measurements: List[pps2.Measurement] = []
        self.biosamples: List[pps2.Biosample] = []
        self.interpretations: List[pps2.Interpretation] = []
        self.diseases: List[pps2.Disease] = []
        self.medical_actions: List[pps2.MedicalAction] = []
        self.files: List[pps2.File] = []

    # ---------
    # Subject
    # ---------

    def individual(self, subject: Union[IndividualRecord, pps2.Individual]) -> "PhenopacketBuilder":
        if isinstance(subject, IndividualRecord):
            subject = subject.to_individual()
        self.subject = subject
        return self

    # -------------------
    # Phenotypic features
    # -------------------

    def add_phenotypic_feature(
        self, feature: Union[PhenotypicFeatureRecord, pps2.PhenotypicFeature]
    ) -> "PhenopacketBuilder":
        if isinstance(feature, PhenotypicFeatureRecord):
            feature = feature.to_phenotypic_feature()
        self.phenotypic_features.append(feature)
        return self

    def add_phenotypic_features(
        self, features: Iterable[Union[PhenotypicFeatureRecord, pps2.PhenotypicFeature]]
    ) -> "PhenopacketBuilder":
        for feature in features:
            self.add_phenotypic_feature(feature)
        return self

    def add_phenotypic_feature_from_str(self, type_id: str, type_label: str) -> "PhenopacketBuilder":
        """Add an observed feature by id and label; raises CurieError on a malformed id."""
        return self.add_phenotypic_feature(PhenotypicFeatureRecord.observed(type_id, type_label))

    # --------
    # Diseases
    # --------

    def add_disease(self, disease: Union[DiseaseRecord, pps2.Disease]) -> "PhenopacketBuilder":
        if isinstance(disease, DiseaseRecord):
            disease = disease.to_disease()
        self.diseases.append(disease)
        return self

    def add_diseases(self, diseases: Iterable[Union[DiseaseRecord, pps2.Disease]]) -> "PhenopacketBuilder":
        for disease in diseases:
            self.add_disease(disease)
        return self

    # -----------------------------------
    # Measurements, samples, actions, files
    # -----------------------------------

    def add_measurement(self, measurement: pps2.Measurement) -> "PhenopacketBuilder":
        self.measurements.append(measurement)
        return self

    def add_measurements(self, measurements: Iterable[pps2.Measurement]) -> "PhenopacketBuilder":
        self.measurements.extend(measurements)
        return self

    def add_biosample(self, sample: pps2.Biosample) -> "PhenopacketBuilder":
        self.biosamples.append(sample)
        return self

    def add_biosamples(self, samples: Iterable[pps2.Biosample]) -> "PhenopacketBuilder":
        self.biosamples.extend(samples)
        return self

    def add_medical_action(self, action: pps2.MedicalAction) -> "PhenopacketBuilder":
        self.medical_actions.append(action)
        return self

    def add_medical_actions(self, actions: Iterable[pps2.MedicalAction]) -> "PhenopacketBuilder":
        self.medical_actions.extend(actions)
        return self

    def add_file(self, file: pps2.File) -> "PhenopacketBuilder":
        self.files.append(file)
        return self

    # ---------------
    # Interpretations
    # ---------------

    def add_interpretation(
        self, interpretation: Union[InterpretationRecord, pps2.Interpretation]
    ) -> "PhenopacketBuilder":
        if isinstance(interpretation, InterpretationRecord):
            interpretation = interpretation.to_interpretation()
        self.interpretations.append(interpretation)
        return self

    # -----
    # Build
    # -----

    def build(self) -> pps2.Phenopacket:
        ppkt = pps2.Phenopacket(id=self.id)
        if self.subject is not None:
            ppkt.subject.CopyFrom(self.subject)
        ppkt.phenotypic_features.extend(self.phenotypic_features)
        ppkt.measurements.extend(self.measurements)
        ppkt.biosamples.extend(self.biosamples)
        ppkt.interpretations.extend(self.interpretations)
        ppkt.diseases.extend(self.diseases)
        ppkt.medical_actions.extend(self.medical_actions)
        ppkt.files.extend(self.files)
        ppkt.meta_data.CopyFrom(self.meta_data)
        logger.debug(
            "Built phenopacket %s with %d features, %d diseases, %d interpretations",
            self.id,
            len(self.phenotypic_features),
            len(self.diseases),
            len(self.interpretations),
        )
        return ppkt
