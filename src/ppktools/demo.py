"""
Worked example: a proband with Bethlem myopathy caused by a COL6A1 missense variant.

Case from Bao M, et al. BMC Neurol. 2019;19(1):32 (PMID:30808312).
"""

import phenopackets.schema.v2 as pps2

from .constants.onset import congenital_onset, fetal_onset, infantile_onset
from .genotype import VariationDescriptorRecord, gene_descriptor, vcf_record
from .individual import IndividualRecord
from .interpretation import (
    DiagnosisRecord,
    GenomicInterpretationRecord,
    InterpretationRecord,
    VariantInterpretationRecord,
)
from .metadata import MetaDataRecord, Resources, external_reference
from .phenopacket import PhenopacketBuilder
from .phenotype import PhenotypicFeatureRecord, evidence
from .time_elements import from_ontology_class

_AUTHOR_STATEMENT = ("ECO:0000033", "author statement supported by traceable reference")

_FEATURES = (
    ("HP:0001629", "Ventricular septal defect", congenital_onset),
    ("HP:0000280", "Coarse facial features", None),
    ("HP:0008689", "Bilateral cryptorchidism", congenital_onset),
    ("HP:0001561", "Polyhydramnios", fetal_onset),
    ("HP:0000054", "Micropenis", congenital_onset),
    ("HP:0001798", "Anonychia", congenital_onset),
    ("HP:0001320", "Cerebellar vermis hypoplasia", None),
    ("HP:0000518", "Cataract", infantile_onset),
    ("HP:0002198", "Dilated fourth ventricle", None),
    ("HP:0100333", "Unilateral cleft lip", congenital_onset),
)


def bethlem_myopathy_phenopacket() -> pps2.Phenopacket:
    reference = external_reference(
        "PMID:30808312",
        "COL6A1 mutation leading to Bethlem myopathy with recurrent hematuria: a case report",
    )
    author_statement = evidence(*_AUTHOR_STATEMENT, reference=reference)

    metadata = MetaDataRecord(
        created_by="anonymous biocurator",
        created="2021-05-14T10:35:00Z",
        resources=[
            Resources.hpo("2021-08-02"),
            Resources.geno("2020-03-08"),
            Resources.eco("2022-08-05"),
            Resources.omim("2022-11-23"),
        ],
        external_references=[reference],
    )

    proband = IndividualRecord(id="proband A", sex="MALE", time_at_last_encounter="P6Y3M")

    variant = VariationDescriptorRecord(
        id="variant id",
        gene=gene_descriptor("HGNC:2211", "COL6A1"),
        hgvsc="NM_001848.2:c.877G>A",
        vcf=vcf_record("GRCh38", "chr21", 45989626, "G", "A"),
        zygosity="heterozygous",
    )
    diagnosis = DiagnosisRecord("OMIM:158810", "Bethlem myopathy 1").add_genomic_interpretation(
        GenomicInterpretationRecord(
            subject_or_biosample_id="id",
            status="CAUSATIVE",
            variant_interpretation=VariantInterpretationRecord(variant, acmg="PATHOGENIC"),
        )
    )

    features = [
        PhenotypicFeatureRecord(
            type_id=type_id,
            type_label=label,
            onset=from_ontology_class(onset()) if onset is not None else None,
            evidence=[author_statement],
        )
        for type_id, label, onset in _FEATURES
    ]

    return (
        PhenopacketBuilder("arbitrary proband id", metadata)
        .individual(proband)
        .add_phenotypic_features(features)
        .add_interpretation(InterpretationRecord.solved("arbitrary interpretation id", diagnosis))
        .build()
    )
