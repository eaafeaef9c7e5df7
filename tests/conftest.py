import pytest

import phenopackets.schema.v2 as pps2

from ppktools.config import CURIE_SUFFIX_ENV
from ppktools.demo import bethlem_myopathy_phenopacket
from ppktools.genotype import VariationDescriptorRecord, gene_descriptor, vcf_record
from ppktools.metadata import MetaDataRecord, Resources


@pytest.fixture(autouse=True)
def default_suffix_policy(monkeypatch):
    """
    Every test starts from the default (alphanumeric) CURIE suffix policy,
    whatever the developer's shell exports.
    """
    monkeypatch.delenv(CURIE_SUFFIX_ENV, raising=False)


@pytest.fixture
def col6a1() -> pps2.GeneDescriptor:
    return gene_descriptor("HGNC:2211", "COL6A1")


@pytest.fixture
def col6a1_variant(col6a1: pps2.GeneDescriptor) -> VariationDescriptorRecord:
    """
    The heterozygous COL6A1 missense variant from the Bethlem myopathy case.
    """
    return VariationDescriptorRecord(
        id="variant id",
        gene=col6a1,
        hgvsc="NM_001848.2:c.877G>A",
        vcf=vcf_record("GRCh38", "chr21", 45989626, "G", "A"),
        zygosity="heterozygous",
    )


@pytest.fixture
def metadata() -> MetaDataRecord:
    return MetaDataRecord(
        created_by="Earnest B. Biocurator",
        created="2019-07-21T00:25:54.662Z",
        resources=[Resources.hpo("v2025-03-03"), Resources.geno("2023-10-08")],
    )


@pytest.fixture(scope="session")
def bethlem() -> pps2.Phenopacket:
    return bethlem_myopathy_phenopacket()
