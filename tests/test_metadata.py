from datetime import datetime, timezone

import pytest

from google.protobuf.timestamp_pb2 import Timestamp

from ppktools.errors import TimeElementError
from ppktools.metadata import (
    DEFAULT_CHEBI_VERSION,
    DEFAULT_UCUM_VERSION,
    SCHEMA_VERSION,
    MetaDataRecord,
    Resources,
    external_reference,
    resource,
    update,
)


@pytest.mark.parametrize(
    "res, id, name, prefix, iri_prefix, version",
    [
        (
            Resources.chebi(), "chebi", "Chemical Entities of Biological Interest", "CHEBI",
            "https://purl.obolibrary.org/obo/CHEBI_", DEFAULT_CHEBI_VERSION,
        ),
        (
            Resources.hpo("v2025-03-03"), "hp", "human phenotype ontology", "HP",
            "http://purl.obolibrary.org/obo/HP_", "v2025-03-03",
        ),
        (
            Resources.ucum(), "ucum", "Unified Code for Units of Measure", "UCUM",
            "https://units-of-measurement.org/", DEFAULT_UCUM_VERSION,
        ),
        (
            Resources.ncbi_taxon("2023-02-21"), "ncbitaxon", "NCBI organismal classification", "NCBITaxon",
            "http://purl.obolibrary.org/obo/NCBITaxon_", "2023-02-21",
        ),
    ],
)
def test_resources(res, id, name, prefix, iri_prefix, version):
    assert res.id == id
    assert res.name == name
    assert res.namespace_prefix == prefix
    assert res.iri_prefix == iri_prefix
    assert res.version == version


def test_seventeen_known_resources():
    assert len(Resources.known_ids()) == 17
    assert Resources.drug_central("1").namespace_prefix == "DrugCentral"


def test_unknown_resource_raises():
    with pytest.raises(ValueError):
        resource("pubmed", "1")


def test_external_reference():
    ref = external_reference("PMID:30962759", "Recurrent Erythema Nodosum in a Child with a SHOC2 Gene Mutation")
    assert ref.id == "PMID:30962759"
    assert ref.reference == ""
    ref = external_reference("PMID:30962759", reference="https://pubmed.ncbi.nlm.nih.gov/30962759")
    assert ref.reference == "https://pubmed.ncbi.nlm.nih.gov/30962759"


def test_create_metadata(metadata):
    md = (
        metadata.add_external_reference_by_id(
            "PMID:30808312",
            "Bao M, et al. COL6A1 mutation leading to Bethlem myopathy with recurrent hematuria: a case report.",
        )
        .add_update(update("2020-01-01T00:00:00Z", updated_by="curator", comment="fixed onset"))
        .to_meta_data()
    )
    assert md.created_by == "Earnest B. Biocurator"
    assert md.phenopacket_schema_version == SCHEMA_VERSION == "2.0.2"
    assert md.created.ToJsonString() == "2019-07-21T00:25:54.662Z"
    assert len(md.resources) == 2
    assert md.external_references[0].id == "PMID:30808312"
    assert md.updates[0].comment == "fixed onset"


def test_created_accepts_timestamp_and_datetime():
    ts = Timestamp(seconds=1620988500)
    assert MetaDataRecord("c", created=ts).to_meta_data().created == ts
    dt = datetime(2021, 5, 14, 10, 35, tzinfo=timezone.utc)
    assert MetaDataRecord("c", created=dt).to_meta_data().created == ts


def test_created_timestamp_is_copied():
    ts = Timestamp(seconds=1620988500)
    record = MetaDataRecord("c", created=ts)
    ts.seconds = 0
    assert record.created is not ts
    assert record.to_meta_data().created.seconds == 1620988500


def test_created_defaults_to_now():
    before = int(datetime.now(timezone.utc).timestamp())
    md = MetaDataRecord("c").to_meta_data()
    assert md.created.seconds >= before


def test_malformed_created_string_raises():
    with pytest.raises(TimeElementError):
        MetaDataRecord("c", created="last tuesday")
