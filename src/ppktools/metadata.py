"""
MetaData and ontology Resource construction.

Every phenopacket records who created it, when, and which ontology versions its
terms come from. Resources lists the ontologies ppktools knows about; each
factory takes the ontology release the curator used.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Union

import phenopackets.schema.v2 as pps2
from google.protobuf.timestamp_pb2 import Timestamp

from .time_elements import parse_timestamp

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "2.0.2"
DEFAULT_UCUM_VERSION = "2.1"
DEFAULT_CHEBI_VERSION = "241"

# id -> (name, namespace prefix, IRI prefix, url)
_RESOURCE_TABLE = {
    "hp": (
        "human phenotype ontology", "HP",
        "http://purl.obolibrary.org/obo/HP_", "http://purl.obolibrary.org/obo/hp.owl",
    ),
    "geno": (
        "Genotype Ontology", "GENO",
        "http://purl.obolibrary.org/obo/GENO_", "http://purl.obolibrary.org/obo/geno.owl",
    ),
    "pato": (
        "PhenotypicFeature And Trait Ontology", "PATO",
        "http://purl.obolibrary.org/obo/PATO_", "http://purl.obolibrary.org/obo/pato.owl",
    ),
    "efo": (
        "Experimental Factor Ontology", "EFO",
        "http://purl.obolibrary.org/obo/EFO_", "http://www.ebi.ac.uk/efo/efo.owl",
    ),
    "eco": (
        "Evidence & Conclusion Ontology (ECO)", "ECO",
        "http://purl.obolibrary.org/obo/ECO_", "http://purl.obolibrary.org/obo/eco.owl",
    ),
    "cl": (
        "Cell Ontology", "CL",
        "http://purl.obolibrary.org/obo/CL_", "http://purl.obolibrary.org/obo/cl.owl",
    ),
    "ncit": (
        "NCI Thesaurus", "NCIT",
        "http://purl.obolibrary.org/obo/NCIT_", "http://purl.obolibrary.org/obo/ncit.owl",
    ),
    "mondo": (
        "Mondo Disease Ontology", "MONDO",
        "http://purl.obolibrary.org/obo/MONDO_", "http://purl.obolibrary.org/obo/mondo.obo",
    ),
    "uberon": (
        "Uber-anatomy ontology", "UBERON",
        "http://purl.obolibrary.org/obo/UBERON_", "http://purl.obolibrary.org/obo/uberon.owl",
    ),
    "ncbitaxon": (
        "NCBI organismal classification", "NCBITaxon",
        "http://purl.obolibrary.org/obo/NCBITaxon_", "http://purl.obolibrary.org/obo/ncbitaxon.owl",
    ),
    "so": (
        "Sequence types and features ontology", "SO",
        "http://purl.obolibrary.org/obo/SO_", "http://purl.obolibrary.org/obo/so.owl",
    ),
    "uo": (
        "Units of measurement ontology", "UO",
        "http://purl.obolibrary.org/obo/UO_", "http://purl.obolibrary.org/obo/uo.owl",
    ),
    "ucum": (
        "Unified Code for Units of Measure", "UCUM",
        "https://units-of-measurement.org/", "https://ucum.org",
    ),
    "loinc": (
        "Logical Observation Identifiers Names and Codes", "LOINC",
        "https://loinc.org/", "https://loinc.org",
    ),
    "drugcentral": (
        "Drug Central", "DrugCentral",
        "https://drugcentral.org/drugcard/", "https://drugcentral.org/",
    ),
    "omim": (
        "An Online Catalog of Human Genes and Genetic Disorders", "OMIM",
        "https://www.omim.org/entry/", "https://www.omim.org",
    ),
    "chebi": (
        "Chemical Entities of Biological Interest", "CHEBI",
        "https://purl.obolibrary.org/obo/CHEBI_", "https://www.ebi.ac.uk/chebi",
    ),
}


def resource(resource_id: str, version: str) -> pps2.Resource:
    """Resource for a known ontology id (see Resources.known_ids())."""
    try:
        name, prefix, iri_prefix, url = _RESOURCE_TABLE[resource_id]
    except KeyError as e:
        raise ValueError(f"Unknown resource id: {resource_id!r}") from e
    return pps2.Resource(
        id=resource_id,
        name=name,
        namespace_prefix=prefix,
        iri_prefix=iri_prefix,
        url=url,
        version=version,
    )


class Resources:
    """Factories for the ontology Resources used in phenopackets."""

    @staticmethod
    def known_ids() -> List[str]:
        return list(_RESOURCE_TABLE)

    @staticmethod
    def hpo(version: str) -> pps2.Resource:
        return resource("hp", version)

    @staticmethod
    def geno(version: str) -> pps2.Resource:
        return resource("geno", version)

    @staticmethod
    def pato(version: str) -> pps2.Resource:
        return resource("pato", version)

    @staticmethod
    def efo(version: str) -> pps2.Resource:
        return resource("efo", version)

    @staticmethod
    def eco(version: str) -> pps2.Resource:
        return resource("eco", version)

    @staticmethod
    def cl(version: str) -> pps2.Resource:
        return resource("cl", version)

    @staticmethod
    def ncit(version: str) -> pps2.Resource:
        return resource("ncit", version)

    @staticmethod
    def mondo(version: str) -> pps2.Resource:
        return resource("mondo", version)

    @staticmethod
    def uberon(version: str) -> pps2.Resource:
        return resource("uberon", version)

    @staticmethod
    def ncbi_taxon(version: str) -> pps2.Resource:
        return resource("ncbitaxon", version)

    @staticmethod
    def so(version: str) -> pps2.Resource:
        return resource("so", version)

    @staticmethod
    def uo(version: str) -> pps2.Resource:
        return resource("uo", version)

    @staticmethod
    def ucum(version: str = DEFAULT_UCUM_VERSION) -> pps2.Resource:
        return resource("ucum", version)

    @staticmethod
    def loinc(version: str) -> pps2.Resource:
        return resource("loinc", version)

    @staticmethod
    def drug_central(version: str) -> pps2.Resource:
        return resource("drugcentral", version)

    @staticmethod
    def omim(version: str) -> pps2.Resource:
        return resource("omim", version)

    @staticmethod
    def chebi(version: str = DEFAULT_CHEBI_VERSION) -> pps2.Resource:
        return resource("chebi", version)


def external_reference(id: str, description: str = "", reference: str = "") -> pps2.ExternalReference:
    """ExternalReference such as external_reference('PMID:30808312', 'Bao M, et al. ...')."""
    return pps2.ExternalReference(id=id, description=description, reference=reference)


CreatedLike = Union[Timestamp, datetime, str]


def _as_timestamp(value: CreatedLike) -> Timestamp:
    if isinstance(value, Timestamp):
        ts = Timestamp()
        ts.CopyFrom(value)
        return ts
    if isinstance(value, datetime):
        ts = Timestamp()
        ts.FromDatetime(value)
        return ts
    return parse_timestamp(value)


def update(timestamp: CreatedLike, updated_by: str = "", comment: str = "") -> pps2.Update:
    """An entry in MetaData.updates."""
    upd = pps2.Update(updated_by=updated_by, comment=comment)
    upd.timestamp.CopyFrom(_as_timestamp(timestamp))
    return upd


@dataclass
class MetaDataRecord:
    """
    Provenance of a phenopacket.

    Attributes:
        created_by: Curator name.
        created: Timestamp, datetime or RFC-3339 string. Defaults to now (UTC).
        submitted_by: Submitter, if different from the curator.
        resources: Ontology Resources referenced by the phenopacket.
        external_references: Publications and other sources.
        updates: Update history.
    """

    created_by: str
    created: Optional[CreatedLike] = None
    submitted_by: str = ""
    resources: List[pps2.Resource] = field(default_factory=list)
    external_references: List[pps2.ExternalReference] = field(default_factory=list)
    updates: List[pps2.Update] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.created is None:
            self.created = datetime.now(timezone.utc)
            logger.debug("No creation time given, using %s", self.created.isoformat())
        # normalize eagerly so a malformed string fails at construction
        self.created = _as_timestamp(self.created)

    def add_resource(self, res: pps2.Resource) -> "MetaDataRecord":
        self.resources.append(res)
        return self

    def add_external_reference(self, ref: pps2.ExternalReference) -> "MetaDataRecord":
        self.external_references.append(ref)
        return self

    def add_external_reference_by_id(self, id: str, description: str) -> "MetaDataRecord":
        return self.add_external_reference(external_reference(id, description))

    def add_update(self, upd: pps2.Update) -> "MetaDataRecord":
        self.updates.append(upd)
        return self

    def to_meta_data(self) -> pps2.MetaData:
        md = pps2.MetaData(
            created_by=self.created_by,
            submitted_by=self.submitted_by,
            phenopacket_schema_version=SCHEMA_VERSION,
        )
        md.created.CopyFrom(self.created)
        md.resources.extend(self.resources)
        md.external_references.extend(self.external_references)
        md.updates.extend(self.updates)
        return md
