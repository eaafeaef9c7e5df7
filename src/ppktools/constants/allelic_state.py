"""
GENO allelic states used for VariationDescriptor.allelic_state.
"""

import phenopackets.schema.v2 as pps2

# GENO codes keyed by the zygosity label used in phenopackets
GENO_ALLELIC_STATE_CODES = {
    "heterozygous": "GENO:0000135",
    "homozygous": "GENO:0000136",
    "hemizygous": "GENO:0000134",
    "unspecified zygosity": "GENO:0000137",
}


def allelic_state(label: str) -> pps2.OntologyClass:
    """Return the GENO term for a zygosity label such as 'heterozygous'."""
    try:
        return pps2.OntologyClass(id=GENO_ALLELIC_STATE_CODES[label], label=label)
    except KeyError as e:
        raise ValueError(f"No GENO code defined for zygosity {label!r}") from e


def heterozygous() -> pps2.OntologyClass:
    return allelic_state("heterozygous")


def homozygous() -> pps2.OntologyClass:
    return allelic_state("homozygous")


def hemizygous() -> pps2.OntologyClass:
    return allelic_state("hemizygous")


def unspecified_zygosity() -> pps2.OntologyClass:
    return allelic_state("unspecified zygosity")
