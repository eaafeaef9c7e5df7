"""Laterality of findings (HPO 'Laterality' subtree)."""

import phenopackets.schema.v2 as pps2


def right() -> pps2.OntologyClass:
    return pps2.OntologyClass(id="HP:0012834", label="Right")


def left() -> pps2.OntologyClass:
    return pps2.OntologyClass(id="HP:0012835", label="Left")


def unilateral() -> pps2.OntologyClass:
    return pps2.OntologyClass(id="HP:0012833", label="Unilateral")


def bilateral() -> pps2.OntologyClass:
    return pps2.OntologyClass(id="HP:0012832", label="Bilateral")
