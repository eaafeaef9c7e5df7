"""
UCUM units of measurement.

UCUM codes contain brackets, dots and minus signs, so these terms are built
directly rather than through the CURIE validator.
"""

import phenopackets.schema.v2 as pps2

# UCUM code -> human-readable label
_UNITS = {
    "degree": "degree (plane angle)",
    "[diop]": "diopter",
    "g": "gram",
    "g.kg-1": "gram per kilogram",
    "kg": "kilogram",
    "L": "liter",
    "m": "meter",
    "ug": "microgram",
    "ug.dL-1": "microgram per deciliter",
    "ug.L-1": "microgram per liter",
    "uL": "microliter",
    "um": "micrometer",
    "mg": "milligram",
    "mg.d-1": "milligram per day",
    "mg.dL-1": "milligram per deciliter",
    "mg.kg-1": "milligram per kilogram",
    "mL": "milliliter",
    "mm": "millimeter",
    "mm[Hg]": "millimetres of mercury",
    "mmol": "millimole",
    "mol": "mole",
    "mol.L-1": "mole per liter",
    "mol.mL-1": "mole per milliliter",
    "U.L-1": "enzyme unit per liter",
}


def unit(code: str) -> pps2.OntologyClass:
    """Return the UCUM OntologyClass for `code` (e.g. 'mg.dL-1')."""
    try:
        label = _UNITS[code]
    except KeyError:
        raise ValueError(f"Unknown UCUM unit code: {code!r}")
    return pps2.OntologyClass(id=f"UCUM:{code}", label=label)


def gram() -> pps2.OntologyClass:
    return unit("g")


def kilogram() -> pps2.OntologyClass:
    return unit("kg")


def millimeter() -> pps2.OntologyClass:
    return unit("mm")


def milligram_per_deciliter() -> pps2.OntologyClass:
    return unit("mg.dL-1")


def mm_hg() -> pps2.OntologyClass:
    return unit("mm[Hg]")
