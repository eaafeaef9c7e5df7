"""
Tests for the fixed vocabularies: onset terms, allelic states, laterality and UCUM units.
"""

import pytest

from ppktools.constants import allelic_state, laterality, onset, units
from ppktools.curie import is_valid_curie


EXPECTED_ONSETS = {
    "Antenatal onset": "HP:0030674",
    "Embryonal onset": "HP:0011460",
    "Fetal onset": "HP:0011461",
    "Late first trimester onset": "HP:0034199",
    "Second trimester onset": "HP:0034198",
    "Third trimester onset": "HP:0034197",
    "Congenital onset": "HP:0003577",
    "Neonatal onset": "HP:0003623",
    "Infantile onset": "HP:0003593",
    "Childhood onset": "HP:0011463",
    "Juvenile onset": "HP:0003621",
    "Adult onset": "HP:0003581",
    "Young adult onset": "HP:0011462",
    "Early young adult onset": "HP:0025708",
    "Intermediate young adult onset": "HP:0025709",
    "Late young adult onset": "HP:0025710",
    "Middle age onset": "HP:0003596",
    "Late onset": "HP:0003584",
}


@pytest.mark.parametrize("label, term_id", sorted(EXPECTED_ONSETS.items()))
def test_onset_lookup_by_label(label, term_id):
    clz = onset.get_onset_by_label(label)
    assert clz.id == term_id
    assert clz.label == label


def test_onset_table_has_eighteen_terms_in_order():
    terms = onset.onset_terms()
    assert len(terms) == 18
    assert terms[0].id == "HP:0030674"
    assert terms[-1].id == "HP:0003584"
    assert list(onset.onset_labels()) == [t.label for t in terms]


@pytest.mark.parametrize("label", ["congenital onset", "Congenital", " Congenital onset", "Pediatric onset"])
def test_unknown_onset_label_returns_none(label):
    assert onset.get_onset_by_label(label) is None


def test_onset_lookups_return_independent_copies():
    clz = onset.congenital_onset()
    clz.id = "HP:9999999"
    assert onset.congenital_onset().id == "HP:0003577"
    assert onset.get_onset_by_label("Congenital onset").id == "HP:0003577"


@pytest.mark.parametrize(
    "accessor, term_id",
    [
        (onset.antenatal_onset, "HP:0030674"),
        (onset.fetal_onset, "HP:0011461"),
        (onset.neonatal_onset, "HP:0003623"),
        (onset.infantile_onset, "HP:0003593"),
        (onset.childhood_onset, "HP:0011463"),
        (onset.adult_onset, "HP:0003581"),
        (onset.middle_age_onset, "HP:0003596"),
        (onset.late_onset, "HP:0003584"),
    ],
)
def test_named_onset_accessors(accessor, term_id):
    assert accessor().id == term_id


@pytest.mark.parametrize(
    "factory, term_id, label",
    [
        (allelic_state.heterozygous, "GENO:0000135", "heterozygous"),
        (allelic_state.homozygous, "GENO:0000136", "homozygous"),
        (allelic_state.hemizygous, "GENO:0000134", "hemizygous"),
        (allelic_state.unspecified_zygosity, "GENO:0000137", "unspecified zygosity"),
    ],
)
def test_allelic_states(factory, term_id, label):
    clz = factory()
    assert (clz.id, clz.label) == (term_id, label)


def test_unknown_allelic_state_raises():
    with pytest.raises(ValueError, match="mosaic"):
        allelic_state.allelic_state("mosaic")


@pytest.mark.parametrize(
    "factory, term_id",
    [
        (laterality.right, "HP:0012834"),
        (laterality.left, "HP:0012835"),
        (laterality.unilateral, "HP:0012833"),
        (laterality.bilateral, "HP:0012832"),
    ],
)
def test_laterality_terms_are_valid_hpo_ids(factory, term_id):
    clz = factory()
    assert clz.id == term_id
    assert is_valid_curie(clz.id)


def test_units():
    assert units.kilogram().id == "UCUM:kg"
    assert units.mm_hg().label == "millimetres of mercury"
    assert units.unit("mg.dL-1") == units.milligram_per_deciliter()


def test_unknown_unit_raises():
    with pytest.raises(ValueError):
        units.unit("furlong")
