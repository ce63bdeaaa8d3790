import pytest

from analyzer import analyze_contract, classify_document, detect_red_flags
from contract_templates import TEMPLATES, get_template, list_templates, template_categories

EXPECTED_IDS = [
    "nda-mutual", "nda-one-way", "freelance-services", "saas-terms", "consulting-agreement",
    "employment-offer", "independent-contractor", "software-license", "partnership-agreement",
    "non-compete",
]


def test_catalog_ids_in_order():
    assert [t.id for t in list_templates()] == EXPECTED_IDS


def test_filter_by_category_is_case_insensitive():
    ids = [t.id for t in list_templates("confidentiality")]
    assert ids == ["nda-mutual", "nda-one-way"]
    assert list_templates("no such category") == []


def test_categories_first_seen_order():
    assert template_categories() == [
        "Confidentiality", "Services", "Technology", "Employment", "Business Formation",
    ]


def test_get_unknown_template_raises():
    with pytest.raises(KeyError):
        get_template("does-not-exist")


def test_to_dict_can_omit_text():
    template = get_template("nda-mutual")
    assert "text" not in template.to_dict(include_text=False)
    assert template.to_dict()["text"] == template.text


@pytest.mark.parametrize("template_id", ["nda-mutual", "nda-one-way"])
def test_nda_templates_classify_as_nda(template_id):
    assert classify_document(get_template(template_id).text).type == "nda"


def test_non_compete_template_raises_non_compete_flag():
    ids = [f.id for f in detect_red_flags(get_template("non-compete").text)]
    assert "non_compete" in ids


@pytest.mark.parametrize("template", TEMPLATES, ids=lambda t: t.id)
def test_every_template_has_severability_and_structure(template):
    result = analyze_contract(template.text)
    assert "severability_missing" not in [f.id for f in result.red_flags]
    assert len(result.clauses) >= 3
    assert template.risk_level in ("low", "medium", "high")
