from compare import ComparisonResult, compare_contracts


def test_non_compete_only_in_second(neutral_contract):
    text_b = neutral_contract + "The Supplier agrees to a non-compete restriction for one year. "
    result = compare_contracts(neutral_contract, text_b)

    assert [f.id for f in result.flags_only_in_second] == ["non_compete"]
    assert result.flags_only_in_first == []
    assert [f.id for f in result.flags_in_both] == ["severability_missing"]


def test_risk_delta_and_safer_side(neutral_contract):
    text_b = neutral_contract + "The Supplier agrees to a non-compete restriction for one year. "
    result = compare_contracts(neutral_contract, text_b)

    assert result.risk_delta == result.second.risk_score - result.first.risk_score == 12
    assert result.safer == "first"
    assert compare_contracts(text_b, neutral_contract).safer == "second"


def test_equal_scores_favour_first(neutral_contract):
    result = compare_contracts(neutral_contract, neutral_contract)
    assert result.risk_delta == 0
    assert result.safer == "first"
    assert result.summary == [f"Both contracts carry similar risk ({result.first.risk_score}/100)."]


def test_symmetry(neutral_contract, risky_contract):
    forward = compare_contracts(neutral_contract, risky_contract)
    backward = compare_contracts(risky_contract, neutral_contract)

    assert [f.id for f in forward.flags_only_in_first] == [f.id for f in backward.flags_only_in_second]
    assert [f.id for f in forward.flags_only_in_second] == [f.id for f in backward.flags_only_in_first]
    assert forward.risk_delta == -backward.risk_delta


def test_summary_mentions_unique_flags_and_types(neutral_contract, risky_contract):
    result = compare_contracts(neutral_contract, risky_contract)
    summary = " ".join(result.summary)

    assert result.summary[0].startswith("The first contract is safer")
    assert "Only the second contract has:" in summary
    assert "Non-Compete" in summary
    assert "Only the first contract has:" not in summary
    assert "different document types" in summary


def test_comparison_round_trip(neutral_contract, risky_contract):
    result = compare_contracts(neutral_contract, risky_contract)
    assert ComparisonResult.from_dict(result.to_dict()) == result
