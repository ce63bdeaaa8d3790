from analyzer import DetectedFlag, detect_red_flags
from playbook import NegotiationSuggestion, build_negotiation_playbook
from rules import GENERIC_LEVERAGE_POINTS, GENERIC_NEGOTIATION_TIP, NEGOTIATION_TEMPLATES, PRIORITY_ORDER


def _flag(flag_id, severity, context=None, plain_english="plain words"):
    return DetectedFlag(flag_id, flag_id.replace("_", " ").title(), severity,
                        "description text", plain_english, context, None)


def test_templated_flag_carries_template_fields():
    flag = _flag("unlimited_liability", "high", context="…has unlimited liability…")
    suggestion = build_negotiation_playbook([flag]).suggestions[0]
    template = NEGOTIATION_TEMPLATES["unlimited_liability"]

    assert suggestion.priority == "must-negotiate"
    assert suggestion.problematic_clause == "…has unlimited liability…"
    assert suggestion.why_risky == "plain words"
    assert suggestion.suggested_language == template.suggested_language
    assert suggestion.negotiation_tip == template.tip
    assert suggestion.leverage_points == list(template.leverage_points)


def test_why_risky_falls_back_to_description():
    suggestion = build_negotiation_playbook([_flag("non_compete", "high", plain_english="")]).suggestions[0]
    assert suggestion.why_risky == "description text"


def test_untemplated_flags_get_generic_suggestion():
    suggestions = build_negotiation_playbook([
        _flag("made_up_high", "high"),
        _flag("made_up_medium", "medium"),
        _flag("vague_scope", "low"),
    ]).suggestions

    assert [s.priority for s in suggestions] == ["must-negotiate", "should-negotiate", "nice-to-have"]
    for s in suggestions:
        assert s.suggested_language is None
        assert s.negotiation_tip == GENERIC_NEGOTIATION_TIP
        assert s.leverage_points == list(GENERIC_LEVERAGE_POINTS)
        assert len(s.leverage_points) == 2


def test_sorted_by_priority_keeping_detection_order():
    flags = [
        _flag("severability_missing", "low"),
        _flag("auto_renewal", "medium"),
        _flag("non_compete", "high"),
        _flag("mandatory_arbitration", "medium"),
        _flag("ip_assignment", "high"),
    ]
    suggestions = build_negotiation_playbook(flags).suggestions
    assert [s.flag_id for s in suggestions] == [
        "non_compete", "ip_assignment", "auto_renewal", "mandatory_arbitration", "severability_missing",
    ]


def test_summary_counts(risky_contract):
    flags = detect_red_flags(risky_contract)
    playbook = build_negotiation_playbook(flags)
    summary = playbook.summary

    assert summary["total"] == len(flags)
    assert summary["must_negotiate"] + summary["should_negotiate"] + summary["nice_to_have"] == summary["total"]
    ranks = [PRIORITY_ORDER[s.priority] for s in playbook.suggestions]
    assert ranks == sorted(ranks)


def test_empty_flags_give_empty_playbook():
    playbook = build_negotiation_playbook([])
    assert playbook.suggestions == []
    assert playbook.summary == {"total": 0, "must_negotiate": 0, "should_negotiate": 0, "nice_to_have": 0}


def test_suggestion_round_trip():
    suggestion = build_negotiation_playbook([_flag("auto_renewal", "medium")]).suggestions[0]
    assert NegotiationSuggestion.from_dict(suggestion.to_dict()) == suggestion
