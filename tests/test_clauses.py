from clauses import Clause, annotate_clauses, clause_title, segment_clauses


def test_three_numbered_lines_become_three_clauses():
    text = ("1. The Supplier delivers goods monthly.\n"
            "2. The Buyer pays each invoice on time.\n"
            "3. Either side may end this with notice.")
    report = annotate_clauses(text)
    assert len(report.clauses) == 3
    assert [c.title for c in report.clauses] == [
        "The Supplier delivers goods monthly",
        "The Buyer pays each invoice on time",
        "Either side may end this with notice",
    ]
    assert [c.index for c in report.clauses] == [1, 2, 3]


def test_preamble_kept_when_first_marker_is_far_in():
    text = ("This Services Agreement is made by the parties listed below today.\n"
            "1. Services are provided monthly.\n"
            "2. Fees are paid quarterly in arrears.\n"
            "3. Either party may terminate with notice.")
    clauses = segment_clauses(text)
    assert len(clauses) == 4
    assert clauses[0].startswith("This Services Agreement")
    assert clause_title(clauses[0], 1) == "This Services Agreement is made by the parties listed below today"


def test_short_lead_in_is_not_a_preamble():
    text = "Terms\n1. First numbered item.\n2. Second numbered item.\n3. Third numbered item."
    clauses = segment_clauses(text)
    assert len(clauses) == 3
    assert clauses[0] == "1. First numbered item."


def test_two_markers_fall_back_to_paragraphs():
    text = ("1. Only two numbered items here in this text.\n"
            "2. So paragraphs decide the split.\n\n"
            "A separate paragraph that is long enough.\n\n"
            "tiny")
    clauses = segment_clauses(text)
    assert clauses == [
        "1. Only two numbered items here in this text.\n2. So paragraphs decide the split.",
        "A separate paragraph that is long enough.",
    ]


def test_whole_text_when_nothing_else_fits():
    assert segment_clauses("tiny") == ["tiny"]
    report = annotate_clauses("")
    assert len(report.clauses) == 1
    assert report.clauses[0].title == "Clause 1"


def test_letter_and_section_markers():
    lettered = "A. First item here\nB. Second item here\nC. Third item here"
    assert [clause_title(c, i) for i, c in enumerate(segment_clauses(lettered), 1)] == [
        "First item here", "Second item here", "Third item here",
    ]

    sections = ("Section 1: Scope of work\nThe work is described below.\n"
                "Section 2: Payment\nPayment is monthly.\n"
                "Section 3: Term\nOne year.")
    assert [clause_title(c, i) for i, c in enumerate(segment_clauses(sections), 1)] == [
        "Scope of work", "Payment", "Term",
    ]


def test_roman_numeral_markers():
    text = "i. first point in the list\nii. second point in the list\niv. fourth point in the list"
    assert len(segment_clauses(text)) == 3


def test_nested_decimal_numbering_splits():
    text = "1. Fees\n1.1 Rate is hourly.\n1.2 Invoices are monthly.\n2. Term\nOne year."
    titles = [clause_title(c, i) for i, c in enumerate(segment_clauses(text), 1)]
    assert titles == ["Fees", "Rate is hourly", "Invoices are monthly", "Term"]


def test_long_titles_truncated_with_ellipsis():
    long_line = "W" * 120
    title = clause_title(f"1. {long_line}\nbody", 1)
    assert title == "W" * 80 + "…"


def test_empty_title_defaults_to_clause_number():
    assert clause_title("4.", 4) == "Clause 4"


def test_clause_risk_is_worst_annotation():
    text = ("1. The Vendor has unlimited liability for everything it does.\n"
            "2. This Agreement will automatically renew each year.\n"
            "3. This Agreement is governed by the laws of Delaware.\n"
            "4. Deliveries happen every Tuesday morning.")
    report = annotate_clauses(text)
    assert [c.risk for c in report.clauses] == ["red", "yellow", "green", "green"]
    assert report.clauses[0].annotations[0].rule_id == "uncapped_liability"
    assert report.clauses[1].annotations[0].rule_id == "renews_automatically"
    assert report.clauses[2].annotations[0].rule_id == "governing_law"
    assert report.clauses[3].annotations == []
    assert report.stats == {"total": 4, "safe": 2, "caution": 1, "danger": 1}


def test_red_wins_over_green_in_same_clause():
    text = ("1. Governing law is Delaware but the Vendor has unlimited liability.\n"
            "2. Second clause with no risk at all.\n"
            "3. Third clause with no risk at all.")
    first = annotate_clauses(text).clauses[0]
    assert first.risk == "red"
    assert {a.color for a in first.annotations} == {"red", "green"}


def test_stats_sum_to_clause_count(risky_contract):
    stats = annotate_clauses(risky_contract).stats
    assert stats["safe"] + stats["caution"] + stats["danger"] == stats["total"]


def test_clause_round_trip(risky_contract):
    for clause in annotate_clauses(risky_contract).clauses:
        assert Clause.from_dict(clause.to_dict()) == clause
