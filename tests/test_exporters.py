import csv
import io

from analyzer import analyze_contract
from compare import compare_contracts
from exporters import export_comparison_csv, export_csv

SECTIONS = [
    "SUMMARY", "RED FLAGS", "KEY TERMS", "DATES/PARTIES", "OBLIGATIONS",
    "RECOMMENDATIONS", "CLAUSES", "NEGOTIATION PLAYBOOK",
]


def _rows(payload: bytes):
    assert payload.startswith(b"\xef\xbb\xbf")
    return list(csv.reader(io.StringIO(payload.decode("utf-8-sig"))))


def test_csv_has_every_section_in_order(risky_contract):
    rows = _rows(export_csv(analyze_contract(risky_contract)))
    headers = [r[0] for r in rows if len(r) == 1 and r[0] in SECTIONS]
    assert headers == SECTIONS


def test_csv_contains_flags_and_parties(risky_contract):
    rows = _rows(export_csv(analyze_contract(risky_contract)))
    flat = [cell for row in rows for cell in row]
    assert "Unlimited Liability" in flat
    assert ["party", "Acme Corp"] in rows
    assert ["Risk Score", "100"] in rows


def test_csv_is_deterministic(risky_contract):
    result = analyze_contract(risky_contract)
    assert export_csv(result) == export_csv(result)


def test_comparison_csv(neutral_contract, risky_contract):
    rows = _rows(export_comparison_csv(compare_contracts(neutral_contract, risky_contract)))
    assert rows[0] == ["COMPARISON"]
    assert ["Safer", "first", ""] in rows
    assert any(r[:1] == ["second only"] for r in rows)
    assert ["both", "low", "Missing Severability Clause"] in rows
