"""
Export module: CSV reports for an AnalysisResult or ComparisonResult.
One file, several labelled sections, readable straight in a spreadsheet.
"""

import csv
import io

from analyzer import AnalysisResult
from compare import ComparisonResult


def _finish(buf: io.StringIO) -> bytes:
    return buf.getvalue().encode("utf-8-sig")  # BOM for Excel compatibility


def export_csv(result: AnalysisResult) -> bytes:
    buf = io.StringIO()
    w = csv.writer(buf)

    # ── Summary ──────────────────────────────────────────────────────────────
    w.writerow(["SUMMARY"])
    w.writerow(["Field", "Value"])
    w.writerow(["Document Type",  result.document_type.label])
    w.writerow(["Confidence",     f"{result.document_type.confidence:.2f}"])
    w.writerow(["Risk Score",     result.risk_score])
    w.writerow(["Risk Level",     result.risk_level])
    w.writerow(["Red Flags",      len(result.red_flags)])
    w.writerow(["Word Count",     result.word_count])
    w.writerow(["Char Count",     result.char_count])
    w.writerow([])

    # ── Red Flags ─────────────────────────────────────────────────────────────
    w.writerow(["RED FLAGS"])
    w.writerow(["Severity", "Flag", "Plain English", "Context"])
    for f in result.red_flags:
        w.writerow([f.severity, f.name, f.plain_english, f.context or ""])
    w.writerow([])

    # ── Key Terms ────────────────────────────────────────────────────────────
    w.writerow(["KEY TERMS"])
    w.writerow(["Kind", "Value"])
    for k in result.key_terms:
        w.writerow([k.kind, k.value])
    w.writerow([])

    # ── Dates & Parties ──────────────────────────────────────────────────────
    w.writerow(["DATES/PARTIES"])
    w.writerow(["Kind", "Value"])
    for d in result.dates:
        w.writerow(["date", d])
    for p in result.parties:
        w.writerow(["party", p])
    w.writerow([])

    # ── Obligations ──────────────────────────────────────────────────────────
    w.writerow(["OBLIGATIONS"])
    w.writerow(["Strength", "Text"])
    for o in result.obligations:
        w.writerow([o.strength, o.text])
    w.writerow([])

    # ── Recommendations ──────────────────────────────────────────────────────
    w.writerow(["RECOMMENDATIONS"])
    w.writerow(["#", "Priority", "Recommendation"])
    for i, r in enumerate(result.recommendations, 1):
        w.writerow([i, r.priority, r.text])
    w.writerow([])

    # ── Clauses ──────────────────────────────────────────────────────────────
    w.writerow(["CLAUSES"])
    w.writerow(["#", "Title", "Risk", "Annotations"])
    for c in result.clauses:
        w.writerow([c.index, c.title, c.risk, " | ".join(a.name for a in c.annotations)])
    w.writerow([])

    # ── Negotiation Playbook ─────────────────────────────────────────────────
    w.writerow(["NEGOTIATION PLAYBOOK"])
    w.writerow(["Priority", "Flag", "Tip", "Suggested Language"])
    for s in result.negotiation:
        w.writerow([s.priority, s.flag_name, s.negotiation_tip, s.suggested_language or ""])

    return _finish(buf)


def export_comparison_csv(comparison: ComparisonResult) -> bytes:
    buf = io.StringIO()
    w = csv.writer(buf)

    w.writerow(["COMPARISON"])
    w.writerow(["Field", "First", "Second"])
    w.writerow(["Document Type", comparison.first.document_type.label,
                comparison.second.document_type.label])
    w.writerow(["Risk Score", comparison.first.risk_score, comparison.second.risk_score])
    w.writerow(["Risk Level", comparison.first.risk_level, comparison.second.risk_level])
    w.writerow(["Red Flags", len(comparison.first.red_flags), len(comparison.second.red_flags)])
    w.writerow(["Safer", comparison.safer, ""])
    w.writerow(["Risk Delta", comparison.risk_delta, ""])
    w.writerow([])

    w.writerow(["RED FLAGS"])
    w.writerow(["Found In", "Severity", "Flag"])
    for label, flags in (("first only", comparison.flags_only_in_first),
                         ("second only", comparison.flags_only_in_second),
                         ("both", comparison.flags_in_both)):
        for f in flags:
            w.writerow([label, f.severity, f.name])
    w.writerow([])

    w.writerow(["SUMMARY"])
    for line in comparison.summary:
        w.writerow([line])

    return _finish(buf)
