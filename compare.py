"""
compare.py: Side-by-side comparison of two contracts.

Produces:
  • Both full analyses
  • The risk delta and which side is safer
  • The red-flag partition (only in first / only in second / in both)
  • A few plain-English summary sentences
"""

import logging
from dataclasses import dataclass, field
from typing import List

from analyzer import AnalysisResult, DetectedFlag, analyze_contract

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Data classes
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ComparisonResult:
    first:                AnalysisResult
    second:               AnalysisResult
    risk_delta:           int                  # second score minus first score
    safer:                str                  # "first" | "second"
    flags_only_in_first:  List[DetectedFlag] = field(default_factory=list)
    flags_only_in_second: List[DetectedFlag] = field(default_factory=list)
    flags_in_both:        List[DetectedFlag] = field(default_factory=list)   # as found in first
    summary:              List[str]          = field(default_factory=list)

    def to_dict(self) -> dict:
        first = self.first.to_dict()
        second = self.second.to_dict()
        return {
            "first":      first,
            "second":     second,
            "risk_delta": self.risk_delta,
            "safer":      self.safer,
            "flags_only_in_first":  _flag_dicts(self.flags_only_in_first),
            "flags_only_in_second": _flag_dicts(self.flags_only_in_second),
            "flags_in_both":        _flag_dicts(self.flags_in_both),
            "summary":    list(self.summary),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ComparisonResult":
        return cls(
            first=AnalysisResult.from_dict(d["first"]),
            second=AnalysisResult.from_dict(d["second"]),
            risk_delta=d["risk_delta"],
            safer=d["safer"],
            flags_only_in_first=[DetectedFlag(**f) for f in d["flags_only_in_first"]],
            flags_only_in_second=[DetectedFlag(**f) for f in d["flags_only_in_second"]],
            flags_in_both=[DetectedFlag(**f) for f in d["flags_in_both"]],
            summary=d.get("summary", []),
        )


def _flag_dicts(flags: List[DetectedFlag]) -> List[dict]:
    return [
        {"id": f.id, "name": f.name, "severity": f.severity,
         "description": f.description, "plain_english": f.plain_english,
         "context": f.context, "matched": f.matched}
        for f in flags
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Summary text
# ─────────────────────────────────────────────────────────────────────────────

def _build_summary(first: AnalysisResult, second: AnalysisResult,
                   only_first: List[DetectedFlag], only_second: List[DetectedFlag]) -> List[str]:
    lines = []

    gap = second.risk_score - first.risk_score
    if gap == 0:
        lines.append(f"Both contracts carry similar risk ({first.risk_score}/100).")
    else:
        safer, riskier = ("first", "second") if gap > 0 else ("second", "first")
        lines.append(
            f"The {safer} contract is safer: it scores "
            f"{min(first.risk_score, second.risk_score)}/100 against "
            f"{max(first.risk_score, second.risk_score)}/100 for the {riskier} "
            f"({abs(gap)} point{'s' if abs(gap) != 1 else ''} apart)."
        )

    if only_first:
        lines.append(f"Only the first contract has: {', '.join(f.name for f in only_first)}.")
    if only_second:
        lines.append(f"Only the second contract has: {', '.join(f.name for f in only_second)}.")

    if first.document_type.type != second.document_type.type:
        lines.append(
            f"The contracts look like different document types "
            f"({first.document_type.label} vs {second.document_type.label}), "
            f"so some differences may be expected."
        )
    return lines


# ─────────────────────────────────────────────────────────────────────────────
# Main entry point
# ─────────────────────────────────────────────────────────────────────────────

def compare_results(first: AnalysisResult, second: AnalysisResult) -> ComparisonResult:
    """Diff two finished analyses. Flags are matched by rule id."""
    first_ids = {f.id for f in first.red_flags}
    second_ids = {f.id for f in second.red_flags}

    only_first = [f for f in first.red_flags if f.id not in second_ids]
    only_second = [f for f in second.red_flags if f.id not in first_ids]
    in_both = [f for f in first.red_flags if f.id in second_ids]

    # ties favour the first contract
    safer = "first" if first.risk_score <= second.risk_score else "second"

    logger.debug("compared: scores=%d/%d only_first=%d only_second=%d both=%d",
                 first.risk_score, second.risk_score, len(only_first), len(only_second), len(in_both))

    return ComparisonResult(
        first=first,
        second=second,
        risk_delta=second.risk_score - first.risk_score,
        safer=safer,
        flags_only_in_first=only_first,
        flags_only_in_second=only_second,
        flags_in_both=in_both,
        summary=_build_summary(first, second, only_first, only_second),
    )


def compare_contracts(text_a: str, text_b: str) -> ComparisonResult:
    return compare_results(analyze_contract(text_a), analyze_contract(text_b))
