"""
Negotiation playbook: turns detected red flags into prioritized asks
with replacement language, a tip and leverage points.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from rules import (
    GENERIC_LEVERAGE_POINTS,
    GENERIC_NEGOTIATION_TIP,
    GENERIC_PRIORITY_BY_SEVERITY,
    NEGOTIATION_TEMPLATES,
    PRIORITY_ORDER,
)

if TYPE_CHECKING:
    from analyzer import DetectedFlag


@dataclass
class NegotiationSuggestion:
    flag_id:            str
    flag_name:          str
    severity:           str
    priority:           str             # must-negotiate | should-negotiate | nice-to-have
    problematic_clause: Optional[str]
    why_risky:          str
    suggested_language: Optional[str]
    negotiation_tip:    str
    leverage_points:    List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "flag_id":            self.flag_id,
            "flag_name":          self.flag_name,
            "severity":           self.severity,
            "priority":           self.priority,
            "problematic_clause": self.problematic_clause,
            "why_risky":          self.why_risky,
            "suggested_language": self.suggested_language,
            "negotiation_tip":    self.negotiation_tip,
            "leverage_points":    list(self.leverage_points),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "NegotiationSuggestion":
        return cls(**{**d, "leverage_points": list(d.get("leverage_points", []))})


@dataclass
class Playbook:
    suggestions: List[NegotiationSuggestion]
    summary:     dict

    def to_dict(self) -> dict:
        return {"suggestions": [s.to_dict() for s in self.suggestions], "summary": dict(self.summary)}


def _suggest(flag: "DetectedFlag") -> NegotiationSuggestion:
    why = flag.plain_english or flag.description
    template = NEGOTIATION_TEMPLATES.get(flag.id)
    if template is None:
        return NegotiationSuggestion(
            flag_id=flag.id,
            flag_name=flag.name,
            severity=flag.severity,
            priority=GENERIC_PRIORITY_BY_SEVERITY.get(flag.severity, "nice-to-have"),
            problematic_clause=flag.context,
            why_risky=why,
            suggested_language=None,
            negotiation_tip=GENERIC_NEGOTIATION_TIP,
            leverage_points=list(GENERIC_LEVERAGE_POINTS),
        )
    return NegotiationSuggestion(
        flag_id=flag.id,
        flag_name=flag.name,
        severity=flag.severity,
        priority=template.priority,
        problematic_clause=flag.context,
        why_risky=why,
        suggested_language=template.suggested_language,
        negotiation_tip=template.tip,
        leverage_points=list(template.leverage_points),
    )


def build_negotiation_playbook(flags: List["DetectedFlag"]) -> Playbook:
    # stable: same-tier suggestions stay in detection order
    suggestions = sorted((_suggest(f) for f in flags), key=lambda s: PRIORITY_ORDER[s.priority])
    summary = {
        "total":            len(suggestions),
        "must_negotiate":   sum(1 for s in suggestions if s.priority == "must-negotiate"),
        "should_negotiate": sum(1 for s in suggestions if s.priority == "should-negotiate"),
        "nice_to_have":     sum(1 for s in suggestions if s.priority == "nice-to-have"),
    }
    return Playbook(suggestions=suggestions, summary=summary)
