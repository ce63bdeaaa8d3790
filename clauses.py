"""
Clause segmentation and per-clause risk annotation.

Segmentation is a staged fallback: numbered / lettered structure first,
blank-line paragraphs second, the whole text as one clause last. Each
resulting clause is then checked against CLAUSE_RULES on its own.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

import config
from rules import CLAUSE_RULES, COLOR_ORDER

_STRUCTURE_TOKEN = (
    r"(?:"
    r"(?:[Ss]ection|SECTION|[Aa]rticle|ARTICLE|[Cc]lause|CLAUSE)\s+\d+(?:\.\d+)*[.:]?"
    r"|\d+(?:\.\d+)+\.?"
    r"|\d+\."
    r"|[A-Z]\."
    r"|(?:i{1,3}|iv|vi{0,3}|ix|x)\."
    r")"
)

# a marker must sit at line start and be followed by whitespace
_MARKER_RE = re.compile(r"^[ \t]*" + _STRUCTURE_TOKEN + r"(?=\s)", re.MULTILINE)
_LEADING_TOKEN_RE = re.compile(r"^\s*" + _STRUCTURE_TOKEN + r"(?=\s|$)\s*")
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


@dataclass
class ClauseAnnotation:
    rule_id:     str
    name:        str
    severity:    str
    color:       str              # red | yellow | green
    explanation: str
    suggestion:  Optional[str] = None
    matched:     Optional[str] = None


@dataclass
class Clause:
    index:       int              # 1-based
    title:       str
    text:        str
    risk:        str              # red | yellow | green
    annotations: List[ClauseAnnotation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "title": self.title,
            "text":  self.text,
            "risk":  self.risk,
            "annotations": [
                {"rule_id": a.rule_id, "name": a.name, "severity": a.severity,
                 "color": a.color, "explanation": a.explanation,
                 "suggestion": a.suggestion, "matched": a.matched}
                for a in self.annotations
            ],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Clause":
        return cls(
            index=d["index"],
            title=d["title"],
            text=d["text"],
            risk=d["risk"],
            annotations=[ClauseAnnotation(**a) for a in d.get("annotations", [])],
        )


@dataclass
class ClauseReport:
    clauses: List[Clause]
    stats:   dict

    def to_dict(self) -> dict:
        return {"clauses": [c.to_dict() for c in self.clauses], "stats": dict(self.stats)}


# ─────────────────────────────────────────────────────────────────────────────
# Segmentation
# ─────────────────────────────────────────────────────────────────────────────

def _split_on_markers(text: str, markers: list) -> List[str]:
    segments = []
    first = markers[0].start()
    if first > config.PREAMBLE_MIN_CHARS:
        preamble = text[:first].strip()
        if preamble:
            segments.append(preamble)

    bounds = [m.start() for m in markers] + [len(text)]
    for start, end in zip(bounds, bounds[1:]):
        chunk = text[start:end].strip()
        if chunk:
            segments.append(chunk)
    return segments

def segment_clauses(text: str) -> List[str]:
    """Split text into clause bodies. Always returns at least one entry."""
    markers = list(_MARKER_RE.finditer(text))
    if len(markers) >= config.MIN_STRUCTURAL_MARKERS:
        return _split_on_markers(text, markers)

    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK_RE.split(text)]
    paragraphs = [p for p in paragraphs if len(p) > config.MIN_PARAGRAPH_CHARS]
    if paragraphs:
        return paragraphs

    return [text.strip()]


def clause_title(body: str, index: int) -> str:
    first_line = body.strip().split("\n", 1)[0]
    title = _LEADING_TOKEN_RE.sub("", first_line, count=1)
    title = re.sub(r"[:.]+$", "", title.strip()).strip()
    if not title:
        return f"Clause {index}"
    if len(title) > config.MAX_TITLE_CHARS:
        title = title[:config.MAX_TITLE_CHARS].rstrip() + "…"
    return title


# ─────────────────────────────────────────────────────────────────────────────
# Annotation
# ─────────────────────────────────────────────────────────────────────────────

def _annotate(body: str) -> List[ClauseAnnotation]:
    hits = []
    for rule in CLAUSE_RULES:
        for pattern in rule.patterns:
            m = re.search(pattern, body, re.IGNORECASE)
            if m:
                hits.append(ClauseAnnotation(
                    rule_id=rule.id,
                    name=rule.name,
                    severity=rule.severity,
                    color=rule.color,
                    explanation=rule.plain_english,
                    suggestion=rule.suggestion,
                    matched=m.group(0),
                ))
                break
    return hits

def _clause_risk(annotations: List[ClauseAnnotation]) -> str:
    if not annotations:
        return "green"
    return min((a.color for a in annotations), key=lambda c: COLOR_ORDER[c])


def annotate_clauses(text: str) -> ClauseReport:
    clauses = []
    for i, body in enumerate(segment_clauses(text), start=1):
        annotations = _annotate(body)
        clauses.append(Clause(
            index=i,
            title=clause_title(body, i),
            text=body,
            risk=_clause_risk(annotations),
            annotations=annotations,
        ))

    stats = {
        "total":   len(clauses),
        "safe":    sum(1 for c in clauses if c.risk == "green"),
        "caution": sum(1 for c in clauses if c.risk == "yellow"),
        "danger":  sum(1 for c in clauses if c.risk == "red"),
    }
    return ClauseReport(clauses=clauses, stats=stats)
