"""
Rule-based contract analyzer.
No AI / ML: regex, keyword matching and fixed scoring heuristics.

Pipeline: classify the document, detect red flags, extract key facts,
score the risk, then attach recommendations, clause annotations and a
negotiation playbook. Every function here is total over str input:
empty or garbage text yields empty collections, never an exception.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

import config
from clauses import Clause, annotate_clauses
from playbook import NegotiationSuggestion, build_negotiation_playbook
from rules import (
    CLEAN_CONTRACT_RECOMMENDATION,
    DOCUMENT_TYPE_RULES,
    GENERAL_DOCUMENT_TYPE,
    MANDATORY_MODALS,
    PARTY_ROLES,
    PAYMENT_UNITS,
    RECOMMENDATIONS,
    RECOMMENDED_MODALS,
    RED_FLAG_RULES,
    SEVERABILITY_FLAG,
    SEVERABILITY_TOKEN,
    SEVERITY_ORDER,
    RedFlagRule,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Data classes
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class DocumentTypeResult:
    type:       str      # category key, e.g. "nda" or "general"
    label:      str
    confidence: float    # 0–1


@dataclass
class DetectedFlag:
    id:            str
    name:          str
    severity:      str             # high | medium | low
    description:   str
    plain_english: str
    context:       Optional[str] = None   # ±80 chars around the first match
    matched:       Optional[str] = None


@dataclass
class KeyTerm:
    kind:  str    # financial | duration | percentage
    value: str


@dataclass
class Obligation:
    text:     str
    strength: str   # mandatory | recommended


@dataclass
class KeyFacts:
    key_terms:   List[KeyTerm]    = field(default_factory=list)
    dates:       List[str]        = field(default_factory=list)
    parties:     List[str]        = field(default_factory=list)
    obligations: List[Obligation] = field(default_factory=list)


@dataclass
class RiskAssessment:
    score: int
    level: str      # low | medium | high


@dataclass
class Recommendation:
    priority: str   # high | medium | low
    text:     str
    flag_id:  Optional[str] = None


@dataclass
class AnalysisResult:
    document_type:       DocumentTypeResult
    risk_score:          int
    risk_level:          str
    red_flags:           List[DetectedFlag]          = field(default_factory=list)
    key_terms:           List[KeyTerm]               = field(default_factory=list)
    dates:               List[str]                   = field(default_factory=list)
    parties:             List[str]                   = field(default_factory=list)
    obligations:         List[Obligation]            = field(default_factory=list)
    recommendations:     List[Recommendation]        = field(default_factory=list)
    clauses:             List[Clause]                = field(default_factory=list)
    clause_stats:        dict                        = field(default_factory=dict)
    negotiation:         List[NegotiationSuggestion] = field(default_factory=list)
    negotiation_summary: dict                        = field(default_factory=dict)
    word_count:          int = 0
    char_count:          int = 0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (for JSON / share storage)."""
        return {
            "document_type": {
                "type":       self.document_type.type,
                "label":      self.document_type.label,
                "confidence": self.document_type.confidence,
            },
            "risk_score": self.risk_score,
            "risk_level": self.risk_level,
            "red_flags": [
                {"id": f.id, "name": f.name, "severity": f.severity,
                 "description": f.description, "plain_english": f.plain_english,
                 "context": f.context, "matched": f.matched}
                for f in self.red_flags
            ],
            "key_terms":   [{"kind": k.kind, "value": k.value} for k in self.key_terms],
            "dates":       list(self.dates),
            "parties":     list(self.parties),
            "obligations": [{"text": o.text, "strength": o.strength} for o in self.obligations],
            "recommendations": [
                {"priority": r.priority, "text": r.text, "flag_id": r.flag_id}
                for r in self.recommendations
            ],
            "clauses":             [c.to_dict() for c in self.clauses],
            "clause_stats":        dict(self.clause_stats),
            "negotiation":         [s.to_dict() for s in self.negotiation],
            "negotiation_summary": dict(self.negotiation_summary),
            "word_count":          self.word_count,
            "char_count":          self.char_count,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "AnalysisResult":
        return cls(
            document_type=DocumentTypeResult(**d["document_type"]),
            risk_score=d["risk_score"],
            risk_level=d["risk_level"],
            red_flags=[DetectedFlag(**f) for f in d["red_flags"]],
            key_terms=[KeyTerm(**k) for k in d["key_terms"]],
            dates=d["dates"],
            parties=d["parties"],
            obligations=[Obligation(**o) for o in d["obligations"]],
            recommendations=[Recommendation(**r) for r in d["recommendations"]],
            clauses=[Clause.from_dict(c) for c in d["clauses"]],
            clause_stats=d["clause_stats"],
            negotiation=[NegotiationSuggestion.from_dict(s) for s in d["negotiation"]],
            negotiation_summary=d["negotiation_summary"],
            word_count=d["word_count"],
            char_count=d["char_count"],
        )


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _clean(text: str) -> str:
    return re.sub(r'\s+', ' ', text).strip()

def _dedupe(values: List[str]) -> List[str]:
    """Drop repeats, keep first-seen order."""
    return list(dict.fromkeys(values))


# ─────────────────────────────────────────────────────────────────────────────
# Document-type classification
# ─────────────────────────────────────────────────────────────────────────────

def classify_document(text: str) -> DocumentTypeResult:
    t = text.lower()
    scored = []
    for rule in DOCUMENT_TYPE_RULES:
        score = 0
        if rule.primary and re.search(rule.primary, t):
            score += config.PRIMARY_KEYWORD_POINTS
        if rule.secondary and re.search(rule.secondary, t):
            score += config.SECONDARY_KEYWORD_POINTS
        scored.append((rule, score))

    # sorted() is stable: equal scores keep declaration order
    best, top = sorted(scored, key=lambda pair: -pair[1])[0]
    if top == 0:
        return DocumentTypeResult(GENERAL_DOCUMENT_TYPE.key, GENERAL_DOCUMENT_TYPE.label,
                                  config.GENERAL_CONFIDENCE)
    return DocumentTypeResult(best.key, best.label,
                              min(top / config.CONFIDENCE_DENOMINATOR, 1.0))


# ─────────────────────────────────────────────────────────────────────────────
# Red-flag detection
# ─────────────────────────────────────────────────────────────────────────────

def _context_window(text: str, start: int, end: int) -> str:
    lo = max(0, start - config.CONTEXT_CHARS)
    hi = min(len(text), end + config.CONTEXT_CHARS)
    snippet = re.sub(r'\r?\n', ' ', text[lo:hi])
    return ("…" if lo > 0 else "") + snippet + ("…" if hi < len(text) else "")

def _flag(rule: RedFlagRule, context: Optional[str] = None,
          matched: Optional[str] = None) -> DetectedFlag:
    return DetectedFlag(
        id=rule.id,
        name=rule.name,
        severity=rule.severity,
        description=rule.description,
        plain_english=rule.plain_english,
        context=context,
        matched=matched,
    )

def detect_red_flags(text: str) -> List[DetectedFlag]:
    flags = []
    for rule in RED_FLAG_RULES:
        # first alternative that matches anywhere wins; later ones are not tried
        for pattern in rule.patterns:
            m = re.search(pattern, text, re.IGNORECASE)
            if m:
                flags.append(_flag(rule, _context_window(text, m.start(), m.end()), m.group(0)))
                break

    if SEVERABILITY_TOKEN not in text.lower():
        flags.append(_flag(SEVERABILITY_FLAG))

    return sorted(flags, key=lambda f: SEVERITY_ORDER[f.severity])


# ─────────────────────────────────────────────────────────────────────────────
# Key facts
# ─────────────────────────────────────────────────────────────────────────────

_MONEY_RE = re.compile(
    r'\$\s?\d[\d,]*(?:\.\d+)?'
    r'(?:\s*(?:per|/|an?|each)\s*(?:' + '|'.join(PAYMENT_UNITS) + r')\b)?',
    re.IGNORECASE,
)
_WRITTEN_AMOUNT_RE = re.compile(
    r'\b(?:sum|fee|amount|price|salary|compensation|payment) of\s+(?:[a-z]+[\s-]){1,8}?dollars\b',
    re.IGNORECASE,
)
_DURATION_RE = re.compile(
    r'\b(\d+)\)?\s+((?:business |calendar |working )?(?:day|week|month|year)s?)\b',
    re.IGNORECASE,
)
_PERCENT_RE = re.compile(r'\b\d+(?:\.\d+)?%')

_MONTHS = r'(?:January|February|March|April|May|June|July|August|September|October|November|December)'
_DATE_PATTERNS = (
    re.compile(r'\b' + _MONTHS + r'\s+\d{1,2}(?:st|nd|rd|th)?,?\s+\d{4}\b'
               r'|\b\d{1,2}(?:st|nd|rd|th)?\s+' + _MONTHS + r',?\s+\d{4}\b'),
    re.compile(r'\b\d{1,2}/\d{1,2}/(?:\d{4}|\d{2})\b'),
    re.compile(r'\b\d{4}-\d{2}-\d{2}\b'),
)

_BETWEEN_RE = re.compile(
    r"(?i:between)\s+([A-Z][\w&.,' -]{1,80}?)\s*\([^()]{0,120}\)\s*,?\s*"
    r"(?i:and)\s+([A-Z][\w&.,' -]{1,80}?)\s*\("
)

def _modal_pattern(modals) -> "re.Pattern":
    alternatives = '|'.join(re.escape(m).replace(r'\ ', r'\s+') for m in modals)
    return re.compile(r'\b(?:' + alternatives + r')\s+[^.;\n]{10,80}', re.IGNORECASE)

_OBLIGATION_PATTERNS = (
    ("mandatory",   _modal_pattern(MANDATORY_MODALS)),
    ("recommended", _modal_pattern(RECOMMENDED_MODALS)),
)


def _extract_key_terms(text: str) -> List[KeyTerm]:
    terms = []
    for m in _MONEY_RE.finditer(text):
        terms.append(KeyTerm("financial", _clean(m.group(0))))
    for m in _WRITTEN_AMOUNT_RE.finditer(text):
        terms.append(KeyTerm("financial", _clean(m.group(0))))
    for m in _DURATION_RE.finditer(text):
        terms.append(KeyTerm("duration", f"{m.group(1)} {m.group(2)}"))
    for m in _PERCENT_RE.finditer(text):
        terms.append(KeyTerm("percentage", m.group(0)))

    unique, seen = [], set()
    for term in terms:
        if term.value not in seen:
            seen.add(term.value)
            unique.append(term)
    return unique[:config.MAX_KEY_TERMS]

def _extract_dates(text: str) -> List[str]:
    found = []
    for pattern in _DATE_PATTERNS:
        found.extend(m.group(0) for m in pattern.finditer(text))
    return _dedupe(found)[:config.MAX_DATES]

def _extract_parties(text: str) -> List[str]:
    m = _BETWEEN_RE.search(text)
    if m:
        names = [m.group(1).strip(" ,"), m.group(2).strip(" ,")]
        return _dedupe([n for n in names if n])

    parties = []
    for role in PARTY_ROLES:
        defined = r'["“(]\s*(?:the\s+)?' + re.escape(role).replace(r'\ ', r'\s+') + r'\s*["”)]'
        if re.search(defined, text, re.IGNORECASE):
            parties.append(role.title())
    return parties[:config.MAX_PARTIES]

def _extract_obligations(text: str) -> List[Obligation]:
    obligations = []
    for strength, pattern in _OBLIGATION_PATTERNS:
        # cap is only checked between passes, so one pass may overshoot it
        if len(obligations) > config.OBLIGATION_SOFT_CAP:
            break
        for m in pattern.finditer(text):
            phrase = _clean(m.group(0))
            if config.OBLIGATION_MIN_CHARS <= len(phrase) <= config.OBLIGATION_MAX_CHARS:
                obligations.append(Obligation(phrase, strength))
    return obligations[:config.MAX_OBLIGATIONS]

def extract_key_facts(text: str) -> KeyFacts:
    return KeyFacts(
        key_terms=_extract_key_terms(text),
        dates=_extract_dates(text),
        parties=_extract_parties(text),
        obligations=_extract_obligations(text),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Risk scoring
# ─────────────────────────────────────────────────────────────────────────────

def score_risk(flags: List[DetectedFlag], text: str) -> RiskAssessment:
    score = config.BASE_RISK_SCORE
    score += sum(config.SEVERITY_WEIGHTS.get(f.severity, 0) for f in flags)
    if len(text) < config.SHORT_TEXT_CHARS:
        score += config.SHORT_TEXT_PENALTY
    score = max(config.MIN_RISK_SCORE, min(config.MAX_RISK_SCORE, score))

    if score >= config.HIGH_RISK_THRESHOLD:
        level = "high"
    elif score >= config.MEDIUM_RISK_THRESHOLD:
        level = "medium"
    else:
        level = "low"
    return RiskAssessment(score=score, level=level)


# ─────────────────────────────────────────────────────────────────────────────
# Recommendations
# ─────────────────────────────────────────────────────────────────────────────

def build_recommendations(flags: List[DetectedFlag]) -> List[Recommendation]:
    if not flags:
        priority, text = CLEAN_CONTRACT_RECOMMENDATION
        return [Recommendation(priority, text)]

    recommendations, seen = [], set()
    for flag in flags:
        if flag.id in RECOMMENDATIONS:
            priority, text = RECOMMENDATIONS[flag.id]
        else:
            priority = "high" if flag.severity == "high" else "medium"
            text = f"Review the {flag.name.lower()} provision and negotiate clearer, more balanced terms."
        if text in seen:
            continue
        seen.add(text)
        recommendations.append(Recommendation(priority, text, flag.id))
    return recommendations


# ─────────────────────────────────────────────────────────────────────────────
# Main entry point
# ─────────────────────────────────────────────────────────────────────────────

def analyze_contract(text: str) -> AnalysisResult:
    document_type = classify_document(text)
    flags = detect_red_flags(text)
    facts = extract_key_facts(text)
    risk = score_risk(flags, text)
    clause_report = annotate_clauses(text)
    playbook = build_negotiation_playbook(flags)

    logger.debug("analyzed %d chars: type=%s score=%d flags=%d clauses=%d",
                 len(text), document_type.type, risk.score, len(flags),
                 len(clause_report.clauses))

    return AnalysisResult(
        document_type=document_type,
        risk_score=risk.score,
        risk_level=risk.level,
        red_flags=flags,
        key_terms=facts.key_terms,
        dates=facts.dates,
        parties=facts.parties,
        obligations=facts.obligations,
        recommendations=build_recommendations(flags),
        clauses=clause_report.clauses,
        clause_stats=clause_report.stats,
        negotiation=playbook.suggestions,
        negotiation_summary=playbook.summary,
        word_count=len(text.split()),
        char_count=len(text),
    )
