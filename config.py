"""
config.py: tunable constants for the contract analyzer.

Every value can be overridden with a CONTRACT_* environment variable.
The scoring and classification weights are empirical; keep them here
rather than inlining them in the engine.
"""

import os


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(f"CONTRACT_{name}", str(default)))

def _env_float(name: str, default: float) -> float:
    return float(os.environ.get(f"CONTRACT_{name}", str(default)))

def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(f"CONTRACT_{name}", "true" if default else "false")
    return raw.lower() in ("1", "true", "yes", "on")


# ── Risk scoring ─────────────────────────────────────────────────────────────
BASE_RISK_SCORE        = _env_int("BASE_RISK_SCORE", 20)
SEVERITY_WEIGHTS       = {
    "high":   _env_int("HIGH_FLAG_WEIGHT", 12),
    "medium": _env_int("MEDIUM_FLAG_WEIGHT", 6),
    "low":    _env_int("LOW_FLAG_WEIGHT", 3),
}
SHORT_TEXT_CHARS       = _env_int("SHORT_TEXT_CHARS", 500)
SHORT_TEXT_PENALTY     = _env_int("SHORT_TEXT_PENALTY", 10)
MIN_RISK_SCORE         = _env_int("MIN_RISK_SCORE", 5)
MAX_RISK_SCORE         = _env_int("MAX_RISK_SCORE", 100)
HIGH_RISK_THRESHOLD    = _env_int("HIGH_RISK_THRESHOLD", 70)
MEDIUM_RISK_THRESHOLD  = _env_int("MEDIUM_RISK_THRESHOLD", 40)

# ── Document-type classification ─────────────────────────────────────────────
PRIMARY_KEYWORD_POINTS   = _env_int("PRIMARY_KEYWORD_POINTS", 10)
SECONDARY_KEYWORD_POINTS = _env_int("SECONDARY_KEYWORD_POINTS", 5)
CONFIDENCE_DENOMINATOR   = _env_float("CONFIDENCE_DENOMINATOR", 15.0)
GENERAL_CONFIDENCE       = _env_float("GENERAL_CONFIDENCE", 0.3)

# ── Detection & extraction ───────────────────────────────────────────────────
CONTEXT_CHARS          = _env_int("CONTEXT_CHARS", 80)
MAX_KEY_TERMS          = _env_int("MAX_KEY_TERMS", 20)
MAX_DATES              = _env_int("MAX_DATES", 10)
MAX_PARTIES            = _env_int("MAX_PARTIES", 6)
MAX_OBLIGATIONS        = _env_int("MAX_OBLIGATIONS", 20)
OBLIGATION_SOFT_CAP    = _env_int("OBLIGATION_SOFT_CAP", 25)   # checked between passes only
OBLIGATION_MIN_CHARS   = _env_int("OBLIGATION_MIN_CHARS", 15)
OBLIGATION_MAX_CHARS   = _env_int("OBLIGATION_MAX_CHARS", 200)

# ── Clause segmentation ──────────────────────────────────────────────────────
MIN_STRUCTURAL_MARKERS = _env_int("MIN_STRUCTURAL_MARKERS", 3)
PREAMBLE_MIN_CHARS     = _env_int("PREAMBLE_MIN_CHARS", 50)
MIN_PARAGRAPH_CHARS    = _env_int("MIN_PARAGRAPH_CHARS", 20)
MAX_TITLE_CHARS        = _env_int("MAX_TITLE_CHARS", 80)

# ── Service boundary ─────────────────────────────────────────────────────────
MIN_TEXT_CHARS         = _env_int("MIN_TEXT_CHARS", 50)
MAX_TEXT_CHARS         = _env_int("MAX_TEXT_CHARS", 100_000)
FREE_DAILY_ANALYSES    = _env_int("FREE_DAILY_ANALYSES", 5)
USAGE_LIMIT_ENABLED    = _env_bool("USAGE_LIMIT_ENABLED", True)
SECRET_KEY             = os.environ.get("CONTRACT_SECRET_KEY", "contract-analyzer-dev-key")
LOG_LEVEL              = os.environ.get("CONTRACT_LOG_LEVEL", "INFO").upper()
API_VERSION            = "1.0"
