import pytest

import config
from app import create_app
from rules import CLAUSE_RULES, RED_FLAG_RULES


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["status"] == "ok"
    assert data["rules"] == {"red_flags": len(RED_FLAG_RULES), "clause_rules": len(CLAUSE_RULES)}


def test_analyze_json(client, risky_contract):
    resp = client.post("/api/analyze", json={"text": risky_contract})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["risk_level"] == "high"
    assert data["document_type"]["type"] == "freelance"
    assert data["remaining"] == config.FREE_DAILY_ANALYSES - 1


def test_analyze_form_and_raw_body(client, neutral_contract):
    resp = client.post("/api/analyze", data={"text": neutral_contract})
    assert resp.status_code == 200

    resp = client.post("/api/analyze", data=neutral_contract, content_type="text/plain")
    assert resp.status_code == 200
    assert resp.get_json()["risk_score"] == 23


@pytest.mark.parametrize("body, status", [
    ({}, 400),
    ({"text": "   "}, 400),
    ({"text": "too short"}, 400),
    ({"text": 12345}, 400),
])
def test_analyze_rejects_bad_input(client, body, status):
    resp = client.post("/api/analyze", json=body)
    assert resp.status_code == status
    assert "error" in resp.get_json()


def test_analyze_rejects_oversized_text(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_TEXT_CHARS", 100)
    resp = client.post("/api/analyze", json={"text": "x" * 101})
    assert resp.status_code == 413


def test_rejected_requests_do_not_use_allowance(client, app, neutral_contract):
    client.post("/api/analyze", json={"text": "short"})
    limiter = app.config["USAGE_LIMITER"]
    assert limiter.remaining("127.0.0.1") == config.FREE_DAILY_ANALYSES


def test_usage_limit_returns_429(client, neutral_contract):
    for _ in range(config.FREE_DAILY_ANALYSES):
        assert client.post("/api/analyze", json={"text": neutral_contract}).status_code == 200

    resp = client.post("/api/analyze", json={"text": neutral_contract})
    assert resp.status_code == 429
    assert resp.get_json()["upgrade"] is True


def test_usage_keyed_by_forwarded_for(client, neutral_contract):
    for _ in range(config.FREE_DAILY_ANALYSES):
        client.post("/api/analyze", json={"text": neutral_contract},
                    headers={"X-Forwarded-For": "10.0.0.1, 172.16.0.1"})

    blocked = client.post("/api/analyze", json={"text": neutral_contract},
                          headers={"X-Forwarded-For": "10.0.0.1"})
    other = client.post("/api/analyze", json={"text": neutral_contract},
                        headers={"X-Forwarded-For": "10.0.0.2"})
    assert blocked.status_code == 429
    assert other.status_code == 200


def test_metering_can_be_disabled(monkeypatch, neutral_contract):
    monkeypatch.setattr(config, "USAGE_LIMIT_ENABLED", False)
    client = create_app().test_client()
    data = client.post("/api/analyze", json={"text": neutral_contract}).get_json()
    assert "remaining" not in data


def test_compare(client, neutral_contract, risky_contract):
    resp = client.post("/api/compare", json={"text_a": neutral_contract, "text_b": risky_contract})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["safer"] == "first"
    assert "non_compete" in [f["id"] for f in data["flags_only_in_second"]]


def test_compare_names_missing_field(client, neutral_contract):
    resp = client.post("/api/compare", json={"text_a": neutral_contract})
    assert resp.status_code == 400
    assert "text_b" in resp.get_json()["error"]


def test_clauses_and_playbook(client, risky_contract):
    clauses = client.post("/api/clauses", json={"text": risky_contract}).get_json()
    assert clauses["stats"]["total"] == len(clauses["clauses"])

    playbook = client.post("/api/playbook", json={"text": risky_contract}).get_json()
    assert playbook["suggestions"][0]["priority"] == "must-negotiate"


def test_templates_listing(client):
    data = client.get("/api/templates").get_json()
    assert len(data["templates"]) == 10
    assert "text" not in data["templates"][0]

    filtered = client.get("/api/templates?category=Employment").get_json()
    assert [t["id"] for t in filtered["templates"]] == ["employment-offer", "non-compete"]


def test_template_detail_and_analysis(client):
    assert client.get("/api/templates/nda-mutual").get_json()["text"].startswith("MUTUAL")
    assert client.get("/api/templates/nope").status_code == 404

    data = client.get("/api/templates/nda-mutual/analysis").get_json()
    assert data["analysis"]["document_type"]["type"] == "nda"
    assert client.get("/api/templates/nope/analysis").status_code == 404


def test_export_csv(client, risky_contract):
    resp = client.post("/api/export/csv", json={"text": risky_contract})
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment" in resp.headers["Content-Disposition"]
    assert resp.headers["X-Usage-Remaining"] == str(config.FREE_DAILY_ANALYSES - 1)


def test_engine_failure_returns_500(client, monkeypatch, neutral_contract):
    def boom(text):
        raise RuntimeError("engine exploded")

    monkeypatch.setattr("app.analyze_contract", boom)
    resp = client.post("/api/analyze", json={"text": neutral_contract})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "engine exploded"}
