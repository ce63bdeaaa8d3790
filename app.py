import io
import logging
from typing import Optional

from flask import Flask, jsonify, request, send_file

import config
from analyzer import analyze_contract, detect_red_flags
from clauses import annotate_clauses
from compare import compare_contracts
from contract_templates import get_template, list_templates, template_categories
from exporters import export_csv
from playbook import build_negotiation_playbook
from rules import CLAUSE_RULES, RED_FLAG_RULES
from usage import InMemoryUsageStore, UsageLimiter, UsageLimitExceeded, UsageStore


def create_app(usage_store: Optional[UsageStore] = None) -> Flask:
    logging.basicConfig(level=config.LOG_LEVEL)

    app = Flask(__name__)
    app.secret_key = config.SECRET_KEY

    limiter = None
    if config.USAGE_LIMIT_ENABLED:
        limiter = UsageLimiter(usage_store or InMemoryUsageStore(), config.FREE_DAILY_ANALYSES)
    app.config["USAGE_LIMITER"] = limiter

    # ── Request helpers ──────────────────────────────────────────────────────

    def _body_field(name: str) -> str:
        """Read a text field from a JSON body, a form, or (for "text") the raw body."""
        ct = request.content_type or ""
        if "application/json" in ct:
            body = request.get_json(silent=True) or {}
            value = body.get(name, "") if isinstance(body, dict) else ""
            return value.strip() if isinstance(value, str) else ""
        if "multipart/form-data" in ct or "application/x-www-form-urlencoded" in ct:
            return request.form.get(name, "").strip()
        if name == "text":
            return request.get_data(as_text=True).strip()
        return ""

    def _reject(message: str, status: int):
        app.logger.warning("rejected %s: %s", request.path, message)
        return jsonify({"error": message}), status

    def _check_length(text: str, field: str = "text"):
        if not text:
            return _reject(f"No {field} provided.", 400)
        if len(text) < config.MIN_TEXT_CHARS:
            return _reject(f"{field} too short (minimum {config.MIN_TEXT_CHARS} characters).", 400)
        if len(text) > config.MAX_TEXT_CHARS:
            return _reject(f"{field} too long (maximum {config.MAX_TEXT_CHARS} characters).", 413)
        return None

    def _client_id() -> str:
        forwarded = request.headers.get("X-Forwarded-For", "")
        if forwarded.strip():
            return forwarded.split(",")[0].strip()
        return request.remote_addr or "unknown"

    def _consume_usage():
        """Returns (remaining, error_response). remaining is None when metering is off."""
        if limiter is None:
            return None, None
        client = _client_id()
        try:
            return limiter.consume(client), None
        except UsageLimitExceeded as e:
            app.logger.warning("usage limit reached for %s", client)
            return None, (jsonify({"error": str(e), "upgrade": True}), 429)

    # ── REST API ─────────────────────────────────────────────────────────────

    @app.route("/api/health", methods=["GET"])
    def api_health():
        return jsonify({
            "status":  "ok",
            "version": config.API_VERSION,
            "rules":   {"red_flags": len(RED_FLAG_RULES), "clause_rules": len(CLAUSE_RULES)},
        })

    @app.route("/api/analyze", methods=["POST"])
    def api_analyze():
        """
        Analyze a contract and return structured JSON.

        Accepts:
          • application/json    → { "text": "..." }
          • form-encoded        → text field
          • anything else       → the raw body is the text
        """
        text = _body_field("text")
        error = _check_length(text)
        if error:
            return error

        remaining, error = _consume_usage()
        if error:
            return error

        try:
            result = analyze_contract(text)
        except Exception as e:
            app.logger.exception("analysis failed")
            return jsonify({"error": str(e)}), 500

        app.logger.info("analysis served: type=%s score=%d flags=%d",
                        result.document_type.type, result.risk_score, len(result.red_flags))
        data = result.to_dict()
        if remaining is not None:
            data["remaining"] = remaining
        return jsonify(data), 200

    @app.route("/api/compare", methods=["POST"])
    def api_compare():
        text_a = _body_field("text_a")
        text_b = _body_field("text_b")
        for field, value in (("text_a", text_a), ("text_b", text_b)):
            error = _check_length(value, field)
            if error:
                return error

        remaining, error = _consume_usage()
        if error:
            return error

        try:
            comparison = compare_contracts(text_a, text_b)
        except Exception as e:
            app.logger.exception("comparison failed")
            return jsonify({"error": str(e)}), 500

        app.logger.info("comparison served: delta=%d safer=%s",
                        comparison.risk_delta, comparison.safer)
        data = comparison.to_dict()
        if remaining is not None:
            data["remaining"] = remaining
        return jsonify(data), 200

    @app.route("/api/clauses", methods=["POST"])
    def api_clauses():
        text = _body_field("text")
        error = _check_length(text)
        if error:
            return error
        try:
            report = annotate_clauses(text)
        except Exception as e:
            app.logger.exception("clause annotation failed")
            return jsonify({"error": str(e)}), 500
        return jsonify(report.to_dict()), 200

    @app.route("/api/playbook", methods=["POST"])
    def api_playbook():
        text = _body_field("text")
        error = _check_length(text)
        if error:
            return error
        try:
            playbook = build_negotiation_playbook(detect_red_flags(text))
        except Exception as e:
            app.logger.exception("playbook failed")
            return jsonify({"error": str(e)}), 500
        return jsonify(playbook.to_dict()), 200

    # ── Templates ────────────────────────────────────────────────────────────

    @app.route("/api/templates", methods=["GET"])
    def api_templates():
        category = request.args.get("category")
        return jsonify({
            "categories": template_categories(),
            "templates":  [t.to_dict(include_text=False) for t in list_templates(category)],
        })

    @app.route("/api/templates/<template_id>", methods=["GET"])
    def api_template(template_id):
        try:
            template = get_template(template_id)
        except KeyError:
            return jsonify({"error": f"Unknown template: {template_id}"}), 404
        return jsonify(template.to_dict())

    @app.route("/api/templates/<template_id>/analysis", methods=["GET"])
    def api_template_analysis(template_id):
        try:
            template = get_template(template_id)
        except KeyError:
            return jsonify({"error": f"Unknown template: {template_id}"}), 404
        try:
            result = analyze_contract(template.text)
        except Exception as e:
            app.logger.exception("template analysis failed")
            return jsonify({"error": str(e)}), 500
        return jsonify({"template": template.to_dict(include_text=False), "analysis": result.to_dict()})

    # ── Export ───────────────────────────────────────────────────────────────

    @app.route("/api/export/csv", methods=["POST"])
    def api_export_csv():
        text = _body_field("text")
        error = _check_length(text)
        if error:
            return error

        remaining, error = _consume_usage()
        if error:
            return error

        try:
            payload = export_csv(analyze_contract(text))
        except Exception as e:
            app.logger.exception("csv export failed")
            return jsonify({"error": str(e)}), 500

        response = send_file(io.BytesIO(payload),
            mimetype="text/csv", as_attachment=True,
            download_name="contract_analysis.csv")
        if remaining is not None:
            response.headers["X-Usage-Remaining"] = str(remaining)
        return response

    return app


if __name__ == "__main__":
    create_app().run(debug=True, port=5050)
