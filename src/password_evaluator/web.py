"""HTTP transport for the password evaluator."""
from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template_string, request, url_for

from password_evaluator.errors import InvalidInput
from password_evaluator.evaluator import PasswordEvaluator
from password_evaluator.openapi import DOCS_PAGE, build_openapi

logger = logging.getLogger(__name__)

EVALUATE_ROUTE = "/api/v1/password/evaluate"
OPENAPI_ROUTE = "/openapi.json"
DOCS_ROUTE = "/api-docs"


def create_app(evaluator: PasswordEvaluator) -> Flask:
    """Build the Flask application around an already loaded evaluator.

    The corpus must be loaded before this is called; the application never
    serves requests against a partially built corpus.
    """
    app = Flask(__name__)
    app.config["EVALUATOR"] = evaluator

    @app.errorhandler(InvalidInput)
    def invalid_input(exc: InvalidInput):
        return jsonify({"error": str(exc)}), 400

    @app.route("/", methods=["GET"])
    def index():
        return f"Password evaluator is running. See {DOCS_ROUTE} for the interactive API documentation."

    @app.route(OPENAPI_ROUTE, methods=["GET"])
    def openapi():
        return jsonify(build_openapi(EVALUATE_ROUTE))

    @app.route(DOCS_ROUTE, methods=["GET"])
    def api_docs():
        return render_template_string(DOCS_PAGE, spec_url=url_for("openapi"))

    @app.route("/healthz", methods=["GET"])
    def healthz():
        return jsonify({"status": "ready", "corpus_size": len(evaluator.corpus)})

    @app.route(EVALUATE_ROUTE, methods=["POST"])
    def evaluate():
        payload = request.get_json(silent=True)
        password = payload.get("password") if isinstance(payload, dict) else None
        result = evaluator.evaluate(password)
        logger.debug("Evaluated password: strength=%s common=%s", result.strength, result.is_common)
        return jsonify(result.to_dict()), 200

    return app
