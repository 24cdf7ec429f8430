"""OpenAPI 3.0 description of the HTTP API."""
from __future__ import annotations

from typing import Any

from password_evaluator import __version__
from password_evaluator.errors import INVALID_INPUT_MESSAGE
from password_evaluator.evaluator import MASKED_PASSWORD, PREDICTABLE_STRENGTH

OPENAPI_VERSION = "3.0.0"

DOCS_PAGE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Password Evaluator API</title>
<link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
<div id="swagger-ui"></div>
<script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
<script>
window.onload = function () {
  SwaggerUIBundle({url: "{{ spec_url }}", dom_id: "#swagger-ui"});
};
</script>
</body>
</html>
"""

_EVALUATION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "password": {"type": "string", "example": MASKED_PASSWORD},
        "evaluation": {
            "type": "object",
            "properties": {
                "length": {"type": "integer", "example": 11},
                "keyspace": {"type": "integer", "example": 94},
                "entropy": {"type": "number", "example": 72.1},
                "strength": {"type": "string", "example": PREDICTABLE_STRENGTH},
                "isCommon": {
                    "type": "boolean",
                    "description": "True when the password is an exact entry of the breached list.",
                    "example": False,
                },
                "containedCommonWord": {
                    "type": "string",
                    "nullable": True,
                    "description": "Breached-list entry found inside the password, if any.",
                    "example": "password",
                },
            },
        },
        "security_tips": {
            "type": "object",
            "properties": {
                "estimatedCrackTime": {"type": "string", "example": "3,775.254 years"},
                "recommendation": {
                    "type": "string",
                    "example": "Your password contains the common word 'password', which makes it predictable.",
                },
            },
        },
    },
}


def build_openapi(evaluate_route: str) -> dict[str, Any]:
    """Return the OpenAPI document for the evaluation endpoint."""
    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": "Password Evaluator API",
            "version": __version__,
            "description": "Computes entropy and strength of a password and checks it against breached passwords.",
        },
        "paths": {
            evaluate_route: {
                "post": {
                    "summary": "Evaluate the strength of a password.",
                    "requestBody": {
                        "required": True,
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "required": ["password"],
                                    "properties": {
                                        "password": {"type": "string", "example": "My-password-123"},
                                    },
                                }
                            }
                        },
                    },
                    "responses": {
                        "200": {
                            "description": "Password evaluated.",
                            "content": {"application/json": {"schema": _EVALUATION_SCHEMA}},
                        },
                        "400": {
                            "description": INVALID_INPUT_MESSAGE,
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "object",
                                        "properties": {"error": {"type": "string"}},
                                    }
                                }
                            },
                        },
                    },
                }
            }
        },
    }
