"""
app.py
------
Flask API server for the code-feedback tool.

Endpoints:
  GET  /api/health   - Liveness probe
  POST /api/analyze  - Submit { code, language } for a syntax verdict
  POST /api/login    - Exchange { username, password } for a signed token

Run with:
  python app.py
  # or for production:
  gunicorn app:app --bind 0.0.0.0:8000
"""

import hmac
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

import appConfig
from auth.tokens import issueToken
from evaluators.syntaxEvaluator import evaluateCode


logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = Flask(__name__)

# Enable CORS so the React dev server can call this API.
CORS(app, origins=appConfig.CORS_ORIGINS)

NO_CODE_ERROR = {
    "message":  "Please paste your code before analyzing.",
    "severity": "error",
    "hint":     "Add some code, then click Analyze.",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _asString(value) -> str:
    """Request fields that are not strings are treated as missing."""
    return value if isinstance(value, str) else ""


def _requestBody() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _credentialsMatch(username: str, password: str) -> bool:
    userOk = hmac.compare_digest(username.encode("utf-8"), appConfig.ADMIN_USER.encode("utf-8"))
    passOk = hmac.compare_digest(password.encode("utf-8"), appConfig.ADMIN_PASS.encode("utf-8"))
    return userOk and passOk


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------

@app.errorhandler(404)
def notFound(error):
    return jsonify({"ok": False, "message": "Not found"}), 404


@app.errorhandler(405)
def methodNotAllowed(error):
    return jsonify({"ok": False, "message": "Method not allowed"}), 405


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({"ok": True})


@app.route("/api/analyze", methods=["POST"])
def analyzeCode():
    """
    Run the syntax evaluator on a submission.

    Expected JSON body:
        {
            "code": "function add(a, b) { return a + b; }",
            "language": "javascript"
        }

    Returns only a verdict when the code is valid; otherwise the language,
    errors and guidance under "details".
    """
    body     = _requestBody()
    code     = _asString(body.get("code"))
    language = _asString(body.get("language")) or appConfig.DEFAULT_LANGUAGE

    if not code.strip():
        return jsonify({
            "ok":        True,
            "isCorrect": False,
            "message":   "No code provided",
            "details": {
                "language": language,
                "errors":   [NO_CODE_ERROR],
                "guidance": [],
            },
        }), 400

    try:
        result = evaluateCode(code, language)
    except Exception as exc:
        logger.exception("Evaluation failed for language=%r", language)
        return jsonify({"ok": False, "message": "Backend error", "error": str(exc)}), 500

    logger.info(
        "Analyzed %d chars as %s: %d error(s)",
        len(code), result.language, len(result.errors),
    )

    if result.isValid:
        # No hints once the user has fixed everything
        return jsonify({"ok": True, "isCorrect": True, "message": "Yes you are right"})

    payload = result.toDict()
    return jsonify({
        "ok":        True,
        "isCorrect": False,
        "message":   "Issues found",
        "details": {
            "language": payload["language"],
            "errors":   payload["errors"],
            "guidance": payload["guidance"],
        },
    })


@app.route("/api/login", methods=["POST"])
def login():
    """
    Issue a signed token for the configured admin account.

    Expected JSON body:
        { "username": "...", "password": "..." }
    """
    body     = _requestBody()
    username = _asString(body.get("username"))
    password = _asString(body.get("password"))

    if not username or not password:
        return jsonify({"ok": False, "message": "Missing username or password"}), 400

    if not _credentialsMatch(username, password):
        logger.warning("Failed login attempt for user %r", username)
        return jsonify({"ok": False, "message": "Invalid credentials"}), 401

    token = issueToken(username, appConfig.AUTH_SECRET, appConfig.TOKEN_TTL_SECONDS)
    return jsonify({"ok": True, "token": token})


# ---------------------------------------------------------------------------
# Dev server entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    logging.basicConfig(
        level=appConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting code-feedback API on http://%s:%d", appConfig.HOST, appConfig.PORT)
    app.run(host=appConfig.HOST, port=appConfig.PORT, debug=appConfig.FLASK_DEBUG)
