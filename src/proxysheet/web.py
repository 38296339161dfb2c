"""Browser UI for building and printing a proxy sheet.

Each app instance owns exactly one ProxySession; restarting the server (or
building a new app) starts with an empty collection.
"""

import os
from typing import Optional

from flask import (
    Flask,
    Response,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)

from proxysheet.config import ProxySheetSettings, get_settings
from proxysheet.core.logging import get_logger
from proxysheet.session import MSG_EMPTY_QUERY, MSG_SEARCH_ERROR, ProxySession, SearchOutcome

logger = get_logger(__name__)

SESSION_KEY = "proxy_session"


def search_status(outcome: SearchOutcome) -> int:
    """HTTP status for a JSON search: 400 bad query, 404 no match, 502 upstream failure."""
    if outcome.ok:
        return 200
    if outcome.error == MSG_EMPTY_QUERY:
        return 400
    if outcome.error == MSG_SEARCH_ERROR:
        return 502
    return 404


def create_app(
    session: Optional[ProxySession] = None,
    settings: Optional[ProxySheetSettings] = None,
) -> Flask:
    """Build the Flask app around one proxy session."""
    settings = settings or get_settings()

    app = Flask(__name__, template_folder="templates")
    app.secret_key = os.environ.get("FLASK_SECRET_KEY", os.urandom(24).hex())
    app.extensions[SESSION_KEY] = session or ProxySession.from_settings(settings)
    app.config["ERROR_DISPLAY_SECONDS"] = settings.error_display_seconds

    def proxy_session() -> ProxySession:
        return app.extensions[SESSION_KEY]

    @app.route("/", methods=["GET"])
    def index():
        state = proxy_session()
        return render_template(
            "index.html",
            cards=state.cards(),
            count=state.count(),
            error_display_ms=app.config["ERROR_DISPLAY_SECONDS"] * 1000,
        )

    @app.route("/search", methods=["POST"])
    def search():
        outcome = proxy_session().search(request.form.get("query", ""))
        if outcome.error:
            flash(outcome.error)
        return redirect(url_for("index"))

    @app.route("/batch", methods=["POST"])
    def add_list():
        for outcome in proxy_session().add_list(request.form.get("names", "")):
            if outcome.error:
                flash(outcome.error)
        return redirect(url_for("index"))

    @app.route("/cards/<card_id>/remove", methods=["POST"])
    def remove_card(card_id):
        if not proxy_session().remove(card_id):
            logger.debug("Remove ignored, card {} not in collection", card_id)
        return redirect(url_for("index"))

    @app.route("/clear", methods=["POST"])
    def clear():
        proxy_session().clear()
        return redirect(url_for("index"))

    @app.route("/print", methods=["GET"])
    def print_sheet():
        result = proxy_session().print_sheet()
        if not result["ok"]:
            flash(str(result["error"]))
            return redirect(url_for("index"))
        return Response(result["value"], mimetype="text/html")

    @app.route("/api/cards", methods=["GET"])
    def api_cards():
        state = proxy_session()
        return jsonify(
            {
                "count": state.count(),
                "cards": [card.to_dict() for card in state.cards()],
            }
        )

    @app.route("/api/search", methods=["POST"])
    def api_search():
        payload = request.get_json(silent=True) or {}
        outcome = proxy_session().search(payload.get("query", ""))
        body = {
            "query": outcome.query,
            "added": [record.id for record in outcome.added],
            "duplicates": [record.id for record in outcome.duplicates],
            "error": outcome.error,
            "count": proxy_session().count(),
        }
        return jsonify(body), search_status(outcome)

    @app.errorhandler(500)
    def internal_error(exc):
        logger.error("Unhandled error: {}", exc)
        return jsonify({"error": "Internal server error"}), 500

    return app


def run(
    host: Optional[str] = None,
    port: Optional[int] = None,
    settings: Optional[ProxySheetSettings] = None,
) -> None:
    """Serve the UI one request at a time; the session is not shared across threads."""
    settings = settings or get_settings()
    app = create_app(settings=settings)
    app.run(
        host=host or settings.web_host,
        port=port or settings.web_port,
        debug=False,
        threaded=False,
    )
