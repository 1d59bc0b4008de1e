"""SMS Webhook - Flask application.

Part of the imperative shell - handles HTTP I/O for the SMS provider.
"""

import logging

from flask import Flask, Response, jsonify, request

from sms_locator.service import LocatorService
from sms_locator.shell.twiml import TwimlFormatter


logger = logging.getLogger(__name__)


ERROR_MESSAGE = "Sorry, something went wrong looking up resources. Please try again later."


def create_app(service: LocatorService, formatter: TwimlFormatter | None = None) -> Flask:
    """Create the Flask app serving the SMS webhook.

    Args:
        service: Locator service answering messages
        formatter: TwiML formatter (created from config if not provided)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    formatter = formatter or TwimlFormatter(number=service.config.number_messages)

    @app.post("/sms")
    def sms() -> Response:
        body = request.form.get("Body", "")
        try:
            segments = service.reply(body)
        except Exception:
            # Always answer with TwiML
            logger.exception("Unexpected error answering SMS")
            segments = [ERROR_MESSAGE]

        twiml = formatter.format(segments)
        return Response(str(twiml), status=200, mimetype="text/xml")

    @app.get("/health")
    def health() -> tuple[Response, int]:
        status = service.status()
        healthy = service.has_data
        return jsonify({
            "status": "ok" if healthy else "no_data",
            "datasets": status,
        }), 200 if healthy else 503

    return app
