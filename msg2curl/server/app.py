"""Flask application factory."""

from flask import Flask, request, jsonify
from typing import Optional
from ..config import Settings
from ..errors import Msg2CurlError
from ..extraction import BlockExtractor
from ..parsers import HTTPClassifier, HTTPParser
from ..renderers import CurlRenderer
import logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings,
    classifier: Optional[HTTPClassifier] = None,
) -> Flask:
    """Create and configure Flask application.

    Args:
        settings: Application settings
        classifier: Optional classifier; loaded from settings.rules_file_path
            when omitted
    """
    app = Flask(__name__)
    # Keep headers in the order they were parsed
    app.json.sort_keys = False

    if classifier is None:
        classifier = HTTPClassifier.from_yaml(settings.rules_file_path)
    renderer = CurlRenderer(scheme=settings.url_scheme)
    extractor = BlockExtractor(classifier, renderer)

    def _message_from_json() -> Optional[str]:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('message'), str):
            return None
        return data['message']

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint."""
        return jsonify({"status": "healthy"}), 200

    @app.route('/curl', methods=['POST'])
    def curl():
        """Convert a raw HTTP request into a curl command."""
        message = _message_from_json()
        if message is None:
            return jsonify({"error": "Missing message"}), 400

        try:
            command = renderer.http_to_curl(message)
        except Msg2CurlError as e:
            logger.info(f"Could not build command: {e}")
            return (
                jsonify({"error": str(e), "kind": type(e).__name__}),
                422,
            )
        except Exception as e:
            logger.error(f"Error converting request: {e}", exc_info=True)
            return jsonify({"error": str(e)}), 500

        return jsonify({"curl": command}), 200

    @app.route('/parse', methods=['POST'])
    def parse():
        """Split a raw HTTP message into headers and body."""
        message = _message_from_json()
        if message is None:
            return jsonify({"error": "Missing message"}), 400

        parsed = HTTPParser.parse_message(message)
        return (
            jsonify(
                {
                    "headers": dict(parsed.headers),
                    "body": parsed.body,
                    "body_start_line": parsed.body_start_line,
                }
            ),
            200,
        )

    @app.route('/body', methods=['POST'])
    def body():
        """Extract the request or response body from a list of blocks."""
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('blocks'), list):
            return jsonify({"error": "Missing blocks"}), 400
        if not all(isinstance(block, str) for block in data['blocks']):
            return jsonify({"error": "Blocks must be strings"}), 400

        kind = data.get('kind', 'request')
        if kind == 'request':
            result = extractor.request_body(data['blocks'])
        elif kind == 'response':
            result = extractor.response_body(data['blocks'])
        else:
            return jsonify({"error": f"Unknown kind: {kind}"}), 400

        return jsonify({"body": result}), 200

    @app.route('/config', methods=['GET'])
    def get_config():
        """Get current converter configuration."""
        return (
            jsonify(
                {
                    "url_scheme": renderer.scheme,
                    "methods": list(classifier.methods),
                    "rules_file": settings.rules_file_path,
                    "debug": settings.debug,
                }
            ),
            200,
        )

    return app


def run_server(app: Flask, settings: Settings) -> None:
    """Run the Flask server."""
    app.run(
        host=settings.server_host,
        port=settings.server_port,
        debug=settings.debug,
    )
