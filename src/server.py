#!/usr/bin/env python
"""
HTTP API for the IEEE paper formatter.

Run with:
    python src/server.py

Endpoints:
    POST /api/upload          multipart field "document" (.docx) -> labeled paragraphs
    POST /api/update-labels   {"paragraphs": [...]} -> validated paragraphs
    POST /api/preview         {"paragraphs": [...]} -> document structure
    POST /api/export          {"paragraphs": [...]} -> IEEE formatted .docx
    GET  /health
"""

import sys
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional

# Add src directory to path for imports when running as script
_src_dir = Path(__file__).parent
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

import logging

from flask import Flask, jsonify, request, send_file
from flask_cors import CORS
from werkzeug.exceptions import MethodNotAllowed, RequestEntityTooLarge

from config import FormatterConfig, get_config
from ieee_formatter.assembler import PaperAssembler
from ieee_formatter.errors import FormatterError, InvalidInputError, PayloadTooLargeError

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(config: Optional[FormatterConfig] = None) -> Flask:
    """Build the Flask app; tests pass their own config."""
    config = config or get_config()

    app = Flask(__name__)
    # Werkzeug rejects larger bodies from Content-Length before reading them
    app.config["MAX_CONTENT_LENGTH"] = config.upload.max_upload_bytes
    CORS(app, origins=config.server.cors_origins, methods=["POST", "OPTIONS"])

    assembler = PaperAssembler(max_upload_bytes=config.upload.max_upload_bytes)

    @app.errorhandler(FormatterError)
    def handle_formatter_error(error: FormatterError):
        if error.status_code >= 500:
            logger.error(f"{type(error).__name__}: {error.message}")
        else:
            logger.warning(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error: RequestEntityTooLarge):
        return handle_formatter_error(PayloadTooLargeError(config.upload.max_upload_bytes))

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error: MethodNotAllowed):
        return jsonify({"error": "Method not allowed"}), 405

    @app.route('/health', methods=['GET'])
    def health_check():
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.now().isoformat(),
            'version': API_VERSION,
        })

    @app.route('/api/upload', methods=['POST'])
    def upload_document():
        """Upload and classify a document."""
        file = request.files.get('document')
        if file is None or file.filename == '':
            raise InvalidInputError("No file uploaded")
        if not file.filename.lower().endswith(tuple(config.upload.allowed_suffixes)):
            raise InvalidInputError("Please select a .docx file")

        data = file.read()
        logger.info(f"Received {file.filename} ({len(data) / 1024:.1f} KB)")
        result = assembler.classify(data)
        return jsonify(result.to_dict())

    @app.route('/api/update-labels', methods=['POST'])
    def update_labels():
        """Validate reviewed paragraph labels."""
        paragraphs = assembler.update_labels(request.get_json(silent=True))
        return jsonify({
            'success': True,
            'message': 'Labels updated successfully',
            'paragraphs': [p.to_dict() for p in paragraphs],
        })

    @app.route('/api/preview', methods=['POST'])
    def preview_structure():
        """Structured preview of labeled paragraphs."""
        return jsonify(assembler.preview(request.get_json(silent=True)))

    @app.route('/api/export', methods=['POST'])
    def export_document():
        """Render labeled paragraphs as an IEEE formatted DOCX."""
        result = assembler.export(request.get_json(silent=True))
        return send_file(
            BytesIO(result.content),
            as_attachment=True,
            download_name=config.export.filename,
            mimetype=config.export.mimetype,
        )

    return app


def main():
    """Main entry point."""
    config = get_config()
    app = create_app(config)
    logger.info(f"Serving IEEE formatter API on {config.server.host}:{config.server.port}")
    app.run(host=config.server.host, port=config.server.port, debug=config.server.debug)


if __name__ == "__main__":
    main()
