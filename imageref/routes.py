"""
Flask application and resolver endpoints.

Exposes image reference resolution over HTTP as JSON.
"""

import logging
from flask import Flask, abort, jsonify, make_response

from . import __version__
from .errors import ImageReferenceError
from .image import parse_repo
from .validation import validate_reference_length

logger = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)


# -------------------------------
# Resolver Endpoints
# -------------------------------


@app.route("/v1/")
def v1_root():
    """
    Version check endpoint.

    Returns:
        JSON with the service name and version, status 200
    """
    logger.info("Resolver v1 API root accessed")
    return jsonify(service="imageref", version=__version__)


@app.route("/v1/references/<path:remote>")
def get_reference(remote):
    """
    Resolve an image reference to its registry coordinates.

    Args:
        remote: Image reference, e.g. "debian", "quay.io/team/app:1.0"
            or "debian@sha256:<64 hex chars>"

    Returns:
        JSON repository record:
        {
            "name": "debian:8.2",
            "repository": "index.docker.io/library/debian",
            "registry": "index.docker.io",
            "scheme": "https",
            "short_name": "library/debian",
            "remote": "index.docker.io/library/debian:8.2",
            "tag": "8.2"
        }

    Raises:
        400: Reference is malformed or breaks a naming rule
    """
    logger.info(f"Reference requested: '{remote}'")

    try:
        validate_reference_length(remote)
        repo = parse_repo(remote)
    except ImageReferenceError as e:
        logger.warning(f"Rejected reference '{remote}': {e}")
        abort(make_response(jsonify(error=e.kind, message=str(e)), 400))

    logger.info(f"Reference resolved: '{remote}' -> {repo.remote}")
    return jsonify(repo.as_dict())
