"""
Entry point for the image reference resolver.

Configures logging from LOG_LEVEL and serves imageref.routes.app with Flask.
Every request resolves one reference string ("debian",
"quay.io/team/app:1.0", "app@sha256:...") into its registry, repository
path and tag or digest. Nothing is fetched from a registry; DEBUG level
turns on Flask debug mode and logs each normalization step.

Run with:
    $ LOG_LEVEL=DEBUG python app.py
    $ curl localhost:8080/v1/references/debian:8.2
"""

import logging

from imageref.config import config
from imageref.routes import app

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point for the resolver application."""
    debug_mode = logger.getEffectiveLevel() == logging.DEBUG
    logger.info(f"Starting image reference resolver on {config.FLASK_HOST}:{config.FLASK_PORT}")
    logger.info(f"Configuration: {config}")
    logger.info(f"Log level: {logging.getLevelName(logger.getEffectiveLevel())}")
    if debug_mode:
        logger.info("Flask debug mode enabled")
    app.run(host=config.FLASK_HOST, port=config.FLASK_PORT, debug=debug_mode)


if __name__ == "__main__":
    main()
