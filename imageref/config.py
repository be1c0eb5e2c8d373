"""
Configuration module for the image reference resolver.

Loads all configuration from environment variables with sensible defaults.
"""

import os


class Config:
    """
    Resolver configuration from environment variables.

    Only the service settings are configurable; the registry defaults
    (index.docker.io, library/, latest, https) are fixed.
    """

    def __init__(self):
        """
        Initialize configuration from environment variables.

        Environment Variables:
            LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO
            FLASK_HOST: Server bind address. Default: 0.0.0.0
            FLASK_PORT: Server bind port. Default: 8080
            MAX_REFERENCE_LENGTH: Maximum accepted reference length. Default: 512
        """
        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Server
        self.FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
        self.FLASK_PORT = int(os.getenv("FLASK_PORT", "8080"))

        # Validation limits
        self.MAX_REFERENCE_LENGTH = int(os.getenv("MAX_REFERENCE_LENGTH", "512"))

    def __repr__(self):
        """String representation for logging."""
        return (
            f"Config(LOG_LEVEL={self.LOG_LEVEL}, "
            f"FLASK_HOST={self.FLASK_HOST}, "
            f"FLASK_PORT={self.FLASK_PORT}, "
            f"MAX_REFERENCE_LENGTH={self.MAX_REFERENCE_LENGTH})"
        )


# Global config instance
config = Config()
