"""
Container image reference parsing and normalization.

Resolves user supplied image strings into the fully qualified coordinates
needed to contact a registry.

Features:
    - Registry hostname detection (host.tld/..., host:port/..., localhost/...)
    - docker.io rewritten to index.docker.io
    - Implicit library/ namespace for official images
    - Default "latest" tag for untagged references
    - Tag and digest references as distinct immutable variants
    - JSON resolver endpoint (Flask)

Reference Formats:
    debian                                -> index.docker.io/library/debian:latest
    docker.io/library/debian:8.2          -> index.docker.io/library/debian:8.2
    myregistry.local:5000/team/app@sha256:<hex>
                                          -> myregistry.local:5000/team/app@sha256:<hex>
"""

__version__ = "0.1.0"

# Import key components for convenience
from .config import Config
from .errors import ImageReferenceError, ReferenceSyntaxError, InvalidFormat
from .normalize import (
    DEFAULT_TAG,
    DEFAULT_REGISTRY_HOSTNAME,
    LEGACY_REGISTRY_HOSTNAME,
    DEFAULT_SCHEME,
    DEFAULT_REPO_PREFIX,
    split_hostname,
    normalize,
)
from .reference import (
    ReferenceKind,
    Named,
    Tagged,
    Canonical,
    with_name,
    with_tag,
    with_digest,
    parse_named,
    is_name_only,
    with_default_tag,
)
from .image import Reference, Repository, parse, parse_repo

__all__ = [
    "Config",
    "ImageReferenceError",
    "ReferenceSyntaxError",
    "InvalidFormat",
    "DEFAULT_TAG",
    "DEFAULT_REGISTRY_HOSTNAME",
    "LEGACY_REGISTRY_HOSTNAME",
    "DEFAULT_SCHEME",
    "DEFAULT_REPO_PREFIX",
    "split_hostname",
    "normalize",
    "ReferenceKind",
    "Named",
    "Tagged",
    "Canonical",
    "with_name",
    "with_tag",
    "with_digest",
    "parse_named",
    "is_name_only",
    "with_default_tag",
    "Reference",
    "Repository",
    "parse",
    "parse_repo",
]
