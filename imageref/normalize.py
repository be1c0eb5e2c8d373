"""
Hostname normalization for image repository names.

Splits a repository name into registry hostname and repository path, rewrites
the legacy Docker Hub hostname and applies the implicit "library/" namespace
used by official images.

Examples:
    >>> split_hostname("ubuntu")
    ('index.docker.io', 'library/ubuntu')
    >>> split_hostname("docker.io/team/app")
    ('index.docker.io', 'team/app')
    >>> split_hostname("localhost:5000/app")
    ('localhost:5000', 'app')
    >>> normalize("docker.io/library/ubuntu")
    'ubuntu'
"""

import logging

from .errors import InvalidFormat

logger = logging.getLogger(__name__)

# Tag applied to references that carry neither a tag nor a digest
DEFAULT_TAG = "latest"

# Registry used when a name has no explicit hostname
DEFAULT_REGISTRY_HOSTNAME = "index.docker.io"

# Alias hostname rewritten to DEFAULT_REGISTRY_HOSTNAME
LEGACY_REGISTRY_HOSTNAME = "docker.io"

# Scheme reported for every registry
DEFAULT_SCHEME = "https"

# Namespace of single-segment repositories on the default registry
DEFAULT_REPO_PREFIX = "library/"


def split_hostname(name: str) -> tuple[str, str]:
    """
    Split a repository name into (hostname, remote_name).

    The part before the first slash is taken as a hostname only when it looks
    like one: it contains a dot or a colon, or it is exactly "localhost".
    Anything else belongs to the repository path on the default registry.

    Args:
        name: Repository name, already validated by the reference grammar

    Returns:
        Tuple of (hostname, remote_name). Never fails.
    """
    i = name.find("/")
    if i == -1 or (not any(c in name[:i] for c in ".:") and name[:i] != "localhost"):
        hostname, remote_name = DEFAULT_REGISTRY_HOSTNAME, name
    else:
        hostname, remote_name = name[:i], name[i + 1:]

    if hostname == LEGACY_REGISTRY_HOSTNAME:
        hostname = DEFAULT_REGISTRY_HOSTNAME

    if hostname == DEFAULT_REGISTRY_HOSTNAME and "/" not in remote_name:
        remote_name = DEFAULT_REPO_PREFIX + remote_name

    return hostname, remote_name


def normalize(name: str) -> str:
    """
    Return the stored form of a repository name.

    The stored form drops the default hostname and the "library/" prefix of
    official images, so "docker.io/library/ubuntu" and "ubuntu" normalize to
    the same value. Names on any other registry are returned unchanged.

    Args:
        name: Repository name without tag or digest

    Returns:
        Normalized repository name

    Raises:
        InvalidFormat: If the repository path is not lowercase
    """
    hostname, remote_name = split_hostname(name)
    if remote_name.lower() != remote_name:
        logger.debug(f"Rejecting non-lowercase repository path: {remote_name}")
        raise InvalidFormat("invalid reference format: repository name must be lowercase")

    if hostname != DEFAULT_REGISTRY_HOSTNAME:
        return name

    # Unlike a plain prefix trim, "library/foo/bar" is kept: it is its own repository
    official = remote_name[len(DEFAULT_REPO_PREFIX):]
    if remote_name.startswith(DEFAULT_REPO_PREFIX) and "/" not in official:
        logger.debug(f"Normalized {name} to official image {official}")
        return official
    return remote_name
