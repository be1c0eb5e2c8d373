"""
Image reference facade and repository record.

parse() turns a user supplied image string into a Reference exposing the
coordinates needed to contact a registry; parse_repo() flattens the same
information into a Repository record for serialization.
"""

import logging
from dataclasses import asdict, dataclass

from .normalize import DEFAULT_SCHEME
from .reference import AnyReference, ReferenceKind, parse_named, strip_scheme, with_default_tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repository:
    """
    Flat snapshot of a parsed image reference.

    Fields:
        name: Image name as stored (ie: debian:8.2)
        repository: Registry and repository path (ie: index.docker.io/library/debian)
        registry: Registry host[:port] (ie: index.docker.io)
        scheme: Registry scheme, always https
        short_name: Repository path without registry (ie: library/debian)
        remote: Full remote identifier (ie: index.docker.io/library/debian:8.2)
        tag: Tag, or digest for canonical references
    """

    name: str
    repository: str
    registry: str
    scheme: str
    short_name: str
    remote: str
    tag: str

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Reference:
    """
    Read-only view over a named reference and its ":tag" or "@digest" suffix.
    """

    named: AnyReference
    suffix: str = ""

    @property
    def name(self) -> str:
        """Image name, like "debian:8.2"."""
        return self.named.name + self.suffix

    @property
    def short_name(self) -> str:
        """Repository path, like "library/debian"."""
        return self.named.remote_name

    @property
    def tag(self) -> str:
        """Tag, or digest for canonical references. Empty if neither is set."""
        return self.suffix[1:]

    @property
    def digest(self) -> str:
        return self.named.digest if self.is_canonical else ""

    @property
    def is_canonical(self) -> bool:
        return self.named.kind is ReferenceKind.CANONICAL

    @property
    def registry(self) -> str:
        """Registry host[:port], like "index.docker.io"."""
        return self.named.hostname

    @property
    def repository(self) -> str:
        """Registry and path, like "index.docker.io/library/debian"."""
        return self.named.full_name

    @property
    def remote(self) -> str:
        """Pullable identifier, like "index.docker.io/library/debian:8.2"."""
        return self.named.full_name + self.suffix

    def to_repository(self) -> Repository:
        return Repository(
            name=self.name,
            repository=self.repository,
            registry=self.registry,
            scheme=DEFAULT_SCHEME,
            short_name=self.short_name,
            remote=self.remote,
            tag=self.tag,
        )

    def __str__(self):
        return self.remote


def _suffix(ref: AnyReference) -> str:
    if ref.kind is ReferenceKind.CANONICAL:
        return "@" + ref.digest
    if ref.kind is ReferenceKind.TAGGED:
        return ":" + ref.tag
    return ""


def parse(remote: str) -> Reference:
    """
    Parse an image reference string.

    Args:
        remote: Image reference (e.g., "debian", "https://quay.io/team/app:1.0")

    Returns:
        Reference with the default tag applied when neither tag nor digest is given

    Raises:
        ReferenceSyntaxError: If the string is not a valid reference
        InvalidFormat: If the repository name breaks a naming rule

    Examples:
        >>> parse("ubuntu").remote
        'index.docker.io/library/ubuntu:latest'
        >>> parse("localhost:5000/app:1.2").registry
        'localhost:5000'
    """
    ref = with_default_tag(parse_named(strip_scheme(remote)))
    reference = Reference(ref, _suffix(ref))
    logger.debug(f"Parsed {remote} as {reference.remote}")
    return reference


def parse_repo(remote: str) -> Repository:
    """Parse an image reference string into a flat Repository record."""
    return parse(remote).to_repository()
