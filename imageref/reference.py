"""
Named image references and the combinators that build them.

A reference is exactly one of three immutable variants:

    Named      repository name only            (ubuntu)
    Tagged     repository name plus a tag      (ubuntu:22.04)
    Canonical  repository name plus a digest   (ubuntu@sha256:...)

Tagged and Canonical wrap a Named base instead of extending it, so a value
can never carry a tag and a digest at the same time. Syntax checks are
delegated to the reference grammar in docker_image.reference; this module
only adds the normalization and naming rules on top of it.
"""

import enum
import logging
from dataclasses import dataclass

from docker_image import digest as grammar_digest
from docker_image import reference as grammar

from .errors import InvalidFormat, ReferenceSyntaxError
from .normalize import DEFAULT_TAG, normalize, split_hostname
from .validation import validate_id

logger = logging.getLogger(__name__)


class ReferenceKind(enum.Enum):
    """Capability set carried by a reference."""

    NAMED = "named"
    TAGGED = "tagged"
    CANONICAL = "canonical"


@dataclass(frozen=True)
class Named:
    """Normalized repository name, e.g. "ubuntu" or "quay.io/team/app"."""

    name: str

    kind = ReferenceKind.NAMED

    @property
    def hostname(self) -> str:
        """Registry hostname, like "index.docker.io"."""
        return split_hostname(self.name)[0]

    @property
    def remote_name(self) -> str:
        """Repository path on the registry, like "library/ubuntu"."""
        return split_hostname(self.name)[1]

    @property
    def full_name(self) -> str:
        """Hostname and repository path, like "index.docker.io/library/ubuntu"."""
        hostname, remote_name = split_hostname(self.name)
        return f"{hostname}/{remote_name}"

    @property
    def base(self) -> "Named":
        return self

    def __str__(self):
        return self.name


class _WrapsNamed:
    """Name accessors for variants that wrap a Named base."""

    @property
    def name(self) -> str:
        return self.named.name

    @property
    def hostname(self) -> str:
        return self.named.hostname

    @property
    def remote_name(self) -> str:
        return self.named.remote_name

    @property
    def full_name(self) -> str:
        return self.named.full_name

    @property
    def base(self) -> Named:
        return self.named


@dataclass(frozen=True)
class Tagged(_WrapsNamed):
    named: Named
    tag: str

    kind = ReferenceKind.TAGGED

    def __str__(self):
        return f"{self.named.name}:{self.tag}"


@dataclass(frozen=True)
class Canonical(_WrapsNamed):
    named: Named
    digest: str

    kind = ReferenceKind.CANONICAL

    def __str__(self):
        return f"{self.named.name}@{self.digest}"


AnyReference = Named | Tagged | Canonical


def _grammar_parse(s: str):
    """Run the reference grammar, translating its errors to ReferenceSyntaxError."""
    try:
        return grammar.Reference.parse(s)
    except (grammar.InvalidReference, grammar_digest.InvalidDigest) as e:
        logger.debug(f"Reference grammar rejected {s!r}: {e}")
        raise ReferenceSyntaxError(f"{s!r} is not a valid repository/tag: {e}") from e


def _check_lowercase(s: str) -> None:
    """
    Reject a raw reference whose repository path contains uppercase letters.

    Hostnames may be mixed case, tags may be mixed case; the repository path
    may not. The path ends at the first ":" or "@" after the hostname.
    """
    _, remainder = split_hostname(s)
    remote_name = remainder.split("@", 1)[0].split(":", 1)[0]
    if remote_name.lower() != remote_name:
        raise InvalidFormat(f"invalid reference format: repository name ({remote_name}) must be lowercase")


def strip_scheme(url: str) -> str:
    """Remove a leading http:// or https:// from a reference."""
    for scheme in ("http://", "https://"):
        if url.startswith(scheme):
            return url[len(scheme):]
    return url


def with_name(name: str) -> Named:
    """
    Build a Named reference from a repository name.

    Args:
        name: Repository name without tag or digest (e.g., "docker.io/library/ubuntu")

    Returns:
        Named reference holding the normalized name ("ubuntu")

    Raises:
        InvalidFormat: Non-lowercase path, or a 64-character hex image ID
        ReferenceSyntaxError: The name does not match the reference grammar
    """
    name = normalize(name)
    validate_id(name)

    parsed = _grammar_parse(name)
    if parsed["name"] != name or parsed["tag"] or parsed["digest"]:
        raise ReferenceSyntaxError(f"{name!r} is not a valid repository name")

    return Named(name)


def with_tag(ref: AnyReference, tag: str) -> Tagged:
    """
    Attach a tag to the name of ref.

    Any tag or digest already on ref is discarded.

    Raises:
        ReferenceSyntaxError: If the tag is not valid
    """
    named = ref.base
    parsed = _grammar_parse(f"{named.name}:{tag}")
    if parsed["name"] != named.name or parsed["tag"] != tag or parsed["digest"]:
        raise ReferenceSyntaxError(f"{tag!r} is not a valid tag")
    return Tagged(named, tag)


def with_digest(ref: AnyReference, digest: str) -> Canonical:
    """
    Attach a digest ("sha256:<hex>") to the name of ref.

    Any tag or digest already on ref is discarded.

    Raises:
        ReferenceSyntaxError: If the digest is not valid
    """
    named = ref.base
    digest = str(digest)
    parsed = _grammar_parse(f"{named.name}@{digest}")
    if parsed["name"] != named.name or parsed["tag"] or str(parsed["digest"]) != digest:
        raise ReferenceSyntaxError(f"{digest!r} is not a valid digest")
    return Canonical(named, digest)


def parse_named(s: str) -> AnyReference:
    """
    Parse a reference string into a Named, Tagged or Canonical value.

    When the string carries both a tag and a digest
    ("ubuntu:22.04@sha256:..."), the digest wins and the tag is dropped.

    Args:
        s: Reference string, optionally prefixed with http:// or https://

    Raises:
        ReferenceSyntaxError: If the grammar rejects the string
        InvalidFormat: If the name breaks a naming rule
    """
    s = strip_scheme(s)
    validate_id(s)
    _check_lowercase(s)
    parsed = _grammar_parse(s)

    ref = with_name(parsed["name"])
    if parsed["digest"]:
        return with_digest(ref, parsed["digest"])
    if parsed["tag"]:
        return with_tag(ref, parsed["tag"])
    return ref


def is_name_only(ref: AnyReference) -> bool:
    """Return True if ref has neither a tag nor a digest."""
    return ref.kind is ReferenceKind.NAMED


def with_default_tag(ref: AnyReference) -> AnyReference:
    """Tag a name-only reference with "latest"; return anything else unchanged."""
    if is_name_only(ref):
        logger.debug(f"No tag or digest on {ref}, using default tag {DEFAULT_TAG}")
        return with_tag(ref, DEFAULT_TAG)
    return ref
