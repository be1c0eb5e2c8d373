import pytest

from imageref.errors import InvalidFormat, ReferenceSyntaxError
from imageref.image import Reference, Repository, parse, parse_repo
from imageref.reference import Named


def test_parse_official_image():
    ref = parse("ubuntu")
    assert ref.registry == "index.docker.io"
    assert ref.repository == "index.docker.io/library/ubuntu"
    assert ref.short_name == "library/ubuntu"
    assert ref.name == "ubuntu:latest"
    assert ref.tag == "latest"
    assert ref.remote == "index.docker.io/library/ubuntu:latest"


def test_parse_alias_registry():
    ref = parse("docker.io/library/ubuntu")
    assert ref.registry == "index.docker.io"
    assert ref.repository == "index.docker.io/library/ubuntu"


def test_parse_explicit_host_and_tag():
    ref = parse("myregistry.local:5000/team/app:1.2")
    assert ref.registry == "myregistry.local:5000"
    assert ref.short_name == "team/app"
    assert ref.tag == "1.2"
    assert ref.name == "myregistry.local:5000/team/app:1.2"
    assert ref.remote == "myregistry.local:5000/team/app:1.2"


def test_parse_digest(digest):
    ref = parse(f"debian@{digest}")
    assert ref.tag == digest
    assert ref.digest == digest
    assert ref.is_canonical
    assert ref.remote == f"index.docker.io/library/debian@{digest}"


def test_parse_strips_scheme():
    assert parse("https://quay.io/coreos/etcd:v3").remote == "quay.io/coreos/etcd:v3"
    assert parse("http://debian").remote == "index.docker.io/library/debian:latest"


@pytest.mark.parametrize(
    "remote, expected",
    [
        ("debian", "index.docker.io/library/debian:latest"),
        ("debian:8.2", "index.docker.io/library/debian:8.2"),
        ("team/app", "index.docker.io/team/app:latest"),
        ("docker.io/ubuntu:20.04", "index.docker.io/library/ubuntu:20.04"),
        ("localhost/app", "localhost/app:latest"),
        ("gcr.io/project/sub/app:v1", "gcr.io/project/sub/app:v1"),
    ],
)
def test_parse_remote(remote, expected):
    assert parse(remote).remote == expected


def test_parse_rejects_uppercase():
    with pytest.raises(InvalidFormat):
        parse("Ubuntu")


def test_parse_rejects_image_id():
    with pytest.raises(InvalidFormat):
        parse("0123456789abcdef" * 4)


def test_parse_rejects_bad_syntax():
    with pytest.raises(ReferenceSyntaxError):
        parse("ubuntu:bad tag")


def test_reference_without_suffix():
    ref = Reference(Named("ubuntu"))
    assert ref.tag == ""
    assert ref.digest == ""
    assert ref.name == "ubuntu"
    assert ref.remote == "index.docker.io/library/ubuntu"


def test_parse_repo():
    repo = parse_repo("debian:8.2")
    assert repo == Repository(
        name="debian:8.2",
        repository="index.docker.io/library/debian",
        registry="index.docker.io",
        scheme="https",
        short_name="library/debian",
        remote="index.docker.io/library/debian:8.2",
        tag="8.2",
    )


def test_parse_repo_scheme_is_not_derived_from_input():
    assert parse_repo("http://localhost:5000/app").scheme == "https"


def test_repository_as_dict():
    data = parse_repo("quay.io/team/app:1.0").as_dict()
    assert data["registry"] == "quay.io"
    assert data["short_name"] == "team/app"
    assert set(data) == {"name", "repository", "registry", "scheme", "short_name", "remote", "tag"}
