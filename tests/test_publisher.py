from __future__ import annotations

from pathlib import Path
from typing import Mapping

import pytest

from adapters.github_env import GitHubEnvFileSink
from core.domain.errors import IdentityAlreadyPublishedError, PublishError
from core.domain.models import BuildIdentity
from core.interfaces.publisher import IdentitySink
from core.services.publisher import EnvironmentPublisher

RELEASE = BuildIdentity(app_version="v1.2.3", tag="v1.2.3-build7", build=7)


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[dict[str, str]] = []

    def write(self, entries: Mapping[str, str]) -> None:
        self.calls.append(dict(entries))


def test_entries_are_empty_before_publish() -> None:
    publisher = EnvironmentPublisher()
    assert publisher.identity is None
    assert dict(publisher.entries) == {}


def test_publish_exposes_named_entries() -> None:
    publisher = EnvironmentPublisher()
    entries = publisher.publish(RELEASE)
    assert dict(entries) == {"APP_VERSION": "v1.2.3", "TAG": "v1.2.3-build7", "BUILD": "7"}
    assert publisher.identity == RELEASE


def test_entries_are_read_only() -> None:
    publisher = EnvironmentPublisher()
    entries = publisher.publish(RELEASE)
    with pytest.raises(TypeError):
        entries["TAG"] = "tampered"  # type: ignore[index]


def test_republishing_same_identity_is_a_noop() -> None:
    sink = RecordingSink()
    publisher = EnvironmentPublisher(sinks=[sink])
    first = publisher.publish(RELEASE)
    second = publisher.publish(BuildIdentity(app_version="v1.2.3", tag="v1.2.3-build7", build=7))
    assert dict(first) == dict(second)
    assert len(sink.calls) == 1


def test_publishing_a_different_identity_fails() -> None:
    publisher = EnvironmentPublisher()
    publisher.publish(RELEASE)
    other = BuildIdentity(app_version="v1.2.3", tag="v1.2.3-snapshot-9", build=9)
    with pytest.raises(IdentityAlreadyPublishedError):
        publisher.publish(other)
    assert publisher.identity == RELEASE


def test_github_env_sink_appends_lines(tmp_path: Path) -> None:
    env_file = tmp_path / "github_env"
    env_file.write_text("EXISTING=1\n", encoding="utf-8")
    sink = GitHubEnvFileSink(env_file)
    assert isinstance(sink, IdentitySink)

    EnvironmentPublisher(sinks=[sink]).publish(RELEASE)

    assert env_file.read_text(encoding="utf-8") == (
        "EXISTING=1\nAPP_VERSION=v1.2.3\nTAG=v1.2.3-build7\nBUILD=7\n"
    )


class FailingSink:
    def write(self, entries: Mapping[str, str]) -> None:
        raise PublishError("/ci/env", "Read-only file system")


def test_failed_sink_does_not_duplicate_earlier_sinks() -> None:
    first = RecordingSink()
    publisher = EnvironmentPublisher(sinks=[first, FailingSink()])
    with pytest.raises(PublishError):
        publisher.publish(RELEASE)

    publisher.publish(RELEASE)

    assert len(first.calls) == 1
    assert publisher.identity == RELEASE


def test_github_env_sink_reports_unwritable_path(tmp_path: Path) -> None:
    env_file = tmp_path / "missing" / "github_env"
    with pytest.raises(PublishError) as excinfo:
        GitHubEnvFileSink(env_file).write({"TAG": "v1.2.3-build7"})
    assert excinfo.value.check == "publish"
    assert excinfo.value.path == str(env_file)
