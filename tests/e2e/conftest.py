"""E2E test fixtures: real GitLab API, no mocks."""

import os

import pytest

from gitlab_repo_reader.models import DEFAULT_INSTANCE_URL, GitLabConfig

# Small public project on gitlab.com used by GitLab's own test suites
E2E_PROJECT = os.environ.get("GITLAB_E2E_PROJECT", "gitlab-org/gitlab-test")


@pytest.fixture
def live_config():
    return GitLabConfig(
        base_url=os.environ.get("GITLAB_INSTANCE_URL", DEFAULT_INSTANCE_URL),
        token=os.environ["GITLAB_ACCESS_TOKEN"],
    )


@pytest.fixture
def project():
    return E2E_PROJECT
