"""Tests for the one-line forms of event sub-entities."""

import dataclasses

import pytest

from ghactivity_core.models import (
    Action,
    Author,
    Commit,
    Issue,
    PullRequest,
    PushPayload,
    Release,
    WikiPage,
)

SHA = "0123456789abcdef0123456789abcdef01234567"

_OVERRIDDEN = (Action.REVIEW_REQUESTED, Action.REVIEW_REQUEST_REMOVED, Action.SYNCHRONIZE)


class TestActionRendering:
    @pytest.mark.parametrize(
        "action, expected",
        [
            (Action.REVIEW_REQUESTED, "requested review"),
            (Action.REVIEW_REQUEST_REMOVED, "removed review request"),
            (Action.SYNCHRONIZE, "synchronized"),
        ],
    )
    def test_overridden_phrases(self, action, expected):
        assert str(action) == expected
        assert f"{action}" == expected

    @pytest.mark.parametrize("action", [a for a in Action if a not in _OVERRIDDEN])
    def test_other_actions_render_literally(self, action):
        assert f"{action}" == action.value

    def test_action_compares_equal_to_wire_value(self):
        assert Action("labeled") is Action.LABELED
        assert Action.LABELED == "labeled"


class TestSubEntities:
    def test_pull_request(self):
        pr = PullRequest(number=42, title="Fix race condition in file watcher initialization")
        assert str(pr) == "PR #42: 'Fix race condition in file...'"

    def test_issue(self):
        assert str(Issue(number=7, title="Crash on startup")) == "Issue #7: 'Crash on startup'"

    def test_author(self):
        assert str(Author(name="Alice", email="alice@example.com")) == "Alice <alice@example.com>"

    def test_commit_uses_short_sha_without_ellipsis(self):
        commit = Commit(
            sha=SHA,
            message="Add retries\n\nLonger explanation",
            author=Author(name="Alice", email="alice@example.com"),
            distinct=True,
        )
        assert commit.short_sha == "01234567"
        assert str(commit) == "Commit 01234567 (Alice <alice@example.com>): 'Add retries...'"

    def test_created_wiki_page(self):
        page = WikiPage(page_name="Home", action=Action.CREATED, html_url="https://github.com/a/b/wiki/Home")
        assert str(page) == "Created page 'Home' @ 'https://github.com/a/b/wiki/Home'"

    def test_edited_wiki_page(self):
        page = WikiPage(page_name="Setup", action=Action.EDITED, html_url="https://github.com/a/b/wiki/Setup")
        assert str(page) == "Edited page 'Setup' @ 'https://github.com/a/b/wiki/Setup'"

    def test_release_title_is_truncated(self):
        assert str(Release(name="v2.0.0 the long awaited rewrite of everything")) == "v2.0.0 the long awaited rewrite..."


class TestImmutability:
    def test_payloads_are_frozen(self):
        payload = PushPayload(size=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            payload.size = 2
