"""Decode the JSON body of ``GET /users/<username>/events`` into Event values.

Missing fields fall back to empty values, the way JSON decoding into a
zero-valued record would. Fields that are present with the wrong JSON type
raise DecodeFailure.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from ghactivity_core.errors import DecodeFailure
from ghactivity_core.models import (
    Action,
    ActionValue,
    Author,
    Comment,
    Commit,
    CommitCommentPayload,
    CreatePayload,
    DeletePayload,
    Event,
    EventType,
    ForkPayload,
    ForkTarget,
    GollumPayload,
    Issue,
    IssueCommentPayload,
    IssuesPayload,
    MemberPayload,
    Payload,
    PublicPayload,
    PullRequest,
    PullRequestPayload,
    PullRequestReviewCommentPayload,
    PullRequestReviewPayload,
    PullRequestReviewThreadPayload,
    PushPayload,
    RefType,
    RefTypeValue,
    Release,
    ReleasePayload,
    Review,
    SponsorshipPayload,
    UnknownPayload,
    User,
    WatchPayload,
    WikiPage,
)

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Field readers                                                                #
# --------------------------------------------------------------------------- #


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DecodeFailure(f"Expected an object for '{where}', got {type(value).__name__}")
    return value


def _text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeFailure(f"Expected a string for '{where}', got {type(value).__name__}")
    return value


def _number(value: Any, where: str) -> int:
    if value is None:
        return 0
    # bool is an int subclass but never a valid count.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise DecodeFailure(f"Expected a number for '{where}', got {value!r}")


def _flag(value: Any, where: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DecodeFailure(f"Expected a boolean for '{where}', got {type(value).__name__}")
    return value


def _items(value: Any, where: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeFailure(f"Expected an array for '{where}', got {type(value).__name__}")
    return value


def _action(value: Any, where: str = "action") -> ActionValue:
    raw = _text(value, where)
    try:
        return Action(raw)
    except ValueError:
        return raw


def _ref_type(value: Any) -> RefTypeValue:
    raw = _text(value, "ref_type")
    try:
        return RefType(raw)
    except ValueError:
        return raw


# --------------------------------------------------------------------------- #
# Sub-entities                                                                 #
# --------------------------------------------------------------------------- #


def _user(value: Any, where: str) -> User:
    data = _mapping(value, where)
    return User(login=_text(data.get("login"), f"{where}.login"))


def _comment(value: Any) -> Comment:
    data = _mapping(value, "comment")
    return Comment(body=_text(data.get("body"), "comment.body"))


def _issue(value: Any) -> Issue:
    data = _mapping(value, "issue")
    return Issue(
        number=_number(data.get("number"), "issue.number"),
        title=_text(data.get("title"), "issue.title"),
    )


def _pull_request(value: Any) -> PullRequest:
    data = _mapping(value, "pull_request")
    return PullRequest(
        number=_number(data.get("number"), "pull_request.number"),
        title=_text(data.get("title"), "pull_request.title"),
    )


def _commit(value: Any) -> Commit:
    data = _mapping(value, "commits[]")
    author = _mapping(data.get("author"), "commits[].author")
    return Commit(
        sha=_text(data.get("sha"), "commits[].sha"),
        message=_text(data.get("message"), "commits[].message"),
        author=Author(
            name=_text(author.get("name"), "commits[].author.name"),
            email=_text(author.get("email"), "commits[].author.email"),
        ),
        distinct=_flag(data.get("distinct"), "commits[].distinct"),
    )


def _page(value: Any) -> WikiPage:
    data = _mapping(value, "pages[]")
    return WikiPage(
        page_name=_text(data.get("page_name"), "pages[].page_name"),
        title=_text(data.get("title"), "pages[].title"),
        action=_action(data.get("action"), "pages[].action"),
        html_url=_text(data.get("html_url"), "pages[].html_url"),
    )


def _release(value: Any) -> Release:
    data = _mapping(value, "release")
    name = _text(data.get("name"), "release.name")
    if not name:
        name = _text(data.get("tag_name"), "release.tag_name")
    return Release(name=name)


# --------------------------------------------------------------------------- #
# Payload variants                                                             #
# --------------------------------------------------------------------------- #


def _push(p: Mapping[str, Any]) -> PushPayload:
    commits = tuple(_commit(c) for c in _items(p.get("commits"), "commits"))
    size = _number(p.get("size"), "size") if p.get("size") is not None else len(commits)
    return PushPayload(size=size, commits=commits)


_PAYLOAD_DECODERS: dict[EventType, Callable[[Mapping[str, Any]], Payload]] = {
    EventType.COMMIT_COMMENT: lambda p: CommitCommentPayload(comment=_comment(p.get("comment"))),
    EventType.CREATE: lambda p: CreatePayload(ref=_text(p.get("ref"), "ref"), ref_type=_ref_type(p.get("ref_type"))),
    EventType.DELETE: lambda p: DeletePayload(ref=_text(p.get("ref"), "ref"), ref_type=_ref_type(p.get("ref_type"))),
    EventType.FORK: lambda p: ForkPayload(
        forkee=ForkTarget(full_name=_text(_mapping(p.get("forkee"), "forkee").get("full_name"), "forkee.full_name"))
    ),
    EventType.GOLLUM: lambda p: GollumPayload(pages=tuple(_page(pg) for pg in _items(p.get("pages"), "pages"))),
    EventType.ISSUE_COMMENT: lambda p: IssueCommentPayload(
        action=_action(p.get("action")),
        issue=_issue(p.get("issue")),
        comment=_comment(p.get("comment")),
    ),
    EventType.ISSUES: lambda p: IssuesPayload(
        action=_action(p.get("action")),
        issue=_issue(p.get("issue")),
        assignee=_user(p.get("assignee"), "assignee"),
    ),
    EventType.MEMBER: lambda p: MemberPayload(action=_action(p.get("action")), member=_user(p.get("member"), "member")),
    EventType.PUBLIC: lambda p: PublicPayload(),
    EventType.PULL_REQUEST: lambda p: PullRequestPayload(
        action=_action(p.get("action")),
        pull_request=_pull_request(p.get("pull_request")),
        reason=_text(p.get("reason"), "reason"),
    ),
    EventType.PULL_REQUEST_REVIEW: lambda p: PullRequestReviewPayload(
        action=_action(p.get("action")),
        pull_request=_pull_request(p.get("pull_request")),
        review=Review(state=_text(_mapping(p.get("review"), "review").get("state"), "review.state")),
    ),
    EventType.PULL_REQUEST_REVIEW_COMMENT: lambda p: PullRequestReviewCommentPayload(
        action=_action(p.get("action")),
        pull_request=_pull_request(p.get("pull_request")),
        comment=_comment(p.get("comment")),
    ),
    EventType.PULL_REQUEST_REVIEW_THREAD: lambda p: PullRequestReviewThreadPayload(
        action=_action(p.get("action")),
        pull_request=_pull_request(p.get("pull_request")),
    ),
    EventType.PUSH: _push,
    EventType.RELEASE: lambda p: ReleasePayload(action=_action(p.get("action")), release=_release(p.get("release"))),
    EventType.SPONSORSHIP: lambda p: SponsorshipPayload(action=_action(p.get("action"))),
    EventType.WATCH: lambda p: WatchPayload(action=_action(p.get("action"))),
}


# --------------------------------------------------------------------------- #
# Public interface                                                             #
# --------------------------------------------------------------------------- #


def decode_event(record: Any) -> Event:
    """Decode one raw event record.

    An unrecognised ``type`` is not a decode error: the event keeps the raw
    tag and an UnknownPayload so the renderer can reject it by name.
    """
    data = _mapping(record, "event")
    if not data:
        raise DecodeFailure("Event record is empty")

    tag = _text(data.get("type"), "type")
    if not tag:
        raise DecodeFailure("Event record has no 'type'")

    repo_name = _text(_mapping(data.get("repo"), "repo").get("name"), "repo.name")
    payload = _mapping(data.get("payload"), "payload")

    try:
        event_type = EventType(tag)
    except ValueError:
        logger.debug("Keeping event with unrecognised type %r", tag)
        return Event(type=tag, repo_name=repo_name, payload=UnknownPayload(data=dict(payload)))

    return Event(type=event_type, repo_name=repo_name, payload=_PAYLOAD_DECODERS[event_type](payload))


def decode_events(body: Any) -> list[Event]:
    """Decode a full events response body, preserving arrival order."""
    if not isinstance(body, list):
        raise DecodeFailure(f"Expected a JSON array of events, got {type(body).__name__}")

    events = []
    for index, record in enumerate(body):
        try:
            events.append(decode_event(record))
        except DecodeFailure as e:
            raise DecodeFailure(f"Event #{index}: {e}") from e
    logger.debug("Decoded %d event(s)", len(events))
    return events
