"""Event and payload models for the GitHub user events feed.

The events API returns one record shape whose ``payload`` varies completely
with the record's ``type``. Each tag gets its own payload dataclass carrying
only the fields that are meaningful for it, so a renderer can never read a
field that was not sent for its event.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ghactivity_core.utils.text import truncate

SHORT_SHA_LENGTH = 8


class EventType(str, Enum):
    COMMIT_COMMENT = "CommitCommentEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    FORK = "ForkEvent"
    GOLLUM = "GollumEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    ISSUES = "IssuesEvent"
    MEMBER = "MemberEvent"
    PUBLIC = "PublicEvent"
    PULL_REQUEST = "PullRequestEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
    PULL_REQUEST_REVIEW_COMMENT = "PullRequestReviewCommentEvent"
    PULL_REQUEST_REVIEW_THREAD = "PullRequestReviewThreadEvent"
    PUSH = "PushEvent"
    RELEASE = "ReleaseEvent"
    SPONSORSHIP = "SponsorshipEvent"
    WATCH = "WatchEvent"

    def __str__(self) -> str:
        return self.value


class Action(str, Enum):
    ADDED = "added"
    ASSIGNED = "assigned"
    CLOSED = "closed"
    CREATED = "created"
    DELETED = "deleted"
    DEQUEUED = "dequeued"
    EDITED = "edited"
    LABELED = "labeled"
    OPENED = "opened"
    PUBLISHED = "published"
    REOPENED = "reopened"
    RESOLVED = "resolved"
    REVIEW_REQUESTED = "review_requested"
    REVIEW_REQUEST_REMOVED = "review_request_removed"
    SYNCHRONIZE = "synchronize"
    UNASSIGNED = "unassigned"
    UNLABELED = "unlabeled"
    UNRESOLVED = "unresolved"

    def __str__(self) -> str:
        return _ACTION_PHRASES.get(self, self.value)


_ACTION_PHRASES = {
    Action.REVIEW_REQUESTED: "requested review",
    Action.REVIEW_REQUEST_REMOVED: "removed review request",
    Action.SYNCHRONIZE: "synchronized",
}


class RefType(str, Enum):
    BRANCH = "branch"
    TAG = "tag"
    REPOSITORY = "repository"

    def __str__(self) -> str:
        return self.value


# Actions and ref types outside the enums are kept as the raw wire string.
ActionValue = Union[Action, str]
RefTypeValue = Union[RefType, str]


# --------------------------------------------------------------------------- #
# Sub-entities                                                                 #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class User:
    login: str = ""

    def __str__(self) -> str:
        return self.login


@dataclass(frozen=True)
class Author:
    name: str = ""
    email: str = ""

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True)
class Commit:
    sha: str = ""
    message: str = ""
    author: Author = field(default_factory=Author)
    distinct: bool = False

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

    def __str__(self) -> str:
        return f"Commit {self.short_sha} ({self.author}): '{truncate(self.message)}'"


@dataclass(frozen=True)
class PullRequest:
    number: int = 0
    title: str = ""

    def __str__(self) -> str:
        return f"PR #{self.number}: '{truncate(self.title)}'"


@dataclass(frozen=True)
class Issue:
    number: int = 0
    title: str = ""

    def __str__(self) -> str:
        return f"Issue #{self.number}: '{truncate(self.title)}'"


@dataclass(frozen=True)
class WikiPage:
    page_name: str = ""
    title: str = ""
    action: ActionValue = ""
    html_url: str = ""

    def __str__(self) -> str:
        verb = "Created" if self.action == Action.CREATED else "Edited"
        return f"{verb} page '{self.page_name}' @ '{self.html_url}'"


@dataclass(frozen=True)
class Comment:
    body: str = ""

    def __str__(self) -> str:
        return truncate(self.body)


@dataclass(frozen=True)
class Review:
    state: str = ""


@dataclass(frozen=True)
class Release:
    name: str = ""

    def __str__(self) -> str:
        return truncate(self.name)


@dataclass(frozen=True)
class ForkTarget:
    full_name: str = ""

    def __str__(self) -> str:
        return self.full_name


# --------------------------------------------------------------------------- #
# Payload variants, one per EventType                                          #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class CommitCommentPayload:
    comment: Comment = field(default_factory=Comment)


@dataclass(frozen=True)
class CreatePayload:
    ref: str = ""
    ref_type: RefTypeValue = ""


@dataclass(frozen=True)
class DeletePayload:
    ref: str = ""
    ref_type: RefTypeValue = ""


@dataclass(frozen=True)
class ForkPayload:
    forkee: ForkTarget = field(default_factory=ForkTarget)


@dataclass(frozen=True)
class GollumPayload:
    pages: tuple[WikiPage, ...] = ()


@dataclass(frozen=True)
class IssueCommentPayload:
    action: ActionValue = ""
    issue: Issue = field(default_factory=Issue)
    comment: Comment = field(default_factory=Comment)


@dataclass(frozen=True)
class IssuesPayload:
    action: ActionValue = ""
    issue: Issue = field(default_factory=Issue)
    assignee: User = field(default_factory=User)


@dataclass(frozen=True)
class MemberPayload:
    action: ActionValue = ""
    member: User = field(default_factory=User)


@dataclass(frozen=True)
class PublicPayload:
    pass


@dataclass(frozen=True)
class PullRequestPayload:
    action: ActionValue = ""
    pull_request: PullRequest = field(default_factory=PullRequest)
    reason: str = ""


@dataclass(frozen=True)
class PullRequestReviewPayload:
    action: ActionValue = ""
    pull_request: PullRequest = field(default_factory=PullRequest)
    review: Review = field(default_factory=Review)


@dataclass(frozen=True)
class PullRequestReviewCommentPayload:
    action: ActionValue = ""
    pull_request: PullRequest = field(default_factory=PullRequest)
    comment: Comment = field(default_factory=Comment)


@dataclass(frozen=True)
class PullRequestReviewThreadPayload:
    action: ActionValue = ""
    pull_request: PullRequest = field(default_factory=PullRequest)


@dataclass(frozen=True)
class PushPayload:
    size: int = 0
    commits: tuple[Commit, ...] = ()


@dataclass(frozen=True)
class ReleasePayload:
    action: ActionValue = ""
    release: Release = field(default_factory=Release)


@dataclass(frozen=True)
class SponsorshipPayload:
    action: ActionValue = ""


@dataclass(frozen=True)
class WatchPayload:
    action: ActionValue = ""


@dataclass(frozen=True)
class UnknownPayload:
    """Raw payload of an event whose tag is not an EventType."""

    data: dict[str, Any] = field(default_factory=dict)


Payload = Union[
    CommitCommentPayload,
    CreatePayload,
    DeletePayload,
    ForkPayload,
    GollumPayload,
    IssueCommentPayload,
    IssuesPayload,
    MemberPayload,
    PublicPayload,
    PullRequestPayload,
    PullRequestReviewPayload,
    PullRequestReviewCommentPayload,
    PullRequestReviewThreadPayload,
    PushPayload,
    ReleasePayload,
    SponsorshipPayload,
    WatchPayload,
    UnknownPayload,
]

PAYLOAD_TYPES: dict[EventType, type] = {
    EventType.COMMIT_COMMENT: CommitCommentPayload,
    EventType.CREATE: CreatePayload,
    EventType.DELETE: DeletePayload,
    EventType.FORK: ForkPayload,
    EventType.GOLLUM: GollumPayload,
    EventType.ISSUE_COMMENT: IssueCommentPayload,
    EventType.ISSUES: IssuesPayload,
    EventType.MEMBER: MemberPayload,
    EventType.PUBLIC: PublicPayload,
    EventType.PULL_REQUEST: PullRequestPayload,
    EventType.PULL_REQUEST_REVIEW: PullRequestReviewPayload,
    EventType.PULL_REQUEST_REVIEW_COMMENT: PullRequestReviewCommentPayload,
    EventType.PULL_REQUEST_REVIEW_THREAD: PullRequestReviewThreadPayload,
    EventType.PUSH: PushPayload,
    EventType.RELEASE: ReleasePayload,
    EventType.SPONSORSHIP: SponsorshipPayload,
    EventType.WATCH: WatchPayload,
}


@dataclass(frozen=True)
class Event:
    """One record of a user's activity feed.

    ``type`` is a plain string only when the tag is not a known EventType;
    its payload is then an UnknownPayload.
    """

    type: Union[EventType, str]
    repo_name: str
    payload: Payload
