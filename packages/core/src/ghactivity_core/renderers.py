"""One-line summaries for each GitHub event type.

Each renderer receives an Event whose payload is the variant decoded for its
tag and returns the summary without a trailing newline. The feed formatter
adds the punctuation that closes each event; only the wiki-page list closes
its own last item.
"""

from __future__ import annotations

from typing import Callable

from ghactivity_core.errors import UnknownEventType
from ghactivity_core.models import Action, Event, EventType, RefType
from ghactivity_core.utils.text import truncate

Renderer = Callable[[Event], str]

BRANCH = "├─"
LAST_BRANCH = "└─"
BULLET = "•"


def _render_commit_comment(e: Event) -> str:
    return f"commented on a commit on repo {e.repo_name}:\n  '{e.payload.comment}'"


def _render_create(e: Event) -> str:
    text = f"created a new {e.payload.ref_type} "
    if e.payload.ref_type != RefType.REPOSITORY:
        text += f"'{e.payload.ref}' on "
    return text + f"'{e.repo_name}'"


def _render_delete(e: Event) -> str:
    return f"deleted the '{e.payload.ref}' {e.payload.ref_type}"


def _render_fork(e: Event) -> str:
    return f"forked the '{e.payload.forkee}' repo"


def _render_gollum(e: Event) -> str:
    pages = e.payload.pages
    header = "interacted with the following page:" if len(pages) == 1 else "interacted with the following pages:"
    if not pages:
        return header
    lines = ";\n".join(f"{BULLET} {page}" for page in pages)
    return f"{header}\n{lines}."


def _render_issue_comment(e: Event) -> str:
    p = e.payload
    return f"{p.action} comment under {p.issue} on repo '{e.repo_name}':\n  '{p.comment}'"


def _render_issues(e: Event) -> str:
    p = e.payload
    text = f"{p.action} "
    if p.action in (Action.LABELED, Action.UNLABELED):
        text += "label from "
    elif p.action in (Action.ASSIGNED, Action.UNASSIGNED):
        text += f"user {p.assignee.login} from "
    return text + str(p.issue)


def _render_member(e: Event) -> str:
    p = e.payload
    if p.action == Action.ASSIGNED:
        return f"Assigned user '{p.member.login}' to repo '{e.repo_name}'"
    return f"Edited user '{p.member.login}''s permissions on repo '{e.repo_name}'"


def _render_public(e: Event) -> str:
    return f"Made repo '{e.repo_name}' public"


def _render_pull_request(e: Event) -> str:
    p = e.payload
    text = f"{p.action} {p.pull_request} in repo '{e.repo_name}'"
    if p.action == Action.DEQUEUED:
        text += f"\n  reason: '{truncate(p.reason)}'"
    return text


def _render_pull_request_review(e: Event) -> str:
    return f"{e.payload.action} review under {e.payload.pull_request}"


def _render_pull_request_review_comment(e: Event) -> str:
    p = e.payload
    return f"{p.action} review comment under {p.pull_request}:\n  '{p.comment}'"


def _render_pull_request_review_thread(e: Event) -> str:
    return f"marked review thread under {e.payload.pull_request} as {e.payload.action}"


def _render_push(e: Event) -> str:
    p = e.payload
    if p.size == 1:
        header = f"pushed 1 commit to repo '{e.repo_name}':"
    else:
        header = f"pushed {p.size} commits to repo '{e.repo_name}':"

    # Connectors are chosen among the commits actually shown.
    shown = [c for c in p.commits if c.distinct]
    lines = [f"{BRANCH} {c}" for c in shown[:-1]]
    if shown:
        lines.append(f"{LAST_BRANCH} {shown[-1]}")
    return "\n".join([header, *lines])


def _render_release(e: Event) -> str:
    return f"{e.payload.action} release '{e.payload.release}'"


def _render_sponsorship(e: Event) -> str:
    return f"something related to the sponsors of repo '{e.repo_name}'"


def _render_watch(e: Event) -> str:
    return f"starred repo '{e.repo_name}'"


RENDERERS: dict[EventType, Renderer] = {
    EventType.COMMIT_COMMENT: _render_commit_comment,
    EventType.CREATE: _render_create,
    EventType.DELETE: _render_delete,
    EventType.FORK: _render_fork,
    EventType.GOLLUM: _render_gollum,
    EventType.ISSUE_COMMENT: _render_issue_comment,
    EventType.ISSUES: _render_issues,
    EventType.MEMBER: _render_member,
    EventType.PUBLIC: _render_public,
    EventType.PULL_REQUEST: _render_pull_request,
    EventType.PULL_REQUEST_REVIEW: _render_pull_request_review,
    EventType.PULL_REQUEST_REVIEW_COMMENT: _render_pull_request_review_comment,
    EventType.PULL_REQUEST_REVIEW_THREAD: _render_pull_request_review_thread,
    EventType.PUSH: _render_push,
    EventType.RELEASE: _render_release,
    EventType.SPONSORSHIP: _render_sponsorship,
    EventType.WATCH: _render_watch,
}

_unhandled = set(EventType) - set(RENDERERS)
if _unhandled:
    raise RuntimeError(f"No renderer for: {', '.join(sorted(t.value for t in _unhandled))}")


def render(event: Event) -> str:
    """Return the summary line for a single event.

    Raises UnknownEventType when the event's tag has no renderer.
    """
    renderer = RENDERERS.get(event.type)
    if renderer is None:
        raise UnknownEventType(str(event.type))
    return renderer(event)
