"""Issues, issue comments and issue events."""

from __future__ import annotations

from github_api_actions.core.models import QUERY, OperationSpec, Param
from github_api_actions.operations.base import (
    DIRECTIONS,
    OPEN_CLOSED,
    PAGE_PARAMS,
    REPO,
    REPO_PARAMS,
    TIMELINE_PREVIEW,
    join_commas,
    path_number,
)

ISSUE_NUMBER = path_number("issue_number", "The issue number")
COMMENT_ID = path_number("comment_id", "The ID of the comment")

LOCK_REASONS = ("off-topic", "too heated", "resolved", "spam")

OPERATIONS = (
    OperationSpec(
        name="github_create_issue",
        method="POST",
        path=REPO + "/issues",
        description="Creates a new GitHub issue",
        params=REPO_PARAMS + (
            Param("title", required=True, description="The title of the issue"),
            Param("body", description="The body content of the issue"),
            Param("assignees", list, description="Logins of users to assign to the issue"),
            Param("milestone", int, description="The milestone number to associate with this issue"),
            Param("labels", list, description="Labels to associate with this issue"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/issues#create-an-issue",
    ),
    OperationSpec(
        name="github_get_issue",
        method="GET",
        path=REPO + "/issues/{issue_number}",
        description="Gets a GitHub issue",
        params=REPO_PARAMS + (ISSUE_NUMBER,),
        doc_url="https://docs.github.com/en/rest/issues/issues#get-an-issue",
    ),
    OperationSpec(
        name="github_update_issue",
        method="PATCH",
        path=REPO + "/issues/{issue_number}",
        description="Updates an existing GitHub issue",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("title", description="The new title of the issue"),
            Param("body", description="The new body content of the issue"),
            Param("state", choices=OPEN_CLOSED, description="State of the issue"),
            Param("assignees", list, description="Logins of users to assign to the issue"),
            Param("milestone", int, description="The milestone number to associate with this issue"),
            Param("labels", list, description="Labels to associate with this issue"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/issues#update-an-issue",
    ),
    OperationSpec(
        name="github_list_issues",
        method="GET",
        path=REPO + "/issues",
        description="Lists issues in a repository",
        params=REPO_PARAMS + (
            Param("state", location=QUERY, choices=OPEN_CLOSED + ("all",), description="State of the issues to return"),
            Param("assignee", location=QUERY, description="Filter by assignee login"),
            Param("creator", location=QUERY, description="Filter by creator login"),
            Param("mentioned", location=QUERY, description="Filter by a mentioned user"),
            Param("labels", list, location=QUERY, transform=join_commas, description="Filter by label names"),
            Param("sort", location=QUERY, choices=("created", "updated", "comments"), description="What to sort results by"),
            Param("direction", location=QUERY, choices=DIRECTIONS, description="Sort direction"),
            Param("since", location=QUERY, description="Only issues updated after this ISO 8601 timestamp"),
            Param("milestone", location=QUERY, description="Milestone number, '*' or 'none'"),
        ) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/issues/issues#list-repository-issues",
    ),
    OperationSpec(
        name="github_lock_issue",
        method="PUT",
        path=REPO + "/issues/{issue_number}/lock",
        description="Locks an issue conversation",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("lock_reason", choices=LOCK_REASONS, description="The reason for locking the issue"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/issues#lock-an-issue",
    ),
    OperationSpec(
        name="github_unlock_issue",
        method="DELETE",
        path=REPO + "/issues/{issue_number}/lock",
        description="Unlocks an issue conversation",
        params=REPO_PARAMS + (ISSUE_NUMBER,),
        doc_url="https://docs.github.com/en/rest/issues/issues#unlock-an-issue",
    ),
    OperationSpec(
        name="github_add_assignees",
        method="POST",
        path=REPO + "/issues/{issue_number}/assignees",
        description="Adds assignees to a GitHub issue",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("assignees", list, required=True, description="Logins of users to assign"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/assignees#add-assignees-to-an-issue",
    ),
    # Comments
    OperationSpec(
        name="github_add_issue_comment",
        method="POST",
        path=REPO + "/issues/{issue_number}/comments",
        description="Adds a comment to a GitHub issue",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("body", required=True, description="The comment text"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/comments#create-an-issue-comment",
    ),
    OperationSpec(
        name="github_get_issue_comment",
        method="GET",
        path=REPO + "/issues/comments/{comment_id}",
        description="Gets an issue comment",
        params=REPO_PARAMS + (COMMENT_ID,),
        doc_url="https://docs.github.com/en/rest/issues/comments#get-an-issue-comment",
    ),
    OperationSpec(
        name="github_update_issue_comment",
        method="PATCH",
        path=REPO + "/issues/comments/{comment_id}",
        description="Updates an issue comment",
        params=REPO_PARAMS + (
            COMMENT_ID,
            Param("body", required=True, description="The new comment text"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/comments#update-an-issue-comment",
    ),
    OperationSpec(
        name="github_delete_issue_comment",
        method="DELETE",
        path=REPO + "/issues/comments/{comment_id}",
        description="Deletes an issue comment",
        params=REPO_PARAMS + (COMMENT_ID,),
        doc_url="https://docs.github.com/en/rest/issues/comments#delete-an-issue-comment",
    ),
    OperationSpec(
        name="github_list_issue_comments",
        method="GET",
        path=REPO + "/issues/{issue_number}/comments",
        description="Lists comments on an issue",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("since", location=QUERY, description="Only comments updated after this ISO 8601 timestamp"),
        ) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/issues/comments#list-issue-comments",
    ),
    # Events
    OperationSpec(
        name="github_list_issue_events",
        method="GET",
        path=REPO + "/issues/{issue_number}/events",
        description="Lists events for an issue",
        params=REPO_PARAMS + (ISSUE_NUMBER,) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/issues/events#list-issue-events",
    ),
    OperationSpec(
        name="github_get_issue_event",
        method="GET",
        path=REPO + "/issues/events/{event_id}",
        description="Gets a single issue event",
        params=REPO_PARAMS + (path_number("event_id", "The ID of the event"),),
        doc_url="https://docs.github.com/en/rest/issues/events#get-an-issue-event",
    ),
    OperationSpec(
        name="github_list_repo_issue_events",
        method="GET",
        path=REPO + "/issues/events",
        description="Lists issue events for a repository",
        params=REPO_PARAMS + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/issues/events#list-issue-events-for-a-repository",
    ),
    OperationSpec(
        name="github_get_issue_timeline",
        method="GET",
        path=REPO + "/issues/{issue_number}/timeline",
        description="Gets the timeline events for an issue",
        accept=TIMELINE_PREVIEW,
        params=REPO_PARAMS + (ISSUE_NUMBER,) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/issues/timeline#list-timeline-events-for-an-issue",
    ),
)
