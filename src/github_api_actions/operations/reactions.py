from __future__ import annotations

from github_api_actions.core.models import QUERY, OperationSpec, Param, status_in
from github_api_actions.operations.base import (
    PAGE_PARAMS,
    REACTION_CONTENTS,
    REACTIONS_PREVIEW,
    REPO,
    REPO_PARAMS,
    path_number,
)

CONTENT = Param("content", required=True, choices=REACTION_CONTENTS, description="The reaction type")

OPERATIONS = (
    OperationSpec(
        name="github_create_issue_reaction",
        method="POST",
        path=REPO + "/issues/{issue_number}/reactions",
        description="Creates a reaction for an issue",
        accept=REACTIONS_PREVIEW,
        params=REPO_PARAMS + (path_number("issue_number", "The issue number"), CONTENT),
        doc_url="https://docs.github.com/en/rest/reactions/reactions#create-reaction-for-an-issue",
    ),
    OperationSpec(
        name="github_create_commit_comment_reaction",
        method="POST",
        path=REPO + "/comments/{comment_id}/reactions",
        description="Creates a reaction for a commit comment",
        accept=REACTIONS_PREVIEW,
        params=REPO_PARAMS + (path_number("comment_id", "The ID of the commit comment"), CONTENT),
        doc_url="https://docs.github.com/en/rest/reactions/reactions#create-reaction-for-a-commit-comment",
    ),
    OperationSpec(
        name="github_list_issue_reactions",
        method="GET",
        path=REPO + "/issues/{issue_number}/reactions",
        description="Lists reactions for an issue",
        accept=REACTIONS_PREVIEW,
        params=REPO_PARAMS + (
            path_number("issue_number", "The issue number"),
            Param("content", location=QUERY, choices=REACTION_CONTENTS, description="Only return this reaction type"),
        ) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/reactions/reactions#list-reactions-for-an-issue",
    ),
    OperationSpec(
        name="github_delete_issue_comment_reaction",
        method="DELETE",
        path=REPO + "/issues/comments/{comment_id}/reactions/{reaction_id}",
        description="Deletes a reaction from an issue comment",
        accept=REACTIONS_PREVIEW,
        params=REPO_PARAMS + (
            path_number("comment_id", "The ID of the issue comment"),
            path_number("reaction_id", "The ID of the reaction"),
        ),
        success=status_in(204),
        doc_url="https://docs.github.com/en/rest/reactions/reactions#delete-an-issue-comment-reaction",
    ),
)
