"""Pull requests: the pulls themselves, reviewers, reviews and review comments."""

from __future__ import annotations

from typing import Any, Dict

from github_api_actions.core.models import QUERY, OperationSpec, Param, status_in
from github_api_actions.errors import InvalidArgument
from github_api_actions.http.response import ApiResponse
from github_api_actions.operations.base import (
    COMMENT_SORTS,
    DIFF_SIDES,
    DIRECTIONS,
    OPEN_CLOSED,
    PAGE_PARAMS,
    REPO,
    REPO_PARAMS,
    path_number,
)

PULL_NUMBER = path_number("pull_number", "The number of the pull request")
REVIEW_ID = path_number("review_id", "The ID of the review")
COMMENT_ID = path_number("comment_id", "The ID of the review comment")

REVIEWER_PARAMS = (
    Param("reviewers", list, description="User logins", omit_empty=True),
    Param("team_reviewers", list, description="Team slugs", omit_empty=True),
)

COMMENT_LIST_PARAMS = (
    Param("sort", location=QUERY, choices=COMMENT_SORTS, description="What to sort results by"),
    Param("direction", location=QUERY, choices=DIRECTIONS, description="Sort direction"),
    Param("since", location=QUERY, description="Only comments updated after this ISO 8601 timestamp"),
) + PAGE_PARAMS

# Body fields that anchor a new review comment to a line of the diff.
LINE_FIELDS = ("commit_id", "path", "position", "line", "side", "start_line", "start_side")


def _merge_state(response: ApiResponse) -> Dict[str, Any]:
    # 204 means merged, 404 means not merged
    return {"merged": response.status == 204}


def _comment_target(values: Dict[str, Any]) -> Dict[str, Any]:
    """A review comment is either anchored to a diff line or a reply to another comment."""
    if values.get("in_reply_to"):
        return {k: v for k, v in values.items() if k not in LINE_FIELDS}
    if values.get("commit_id") and values.get("path"):
        return values
    raise InvalidArgument("Either provide commit_id and path OR in_reply_to parameter")


OPERATIONS = (
    OperationSpec(
        name="github_create_pull",
        method="POST",
        path=REPO + "/pulls",
        description="Creates a pull request",
        params=REPO_PARAMS + (
            Param("title", required=True, description="The title of the pull request"),
            Param("head", required=True, description="The branch where your changes are implemented"),
            Param("base", required=True, description="The branch you want the changes pulled into"),
            Param("body", description="The contents of the pull request"),
            Param("maintainer_can_modify", bool, description="Whether maintainers can modify the pull request"),
            Param("draft", bool, description="Whether to create the pull request as a draft"),
            Param("issue", int, description="An issue number to convert to a pull request"),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/pulls#create-a-pull-request",
    ),
    OperationSpec(
        name="github_get_pull",
        method="GET",
        path=REPO + "/pulls/{pull_number}",
        description="Gets a pull request",
        params=REPO_PARAMS + (PULL_NUMBER,),
        doc_url="https://docs.github.com/en/rest/pulls/pulls#get-a-pull-request",
    ),
    OperationSpec(
        name="github_update_pull",
        method="PATCH",
        path=REPO + "/pulls/{pull_number}",
        description="Updates a pull request",
        params=REPO_PARAMS + (
            PULL_NUMBER,
            Param("title", description="The title of the pull request"),
            Param("body", description="The contents of the pull request"),
            Param("state", choices=OPEN_CLOSED, description="State of the pull request"),
            Param("base", description="The branch you want the changes pulled into"),
            Param("maintainer_can_modify", bool, description="Whether maintainers can modify the pull request"),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/pulls#update-a-pull-request",
    ),
    OperationSpec(
        name="github_list_pulls",
        method="GET",
        path=REPO + "/pulls",
        description="Lists pull requests in a repository",
        params=REPO_PARAMS + (
            Param("state", location=QUERY, choices=OPEN_CLOSED + ("all",), description="State of the pull requests"),
            Param("head", location=QUERY, description="Filter by head user or organization and branch name"),
            Param("base", location=QUERY, description="Filter by base branch name"),
            Param("sort", location=QUERY, choices=("created", "updated", "popularity", "long-running"),
                  description="What to sort results by"),
            Param("direction", location=QUERY, choices=DIRECTIONS, description="Sort direction"),
        ) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/pulls/pulls#list-pull-requests",
    ),
    OperationSpec(
        name="github_list_pull_commits",
        method="GET",
        path=REPO + "/pulls/{pull_number}/commits",
        description="Lists commits on a pull request",
        params=REPO_PARAMS + (PULL_NUMBER,) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/pulls/pulls#list-commits-on-a-pull-request",
    ),
    OperationSpec(
        name="github_check_pull_merged",
        method="GET",
        path=REPO + "/pulls/{pull_number}/merge",
        description="Checks if a pull request has been merged",
        params=REPO_PARAMS + (PULL_NUMBER,),
        success=status_in(204, 404),
        summarize=_merge_state,
        outputs={"GITHUB_PULL_IS_MERGED": "merged"},
        doc_url="https://docs.github.com/en/rest/pulls/pulls#check-if-a-pull-request-has-been-merged",
    ),
    OperationSpec(
        name="github_merge_pull",
        method="PUT",
        path=REPO + "/pulls/{pull_number}/merge",
        description="Merges a pull request",
        params=REPO_PARAMS + (
            PULL_NUMBER,
            Param("commit_title", description="Title for the automatic commit message"),
            Param("commit_message", description="Extra detail to append to the commit message"),
            Param("merge_method", choices=("merge", "squash", "rebase"), description="Merge method to use"),
            Param("sha", description="SHA that the pull request head must match to allow merge"),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/pulls#merge-a-pull-request",
    ),
    OperationSpec(
        name="github_update_pull_branch",
        method="PUT",
        path=REPO + "/pulls/{pull_number}/update-branch",
        description="Updates a pull request branch with the latest upstream changes",
        params=REPO_PARAMS + (
            PULL_NUMBER,
            Param("expected_head_sha", description="The expected SHA of the pull request's HEAD ref"),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/pulls#update-a-pull-request-branch",
    ),
    # Reviewers
    OperationSpec(
        name="github_list_pull_reviewers",
        method="GET",
        path=REPO + "/pulls/{pull_number}/requested_reviewers",
        description="Lists requested reviewers for a pull request",
        params=REPO_PARAMS + (PULL_NUMBER,),
        doc_url="https://docs.github.com/en/rest/pulls/review-requests#get-all-requested-reviewers-for-a-pull-request",
    ),
    OperationSpec(
        name="github_request_pull_review",
        method="POST",
        path=REPO + "/pulls/{pull_number}/requested_reviewers",
        description="Requests reviewers for a pull request",
        params=REPO_PARAMS + (PULL_NUMBER,) + REVIEWER_PARAMS,
        doc_url="https://docs.github.com/en/rest/pulls/review-requests#request-reviewers-for-a-pull-request",
    ),
    OperationSpec(
        name="github_remove_pull_reviewers",
        method="DELETE",
        path=REPO + "/pulls/{pull_number}/requested_reviewers",
        description="Removes requested reviewers from a pull request",
        params=REPO_PARAMS + (PULL_NUMBER,) + REVIEWER_PARAMS,
        doc_url="https://docs.github.com/en/rest/pulls/review-requests#remove-requested-reviewers-from-a-pull-request",
    ),
    # Reviews
    OperationSpec(
        name="github_get_pull_review",
        method="GET",
        path=REPO + "/pulls/{pull_number}/reviews/{review_id}",
        description="Gets a review for a pull request",
        params=REPO_PARAMS + (PULL_NUMBER, REVIEW_ID),
        doc_url="https://docs.github.com/en/rest/pulls/reviews#get-a-review-for-a-pull-request",
    ),
    OperationSpec(
        name="github_get_pull_review_comments",
        method="GET",
        path=REPO + "/pulls/{pull_number}/reviews/{review_id}/comments",
        description="Lists comments for a pull request review",
        params=REPO_PARAMS + (PULL_NUMBER, REVIEW_ID) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/pulls/reviews#list-comments-for-a-pull-request-review",
    ),
    OperationSpec(
        name="github_submit_pull_review",
        method="POST",
        path=REPO + "/pulls/{pull_number}/reviews",
        description="Creates a review for a pull request",
        params=REPO_PARAMS + (
            PULL_NUMBER,
            Param("event", choices=("APPROVE", "REQUEST_CHANGES", "COMMENT"), description="The review action"),
            Param("body", description="The body text of the review"),
            Param("comments", list, description="Draft review comments, one mapping per comment", omit_empty=True),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/reviews#create-a-review-for-a-pull-request",
    ),
    OperationSpec(
        name="github_dismiss_pull_review",
        method="PUT",
        path=REPO + "/pulls/{pull_number}/reviews/{review_id}/dismissals",
        description="Dismisses a review for a pull request",
        params=REPO_PARAMS + (
            PULL_NUMBER,
            REVIEW_ID,
            Param("message", required=True, description="The message for the dismissal"),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/reviews#dismiss-a-review-for-a-pull-request",
    ),
    # Review comments
    OperationSpec(
        name="github_list_pull_comments",
        method="GET",
        path=REPO + "/pulls/{pull_number}/comments",
        description="Lists review comments on a pull request",
        params=REPO_PARAMS + (PULL_NUMBER,) + COMMENT_LIST_PARAMS,
        doc_url="https://docs.github.com/en/rest/pulls/comments#list-review-comments-on-a-pull-request",
    ),
    OperationSpec(
        name="github_list_all_pull_comments",
        method="GET",
        path=REPO + "/pulls/comments",
        description="Lists review comments on all pull requests in a repository",
        params=REPO_PARAMS + COMMENT_LIST_PARAMS,
        doc_url="https://docs.github.com/en/rest/pulls/comments#list-review-comments-in-a-repository",
    ),
    OperationSpec(
        name="github_get_pull_comment",
        method="GET",
        path=REPO + "/pulls/comments/{comment_id}",
        description="Gets a review comment on a pull request",
        params=REPO_PARAMS + (COMMENT_ID,),
        doc_url="https://docs.github.com/en/rest/pulls/comments#get-a-review-comment-for-a-pull-request",
    ),
    OperationSpec(
        name="github_create_pull_comment",
        method="POST",
        path=REPO + "/pulls/{pull_number}/comments",
        description="Creates a review comment on a pull request",
        params=REPO_PARAMS + (
            PULL_NUMBER,
            Param("body", required=True, description="The text of the review comment"),
            Param("commit_id", description="SHA of the commit to comment on"),
            Param("path", description="Relative path of the file to comment on"),
            Param("position", int, description="Line index in the diff to comment on"),
            Param("line", int, description="Line of the blob in the diff that the comment applies to"),
            Param("side", choices=DIFF_SIDES, description="Side of the diff: LEFT or RIGHT"),
            Param("start_line", int, description="First line of a multi-line comment"),
            Param("start_side", choices=DIFF_SIDES, description="Starting side of a multi-line comment"),
            Param("in_reply_to", int, description="ID of the review comment to reply to"),
        ),
        prepare=_comment_target,
        doc_url="https://docs.github.com/en/rest/pulls/comments#create-a-review-comment-for-a-pull-request",
    ),
    OperationSpec(
        name="github_submit_pull_comment",
        method="POST",
        path=REPO + "/pulls/{pull_number}/comments",
        description="Submits a comment on a pull request diff",
        params=REPO_PARAMS + (
            PULL_NUMBER,
            Param("body", required=True, description="The text of the comment"),
            Param("commit_id", description="SHA of the commit to comment on"),
            Param("path", description="Relative path of the file to comment on"),
            Param("position", int, description="Line index in the diff to comment on"),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/comments#create-a-review-comment-for-a-pull-request",
    ),
    OperationSpec(
        name="github_update_pull_comment",
        method="PATCH",
        path=REPO + "/pulls/comments/{comment_id}",
        description="Updates a review comment on a pull request",
        params=REPO_PARAMS + (
            COMMENT_ID,
            Param("body", required=True, description="The new text of the comment"),
        ),
        doc_url="https://docs.github.com/en/rest/pulls/comments#update-a-review-comment-for-a-pull-request",
    ),
    OperationSpec(
        name="github_delete_pull_comment",
        method="DELETE",
        path=REPO + "/pulls/comments/{comment_id}",
        description="Deletes a review comment on a pull request",
        params=REPO_PARAMS + (COMMENT_ID,),
        doc_url="https://docs.github.com/en/rest/pulls/comments#delete-a-review-comment-for-a-pull-request",
    ),
)
