"""Repository labels and the labels attached to issues."""

from __future__ import annotations

from github_api_actions.core.models import PATH, OperationSpec, Param
from github_api_actions.operations.base import PAGE_PARAMS, REPO, REPO_PARAMS, path_number, strip_hash

ISSUE_NUMBER = path_number("issue_number", "The issue number")

OPERATIONS = (
    OperationSpec(
        name="github_list_repo_labels",
        method="GET",
        path=REPO + "/labels",
        description="Lists all labels for a repository",
        params=REPO_PARAMS + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/issues/labels#list-labels-for-a-repository",
    ),
    OperationSpec(
        name="github_create_label",
        method="POST",
        path=REPO + "/labels",
        description="Creates a new label in a repository",
        params=REPO_PARAMS + (
            Param("name", required=True, description="The name of the label"),
            Param("color", required=True, transform=strip_hash, description="Hex color code, with or without '#'"),
            Param("description", description="A short description of the label"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/labels#create-a-label",
    ),
    OperationSpec(
        name="github_update_label",
        method="PATCH",
        path=REPO + "/labels/{name}",
        description="Updates an existing label in a repository",
        params=REPO_PARAMS + (
            Param("name", required=True, location=PATH, description="The current name of the label"),
            Param("new_name", description="The new name of the label"),
            Param("color", transform=strip_hash, description="Hex color code, with or without '#'"),
            Param("description", description="A short description of the label"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/labels#update-a-label",
    ),
    OperationSpec(
        name="github_add_labels",
        method="POST",
        path=REPO + "/issues/{issue_number}/labels",
        description="Adds labels to an issue",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("labels", list, required=True, description="Label names to add"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/labels#add-labels-to-an-issue",
    ),
    OperationSpec(
        name="github_set_labels",
        method="PUT",
        path=REPO + "/issues/{issue_number}/labels",
        description="Replaces all labels on an issue",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("labels", list, required=True, description="Label names to set"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/labels#set-labels-for-an-issue",
    ),
    OperationSpec(
        name="github_remove_label",
        method="DELETE",
        path=REPO + "/issues/{issue_number}/labels/{label_name}",
        description="Removes a label from an issue",
        params=REPO_PARAMS + (
            ISSUE_NUMBER,
            Param("label_name", required=True, location=PATH, description="The name of the label to remove"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/labels#remove-a-label-from-an-issue",
    ),
    OperationSpec(
        name="github_remove_all_labels",
        method="DELETE",
        path=REPO + "/issues/{issue_number}/labels",
        description="Removes all labels from an issue",
        params=REPO_PARAMS + (ISSUE_NUMBER,),
        doc_url="https://docs.github.com/en/rest/issues/labels#remove-all-labels-from-an-issue",
    ),
)
