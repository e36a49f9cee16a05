from __future__ import annotations

from github_api_actions.core.models import QUERY, OperationSpec, Param
from github_api_actions.operations.base import DIRECTIONS, OPEN_CLOSED, PAGE_PARAMS, REPO, REPO_PARAMS, path_number

MILESTONE_NUMBER = path_number("milestone_number", "The milestone number")

OPERATIONS = (
    OperationSpec(
        name="github_list_milestones",
        method="GET",
        path=REPO + "/milestones",
        description="Lists milestones for a repository",
        params=REPO_PARAMS + (
            Param("state", location=QUERY, choices=OPEN_CLOSED + ("all",), description="State of the milestones"),
            Param("sort", location=QUERY, choices=("due_on", "completeness"), description="What to sort results by"),
            Param("direction", location=QUERY, choices=DIRECTIONS, description="Sort direction"),
        ) + PAGE_PARAMS,
        doc_url="https://docs.github.com/en/rest/issues/milestones#list-milestones",
    ),
    OperationSpec(
        name="github_get_milestone",
        method="GET",
        path=REPO + "/milestones/{milestone_number}",
        description="Gets a milestone",
        params=REPO_PARAMS + (MILESTONE_NUMBER,),
        doc_url="https://docs.github.com/en/rest/issues/milestones#get-a-milestone",
    ),
    OperationSpec(
        name="github_create_milestone",
        method="POST",
        path=REPO + "/milestones",
        description="Creates a milestone",
        params=REPO_PARAMS + (
            Param("title", required=True, description="The title of the milestone"),
            Param("state", choices=OPEN_CLOSED, description="State of the milestone"),
            Param("description", description="A description of the milestone"),
            Param("due_on", description="Due date as an ISO 8601 timestamp"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/milestones#create-a-milestone",
    ),
    OperationSpec(
        name="github_update_milestone",
        method="PATCH",
        path=REPO + "/milestones/{milestone_number}",
        description="Updates a milestone",
        params=REPO_PARAMS + (
            MILESTONE_NUMBER,
            Param("title", description="The title of the milestone"),
            Param("state", choices=OPEN_CLOSED, description="State of the milestone"),
            Param("description", description="A description of the milestone"),
            Param("due_on", description="Due date as an ISO 8601 timestamp"),
        ),
        doc_url="https://docs.github.com/en/rest/issues/milestones#update-a-milestone",
    ),
)
