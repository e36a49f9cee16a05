from __future__ import annotations

from typing import Any, Dict
from urllib.parse import quote

from github_api_actions.core.models import OPTION, OperationSpec, Param
from github_api_actions.errors import InvalidArgument
from github_api_actions.operations.base import REPO, REPO_PARAMS


def _repos_path(values: Dict[str, Any]) -> str:
    org = values.get("organization")
    if org:
        return f"/orgs/{quote(str(org), safe='')}/repos"
    return "/user/repos"


def _require_confirmation(values: Dict[str, Any]) -> Dict[str, Any]:
    if values.get("confirm") is not True:
        raise InvalidArgument(
            "Repository deletion was not confirmed. "
            "This is irreversible; pass `confirm: true` to delete the repository."
        )
    return values


OPERATIONS = (
    OperationSpec(
        name="github_create_repository",
        method="POST",
        path="/user/repos",
        description="Creates a new GitHub repository",
        params=(
            Param("name", required=True, description="The name of the repository"),
            Param("organization", location=OPTION, description="Create the repository in this organization"),
            Param("description", description="A short description of the repository"),
            Param("homepage", description="A URL with more information about the repository"),
            Param("private", bool, description="Whether the repository is private"),
            Param("has_issues", bool, description="Enable issues"),
            Param("has_projects", bool, description="Enable projects"),
            Param("has_wiki", bool, description="Enable the wiki"),
            Param("auto_init", bool, description="Create an initial commit with an empty README"),
            Param("license_template", description="License keyword, e.g. mit or mpl-2.0"),
            Param("allow_squash_merge", bool, description="Allow squash-merging pull requests"),
            Param("allow_merge_commit", bool, description="Allow merging pull requests with a merge commit"),
            Param("allow_rebase_merge", bool, description="Allow rebase-merging pull requests"),
        ),
        resolve_path=_repos_path,
        doc_url="https://docs.github.com/en/rest/repos/repos#create-a-repository-for-the-authenticated-user",
    ),
    OperationSpec(
        name="github_delete_repository",
        method="DELETE",
        path=REPO,
        description="Deletes a GitHub repository",
        params=REPO_PARAMS + (
            Param("confirm", bool, location=OPTION, description="Must be true; deletion is irreversible"),
        ),
        prepare=_require_confirmation,
        doc_url="https://docs.github.com/en/rest/repos/repos#delete-a-repository",
    ),
)
