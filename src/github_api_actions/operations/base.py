"""Shared parameter definitions and value helpers for the operation tables."""

from __future__ import annotations

from typing import Any, List

from github_api_actions.core.models import PATH, QUERY, Param

REACTIONS_PREVIEW = "application/vnd.github.squirrel-girl-preview+json"
TIMELINE_PREVIEW = "application/vnd.github.mockingbird-preview+json"

REACTION_CONTENTS = ("+1", "-1", "laugh", "confused", "heart", "hooray", "rocket", "eyes")
OPEN_CLOSED = ("open", "closed")
DIRECTIONS = ("asc", "desc")
COMMENT_SORTS = ("created", "updated")
DIFF_SIDES = ("LEFT", "RIGHT")

REPO = "/repos/{repo_owner}/{repo_name}"

REPO_PARAMS = (
    Param("repo_owner", required=True, location=PATH, description="Repository owner (organization or username)"),
    Param("repo_name", required=True, location=PATH, description="Repository name"),
)

PAGE_PARAMS = (
    Param("per_page", int, location=QUERY, description="Results per page (max 100)"),
    Param("page", int, location=QUERY, description="Page number of the results to fetch"),
)


def path_number(name: str, description: str) -> Param:
    return Param(name, int, required=True, location=PATH, description=description)


def strip_hash(color: Any) -> Any:
    """Label colors are sent without the leading '#'."""
    if isinstance(color, str) and color.startswith("#"):
        return color[1:]
    return color


def join_commas(values: List[str]) -> str:
    return ",".join(str(v) for v in values)
