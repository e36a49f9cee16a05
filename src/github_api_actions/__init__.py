"""Call GitHub's REST API (issues, pull requests, labels, milestones, reactions, repositories) from automation workflows."""

from github_api_actions.core.factory import ComponentFactory, build_runner
from github_api_actions.core.models import ActionResult, OperationSpec, Param
from github_api_actions.core.runner import ActionRunner
from github_api_actions.errors import TRANSPORT_FAILURE_STATUS, InvalidArgument, RemoteError, UnknownOperation
from github_api_actions.http.client import GithubApiClient
from github_api_actions.http.response import ApiResponse
from github_api_actions.state.context import SharedContext

__version__ = "0.1.0"

__all__ = [
    "ActionResult",
    "ActionRunner",
    "ApiResponse",
    "ComponentFactory",
    "GithubApiClient",
    "InvalidArgument",
    "OperationSpec",
    "Param",
    "RemoteError",
    "SharedContext",
    "TRANSPORT_FAILURE_STATUS",
    "UnknownOperation",
    "build_runner",
]
