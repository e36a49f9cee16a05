from github_api_actions.http.client import GithubApiClient, HttpClient
from github_api_actions.http.response import ApiResponse

__all__ = [
    "ApiResponse",
    "GithubApiClient",
    "HttpClient",
]
