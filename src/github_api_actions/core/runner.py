from __future__ import annotations

from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from github_api_actions.config_models import ClientSettings
from github_api_actions.core.models import BODY, PATH, QUERY, ActionResult, OperationSpec
from github_api_actions.core.validation import validate_params
from github_api_actions.errors import InvalidArgument, RemoteError
from github_api_actions.http.client import HttpClient
from github_api_actions.operations import registry
from github_api_actions.state.context import SharedContext, default_context
from github_api_actions.utils.logging import get_logger


class ActionRunner:
    """
    Runs registered operations: validates parameters, issues the request through
    the client, decides success per operation and publishes results to the shared context.
    """

    def __init__(
        self,
        client: HttpClient,
        settings: Optional[ClientSettings] = None,
        context: Optional[SharedContext] = None,
    ):
        """
        Args:
            client: Client that performs the HTTP call.
            settings: Default token and server URL for calls that do not pass their own.
            context: Store the results are published into; the process-wide one if omitted.
        """
        self.client = client
        self.settings = settings or ClientSettings.from_env()
        self.context = context if context is not None else default_context()
        self.log = get_logger("github_api_actions.runner")

    def run(self, operation: str, /, **params: Any) -> ActionResult:
        """
        Run one operation.

        Args:
            operation: Registered operation name, e.g. "github_create_issue".
            **params: Operation parameters, plus optional api_token / server_url.

        Returns:
            The result of a call the operation accepts as successful.

        Raises:
            UnknownOperation: If no operation has that name.
            InvalidArgument: If a parameter is missing or invalid (no request is made).
            RemoteError: If the API status is not a success for this operation.
        """
        spec = registry.get(operation)

        token = params.pop("api_token", None) or self.settings.api_token
        server_url = params.pop("server_url", None) or self.settings.server_url
        if not token:
            raise InvalidArgument("No GitHub API token given, pass using `api_token: 'token'`")

        values = validate_params(spec, params)
        if spec.prepare is not None:
            values = spec.prepare(values)

        path, query, body = self.build_request(spec, values)
        headers = {"Accept": spec.accept} if spec.accept else None
        payload = query if spec.method == "GET" else body

        self.log.info("%s: %s %s", spec.name, spec.method, path)
        response = self.client.perform(spec.method, path, token, server_url, params=payload, headers=headers)

        if not spec.success(response.status):
            self.log.error("%s failed with status %s: %s", spec.name, response.status, response.message)
            raise RemoteError(spec.name, response.status, response.message, response)

        extras = spec.summarize(response) if spec.summarize is not None else {}
        result = ActionResult(operation=spec.name, response=response, extras=extras)
        self.publish(spec, result)

        self.log.info("%s succeeded (status=%s)", spec.name, response.status)
        return result

    def build_request(
        self, spec: OperationSpec, values: Dict[str, Any]
    ) -> Tuple[str, Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Split validated values into the request path, query string and JSON body."""
        segments: Dict[str, str] = {}
        query: Dict[str, Any] = {}
        body: Dict[str, Any] = {}

        for p in spec.params:
            if p.location == PATH:
                segments[p.name] = quote(str(values[p.name]), safe="")
                continue
            if p.name not in values:
                continue
            value = p.transform(values[p.name]) if p.transform else values[p.name]
            if p.location == QUERY:
                query[p.key] = value
            elif p.location == BODY:
                body[p.key] = value

        path = spec.resolve_path(values) if spec.resolve_path else spec.path.format(**segments)
        has_body = any(p.location == BODY for p in spec.params)
        return path, query or None, body if has_body else None

    def publish(self, spec: OperationSpec, result: ActionResult) -> None:
        """Write the result into the shared context for later steps."""
        self.context.publish(
            spec.context_prefix,
            {
                "status_code": result.status,
                "response": result.body,
                "json": result.json,
            },
        )
        for key, attr in spec.outputs.items():
            self.context[key] = result.extras.get(attr)
