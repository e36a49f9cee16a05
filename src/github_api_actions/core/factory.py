from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from github_api_actions.config_models import ClientSettings
from github_api_actions.core.runner import ActionRunner
from github_api_actions.http.client import GithubApiClient, HttpClient
from github_api_actions.operations import register_all
from github_api_actions.state.context import SharedContext, default_context


@dataclass(frozen=True)
class BuiltComponents:
    client: HttpClient
    runner: ActionRunner
    context: SharedContext
    settings: ClientSettings


class ComponentFactory:
    """
    Factory responsible for wiring dependencies.
    Keeps main.py clean and lets tests swap the HTTP client.
    """

    def __init__(self, settings: Optional[ClientSettings] = None):
        self.settings = settings or ClientSettings.from_env()

    def build(self, context: Optional[SharedContext] = None, client: Optional[HttpClient] = None) -> BuiltComponents:
        """
        Build a runner with every operation registered.

        Args:
            context: Shared context to publish into; the process-wide one if omitted.
            client: HTTP client to use; a requests-backed client if omitted.

        Returns:
            A container with all built components.
        """
        register_all()
        client = client or self._http_client()
        context = context if context is not None else default_context()
        runner = ActionRunner(client=client, settings=self.settings, context=context)
        return BuiltComponents(client=client, runner=runner, context=context, settings=self.settings)

    def _http_client(self) -> GithubApiClient:
        return GithubApiClient(timeout_s=self.settings.timeout_s)


def build_runner(context: Optional[SharedContext] = None, **settings) -> ActionRunner:
    """Shortcut: a runner configured from the environment, with explicit settings taking precedence."""
    return ComponentFactory(ClientSettings.from_env(**settings)).build(context=context).runner
