from github_api_actions.state.context import SharedContext, default_context

__all__ = [
    "SharedContext",
    "default_context",
]
