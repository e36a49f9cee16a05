from github_api_actions.operations import issues, labels, milestones, pulls, reactions, repositories
from github_api_actions.operations.registry import get, get_registered_operations, register


def register_all() -> None:
    for module in (issues, labels, milestones, pulls, reactions, repositories):
        for spec in module.OPERATIONS:
            register(spec)


__all__ = [
    "get",
    "get_registered_operations",
    "register",
    "register_all",
]
