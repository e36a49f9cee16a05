from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from github_api_actions.config_models import WorkflowConfig
from github_api_actions.core.models import ActionResult
from github_api_actions.core.runner import ActionRunner
from github_api_actions.errors import InvalidArgument, RemoteError
from github_api_actions.utils.logging import get_logger

log = get_logger("github_api_actions.workflow")


@dataclass
class WorkflowReport:
    """Summary of a workflow run."""

    steps_total: int = 0
    steps_succeeded: int = 0
    steps_failed: int = 0
    stopped_early: bool = False
    results: List[ActionResult] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.steps_failed == 0


def run_workflow(config: WorkflowConfig, runner: ActionRunner) -> WorkflowReport:
    """
    Run the workflow's steps in order through one runner, so they share its context.

    A failing step stops the run unless it sets ``continue_on_error``.
    """
    report = WorkflowReport(steps_total=len(config.steps))
    log.info("Workflow started: %s (%s steps)", config.name, report.steps_total)

    for index, step in enumerate(config.steps, start=1):
        label = step.id or f"{index}:{step.operation}"
        try:
            result = runner.run(step.operation, **step.params)
        except (InvalidArgument, RemoteError) as e:
            report.steps_failed += 1
            report.failures[label] = str(e)
            log.error("Step %s failed: %s", label, e)
            if step.continue_on_error:
                continue
            report.stopped_early = index < report.steps_total
            break

        report.steps_succeeded += 1
        report.results.append(result)
        log.info("Step %s done (status=%s)", label, result.status)

    log.info(
        "Workflow finished: %s succeeded=%s failed=%s",
        config.name,
        report.steps_succeeded,
        report.steps_failed,
    )
    return report
