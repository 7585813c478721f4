"""Sequential provisioning pipeline.

clone -> data -> config -> install run in order and the first failure stops
the run. The runtime check afterwards is advisory and cannot fail it. Nothing
already written is removed when a later step fails.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from typing import TypeVar

from result import Err, Ok, Result

from parkme.common import create_logger
from parkme.settings import Settings

from .fetcher import fetch_repository
from .installer import install_dependencies
from .models import ProjectLayout, SetupError, SetupStep, SetupSummary
from .prerequisite import check_prerequisite
from .protocol import StepReporter
from .provisioner import provision_data
from .renderer import write_config

logger = create_logger("pipeline")

T = TypeVar("T")


class SetupPipeline:
    """Runs the setup steps for one project layout."""

    def __init__(
        self,
        settings: Settings,
        reporter: StepReporter,
        *,
        environment: Mapping[str, str] | None = None,
        platform: str = sys.platform,
    ) -> None:
        self._settings = settings
        self._reporter = reporter
        self._environment = environment
        self._platform = platform

    def run(self, layout: ProjectLayout) -> Result[SetupSummary, SetupError]:
        logger.info("Starting project setup", project=layout.name, target=str(layout.target_dir))

        finish = partial(self._finish, layout)

        return (
            self._clone(layout)
            .and_then(lambda _: self._provision(layout))
            .and_then(lambda data_files: self._render(layout, data_files).map(lambda _: data_files))
            .and_then(lambda data_files: self._install(layout).map(lambda _: data_files))
            .map(finish)
            .inspect(lambda summary: logger.success("Project setup completed", project=summary.layout.name))
            .inspect_err(lambda err: logger.error("Project setup failed", project=layout.name, error=err.message))
        )

    def _clone(self, layout: ProjectLayout) -> Result[Path, SetupError]:
        return self._step(
            SetupStep.CLONE,
            lambda: fetch_repository(self._settings.repository, layout.app_dir, env=self._environment),
        )

    def _provision(self, layout: ProjectLayout) -> Result[dict[str, Path], SetupError]:
        return self._step(
            SetupStep.DATA,
            lambda: provision_data(self._settings.templates_dir, layout.data_dir),
        )

    def _render(self, layout: ProjectLayout, data_files: dict[str, Path]) -> Result[Path, SetupError]:
        return self._step(
            SetupStep.CONFIG,
            lambda: write_config(self._settings.config_template, data_files, layout.config_file),
        )

    def _install(self, layout: ProjectLayout) -> Result[None, SetupError]:
        return self._step(
            SetupStep.INSTALL,
            lambda: install_dependencies(self._settings.install.command, layout.app_dir, env=self._environment),
        )

    def _finish(self, layout: ProjectLayout, data_files: dict[str, Path]) -> SetupSummary:
        self._reporter.started(SetupStep.PREREQUISITE)
        status = check_prerequisite(self._settings.runtime, platform=self._platform, env=self._environment)
        self._reporter.prerequisite_checked(status)

        return SetupSummary(
            layout=layout,
            data_files=data_files,
            config_file=layout.config_file,
            prerequisite=status,
        )

    def _step(self, step: SetupStep, action: Callable[[], Result[T, SetupError]]) -> Result[T, SetupError]:
        self._reporter.started(step)
        result = action()

        match result:
            case Ok(_):
                self._reporter.succeeded(step)
            case Err(error):
                logger.error("Setup step failed", step=step.value, error=error.message)
                self._reporter.failed(step, error)

        return result
