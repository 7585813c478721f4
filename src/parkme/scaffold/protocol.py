"""Protocols for the interactive edges of project setup."""

from __future__ import annotations

from typing import Protocol

from .models import PrerequisiteStatus, SetupError, SetupStep


class Prompter(Protocol):
    """Asks the user the setup questions."""

    def ask_project_name(self, default: str) -> str: ...

    def confirm_overwrite(self, name: str) -> bool: ...


class StepReporter(Protocol):
    """Receives progress notifications from the setup pipeline."""

    def started(self, step: SetupStep) -> None: ...

    def succeeded(self, step: SetupStep) -> None: ...

    def failed(self, step: SetupStep, error: SetupError) -> None: ...

    def prerequisite_checked(self, status: PrerequisiteStatus) -> None: ...
