"""Project setup: collect input, then clone, provision, render, install and check."""

from .collector import collect_project
from .fetcher import fetch_repository
from .installer import install_dependencies
from .models import (
    STEP_MESSAGES,
    ConfigRenderError,
    DataProvisionError,
    DependencyInstallError,
    PrerequisiteStatus,
    ProjectLayout,
    RepositoryFetchError,
    SetupError,
    SetupStep,
    SetupSummary,
    resolve_target_directory,
)
from .pipeline import SetupPipeline
from .prerequisite import check_prerequisite
from .protocol import Prompter, StepReporter
from .provisioner import provision_data
from .renderer import PLACEHOLDERS, build_replacements, render_template, write_config

__all__ = [
    "PLACEHOLDERS",
    "STEP_MESSAGES",
    "ConfigRenderError",
    "DataProvisionError",
    "DependencyInstallError",
    "PrerequisiteStatus",
    "ProjectLayout",
    "Prompter",
    "RepositoryFetchError",
    "SetupError",
    "SetupPipeline",
    "SetupStep",
    "SetupSummary",
    "StepReporter",
    "build_replacements",
    "check_prerequisite",
    "collect_project",
    "fetch_repository",
    "install_dependencies",
    "provision_data",
    "render_template",
    "resolve_target_directory",
    "write_config",
]
