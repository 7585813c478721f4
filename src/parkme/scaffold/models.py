"""Data and error models for project setup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from parkme.constants import APP_DIR_NAME, CONFIG_RELATIVE_PATH, DATA_DIR_NAME


class SetupStep(str, Enum):
    """Pipeline steps, in execution order."""

    CLONE = "clone"
    DATA = "data"
    CONFIG = "config"
    INSTALL = "install"
    PREREQUISITE = "prerequisite"


@dataclass(frozen=True)
class StepMessages:
    started: str
    succeeded: str
    failed: str


STEP_MESSAGES: dict[SetupStep, StepMessages] = {
    SetupStep.CLONE: StepMessages(
        started="Cloning the repository...",
        succeeded="Cloning completed.",
        failed="Failed to clone repository.",
    ),
    SetupStep.DATA: StepMessages(
        started="Creating data folder and copying files...",
        succeeded="Data folder and files set up successfully.",
        failed="Failed to set up data folder or copy files.",
    ),
    SetupStep.CONFIG: StepMessages(
        started="Generating config.properties...",
        succeeded="config.properties created successfully.",
        failed="Failed to create config.properties.",
    ),
    SetupStep.INSTALL: StepMessages(
        started="Installing dependencies...",
        succeeded="Dependencies installed successfully.",
        failed="Failed to install dependencies.",
    ),
    SetupStep.PREREQUISITE: StepMessages(
        started="Checking for Tomcat...",
        succeeded="Tomcat is installed.",
        failed="Tomcat is not installed.",
    ),
}


@dataclass(frozen=True)
class ProjectLayout:
    """Filesystem locations of a project being set up.

    Attributes:
        name: Project name as entered by the user
        target_dir: Absolute project root
    """

    name: str
    target_dir: Path

    @classmethod
    def from_name(cls, name: str, working_dir: Path) -> ProjectLayout:
        return cls(name=name, target_dir=resolve_target_directory(name, working_dir))

    @property
    def app_dir(self) -> Path:
        return self.target_dir / APP_DIR_NAME

    @property
    def data_dir(self) -> Path:
        return self.target_dir / DATA_DIR_NAME

    @property
    def config_file(self) -> Path:
        return self.app_dir / CONFIG_RELATIVE_PATH


def resolve_target_directory(name: str, working_dir: Path) -> Path:
    return (working_dir / name).absolute()


class PrerequisiteStatus(BaseModel):
    """Outcome of the advisory runtime check."""

    model_config = ConfigDict(frozen=True)

    name: str
    installed: bool
    command: list[str]
    install_url: str


@dataclass(frozen=True)
class SetupSummary:
    """Everything a successful run produced."""

    layout: ProjectLayout
    data_files: dict[str, Path]
    config_file: Path
    prerequisite: PrerequisiteStatus


class SetupError(BaseModel):
    """Base error for fatal setup steps."""

    model_config = ConfigDict(extra="forbid")

    message: str


class RepositoryFetchError(SetupError):
    """Cloning the application repository failed."""

    url: str
    branch: str | None = None


class DataProvisionError(SetupError):
    """Creating the data directory or copying a template failed."""

    path: Path


class ConfigRenderError(SetupError):
    """Reading the config template or writing the rendered config failed."""

    path: Path


class DependencyInstallError(SetupError):
    """The package manager install command failed."""

    command: list[str]
    returncode: int | None = None
