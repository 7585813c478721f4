from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from parkme.common import AppInfo, LoggingConfig
from parkme.constants import (
    ASSETS_DIR,
    CONFIG_TEMPLATE_NAME,
    DEFAULT_PROJECT_NAME,
    REPOSITORY_BRANCH,
    REPOSITORY_URL,
    TEMPLATES_DIR_NAME,
    TOMCAT_INSTALL_URL,
)


class RepositorySettings(BaseModel):
    url: str = REPOSITORY_URL
    branch: str = REPOSITORY_BRANCH
    depth: int | None = Field(default=None, ge=1)


class InstallSettings(BaseModel):
    command: list[str] = Field(default_factory=lambda: ["npm", "install"], min_length=1)


class RuntimeSettings(BaseModel):
    name: str = "Tomcat"
    posix_command: list[str] = Field(default_factory=lambda: ["catalina", "version"], min_length=1)
    windows_command: list[str] = Field(default_factory=lambda: ["catalina.bat", "version"], min_length=1)
    install_url: str = TOMCAT_INSTALL_URL


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    logging: LoggingConfig = LoggingConfig()
    repository: RepositorySettings = RepositorySettings()
    install: InstallSettings = InstallSettings()
    runtime: RuntimeSettings = RuntimeSettings()
    assets_dir: Path = ASSETS_DIR
    default_project_name: str = DEFAULT_PROJECT_NAME

    model_config = SettingsConfigDict(
        env_prefix="PARKME_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    @property
    def templates_dir(self) -> Path:
        return self.assets_dir / TEMPLATES_DIR_NAME

    @property
    def config_template(self) -> Path:
        return self.assets_dir / CONFIG_TEMPLATE_NAME


def get_settings() -> Settings:
    return Settings()


__all__ = [
    "InstallSettings",
    "RepositorySettings",
    "RuntimeSettings",
    "Settings",
    "get_settings",
]
