"""
Pydantic models for client settings and YAML workflow files.
Provides schema validation with clear error messages for workflow configurations.
"""

from __future__ import annotations
import os
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

DEFAULT_SERVER_URL = "https://api.github.com"
TOKEN_ENV = "GITHUB_API_TOKEN"
SERVER_URL_ENV = "GITHUB_API_SERVER_URL"


class ClientSettings(BaseModel):
    """Connection defaults used when a call does not pass its own token or server URL."""
    api_token: str = Field("", description="GitHub API token", repr=False)
    server_url: str = Field(DEFAULT_SERVER_URL, description="GitHub API server URL")
    timeout_s: int = Field(30, ge=1, le=600, description="HTTP timeout in seconds")

    @field_validator('server_url')
    @classmethod
    def validate_server_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('server_url must be a valid HTTP/HTTPS URL')
        return v.rstrip('/')

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientSettings":
        """Build settings from GITHUB_API_TOKEN / GITHUB_API_SERVER_URL, letting explicit values win."""
        values: Dict[str, Any] = {
            "api_token": os.getenv(TOKEN_ENV, ""),
            "server_url": os.getenv(SERVER_URL_ENV) or DEFAULT_SERVER_URL,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class SettingsOverrides(BaseModel):
    """Optional connection settings declared in a workflow file."""
    api_token: Optional[str] = Field(None, description="GitHub API token (prefer the environment)", repr=False)
    server_url: Optional[str] = Field(None, description="GitHub API server URL")
    timeout_s: Optional[int] = Field(None, ge=1, le=600, description="HTTP timeout in seconds")


class WorkflowStep(BaseModel):
    """A single operation call inside a workflow."""
    operation: str = Field(..., description="Registered operation name, e.g. github_create_issue")
    id: Optional[str] = Field(None, description="Optional step identifier used in logs")
    params: Dict[str, Any] = Field(default_factory=dict, description="Operation parameters")
    continue_on_error: bool = Field(False, description="Keep running later steps if this one fails")

    @field_validator('operation')
    @classmethod
    def validate_operation(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('operation cannot be empty')
        return v if v.startswith('github_') else f'github_{v}'


class WorkflowConfig(BaseModel):
    """Root configuration model for workflow files."""
    name: str = Field("workflow", description="Human-readable name for the workflow")
    settings: SettingsOverrides = Field(default_factory=SettingsOverrides)
    steps: List[WorkflowStep] = Field(..., min_length=1, description="Steps to run in order")

    @model_validator(mode='after')
    def validate_operations(self):
        """Check that every step names a registered operation."""
        from github_api_actions.operations import get_registered_operations, register_all

        register_all()
        known = {spec.name for spec in get_registered_operations()}
        unknown = [s.operation for s in self.steps if s.operation not in known]
        if unknown:
            raise ValueError(f'Unknown operation(s): {unknown}')
        return self

    def client_settings(self) -> ClientSettings:
        return ClientSettings.from_env(**self.settings.model_dump())


def load_and_validate_config(config_path: str) -> WorkflowConfig:
    """
    Load and validate a workflow configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated WorkflowConfig object

    Raises:
        ValueError: If configuration is invalid or the YAML is malformed
        FileNotFoundError: If config file doesn't exist
    """
    import yaml

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration validation failed for {config_path}: expected a mapping at top level")

    try:
        return WorkflowConfig(**raw_config)
    except ValidationError as e:
        # Format validation errors nicely
        error_messages = []
        for error in e.errors():
            field_path = '.'.join(str(loc) for loc in error['loc'])
            error_messages.append(f"  {field_path}: {error['msg']}")

        raise ValueError(
            f"Configuration validation failed for {config_path}:\n" +
            '\n'.join(error_messages)
        ) from e
