"""
Pydantic models for YAML request files.
Provides schema validation with clear error messages for the command line runner.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from webber.core.models import ContentType, EncodingType, MethodType, WebberConfig


class ClientSettings(BaseModel):
    """Client level settings."""
    app_name: str = Field("Webber", min_length=1, description="Sent as the User-Agent header")
    timeout_s: float = Field(30, gt=0, le=600, description="Transport timeout in seconds")


class AuthConfig(BaseModel):
    """HTTP basic credentials."""
    username: str = Field(..., description="User name")
    password: str = Field("", description="Password")


class RequestConfig(BaseModel):
    """A single request to send."""
    url: str = Field(..., description="Absolute URL of the request")
    method: str = Field(MethodType.POST, description="HTTP method to use")
    content_type: Optional[str] = Field(ContentType.JSON, description="Content-Type of the request body")
    encoding: EncodingType = Field(EncodingType.UTF8, description="Encoding of the request body")
    body: Optional[str] = Field(None, description="Raw request body")
    json_body: Optional[Any] = Field(None, alias="json", description="Body serialized to JSON before sending")
    headers: Dict[str, str] = Field(default_factory=dict, description="Additional HTTP headers")
    auth: Optional[AuthConfig] = Field(None, description="Basic auth credentials")

    model_config = {"populate_by_name": True}

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('url must be a valid HTTP/HTTPS URL')
        return v

    @field_validator('method')
    @classmethod
    def validate_method(cls, v):
        method = v.upper()
        if method not in MethodType.ALL:
            raise ValueError(f'method must be one of: {", ".join(MethodType.ALL)}')
        return method

    @model_validator(mode='after')
    def validate_body(self):
        if self.body is not None and self.json_body is not None:
            raise ValueError('body and json are mutually exclusive')
        return self


class RequestFileConfig(BaseModel):
    """Root model of a request file."""
    client: ClientSettings = Field(default_factory=ClientSettings)
    request: RequestConfig

    def to_webber_config(self, error_handler=None) -> WebberConfig:
        return WebberConfig(
            app_name=self.client.app_name,
            error_handler=error_handler,
            timeout_s=self.client.timeout_s,
        )


def load_and_validate_config(config_path: str) -> RequestFileConfig:
    """
    Load and validate a request file.

    Args:
        config_path: Path to the YAML request file

    Returns:
        Validated RequestFileConfig object

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML is malformed or fails validation
    """
    import yaml

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Request file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(raw_config, dict):
        raise ValueError(f"Request file {config_path} must contain a mapping")

    try:
        return RequestFileConfig(**raw_config)
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            field_path = '.'.join(str(loc) for loc in error['loc'])
            error_messages.append(f"  {field_path}: {error['msg']}")

        raise ValueError(
            f"Request file validation failed for {config_path}:\n" +
            '\n'.join(error_messages)
        ) from e
