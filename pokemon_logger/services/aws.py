"""boto3 client construction."""

from typing import Any

import boto3

from pokemon_logger.config import Settings


def build_aws_client(service_name: str, settings: Settings) -> Any:
    """Create a boto3 client; explicit keys win over the default credential chain."""
    kwargs: dict[str, Any] = {"region_name": settings.aws_region}
    if settings.aws_access_key_id and settings.aws_secret_access_key:
        kwargs["aws_access_key_id"] = settings.aws_access_key_id
        kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
        if settings.aws_session_token:
            kwargs["aws_session_token"] = settings.aws_session_token
    return boto3.client(service_name, **kwargs)
