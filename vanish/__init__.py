"""
vanish - async client for the Vanish temporary-email API.
"""
from vanish.client import VanishClient, create_client
from vanish.config import ClientConfig, get_config
from vanish.models.email import (
    AttachmentContent,
    AttachmentMeta,
    EmailDetail,
    EmailSummary,
    PaginatedEmailList,
)
from vanish.models.options import GenerateEmailOptions, ListEmailsOptions
from vanish.utils.errors import ErrorKind, RequestTimeoutError, VanishError
from vanish.utils.logger import get_logger, setup_logging

__version__ = "1.0.0"

__all__ = [
    "VanishClient",
    "create_client",
    "ClientConfig",
    "get_config",
    "AttachmentContent",
    "AttachmentMeta",
    "EmailDetail",
    "EmailSummary",
    "PaginatedEmailList",
    "GenerateEmailOptions",
    "ListEmailsOptions",
    "ErrorKind",
    "RequestTimeoutError",
    "VanishError",
    "get_logger",
    "setup_logging",
]
