"""Configuration module."""

from .settings import PAGE_CONFIG, initialize_session_state
from .logging_config import setup_logging
