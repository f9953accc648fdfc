"""structprops logging: structlog once configured, stdlib wrapper before."""

from structprops.observability.logging import get_logger, reset_logging, setup_logging

__all__ = ["get_logger", "reset_logging", "setup_logging"]
