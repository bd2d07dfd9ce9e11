import logging

# Package logger; level and handlers come from logging_config
logger = logging.getLogger("authforms")


def log_section(title: str) -> None:
    """Header printed when a form starts being filled in."""
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    """Neutral progress of a form (e.g. submitted, navigating)."""
    logger.info("%s", message)


def log_step(message: str) -> None:
    """Outgoing request or other action in progress."""
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    """Completed action, such as the post-submit navigation."""
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """Recoverable failure: rejected request, transport error."""
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    """Failure shown to the user as a form-level error."""
    logger.error("❌ %s", message)


def log_debug(message: str) -> None:
    """Controller transitions; never includes field values."""
    logger.debug("%s", message)
