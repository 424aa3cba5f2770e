"""
Centralized configuration constants for the XMI to OWL translator.

This module provides a single source of truth for the namespaces, XMI
attribute names, identifier markers and logging defaults used throughout
the application.
"""

from typing import Final


# ============================================================================
# Namespaces
# ============================================================================

class NamespaceConfig:
    """Namespace configuration defaults."""

    XMI_NS: Final[str] = "http://langdale.com.au/2005/xmi#"
    """Namespace under which every XMI identifier is addressed."""

    UML_NS: Final[str] = "http://langdale.com.au/2005/UML#"
    """Namespace of the UML vocabulary (stereotypes, packages, debug ids)."""

    XMI_PREFIX: Final[str] = "xmi"
    UML_PREFIX: Final[str] = "uml"


# ============================================================================
# XMI Input
# ============================================================================

class XMIAttributes:
    """Attribute names consumed from XMI elements."""

    ID: Final[str] = "xmi.id"
    """Declares a local identifier."""

    IDREF: Final[str] = "xmi.idref"
    """References an identifier declared elsewhere (before or after)."""

    NAME: Final[str] = "name"
    """Display name, becomes the node label."""


class LabelConfig:
    """Label defaults."""

    DEFAULT_LANGUAGE: Final[str] = "en"


class AssociationEndConfig:
    """Markers used to synthesize association end identifiers."""

    SEPARATOR: Final[str] = "-"
    SIDE_A: Final[str] = "A"
    SIDE_B: Final[str] = "B"


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""
