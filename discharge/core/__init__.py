"""Core components of the discharge report parser.

This module contains the record models, configuration and exception types
shared by the extractor, the post-processor and the command line interface.
"""

from discharge.core.config import DischargeConfig
from discharge.core.exceptions import ConfigError, DischargeError, InputNotFoundError
from discharge.core.models import (
    BriefRecord,
    DischargeRecord,
    DraftRecord,
    LineDiagnostic,
    ReportMode,
    ReportResult,
    ReportStatus,
)

__all__ = [
    "BriefRecord",
    "ConfigError",
    "DischargeConfig",
    "DischargeError",
    "DischargeRecord",
    "DraftRecord",
    "InputNotFoundError",
    "LineDiagnostic",
    "ReportMode",
    "ReportResult",
    "ReportStatus",
]
