"""Discharge report parser.

Rebuilds the flat text export of a library circulation system into one
record per discharged item, sorted into a walking order by location.
"""

__version__ = "0.1.0"

# Public API exports
from discharge.core.models import BriefRecord, DischargeRecord, ReportResult, ReportStatus
from discharge.extractors.discharge_extractor import DischargeExtractor
from discharge.services.report_service import ReportService

__all__ = [
    "BriefRecord",
    "DischargeExtractor",
    "DischargeRecord",
    "ReportResult",
    "ReportService",
    "ReportStatus",
]
