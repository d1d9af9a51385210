"""High-level services for the discharge report parser."""

from discharge.services.report_service import ReportService, select_mode

__all__ = ["ReportService", "select_mode"]
