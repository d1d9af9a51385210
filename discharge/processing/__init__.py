"""Post-processing of extracted records."""

from discharge.processing.ordering import order_records, project_records, sort_records

__all__ = ["order_records", "project_records", "sort_records"]
