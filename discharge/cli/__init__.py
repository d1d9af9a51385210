"""Command line interface for the discharge report parser."""

# CLI modules are typically imported on-demand to avoid startup overhead
__all__ = []
