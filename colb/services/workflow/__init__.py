"""
Build, test and clean workflows.
"""

from .service import CleanReport, Workflow

__all__ = ["CleanReport", "Workflow"]
