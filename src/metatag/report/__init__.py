"""Resolution reports.

Example
-------
::

    from metatag.report import ReportSerializer, build_report

    report = build_report(UserRepository, (Service, Transactional))
    print(ReportSerializer().to_yaml(report))
"""
from __future__ import annotations

from metatag.report.serializer import (
    KindResult,
    ReportSerializer,
    ResolutionReport,
    build_report,
)

__all__ = ["KindResult", "ReportSerializer", "ResolutionReport", "build_report"]
