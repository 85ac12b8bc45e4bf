"""DTOs for report summaries."""

from __future__ import annotations

from typing import Any, List, Literal, Union

from pydantic import BaseModel, Field

from src.domain.entities.report import (
    EmptyReport,
    MetricUnit,
    ReportOutcome,
    ReportSummary,
    ReportType,
)


class SummaryMetricDTO(BaseModel):
    label: str
    value: float
    unit: MetricUnit


class ReportSummaryDTO(BaseModel):
    """Headline metrics and table for a report."""

    report_type: ReportType
    title: str
    summary: List[SummaryMetricDTO] = Field(default_factory=list)
    columns: List[str] = Field(default_factory=list)
    rows: List[List[Any]] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, report: ReportSummary) -> "ReportSummaryDTO":
        return cls(
            report_type=report.report_type,
            title=report.title,
            summary=[
                SummaryMetricDTO(label=m.label, value=m.value, unit=m.unit)
                for m in report.summary
            ],
            columns=list(report.columns),
            rows=[list(row) for row in report.rows],
        )


class EmptyReportDTO(BaseModel):
    """Returned when there is no data for the requested report."""

    error: Literal["No data"] = "No data"
    report_type: ReportType
    message: str

    @classmethod
    def from_domain(cls, report: EmptyReport) -> "EmptyReportDTO":
        return cls(report_type=report.report_type, message=report.message)


ReportOutcomeDTO = Union[ReportSummaryDTO, EmptyReportDTO]


def report_outcome_to_dto(outcome: ReportOutcome) -> ReportOutcomeDTO:
    if isinstance(outcome, EmptyReport):
        return EmptyReportDTO.from_domain(outcome)
    return ReportSummaryDTO.from_domain(outcome)
