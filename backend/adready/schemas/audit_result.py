"""
Pydantic schemas for analysis responses.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from adready.services.audit_runner import AnalysisReport
from adready.services.scoring.models import CheckResult


class CheckResultModel(BaseModel):
    """Individual check result."""
    name: str
    category: str
    weight: int = Field(..., ge=0)
    status: Literal["pass", "warn", "fail", "manual"]
    message: str

    @classmethod
    def from_check(cls, check: CheckResult) -> "CheckResultModel":
        return cls(
            name=check.name,
            category=check.category.value,
            weight=check.weight,
            status=check.status.value,
            message=check.message,
        )


class AnalyzeResponse(BaseModel):
    """Complete analysis response."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "score": 72,
                "checks": [
                    {
                        "name": "Secure Connection",
                        "category": "Automated Technical Checks",
                        "weight": 20,
                        "status": "pass",
                        "message": "Site uses HTTPS encryption."
                    }
                ],
                "finalResolvedUrl": "https://example.com/",
                "penalties": [],
                "scoreInterpretation": "Some technical issues need attention.",
                "recommendations": ["Address remaining technical issues"],
                "analysisTime": 1830
            }
        },
    )

    score: int = Field(..., ge=0, le=100)
    checks: List[CheckResultModel] = []
    final_resolved_url: str = Field(..., alias="finalResolvedUrl")
    penalties: List[str] = []
    score_interpretation: str = Field(..., alias="scoreInterpretation")
    recommendations: List[str] = []
    analysis_time: int = Field(0, alias="analysisTime")

    @classmethod
    def from_report(cls, report: AnalysisReport) -> "AnalyzeResponse":
        return cls(
            score=report.score.final_score,
            checks=[CheckResultModel.from_check(c) for c in report.checks],
            final_resolved_url=report.final_url,
            penalties=report.score.penalties,
            score_interpretation=report.score.interpretation,
            recommendations=report.score.recommendations,
            analysis_time=report.analysis_time_ms,
        )


class ErrorResponse(BaseModel):
    """Error payload for any failed analysis."""
    error: str
    details: Optional[str] = None
