"""
Analysis API endpoint.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adready.logger import logger
from adready.schemas.audit_request import AnalyzeRequest
from adready.schemas.audit_result import AnalyzeResponse, ErrorResponse
from adready.services.audit_runner import AuditRunner
from adready.services.errors import AnalysisError

router = APIRouter(tags=["Analysis"])


def get_audit_runner() -> AuditRunner:
    """Runner factory; overridden in tests."""
    return AuditRunner()


def error_response(status_code: int, error: str, details: str = None) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


@router.post(
    "/analyze-url",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_url(request: AnalyzeRequest, runner: AuditRunner = Depends(get_audit_runner)):
    """Analyze a website for ad-network readiness."""
    if not request.url or not request.url.strip():
        return error_response(400, "URL is required.")

    try:
        report = await runner.run(request.url)
    except AnalysisError as e:
        logger.warning(f"Analysis of {request.url} stopped: {e.message}")
        return error_response(e.status_code, e.message, e.details)
    except Exception as e:
        logger.exception(f"Analysis error: {e}")
        return error_response(
            500,
            f"Analysis failed: {e}",
            "Please check that the website is accessible and contains valid HTML content."
        )

    return AnalyzeResponse.from_report(report)
