"""Payroll report endpoints."""

from typing import Annotated

from fastapi import APIRouter, File, UploadFile, status

from payroll_report.api.dependencies import DbSession
from payroll_report.api.schemas import StatusResponse
from payroll_report.ingestion import IngestionPipeline, MissingFileError
from payroll_report.services import (
    PayrollReportResponse,
    ReportAggregator,
    build_payroll_report,
)

UPLOAD_FIELD = "file"

router = APIRouter(prefix="/report", tags=["report"])


@router.post(
    "",
    response_model=StatusResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": StatusResponse}},
)
async def upload_time_report(
    db: DbSession,
    file: Annotated[UploadFile | None, File()] = None,
) -> StatusResponse:
    """Ingest a time-report-{id}.csv upload as one atomic batch."""
    if file is None:
        raise MissingFileError(UPLOAD_FIELD)

    data = await file.read()
    result = await IngestionPipeline(db).ingest_upload(file.filename or "", data)

    return StatusResponse(
        status_code=status.HTTP_200_OK,
        status_text="OK",
        message=result.message,
    )


@router.get(
    "",
    response_model=PayrollReportResponse,
    status_code=status.HTTP_200_OK,
)
async def get_payroll_report(db: DbSession) -> PayrollReportResponse:
    """Get the accumulated payroll report for every employee and pay period."""
    reports = await ReportAggregator(db).list_all()
    return build_payroll_report(reports)
