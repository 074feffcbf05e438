"""Admin dashboard endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from mentor_payouts.api.models import ReceiptCreateRequest, SessionCreateRequest
from mentor_payouts.services.dashboard import (
    DEFAULT_DATE_RANGE,
    DashboardError,
    MentorNotFoundError,
    SessionNotFoundError,
)
from mentor_payouts.services.formatting import calculate_duration, format_currency

if TYPE_CHECKING:
    from mentor_payouts.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _http_error(error: DashboardError) -> HTTPException:
    if isinstance(error, MentorNotFoundError | SessionNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get("/mentors", dependencies=[Depends(require_admin)])
async def list_mentors(request: Request) -> dict[str, object]:
    """Return registered mentors."""
    container: AppContainer = request.app.state.container
    return {"mentors": container.dashboard_service.list_mentors()}


@router.post(
    "/mentors",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def add_mentor(request: Request) -> dict[str, object]:
    """Register a placeholder mentor."""
    container: AppContainer = request.app.state.container
    return {"mentor": container.dashboard_service.add_mentor()}


@router.get("/mentors/{mentor_id}/earnings", dependencies=[Depends(require_admin)])
async def mentor_earnings(mentor_id: str, request: Request) -> dict[str, object]:
    """Return earnings and receipt totals for a mentor."""
    container: AppContainer = request.app.state.container
    try:
        earnings = container.dashboard_service.mentor_earnings(mentor_id)
    except DashboardError as exc:
        raise _http_error(exc) from exc
    return {
        "earnings": earnings,
        "display": {
            "total_earnings": format_currency(earnings.total_earnings),
            "pending_amount": format_currency(earnings.pending_amount),
            "paid_amount": format_currency(earnings.paid_amount),
            "total_duration": calculate_duration(earnings.total_minutes),
        },
    }


@router.get("/sessions", dependencies=[Depends(require_admin)])
async def list_sessions(
    request: Request, date_range: str = DEFAULT_DATE_RANGE
) -> dict[str, object]:
    """Return sessions within the selected date range."""
    container: AppContainer = request.app.state.container
    return {"sessions": container.dashboard_service.list_sessions(date_range)}


@router.post(
    "/sessions",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def add_session(
    payload: SessionCreateRequest, request: Request
) -> dict[str, object]:
    """Add a session from the session form."""
    container: AppContainer = request.app.state.container
    try:
        session = container.dashboard_service.add_session(
            mentor_id=payload.mentor_id,
            date=payload.date,
            session_type=payload.type,
            duration=payload.duration,
            rate_per_hour=payload.rate_per_hour,
        )
    except DashboardError as exc:
        raise _http_error(exc) from exc
    return {"session": session}


@router.delete(
    "/sessions/{session_id}",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_session(session_id: str, request: Request) -> None:
    """Remove a session."""
    container: AppContainer = request.app.state.container
    try:
        container.dashboard_service.delete_session(session_id)
    except DashboardError as exc:
        raise _http_error(exc) from exc


@router.post("/sessions/import", dependencies=[Depends(require_admin)])
async def import_sessions(request: Request) -> dict[str, object]:
    """Import sessions from a CSV request body."""
    container: AppContainer = request.app.state.container
    content = (await request.body()).decode("utf-8", errors="replace")
    sessions = container.dashboard_service.import_sessions(content)
    return {"imported": len(sessions), "sessions": sessions}


@router.get("/sessions/export", dependencies=[Depends(require_admin)])
async def export_sessions(
    request: Request, date_range: str = DEFAULT_DATE_RANGE
) -> PlainTextResponse:
    """Download sessions in range as CSV."""
    container: AppContainer = request.app.state.container
    content = container.dashboard_service.export_sessions(date_range)
    today = container.dashboard_service.clock.now().date().isoformat()
    filename = f"sessions-export-{today}.csv"
    return PlainTextResponse(
        content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/receipts", dependencies=[Depends(require_admin)])
async def list_receipts(
    request: Request, mentor_id: str | None = None
) -> dict[str, object]:
    """Return generated receipts, newest first."""
    container: AppContainer = request.app.state.container
    return {"receipts": container.dashboard_service.list_receipts(mentor_id)}


@router.post(
    "/receipts",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def generate_receipt(
    payload: ReceiptCreateRequest, request: Request
) -> dict[str, object]:
    """Generate a pending receipt for the selected mentor."""
    container: AppContainer = request.app.state.container
    try:
        receipt = container.dashboard_service.generate_receipt(payload.mentor_id)
    except DashboardError as exc:
        raise _http_error(exc) from exc
    return {"receipt": receipt}


@router.get("/summary", dependencies=[Depends(require_admin)])
async def summary(
    request: Request, date_range: str = DEFAULT_DATE_RANGE
) -> dict[str, object]:
    """Return headline dashboard metrics."""
    container: AppContainer = request.app.state.container
    return {"summary": container.dashboard_service.summary(date_range)}
