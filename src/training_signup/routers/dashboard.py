"""HR dashboard endpoints: list, search, live refresh and CSV export"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response, StreamingResponse

from training_signup.models.choices import ATTENDANCE_DAYS
from training_signup.services.csv_export import EXPORT_FILENAME, registrations_to_csv
from training_signup.services.dashboard import RegistrationDashboard
from training_signup.services.registration_store import (
    RegistrationStore,
    StoreError,
    get_store,
)
from training_signup.templating import templates

router = APIRouter(prefix="/rh", include_in_schema=False)

logger = logging.getLogger(__name__)


def _load_dashboard(store: RegistrationStore, q: str) -> RegistrationDashboard:
    dashboard = RegistrationDashboard(store, search_term=q)
    dashboard.refresh()
    return dashboard


def _panel_context(request: Request, dashboard: RegistrationDashboard) -> dict:
    return {
        "dashboard": dashboard,
        "summary": dashboard.summary,
        "rows": dashboard.filtered,
        "attendance_days": ATTENDANCE_DAYS,
        "tz": request.app.state.display_tz,
    }


@router.get("")
async def serve_dashboard(
    request: Request, q: str = "", store: RegistrationStore = Depends(get_store)
):
    """Serve the HR dashboard page.

    The panel starts in its loading state; the page script fetches
    ``/rh/painel`` right after load.
    """
    dashboard = RegistrationDashboard(store, search_term=q)
    return templates.TemplateResponse(
        request, "dashboard.html", _panel_context(request, dashboard)
    )


@router.get("/painel")
async def serve_dashboard_panel(
    request: Request, q: str = "", store: RegistrationStore = Depends(get_store)
):
    """Cards, charts and table only; re-fetched by the page on every change"""
    dashboard = _load_dashboard(store, q)
    return templates.TemplateResponse(
        request, "_dashboard_panel.html", _panel_context(request, dashboard)
    )


@router.get("/export.csv")
async def export_registrations(
    request: Request, store: RegistrationStore = Depends(get_store)
):
    """Download every registration (search filter ignored) as CSV"""
    try:
        registrations = store.list_all()
    except StoreError:
        raise HTTPException(
            status_code=503, detail="Não foi possível exportar as inscrições"
        )

    logger.info(f"Exporting {len(registrations)} registrations to CSV")
    content = registrations_to_csv(registrations, request.app.state.display_tz)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/events")
async def registration_events(store: RegistrationStore = Depends(get_store)):
    """Server-Sent Events stream with one ``change`` event per stored change.

    The subscription is held for as long as the client stays connected.
    """

    async def event_stream():
        async with store.subscribe() as events:
            yield "retry: 3000\n\n"
            async for event in events:
                yield f"event: change\ndata: {event.to_json()}\n\n"

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
