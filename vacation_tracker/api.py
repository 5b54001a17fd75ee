"""
FastAPI REST API for the vacation tracker.
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from pydantic import BaseModel, Field

from vacation_tracker import __version__
from vacation_tracker.app.controller import VacationController
from vacation_tracker.app.view import ConfigView, DashboardView, HolidayRow
from vacation_tracker.auth import Authenticator
from vacation_tracker.config.manager import ConfigManager
from vacation_tracker.core.business_days import evaluate_range
from vacation_tracker.data.schemas import (
    Config,
    ErrorKind,
    RangeEvaluation,
    VacationRequest,
    View,
)
from vacation_tracker.i18n import set_language
from vacation_tracker.store import create_store

logger = logging.getLogger(__name__)


# API Models
class RequestCreate(BaseModel):
    """Request body for submitting vacation."""

    start_date: str = Field(..., description="First vacation day (YYYY-MM-DD)")
    end_date: str = Field(..., description="Last vacation day, inclusive (YYYY-MM-DD)")


class SettingsUpdate(BaseModel):
    """Request body for the annual allotment."""

    available_days: float = Field(..., description="Annual vacation days; rounded down, at least 0")


class HolidayCreate(BaseModel):
    """Request body for adding a holiday."""

    name: str = Field(..., description="Holiday name")
    date: str = Field(..., description="Holiday date (YYYY-MM-DD)")


def build_controller(config: Config) -> VacationController:
    """Create a controller for the configured store and identity."""
    store = create_store(config)
    authenticator = Authenticator(token=config.auth_token, identity_path=config.identity_path)
    return VacationController(store, authenticator, config=config)


def create_app(
    config: Optional[Config] = None,
    controller: Optional[VacationController] = None,
) -> FastAPI:
    """
    Create the API application.

    Args:
        config: Configuration (loaded from file and environment if not provided).
        controller: Controller to serve (built from the configuration if not provided).

    Returns:
        The FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        cfg = config or ConfigManager().load_config()
        set_language(cfg.language)
        ctrl = controller or build_controller(cfg)
        ctrl.start()
        app.state.controller = ctrl
        logger.info("Vacation tracker API ready")
        yield
        ctrl.stop()

    app = FastAPI(
        title="Vacation Tracker API",
        description="Request vacation days against an annual allotment of working days",
        version=__version__,
        lifespan=lifespan,
    )

    def get_controller(request: Request) -> VacationController:
        return request.app.state.controller

    def raise_for_error(ctrl: VacationController) -> None:
        """Map the controller's current error to an HTTP error."""
        status_code = 503 if ctrl.state.error_kind == ErrorKind.PERSISTENCE else 400
        raise HTTPException(status_code=status_code, detail=ctrl.state.error_message)

    @app.get("/")
    async def root():
        """API root endpoint with basic info."""
        return {
            "name": "Vacation Tracker API",
            "version": __version__,
            "endpoints": {
                "GET /dashboard": "Balances and requests",
                "GET /business-days": "Count working days in a range",
                "POST /requests": "Submit a vacation request",
                "DELETE /requests/{id}": "Cancel a pending request",
                "PUT /settings": "Set the annual allotment",
                "GET /holidays": "List holidays",
                "POST /holidays": "Add a holiday",
                "DELETE /holidays/{date}": "Delete a holiday",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/dashboard", response_model=DashboardView)
    async def dashboard(request: Request):
        ctrl = get_controller(request)
        ctrl.navigate(View.DASHBOARD)
        return ctrl.view

    @app.get("/business-days", response_model=RangeEvaluation)
    async def business_days(
        request: Request,
        start: str = Query(..., description="Start date"),
        end: str = Query(..., description="End date"),
    ):
        """Count working days in a range, excluding weekends and configured holidays."""
        ctrl = get_controller(request)
        return evaluate_range(start, end, ctrl.state.holidays)

    @app.post("/requests", response_model=VacationRequest, status_code=201)
    async def submit_request(request: Request, body: RequestCreate):
        ctrl = get_controller(request)
        ctrl.set_dates(body.start_date, body.end_date)
        created = await ctrl.submit_request()
        if created is None:
            raise_for_error(ctrl)
        return created

    @app.delete("/requests/{request_id}", status_code=204)
    async def cancel_request(request: Request, request_id: str):
        ctrl = get_controller(request)
        if not any(r.id == request_id for r in ctrl.state.requests):
            raise HTTPException(status_code=404, detail=f"Request not found: {request_id}")
        if not await ctrl.cancel_request(request_id):
            raise_for_error(ctrl)

    @app.put("/settings", response_model=DashboardView)
    async def update_settings(request: Request, body: SettingsUpdate):
        ctrl = get_controller(request)
        ctrl.navigate(View.CONFIG)
        ctrl.set_available_days(body.available_days)
        if not await ctrl.save_available_days():
            raise_for_error(ctrl)
        return ctrl.view

    @app.get("/holidays", response_model=List[HolidayRow])
    async def list_holidays(request: Request):
        ctrl = get_controller(request)
        return [HolidayRow(name=h.name, holiday_date=h.holiday_date) for h in ctrl.state.holidays]

    @app.post("/holidays", response_model=ConfigView, status_code=201)
    async def add_holiday(request: Request, body: HolidayCreate):
        ctrl = get_controller(request)
        ctrl.navigate(View.CONFIG)
        ctrl.set_holiday_name(body.name)
        ctrl.set_holiday_date(body.date)
        if not await ctrl.add_holiday():
            if ctrl.state.error_message:
                raise_for_error(ctrl)
            raise HTTPException(status_code=400, detail="Holiday name and date are required")
        return ctrl.view

    @app.delete("/holidays/{holiday_date}", status_code=204)
    async def delete_holiday(request: Request, holiday_date: date):
        ctrl = get_controller(request)
        if not await ctrl.delete_holiday(holiday_date.isoformat()):
            raise_for_error(ctrl)

    return app
