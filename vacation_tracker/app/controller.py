"""
Controller that owns the application state, the store subscriptions and the user intents.
"""

import logging
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from vacation_tracker.app import state as reducers
from vacation_tracker.app.state import AppState
from vacation_tracker.app.view import AppView, build_view
from vacation_tracker.auth import Authenticator, Session
from vacation_tracker.core.business_days import DateInput, parse_date
from vacation_tracker.core.errors import (
    InvalidHolidayError,
    NotAuthenticatedError,
    PersistenceError,
    VacationTrackerError,
)
from vacation_tracker.core.holidays import PublicHolidayProvider, build_holiday, can_add_holiday
from vacation_tracker.core.validator import RequestValidator
from vacation_tracker.data.schemas import (
    Config,
    Holiday,
    Settings,
    VacationRequest,
    View,
)
from vacation_tracker.store.base import (
    DocumentSnapshot,
    DocumentStore,
    StoreError,
    Subscription,
)

logger = logging.getLogger(__name__)

RenderCallback = Callable[[AppView], None]


class VacationController:
    """
    Single owner of the AppState.

    Store snapshots replace the cached lists wholesale and every state change
    re-renders. Writes are guarded by the state's `is_saving` flag, which only
    serializes actions within this session.
    """

    def __init__(
        self,
        store: DocumentStore,
        authenticator: Authenticator,
        config: Optional[Config] = None,
        validator: Optional[RequestValidator] = None,
        on_render: Optional[RenderCallback] = None,
    ):
        """
        Initialize the controller.

        Args:
            store: Document store holding the user's data.
            authenticator: Provides the user id; no store access happens before sign-in.
            config: Application configuration.
            validator: Request validator (created if not provided).
            on_render: Called with the new view after every state change.
        """
        self.store = store
        self.authenticator = authenticator
        self.config = config or Config()
        self.validator = validator or RequestValidator()
        self.on_render = on_render
        self._state = AppState()
        self._session: Optional[Session] = None
        self._subscriptions: List[Subscription] = []

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def view(self) -> AppView:
        return build_view(self._state)

    @property
    def is_started(self) -> bool:
        return self._session is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> AppState:
        """Sign in, then subscribe to settings, requests and holidays."""
        if self._session is not None:
            return self._state

        self._render()
        self._session = self.authenticator.sign_in()
        self._dispatch(reducers.mark_authenticated(self._state, self._session.user_id))

        self._subscriptions = [
            self.store.subscribe(self._settings_path, self._on_settings_snapshot),
            self.store.subscribe(self._requests_path, self._on_requests_snapshot),
            self.store.subscribe(self._holidays_path, self._on_holidays_snapshot),
        ]
        logger.info(f"Controller started for user {self._session.user_id}")
        return self._state

    def stop(self) -> None:
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions = []

    # ------------------------------------------------------------------
    # Store paths
    # ------------------------------------------------------------------

    @property
    def _user_root(self) -> str:
        return f"artifacts/{self.config.app_id}/users/{self._session.user_id}"

    @property
    def _settings_path(self) -> str:
        return f"{self._user_root}/settings/days"

    @property
    def _requests_path(self) -> str:
        return f"{self._user_root}/vacation_requests"

    @property
    def _holidays_path(self) -> str:
        return f"{self._user_root}/holidays"

    # ------------------------------------------------------------------
    # Snapshot handlers
    # ------------------------------------------------------------------

    def _on_settings_snapshot(self, snapshot: DocumentSnapshot) -> None:
        data = snapshot.data or {}
        try:
            days = Settings.model_validate(data).available_days if data.get("availableDays") else 0
        except ValidationError:
            logger.warning(f"Ignoring invalid settings document: {snapshot.data}")
            days = 0
        self._dispatch(
            reducers.apply_settings_snapshot(
                self._state, days or self.config.default_available_days
            )
        )

    def _on_requests_snapshot(self, documents: List[DocumentSnapshot]) -> None:
        requests = []
        for document in documents:
            try:
                requests.append(VacationRequest.from_document(document.id, document.data))
            except ValidationError as e:
                logger.warning(f"Skipping invalid vacation request {document.id}: {e}")
        self._dispatch(reducers.apply_requests_snapshot(self._state, requests))

    def _on_holidays_snapshot(self, documents: List[DocumentSnapshot]) -> None:
        holidays = []
        for document in documents:
            try:
                holidays.append(Holiday.from_document(document.data))
            except ValidationError as e:
                logger.warning(f"Skipping invalid holiday {document.id}: {e}")
        self._dispatch(reducers.apply_holidays_snapshot(self._state, holidays))

    # ------------------------------------------------------------------
    # Synchronous intents
    # ------------------------------------------------------------------

    def navigate(self, view: View) -> None:
        self._dispatch(reducers.navigate(self._state, View(view)))

    def set_start_date(self, value: str) -> None:
        self._dispatch(reducers.set_dates(self._state, start_date=value or ""))

    def set_end_date(self, value: str) -> None:
        self._dispatch(reducers.set_dates(self._state, end_date=value or ""))

    def set_dates(self, start: str, end: str) -> None:
        self._dispatch(reducers.set_dates(self._state, start_date=start or "", end_date=end or ""))

    def set_available_days(self, value: Any) -> None:
        self._dispatch(reducers.set_temp_available_days(self._state, value))

    def set_holiday_name(self, name: str) -> None:
        self._dispatch(reducers.set_holiday_name(self._state, name or ""))

    def set_holiday_date(self, holiday_date: str) -> None:
        self._dispatch(reducers.set_holiday_date(self._state, holiday_date or ""))

    # ------------------------------------------------------------------
    # Store-writing intents
    # ------------------------------------------------------------------

    async def submit_request(self) -> Optional[VacationRequest]:
        """
        Validate the entered range and store it as a Pending request.

        Returns:
            The stored request, or None if it was rejected or the write failed.
            The reason is in `state.error_message`.
        """
        if not self._ensure_ready() or self._state.is_saving:
            return None
        self._dispatch(reducers.clear_error(self._state))

        try:
            draft = self.validator.validate(
                self._state.start_date,
                self._state.end_date,
                self._state.holidays,
                self._state.available_days,
                self._state.requests,
            )
        except VacationTrackerError as e:
            logger.debug(f"Request rejected: {e.message}")
            self._dispatch(reducers.set_error(self._state, e))
            return None

        self._dispatch(reducers.start_saving(self._state))
        try:
            doc_id = await self.store.add(self._requests_path, draft.to_document())
            logger.info(
                f"Requested {draft.days} days from {draft.start_date} to {draft.end_date} ({doc_id})"
            )
            self._dispatch(reducers.clear_error(reducers.clear_request_form(self._state)))
            return draft.model_copy(update={"id": doc_id})
        except StoreError as e:
            self._persistence_failed("error.save_request", e)
            return None
        finally:
            self._dispatch(reducers.finish_saving(self._state))

    async def cancel_request(self, request_id: str) -> bool:
        """Delete a request while it is still Pending."""
        if not self._ensure_ready():
            return False

        current = next((r for r in self._state.requests if r.id == request_id), None)
        try:
            self.validator.ensure_cancellable(current)
        except VacationTrackerError as e:
            self._dispatch(reducers.set_error(self._state, e))
            return False

        try:
            await self.store.delete(f"{self._requests_path}/{request_id}")
        except StoreError as e:
            self._persistence_failed("error.cancel_request", e)
            return False
        logger.info(f"Cancelled request {request_id}")
        self._dispatch(reducers.clear_error(self._state))
        return True

    async def save_available_days(self) -> bool:
        """Persist the allotment field and return to the dashboard."""
        if not self._ensure_ready() or self._state.is_saving:
            return False
        self._dispatch(reducers.start_saving(reducers.clear_error(self._state)))

        days = reducers.days_to_save(self._state)
        try:
            await self.store.set(self._settings_path, Settings(available_days=days).to_document(), merge=True)
            logger.info(f"Saved annual allotment of {days} days")
            self._dispatch(reducers.settings_saved(self._state, days))
            return True
        except StoreError as e:
            self._persistence_failed("error.save_settings", e)
            return False
        finally:
            self._dispatch(reducers.finish_saving(self._state))

    async def add_holiday(self) -> bool:
        """Store the holiday form. Does nothing unless both name and date are set."""
        self._dispatch(reducers.clear_error(self._state))
        name, holiday_date = self._state.temp_holiday_name, self._state.temp_holiday_date
        if not can_add_holiday(name, holiday_date):
            return False
        if not self._ensure_ready() or self._state.is_saving:
            return False

        try:
            holiday = build_holiday(name, holiday_date)
        except ValueError:
            self._dispatch(reducers.set_error(self._state, InvalidHolidayError()))
            return False

        self._dispatch(reducers.start_saving(self._state))
        try:
            # The date is the document key, so re-adding a date replaces it
            await self.store.set(f"{self._holidays_path}/{holiday.key}", holiday.to_document())
            logger.info(f"Added holiday {holiday.name} on {holiday.key}")
            self._dispatch(reducers.clear_holiday_form(self._state))
            return True
        except StoreError as e:
            self._persistence_failed("error.save_holiday", e)
            return False
        finally:
            self._dispatch(reducers.finish_saving(self._state))

    async def delete_holiday(self, holiday_date: DateInput) -> bool:
        """Delete the holiday on a date given in any accepted date format."""
        if not self._ensure_ready():
            return False
        self._dispatch(reducers.clear_error(self._state))

        try:
            parsed = parse_date(holiday_date)
        except ValueError:
            parsed = None
        if parsed is None:
            self._dispatch(reducers.set_error(self._state, InvalidHolidayError()))
            return False

        # Holidays are stored under their ISO date
        key = parsed.isoformat()
        try:
            await self.store.delete(f"{self._holidays_path}/{key}")
        except StoreError as e:
            self._persistence_failed("error.delete_holiday", e)
            return False
        logger.info(f"Deleted holiday on {key}")
        return True

    async def import_public_holidays(self, year: int, provider: PublicHolidayProvider) -> int:
        """
        Add the official public holidays of a year to the holiday set.

        Existing holidays on the same dates are replaced.

        Returns:
            Number of holidays written.
        """
        if not self._ensure_ready() or self._state.is_saving:
            return 0
        self._dispatch(reducers.start_saving(reducers.clear_error(self._state)))

        written = 0
        try:
            for holiday in provider.get_holidays_for_year(year):
                await self.store.set(f"{self._holidays_path}/{holiday.key}", holiday.to_document())
                written += 1
            logger.info(f"Imported {written} public holidays for {provider.country} {year}")
        except StoreError as e:
            self._persistence_failed("error.import_holidays", e)
        finally:
            self._dispatch(reducers.finish_saving(self._state))
        return written

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_ready(self) -> bool:
        if self._session is None:
            self._dispatch(reducers.set_error(self._state, NotAuthenticatedError()))
            return False
        return True

    def _persistence_failed(self, message_key: str, cause: StoreError) -> None:
        logger.error(f"Store operation failed: {cause}", exc_info=cause)
        self._dispatch(reducers.set_error(self._state, PersistenceError(message_key, cause=cause)))

    def _dispatch(self, new_state: AppState) -> None:
        self._state = new_state
        self._render()

    def _render(self) -> None:
        if self.on_render is not None:
            self.on_render(build_view(self._state))
