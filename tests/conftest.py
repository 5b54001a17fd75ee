"""
Shared fixtures for the vacation tracker tests.
"""

from datetime import date

import pytest

from vacation_tracker.app.controller import VacationController
from vacation_tracker.auth import Authenticator
from vacation_tracker.core.validator import RequestValidator
from vacation_tracker.data.schemas import Config, RequestStatus, VacationRequest
from vacation_tracker.i18n import set_language
from vacation_tracker.store.memory import InMemoryDocumentStore

TODAY = date(2024, 12, 1)


@pytest.fixture(autouse=True)
def english_messages():
    """Run every test with English messages regardless of LANG."""
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def config(tmp_path):
    """Configuration pointing all files at a temporary directory."""
    return Config(
        app_id="test-app",
        store_backend="memory",
        store_path=str(tmp_path / "store.json"),
        identity_path=str(tmp_path / "identity"),
        output_directory=str(tmp_path / "results"),
    )


@pytest.fixture
def store():
    """Create an empty in-memory store."""
    return InMemoryDocumentStore()


@pytest.fixture
def authenticator():
    """Authenticator with a fixed token, so the user id is stable."""
    return Authenticator(token="test-token")


@pytest.fixture
def rendered():
    """Collects every view the controller renders."""
    return []


@pytest.fixture
def controller(store, authenticator, config, rendered):
    """Create a started VacationController on the in-memory store."""
    ctrl = VacationController(
        store,
        authenticator,
        config=config,
        validator=RequestValidator(today=lambda: TODAY),
        on_render=rendered.append,
    )
    ctrl.start()
    yield ctrl
    ctrl.stop()


def build_request(
    start: str,
    end: str,
    days: int,
    status: RequestStatus = RequestStatus.PENDING,
    request_id: str = None,
) -> VacationRequest:
    """Build a VacationRequest for tests."""
    return VacationRequest(
        id=request_id,
        start_date=date.fromisoformat(start),
        end_date=date.fromisoformat(end),
        days=days,
        status=status,
        requested_on=TODAY,
    )


@pytest.fixture
def make_request():
    """Factory for VacationRequest objects."""
    return build_request
