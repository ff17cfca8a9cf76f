import pytest
from fastapi.testclient import TestClient

from dashboard.core.dependencies import get_auth_service
from dashboard.database.supabase_client import get_supabase
from dashboard.main import app, limiter
from dashboard.modules.auth.service import AuthService, clear_auth_caches

from tests.fakes import FakeSupabase

USER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_USER_ID = "22222222-2222-2222-2222-222222222222"
USER_TOKEN = "token-user"
OTHER_TOKEN = "token-other"


@pytest.fixture(autouse=True)
def _reset_auth_caches():
    clear_auth_caches()
    yield
    clear_auth_caches()


@pytest.fixture
def fake() -> FakeSupabase:
    db = FakeSupabase()
    db.auth.add_user("jamie@mail.com", "correct-horse", user_id=USER_ID, token=USER_TOKEN)
    db.auth.add_user("other@mail.com", "other-pass", user_id=OTHER_USER_ID, token=OTHER_TOKEN)
    return db


@pytest.fixture
def service_role(fake):
    """Service client used for account admin; None means no service role key."""
    return {"client": fake}


@pytest.fixture
def client(fake, service_role):
    limiter.reset()
    app.dependency_overrides[get_supabase] = lambda: fake
    app.dependency_overrides[get_auth_service] = lambda: AuthService(
        fake, session_factory=lambda: fake, service_client=service_role["client"]
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def other_headers():
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}
