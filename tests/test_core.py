import pytest
from slowapi import Limiter
from slowapi.util import get_remote_address

from dashboard.config.settings import PLACEHOLDER_SUPABASE_KEY, PLACEHOLDER_SUPABASE_URL, Settings
from dashboard.core.errors import NotFound, RemoteOperationFailure
from dashboard.core.owned_collection import OwnedCollection
from dashboard.core.storage import ObjectBucket
from dashboard.main import app
from dashboard.modules.todos.schemas import TodoResponse

from tests.fakes import FakeSupabase


def test_missing_supabase_settings_fall_back_to_placeholders(monkeypatch, caplog):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_KEY", raising=False)

    s = Settings(_env_file=None)
    assert s.supabase_url == PLACEHOLDER_SUPABASE_URL
    assert s.supabase_key == PLACEHOLDER_SUPABASE_KEY
    assert not s.is_configured
    assert "Missing Supabase environment variables" in caplog.text


def test_configured_settings_are_kept(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "anon")

    s = Settings(_env_file=None)
    assert s.supabase_url == "https://abc.supabase.co"
    assert s.is_configured


def test_object_path_is_owner_keyed_and_timestamped():
    assert ObjectBucket.object_path("u1", "cat.png", now_ms=1700000000000) == "u1/1700000000000_cat.png"
    assert ObjectBucket.object_path("u1", "../../etc/passwd", now_ms=5) == "u1/5_passwd"


def test_path_from_url():
    bucket = ObjectBucket(FakeSupabase(), "drive-lite")
    base = "https://x.supabase.co/storage/v1/object/public/drive-lite/"
    assert bucket.path_from_url(base + "u1/5_cat.png") == "u1/5_cat.png"
    assert bucket.path_from_url(base + "u1/5_my%20cat.png?") == "u1/5_my cat.png"
    assert bucket.path_from_url("https://elsewhere/food-photos/u1/x.png") is None


def test_list_paths_reads_every_page():
    db = FakeSupabase()
    db.buckets["drive-lite"] = {f"u1/{i}_f.txt": b"x" for i in range(5)}
    db.buckets["drive-lite"]["u2/9_other.txt"] = b"y"
    bucket = ObjectBucket(db, "drive-lite")

    paths = bucket.list_paths("u1", page_size=2)
    assert sorted(paths) == sorted(f"u1/{i}_f.txt" for i in range(5))
    assert db.calls_of("list", "drive-lite") == 3


def test_toggle_twice_restores_original():
    db = FakeSupabase()
    todos = OwnedCollection(db, "todos", TodoResponse, order_by="id", descending=False)
    item = todos.create("u1", {"task": "buy milk", "is_complete": False})

    assert todos.toggle(item.id, "u1", "is_complete").is_complete is True
    assert todos.toggle(item.id, "u1", "is_complete").is_complete is False


def test_replace_without_changes_skips_update():
    db = FakeSupabase()
    todos = OwnedCollection(db, "todos", TodoResponse)
    item = todos.create("u1", {"task": "same", "is_complete": False})

    assert todos.replace(item.id, "u1", {"task": "same"}).task == "same"
    assert db.calls_of("update", "todos") == 0


def test_foreign_rows_are_not_found():
    db = FakeSupabase()
    todos = OwnedCollection(db, "todos", TodoResponse)
    item = todos.create("u1", {"task": "mine", "is_complete": False})

    with pytest.raises(NotFound):
        todos.get(item.id, "u2")
    with pytest.raises(NotFound):
        todos.delete(item.id, "u2")


def test_remote_errors_become_remote_operation_failures():
    db = FakeSupabase()
    db.fail("select", "todos")
    with pytest.raises(RemoteOperationFailure):
        OwnedCollection(db, "todos", TodoResponse).fetch("u1")


def test_health_and_security_headers(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_default_rate_limit_is_enforced(client, auth_headers, monkeypatch):
    monkeypatch.setattr(app.state, "limiter", Limiter(key_func=get_remote_address, default_limits=["3/minute"]))

    codes = [client.get("/api/v1/home", headers=auth_headers).status_code for _ in range(4)]
    assert codes == [200, 200, 200, 429]
