import asyncio

import pytest
import requests

from dashboard.config import settings
from dashboard.modules.pokemon.pokeapi import PokeApiClient
from tests.conftest import USER_ID

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "base_experience": 112,
    "types": [{"slot": 1, "type": {"name": "electric"}}],
    "abilities": [{"ability": {"name": "static"}}, {"ability": {"name": "lightning-rod"}}],
    "stats": [{"base_stat": 35, "stat": {"name": "hp"}}, {"base_stat": 90, "stat": {"name": "speed"}}],
    "sprites": {
        "front_default": "https://img/25.png",
        "other": {"official-artwork": {"front_default": "https://img/artwork/25.png"}},
    },
}


class FakeHttpResponse:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload

    def json(self):
        return self._payload


@pytest.fixture
def pokeapi(monkeypatch):
    requested = []

    def fake_get(url, timeout=None):
        requested.append(url)
        if url.endswith("/pokemon/pikachu"):
            return FakeHttpResponse(200, PIKACHU)
        return FakeHttpResponse(404)

    monkeypatch.setattr("dashboard.modules.pokemon.pokeapi.requests.get", fake_get)
    return requested


def test_lookup_known_pokemon(client, auth_headers, pokeapi):
    resp = client.get("/api/v1/pokemon/Pikachu", headers=auth_headers)
    assert resp.status_code == 200
    species = resp.json()["species"]
    assert species["name"] == "pikachu"
    assert species["types"] == ["electric"]
    assert species["sprite"] == "https://img/artwork/25.png"
    assert species["stats"] == {"hp": 35, "speed": 90}
    assert resp.json()["reviews"] == []
    assert pokeapi == ["https://pokeapi.co/api/v2/pokemon/pikachu"]


def test_lookup_unknown_pokemon_is_not_found(client, auth_headers, pokeapi):
    resp = client.get("/api/v1/pokemon/zzznotreal", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Pokémon not found!"


def test_transport_error_is_not_found(client, auth_headers, monkeypatch):
    def broken_get(url, timeout=None):
        raise requests.ConnectionError("no route to host")

    monkeypatch.setattr("dashboard.modules.pokemon.pokeapi.requests.get", broken_get)
    assert client.get("/api/v1/pokemon/pikachu", headers=auth_headers).status_code == 404


def test_repeated_lookups_fetch_again(client, auth_headers, pokeapi):
    client.get("/api/v1/pokemon/pikachu", headers=auth_headers)
    client.get("/api/v1/pokemon/pikachu", headers=auth_headers)
    assert len(pokeapi) == 2


def test_reviews_are_shared_but_only_authors_can_change_them(client, fake, auth_headers, other_headers, pokeapi):
    resp = client.post(
        "/api/v1/pokemon/PIKACHU/reviews", json={"content": "Electric!", "rating": 4}, headers=auth_headers
    )
    assert resp.status_code == 201
    review = resp.json()
    assert review["pokemon_name"] == "pikachu"
    assert review["user_id"] == USER_ID

    seen_by_other = client.get("/api/v1/pokemon/pikachu", headers=other_headers).json()["reviews"]
    assert [r["id"] for r in seen_by_other] == [review["id"]]

    url = f"/api/v1/pokemon/reviews/{review['id']}"
    assert client.patch(url, json={"content": "meh"}, headers=other_headers).status_code == 404
    assert client.delete(f"{url}?confirm=true", headers=other_headers).status_code == 404

    edited = client.patch(url, json={"content": "Shocking!"}, headers=auth_headers)
    assert edited.json()["content"] == "Shocking!"
    assert client.delete(f"{url}?confirm=true", headers=auth_headers).status_code == 204
    assert client.get("/api/v1/pokemon/pikachu/reviews", headers=auth_headers).json() == []


def test_cannot_review_unknown_pokemon(client, fake, auth_headers, pokeapi):
    resp = client.post("/api/v1/pokemon/zzznotreal/reviews", json={"content": "?"}, headers=auth_headers)
    assert resp.status_code == 404
    assert fake.calls_of("insert", "pokemon_reviews") == 0


def test_review_sorting(client, auth_headers, pokeapi):
    for text in ("b second", "a first", "c third"):
        client.post("/api/v1/pokemon/pikachu/reviews", json={"content": text}, headers=auth_headers)

    def contents(sort):
        resp = client.get(f"/api/v1/pokemon/pikachu/reviews?sort={sort}", headers=auth_headers)
        return [r["content"] for r in resp.json()]

    assert contents("date_desc") == ["c third", "a first", "b second"]
    assert contents("date_asc") == ["b second", "a first", "c third"]
    assert contents("content_asc") == ["a first", "b second", "c third"]
    assert contents("content_desc") == ["c third", "b second", "a first"]


def test_stats(client, fake, auth_headers, other_headers, pokeapi):
    fake.tables["pokemon_reviews"] = [
        {"id": "r1", "pokemon_name": "pikachu", "user_id": USER_ID, "content": "x"},
        {"id": "r2", "pokemon_name": "pikachu", "user_id": USER_ID, "content": "y"},
        {"id": "r3", "pokemon_name": "eevee", "user_id": USER_ID, "content": "z"},
        {"id": "r4", "pokemon_name": "mew", "user_id": "someone-else", "content": "w"},
    ]
    resp = client.get("/api/v1/pokemon/stats", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"total_reviews": 4, "reviewed_pokemon": 2}


def test_stats_total_is_not_truncated_by_row_cap(client, fake, auth_headers):
    fake.tables["pokemon_reviews"] = [
        {"id": f"r{i}", "pokemon_name": "mew", "user_id": "someone-else", "content": "w"}
        for i in range(5)
    ]
    fake.row_cap = 2

    resp = client.get("/api/v1/pokemon/stats", headers=auth_headers)
    assert resp.json()["total_reviews"] == 5


def test_species_requests_run_off_the_event_loop(client, auth_headers, monkeypatch):
    on_event_loop = []

    def fake_get(url, timeout=None):
        try:
            asyncio.get_running_loop()
            on_event_loop.append(True)
        except RuntimeError:
            on_event_loop.append(False)
        return FakeHttpResponse(200, PIKACHU)

    monkeypatch.setattr("dashboard.modules.pokemon.pokeapi.requests.get", fake_get)

    assert client.get("/api/v1/pokemon/pikachu", headers=auth_headers).status_code == 200
    assert client.post(
        "/api/v1/pokemon/pikachu/reviews", json={"content": "zappy"}, headers=auth_headers
    ).status_code == 201
    assert on_event_loop == [False, False]


def test_species_client_defaults_come_from_settings(monkeypatch):
    requested = []

    def fake_get(url, timeout=None):
        requested.append((url, timeout))
        return FakeHttpResponse(200, PIKACHU)

    monkeypatch.setattr("dashboard.modules.pokemon.pokeapi.requests.get", fake_get)

    PokeApiClient().lookup("pikachu")
    PokeApiClient(base_url="https://mirror.test/api/", timeout_s=2.5).lookup("pikachu")
    assert requested == [
        (f"{settings.pokeapi_base_url.rstrip('/')}/pokemon/pikachu", settings.pokeapi_timeout_seconds),
        ("https://mirror.test/api/pokemon/pikachu", 2.5),
    ]
