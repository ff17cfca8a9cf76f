"""Read-through client for the public PokeAPI species endpoint. No caching."""
import logging
from typing import Any, Dict, Optional

import requests

from dashboard.config import settings
from dashboard.core.errors import NotFound
from dashboard.modules.pokemon.schemas import SpeciesRecord

logger = logging.getLogger(__name__)


def to_species_record(data: Dict[str, Any]) -> SpeciesRecord:
    sprites = data.get("sprites") or {}
    artwork = ((sprites.get("other") or {}).get("official-artwork") or {}).get("front_default")
    return SpeciesRecord(
        id=data["id"],
        name=data["name"],
        types=[t["type"]["name"] for t in data.get("types") or []],
        sprite=artwork or sprites.get("front_default"),
        height=data.get("height"),
        weight=data.get("weight"),
        base_experience=data.get("base_experience"),
        abilities=[a["ability"]["name"] for a in data.get("abilities") or []],
        stats={s["stat"]["name"]: s["base_stat"] for s in data.get("stats") or []},
    )


class PokeApiClient:
    def __init__(self, base_url: Optional[str] = None, timeout_s: Optional[float] = None):
        self.base_url = (base_url or settings.pokeapi_base_url).rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else settings.pokeapi_timeout_seconds

    def lookup(self, name: str) -> SpeciesRecord:
        """GET /pokemon/{name}; any failure is reported as NotFound."""
        url = f"{self.base_url}/pokemon/{name}"
        try:
            r = requests.get(url, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.warning(f"PokeAPI request failed for {name!r}: {e}")
            raise NotFound("Pokémon not found!")
        if not r.ok:
            logger.info(f"PokeAPI returned {r.status_code} for {name!r}")
            raise NotFound("Pokémon not found!")
        try:
            return to_species_record(r.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Unexpected PokeAPI payload for {name!r}: {e}")
            raise NotFound("Pokémon not found!")
