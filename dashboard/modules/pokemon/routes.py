from fastapi import APIRouter, Depends
from dashboard.database.supabase_client import get_supabase
from dashboard.modules.auth.schemas import Identity
from dashboard.modules.pokemon.pokeapi import PokeApiClient
from dashboard.modules.pokemon.schemas import (
    PokemonLookupResponse, PokemonReviewCreate, PokemonReviewUpdate,
    PokemonReviewResponse, PokemonStats
)
from dashboard.modules.pokemon.service import PokemonService
from dashboard.core.dependencies import get_current_identity, require_confirmation
from supabase import Client
from typing import List, Literal

router = APIRouter(prefix="/pokemon", tags=["pokemon"])

ReviewSort = Literal["date_desc", "date_asc", "content_asc", "content_desc"]


def get_species_client() -> PokeApiClient:
    return PokeApiClient()


def get_pokemon_service(
    supabase: Client = Depends(get_supabase),
    species_client: PokeApiClient = Depends(get_species_client)
) -> PokemonService:
    return PokemonService(supabase, species_client)


@router.get("/stats", response_model=PokemonStats)
def get_stats(
    identity: Identity = Depends(get_current_identity),
    service: PokemonService = Depends(get_pokemon_service)
):
    return service.get_stats(identity.id)


@router.patch("/reviews/{review_id}", response_model=PokemonReviewResponse)
def edit_review(
    review_id: str,
    review_data: PokemonReviewUpdate,
    identity: Identity = Depends(get_current_identity),
    service: PokemonService = Depends(get_pokemon_service)
):
    """Edit your own review"""
    return service.edit_review(review_id, review_data, identity.id)


@router.delete("/reviews/{review_id}", status_code=204)
def delete_review(
    review_id: str,
    identity: Identity = Depends(get_current_identity),
    confirmed: bool = Depends(require_confirmation),
    service: PokemonService = Depends(get_pokemon_service)
):
    """Delete your own review"""
    service.delete_review(review_id, identity.id)
    return None


@router.get("/{name}", response_model=PokemonLookupResponse)
def lookup_pokemon(
    name: str,
    sort: ReviewSort = "date_desc",
    identity: Identity = Depends(get_current_identity),
    service: PokemonService = Depends(get_pokemon_service)
):
    """Look up a Pokémon by name and load its reviews"""
    return service.lookup(name, sort)


@router.get("/{name}/reviews", response_model=List[PokemonReviewResponse])
def list_reviews(
    name: str,
    sort: ReviewSort = "date_desc",
    identity: Identity = Depends(get_current_identity),
    service: PokemonService = Depends(get_pokemon_service)
):
    return service.list_reviews(name, sort)


@router.post("/{name}/reviews", response_model=PokemonReviewResponse, status_code=201)
def add_review(
    name: str,
    review_data: PokemonReviewCreate,
    identity: Identity = Depends(get_current_identity),
    service: PokemonService = Depends(get_pokemon_service)
):
    return service.add_review(name, review_data, identity.id)
