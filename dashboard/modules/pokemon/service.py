import logging
from supabase import Client
from dashboard.core.errors import RemoteOperationFailure
from dashboard.core.owned_collection import OwnedCollection, require_text
from dashboard.modules.pokemon.pokeapi import PokeApiClient
from dashboard.modules.pokemon.schemas import (
    PokemonLookupResponse, PokemonReviewCreate, PokemonReviewUpdate,
    PokemonReviewResponse, PokemonStats, SpeciesRecord
)
from typing import List

logger = logging.getLogger(__name__)

REVIEW_SORTS = {
    "date_desc": ("created_at", True),
    "date_asc": ("created_at", False),
    "content_asc": ("content", False),
    "content_desc": ("content", True),
}


def normalize_name(name: str) -> str:
    return require_text(name, "Pokémon name").lower()


class PokemonService:
    def __init__(self, supabase: Client, species_client: PokeApiClient):
        self.supabase = supabase
        self.species_client = species_client
        self.reviews = OwnedCollection(supabase, "pokemon_reviews", PokemonReviewResponse, label="review")

    def find_species(self, name: str) -> SpeciesRecord:
        return self.species_client.lookup(normalize_name(name))

    def lookup(self, name: str, sort: str = "date_desc") -> PokemonLookupResponse:
        """Species data plus everyone's reviews for it"""
        species = self.find_species(name)
        return PokemonLookupResponse(species=species, reviews=self.list_reviews(species.name, sort))

    def list_reviews(self, name: str, sort: str = "date_desc") -> List[PokemonReviewResponse]:
        order_by, descending = REVIEW_SORTS.get(sort, REVIEW_SORTS["date_desc"])
        return self.reviews.fetch(
            None, order_by=order_by, descending=descending,
            filters={"pokemon_name": normalize_name(name)},
        )

    def add_review(self, name: str, review_data: PokemonReviewCreate, user_id: str) -> PokemonReviewResponse:
        content = require_text(review_data.content, "Review")
        species = self.find_species(name)
        return self.reviews.create(
            user_id, {"pokemon_name": species.name, "content": content, "rating": review_data.rating}
        )

    def edit_review(self, review_id: str, review_data: PokemonReviewUpdate, user_id: str) -> PokemonReviewResponse:
        """Only the author's own review can be edited"""
        changes = {"content": require_text(review_data.content, "Review")}
        if review_data.rating is not None:
            changes["rating"] = review_data.rating
        return self.reviews.replace(review_id, user_id, changes)

    def delete_review(self, review_id: str, user_id: str) -> None:
        self.reviews.delete(review_id, user_id)

    def get_stats(self, user_id: str) -> PokemonStats:
        """Total reviews across all users and number of distinct Pokémon the user reviewed"""
        try:
            all_result = self.supabase.table("pokemon_reviews")\
                .select("id", count="exact")\
                .execute()
            mine_result = self.supabase.table("pokemon_reviews")\
                .select("pokemon_name")\
                .eq("user_id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error loading review stats: {e}")
            raise RemoteOperationFailure(f"Failed to load review stats: {str(e)}")
        return PokemonStats(
            total_reviews=all_result.count or 0,
            reviewed_pokemon=len({r["pokemon_name"] for r in mine_result.data or []}),
        )
