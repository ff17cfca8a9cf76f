from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime


class SpeciesRecord(BaseModel):
    id: int
    name: str
    types: List[str] = []
    sprite: Optional[str] = None
    height: Optional[int] = None
    weight: Optional[int] = None
    base_experience: Optional[int] = None
    abilities: List[str] = []
    stats: Dict[str, int] = {}


class PokemonReviewCreate(BaseModel):
    content: str
    rating: Optional[int] = Field(default=None, ge=1, le=5)


class PokemonReviewUpdate(BaseModel):
    content: str
    rating: Optional[int] = Field(default=None, ge=1, le=5)


class PokemonReviewResponse(BaseModel):
    id: str
    pokemon_name: str
    user_id: str
    content: str
    rating: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PokemonLookupResponse(BaseModel):
    species: SpeciesRecord
    reviews: List[PokemonReviewResponse]


class PokemonStats(BaseModel):
    total_reviews: int
    reviewed_pokemon: int
