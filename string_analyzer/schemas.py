from pydantic import BaseModel
from typing import Dict, Any, List


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: str


class StringEnvelope(BaseModel):
    status: str = "success"
    data: StringRecord


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
