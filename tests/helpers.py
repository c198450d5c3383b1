"""Shared records used as combiners in tests."""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Person:
    name: str
    age: int


class PersonModel(BaseModel):
    name: str
    age: int = Field(ge=0, le=150)
