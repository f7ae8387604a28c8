"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

Field names are snake_case in Python and camelCase on the wire
(``useCases``, ``createdBy``, ``updatedAt``); both spellings are accepted
on input.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from learninghub.domain.entities import Library

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class LibrarySchema(BaseModel):
    """Embedded library reference."""

    name: str = Field(..., min_length=1, max_length=255, examples=["NumPy"])
    description: str = Field(..., min_length=1, examples=["Numerical computing"])
    url: str | None = Field(None, max_length=2048, examples=["https://numpy.org"])

    model_config = _WIRE_CONFIG

    def to_entity(self) -> Library:
        return Library(name=self.name, description=self.description, url=self.url)


class ArticleCreate(BaseModel):
    """Schema for creating a new article. The slug is always derived, never accepted."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Python"])
    description: str = Field(..., min_length=1, examples=["A general-purpose language."])
    content: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1, max_length=100, examples=["python"])
    requirements: list[str] = Field(default_factory=list)
    use_cases: list[str] = Field(default_factory=list)
    libraries: list[LibrarySchema] = Field(default_factory=list)
    icon: str | None = Field(None, max_length=2048)
    color: str | None = Field(None, max_length=50, examples=["blue"])

    model_config = _WIRE_CONFIG

    def to_fields(self) -> dict[str, Any]:
        """Return the entity keyword arguments for this request."""
        fields = self.model_dump(exclude={"libraries"})
        fields["libraries"] = [lib.to_entity() for lib in self.libraries]
        return fields


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    language: str | None = Field(None, min_length=1, max_length=100)
    requirements: list[str] | None = None
    use_cases: list[str] | None = None
    libraries: list[LibrarySchema] | None = None
    icon: str | None = Field(None, max_length=2048)
    color: str | None = Field(None, max_length=50)

    model_config = _WIRE_CONFIG

    def to_changes(self) -> dict[str, Any]:
        """Return only the fields the client actually sent."""
        changes = self.model_dump(exclude_unset=True, exclude={"libraries"})
        for name in ("requirements", "use_cases"):
            if name in changes and changes[name] is None:
                changes[name] = []
        if "libraries" in self.model_fields_set:
            changes["libraries"] = [lib.to_entity() for lib in self.libraries or []]
        return changes


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    slug: str
    description: str
    content: str
    language: str
    requirements: list[str]
    use_cases: list[str]
    libraries: list[LibrarySchema]
    icon: str | None
    color: str
    created_by: str | None
    created_at: datetime
    updated_at: datetime

    model_config = _WIRE_CONFIG
