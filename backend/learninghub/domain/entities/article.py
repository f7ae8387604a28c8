"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from learninghub.domain.exceptions import EntityValidationError

DEFAULT_COLOR = "blue"

# Fields callers may change through Article.apply_changes().
MUTABLE_FIELDS = frozenset({
    "title",
    "description",
    "content",
    "language",
    "requirements",
    "use_cases",
    "libraries",
    "icon",
    "color",
})


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class Library:
    """Embedded value type: a tool or framework referenced by an article."""

    name: str
    description: str
    url: str | None = None

    def missing_fields(self) -> list[str]:
        return [name for name in ("name", "description") if _is_blank(getattr(self, name))]


@dataclass
class Article:
    """Core domain entity representing one programming-language guide.

    ``id`` is the permanent identifier. ``slug`` is derived from ``title``
    by the write pipeline and changes whenever the title does.
    """

    title: str
    description: str
    content: str
    language: str
    requirements: list[str] = field(default_factory=list)
    use_cases: list[str] = field(default_factory=list)
    libraries: list[Library] = field(default_factory=list)
    icon: str | None = None
    color: str = DEFAULT_COLOR
    created_by: str | None = None
    slug: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def validate(self) -> None:
        """Raise EntityValidationError listing every missing required field."""
        errors: dict[str, str] = {}
        for name in ("title", "description", "content", "language"):
            if _is_blank(getattr(self, name)):
                errors[name] = "field required"
        for index, library in enumerate(self.libraries):
            for name in library.missing_fields():
                errors[f"libraries.{index}.{name}"] = "field required"
        if errors:
            raise EntityValidationError("Article", errors)

    def apply_changes(self, **changes: Any) -> set[str]:
        """Assign the given fields and return the names whose value changed.

        Timestamps and the slug are left alone; the write pipeline owns them.
        """
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise EntityValidationError(
                "Article", {name: "field cannot be set" for name in sorted(unknown)}
            )

        changed: set[str] = set()
        for name, value in changes.items():
            if name in ("requirements", "use_cases", "libraries"):
                value = list(value)
            if name == "color" and value is None:
                value = DEFAULT_COLOR
            if getattr(self, name) != value:
                setattr(self, name, value)
                changed.add(name)
        return changed
