"""Article domain object."""

from pydantic import BaseModel, Field

from .person import UNKNOWN, Person


class Article(BaseModel):
    """An article written for a magazine.

    Attributes:
        author: Person who wrote the article
        title: Article title
        rating: Reader rating
    """

    author: Person = Field(default_factory=Person)
    title: str = UNKNOWN
    rating: float = 0.0

    model_config = {"validate_assignment": True}

    # Articles compare by identity; only their authors have value equality.
    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def deep_copy(self) -> "Article":
        """Copy the article together with its author."""
        return Article(
            author=self.author.deep_copy(),
            title=self.title,
            rating=self.rating,
        )

    def __str__(self) -> str:
        return f"{self.title} by {self.author}, rating: {self.rating}"
