"""Edition domain object."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .person import UNKNOWN


class Edition(BaseModel):
    """A single published edition.

    Assignment is validated, so a negative circulation is rejected at the
    point of assignment and the previous value is kept.

    Attributes:
        title: Edition title
        release_date: When the edition was released
        circulation: Number of printed copies (never negative)
    """

    title: str = UNKNOWN
    release_date: datetime = Field(default_factory=datetime.now)
    circulation: int = Field(default=0, strict=True)

    model_config = {"validate_assignment": True}

    @field_validator("circulation")
    @classmethod
    def check_circulation(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Circulation cannot be negative")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edition):
            return NotImplemented
        return (
            self.title == other.title
            and self.release_date == other.release_date
            and self.circulation == other.circulation
        )

    def __hash__(self) -> int:
        return hash((self.title, self.release_date, self.circulation))

    def deep_copy(self) -> "Edition":
        return Edition(
            title=self.title,
            release_date=self.release_date,
            circulation=self.circulation,
        )

    def __str__(self) -> str:
        return (
            f"{self.title}, released: {self.release_date:%Y-%m-%d}, "
            f"circulation: {self.circulation}"
        )
