"""Person domain object."""

from datetime import datetime

from pydantic import BaseModel, Field

UNKNOWN = "Unknown"


class Person(BaseModel):
    """A person who edits or writes for a publication.

    Two persons are equal when all three fields match, regardless of
    whether they are the same object.

    Attributes:
        first_name: Given name
        last_name: Family name
        birth_date: Date of birth
    """

    first_name: str = UNKNOWN
    last_name: str = UNKNOWN
    birth_date: datetime = Field(default_factory=datetime.now)

    model_config = {"validate_assignment": True}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (
            self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.birth_date == other.birth_date
        )

    def __hash__(self) -> int:
        return hash((self.first_name, self.last_name, self.birth_date))

    def deep_copy(self) -> "Person":
        return Person(
            first_name=self.first_name,
            last_name=self.last_name,
            birth_date=self.birth_date,
        )

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}, born: {self.birth_date:%Y-%m-%d}"
