"""Magazine domain object.

A magazine is an edition with a publication frequency, a list of editors and
a list of articles. Besides the average rating it exposes lazy views over its
contents; each view is a generator that re-reads the current lists every time
it is called.
"""

import logging
from collections.abc import Iterator
from enum import Enum

from pydantic import computed_field

from .article import Article
from .edition import Edition
from .person import Person
from .rating import average_rating

logger = logging.getLogger(__name__)


class Frequency(Enum):
    """How often a magazine is published."""

    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


class Magazine(Edition):
    """A periodical edition with editors and articles.

    Equality and hashing come from Edition and only consider the base
    fields. Iterating a magazine yields the articles written by people who
    are not among its editors.

    Attributes:
        frequency: Publication frequency
        editors: Editors in the order they were added
        articles: Articles in the order they were added
    """

    frequency: Frequency = Frequency.MONTHLY
    editors: list[Person] = []
    articles: list[Article] = []

    @computed_field
    @property
    def rating(self) -> float:
        """Average article rating, 0.0 when there are no articles."""
        return average_rating(self.articles)

    def add_editors(self, *editors: Person) -> None:
        self.editors.extend(editors)
        logger.debug(f"Added {len(editors)} editor(s) to {self.title}")

    def add_articles(self, *articles: Article) -> None:
        self.articles.extend(articles)
        logger.debug(f"Added {len(articles)} article(s) to {self.title}")

    def deep_copy(self) -> "Magazine":
        """Copy the magazine, its editors and its articles.

        Returns:
            A Magazine that shares no lists, persons or articles with this one
        """
        copy = Magazine(
            title=self.title,
            frequency=self.frequency,
            release_date=self.release_date,
            circulation=self.circulation,
        )
        copy.editors.extend(editor.deep_copy() for editor in self.editors)
        copy.articles.extend(article.deep_copy() for article in self.articles)
        logger.debug(
            f"Copied {self.title} with {len(copy.editors)} editor(s) "
            f"and {len(copy.articles)} article(s)"
        )
        return copy

    def get_articles_by_rating(self, min_rating: float) -> Iterator[Article]:
        """Yield articles rated strictly above ``min_rating``."""
        for article in self.articles:
            if article.rating > min_rating:
                yield article

    def get_articles_by_title(self, keyword: str) -> Iterator[Article]:
        """Yield articles whose title contains ``keyword``, ignoring case."""
        needle = keyword.casefold()
        for article in self.articles:
            if needle in article.title.casefold():
                yield article

    def get_editors_without_articles(self) -> Iterator[Person]:
        """Yield editors who are not the author of any article."""
        for editor in self.editors:
            if not any(article.author == editor for article in self.articles):
                yield editor

    def __iter__(self) -> Iterator[Article]:  # type: ignore[override]
        for article in self.articles:
            if article.author not in self.editors:
                yield article

    def to_short_string(self) -> str:
        return (
            f"{super().__str__()}, frequency: {self.frequency.value}, "
            f"average rating: {self.rating}"
        )

    def __str__(self) -> str:
        editors = ", ".join(str(editor) for editor in self.editors)
        articles = "\n".join(str(article) for article in self.articles)
        return (
            f"{super().__str__()}, frequency: {self.frequency.value}\n"
            f"Editors: {editors}\n"
            f"Articles:\n{articles}"
        )
