"""Schema definitions for Periodical Lab."""

from .article import Article
from .edition import Edition
from .magazine import Frequency, Magazine
from .person import Person
from .rating import RateAndCopy, average_rating

__all__ = [
    "Article",
    "Edition",
    "Frequency",
    "Magazine",
    "Person",
    "RateAndCopy",
    "average_rating",
]
