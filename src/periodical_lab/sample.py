"""Fixed sample data for the demonstration run."""

from datetime import datetime

from schemas import Article, Frequency, Magazine, Person

SAMPLE_TITLE = "Technology"
SAMPLE_CIRCULATION = 2000


def sample_editors() -> list[Person]:
    return [
        Person(first_name="Ivan", last_name="Ivanov", birth_date=datetime(1980, 5, 15)),
        Person(first_name="Maria", last_name="Petrova", birth_date=datetime(1990, 7, 20)),
    ]


def build_sample_magazine(release_date: datetime | None = None) -> Magazine:
    """Build the sample magazine.

    Both editors also write one article each, so the magazine has no
    editors without articles and no outside-authored articles.

    Args:
        release_date: Release date of the magazine (default: now)

    Returns:
        A monthly Magazine with two editors and two articles
    """
    ivan, maria = sample_editors()

    magazine = Magazine(
        title=SAMPLE_TITLE,
        frequency=Frequency.MONTHLY,
        release_date=release_date or datetime.now(),
        circulation=SAMPLE_CIRCULATION,
    )
    magazine.add_editors(ivan, maria)
    magazine.add_articles(
        Article(author=ivan, title="Quantum Physics", rating=4.5),
        Article(author=maria, title="Artificial Intellect", rating=3.8),
    )
    return magazine
