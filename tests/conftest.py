"""Pytest fixtures for Periodical Lab tests."""

from datetime import datetime

import pytest

from schemas import Article, Frequency, Magazine, Person


@pytest.fixture
def release_date():
    """Fixed release date so editions built in a test compare equal."""
    return datetime(2026, 1, 15, 14, 0, 0)


@pytest.fixture
def ivan():
    return Person(first_name="Ivan", last_name="Ivanov", birth_date=datetime(1980, 5, 15))


@pytest.fixture
def maria():
    return Person(first_name="Maria", last_name="Petrova", birth_date=datetime(1990, 7, 20))


@pytest.fixture
def quantum_article(ivan):
    return Article(author=ivan, title="Quantum Physics", rating=4.5)


@pytest.fixture
def intellect_article(maria):
    return Article(author=maria, title="Artificial Intellect", rating=3.8)


@pytest.fixture
def empty_magazine(release_date):
    """Monthly magazine with no editors or articles."""
    return Magazine(
        title="Technology",
        frequency=Frequency.MONTHLY,
        release_date=release_date,
        circulation=2000,
    )


@pytest.fixture
def sample_magazine(empty_magazine, ivan, maria, quantum_article, intellect_article):
    """Magazine where both editors also wrote one article each."""
    empty_magazine.add_editors(ivan, maria)
    empty_magazine.add_articles(quantum_article, intellect_article)
    return empty_magazine
