from pathlib import Path

import pytest

from movie_sql.process import Process
from movie_sql.source import read_movies, read_ratings
from movie_sql.sqlite import Database


DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def movies_csv():
    return DATA_DIR / "movies.csv"


@pytest.fixture
def ratings_csv():
    return DATA_DIR / "ratings.csv"


@pytest.fixture
def movies(movies_csv):
    return read_movies(movies_csv)


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / "test.db")
    yield db
    db.close()


@pytest.fixture
def loaded_database(database, movies, ratings_csv):
    Process(database).run(movies, read_ratings(ratings_csv))
    return database


def movie_row(**overrides):
    """A raw CSV row with every required movie column filled in."""
    row = {
        "id": "1",
        "imdb_id": "tt0000001",
        "popularity": "1.5",
        "budget": "1000",
        "budget_adj": "1100",
        "revenue": "2000",
        "revenue_adj": "2200",
        "original_title": "Jaws",
        "homepage": "",
        "tagline": "",
        "overview": "A shark.",
        "runtime": "124",
        "release_date": "6/20/75",
        "cast": "",
        "director": "",
        "keywords": "",
        "genres": "",
        "production_companies": "",
    }
    row.update(overrides)
    return row
