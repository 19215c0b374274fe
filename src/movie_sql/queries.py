"""
SQL used by the loader and the exercise tests.

Values are bound through ``?`` placeholders; only identifiers (table and
column names from ``schema``) are interpolated.
"""

from .schema import (
    ACTORS,
    APPS_CATEGORIES,
    CATEGORIES,
    DIRECTORS,
    GENRES,
    KEYWORDS,
    MOVIE_ACTORS,
    MOVIE_DIRECTORS,
    MOVIE_GENRES,
    MOVIE_KEYWORDS,
    MOVIE_PRODUCTION_COMPANIES,
    MOVIES,
    PRODUCTION_COMPANIES,
)


def select_count(table):
    return f"SELECT COUNT(*) AS c FROM {table}"


def select_row_by_id(table):
    return f"SELECT * FROM {table} WHERE id = ?"


def select_unique_row_count(table, column):
    return f"SELECT COUNT(DISTINCT {column}) AS c FROM {table}"


def table_info(table):
    return f"PRAGMA table_info({table})"


def index_list(table):
    return f"PRAGMA index_list({table})"


SELECT_MOVIE_ID = f"SELECT id FROM {MOVIES} WHERE imdb_id = ?"
SELECT_MOVIE = f"SELECT * FROM {MOVIES} WHERE imdb_id = ?"

SELECT_CATEGORY_BY_TITLE = f"SELECT * FROM {CATEGORIES} WHERE title = ?"
SELECT_APP_CATEGORIES_BY_APP_ID = (
    f"SELECT * FROM {APPS_CATEGORIES} WHERE app_id = ? ORDER BY category_id"
)


def _by_movie_id(relation_table, entity_table, entity_column, name_column):
    # rowid order is insertion order, which is the order the source listed them
    return f"""
        SELECT e.{name_column}
        FROM {relation_table} r
        JOIN {entity_table} e ON r.{entity_column} = e.id
        WHERE r.movie_id = ?
        ORDER BY r.rowid
    """


SELECT_GENRES_BY_MOVIE_ID = _by_movie_id(MOVIE_GENRES, GENRES, "genre_id", "genre")
SELECT_ACTORS_BY_MOVIE_ID = _by_movie_id(
    MOVIE_ACTORS, ACTORS, "actor_id", "full_name"
)
SELECT_DIRECTORS_BY_MOVIE_ID = _by_movie_id(
    MOVIE_DIRECTORS, DIRECTORS, "director_id", "full_name"
)
SELECT_KEYWORDS_BY_MOVIE_ID = _by_movie_id(
    MOVIE_KEYWORDS, KEYWORDS, "keyword_id", "keyword"
)
SELECT_PRODUCTION_COMPANIES_BY_MOVIE_ID = _by_movie_id(
    MOVIE_PRODUCTION_COMPANIES, PRODUCTION_COMPANIES, "company_id", "company_name"
)
