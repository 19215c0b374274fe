import pytest

from movie_sql import schema
from movie_sql.process import Process
from movie_sql.queries import (
    SELECT_APP_CATEGORIES_BY_APP_ID,
    SELECT_CATEGORY_BY_TITLE,
    select_count,
    select_row_by_id,
    select_unique_row_count,
)


@pytest.fixture
def movie_schema(database):
    Process(database).create_schema()
    return database


def names_and_types(database, table):
    return [(c.name, c.type) for c in database.columns(table)]


def test_movie_tables_exist(movie_schema):
    for table in schema.ALL_TABLES + schema.RELATION_TABLES:
        assert movie_schema.table_exists(table)


def test_movie_columns(movie_schema):
    assert names_and_types(movie_schema, schema.MOVIES) == [
        ("id", "integer"),
        ("imdb_id", "text"),
        ("popularity", "real"),
        ("budget", "real"),
        ("budget_adjusted", "real"),
        ("revenue", "real"),
        ("revenue_adjusted", "real"),
        ("original_title", "text"),
        ("homepage", "text"),
        ("tagline", "text"),
        ("overview", "text"),
        ("runtime", "integer"),
        ("release_date", "text"),
    ]
    assert names_and_types(movie_schema, schema.MOVIE_RATINGS) == [
        ("user_id", "integer"),
        ("movie_id", "integer"),
        ("rating", "real"),
        ("time_created", "text"),
    ]
    assert names_and_types(movie_schema, schema.ACTORS) == [
        ("id", "integer"),
        ("full_name", "text"),
    ]
    assert names_and_types(movie_schema, schema.KEYWORDS) == [
        ("id", "integer"),
        ("keyword", "text"),
    ]
    assert names_and_types(movie_schema, schema.GENRES) == [
        ("id", "integer"),
        ("genre", "text"),
    ]
    assert names_and_types(movie_schema, schema.PRODUCTION_COMPANIES) == [
        ("id", "integer"),
        ("company_name", "text"),
    ]


def test_movie_primary_keys(movie_schema):
    movies = [c.name for c in movie_schema.columns(schema.MOVIES) if c.primary_key]
    assert movies == ["id"]
    ratings = [
        c.name for c in movie_schema.columns(schema.MOVIE_RATINGS) if c.primary_key
    ]
    assert ratings == ["user_id", "movie_id"]
    for table in schema.RELATION_TABLES:
        assert not any(c.primary_key for c in movie_schema.columns(table))


def test_movie_not_null(movie_schema):
    nullable = [c.name for c in movie_schema.columns(schema.MOVIES) if not c.not_null]
    assert nullable == ["homepage", "tagline"]
    for table in [schema.ACTORS, schema.DIRECTORS, schema.GENRES, schema.KEYWORDS]:
        assert all(c.not_null for c in movie_schema.columns(table))


def test_movie_indexes(movie_schema):
    assert sorted(movie_schema.indexes(schema.MOVIES)) == [
        ("movies_imdb_id_unq_idx", True),
        ("movies_release_date_idx", False),
    ]
    assert sorted(movie_schema.indexes(schema.MOVIE_RATINGS)) == [
        ("movie_ratings_time_created_idx", False),
        ("sqlite_autoindex_movie_ratings_1", True),
    ]
    for table, name in [
        (schema.KEYWORDS, "keywords_keyword_unq_idx"),
        (schema.GENRES, "genres_genre_unq_idx"),
        (schema.PRODUCTION_COMPANIES, "production_companies_company_name_unq_idx"),
    ]:
        assert movie_schema.indexes(table) == [(name, True)]


@pytest.fixture
def shopify(database):
    for query in schema.SHOPIFY_TABLES_SQL:
        database.create_table(query)
    for query in schema.SHOPIFY_INDEXES_SQL:
        database.create_index(query)

    database.insert_many(
        "INSERT INTO apps (id, url, title, tagline, developer, developer_link, icon, "
        "rating, reviews_count, description, pricing_hint) "
        "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
        [
            (1, "u1", "Sales Pop", "t", "d", "l", "i", 4.8, 10, "desc", None),
            (2, "u2", "Page Builder", "t", "d", "l", "i", 4.5, 4, "desc", "Free trial"),
            (3, "u3", "Upsell", "t", "d", "l", "i", 3.9, 2, "desc", None),
        ],
    )
    database.insert_many(
        "INSERT INTO categories (id, title) VALUES (?, ?)",
        [(1, "Store design"), (2, "Marketing"), (3, "Sales and conversion optimization")],
    )
    database.insert_many(
        "INSERT INTO apps_categories (app_id, category_id) VALUES (?, ?)",
        [(1, 3), (1, 2), (2, 1), (3, 1), (3, 3)],
    )
    database.insert_many(
        "INSERT INTO pricing_plans (id, price) VALUES (?, ?)",
        [(1, "Free"), (2, "$9.99/month"), (3, "$5/month"), (4, "Free to install")],
    )
    database.insert_many(
        "INSERT INTO apps_pricing_plans (app_id, pricing_plan_id) VALUES (?, ?)",
        [(1, 1), (1, 2), (2, 4), (3, 2), (3, 3)],
    )
    return database


def test_shopify_tables(shopify):
    for table in schema.SHOPIFY_TABLES:
        assert shopify.table_exists(table)
    assert [c.name for c in shopify.columns(schema.APPS) if not c.not_null] == [
        "pricing_hint"
    ]
    assert sorted(shopify.indexes(schema.APPS))[0] == ("apps_id_unq_idx", True)
    assert ("reviews_author_idx", False) in shopify.indexes(schema.REVIEWS)


def test_shopify_lookups(shopify):
    assert shopify.select_single_row(select_count(schema.APPS)) == {"c": 3}
    assert shopify.select_single_row(select_row_by_id(schema.APPS), (2,))["title"] == (
        "Page Builder"
    )
    assert shopify.select_single_row(SELECT_CATEGORY_BY_TITLE, ("Marketing",)) == {
        "id": 2,
        "title": "Marketing",
    }
    assert shopify.select_multiple_rows(SELECT_APP_CATEGORIES_BY_APP_ID, (1,)) == [
        {"app_id": 1, "category_id": 2},
        {"app_id": 1, "category_id": 3},
    ]
    assert shopify.select_single_row(
        select_unique_row_count(schema.APPS_PRICING_PLANS, "app_id")
    ) == {"c": 3}


def test_shopify_queries_across_tables(shopify):
    free = shopify.select_single_row(
        """
        SELECT COUNT(*) AS count
        FROM apps_pricing_plans
        JOIN pricing_plans ON apps_pricing_plans.pricing_plan_id = pricing_plans.id
        WHERE price LIKE 'free%'
        """
    )
    assert free == {"count": 2}

    top = shopify.select_multiple_rows(
        """
        SELECT COUNT(app_id) AS count, title AS category
        FROM apps_categories a
        JOIN categories c ON a.category_id = c.id
        GROUP BY category_id
        ORDER BY count DESC, category
        LIMIT 2
        """
    )
    assert top == [
        {"count": 2, "category": "Sales and conversion optimization"},
        {"count": 2, "category": "Store design"},
    ]
