"""
Schema definitions for the movies and Shopify app exercise databases.
"""

# ---- Movies ----
MOVIES = "movies"
MOVIE_RATINGS = "movie_ratings"
ACTORS = "actors"
KEYWORDS = "keywords"
DIRECTORS = "directors"
GENRES = "genres"
PRODUCTION_COMPANIES = "production_companies"

MOVIE_ACTORS = "movie_actors"
MOVIE_KEYWORDS = "movie_keywords"
MOVIE_DIRECTORS = "movie_directors"
MOVIE_GENRES = "movie_genres"
MOVIE_PRODUCTION_COMPANIES = "movie_production_companies"

ALL_TABLES = [
    MOVIES,
    MOVIE_RATINGS,
    ACTORS,
    KEYWORDS,
    DIRECTORS,
    GENRES,
    PRODUCTION_COMPANIES,
]

RELATION_TABLES = [
    MOVIE_ACTORS,
    MOVIE_KEYWORDS,
    MOVIE_DIRECTORS,
    MOVIE_GENRES,
    MOVIE_PRODUCTION_COMPANIES,
]

CREATE_MOVIES_TABLE = f"""
    CREATE TABLE {MOVIES} (
        id integer PRIMARY KEY NOT NULL,
        imdb_id text NOT NULL,
        popularity real NOT NULL,
        budget real NOT NULL,
        budget_adjusted real NOT NULL,
        revenue real NOT NULL,
        revenue_adjusted real NOT NULL,
        original_title text NOT NULL,
        homepage text,
        tagline text,
        overview text NOT NULL,
        runtime integer NOT NULL,
        release_date text NOT NULL
    )
"""

CREATE_MOVIE_RATINGS_TABLE = f"""
    CREATE TABLE {MOVIE_RATINGS} (
        user_id integer NOT NULL,
        movie_id integer NOT NULL,
        rating real NOT NULL,
        time_created text NOT NULL,
        PRIMARY KEY (user_id, movie_id),
        FOREIGN KEY (movie_id) REFERENCES {MOVIES}(id)
    )
"""

CREATE_ACTORS_TABLE = f"""
    CREATE TABLE {ACTORS} (
        id integer PRIMARY KEY NOT NULL,
        full_name text NOT NULL
    )
"""

CREATE_KEYWORDS_TABLE = f"""
    CREATE TABLE {KEYWORDS} (
        id integer PRIMARY KEY NOT NULL,
        keyword text NOT NULL
    )
"""

CREATE_DIRECTORS_TABLE = f"""
    CREATE TABLE {DIRECTORS} (
        id integer PRIMARY KEY NOT NULL,
        full_name text NOT NULL
    )
"""

CREATE_GENRES_TABLE = f"""
    CREATE TABLE {GENRES} (
        id integer PRIMARY KEY NOT NULL,
        genre text NOT NULL
    )
"""

CREATE_PRODUCTION_COMPANIES_TABLE = f"""
    CREATE TABLE {PRODUCTION_COMPANIES} (
        id integer PRIMARY KEY NOT NULL,
        company_name text NOT NULL
    )
"""


def _relation_table(table, entity_column, entity_table):
    # No primary key: a movie listing the same value twice yields two rows.
    return f"""
    CREATE TABLE {table} (
        movie_id integer NOT NULL,
        {entity_column} integer NOT NULL,
        FOREIGN KEY (movie_id) REFERENCES {MOVIES}(id),
        FOREIGN KEY ({entity_column}) REFERENCES {entity_table}(id)
    )
"""


CREATE_MOVIE_ACTORS_TABLE = _relation_table(MOVIE_ACTORS, "actor_id", ACTORS)
CREATE_MOVIE_KEYWORDS_TABLE = _relation_table(MOVIE_KEYWORDS, "keyword_id", KEYWORDS)
CREATE_MOVIE_DIRECTORS_TABLE = _relation_table(
    MOVIE_DIRECTORS, "director_id", DIRECTORS
)
CREATE_MOVIE_GENRES_TABLE = _relation_table(MOVIE_GENRES, "genre_id", GENRES)
CREATE_MOVIE_PRODUCTION_COMPANIES_TABLE = _relation_table(
    MOVIE_PRODUCTION_COMPANIES, "company_id", PRODUCTION_COMPANIES
)

CREATE_INDEX_MOVIES_RELEASE_DATE = (
    f"CREATE INDEX movies_release_date_idx ON {MOVIES} (release_date)"
)
CREATE_INDEX_MOVIE_RATINGS_TIME_CREATED = (
    f"CREATE INDEX movie_ratings_time_created_idx ON {MOVIE_RATINGS} (time_created)"
)
CREATE_UNIQUE_INDEX_MOVIES_IMDB_ID = (
    f"CREATE UNIQUE INDEX movies_imdb_id_unq_idx ON {MOVIES} (imdb_id)"
)
CREATE_UNIQUE_INDEX_KEYWORDS_KEYWORD = (
    f"CREATE UNIQUE INDEX keywords_keyword_unq_idx ON {KEYWORDS} (keyword)"
)
CREATE_UNIQUE_INDEX_GENRES_GENRE = (
    f"CREATE UNIQUE INDEX genres_genre_unq_idx ON {GENRES} (genre)"
)
CREATE_UNIQUE_INDEX_PRODUCTION_COMPANIES_COMPANY_NAME = (
    "CREATE UNIQUE INDEX production_companies_company_name_unq_idx "
    f"ON {PRODUCTION_COMPANIES} (company_name)"
)

MOVIE_TABLES_SQL = [
    CREATE_MOVIES_TABLE,
    CREATE_MOVIE_RATINGS_TABLE,
    CREATE_ACTORS_TABLE,
    CREATE_KEYWORDS_TABLE,
    CREATE_DIRECTORS_TABLE,
    CREATE_GENRES_TABLE,
    CREATE_PRODUCTION_COMPANIES_TABLE,
    CREATE_MOVIE_ACTORS_TABLE,
    CREATE_MOVIE_KEYWORDS_TABLE,
    CREATE_MOVIE_DIRECTORS_TABLE,
    CREATE_MOVIE_GENRES_TABLE,
    CREATE_MOVIE_PRODUCTION_COMPANIES_TABLE,
]

MOVIE_INDEXES_SQL = [
    CREATE_INDEX_MOVIES_RELEASE_DATE,
    CREATE_INDEX_MOVIE_RATINGS_TIME_CREATED,
    CREATE_UNIQUE_INDEX_MOVIES_IMDB_ID,
    CREATE_UNIQUE_INDEX_KEYWORDS_KEYWORD,
    CREATE_UNIQUE_INDEX_GENRES_GENRE,
    CREATE_UNIQUE_INDEX_PRODUCTION_COMPANIES_COMPANY_NAME,
]

# ---- Shopify apps ----
APPS = "apps"
CATEGORIES = "categories"
APPS_CATEGORIES = "apps_categories"
KEY_BENEFITS = "key_benefits"
PRICING_PLANS = "pricing_plans"
APPS_PRICING_PLANS = "apps_pricing_plans"
REVIEWS = "reviews"

SHOPIFY_TABLES = [
    APPS,
    CATEGORIES,
    APPS_CATEGORIES,
    KEY_BENEFITS,
    PRICING_PLANS,
    APPS_PRICING_PLANS,
    REVIEWS,
]

CREATE_APPS_TABLE = f"""
    CREATE TABLE {APPS} (
        id integer PRIMARY KEY NOT NULL,
        url text NOT NULL,
        title text NOT NULL,
        tagline text NOT NULL,
        developer text NOT NULL,
        developer_link text NOT NULL,
        icon text NOT NULL,
        rating real NOT NULL,
        reviews_count integer NOT NULL,
        description text NOT NULL,
        pricing_hint text
    )
"""

CREATE_CATEGORIES_TABLE = f"""
    CREATE TABLE {CATEGORIES} (
        id integer PRIMARY KEY NOT NULL,
        title text NOT NULL
    )
"""

CREATE_APPS_CATEGORIES_TABLE = f"""
    CREATE TABLE {APPS_CATEGORIES} (
        app_id integer NOT NULL,
        category_id integer NOT NULL,
        PRIMARY KEY (app_id, category_id),
        FOREIGN KEY (app_id) REFERENCES {APPS}(id) ON DELETE CASCADE,
        FOREIGN KEY (category_id) REFERENCES {CATEGORIES}(id)
    )
"""

CREATE_KEY_BENEFITS_TABLE = f"""
    CREATE TABLE {KEY_BENEFITS} (
        app_id integer NOT NULL,
        title text NOT NULL,
        description text NOT NULL,
        PRIMARY KEY (app_id, title),
        FOREIGN KEY (app_id) REFERENCES {APPS}(id)
    )
"""

CREATE_PRICING_PLANS_TABLE = f"""
    CREATE TABLE {PRICING_PLANS} (
        id integer PRIMARY KEY NOT NULL,
        price text NOT NULL
    )
"""

CREATE_APPS_PRICING_PLANS_TABLE = f"""
    CREATE TABLE {APPS_PRICING_PLANS} (
        app_id integer NOT NULL,
        pricing_plan_id integer NOT NULL,
        PRIMARY KEY (app_id, pricing_plan_id),
        FOREIGN KEY (app_id) REFERENCES {APPS}(id) ON DELETE CASCADE,
        FOREIGN KEY (pricing_plan_id) REFERENCES {PRICING_PLANS}(id)
    )
"""

CREATE_REVIEWS_TABLE = f"""
    CREATE TABLE {REVIEWS} (
        app_id integer NOT NULL,
        author text NOT NULL,
        body text NOT NULL,
        rating integer NOT NULL,
        helpful_count integer NOT NULL,
        date_created text NOT NULL,
        developer_reply text,
        developer_reply_date text,
        FOREIGN KEY (app_id) REFERENCES {APPS}(id)
    )
"""

CREATE_INDEX_REVIEWS_AUTHOR = f"CREATE INDEX reviews_author_idx ON {REVIEWS} (author)"
CREATE_INDEX_PRICING_PLANS_PRICE = (
    f"CREATE INDEX pricing_plans_price_idx ON {PRICING_PLANS} (price)"
)
CREATE_UNIQUE_INDEX_APPS_ID = f"CREATE UNIQUE INDEX apps_id_unq_idx ON {APPS} (id)"

SHOPIFY_TABLES_SQL = [
    CREATE_APPS_TABLE,
    CREATE_CATEGORIES_TABLE,
    CREATE_APPS_CATEGORIES_TABLE,
    CREATE_KEY_BENEFITS_TABLE,
    CREATE_PRICING_PLANS_TABLE,
    CREATE_APPS_PRICING_PLANS_TABLE,
    CREATE_REVIEWS_TABLE,
]

SHOPIFY_INDEXES_SQL = [
    CREATE_INDEX_REVIEWS_AUTHOR,
    CREATE_INDEX_PRICING_PLANS_PRICE,
    CREATE_UNIQUE_INDEX_APPS_ID,
]
