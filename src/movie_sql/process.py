from .logger import log
from .normalize import Normalizer
from .schema import (
    MOVIE_INDEXES_SQL,
    MOVIE_RATINGS,
    MOVIE_TABLES_SQL,
    MOVIES,
)

from tqdm import tqdm


INSERT_MOVIE_QUERY = f"""
    INSERT INTO {MOVIES} (
        id, imdb_id, popularity, budget, budget_adjusted, revenue,
        revenue_adjusted, original_title, homepage, tagline, overview,
        runtime, release_date
    )
    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""

INSERT_RATING_QUERY = f"""
    INSERT INTO {MOVIE_RATINGS} (user_id, movie_id, rating, time_created)
    VALUES (?, ?, ?, ?)
"""


def progress(rows, desc):
    return tqdm(rows, desc=desc, mininterval=0, miniters=max(1, len(rows) // 100))


class Process:
    """Load parsed movie and rating records into a ``Database``.

    Nothing is cleared first: loading twice into the same tables duplicates
    association rows and fails on the primary keys of the others.
    """

    def __init__(self, database, relations=None):
        self.database = database
        self.relations = relations

    def create_schema(self):
        log.info("creating_schema")
        for query in MOVIE_TABLES_SQL:
            self.database.create_table(query)
        for query in MOVIE_INDEXES_SQL:
            self.database.create_index(query)

    # ---- Loading methods ----
    def load_movies(self, records):
        # one normalizer per load; its identity mappings die with it
        normalizer = Normalizer() if self.relations is None else Normalizer(self.relations)
        data = normalizer.normalize(records)

        rows = [record.as_row() for record in progress(data.records, "Movies")]
        self.database.insert_many(INSERT_MOVIE_QUERY, rows)
        log.info("movies_loaded", count=len(rows))

        for kind, relation in normalizer.relations.items():
            lookup_rows = data.lookups[kind]
            self.database.insert_many(
                relation.insert_lookup_sql, progress(lookup_rows, relation.lookup_table)
            )
            association_rows = data.associations[kind]
            self.database.insert_many(
                relation.insert_association_sql,
                progress(association_rows, relation.association_table),
            )
            log.info(
                "relation_loaded",
                kind=kind,
                entities=len(lookup_rows),
                associations=len(association_rows),
            )
        return data

    def load_ratings(self, records):
        records = list(records)
        rows = [record.as_row() for record in progress(records, "Ratings")]
        count = self.database.insert_many(INSERT_RATING_QUERY, rows)
        log.info("ratings_loaded", count=count)
        return count

    def run(self, movies, ratings=()):
        self.create_schema()
        data = self.load_movies(movies)
        self.load_ratings(ratings)
        return data
