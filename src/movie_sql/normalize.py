"""
Split multi-valued record fields into lookup tables and association rows.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .errors import UnresolvedReferenceError
from .logger import log
from .schema import (
    ACTORS,
    DIRECTORS,
    GENRES,
    KEYWORDS,
    MOVIE_ACTORS,
    MOVIE_DIRECTORS,
    MOVIE_GENRES,
    MOVIE_KEYWORDS,
    MOVIE_PRODUCTION_COMPANIES,
    PRODUCTION_COMPANIES,
)


@dataclass(frozen=True)
class Relation:
    """One multi-valued attribute and the tables it is normalized into."""

    kind: str
    attribute: str
    lookup_table: str
    key_column: str
    association_table: str
    entity_column: str
    parent_column: str = "movie_id"

    @property
    def insert_lookup_sql(self):
        return (
            f"INSERT INTO {self.lookup_table} (id, {self.key_column}) VALUES (?, ?)"
        )

    @property
    def insert_association_sql(self):
        return (
            f"INSERT INTO {self.association_table} "
            f"({self.parent_column}, {self.entity_column}) VALUES (?, ?)"
        )


MOVIE_RELATIONS = (
    Relation("genres", "genres", GENRES, "genre", MOVIE_GENRES, "genre_id"),
    Relation("actors", "cast", ACTORS, "full_name", MOVIE_ACTORS, "actor_id"),
    Relation(
        "directors", "directors", DIRECTORS, "full_name", MOVIE_DIRECTORS, "director_id"
    ),
    Relation("keywords", "keywords", KEYWORDS, "keyword", MOVIE_KEYWORDS, "keyword_id"),
    Relation(
        "production_companies",
        "production_companies",
        PRODUCTION_COMPANIES,
        "company_name",
        MOVIE_PRODUCTION_COMPANIES,
        "company_id",
    ),
)


class LookupTable:
    """Natural key to identity mapping, numbered from 1 in insertion order."""

    def __init__(self, kind):
        self.kind = kind
        self._ids: Dict[str, int] = {}

    def add(self, key) -> int:
        if key not in self._ids:
            self._ids[key] = len(self._ids) + 1
        return self._ids[key]

    def id_for(self, key) -> int:
        try:
            return self._ids[key]
        except KeyError:
            raise UnresolvedReferenceError(
                f"{self.kind} value {key!r} has no assigned identity"
            ) from None

    def rows(self) -> List[Tuple[int, str]]:
        return [(identity, key) for key, identity in self._ids.items()]

    def __contains__(self, key):
        return key in self._ids

    def __len__(self):
        return len(self._ids)


@dataclass
class NormalizedData:
    records: list
    lookups: Dict[str, List[Tuple[int, str]]] = field(default_factory=dict)
    associations: Dict[str, List[Tuple[int, int]]] = field(default_factory=dict)


def unique_records(records):
    """Drop records whose id or imdb_id was already seen; the first wins."""
    seen_ids = set()
    seen_imdb_ids = set()
    unique = []
    for record in records:
        if record.id in seen_ids or record.imdb_id in seen_imdb_ids:
            log.warning(
                "duplicate_record_dropped", id=record.id, imdb_id=record.imdb_id
            )
            continue
        seen_ids.add(record.id)
        seen_imdb_ids.add(record.imdb_id)
        unique.append(record)
    return unique


class Normalizer:
    def __init__(self, relations=MOVIE_RELATIONS):
        self.relations = {relation.kind: relation for relation in relations}
        self.lookups: Dict[str, LookupTable] = {}

    def _relation(self, kind):
        try:
            return self.relations[kind]
        except KeyError:
            raise UnresolvedReferenceError(f"unknown relation kind {kind!r}") from None

    def build_lookups(self, records):
        for kind, relation in self.relations.items():
            table = LookupTable(kind)
            for record in records:
                for value in getattr(record, relation.attribute):
                    table.add(value)
            self.lookups[kind] = table
            log.info("lookup_built", kind=kind, count=len(table))
        return self.lookups

    def lookup_rows(self, kind):
        self._relation(kind)
        if kind not in self.lookups:
            raise UnresolvedReferenceError(f"{kind} lookup has not been built")
        return self.lookups[kind].rows()

    def association_rows(self, records, kind):
        relation = self._relation(kind)
        table = self.lookups.get(kind)
        if table is None:
            raise UnresolvedReferenceError(
                f"{kind} associations requested before the {kind} lookup was built"
            )
        return [
            (record.id, table.id_for(value))
            for record in records
            for value in getattr(record, relation.attribute)
        ]

    def normalize(self, records) -> NormalizedData:
        records = unique_records(records)
        self.build_lookups(records)
        data = NormalizedData(records=records)
        for kind in self.relations:
            data.lookups[kind] = self.lookup_rows(kind)
            data.associations[kind] = self.association_rows(records, kind)
        return data
