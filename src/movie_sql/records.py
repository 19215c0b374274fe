"""
Typed records parsed from the movies and ratings CSV files.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

from .errors import MalformedRowError


DELIMITER = "|"


@dataclass(frozen=True)
class MovieRecord:
    id: int
    imdb_id: str
    popularity: float
    budget: float
    budget_adjusted: float
    revenue: float
    revenue_adjusted: float
    original_title: str
    homepage: Optional[str]
    tagline: Optional[str]
    overview: str
    runtime: int
    release_date: str
    cast: Tuple[str, ...] = ()
    directors: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    genres: Tuple[str, ...] = ()
    production_companies: Tuple[str, ...] = ()

    def as_row(self):
        return (
            self.id,
            self.imdb_id,
            self.popularity,
            self.budget,
            self.budget_adjusted,
            self.revenue,
            self.revenue_adjusted,
            self.original_title,
            self.homepage,
            self.tagline,
            self.overview,
            self.runtime,
            self.release_date,
        )


@dataclass(frozen=True)
class RatingRecord:
    user_id: int
    movie_id: int
    rating: float
    time_created: str

    def as_row(self):
        return (self.user_id, self.movie_id, self.rating, self.time_created)


def split_multi(value, delimiter=DELIMITER) -> Tuple[str, ...]:
    """Split a delimited multi-value field; a blank field gives ``()``."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(delimiter) if item.strip())


def _text(row, field, line):
    value = row.get(field)
    if value is None or not value.strip():
        raise MalformedRowError(f"missing required field {field!r}", field, line)
    return value.strip()


def _optional_text(row, field):
    value = (row.get(field) or "").strip()
    return value or None


def _number(row, field, line, kind):
    value = _text(row, field, line)
    try:
        if kind is int:
            # integral floats like "124.0" show up in exported CSVs
            number = float(value)
            if not number.is_integer():
                raise ValueError(value)
            return int(number)
        return float(value)
    except ValueError:
        raise MalformedRowError(
            f"field {field!r} is not numeric: {value!r}", field, line
        ) from None


def parse_movie_row(row, line=None) -> MovieRecord:
    return MovieRecord(
        id=_number(row, "id", line, int),
        imdb_id=_text(row, "imdb_id", line),
        popularity=_number(row, "popularity", line, float),
        budget=_number(row, "budget", line, float),
        budget_adjusted=_number(row, "budget_adj", line, float),
        revenue=_number(row, "revenue", line, float),
        revenue_adjusted=_number(row, "revenue_adj", line, float),
        original_title=_text(row, "original_title", line),
        homepage=_optional_text(row, "homepage"),
        tagline=_optional_text(row, "tagline"),
        overview=_text(row, "overview", line),
        runtime=_number(row, "runtime", line, int),
        release_date=_text(row, "release_date", line),
        cast=split_multi(row.get("cast")),
        directors=split_multi(row.get("director")),
        keywords=split_multi(row.get("keywords")),
        genres=split_multi(row.get("genres")),
        production_companies=split_multi(row.get("production_companies")),
    )


def _timestamp(value):
    try:
        seconds = float(value)
    except ValueError:
        return value
    return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M:%S"
    )


def parse_rating_row(row, line=None) -> RatingRecord:
    return RatingRecord(
        user_id=_number(row, "userId", line, int),
        movie_id=_number(row, "movieId", line, int),
        rating=_number(row, "rating", line, float),
        time_created=_timestamp(_text(row, "timestamp", line)),
    )
