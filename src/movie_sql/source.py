"""
Read the dataset CSV files into parsed records.
"""

import csv
from pathlib import Path

from .logger import log
from .records import parse_movie_row, parse_rating_row


def read_records(path, parse, encoding="utf-8"):
    path = Path(path)
    log.info("reading_csv", path=str(path))
    with path.open(newline="", encoding=encoding) as f:
        reader = csv.DictReader(f)
        records = [parse(row, line=reader.line_num) for row in reader]
    log.info("csv_read", path=str(path), count=len(records))
    return records


def read_movies(path, encoding="utf-8"):
    return read_records(path, parse_movie_row, encoding)


def read_ratings(path, encoding="utf-8"):
    return read_records(path, parse_rating_row, encoding)
