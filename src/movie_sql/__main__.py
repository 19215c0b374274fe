import os

import click

from .logger import log
from .process import Process
from .source import read_movies, read_ratings
from .sqlite import Database
from .stats import report_stats


def open_database(db_path):
    # without --db the path comes from MOVIE_SQL_DB
    return Database(db_path) if db_path else Database.from_env()


@click.group()
def cli():
    pass


@cli.command()
@click.argument("movies_csv", type=click.Path(exists=True, dir_okay=False))
@click.option("--ratings", "ratings_csv", type=click.Path(exists=True, dir_okay=False))
@click.option("--db", "db_path")
@click.option("--encoding", default="utf-8")
@click.option("--recreate", is_flag=True, help="Remove the database file first.")
def load(movies_csv, ratings_csv, db_path, encoding, recreate):
    database = open_database(db_path)
    if recreate and os.path.exists(database.db_path):
        log.info("removing_database", path=database.db_path)
        os.remove(database.db_path)

    movies = read_movies(movies_csv, encoding)
    ratings = read_ratings(ratings_csv, encoding) if ratings_csv else []

    try:
        Process(database).run(movies, ratings)
        report_stats(database)
    finally:
        database.close()


@cli.command()
@click.option("--db", "db_path")
def stats(db_path):
    database = open_database(db_path)
    try:
        for table, count in report_stats(database).items():
            click.echo(f"{table}\t{count}")
    finally:
        database.close()


if __name__ == "__main__":
    cli()
