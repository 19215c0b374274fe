class MovieSqlError(Exception):
    pass


class MalformedRowError(MovieSqlError):
    """A source row is missing a required field or has a non-numeric number."""

    def __init__(self, message, field=None, line=None):
        self.field = field
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnresolvedReferenceError(MovieSqlError):
    """An association was requested before its lookup identities exist."""


class StatementError(MovieSqlError):
    def __init__(self, message, sql=None):
        self.sql = sql
        super().__init__(message)


class NoRowsError(MovieSqlError):
    def __init__(self, sql):
        self.sql = sql
        super().__init__(f"query returned no rows: {sql.strip()}")
