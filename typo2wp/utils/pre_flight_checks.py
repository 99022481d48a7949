from sqlalchemy import inspect

from .errors import MigrationError


class PreFlightCheckError(MigrationError):
    """Custom exception for pre-flight check failures."""
    pass


def run_pre_flight_checks(connection, prefix: str) -> None:
    """
    Verifies that the WordPress tables can be found in the destination.

    Only the terms table is checked; the rest of the schema is assumed
    to match a stock WordPress installation.

    Args:
        connection: SQLAlchemy connection to the destination database.
        prefix: The WordPress table prefix, e.g. ``wp_``.

    Raises:
        PreFlightCheckError: If the terms table does not exist.
    """
    table_name = f"{prefix}terms"
    if not inspect(connection).has_table(table_name):
        raise PreFlightCheckError(
            "Error: I can't find the wordpress tables. Perhaps your prefix is wrong?"
        )
