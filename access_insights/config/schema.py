"""Access events table definition.

The schema is fixed: prompts, the seeding script and the chart heuristics all
read from ``ACCESS_EVENTS`` so they never drift apart.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnInfo:
    """Information about a database column."""

    column_name: str
    column_type: str
    column_description: str


@dataclass(frozen=True)
class TableInfo:
    """Information about a database table."""

    table_name: str
    table_description: str
    table_columns: list[ColumnInfo]

    @property
    def column_names(self) -> list[str]:
        return [column.column_name for column in self.table_columns]


ACCESS_EVENTS = TableInfo(
    table_name="access_events",
    table_description="One row per presentation of a credential at a door controller.",
    table_columns=[
        ColumnInfo("id", "SERIAL PRIMARY KEY", "Surrogate key."),
        ColumnInfo("door_name", "VARCHAR(255) NOT NULL", "Door the credential was presented at."),
        ColumnInfo("controller_name", "VARCHAR(255) NOT NULL", "Controller that owns the door."),
        ColumnInfo("first_name", "VARCHAR(255) NOT NULL", "Cardholder first name."),
        ColumnInfo("last_name", "VARCHAR(255) NOT NULL", "Cardholder last name."),
        ColumnInfo("full_name", "VARCHAR(255) NOT NULL", "Cardholder full name, 'First Last'."),
        ColumnInfo("local_timestamp", "TIMESTAMP(6) NOT NULL", "Local time of the event."),
        ColumnInfo("code", "VARCHAR(255) NOT NULL", "Outcome code, e.g. granted_full_test_used."),
        ColumnInfo("credential_type", "VARCHAR(255) NOT NULL", "card, mobile, pin or biometric."),
    ],
)

# Columns supplied when inserting; id is generated by the store
INSERT_COLUMNS: list[str] = [name for name in ACCESS_EVENTS.column_names if name != "id"]


def build_table_ddl(table: TableInfo = ACCESS_EVENTS, if_not_exists: bool = True) -> str:
    """Render a CREATE TABLE statement for ``table``."""
    guard = "IF NOT EXISTS " if if_not_exists else ""
    columns = ",\n".join(
        f"  {column.column_name} {column.column_type}" for column in table.table_columns
    )
    return f"CREATE TABLE {guard}{table.table_name} (\n{columns}\n);"
