"""
Table definitions for the DuckDB store - single source of truth for column order and types.
"""
from typing import Dict, List


class TableSchema:
    """Schema configuration for one entity table"""

    table_name: str = ""
    sequence_name: str = ""
    columns: Dict[str, str] = {}
    required_columns: List[str] = []
    primary_key: str = "id"

    @classmethod
    def get_column_names(cls) -> List[str]:
        """Get ordered list of column names (excluding the insertion sequence)"""
        return list(cls.columns.keys())

    @classmethod
    def get_sql_create_sequence(cls) -> str:
        """Get SQL for the sequence that records insertion order"""
        return f"CREATE SEQUENCE IF NOT EXISTS {cls.sequence_name}"

    @classmethod
    def get_sql_create_table(cls) -> str:
        """Get SQL for creating the table"""
        columns = []
        for name, sql_type in cls.columns.items():
            nullable = "NOT NULL" if name in cls.required_columns else ""
            columns.append(f"{name} {sql_type} {nullable}".strip())
        columns.append(f"seq BIGINT DEFAULT nextval('{cls.sequence_name}')")
        return f"""
        CREATE TABLE IF NOT EXISTS {cls.table_name} (
            {', '.join(columns)},
            PRIMARY KEY ({cls.primary_key})
        )
        """

    @classmethod
    def get_sql_insert(cls) -> str:
        """Get parameterized INSERT for all schema columns"""
        columns = cls.get_column_names()
        placeholders = ", ".join(["?" for _ in columns])
        return f"INSERT INTO {cls.table_name} ({', '.join(columns)}) VALUES ({placeholders})"


class UserSchema(TableSchema):
    table_name = "users"
    sequence_name = "users_seq"
    columns = {
        "id": "VARCHAR",
        "username": "VARCHAR",
        "password_hash": "VARCHAR",
        "role": "VARCHAR",
        "created_at": "TIMESTAMP",
    }
    required_columns = ["id", "username", "password_hash", "role"]


class WellSchema(TableSchema):
    table_name = "wells"
    sequence_name = "wells_seq"
    columns = {
        "id": "VARCHAR",
        "name": "VARCHAR",
        "location": "VARCHAR",
        "created_at": "TIMESTAMP",
    }
    required_columns = ["id", "name", "location", "created_at"]


class ReportSchema(TableSchema):
    table_name = "reports"
    sequence_name = "reports_seq"
    # created_by and well_id are plain columns: references are not enforced
    columns = {
        "id": "VARCHAR",
        "title": "VARCHAR",
        "content": "VARCHAR",
        "pressure": "DOUBLE",
        "well_status": "VARCHAR",
        "temperature": "DOUBLE",
        "created_by": "VARCHAR",
        "well_id": "VARCHAR",
        "created_at": "TIMESTAMP",
    }
    required_columns = ["id", "title", "content", "created_at"]


ALL_SCHEMAS = [UserSchema, WellSchema, ReportSchema]
