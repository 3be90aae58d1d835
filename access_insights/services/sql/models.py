"""SQL service models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from access_insights.config.constants import CredentialType

# Column name -> scalar, in the store's projection order
ResultRow = dict[str, Any]
ResultSet = list[ResultRow]


class AccessEvent(BaseModel):
    """One row of the access_events table."""

    id: int | None = None
    door_name: str
    controller_name: str
    first_name: str
    last_name: str
    full_name: str
    local_timestamp: datetime
    code: str
    credential_type: CredentialType


@dataclass
class ValidationResult:
    """Result from SQL validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RepairRule:
    """One find-and-replace step applied to generated SQL."""

    name: str
    pattern: Any  # compiled re.Pattern
    replacement: str

    def apply(self, sql: str) -> str:
        return self.pattern.sub(self.replacement, sql)
