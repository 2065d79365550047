from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(UTC).replace(tzinfo=None)


class CamelModel(BaseModel):
    """Pydantic base for payloads exchanged with the web client (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
