"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

import time

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for records exchanged with the web client.

    Attributes are snake_case in Python and camelCase on the wire.
    Both spellings are accepted on input so records written by older
    clients (or by hand) still load.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_record(self) -> dict:
        """Dump to the JSON-compatible dict stored in the record store."""
        return self.model_dump(mode="json", by_alias=True)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)
