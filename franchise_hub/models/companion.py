"""Base model for records exported by the Madden companion app.

Attribute names match our column names; the companion app's camelCase keys
are bound through aliases, generated for plain words and spelled out where
Madden capitalizes acronyms (``defTDs``, ``recYACPerCatch``, ``isOnIR``).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MaddenRecord(BaseModel):
    """Lenient external record: unknown keys ignored, numbers accepted for strings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        frozen=True,
    )
