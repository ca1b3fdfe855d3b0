from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ChangeType = Literal["increase", "decrease"]


class DashboardSnapshot(BaseModel):
    """Serialised with camelCase keys (liveCrowdCount, crowdChange, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    live_crowd_count: str       # "~15,432"
    crowd_change: str           # "4.2%"
    crowd_change_type: ChangeType
    bookings_today: str
    bookings_change: str
    bookings_change_type: ChangeType
    incidents_today: str
    incidents_change: str
    incidents_change_type: ChangeType
