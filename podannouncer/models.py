"""Value types shared by the resolver and the announcer."""

from pydantic import BaseModel, ConfigDict


class AnnounceTarget(BaseModel):
    """Everything needed for a single registration."""

    model_config = ConfigDict(frozen=True)

    hostname: str
    ip: str
    registry_address: str
