"""Organization snapshots supplied by the data layer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Visibility(str, Enum):
    PUBLIC = "public"
    LIMITED = "limited"
    PRIVATE = "private"


class OrganizationSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str = ""
    email: str = ""
    description: str = ""
    website: str = ""
    location: str = ""
    visibility: Visibility = Visibility.PUBLIC
    num_members: int = 0
    num_teams: int = 0
    owners: tuple[str, ...] = ()
    members: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.full_name or self.name
