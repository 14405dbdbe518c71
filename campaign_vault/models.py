"""Campaign records kept in the party, encounters and locations catalogs.

Pydantic validates records at the facade boundary. Field names are snake_case
in Python and camelCase on the wire, matching what the campaign manager
panels already store (`tokenId`, `passivePerception`, `totalXP`, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CampaignRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        """Plain dict with wire (camelCase) field names."""
        return self.model_dump(by_alias=True)


class HitPoints(CampaignRecord):
    current: int
    max: int


class PartyMember(CampaignRecord):
    """A player character in the party panel."""

    id: int
    name: str
    character_class: str = Field(default="", alias="class")
    level: int = 1
    avatar: str = ""
    token_id: str = ""
    ac: int = 10
    initiative: int = 0
    speed: int = 30
    passive_perception: int = 10
    hp: HitPoints = Field(default_factory=lambda: HitPoints(current=10, max=10))


class Monster(CampaignRecord):
    id: int
    name: str
    cr: str = "0"  # challenge rating, e.g. "1/4"
    type: str = ""
    count: int = 1


class Encounter(CampaignRecord):
    id: int
    name: str
    difficulty: str = "Medium"
    total_xp: int = Field(default=0, alias="totalXP")
    adjusted_xp: int = Field(default=0, alias="adjustedXP")
    map_name: str = ""
    monsters: list[Monster] = Field(default_factory=list)


class Location(CampaignRecord):
    id: int
    name: str
    type: str = ""
    description: str = ""
    image: str = ""
    map_name: str = ""
    region: str = ""
    token_id: str = ""
    discovered: bool = False


class CampaignSnapshot(CampaignRecord):
    """All three collections at once."""

    party: list[PartyMember] = Field(default_factory=list)
    encounters: list[Encounter] = Field(default_factory=list)
    locations: list[Location] = Field(default_factory=list)
