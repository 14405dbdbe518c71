"""Seed a namespace with demo campaign data for development/testing."""

from campaign_vault.campaign import CAMPAIGN_CATALOGS, CampaignData
from campaign_vault.models import CampaignSnapshot

DEMO_PARTY = [
    {
        "id": 1, "name": "Thaldrin Ironforge", "class": "Fighter", "level": 5,
        "avatar": "../assets/tokens/Aesculapian.webp", "tokenId": "token-1",
        "ac": 18, "initiative": 2, "speed": 30, "passivePerception": 13,
        "hp": {"current": 45, "max": 52},
    },
    {
        "id": 2, "name": "Elara Moonwhisper", "class": "Wizard", "level": 5,
        "avatar": "../assets/tokens/Chitra.webp", "tokenId": "token-2",
        "ac": 13, "initiative": 3, "speed": 30, "passivePerception": 14,
        "hp": {"current": 28, "max": 28},
    },
    {
        "id": 3, "name": "Kael Shadowstep", "class": "Rogue", "level": 5,
        "avatar": "../assets/tokens/ISRA.webp", "tokenId": "token-3",
        "ac": 16, "initiative": 4, "speed": 30, "passivePerception": 18,
        "hp": {"current": 15, "max": 35},
    },
    {
        "id": 4, "name": "Lyria Dawnbringer", "class": "Cleric", "level": 5,
        "avatar": "../assets/tokens/Orgotek.webp", "tokenId": "token-4",
        "ac": 17, "initiative": 1, "speed": 25, "passivePerception": 16,
        "hp": {"current": 40, "max": 40},
    },
]

DEMO_ENCOUNTERS = [
    {
        "id": 1, "name": "Goblin Ambush", "difficulty": "Medium",
        "totalXP": 600, "adjustedXP": 900, "mapName": "Forest Road",
        "monsters": [
            {"id": 1, "name": "Goblin", "cr": "1/4", "type": "Humanoid", "count": 6},
            {"id": 2, "name": "Goblin Boss", "cr": "1", "type": "Humanoid", "count": 1},
        ],
    },
    {
        "id": 2, "name": "Dragon's Lair", "difficulty": "Deadly",
        "totalXP": 8400, "adjustedXP": 12600, "mapName": "Mountain Peak",
        "monsters": [
            {"id": 1, "name": "Young Red Dragon", "cr": "10", "type": "Dragon", "count": 1},
            {"id": 2, "name": "Kobold", "cr": "1/8", "type": "Humanoid", "count": 8},
        ],
    },
    {
        "id": 3, "name": "Undead Horde", "difficulty": "Hard",
        "totalXP": 2100, "adjustedXP": 3150, "mapName": "Graveyard",
        "monsters": [
            {"id": 1, "name": "Zombie", "cr": "1/4", "type": "Undead", "count": 10},
            {"id": 2, "name": "Ghoul", "cr": "1", "type": "Undead", "count": 3},
            {"id": 3, "name": "Wraith", "cr": "5", "type": "Undead", "count": 1},
        ],
    },
]

DEMO_LOCATIONS = [
    {
        "id": 1, "name": "Silverhold City", "type": "City",
        "description": "A bustling metropolis known for its silver mines and grand marketplace.",
        "image": "../assets/tokens/AeonTrinity.webp", "mapName": "Silverhold Map",
        "region": "Northern Territories", "tokenId": "loc-1", "discovered": True,
    },
    {
        "id": 2, "name": "Shadowfen Swamp", "type": "Wilderness",
        "description": "A dark and treacherous swamp. Legends speak of ancient ruins within.",
        "image": "../assets/tokens/Broken.png", "mapName": "Shadowfen",
        "region": "Eastern Marshlands", "tokenId": "loc-2", "discovered": True,
    },
    {
        "id": 3, "name": "The Azure Tower", "type": "Dungeon",
        "description": "A wizard's tower that glows with an eerie blue light.",
        "image": "../assets/tokens/Norca.webp", "mapName": "Azure Tower Interior",
        "region": "Arcane Wastes", "tokenId": "loc-3", "discovered": False,
    },
    {
        "id": 4, "name": "Tavern of the Dancing Dragon", "type": "Tavern",
        "description": "A popular inn where adventurers gather to share tales and seek work.",
        "image": "../assets/tokens/mother-maw-token.png", "mapName": "Tavern Interior",
        "region": "Silverhold City", "tokenId": "loc-4", "discovered": True,
    },
    {
        "id": 5, "name": "Dragonspire Mountain", "type": "Landmark",
        "description": "The highest peak in the region, rumored lair of an ancient dragon.",
        "image": "../assets/tokens/sub-aberrant-mutant.png", "mapName": "Mountain Peak",
        "region": "Northern Territories", "tokenId": "loc-5", "discovered": False,
    },
]


def demo_snapshot() -> CampaignSnapshot:
    return CampaignSnapshot.model_validate({
        "party": DEMO_PARTY,
        "encounters": DEMO_ENCOUNTERS,
        "locations": DEMO_LOCATIONS,
    })


def create_demo_data(campaign: CampaignData) -> bool:
    """Wipe the campaign catalogs in the current namespace and write demo data."""
    for name in CAMPAIGN_CATALOGS:
        campaign.store.delete_catalog(name)
    return campaign.save_all(demo_snapshot())
