"""Party, encounter and location endpoints for the manager panels."""

from fastapi import APIRouter, Depends, HTTPException

from campaign_vault.campaign import (
    LOCATION_CATALOG,
    PARTY_CATALOG,
    CampaignData,
    InvalidRecordError,
)
from campaign_vault.models import CampaignSnapshot, Encounter, Location, PartyMember

from .deps import get_campaign
from .models import UpdateHitPoints, UpdateLocation

router = APIRouter()


def _check_updated(
    ok: bool, campaign: CampaignData, catalog_name: str, record_id: int, label: str
) -> None:
    if ok:
        return
    if not campaign.store.has_object(catalog_name, str(record_id)):
        raise HTTPException(404, f"{label} not found")
    raise HTTPException(400, f"Could not update {label.lower()} {record_id}")


@router.get("/campaign")
async def get_campaign_snapshot(campaign: CampaignData = Depends(get_campaign)):
    """Get party, encounters and locations in one response."""
    return campaign.load_all().to_json()


@router.put("/campaign")
async def save_campaign_snapshot(
    body: CampaignSnapshot, campaign: CampaignData = Depends(get_campaign)
):
    """Replace all three collections."""
    if not campaign.save_all(body):
        raise HTTPException(400, "Could not save campaign")
    return campaign.load_all().to_json()


@router.post("/campaign/backup")
async def backup_campaign(campaign: CampaignData = Depends(get_campaign)):
    """Snapshot every campaign catalog to <name>_backup."""
    if not campaign.backup():
        raise HTTPException(400, "Could not back up campaign")
    return {"ok": True}


@router.get("/party")
async def get_party(campaign: CampaignData = Depends(get_campaign)):
    return [m.to_json() for m in campaign.load_party()]


@router.put("/party")
async def save_party(body: list[PartyMember], campaign: CampaignData = Depends(get_campaign)):
    if not campaign.save_party(body):
        raise HTTPException(400, "Could not save party")
    return [m.to_json() for m in campaign.load_party()]


@router.patch("/party/{member_id}/hp")
async def update_member_hp(
    member_id: int, body: UpdateHitPoints, campaign: CampaignData = Depends(get_campaign)
):
    """Heal/damage by `amount`, or set `current` (and optionally `max`)."""
    try:
        if body.amount is not None:
            ok = campaign.adjust_member_hp(member_id, body.amount)
        else:
            ok = campaign.set_member_hp(member_id, body.current, body.max)
    except InvalidRecordError as e:
        raise HTTPException(409, str(e))
    _check_updated(ok, campaign, PARTY_CATALOG, member_id, "Party member")
    return campaign.store.get_object(PARTY_CATALOG, str(member_id))


@router.get("/encounters")
async def get_encounters(campaign: CampaignData = Depends(get_campaign)):
    return [e.to_json() for e in campaign.load_encounters()]


@router.put("/encounters")
async def save_encounters(body: list[Encounter], campaign: CampaignData = Depends(get_campaign)):
    if not campaign.save_encounters(body):
        raise HTTPException(400, "Could not save encounters")
    return [e.to_json() for e in campaign.load_encounters()]


@router.get("/locations")
async def get_locations(campaign: CampaignData = Depends(get_campaign)):
    return [loc.to_json() for loc in campaign.load_locations()]


@router.put("/locations")
async def save_locations(body: list[Location], campaign: CampaignData = Depends(get_campaign)):
    if not campaign.save_locations(body):
        raise HTTPException(400, "Could not save locations")
    return [loc.to_json() for loc in campaign.load_locations()]


@router.patch("/locations/{location_id}")
async def update_location(
    location_id: int, body: UpdateLocation, campaign: CampaignData = Depends(get_campaign)
):
    try:
        ok = campaign.set_location_discovered(location_id, body.discovered)
    except InvalidRecordError as e:
        raise HTTPException(409, str(e))
    _check_updated(ok, campaign, LOCATION_CATALOG, location_id, "Location")
    return campaign.store.get_object(LOCATION_CATALOG, str(location_id))
