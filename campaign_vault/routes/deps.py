"""Request-scoped accessors for the objects create_app() put on app.state."""

from fastapi import Request

from campaign_vault.campaign import CampaignData
from campaign_vault.storage import CatalogStore


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def get_campaign(request: Request) -> CampaignData:
    return request.app.state.campaign
