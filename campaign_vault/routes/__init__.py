"""FastAPI API endpoints under /api.

Endpoint groups: health, catalogs (whole-catalog CRUD, backup, merge, find,
nested objects under /api/catalogs/{name}/objects/{key}), and campaign data
(party, encounters, locations). The namespace for a request comes from the
X-Vault-Namespace header when the store uses a ContextNamespace.
"""

from fastapi import APIRouter

from .campaign import router as campaign_router
from .catalogs import router as catalogs_router

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


router.include_router(catalogs_router)
router.include_router(campaign_router)
