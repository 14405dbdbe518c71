from fastapi import FastAPI, Request

from campaign_vault.bootstrap import create_store
from campaign_vault.campaign import CampaignData
from campaign_vault.config import Settings, load_settings
from campaign_vault.routes import router
from campaign_vault.storage import CatalogStore, ContextNamespace

NAMESPACE_HEADER = "X-Vault-Namespace"


def create_app(settings: Settings | None = None, store: CatalogStore | None = None) -> FastAPI:
    resolved = settings or load_settings()
    if store is None:
        store = create_store(resolved)

    app = FastAPI(title="Campaign Vault")
    app.state.settings = resolved
    app.state.store = store
    app.state.campaign = CampaignData(store)
    app.include_router(router, prefix="/api")

    resolver = store.namespace
    if isinstance(resolver, ContextNamespace):
        # Requests may pick their namespace; everything else gets the default
        @app.middleware("http")
        async def bind_namespace(request: Request, call_next):
            namespace = request.headers.get(NAMESPACE_HEADER)
            if not namespace:
                return await call_next(request)
            with resolver.bind(namespace):
                return await call_next(request)

    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
