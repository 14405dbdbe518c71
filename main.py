"""Campaign Vault — dev launcher. Starts the HTTP API (or the MCP server)."""

import argparse
import logging
from pathlib import Path

import uvicorn

from campaign_vault.config import load_settings

ROOT = Path(__file__).parent


def main():
    parser = argparse.ArgumentParser(description="Campaign Vault dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Catalog storage directory (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Reset the campaign catalogs to demo data before starting")
    parser.add_argument("--mcp", action="store_true",
                        help="Run the MCP tool server on stdio instead of the HTTP API")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(ROOT / ".env")
    if args.data_dir:
        settings = settings.model_copy(update={"data_dir": args.data_dir.resolve()})

    from campaign_vault.bootstrap import create_store
    store = create_store(settings)

    if args.demo:
        from campaign_vault.campaign import CampaignData
        from campaign_vault.demo import create_demo_data
        create_demo_data(CampaignData(store))

    if args.mcp:
        from campaign_vault.mcp_server import build_server
        build_server(store).run()
        return

    from campaign_vault.app import create_app
    print(f"Starting API on http://localhost:{settings.port} ...")
    uvicorn.run(create_app(settings, store), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
