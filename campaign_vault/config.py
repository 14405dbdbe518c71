"""Service settings read from the environment (and an optional .env file).

    DATA_DIR                 FileBackend root (default: ./data)
    VAULT_BACKEND            "file" or "memory" (default: file)
    VAULT_NAMESPACE          Namespace used when a caller binds none
    VAULT_MAX_CATALOG_BYTES  Serialized catalog size bound (default: 10 MiB)
    VAULT_WEBHOOK_URL        When set, diagnostics are also POSTed here
    HOST / PORT              HTTP bind address
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from campaign_vault.storage import MAX_CATALOG_BYTES

ROOT = Path(__file__).parent.parent
DEFAULT_DATA_DIR = ROOT / "data"
DEFAULT_NAMESPACE = "campaign-vault"


class Settings(BaseModel):
    data_dir: Path = DEFAULT_DATA_DIR
    backend: Literal["file", "memory"] = "file"
    namespace: str = DEFAULT_NAMESPACE
    max_catalog_bytes: int = Field(default=MAX_CATALOG_BYTES, gt=0)
    webhook_url: str = ""
    host: str = "0.0.0.0"
    port: int = 13013


def load_settings(env_file: Path | None = None) -> Settings:
    """Load .env (without overriding real env vars) and build Settings."""
    load_dotenv(env_file or ROOT / ".env")
    return Settings(
        data_dir=Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR))),
        backend=os.getenv("VAULT_BACKEND", "file"),
        namespace=os.getenv("VAULT_NAMESPACE", DEFAULT_NAMESPACE),
        max_catalog_bytes=os.getenv("VAULT_MAX_CATALOG_BYTES", str(MAX_CATALOG_BYTES)),
        webhook_url=os.getenv("VAULT_WEBHOOK_URL", ""),
        host=os.getenv("HOST", "0.0.0.0"),
        port=os.getenv("PORT", "13013"),
    )
