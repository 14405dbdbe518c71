"""Campaign data facade used by the manager panels.

Each collection lives in its own catalog, one object per record keyed by the
record id:

    party       {"1": PartyMember, "2": PartyMember, ...}
    encounters  {"1": Encounter, ...}
    locations   {"1": Location, ...}

Loads return records in stored order and skip entries that no longer validate.
Saves replace the whole catalog. Loads and saves return plain values or bools,
inheriting the store's never-raise contract. The single-record edits return
False for an unknown id and raise InvalidRecordError when the stored record
exists but is not a mapping they can edit.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from campaign_vault.models import (
    CampaignRecord,
    CampaignSnapshot,
    Encounter,
    Location,
    PartyMember,
)
from campaign_vault.storage import CatalogStore

logger = logging.getLogger(__name__)

PARTY_CATALOG = "party"
ENCOUNTER_CATALOG = "encounters"
LOCATION_CATALOG = "locations"
CAMPAIGN_CATALOGS = (PARTY_CATALOG, ENCOUNTER_CATALOG, LOCATION_CATALOG)

R = TypeVar("R", bound=CampaignRecord)

_MISSING = object()


class InvalidRecordError(ValueError):
    """A stored record exists but cannot be edited as a mapping."""


class CampaignData:
    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    @property
    def store(self) -> CatalogStore:
        return self._store

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _load(self, catalog_name: str, model: type[R]) -> list[R]:
        records: list[R] = []
        for value in self._store.get_object_values(catalog_name):
            try:
                records.append(model.model_validate(value))
            except ValidationError as e:
                logger.warning("Skipping invalid %s record: %s", catalog_name, e)
        return records

    def _save(self, catalog_name: str, records: list[Any]) -> bool:
        catalog = {str(record.id): record.to_json() for record in records}
        return self._store.set_catalog(catalog_name, catalog)

    def _editable_key(self, catalog_name: str, record_id: int, *nested: str) -> str | None:
        """Key of an existing mapping record, or None when the id is unknown.

        Raises InvalidRecordError if the record, or any of the `nested` fields
        it already has, is not a mapping.
        """
        key = str(record_id)
        value = self._store.get_object(catalog_name, key, _MISSING)
        if value is _MISSING:
            return None
        if not isinstance(value, dict):
            raise InvalidRecordError(
                f"{catalog_name} record {key!r} is a {type(value).__name__}, not a mapping"
            )
        for field in nested:
            if field in value and not isinstance(value[field], dict):
                raise InvalidRecordError(
                    f"{catalog_name} record {key!r} has a non-mapping {field!r} field"
                )
        return key

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def load_party(self) -> list[PartyMember]:
        return self._load(PARTY_CATALOG, PartyMember)

    def save_party(self, party: list[PartyMember]) -> bool:
        return self._save(PARTY_CATALOG, party)

    def load_encounters(self) -> list[Encounter]:
        return self._load(ENCOUNTER_CATALOG, Encounter)

    def save_encounters(self, encounters: list[Encounter]) -> bool:
        return self._save(ENCOUNTER_CATALOG, encounters)

    def load_locations(self) -> list[Location]:
        return self._load(LOCATION_CATALOG, Location)

    def save_locations(self, locations: list[Location]) -> bool:
        return self._save(LOCATION_CATALOG, locations)

    def load_all(self) -> CampaignSnapshot:
        return CampaignSnapshot(
            party=self.load_party(),
            encounters=self.load_encounters(),
            locations=self.load_locations(),
        )

    def save_all(self, snapshot: CampaignSnapshot) -> bool:
        """Save all three collections. Each is its own write; all are attempted."""
        results = [
            self.save_party(snapshot.party),
            self.save_encounters(snapshot.encounters),
            self.save_locations(snapshot.locations),
        ]
        return all(results)

    # ------------------------------------------------------------------
    # Party
    # ------------------------------------------------------------------

    def adjust_member_hp(self, member_id: int, amount: int) -> bool:
        """Heal (amount > 0) up to max HP or damage (amount < 0) down to 0."""
        key = self._editable_key(PARTY_CATALOG, member_id, "hp")
        if key is None:
            return False

        def apply(value: dict, _key: str) -> dict:
            hp = value.setdefault("hp", {"current": 0, "max": 0})
            current = hp.get("current", 0) + amount
            hp["current"] = max(0, min(current, hp.get("max", 0)))
            return value

        return self._store.update_objects(
            PARTY_CATALOG, apply, lambda _value, k: k == key
        )

    def set_member_hp(self, member_id: int, current: int, maximum: int | None = None) -> bool:
        """Set HP directly; current is clamped to [0, max]."""
        key = self._editable_key(PARTY_CATALOG, member_id, "hp")
        if key is None:
            return False

        def apply(value: dict, _key: str) -> dict:
            hp = value.setdefault("hp", {"current": 0, "max": 0})
            if maximum is not None:
                hp["max"] = max(0, maximum)
            hp["current"] = max(0, min(current, hp.get("max", 0)))
            return value

        return self._store.update_objects(
            PARTY_CATALOG, apply, lambda _value, k: k == key
        )

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------

    def set_location_discovered(self, location_id: int, discovered: bool = True) -> bool:
        key = self._editable_key(LOCATION_CATALOG, location_id)
        if key is None:
            return False

        def apply(value: dict, _key: str) -> dict:
            value["discovered"] = discovered
            return value

        return self._store.update_objects(
            LOCATION_CATALOG, apply, lambda _value, k: k == key
        )

    # ------------------------------------------------------------------
    # Backup
    # ------------------------------------------------------------------

    def backup(self, suffix: str = "_backup") -> bool:
        """Snapshot every campaign catalog to `<name><suffix>`."""
        results = [
            self._store.backup_catalog(name, f"{name}{suffix}")
            for name in CAMPAIGN_CATALOGS
        ]
        return all(results)
