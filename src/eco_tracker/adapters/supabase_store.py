"""Supabase-backed key-value store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from eco_tracker.errors import PersistenceError
from eco_tracker.services.aggregator import KeyValueStore


@dataclass
class SupabaseStore(KeyValueStore):
    """Supabase implementation storing one JSON payload per user and key."""

    client: Client
    user_id: str
    table: str = "eco_tracker_store"

    def get(self, key: str) -> object | None:
        """Return the stored payload for key, if present."""
        try:
            response = (
                self.client.table(self.table)
                .select("payload")
                .eq("user_id", self.user_id)
                .eq("key", key)
                .limit(1)
                .execute()
            )
        except Exception as exc:
            raise PersistenceError(f"Failed to read {key} from Supabase") from exc
        if not response.data:
            return None
        return response.data[0].get("payload")

    def set(self, key: str, value: object) -> None:
        """Insert or replace the payload for key."""
        try:
            self.client.table(self.table).upsert(
                {
                    "user_id": self.user_id,
                    "key": key,
                    "payload": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id,key",
            ).execute()
        except Exception as exc:
            raise PersistenceError(f"Failed to write {key} to Supabase") from exc
