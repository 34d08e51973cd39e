from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List

from engine.forecast.seasonality import BookingObservation
from store.client import KeyValueStore
from config import RESERVATIONS_TTL
from store import keys

log = logging.getLogger(__name__)


async def load(store: KeyValueStore, property_id: str) -> List[Dict[str, Any]]:
    try:
        raw = await store.get(keys.reservations(property_id))
        if raw:
            data = json.loads(raw)
            if isinstance(data, list):
                return [r for r in data if isinstance(r, dict)]
            log.debug("Reservations for %s are not a list, ignoring", property_id)
    except Exception as exc:
        log.debug("Reservations load failed %s: %s", property_id, exc)
    return []


async def save(store: KeyValueStore, property_id: str, records: Iterable[Dict[str, Any]]) -> bool:
    try:
        return await store.set(
            keys.reservations(property_id),
            json.dumps(list(records), default=str),
            ttl=RESERVATIONS_TTL or None,
        )
    except Exception as exc:
        log.debug("Reservations save failed %s: %s", property_id, exc)
        return False


async def append(store: KeyValueStore, property_id: str, record: Dict[str, Any]) -> bool:
    existing = await load(store, property_id)
    existing.append(dict(record))
    return await save(store, property_id, existing)


async def clear(store: KeyValueStore, property_id: str) -> None:
    try:
        await store.delete(keys.reservations(property_id))
    except Exception as exc:
        log.debug("Reservations clear failed %s: %s", property_id, exc)


async def load_observations(store: KeyValueStore, property_id: str) -> List[BookingObservation]:
    return [BookingObservation.from_record(r) for r in await load(store, property_id)]
