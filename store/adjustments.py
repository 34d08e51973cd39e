from __future__ import annotations

import json
import logging
from typing import List

from engine.adjustments import AdjustmentRegistry, ManualAdjustment
from store.client import KeyValueStore
from config import ADJUSTMENTS_TTL
from store import keys

log = logging.getLogger(__name__)


def _to_json(registry: AdjustmentRegistry) -> str:
    return json.dumps([
        {
            "date": a.date,
            "original_value": a.original_value,
            "adjusted_value": a.adjusted_value,
            "reason": a.reason,
        }
        for a in registry.list_all()
    ])


def _from_json(data: str) -> List[ManualAdjustment]:
    return [
        ManualAdjustment(
            date=d["date"],
            original_value=float(d["original_value"]),
            adjusted_value=float(d["adjusted_value"]),
            reason=d.get("reason", ""),
        )
        for d in json.loads(data)
    ]


async def load(store: KeyValueStore, property_id: str) -> AdjustmentRegistry:
    registry = AdjustmentRegistry()
    try:
        raw = await store.get(keys.adjustments(property_id))
        if raw:
            registry.add_many(_from_json(raw))
    except Exception as exc:
        log.debug("Adjustments load failed %s: %s", property_id, exc)
    return registry


async def save(store: KeyValueStore, property_id: str, registry: AdjustmentRegistry) -> bool:
    try:
        return await store.set(keys.adjustments(property_id), _to_json(registry), ttl=ADJUSTMENTS_TTL)
    except Exception as exc:
        log.debug("Adjustments save failed %s: %s", property_id, exc)
        return False


async def upsert(store: KeyValueStore, property_id: str, adjustment: ManualAdjustment) -> AdjustmentRegistry:
    registry = await load(store, property_id)
    registry.add(adjustment)
    await save(store, property_id, registry)
    return registry


async def remove(store: KeyValueStore, property_id: str, date: str) -> AdjustmentRegistry:
    registry = await load(store, property_id)
    registry.remove(date)
    await save(store, property_id, registry)
    return registry
