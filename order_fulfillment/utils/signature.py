# order_fulfillment/utils/signature.py
import hashlib
from typing import Iterable


def generate_item_signature(items: Iterable[tuple[int, int, int]]) -> str:
    """Order-independent hash of ``(item_id, ordered, fulfilled)`` triples."""
    normalized = sorted(f"{iid}:{ordered}:{fulfilled}" for iid, ordered, fulfilled in items)
    return hashlib.sha256("|".join(normalized).encode()).hexdigest()
