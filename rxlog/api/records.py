"""
In-memory store of prescription records held between API calls.
"""

import uuid
from datetime import datetime
from functools import wraps
from typing import Any, Dict

from flask import jsonify

from rxlog.config import RECORD_EXPIRY_HOURS
from rxlog.models import Prescription

# Structure: {token: {"record": Prescription, "created_at": datetime, "last_activity": datetime}}
records: Dict[str, Dict[str, Any]] = {}


def store_record(record: Prescription) -> str:
    """Keep *record* so later remark submissions reach the same instance."""
    token = uuid.uuid4().hex
    now = datetime.utcnow()
    records[token] = {"record": record, "created_at": now, "last_activity": now}
    return token


def record_required(f):
    """Decorator that resolves the ``token`` URL segment to a stored record."""
    @wraps(f)
    def decorated(token, *args, **kwargs):
        cleanup_expired_records()
        entry = records.get(token)
        if entry is None:
            return jsonify({"error": "Prescription record not found"}), 404
        entry["last_activity"] = datetime.utcnow()
        return f(token, entry, *args, **kwargs)

    return decorated


def cleanup_expired_records():
    """Remove records that have been idle beyond RECORD_EXPIRY_HOURS."""
    now = datetime.utcnow()
    expired = [
        tok for tok, data in records.items()
        if (now - data["last_activity"]).total_seconds() > RECORD_EXPIRY_HOURS * 3600
    ]
    for tok in expired:
        del records[tok]
    if expired:
        print(f"[cleanup] Removed {len(expired)} expired records")
    return len(expired)
