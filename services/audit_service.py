"""
Audit trail logging.
Every mutation (and every denied attempt) is appended to an in-memory,
append-only activity log owned by the session workspace.
"""

import os
import hashlib
import logging
import threading
from datetime import datetime, timezone

from config.constants import CRITICAL_ACTIONS, AUDIT_LOG_LIMIT

logger = logging.getLogger("AssetTracker")


def generate_audit_id() -> str:
    """Generate a unique, immutable audit ID for each log entry."""
    timestamp = datetime.now().isoformat()
    random_part = os.urandom(8).hex()
    raw = f"{timestamp}-{random_part}"
    return f"AUD-{hashlib.sha256(raw.encode()).hexdigest()[:12].upper()}"


class AuditTrail:
    """Append-only activity log, capped at AUDIT_LOG_LIMIT entries."""

    def __init__(self, limit: int = AUDIT_LOG_LIMIT):
        self.limit = limit
        self.session_id = f"SES-{os.urandom(6).hex().upper()}"
        self._entries = []
        self._lock = threading.Lock()

    def log_activity_event(
        self,
        action_type: str,
        category: str,
        user_role: str,
        description: str,
        entity_id: str = None,
        entity_label: str = None,
        old_value: str = None,
        new_value: str = None,
        success: bool = True,
        error_message: str = None,
    ) -> dict:
        """Record one activity and return the stored entry."""
        action_config = CRITICAL_ACTIONS.get(action_type, {"severity": "low"})
        timestamp = datetime.now()

        log_entry = {
            "audit_id": generate_audit_id(),
            "timestamp": timestamp.isoformat(),
            "timestamp_utc": datetime.now(timezone.utc).isoformat(),
            "action_type": action_type,
            "category": category,
            "description": description,
            "performed_by": user_role or "system",
            "session_id": self.session_id,
            "entity_id": entity_id,
            "entity_label": entity_label,
            "old_value": old_value,
            "new_value": new_value,
            "severity": action_config["severity"],
            "is_critical": action_config["severity"] in ("high", "critical"),
            "success": success,
            "error_message": error_message,
        }

        with self._lock:
            self._entries.append(log_entry)
            if len(self._entries) > self.limit:
                self._trim()

        if success:
            logger.info(f"AUDIT {action_type} | {description} | by={log_entry['performed_by']}")
        else:
            logger.warning(f"AUDIT {action_type} FAILED | {description} | {error_message or ''}")
        return log_entry

    def _trim(self):
        # Keep every critical entry plus the most recent ones
        recent = self._entries[-(self.limit * 3 // 5):]
        seen = set()
        merged = []
        for entry in [e for e in self._entries if e["is_critical"]] + recent:
            if entry["audit_id"] not in seen:
                seen.add(entry["audit_id"])
                merged.append(entry)
        merged.sort(key=lambda e: e["timestamp"])
        self._entries = merged[-self.limit:]

    def entries(self, category: str = None) -> list:
        """Newest first."""
        with self._lock:
            items = list(self._entries)
        if category:
            items = [e for e in items if e["category"] == category]
        return list(reversed(items))

    def get_audit_summary(self) -> dict:
        with self._lock:
            log = list(self._entries)
        by_action = {}
        for entry in log:
            by_action[entry["action_type"]] = by_action.get(entry["action_type"], 0) + 1
        return {
            "total": len(log),
            "critical": len([e for e in log if e["is_critical"]]),
            "failed": len([e for e in log if not e["success"]]),
            "by_action": by_action,
        }
