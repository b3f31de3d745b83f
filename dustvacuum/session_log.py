"""csv telemetry: one row per session start/end and one row per game event."""

import csv
import json
import logging
import os
import uuid
from datetime import datetime, timezone

from .config import LOG_DIR

logger = logging.getLogger(__name__)

SESSION_HEADER = [
    "ts_start", "ts_end", "session_id", "config_json", "duration_sec", "ticks",
    "final_score", "lives_remaining", "dust_spawned", "dust_caught", "dust_missed",
    "final_spawn_prob",
]
EVENT_HEADER = ["ts", "session_id", "type", "detail_json"]


def iso_now():
    """utc iso timestamp with ms precision and 'z' suffix."""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def new_session_id():
    return datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S") + "-" + uuid.uuid4().hex[:6]


class SessionLog:
    """append-only csv writer for two streams: sessions and events."""

    def __init__(self, base_dir=LOG_DIR):
        self.base_dir = base_dir
        self.sessions_path = os.path.join(base_dir, "sessions.csv")
        self.events_path = os.path.join(base_dir, "events.csv")
        os.makedirs(base_dir, exist_ok=True)
        self._ensure_header(self.sessions_path, SESSION_HEADER)
        self._ensure_header(self.events_path, EVENT_HEADER)

    @staticmethod
    def _ensure_header(path, header):
        if not os.path.exists(path):
            with open(path, "w", newline="") as f:
                csv.writer(f).writerow(header)

    def _append(self, path, row):
        with open(path, "a", newline="") as f:
            csv.writer(f).writerow(row)

    def write_session_start(self, session_id, config):
        # the end row is written separately, to avoid updating in place
        self._append(self.sessions_path, [
            iso_now(), "", session_id, json.dumps(config, sort_keys=True),
            "", "", "", "", "", "", "", "",
        ])
        logger.info("session %s started", session_id)

    def write_session_end(self, session_id, duration_sec, state):
        self._append(self.sessions_path, [
            "", iso_now(), session_id, "{}", f"{duration_sec:.2f}", state.ticks,
            state.score, state.lives, state.spawned, state.caught, state.missed,
            f"{state.spawn_prob:.4f}",
        ])
        logger.info("session %s ended: score %d, %d lives left",
                    session_id, state.score, state.lives)

    def write_event(self, session_id, event):
        self._append(self.events_path, [iso_now(), session_id, event.kind, json.dumps(event.detail)])
