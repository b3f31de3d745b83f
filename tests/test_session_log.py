import csv
import json

from dustvacuum.session_log import EVENT_HEADER, SESSION_HEADER, SessionLog, new_session_id
from dustvacuum.state import MISS, Event


def _rows(path):
    with open(path, newline="") as f:
        return list(csv.reader(f))


def test_headers_written_once(tmp_path):
    SessionLog(tmp_path / "logs")
    log = SessionLog(tmp_path / "logs")
    assert _rows(log.sessions_path) == [SESSION_HEADER]
    assert _rows(log.events_path) == [EVENT_HEADER]


def test_session_rows(tmp_path, make_state):
    log = SessionLog(tmp_path)
    state = make_state(lives=2)
    state.score, state.ticks, state.caught, state.missed, state.spawned = 3456, 456, 3, 3, 7

    log.write_session_start("s-1", {"width": 500})
    log.write_event("s-1", Event(MISS, {"x": 12.5, "lives_after": 2}))
    log.write_session_end("s-1", 7.5, state)

    sessions = _rows(log.sessions_path)[1:]
    assert len(sessions) == 2
    start, end = (dict(zip(SESSION_HEADER, row)) for row in sessions)
    assert start["session_id"] == "s-1"
    assert json.loads(start["config_json"]) == {"width": 500}
    assert start["ts_end"] == ""
    assert end["final_score"] == "3456"
    assert end["lives_remaining"] == "2"
    assert end["dust_caught"] == "3"
    assert end["duration_sec"] == "7.50"
    assert end["final_spawn_prob"] == "0.3000"

    (event,) = _rows(log.events_path)[1:]
    ts, session_id, kind, detail = event
    assert ts.endswith("Z")
    assert (session_id, kind) == ("s-1", "miss")
    assert json.loads(detail) == {"x": 12.5, "lives_after": 2}


def test_session_ids_differ():
    assert new_session_id() != new_session_id()
