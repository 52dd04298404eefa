"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

import json

import pytest
from cryptography.fernet import Fernet

from persistence.session_store import SessionStore, is_session_id, new_session_id

USER = {"id": "u1", "email": "coach@example.com", "role": {"name": "TRAINER"}}


@pytest.fixture
def sid():
    return new_session_id()


def test_round_trip_without_key(tmp_path, sid):
    store = SessionStore(tmp_path)
    store.save(sid, "tok-1", USER)
    raw = json.loads((tmp_path / f"{sid}.json").read_text())
    assert raw["token"] == "tok-1"
    assert raw["encrypted"] is False
    assert store.load(sid) == ("tok-1", USER)


def test_sessions_are_kept_apart(tmp_path):
    store = SessionStore(tmp_path)
    alice, bob = new_session_id(), new_session_id()
    store.save(alice, "tok-alice", USER)
    assert store.load(bob) is None
    store.save(bob, "tok-bob", {**USER, "id": "u2"})
    store.clear(bob)
    assert store.load(alice) == ("tok-alice", USER)


@pytest.mark.parametrize("bad", [None, "", "short", "../../etc/passwd" + "a" * 40, "a" * 31])
def test_foreign_ids_are_ignored(tmp_path, bad):
    store = SessionStore(tmp_path)
    assert not is_session_id(bad)
    assert store.load(bad) is None
    store.clear(bad)
    with pytest.raises(ValueError):
        store.save(bad, "tok", USER)


def test_token_encrypted_at_rest(tmp_path, sid):
    key = Fernet.generate_key().decode()
    SessionStore(tmp_path, key).save(sid, "tok-secret", USER)
    raw = json.loads((tmp_path / f"{sid}.json").read_text())
    assert raw["encrypted"] is True
    assert raw["token"] != "tok-secret"
    assert SessionStore(tmp_path, key).load(sid) == ("tok-secret", USER)


def test_encrypted_file_without_key_is_discarded(tmp_path, sid):
    SessionStore(tmp_path, Fernet.generate_key().decode()).save(sid, "tok", USER)
    assert SessionStore(tmp_path).load(sid) is None
    assert not (tmp_path / f"{sid}.json").exists()


def test_wrong_key_is_discarded(tmp_path, sid):
    SessionStore(tmp_path, Fernet.generate_key().decode()).save(sid, "tok", USER)
    assert SessionStore(tmp_path, Fernet.generate_key().decode()).load(sid) is None


def test_corrupt_file_is_discarded(tmp_path, sid):
    path = tmp_path / f"{sid}.json"
    path.write_text("{not json")
    assert SessionStore(tmp_path).load(sid) is None
    assert not path.exists()


def test_update_user_keeps_token(tmp_path, sid):
    store = SessionStore(tmp_path)
    store.save(sid, "tok", USER)
    store.update_user(sid, {**USER, "name": "Coach"})
    token, user = store.load(sid)
    assert token == "tok"
    assert user["name"] == "Coach"


def test_clear_is_idempotent(tmp_path, sid):
    store = SessionStore(tmp_path)
    store.clear(sid)
    store.save(sid, "tok", USER)
    store.clear(sid)
    assert store.load(sid) is None
