"""Tests for message value objects and the post response model."""

import dataclasses

import pytest

from roombot.domain.models import PendingMessage, PostedMessage, PostMessageResponse, RoomIdentifier


class TestRoomIdentifier:
    def test_equal_by_value(self):
        a = RoomIdentifier(room_id=11, host="https://chat.stackoverflow.com")
        b = RoomIdentifier(room_id=11, host="https://chat.stackoverflow.com")
        assert a == b
        assert hash(a) == hash(b)

    def test_str(self, room):
        assert str(room) == "https://chat.stackoverflow.com#11"


class TestPendingMessage:
    def test_identical_text_is_not_equal(self, room):
        a = PendingMessage(room=room, text="hello")
        b = PendingMessage(room=room, text="hello")
        assert a != b
        assert a == a

    def test_immutable(self, room):
        msg = PendingMessage(room=room, text="hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.text = "changed"

    def test_created_at_is_set(self, room):
        assert PendingMessage(room=room, text="hi").created_at.tzinfo is not None


class TestPostedMessage:
    def test_fields(self, room):
        pending = PendingMessage(room=room, text="hello")
        posted = PostedMessage(room=room, message_id=42, time=1000, pending=pending)
        assert posted.message_id == 42
        assert posted.time == 1000
        assert posted.pending is pending
        assert posted.text == "hello"

    def test_equality_ignores_pending(self, room):
        a = PostedMessage(room=room, message_id=42, time=1000, pending=PendingMessage(room, "a"))
        b = PostedMessage(room=room, message_id=42, time=1000, pending=PendingMessage(room, "b"))
        assert a == b


class TestPostMessageResponse:
    def test_confirmed(self):
        r = PostMessageResponse.from_payload({"id": 42, "time": 1000})
        assert r.has_id is True
        assert r.is_confirmed is True
        assert (r.id, r.time) == (42, 1000)

    def test_null_ack_has_id_but_is_not_confirmed(self):
        r = PostMessageResponse.from_payload({"id": None, "time": None})
        assert r.has_id is True
        assert r.is_confirmed is False

    def test_missing_id_key(self):
        r = PostMessageResponse.from_payload({"foo": "bar"})
        assert r.has_id is False
        assert r.is_confirmed is False

    def test_id_without_time(self):
        r = PostMessageResponse.from_payload({"id": 42})
        assert r.has_id is True
        assert r.is_confirmed is False

    def test_extra_keys_kept(self):
        r = PostMessageResponse.from_payload({"id": 1, "time": 2, "foo": "bar"})
        assert r.is_confirmed is True

    @pytest.mark.parametrize("payload", [None, "ok", [1, 2], 42])
    def test_non_object_payload(self, payload):
        assert PostMessageResponse.from_payload(payload) is None

    def test_unparseable_id(self):
        assert PostMessageResponse.from_payload({"id": "not-a-number", "time": 1}) is None
