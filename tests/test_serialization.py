"""Tests for JSON serialization of models and option mappings."""

from datetime import date, datetime

import pytest

from mvcmodel import DeserializationError, Model, SerializationError, deserialize, serialize


class Alarm(Model):
    DEFAULT_OPTIONS = {
        "time": "23:55",
        "type": 0,
        "days": [],
        "active": False,
        "name": "Home",
    }


class TestSerialize:
    """Test encoding."""

    @pytest.mark.unit
    def test_model_serialize(self, identity):
        alarm = Alarm({"name": "myAlarmName!"}, identity=identity)

        assert alarm.serialize() == (
            '{"time":"23:55","type":0,"days":[],"active":false,"name":"myAlarmName!"}'
        )

    @pytest.mark.unit
    def test_str_and_to_text(self, identity):
        alarm = Alarm(identity=identity)

        assert str(alarm) == alarm.serialize()
        assert alarm.to_text() == alarm.serialize()

    @pytest.mark.unit
    def test_output_is_deterministic(self, identity):
        first = Alarm({"days": ["mon", "fri"]}, identity=identity)
        second = Alarm({"days": ["mon", "fri"]}, identity=identity)

        assert first.serialize() == second.serialize()

    @pytest.mark.unit
    def test_indent(self):
        assert serialize({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    @pytest.mark.unit
    def test_callable_value_raises(self, identity):
        alarm = Alarm(identity=identity)
        alarm.set("callback", lambda: None)

        with pytest.raises(SerializationError) as exc_info:
            alarm.serialize()

        assert exc_info.value.model_name == f"Alarm #{alarm.id}"
        assert exc_info.value.__cause__ is not None

    @pytest.mark.unit
    def test_cyclic_value_raises(self):
        cyclic: dict = {}
        cyclic["self"] = cyclic

        with pytest.raises(SerializationError):
            serialize({"loop": cyclic})

    @pytest.mark.unit
    def test_arbitrary_object_raises(self):
        class Opaque:
            pass

        with pytest.raises(SerializationError):
            serialize({"thing": Opaque()})


    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [
            {1, 2},
            b"ab",
            datetime(2024, 1, 1),
            (1, 2),
            {"nested": [{"when": date(2024, 1, 1)}]},
        ],
    )
    def test_values_without_json_form_raise(self, value):
        """Values the encoder would convert are rejected, not substituted."""
        with pytest.raises(SerializationError):
            serialize({"v": value})

    @pytest.mark.unit
    def test_non_string_nested_key_raises(self):
        with pytest.raises(SerializationError, match="not a string"):
            serialize({"v": {1: "one"}})

    @pytest.mark.unit
    def test_error_names_offending_path(self):
        with pytest.raises(SerializationError) as exc_info:
            serialize({"settings": {"days": ["mon", {"tue"}]}})

        assert "$.settings.days[1]" in exc_info.value.reason

    @pytest.mark.unit
    def test_shared_references_are_not_cycles(self):
        days = ["mon"]

        assert serialize({"a": days, "b": days}) == '{"a":["mon"],"b":["mon"]}'

    @pytest.mark.unit
    def test_model_with_set_value_raises(self, identity):
        alarm = Alarm(identity=identity)
        alarm.set("days", {"mon", "tue"})

        with pytest.raises(SerializationError):
            alarm.serialize()


class TestDeserialize:
    """Test decoding and round-trips."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"time": "23:55", "active": True},
            {"count": 3, "ratio": 0.25, "missing": None},
            {"nested": {"list": [1, "two", False, None], "map": {"deep": {"x": -1}}}},
            {"unicode": "réveil ⏰", "empty": "", "zero": 0},
        ],
    )
    def test_round_trip(self, options):
        assert deserialize(serialize(options)) == options

    @pytest.mark.unit
    def test_model_round_trip(self, identity):
        alarm = Alarm({"days": ["sat"], "active": True}, identity=identity)
        alarm.set("extra", {"snooze": 5})

        assert deserialize(alarm.serialize()) == alarm.snapshot()

    @pytest.mark.unit
    def test_model_deserialize_builds_instance(self, identity):
        alarm = Alarm({"name": "Work"}, identity=identity)

        copy = Alarm.deserialize(alarm.serialize(), identity=identity)

        assert isinstance(copy, Alarm)
        assert copy.snapshot() == alarm.snapshot()
        assert copy.id != alarm.id

    @pytest.mark.unit
    def test_deserialize_replaces_nested_values(self, identity):
        class Player(Model):
            DEFAULT_OPTIONS = {"settings": {"shuffle": False, "repeat": "off"}}

        player = Player(identity=identity)
        player.set("settings", {"shuffle": True})

        restored = Player.deserialize(player.serialize(), identity=identity)

        assert restored.snapshot() == {"settings": {"shuffle": True}}

    @pytest.mark.unit
    def test_invalid_json_raises(self):
        with pytest.raises(DeserializationError) as exc_info:
            deserialize('{"time": ')

        assert exc_info.value.text == '{"time": '
        assert "Invalid JSON" in exc_info.value.parse_error

    @pytest.mark.unit
    def test_non_object_raises(self):
        with pytest.raises(DeserializationError, match="must be an object"):
            deserialize("[1, 2, 3]")

    @pytest.mark.unit
    def test_bytes_input(self):
        assert deserialize(b'{"a": true}') == {"a": True}
