"""Tests for the error hierarchy."""

from minidux import ConfigurationError, InvalidActionError, MiniduxError, ReentrancyError


class TestErrors:
    def test_hierarchy(self):
        for cls in (ConfigurationError, InvalidActionError, ReentrancyError):
            assert issubclass(cls, MiniduxError)

    def test_to_dict(self):
        err = ConfigurationError("bad reducer", component="Store", config_key="reducer")
        assert err.to_dict() == {
            "type": "ConfigurationError",
            "message": "bad reducer",
            "details": {"component": "Store", "config_key": "reducer"},
        }

    def test_str_includes_details(self):
        err = ReentrancyError("nope", operation="dispatch")
        assert str(err) == "nope (operation='dispatch')"
        assert str(MiniduxError("plain")) == "plain"

    def test_invalid_action_keeps_action(self):
        err = InvalidActionError("missing type", action={})
        assert err.action == {}
