from pointsdispatch.config import Configuration, coerce_to_bool
from pointsdispatch.schema import DISPATCHER_CONFIG_SCHEMA
from pointsdispatch.validation import ConfigField, ConfigItems, ConfigValidator, _find_similar_key, format_config_error


def test_config_access(test_logger):
    conf = Configuration({"a": 1, "b": "test"}, logger=test_logger)
    assert conf["a"] == 1
    assert conf.get("b") == "test"
    assert conf.get("c", 3) == 3


def test_get_bool(test_logger):
    conf = Configuration(
        {"t1": True, "t2": "yes", "t3": "on", "f1": False, "f2": "no", "f3": "disabled", "invalid": "foo", "empty": ""},
        logger=test_logger,
    )
    assert conf.get_bool("t1") is True
    assert conf.get_bool("t2") is True
    assert conf.get_bool("t3") is True
    assert conf.get_bool("f1") is False
    assert conf.get_bool("f2") is False
    assert conf.get_bool("f3") is False
    # Non-empty unrecognized strings are truthy
    assert conf.get_bool("invalid") is True
    assert conf.get_bool("empty") is False
    assert conf.get_bool("missing", default=True) is True


def test_coerce_to_bool():
    assert coerce_to_bool(None, default=True) is True
    assert coerce_to_bool(" OFF ") is False
    assert coerce_to_bool(1) is True


def test_get_int(test_logger):
    conf = Configuration({"a": 1, "b": "2", "c": "invalid"}, logger=test_logger)
    assert conf.get_int("a") == 1
    assert conf.get_int("b") == 2
    assert conf.get_int("c", default=10) == 10
    test_logger.warning.assert_called_once()
    assert conf.get_int("missing", default=5) == 5


def test_get_list(test_logger):
    conf = Configuration({"many": ["a", "b"], "one": "a"}, logger=test_logger)
    assert conf.get_list("many") == ["a", "b"]
    assert conf.get_list("one") == ["a"]
    assert conf.get_list("missing") == []


def test_schema_defaults(test_logger):
    conf = Configuration({"root_command": "pp"}, logger=test_logger, schema=DISPATCHER_CONFIG_SCHEMA)
    assert conf.get_str("root_command") == "pp"
    assert conf.get_list("extensions") == []
    assert conf.get_bool("strict_errors") is False
    assert conf.has_explicit("root_command")
    assert not conf.has_explicit("extensions")
    # no schema default: falls back to the caller's default
    assert conf.get_bool("colored_messages", True) is True


def test_validator_accepts_defaults(test_logger):
    assert ConfigValidator({}, "pointsdispatch", test_logger).validate(DISPATCHER_CONFIG_SCHEMA) == []


def test_validator_type_errors(test_logger):
    config = {"root_command": 12, "extensions": "economy", "disabled_commands": ["give", 3], "strict_errors": "maybe"}
    errors = ConfigValidator(config, "pointsdispatch", test_logger).validate(DISPATCHER_CONFIG_SCHEMA)
    assert len(errors) == 4
    assert any("'root_command': Expected str, got int" in e for e in errors)
    assert any("'extensions': Expected list[str], got str" in e for e in errors)
    assert any("Item #1 should be str, got int" in e for e in errors)
    assert any("'strict_errors': Expected bool" in e for e in errors)


def test_validator_custom_validator(test_logger):
    errors = ConfigValidator({"root_command": "two words"}, "pointsdispatch", test_logger).validate(DISPATCHER_CONFIG_SCHEMA)
    assert errors == ["[pointsdispatch] Config error for 'root_command': must be a single word"]


def test_validator_required_and_choices(test_logger):
    schema = ConfigItems(
        ConfigField("storage", str, required=True),
        ConfigField("mode", str, choices=["sqlite", "mysql"]),
    )
    errors = ConfigValidator({"mode": "csv"}, "storage", test_logger).validate(schema)
    assert errors[0] == "[storage] Config error for 'storage': Missing required field"
    assert "Valid options: 'sqlite', 'mysql'" in errors[1]


def test_unknown_keys(test_logger):
    validator = ConfigValidator({"extension": [], "foo": 1}, "pointsdispatch", test_logger)
    warnings = validator.warn_unknown_keys(DISPATCHER_CONFIG_SCHEMA)
    assert warnings == [
        "[pointsdispatch] Unknown option 'extension' (did you mean 'extensions'?)",
        "[pointsdispatch] Unknown option 'foo' - will be ignored",
    ]
    assert test_logger.warning.call_count == 2


def test_find_similar_key():
    assert _find_similar_key("root_comand", ["root_command", "extensions"]) == "root_command"
    assert _find_similar_key("zzz", ["root_command"]) is None


def test_format_config_error():
    assert format_config_error("s", "f", "bad") == "[s] Config error for 'f': bad"
    assert format_config_error("s", "f", "bad", "fix it") == "[s] Config error for 'f': bad -> fix it"


def test_config_items_lookup():
    schema = ConfigItems(ConfigField("a"), ConfigField("b", int))
    assert schema.get("b").field_type is int
    assert schema.get("c") is None
