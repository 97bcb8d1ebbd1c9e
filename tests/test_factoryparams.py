import pytest

from loghier.factoryparams import ConfigurationError, FactoryParams, ParameterValidator


def make_params():
    params = FactoryParams()
    params["name"] = "main"
    params["facility"] = "8"
    return params


def test_get_for_returns_validator_bound_to_params():
    params = make_params()
    validator = params.get_for("syslog appender")
    assert isinstance(validator, ParameterValidator)
    assert validator.tag == "syslog appender"
    assert validator.params is params


def test_required_returns_value():
    assert make_params().get_for("x").required("name") == "main"


def test_required_with_conversion():
    assert make_params().get_for("x").required("facility", int) == 8


def test_required_missing_names_property_and_tag():
    with pytest.raises(ConfigurationError) as info:
        make_params().get_for("syslog appender").required("syslog_name")
    assert str(info.value) == "Property 'syslog_name' required to configure syslog appender"


def test_configuration_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        FactoryParams().get_for("t").required("missing")


def test_optional_present_and_absent():
    validator = make_params().get_for("x")
    assert validator.optional("facility", 0, int) == 8
    assert validator.optional("absent", 0, int) == 0
    assert validator.optional("absent") is None


def test_bad_conversion_raises():
    params = FactoryParams(level="loud")
    with pytest.raises(ConfigurationError):
        params.get_for("level evaluator").required("level", int)


def test_params_behave_as_mapping():
    params = make_params()
    assert sorted(params) == ["facility", "name"]
    with pytest.raises(KeyError):
        params["missing"]