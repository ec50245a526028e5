"""Exception hierarchy tests: categories, hints and serialisation."""

from fishfinder.utils.exceptions import (
    ConfigurationError,
    DataMappingError,
    ErrorCategory,
    ErrorSeverity,
    FishFinderError,
    LoadError,
)


def test_load_error_is_high_severity_with_friendly_message():
    error = LoadError("Catalog is not valid JSON", source="fish.json")
    assert isinstance(error, FishFinderError)
    assert error.severity is ErrorSeverity.HIGH
    assert error.user_message == "No fish data available"
    assert error.details["source"] == "fish.json"


def test_network_load_error_has_network_hints():
    error = LoadError("down", source="https://example.test", network=True)
    assert error.category is ErrorCategory.NETWORK_ERROR
    assert any("FISHFINDER_CATALOG_URL" in hint for hint in error.troubleshooting_hints)


def test_data_load_error_has_document_hints():
    error = LoadError("bad")
    assert error.category is ErrorCategory.DATA_ERROR
    assert any("'fish' list" in hint for hint in error.troubleshooting_hints)


def test_configuration_error_names_key():
    error = ConfigurationError("bad policy", config_key="default_spot_policy")
    assert error.category is ErrorCategory.CONFIGURATION_ERROR
    assert error.details["config_key"] == "default_spot_policy"
    assert any("default_spot_policy" in hint for hint in error.troubleshooting_hints)


def test_to_dict():
    error = DataMappingError("Duplicate fish id 1", source_data={"id": 1})
    data = error.to_dict()
    assert data["error_type"] == "DataMappingError"
    assert data["category"] == "data_error"
    assert data["details"]["source_data"] == {"id": 1}
    assert data["troubleshooting_hints"]
