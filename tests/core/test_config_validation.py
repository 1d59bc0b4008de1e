"""Unit tests for configuration validation."""

from sms_locator.core.config import (
    Config,
    DatasetConfig,
    validate_config,
    validate_dataset,
)


def make_dataset(label="shelters", url="https://example.com/shelters.geojson"):
    return DatasetConfig(label=label, url=url, resource_kind="shelters")


class TestValidateDataset:
    """Tests for validate_dataset() function."""

    def test_valid(self):
        assert validate_dataset(make_dataset(), "datasets[0]") == []

    def test_empty_label(self):
        errors = validate_dataset(make_dataset(label=""), "datasets[0]")
        assert [e.field for e in errors] == ["datasets[0].label"]
        assert errors[0].severity == "error"

    def test_empty_url(self):
        errors = validate_dataset(make_dataset(url=""), "datasets[0]")
        assert [e.field for e in errors] == ["datasets[0].url"]

    def test_unresolved_placeholder_is_warning(self):
        errors = validate_dataset(make_dataset(url="${SHELTERS_DATA_URL}"), "datasets[0]")
        assert len(errors) == 1
        assert errors[0].severity == "warning"


class TestValidateConfig:
    """Tests for validate_config() function."""

    def test_valid_config(self):
        result = validate_config(Config(datasets=[make_dataset()]))
        assert result.valid
        assert result.errors == []

    def test_no_datasets_is_warning(self):
        result = validate_config(Config())
        assert result.valid
        assert [e.field for e in result.warnings] == ["datasets"]

    def test_non_positive_radius(self):
        result = validate_config(Config(datasets=[make_dataset()], radius_miles=0))
        assert not result.valid
        assert result.critical_errors[0].field == "radius_miles"

    def test_zero_results(self):
        result = validate_config(Config(datasets=[make_dataset()], max_results_per_query=0))
        assert not result.valid
        assert result.critical_errors[0].field == "max_results_per_query"

    def test_zero_budget(self):
        result = validate_config(Config(datasets=[make_dataset()], segment_budget=0))
        assert not result.valid

    def test_zero_refresh_interval(self):
        result = validate_config(Config(datasets=[make_dataset()], refresh_interval_seconds=0))
        assert not result.valid

    def test_duplicate_labels(self):
        config = Config(datasets=[make_dataset(), make_dataset(url="https://example.com/b")])
        result = validate_config(config)
        assert not result.valid
        assert result.critical_errors[0].field == "datasets[1].label"

    def test_country_must_be_two_letters(self):
        for country in ["USA", "", "U1"]:
            result = validate_config(Config(datasets=[make_dataset()], gazetteer_country=country))
            assert not result.valid, country
            assert result.critical_errors[0].field == "gazetteer_country"

    def test_lowercase_country_accepted(self):
        assert validate_config(Config(datasets=[make_dataset()], gazetteer_country="us")).valid
