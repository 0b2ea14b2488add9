import pytest

from contact_scout.config import DEFAULT_SEARCH_URL_TEMPLATE, ScoutConfig
from contact_scout.errors import ConfigError
from contact_scout.models import CustomerRecord
from contact_scout.serialization import records_to_json, write_records
from contact_scout.validation import is_supported_url, validate_runtime_constraints


def test_default_config_is_valid() -> None:
    config = ScoutConfig()
    assert "{query}" in config.search_url_template
    assert config.search_url_template == DEFAULT_SEARCH_URL_TEMPLATE
    assert config.request_timeout > 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"user_agent": "  "},
        {"request_timeout": 0},
        {"search_url_template": "https://maps.test/s?q=fixed"},
        {"search_url_template": "maps.test/{query}"},
    ],
)
def test_invalid_config_raises(kwargs: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        ScoutConfig(**kwargs)  # type: ignore[arg-type]


def test_validate_runtime_constraints_accepts_custom_template() -> None:
    validate_runtime_constraints(
        user_agent="agent",
        request_timeout=1.0,
        search_url_template="http://localhost:8080/search?q={query}",
    )


def test_is_supported_url() -> None:
    assert is_supported_url("https://acme.com") is True
    assert is_supported_url("ftp://acme.com/file") is False
    assert is_supported_url("/contact") is False


def test_records_to_json_and_write(tmp_path) -> None:
    records = [CustomerRecord(url="https://café.es", emails=("hola@cafe.es",))]
    assert '"url": "https://café.es"' in records_to_json(records)
    output = tmp_path / "out.json"
    write_records(str(output), records)
    assert output.read_text(encoding="utf-8").endswith("]\n")
