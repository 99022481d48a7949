import json

import pytest
from pydantic import ValidationError

from typo2wp.config import MigrationOptions, build_options
from typo2wp.utils.errors import ConfigurationError


def test_defaults():
    options = MigrationOptions(from_db="mysql://u:p@host/blog")
    assert options.to_db is None
    assert options.prefix == "wp_"
    assert options.overwrite_policy == "ask"
    assert options.gmt_offset_hours == 4
    assert options.post_author == 1
    assert options.report_dir is None


def test_options_are_frozen():
    options = MigrationOptions(from_db="sqlite://")
    with pytest.raises(ValidationError):
        options.prefix = "other_"


def test_fixed_policies_never_prompt():
    def must_not_ask(prompt):
        raise AssertionError("prompted")

    assert MigrationOptions(from_db="x", overwrite_policy="always").should_overwrite("?", must_not_ask)
    assert not MigrationOptions(from_db="x", overwrite_policy="never").should_overwrite("?", must_not_ask)


def test_ask_policy_prompts():
    options = MigrationOptions(from_db="x")
    assert options.should_overwrite("Page already exists, overwrite?", lambda p: "y") is True
    assert options.should_overwrite("Page already exists, overwrite?", lambda p: "") is False


def test_cli_values_override_config_file(tmp_path):
    path = tmp_path / "migration_config.json"
    path.write_text(json.dumps({"migration": {"prefix": "blog_", "overwrite_policy": "never", "gmt_offset_hours": 5}}))
    options = build_options(
        {"from_db": "sqlite://", "prefix": None, "overwrite_policy": "always", "gmt_offset_hours": None},
        config_file=str(path),
    )
    assert options.prefix == "blog_"
    assert options.overwrite_policy == "always"
    assert options.gmt_offset_hours == 5


def test_missing_config_file_is_ignored(tmp_path):
    options = build_options({"from_db": "sqlite://"}, config_file=str(tmp_path / "nope.json"))
    assert options.prefix == "wp_"


def test_malformed_config_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        build_options({"from_db": "sqlite://"}, config_file=str(path))


def test_invalid_policy_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        build_options({"from_db": "sqlite://", "overwrite_policy": "sometimes"})
