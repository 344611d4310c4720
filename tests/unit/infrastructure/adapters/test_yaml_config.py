"""Tests for infrastructure/adapters/yaml_config.py."""

from pathlib import Path

import pytest

from anchor.domain.exceptions.configuration import ConfigurationError
from anchor.domain.model.configuration import DEFAULT_EXCLUDES
from anchor.domain.model.enums import RuleType, Severity
from anchor.infrastructure.adapters.yaml_config import (
    CONFIG_FILENAME,
    find_config,
    load_config,
    parse_config,
)
from tests.factories import mid, mids

CONFIG_PATH = Path(".anchor.yml")

EXAMPLE = """\
ignore_type_checking: true
exclude: [migrations]
rules:
  - type: no_transitive_dependency
    name: domain-is-pure
    modules: ["myapp.domain.**"]
    forbidden_modules: [sqlalchemy, myapp.infrastructure]
  - type: must_use_module
    paths: ["myapp/contexts/*.py"]
    required_modules: [myapp.context]
    severity: warning
"""


class TestFindConfig:
    """Tests for find_config."""

    def test_in_start_directory(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("rules: []\n")
        assert find_config(tmp_path) == tmp_path / CONFIG_FILENAME

    def test_in_parent_directory(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("rules: []\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == tmp_path / CONFIG_FILENAME

    def test_nearest_wins(self, tmp_path: Path) -> None:
        nested = tmp_path / "a"
        nested.mkdir()
        (tmp_path / CONFIG_FILENAME).write_text("")
        (nested / CONFIG_FILENAME).write_text("")
        assert find_config(nested) == nested / CONFIG_FILENAME


class TestLoadConfig:
    """Tests for load_config."""

    def test_none_is_empty(self) -> None:
        assert load_config(None).rules == ()

    def test_full_example(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text(EXAMPLE)

        config = load_config(path)

        assert config.ignore_type_checking is True
        assert config.exclude == DEFAULT_EXCLUDES | {"migrations"}
        transitive, must_use = config.rules
        assert transitive.rule_type is RuleType.NO_TRANSITIVE_DEPENDENCY
        assert transitive.rule_name == "domain-is-pure"
        assert transitive.forbidden_modules == mids("sqlalchemy", "myapp.infrastructure")
        assert transitive.applies_to(mid("myapp.domain.user"))
        assert must_use.rule_type is RuleType.MUST_USE_MODULE
        assert must_use.severity is Severity.WARNING
        assert must_use.applies_to(mid("myapp.contexts.users"), "myapp/contexts/users.py")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("")
        assert load_config(path).rules == ()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("rules: [unclosed\n")
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "nope.yml")


class TestParseConfig:
    """Structural validation."""

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="top level must be a mapping"):
            parse_config(["rules"], CONFIG_PATH)

    def test_rules_must_be_list(self) -> None:
        with pytest.raises(ConfigurationError, match="'rules' must be a list"):
            parse_config({"rules": {"type": "x"}}, CONFIG_PATH)

    def test_ignore_type_checking_must_be_bool(self) -> None:
        with pytest.raises(ConfigurationError, match="must be true or false"):
            parse_config({"ignore_type_checking": "yes please"}, CONFIG_PATH)

    def test_rule_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="rule #1 must be a mapping"):
            parse_config({"rules": ["no_direct_dependency"]}, CONFIG_PATH)

    def test_unknown_key(self) -> None:
        data = {
            "rules": [
                {
                    "type": "no_direct_dependency",
                    "modules": ["a"],
                    "forbidden_modules": ["b"],
                    "forbiden": ["c"],
                }
            ]
        }
        with pytest.raises(ConfigurationError, match="unknown keys"):
            parse_config(data, CONFIG_PATH)

    def test_unknown_type(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown type 'no_cycles'"):
            parse_config({"rules": [{"type": "no_cycles"}]}, CONFIG_PATH)

    def test_unknown_severity(self) -> None:
        data = {
            "rules": [
                {
                    "type": "no_direct_dependency",
                    "modules": ["a"],
                    "forbidden_modules": ["b"],
                    "severity": "fatal",
                }
            ]
        }
        with pytest.raises(ConfigurationError, match="unknown severity 'fatal'"):
            parse_config(data, CONFIG_PATH)

    def test_rule_validation_wrapped(self) -> None:
        data = {"rules": [{"type": "no_direct_dependency", "modules": ["a"]}]}
        with pytest.raises(ConfigurationError, match="forbidden_modules is empty"):
            parse_config(data, CONFIG_PATH)

    def test_module_list_of_strings(self) -> None:
        data = {
            "rules": [
                {"type": "no_direct_dependency", "modules": "a", "forbidden_modules": ["b"]}
            ]
        }
        with pytest.raises(ConfigurationError, match="'modules' must be a list of strings"):
            parse_config(data, CONFIG_PATH)

    def test_recursive_key(self) -> None:
        data = {
            "rules": [
                {
                    "type": "must_use_module",
                    "paths": ["myapp/contexts/**/*.py"],
                    "recursive": False,
                    "required_modules": ["myapp.context"],
                }
            ]
        }
        (rule,) = parse_config(data, CONFIG_PATH).rules
        assert rule.recursive is False
        assert rule.applies_to(mid("myapp.contexts.a.b"), "myapp/contexts/a/b.py")
        assert not rule.applies_to(mid("myapp.contexts.a"), "myapp/contexts/a.py")

    def test_recursive_by_default(self) -> None:
        data = {
            "rules": [
                {
                    "type": "must_use_module",
                    "paths": ["myapp/contexts/**/*.py"],
                    "required_modules": ["myapp.context"],
                }
            ]
        }
        (rule,) = parse_config(data, CONFIG_PATH).rules
        assert rule.applies_to(mid("myapp.contexts.a"), "myapp/contexts/a.py")

    def test_recursive_must_be_bool(self) -> None:
        data = {
            "rules": [
                {
                    "type": "must_use_module",
                    "paths": ["a/*.py"],
                    "recursive": "yes",
                    "required_modules": ["b"],
                }
            ]
        }
        with pytest.raises(ConfigurationError, match="'recursive' must be true or false"):
            parse_config(data, CONFIG_PATH)

    def test_invalid_module_name(self) -> None:
        data = {
            "rules": [
                {"type": "no_direct_dependency", "modules": ["a"], "forbidden_modules": ["b..c"]}
            ]
        }
        with pytest.raises(ConfigurationError, match="'forbidden_modules'"):
            parse_config(data, CONFIG_PATH)
