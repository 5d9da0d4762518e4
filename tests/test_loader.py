import pytest

from intopost.errors import ConfigError
from intopost.loader import apply_overrides, load_yaml_config
from intopost.schema import ConfigSchema


def test_defaults():
    cfg = ConfigSchema()
    assert cfg.allow_numbers is False
    assert cfg.echo_tokens is True
    assert cfg.fail_fast is False
    assert cfg.skip_blank_lines is False
    assert cfg.separator == " "


def test_load_yaml_config(write_file):
    path = write_file("run.yaml", "allow_numbers: true\nfail_fast: true\nseparator: \"\\t\"\n")
    cfg = load_yaml_config(path)
    assert cfg.allow_numbers is True
    assert cfg.fail_fast is True
    assert cfg.separator == "\t"
    assert cfg.echo_tokens is True


def test_empty_yaml_gives_defaults(write_file):
    assert load_yaml_config(write_file("empty.yaml", "")) == ConfigSchema()


@pytest.mark.parametrize("content", [
    "unknown_key: 1\n",
    "separator: ','\n",
    "separator: ''\n",
    "fail_fast: [1, 2]\n",
    "- just\n- a list\n",
    "allow_numbers: [unclosed\n",
])
def test_bad_config_raises_config_error(write_file, content):
    with pytest.raises(ConfigError):
        load_yaml_config(write_file("bad.yaml", content))


def test_missing_config_raises_config_error(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config"):
        load_yaml_config(tmp_path / "nope.yaml")


def test_apply_overrides_ignores_none():
    base = ConfigSchema(fail_fast=True)
    cfg = apply_overrides(base, fail_fast=None, allow_numbers=True)
    assert cfg.fail_fast is True
    assert cfg.allow_numbers is True
    assert base.allow_numbers is False


def test_apply_overrides_without_config():
    assert apply_overrides(None, echo_tokens=False).echo_tokens is False
