from __future__ import annotations

"""
Unit tests for the Configuration domain.

Verifies defaults, override merging and that the default ignore set is
never shared or mutated between configurations.
"""

import dataclasses
import os

import pytest

from structuregen.domain.config import (
    StructureConfig,
    build_config,
    get_default_config,
    normalize_extensions,
)
from structuregen.domain.constants import DEFAULT_IGNORE_PATTERNS, DEFAULT_OUTPUT_FILE


def test_default_config_values():
    conf = get_default_config()

    assert conf.show_help is False
    assert conf.output == DEFAULT_OUTPUT_FILE
    assert conf.path == os.getcwd()
    assert conf.ignore == DEFAULT_IGNORE_PATTERNS
    assert conf.include_extensions == ()
    assert conf.max_depth == 0
    assert conf.depth_limited is False


def test_config_is_immutable():
    conf = get_default_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        conf.max_depth = 3  # type: ignore[misc]


def test_extra_ignore_appends_in_order():
    conf = build_config(extra_ignore=["*.tmp", "secrets", "*.tmp"])

    assert conf.ignore[: len(DEFAULT_IGNORE_PATTERNS)] == DEFAULT_IGNORE_PATTERNS
    assert conf.ignore[len(DEFAULT_IGNORE_PATTERNS):] == ("*.tmp", "secrets")


def test_extra_ignore_does_not_leak_between_configs():
    build_config(extra_ignore=["only-here"])
    fresh = build_config()

    assert "only-here" not in fresh.ignore
    assert "only-here" not in DEFAULT_IGNORE_PATTERNS


def test_none_overrides_keep_defaults():
    conf = build_config(output=None, max_depth=None, path="/tmp/x")

    assert conf.output == DEFAULT_OUTPUT_FILE
    assert conf.max_depth == 0
    assert conf.path == "/tmp/x"


def test_build_config_on_custom_base():
    base = StructureConfig(path="/base", max_depth=2, ignore=("a",))
    conf = build_config(base, extra_ignore=["b"], output="out.md")

    assert conf.path == "/base"
    assert conf.max_depth == 2
    assert conf.ignore == ("a", "b")
    assert conf.output == "out.md"
    assert conf.depth_limited is True


def test_unknown_override_is_rejected():
    with pytest.raises(TypeError):
        build_config(colour="blue")


def test_normalize_extensions():
    assert normalize_extensions(["py", ".MD", " txt ", "", "py"]) == (".py", ".md", ".txt")
