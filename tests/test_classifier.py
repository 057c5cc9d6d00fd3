"""Tests for compile task classification."""

import logging

import pytest

from nullability_policy.app.overrides import OverrideRegistry
from nullability_policy.core.classifier import (
    Category,
    SourceSetOverride,
    SourceSetTypeError,
    category_for_type,
    classify,
)


def test_primary_compile_task_is_main_without_overrides():
    assert classify("compileJava", {}) is Category.MAIN


def test_non_compile_task_is_disabled():
    assert classify("compileKotlin", {}) is Category.DISABLED
    assert classify("javadoc", {"test": SourceSetOverride("test", "test")}) is Category.DISABLED


def test_unregistered_source_set_is_disabled():
    assert classify("compileTestJava", {}) is Category.DISABLED


def test_test_override_is_test():
    overrides = OverrideRegistry({"test": "test"})
    assert classify("compileTestJava", overrides) is Category.TEST


def test_main_override_is_main():
    overrides = OverrideRegistry({"benchmark": "main"})
    assert classify("compileBenchmarkJava", overrides) is Category.MAIN


def test_default_override_type_is_main():
    overrides = OverrideRegistry()
    overrides.register("tools")
    assert classify("compileToolsJava", overrides) is Category.MAIN


def test_multi_word_source_set_is_uncapitalized_before_lookup():
    overrides = OverrideRegistry({"integrationTest": "test"})
    assert classify("compileIntegrationTestJava", overrides) is Category.TEST


def test_bucket_suffix_is_stripped_before_lookup():
    overrides = OverrideRegistry({"foo": "main"})
    assert classify("compileFoo3Java", overrides) is Category.MAIN


def test_lookup_is_case_sensitive():
    overrides = OverrideRegistry({"IntegrationTest": "test"})
    assert classify("compileIntegrationTestJava", overrides) is Category.DISABLED


def test_plain_mapping_is_accepted():
    overrides = {"test": SourceSetOverride(name="test", type="test")}
    assert classify("compileTestJava", overrides) is Category.TEST


class TestUnsupportedType:
    def test_raises_naming_value_and_supported_types(self):
        overrides = OverrideRegistry({"test": "bogus"})
        with pytest.raises(SourceSetTypeError) as excinfo:
            classify("compileTestJava", overrides)
        message = str(excinfo.value)
        assert "'bogus'" in message
        assert "'main', 'test'" in message
        assert excinfo.value.source_set_type == "bogus"

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            category_for_type("Test")

    def test_not_raised_for_tasks_that_never_reach_the_override(self):
        overrides = OverrideRegistry({"test": "bogus"})
        assert classify("compileJava", overrides) is Category.MAIN
        assert classify("compileOtherJava", overrides) is Category.DISABLED


def test_decisions_are_logged_at_debug(caplog):
    overrides = OverrideRegistry({"test": "test"})
    with caplog.at_level(logging.DEBUG, logger="nullability_policy.core.classifier"):
        classify("compileTestJava", overrides)
    assert "source_set=test category=TEST" in caplog.text
