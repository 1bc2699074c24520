"""Tests for fix computation."""

import pytest

from testnorm.naming.classifier import classify
from testnorm.naming.errors import UnfixableNameError
from testnorm.naming.fixer import fix_name
from testnorm.naming.models import Category


class TestFixName:
    def test_missing_suffix_appends(self):
        assert fix_name("foo", Category.MISSING_SUFFIX) == "foo-test"

    def test_prefixed_moves_marker_to_end(self):
        assert fix_name("test-foo", Category.PREFIXED) == "foo-test"

    def test_prefixed_strips_only_leading_prefix(self):
        assert fix_name("test-latest-foo", Category.PREFIXED) == "latest-foo-test"

    def test_pluralized_drops_trailing_s(self):
        assert fix_name("foo-tests", Category.PLURALIZED) == "foo-test"

    def test_pluralized_without_dash_is_unfixable(self):
        with pytest.raises(UnfixableNameError) as exc_info:
            fix_name("mytests", Category.PLURALIZED)

        assert exc_info.value.name == "mytests"
        assert exc_info.value.category == "pluralized"
        assert "-tests" in str(exc_info.value)

    @pytest.mark.parametrize("category", [Category.VALID, Category.UNRECOGNIZED])
    def test_non_fixable_categories(self, category):
        with pytest.raises(UnfixableNameError):
            fix_name("foo-test-bar", category)


class TestFixYieldsValidName:
    @pytest.mark.parametrize(
        "name",
        [
            "foo",
            "math-ops",
            "valid?",
            "test-foo",
            "test-adds-numbers",
            "test-",
            "foo-tests",
            "ui-tests",
            "latest-tests",
            "test-foo-tests",
        ],
    )
    def test_fixed_name_is_valid(self, name):
        category = classify(name)

        assert classify(fix_name(name, category)) == Category.VALID
