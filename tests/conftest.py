"""Shared fixtures for tests."""

from pathlib import Path

import pytest


@pytest.fixture
def clojure_source() -> str:
    """Return a source file mixing every naming category."""
    return """(ns app.core-test
  (:require [clojure.test :refer :all]))

(deftest parses-input-test
  (is (= 1 1)))

(deftest test-adds-numbers
  (is (= 3 (+ 1 2))))

(deftest math-ops
  (is (= 4 (* 2 2))))

(deftest ui-tests
  (is true))

(deftest my-test-helper
  (is true))
"""


@pytest.fixture
def corpus(tmp_path, clojure_source) -> Path:
    """Create a small source tree and return its root."""
    root = tmp_path / "project"
    (root / "test" / "app").mkdir(parents=True)
    (root / "src" / "app").mkdir(parents=True)
    (root / "target").mkdir()

    (root / "test" / "app" / "core_test.clj").write_text(clojure_source)
    (root / "test" / "app" / "util_test.clj").write_text(
        "(ns app.util-test)\n\n(deftest trims-strings\n  (is true))\n"
    )
    (root / "src" / "app" / "core.clj").write_text("(ns app.core)\n\n(defn add [a b] (+ a b))\n")
    (root / "target" / "stale_test.clj").write_text("(deftest stale\n  (is true))\n")
    (root / "README.md").write_text("(deftest not-code\n")

    return root
