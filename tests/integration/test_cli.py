"""Integration tests for the CLI."""

import json

import pytest
from click.testing import CliRunner

from testnorm.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCheckCommand:
    def test_check_reports_categories(self, runner, corpus):
        result = runner.invoke(main, ["check", str(corpus)])

        assert result.exit_code == 0
        assert "✘ prefixed: test-adds-numbers" in result.output
        assert "✘ missing-suffix: trims-strings" in result.output
        assert "SUMMARY:" in result.output

    def test_check_skips_excluded_directories(self, runner, corpus):
        result = runner.invoke(main, ["check", str(corpus)])

        assert "stale" not in result.output

    def test_check_does_not_modify_files(self, runner, corpus):
        path = corpus / "test" / "app" / "core_test.clj"
        before = path.read_text()

        runner.invoke(main, ["check", str(corpus)])

        assert path.read_text() == before

    def test_check_strict_mode(self, runner, corpus):
        result = runner.invoke(main, ["check", str(corpus), "--strict"])

        assert result.exit_code == 1

    def test_check_strict_passes_on_clean_tree(self, runner, tmp_path):
        (tmp_path / "ok_test.clj").write_text("(deftest ok-test\n  (is true))\n")

        result = runner.invoke(main, ["check", str(tmp_path), "--strict"])

        assert result.exit_code == 0

    def test_check_json_output(self, runner, corpus):
        result = runner.invoke(main, ["check", str(corpus), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 6
        assert data["counts"]["missing-suffix"] == 2

    def test_check_keyword_and_pattern_override(self, runner, tmp_path):
        (tmp_path / "names.txt").write_text("deftest-keyword ui-tests\n")

        result = runner.invoke(
            main,
            [
                "check",
                str(tmp_path),
                "--keyword",
                "deftest-keyword",
                "--pattern",
                "*.txt",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["counts"]["pluralized"] == 1

    def test_check_nonexistent_root(self, runner):
        result = runner.invoke(main, ["check", "/nonexistent/project"])

        assert result.exit_code == 2

    def test_check_invalid_config(self, runner, corpus, tmp_path):
        config = tmp_path / "testnorm.yaml"
        config.write_text("keyword: ''\n")

        result = runner.invoke(main, ["check", str(corpus), "--config", str(config)])

        assert result.exit_code == 2
        assert "keyword" in result.output

    def test_check_config_file(self, runner, corpus, tmp_path):
        config = tmp_path / "testnorm.yaml"
        config.write_text("exclude: []\n")

        result = runner.invoke(
            main, ["check", str(corpus), "--config", str(config), "--format", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["total"] == 7

    def test_check_uses_config_at_root(self, runner, corpus):
        (corpus / ".testnorm.yaml").write_text("exclude: []\n")

        result = runner.invoke(main, ["check", str(corpus), "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["total"] == 7

    def test_check_invalid_config_at_root(self, runner, corpus):
        (corpus / ".testnorm.yaml").write_text("- not\n- a mapping\n")

        result = runner.invoke(main, ["check", str(corpus)])

        assert result.exit_code == 2
        assert "Config error" in result.output


class TestFixCommand:
    def test_fix_rewrites_files(self, runner, corpus):
        result = runner.invoke(main, ["fix", str(corpus)])

        assert result.exit_code == 0
        assert "Fixed 4 test name(s) in 2 file(s)" in result.output
        text = (corpus / "test" / "app" / "core_test.clj").read_text()
        assert "(deftest adds-numbers-test\n" in text
        assert "(deftest math-ops-test\n" in text
        assert "(deftest ui-test\n" in text
        assert "(deftest my-test-helper\n" in text

    def test_fix_leaves_excluded_files(self, runner, corpus):
        runner.invoke(main, ["fix", str(corpus)])

        assert (corpus / "target" / "stale_test.clj").read_text().startswith(
            "(deftest stale\n"
        )

    def test_fix_dry_run(self, runner, corpus):
        path = corpus / "test" / "app" / "util_test.clj"
        before = path.read_text()

        result = runner.invoke(main, ["fix", str(corpus), "--dry-run"])

        assert result.exit_code == 0
        assert "Would fix 4 test name(s)" in result.output
        assert path.read_text() == before

    def test_fix_is_idempotent(self, runner, corpus):
        runner.invoke(main, ["fix", str(corpus)])

        result = runner.invoke(main, ["fix", str(corpus), "--format", "json"])

        data = json.loads(result.output)
        assert data["outcomes"]["fixed"] == 0
        assert data["counts"]["valid"] == 5

    def test_fix_json_output(self, runner, corpus):
        result = runner.invoke(main, ["fix", str(corpus), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["outcomes"] == {
            "fixed": 4,
            "skipped-ambiguous": 0,
            "skipped-not-fixable": 2,
        }

    def test_fix_reports_ambiguous_names(self, runner, tmp_path):
        path = tmp_path / "dup_test.clj"
        path.write_text("(deftest dup\n  (is true))\n(deftest dup\n  (is true))\n")

        result = runner.invoke(main, ["fix", str(tmp_path)])

        assert result.exit_code == 0
        assert "skipped-ambiguous" in result.output
        assert path.read_text().count("(deftest dup\n") == 2

    def test_fix_refuses_to_duplicate_a_test(self, runner, tmp_path):
        path = tmp_path / "clash_test.clj"
        path.write_text("(deftest foo\n  (is true))\n(deftest foo-test\n  (is true))\n")

        result = runner.invoke(main, ["fix", str(tmp_path)])

        assert result.exit_code == 0
        assert "foo-test is already defined" in result.output
        assert path.read_text().count("(deftest foo-test\n") == 1


class TestMainGroup:
    def test_log_level_option(self, runner, corpus):
        result = runner.invoke(main, ["--log-level", "debug", "check", str(corpus)])

        assert result.exit_code == 0

    def test_invalid_log_level(self, runner, corpus):
        result = runner.invoke(main, ["--log-level", "loud", "check", str(corpus)])

        assert result.exit_code == 2
