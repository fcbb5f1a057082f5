"""Tests for the go list query implementation."""

import json
import subprocess
from unittest.mock import patch

import pytest

from godeps.models import ImportGraph, PackageMetadata
from godeps.query.go_list import (
    METADATA_TEMPLATE,
    GoListQuery,
    parse_bool,
    parse_graph,
    parse_metadata,
)
from godeps.utils.exceptions import (
    MalformedResponseError,
    QueryFailedError,
    QueryTimeoutError,
    ToolUnavailableError,
)


def completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestParsers:
    """Test parsing of go list output."""

    @pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True"])
    def test_parse_bool_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "f", "F", "FALSE", "false", "False"])
    def test_parse_bool_false(self, value):
        assert parse_bool(value) is False

    @pytest.mark.parametrize("value", ["", "yes", "tRuE", "2"])
    def test_parse_bool_invalid(self, value):
        with pytest.raises(ValueError):
            parse_bool(value)

    def test_parse_graph(self):
        output = json.dumps({
            "ImportPath": "log",
            "Imports": ["fmt", "io"],
            "Deps": ["errors", "fmt", "io"],
        })

        assert parse_graph(output) == ImportGraph(
            imports=["fmt", "io"], deps=["errors", "fmt", "io"], import_path="log",
        )

    def test_parse_graph_without_dependencies(self):
        assert parse_graph('{"ImportPath": "unsafe", "Standard": true}') == ImportGraph(import_path="unsafe")

    def test_parse_graph_non_string_import_path(self):
        with pytest.raises(MalformedResponseError):
            parse_graph('{"ImportPath": 7, "Deps": []}')

    def test_parse_graph_invalid_json(self):
        with pytest.raises(MalformedResponseError):
            parse_graph("not json")

    def test_parse_graph_wrong_types(self):
        with pytest.raises(MalformedResponseError):
            parse_graph('{"Imports": "fmt"}')

    def test_parse_metadata(self):
        result = parse_metadata("log:true\nbytes:false\n", 2)

        assert result == [
            PackageMetadata(name="log", is_standard_library=True),
            PackageMetadata(name="bytes", is_standard_library=False),
        ]

    def test_parse_metadata_ignores_extra_lines(self):
        assert len(parse_metadata("a:true\nb:false\nc:true\n", 2)) == 2

    def test_parse_metadata_missing_separator(self):
        with pytest.raises(MalformedResponseError):
            parse_metadata("log\n", 1)

    def test_parse_metadata_non_boolean(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_metadata("log:maybe\n", 1)

        assert isinstance(exc_info.value.original_exception, ValueError)

    def test_parse_metadata_too_few_lines(self):
        with pytest.raises(MalformedResponseError):
            parse_metadata("log:true", 3)


class TestGoListQuery:
    """Test command construction and failure mapping."""

    def setup_method(self):
        self.query = GoListQuery()

    def test_query_graph_command(self):
        output = json.dumps({"Imports": ["fmt"], "Deps": ["fmt", "io"]})
        with patch("godeps.query.go_list.subprocess.run", return_value=completed(output)) as mock_run:
            graph = self.query.query_graph("log")

        assert graph == ImportGraph(imports=["fmt"], deps=["fmt", "io"])
        assert mock_run.call_args[0][0] == ["go", "list", "-json", "log"]
        assert mock_run.call_args[1]["capture_output"] is True
        assert mock_run.call_args[1]["timeout"] is None

    def test_query_metadata_command(self):
        with patch("godeps.query.go_list.subprocess.run",
                   return_value=completed("log:true\nbytes:false\n")) as mock_run:
            result = self.query.query_metadata("example.com/app", ["log", "bytes"])

        assert [m.is_standard_library for m in result] == [True, False]
        assert mock_run.call_args[0][0] == ["go", "list", "-f", METADATA_TEMPLATE, "log", "bytes"]

    def test_query_metadata_without_paths_runs_nothing(self):
        with patch("godeps.query.go_list.subprocess.run") as mock_run:
            assert self.query.query_metadata("example.com/app", []) == []

        mock_run.assert_not_called()

    def test_query_current_package(self):
        with patch("godeps.query.go_list.subprocess.run",
                   return_value=completed("example.com/app\n")) as mock_run:
            assert self.query.query_current_package() == "example.com/app"

        assert mock_run.call_args[0][0] == ["go", "list"]

    def test_query_current_package_empty_output(self):
        with patch("godeps.query.go_list.subprocess.run", return_value=completed("\n")):
            with pytest.raises(MalformedResponseError):
                self.query.query_current_package()

    def test_custom_binary_and_timeout(self):
        query = GoListQuery(go_binary="/usr/local/go/bin/go", timeout=30)
        with patch("godeps.query.go_list.subprocess.run", return_value=completed("x\n")) as mock_run:
            query.query_current_package()

        assert mock_run.call_args[0][0][0] == "/usr/local/go/bin/go"
        assert mock_run.call_args[1]["timeout"] == 30

    def test_stderr_output_is_an_error(self):
        result = completed('{"Deps": []}', stderr="can't load package: package foo: cannot find package")
        with patch("godeps.query.go_list.subprocess.run", return_value=result):
            with pytest.raises(QueryFailedError) as exc_info:
                self.query.query_graph("foo")

        assert "cannot find package" in str(exc_info.value)
        assert exc_info.value.stderr.startswith("can't load package")

    def test_non_zero_exit_is_an_error(self):
        with patch("godeps.query.go_list.subprocess.run", return_value=completed(returncode=2)):
            with pytest.raises(QueryFailedError) as exc_info:
                self.query.query_graph("foo")

        assert exc_info.value.exit_code == 2

    def test_malformed_json(self):
        with patch("godeps.query.go_list.subprocess.run", return_value=completed("{")):
            with pytest.raises(MalformedResponseError) as exc_info:
                self.query.query_graph("foo")

        assert exc_info.value.command == ["go", "list", "-json", "foo"]

    def test_missing_binary(self):
        with patch("godeps.query.go_list.subprocess.run", side_effect=FileNotFoundError("go")):
            with pytest.raises(ToolUnavailableError) as exc_info:
                self.query.query_graph("fmt")

        assert 'Command "go" not found' in str(exc_info.value)

    def test_permission_denied(self):
        with patch("godeps.query.go_list.subprocess.run", side_effect=PermissionError("denied")):
            with pytest.raises(ToolUnavailableError):
                self.query.query_graph("fmt")

    def test_undecodable_output_is_malformed(self):
        error = UnicodeDecodeError("utf-8", b"cannot load /tmp/caf\xe9", 20, 21, "invalid continuation byte")
        with patch("godeps.query.go_list.subprocess.run", side_effect=error):
            with pytest.raises(MalformedResponseError) as exc_info:
                self.query.query_graph("example.com/app")

        assert exc_info.value.original_exception is error
        assert exc_info.value.command == ["go", "list", "-json", "example.com/app"]
        assert self.query.stats["errors"] == 1

    def test_timeout(self):
        error = subprocess.TimeoutExpired(cmd=["go", "list"], timeout=5)
        with patch("godeps.query.go_list.subprocess.run", side_effect=error):
            with pytest.raises(QueryTimeoutError) as exc_info:
                self.query.query_current_package()

        assert exc_info.value.timeout_duration == 5
        assert isinstance(exc_info.value, QueryFailedError)

    def test_stats_track_commands_and_errors(self):
        with patch("godeps.query.go_list.subprocess.run", return_value=completed("x\n")):
            self.query.query_current_package()
        with patch("godeps.query.go_list.subprocess.run", return_value=completed(returncode=1)):
            with pytest.raises(QueryFailedError):
                self.query.query_current_package()

        assert self.query.stats == {"commands": 2, "errors": 1}

    def test_is_available(self):
        with patch("godeps.query.go_list.shutil.which", return_value="/usr/bin/go"):
            assert self.query.is_available() is True
        with patch("godeps.query.go_list.shutil.which", return_value=None):
            assert self.query.is_available() is False
