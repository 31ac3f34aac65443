"""End-to-end tests for the docmark CLI, run in-process with a fake oracle."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from docmark.api.cli.main import run
from docmark.api.cli.parsers.document_parser import parse_cli_args
from docmark.core.config.build_config import BuildConfig
from docmark.core.config.oracle_config import OracleConfig
from docmark.core.exceptions import OracleUnavailableError
from docmark.interfaces.oracle_provider import OracleResponse
from tests.fixtures.fake_oracle import FakeOracle, doc_xml

SOURCE = "// MARK: - Model\n/// Doc\nfunc foo() {}\n"
# "func foo() {}" starts after the MARK line (16+1) and the comment (7+1)
FIRST_DECL_OFFSET = 25


class _Recorder:
    """Build runner stub that records its inputs and returns canned output."""

    def __init__(self, output: str) -> None:
        self.output = output
        self.calls: list[tuple[list[str], BuildConfig]] = []

    def __call__(self, arguments: Sequence[str], config: BuildConfig) -> str:
        self.calls.append((list(arguments), config))
        return self.output


def _oracle_factory(oracle: FakeOracle):
    def factory(config: OracleConfig) -> FakeOracle:
        return oracle

    return factory


def _write_source(tmp_path: Path, name: str = "foo.swift") -> str:
    path = tmp_path / name
    path.write_text(SOURCE, encoding="utf-8")
    return str(path)


def test_skip_xcodebuild_uses_arguments_unchanged(tmp_path: Path, capsys):
    source = _write_source(tmp_path)
    blob = doc_xml("foo", source)
    oracle = FakeOracle({(source, FIRST_DECL_OFFSET): OracleResponse.documentation(blob)})
    build_runner = _Recorder("")

    code = run(
        ["--skip-xcodebuild", source, "-sdk", "/x"],
        oracle_factory=_oracle_factory(oracle),
        build_runner=build_runner,
    )

    captured = capsys.readouterr()
    assert code == 0, captured.err
    assert build_runner.calls == []
    assert {file for _, file, _ in oracle.queries} == {source}
    assert {arguments for _, _, arguments in oracle.queries} == {(source, "-sdk", "/x")}
    assert captured.out.splitlines() == [
        "<jazzy>",
        f'<Section file="{source}" line="0" hasSeparator="true">Model</Section>',
        blob,
        "</jazzy>",
    ]
    assert captured.err == ""
    assert oracle.initialize_calls == 1
    assert oracle.closed


def test_xcodebuild_mode_keeps_argument_prefix_and_files(tmp_path: Path, capsys):
    a = _write_source(tmp_path, "a.swift")
    b = _write_source(tmp_path, "b.swift")
    prefix = ["-module-name", "App", "-sdk", "/sdk", "-target", "x86_64", "-g"]
    build_output = (
        "CompileSwiftSources normal x86_64\n"
        f"    /usr/bin/swiftc {' '.join(prefix)} -Onone -parseable-output {a} {b} -j8\n"
    )
    build_runner = _Recorder(build_output)
    oracle = FakeOracle()

    code = run(
        ["-scheme", "App", "--verbose", "-configuration", "Debug"],
        oracle_factory=_oracle_factory(oracle),
        build_runner=build_runner,
    )

    assert code == 0, capsys.readouterr().err
    assert build_runner.calls[0][0] == ["-scheme", "App", "-configuration", "Debug"]
    assert {arguments for _, _, arguments in oracle.queries} == {(*prefix, a, b)}
    assert [file for file in dict.fromkeys(f for _, f, _ in oracle.queries)] == [a, b]


def test_missing_compiler_invocation_is_fatal(capsys):
    code = run(
        ["-scheme", "App"],
        oracle_factory=_oracle_factory(FakeOracle()),
        build_runner=_Recorder("** BUILD FAILED **\n"),
    )

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.strip() == "No Swift compiler invocation found in xcodebuild output"


def test_unreadable_source_is_fatal(tmp_path: Path, capsys):
    missing = str(tmp_path / "Missing.swift")

    code = run(
        ["--skip-xcodebuild", missing],
        oracle_factory=_oracle_factory(FakeOracle()),
    )

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Could not read source file" in captured.err
    assert len(captured.err.strip().splitlines()) == 1


def test_unavailable_oracle_is_fatal(tmp_path: Path, capsys):
    class _BrokenOracle(FakeOracle):
        def initialize(self) -> None:
            raise OracleUnavailableError("sourcekitd library not found")

    source = _write_source(tmp_path)
    oracle = _BrokenOracle()

    code = run(["--skip-xcodebuild", source], oracle_factory=_oracle_factory(oracle))

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.strip() == "sourcekitd library not found"
    assert oracle.closed


def test_invalid_environment_config_is_fatal(monkeypatch, capsys):
    monkeypatch.setenv("DOCMARK_BUILD__ARGUMENT_PREFIX_COUNT", "many")

    code = run(["--skip-xcodebuild"], oracle_factory=_oracle_factory(FakeOracle()))

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Invalid configuration" in captured.err


def test_malformed_docmark_option_is_one_line_error(capsys):
    code = run(
        ["--probe-strategy", "bogus", "-scheme", "App"],
        oracle_factory=_oracle_factory(FakeOracle()),
        build_runner=_Recorder(""),
    )

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    lines = captured.err.strip().splitlines()
    assert len(lines) == 1
    assert "--probe-strategy" in lines[0]
    assert "invalid choice" in lines[0]


def test_missing_option_value_is_one_line_error(capsys):
    code = run(["--sourcekitd"], oracle_factory=_oracle_factory(FakeOracle()))

    captured = capsys.readouterr()
    assert code == 1
    assert len(captured.err.strip().splitlines()) == 1


def test_no_files_still_prints_a_document(capsys):
    code = run(
        ["--skip-xcodebuild", "-sdk", "/x"],
        oracle_factory=_oracle_factory(FakeOracle()),
    )

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "<jazzy>\n</jazzy>\n"
    assert captured.err == ""

    code = run(
        ["--skip-xcodebuild", "--verbose", "-sdk", "/x"],
        oracle_factory=_oracle_factory(FakeOracle()),
    )

    captured = capsys.readouterr()
    assert code == 0
    assert "No Swift files found" in captured.err


def test_version_flag():
    with pytest.raises(SystemExit) as exc:
        parse_cli_args(["--version"])
    assert exc.value.code == 0


def test_parse_cli_args_preserves_passthrough_order():
    args, passthrough = parse_cli_args(
        ["-workspace", "W.xcworkspace", "--progress", "-scheme", "S", "--probe-strategy", "identifier"]
    )

    assert passthrough == ["-workspace", "W.xcworkspace", "-scheme", "S"]
    assert args.progress is True
    assert args.probe_strategy == "identifier"
    assert args.skip_xcodebuild is False


def test_single_dash_xcodebuild_flags_pass_through():
    args, passthrough = parse_cli_args(["-hideShellScriptEnvironment", "-verbose", "-quiet"])

    assert passthrough == ["-hideShellScriptEnvironment", "-verbose", "-quiet"]
    assert args.verbose is False
