"""Integration tests for loading feature files and the command line"""
import json
from pathlib import Path

from click.testing import CliRunner

from featurespec.parser.feature_loader import FeatureLoader
from featurespec.parser.feature_parser import FeatureParser
from run import main

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def write_features(directory: Path):
    (directory / "nested").mkdir(parents=True)
    (directory / "math.feature").write_text(
        "Feature: Math\n\n  Scenario: Addition\n    Given a number 2\n    When I add 3\n    Then the result is 5\n",
        encoding="utf-8"
    )
    (directory / "nested" / "broken.feature").write_text(
        "Feature: Broken\n  Scenario: Missing sections\n    Given a number 2\n",
        encoding="utf-8"
    )


def test_loader_parses_every_file(dataset, tmp_path):
    write_features(tmp_path)

    report = FeatureLoader(FeatureParser(dataset, 'en')).load(tmp_path)

    assert [f.name for f in report.features] == ["Math"]
    assert len(report.results) == 2
    assert not report.ok
    assert report.failures[0].source_name.endswith("broken.feature")
    assert report.failures[0].error.kind == "unexpected_eof"


def test_loader_missing_directory(dataset, tmp_path):
    report = FeatureLoader(FeatureParser(dataset, 'en')).load(tmp_path / "nowhere")

    assert report.ok
    assert report.features == []


def test_shipped_features_parse(dataset):
    report = FeatureLoader(FeatureParser(dataset, 'en')).load(PROJECT_ROOT / "features")

    assert report.ok
    names = [f.name for f in report.features]
    assert "Calculator" in names
    calculator = report.features[names.index("Calculator")]
    assert calculator.description == ["As a user I want to add numbers", "so that I do not have to do it in my head"]
    assert calculator.scenario_outlines[0].examples.as_dicts()[1] == {"a": "10", "b": "20", "sum": "30"}


def test_cli_text_summary(tmp_path):
    (tmp_path / "math.feature").write_text(
        "Feature: Math\nScenario: Addition\nGiven a\nWhen b\nThen c\n", encoding="utf-8"
    )

    result = CliRunner().invoke(main, ["--features", str(tmp_path), "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    assert "Feature: Math" in result.stdout


def test_cli_json_in_other_language(tmp_path):
    output = tmp_path / "summary.json"

    result = CliRunner().invoke(main, [
        "--features", str(PROJECT_ROOT / "examples" / "ru"),
        "--lang", "ru",
        "--format", "json",
        "--output", str(output),
        "--config", str(tmp_path / "none.yaml"),
    ])

    assert result.exit_code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["language"] == "ru"
    assert data["features"][0]["name"] == "Калькулятор"


def test_cli_fails_on_rejected_file(tmp_path):
    write_features(tmp_path)

    result = CliRunner().invoke(main, ["--features", str(tmp_path), "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 1


def test_cli_unknown_language(tmp_path):
    result = CliRunner().invoke(main, ["--lang", "xx", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 2


def test_cli_list_languages(tmp_path):
    result = CliRunner().invoke(main, ["--list-languages", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    assert "en" in result.stdout.split()
    assert "ru" in result.stdout.split()
