"""Unit tests for the feature model"""
import pytest

from featurespec.parser.model import DataTable, Feature, Scenario, ScenarioOutline, StepKind


def test_data_table_rejects_row_of_wrong_width():
    table = DataTable(header=["a", "b"])
    table.add_row(["1", "2"])

    with pytest.raises(ValueError):
        table.add_row(["1"])

    assert table.rows == [["1", "2"]]
    assert table.width == 2


def test_scenario_step_helpers():
    scenario = Scenario(name="S")
    scenario.add_given("a")
    scenario.add_when("b")
    scenario.add_then("c", doc_string="text")
    scenario.add_given("d")

    assert [s.text for s in scenario.steps_of(StepKind.GIVEN)] == ["a", "d"]
    assert scenario.steps_of(StepKind.THEN)[0].doc_string == "text"


def test_feature_to_dict():
    outline = ScenarioOutline(name="O", line_number=5, examples=DataTable(["x"], [["1"]]))
    outline.add_given("<x>", line_number=6)
    feature = Feature(name="F", scenario_outlines=[outline], implementation=object())

    data = feature.to_dict()

    assert data["name"] == "F"
    assert data["background"] is None
    assert data["has_implementation"] is True
    assert data["scenario_outlines"][0]["examples"] == {"header": ["x"], "rows": [["1"]]}
    assert data["scenario_outlines"][0]["steps"] == [{"kind": "given", "text": "<x>", "line": 6}]
