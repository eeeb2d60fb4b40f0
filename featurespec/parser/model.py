"""
Feature model produced by the parser
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class StepKind(Enum):
    GIVEN = "given"
    WHEN = "when"
    THEN = "then"


@dataclass
class DataTable:
    header: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.header)

    def add_row(self, row: Sequence[str]):
        """Append a row; it must be as wide as the header"""
        if len(row) != self.width:
            raise ValueError(f"Row has {len(row)} cells, header has {self.width}")
        self.rows.append(list(row))

    def as_dicts(self) -> List[Dict[str, str]]:
        """Rows keyed by column name"""
        return [dict(zip(self.header, row)) for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        return {'header': list(self.header), 'rows': [list(row) for row in self.rows]}


@dataclass
class Step:
    kind: StepKind
    text: str
    data_table: Optional[DataTable] = None
    doc_string: Optional[str] = None
    line_number: int = 0

    def to_dict(self) -> Dict[str, Any]:
        result = {'kind': self.kind.value, 'text': self.text, 'line': self.line_number}
        if self.data_table is not None:
            result['data_table'] = self.data_table.to_dict()
        if self.doc_string is not None:
            result['doc_string'] = self.doc_string
        return result


@dataclass
class Scenario:
    name: str
    steps: List[Step] = field(default_factory=list)
    line_number: int = 0

    def add_step(self, step: Step):
        self.steps.append(step)

    def add_given(self, text: str, data_table: Optional[DataTable] = None,
                  doc_string: Optional[str] = None, line_number: int = 0) -> Step:
        step = Step(StepKind.GIVEN, text, data_table, doc_string, line_number)
        self.add_step(step)
        return step

    def add_when(self, text: str, data_table: Optional[DataTable] = None,
                 doc_string: Optional[str] = None, line_number: int = 0) -> Step:
        step = Step(StepKind.WHEN, text, data_table, doc_string, line_number)
        self.add_step(step)
        return step

    def add_then(self, text: str, data_table: Optional[DataTable] = None,
                 doc_string: Optional[str] = None, line_number: int = 0) -> Step:
        step = Step(StepKind.THEN, text, data_table, doc_string, line_number)
        self.add_step(step)
        return step

    def steps_of(self, kind: StepKind) -> List[Step]:
        return [step for step in self.steps if step.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'line': self.line_number,
            'steps': [step.to_dict() for step in self.steps],
        }


@dataclass
class ScenarioOutline(Scenario):
    examples: Optional[DataTable] = None

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['examples'] = self.examples.to_dict() if self.examples is not None else None
        return result


@dataclass
class Feature:
    name: str
    background: Optional[Scenario] = None
    scenarios: List[Scenario] = field(default_factory=list)
    scenario_outlines: List[ScenarioOutline] = field(default_factory=list)
    description: List[str] = field(default_factory=list)
    implementation: Any = None
    file_path: str = ""
    line_number: int = 0

    def all_scenarios(self) -> List[Scenario]:
        """Scenarios and outlines in source order"""
        return sorted(self.scenarios + self.scenario_outlines, key=lambda s: s.line_number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'file': self.file_path,
            'line': self.line_number,
            'description': list(self.description),
            'background': self.background.to_dict() if self.background is not None else None,
            'scenarios': [scenario.to_dict() for scenario in self.scenarios],
            'scenario_outlines': [outline.to_dict() for outline in self.scenario_outlines],
            'has_implementation': self.implementation is not None,
        }
