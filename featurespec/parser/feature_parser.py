"""
Feature parser
Recursive-descent parser for Gherkin-style feature documents with localized keywords
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from featurespec.parser.errors import (
    FeatureSyntaxError,
    ParseError,
    ParseResult,
    UnexpectedEndOfInput,
)
from featurespec.parser.keywords import KeywordCategory, KeywordDataset, KeywordTable
from featurespec.parser.line_reader import LineReader
from featurespec.parser.model import (
    DataTable,
    Feature,
    Scenario,
    ScenarioOutline,
    Step,
    StepKind,
)
from featurespec.utils.logger import setup_logger

logger = setup_logger(__name__)

TABLE_DELIMITER = '|'
DOC_STRING_MARKER = '"""'

ImplementationResolver = Callable[[str], object]

# Primary keyword of each step chain
CHAIN_KEYWORDS = {
    StepKind.GIVEN: KeywordCategory.GIVEN,
    StepKind.WHEN: KeywordCategory.WHEN,
    StepKind.THEN: KeywordCategory.THEN,
}


class FeatureParser:
    """Parse feature documents into Feature objects"""

    def __init__(self, dataset: KeywordDataset, language: str = 'en',
                 resolve_implementation: Optional[ImplementationResolver] = None):
        self.keywords = KeywordTable.load(dataset, language)
        self.resolve_implementation = resolve_implementation
        self._reader = LineReader()

    @property
    def language(self) -> str:
        return self.keywords.language

    def parse(self, source: Union[str, Iterable[str]], collector: List[Feature],
              source_name: str = '') -> ParseResult:
        """
        Parse one document and append each Feature to the collector

        Returns a ParseResult; on failure it carries the error and no further
        features are appended.
        """
        self._reader.load(source)
        result = ParseResult(source_name=source_name)

        try:
            while not self._reader.eof():
                self._skip_blank_lines()
                if self._reader.eof():
                    break

                feature = self._parse_feature()
                feature.file_path = source_name
                collector.append(feature)
                result.features.append(feature)
                logger.debug(f"Parsed feature: {feature.name} "
                             f"({len(feature.scenarios)} scenarios, {len(feature.scenario_outlines)} outlines)")
        except ParseError as e:
            logger.error(f"Rejected {source_name or 'document'}: {e.kind}: {e}")
            result.error = e

        return result

    def parse_file(self, file_path: Union[str, Path], collector: List[Feature]) -> ParseResult:
        """Read a UTF-8 feature file (with or without a BOM) completely and parse it"""
        file_path = Path(file_path)
        with open(file_path, 'r', encoding='utf-8-sig') as f:
            text = f.read()

        return self.parse(text, collector, source_name=str(file_path))

    # Cursor helpers

    def _skip_blank_lines(self):
        while not self._reader.eof() and not self._reader.peek().strip():
            self._reader.read_line()

    def _check_eof(self):
        if self._reader.eof():
            raise UnexpectedEndOfInput()

    def _syntax_error(self, reason: str = 'Syntax error') -> FeatureSyntaxError:
        return FeatureSyntaxError(self._reader.position(), reason)

    def _next_command(self) -> str:
        """Consume the next line, trimmed; the caller has checked for end-of-input"""
        return self._reader.read_line().strip()

    # Grammar productions

    def _parse_feature(self) -> Feature:
        command = self._next_command()
        if not self.keywords.matches(command, KeywordCategory.FEATURE):
            raise self._syntax_error('Expected a Feature')

        name = self.keywords.strip(command, KeywordCategory.FEATURE)
        feature = Feature(name=name, implementation=self._resolve(name), line_number=self._reader.position())
        self._parse_feature_body(feature)
        return feature

    def _resolve(self, feature_name: str):
        if self.resolve_implementation is None:
            return None
        try:
            return self.resolve_implementation(feature_name)
        except Exception as e:
            logger.warning(f"Could not resolve step definitions for '{feature_name}': {e}")
            return None

    def _parse_feature_body(self, feature: Feature):
        comments_allowed = True

        while not self._reader.eof():
            self._skip_blank_lines()
            if self._reader.eof():
                break

            if self.keywords.matches(self._reader.peek(), KeywordCategory.FEATURE):
                break

            command = self._next_command()
            line_number = self._reader.position()

            if self.keywords.matches(command, KeywordCategory.BACKGROUND):
                self._parse_background(feature, line_number)
                comments_allowed = False
            elif self.keywords.matches(command, KeywordCategory.SCENARIO_OUTLINE):
                outline = ScenarioOutline(
                    name=self.keywords.strip(command, KeywordCategory.SCENARIO_OUTLINE),
                    line_number=line_number
                )
                feature.scenario_outlines.append(outline)
                self._parse_scenario_outline(outline)
                comments_allowed = False
            elif self.keywords.matches(command, KeywordCategory.SCENARIO):
                scenario = Scenario(
                    name=self.keywords.strip(command, KeywordCategory.SCENARIO),
                    line_number=line_number
                )
                feature.scenarios.append(scenario)
                self._parse_scenario(scenario)
                comments_allowed = False
            elif comments_allowed:
                feature.description.append(command)
            else:
                raise self._syntax_error('Unexpected line in feature body')

    def _parse_background(self, feature: Feature, line_number: int):
        if feature.background is not None:
            raise self._syntax_error('Duplicate Background')

        self._skip_blank_lines()
        self._check_eof()

        feature.background = Scenario(name='', line_number=line_number)
        self._parse_chain(feature.background, StepKind.GIVEN)

    def _parse_scenario(self, scenario: Scenario):
        self._skip_blank_lines()
        self._check_eof()

        self._parse_chain(scenario, StepKind.GIVEN)
        self._parse_chain(scenario, StepKind.WHEN)
        self._parse_chain(scenario, StepKind.THEN)

    def _parse_scenario_outline(self, outline: ScenarioOutline):
        self._parse_scenario(outline)
        self._parse_examples(outline)

    def _parse_examples(self, outline: ScenarioOutline):
        self._skip_blank_lines()
        self._check_eof()

        command = self._next_command()
        if not self.keywords.matches(command, KeywordCategory.EXAMPLES):
            raise self._syntax_error('Expected Examples')

        examples = self._try_read_data_table()
        if examples is None:
            raise self._syntax_error('Examples without a table')
        outline.examples = examples

    def _parse_chain(self, scenario: Scenario, kind: StepKind):
        """
        Parse a Given, When or Then section: a primary keyword line followed by any
        number of And lines. Given and When sections must be followed by another line;
        a Then section may end the input.
        """
        primary = CHAIN_KEYWORDS[kind]

        while True:
            command = self._next_command()
            if self.keywords.matches(command, primary):
                text = self.keywords.strip(command, primary)
            elif self.keywords.matches(command, KeywordCategory.AND):
                text = self.keywords.strip(command, KeywordCategory.AND)
            else:
                raise self._syntax_error(f"Expected a {primary.value} step")

            line_number = self._reader.position()
            data_table = self._try_read_data_table()
            doc_string = self._try_read_doc_string()
            scenario.add_step(Step(kind, text, data_table, doc_string, line_number))

            self._skip_blank_lines()
            if self._reader.eof():
                if kind == StepKind.THEN:
                    return
                raise UnexpectedEndOfInput()

            if not self.keywords.matches(self._reader.peek(), KeywordCategory.AND):
                return

    # Embedded blocks

    def _table_in_next_line(self) -> bool:
        return not self._reader.eof() and self._reader.peek().strip().startswith(TABLE_DELIMITER)

    @staticmethod
    def _split_row(line: str) -> List[str]:
        text = line.strip()[len(TABLE_DELIMITER):]
        if text.endswith(TABLE_DELIMITER):
            text = text[:-len(TABLE_DELIMITER)]
        return [cell.strip() for cell in text.split(TABLE_DELIMITER)]

    def _try_read_data_table(self) -> Optional[DataTable]:
        self._skip_blank_lines()
        if not self._table_in_next_line():
            return None

        table = DataTable(header=self._split_row(self._reader.read_line()))
        while self._table_in_next_line():
            row = self._split_row(self._reader.read_line())
            if len(row) != table.width:
                raise self._syntax_error(f"Table row has {len(row)} cells, header has {table.width}")
            table.add_row(row)

        return table

    def _try_read_doc_string(self) -> Optional[str]:
        self._skip_blank_lines()
        if self._reader.eof() or self._reader.peek().strip() != DOC_STRING_MARKER:
            return None

        opening = self._reader.read_line()
        indentation = opening[:opening.index(DOC_STRING_MARKER)]
        lines = []

        while True:
            self._check_eof()
            if self._reader.peek().strip() == DOC_STRING_MARKER:
                break

            line = self._reader.read_line()
            if not line.startswith(indentation):
                raise self._syntax_error('Doc string line is not indented like its opening marker')
            lines.append(line[len(indentation):])

        if not self._reader.read_line().startswith(indentation):
            raise self._syntax_error('Doc string closing marker is not indented like its opening marker')

        return '\n'.join(lines)
