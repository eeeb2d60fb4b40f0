"""featurespec - parser for localized Gherkin-style feature documents"""
from featurespec.parser import (
    DataTable,
    Feature,
    FeatureParser,
    FeatureSyntaxError,
    KeywordDataset,
    ParseError,
    ParseResult,
    Scenario,
    ScenarioOutline,
    Step,
    StepKind,
    UnexpectedEndOfInput,
    UnknownLanguageError,
)

__version__ = "1.0.0"
