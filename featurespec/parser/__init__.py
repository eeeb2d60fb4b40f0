"""Feature document parsing"""
from featurespec.parser.errors import (
    CursorExhaustedError,
    FeatureSyntaxError,
    KeywordDatasetError,
    ParseError,
    ParseResult,
    UnexpectedEndOfInput,
    UnknownLanguageError,
)
from featurespec.parser.feature_loader import FeatureLoader, LoadReport
from featurespec.parser.feature_parser import FeatureParser
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
from featurespec.parser.step_registry import StepRegistry, default_registry, step_definitions
