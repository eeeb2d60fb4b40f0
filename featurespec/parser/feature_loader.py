"""Load and parse feature files from disk"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from featurespec.parser.errors import ParseResult
from featurespec.parser.feature_parser import FeatureParser
from featurespec.parser.model import Feature
from featurespec.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class LoadReport:
    features: List[Feature] = field(default_factory=list)
    results: List[ParseResult] = field(default_factory=list)

    @property
    def failures(self) -> List[ParseResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


class FeatureLoader:
    """Parse every feature file below a directory"""

    def __init__(self, parser: FeatureParser, pattern: str = "**/*.feature"):
        self.parser = parser
        self.pattern = pattern

    def find_files(self, features_dir: Union[str, Path]) -> List[Path]:
        features_dir = Path(features_dir)
        if features_dir.is_file():
            return [features_dir]
        if not features_dir.is_dir():
            logger.warning(f"Features directory not found: {features_dir}")
            return []
        return sorted(features_dir.glob(self.pattern))

    def load(self, features_dir: Union[str, Path]) -> LoadReport:
        """Parse all matching files; a rejected file does not stop the others"""
        report = LoadReport()

        for feature_file in self.find_files(features_dir):
            result = self.parser.parse_file(feature_file, report.features)
            report.results.append(result)

        logger.info(f"Loaded {len(report.features)} features from {len(report.results)} files "
                    f"({len(report.failures)} rejected)")
        return report
