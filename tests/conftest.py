"""Shared fixtures"""
import pytest

from featurespec.parser.feature_parser import FeatureParser
from featurespec.parser.keywords import KeywordDataset


@pytest.fixture(scope="session")
def dataset():
    return KeywordDataset.default()


@pytest.fixture
def parser(dataset):
    return FeatureParser(dataset, 'en')


@pytest.fixture
def parse(parser):
    """Parse text and return (features, result)"""
    def _parse(text):
        features = []
        result = parser.parse(text, features)
        return features, result
    return _parse
