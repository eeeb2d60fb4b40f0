"""Unit tests for localized keyword tables"""
import pytest

from featurespec.parser.errors import KeywordDatasetError, UnknownLanguageError
from featurespec.parser.keywords import KeywordCategory, KeywordDataset, KeywordTable


def test_default_dataset_languages(dataset):
    assert {'en', 'ru', 'de', 'fr', 'es'} <= set(dataset.languages())
    assert 'en' in dataset
    assert 'xx' not in dataset


def test_unknown_language_fails_on_load(dataset):
    with pytest.raises(UnknownLanguageError) as exc_info:
        KeywordTable.load(dataset, 'xx')

    assert exc_info.value.language == 'xx'
    assert 'en' in exc_info.value.available


def test_matches_is_case_insensitive_and_left_trimmed(dataset):
    table = KeywordTable.load(dataset, 'en')

    assert table.matches("   given a number", KeywordCategory.GIVEN)
    assert table.matches("GIVEN a number", KeywordCategory.GIVEN)
    assert not table.matches("When a number", KeywordCategory.GIVEN)


def test_strip_removes_keyword_and_whitespace(dataset):
    table = KeywordTable.load(dataset, 'en')

    assert table.strip("  Feature:   Math  ", KeywordCategory.FEATURE) == "Math"
    assert table.strip("And then some", KeywordCategory.AND) == "then some"
    assert table.strip("Nothing here", KeywordCategory.GIVEN) == ""


def test_first_registered_candidate_wins():
    dataset = KeywordDataset.from_dict({'xx': {'Given': ['Given that', 'Given']}})
    table = KeywordTable.load(dataset, 'xx')

    assert table.strip("Given that it rains", KeywordCategory.GIVEN) == "it rains"
    assert table.strip("Given rain", KeywordCategory.GIVEN) == "rain"


def test_missing_category_never_matches():
    dataset = KeywordDataset.from_dict({'xx': {'Feature': 'Feature:'}})
    table = KeywordTable.load(dataset, 'xx')

    assert table.candidates(KeywordCategory.EXAMPLES) == ()
    assert not table.matches("Examples:", KeywordCategory.EXAMPLES)


def test_localized_prefixes(dataset):
    table = KeywordTable.load(dataset, 'ru')

    assert table.matches("Дано число 2", KeywordCategory.GIVEN)
    assert table.strip("Дано число 2", KeywordCategory.GIVEN) == "число 2"
    assert table.strip("Структура сценария: Сумма", KeywordCategory.SCENARIO_OUTLINE) == "Сумма"


@pytest.mark.parametrize("data", [
    ['not', 'a', 'mapping'],
    {'xx': ['Feature:']},
    {'xx': {'Story': ['Story:']}},
    {'xx': {'Given': ['']}},
    {'xx': {'Given': [42]}},
    {'xx': {'Given': {'a': 'b'}}},
])
def test_invalid_dataset_is_rejected(data):
    with pytest.raises(KeywordDatasetError):
        KeywordDataset.from_dict(data)


def test_from_yaml(tmp_path):
    path = tmp_path / "languages.yaml"
    path.write_text("pl:\n  Feature: ['Właściwość:']\n  Given: ['Zakładając', 'Mając']\n", encoding="utf-8")

    dataset = KeywordDataset.from_yaml(path)
    table = KeywordTable.load(dataset, 'pl')

    assert dataset.languages() == ['pl']
    assert table.strip("Mając konto", KeywordCategory.GIVEN) == "konto"
