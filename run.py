#!/usr/bin/env python3
"""
featurespec - parse localized Gherkin-style feature files
Main entry point: parses a features directory and prints a summary
"""

import sys

import click

from featurespec import __version__
from featurespec.core.config_manager import ConfigManager
from featurespec.parser.errors import KeywordDatasetError
from featurespec.parser.feature_loader import FeatureLoader
from featurespec.parser.feature_parser import FeatureParser
from featurespec.parser.keywords import KeywordDataset
from featurespec.parser.step_registry import default_registry
from featurespec.reports.summary_reporter import SummaryReporter
from featurespec.utils.logger import set_level, setup_logger

# Initialize logger
logger = setup_logger(__name__)


def load_dataset(languages_file=None) -> KeywordDataset:
    if languages_file:
        return KeywordDataset.from_yaml(languages_file)
    return KeywordDataset.default()


@click.command()
@click.option('--features', '-f', default=None, help='Feature file or directory (default: features.dir from config)')
@click.option('--lang', '-l', default=None, help='Keyword language code (default: parser.language from config)')
@click.option('--config', '-c', default='config/config.yaml', help='Path to config file')
@click.option('--env', '-e', default='dev', help='Configuration environment')
@click.option('--format', 'report_format', type=click.Choice(['text', 'json']), default=None,
              help='Summary format')
@click.option('--output', '-o', default=None, help='Write the summary to this file instead of stdout')
@click.option('--list-languages', is_flag=True, help='List the available keyword languages and exit')
def main(features, lang, config, env, report_format, output, list_languages):
    """
    Parse feature files and report their structure

    Examples:
        # Parse the configured features directory
        python run.py

        # Parse Russian feature files as JSON
        python run.py --features specs/ru --lang ru --format json
    """
    try:
        config_manager = ConfigManager(config, env)
        config_manager.load_config()
        set_level(config_manager.get('logging.level', 'INFO'))

        dataset = load_dataset(config_manager.get('parser.languages_file'))
        if list_languages:
            for code in dataset.languages():
                click.echo(code)
            return

        language = lang or config_manager.get('parser.language', 'en')
        features_dir = features or config_manager.get('features.dir', 'features')
        report_format = report_format or config_manager.get('report.format', 'text')

        logger.info(f"featurespec v{__version__}, language: {language}")

        default_registry.register_from_config(config_manager.get('step_definitions', {}))

        parser = FeatureParser(dataset, language, resolve_implementation=default_registry.resolve)
        loader = FeatureLoader(parser, config_manager.get('features.pattern', '**/*.feature'))
        report = loader.load(features_dir)

        reporter = SummaryReporter(language)
        if output:
            reporter.generate_report(report.features, output, report.results, report_format)
        else:
            click.echo(reporter.render(report.features, report.results, report_format))

    except KeywordDatasetError as e:
        logger.error(f"Keyword configuration error: {e}")
        sys.exit(2)

    if not report.ok:
        for failure in report.failures:
            logger.error(failure.describe())
        sys.exit(1)


if __name__ == '__main__':
    main()
