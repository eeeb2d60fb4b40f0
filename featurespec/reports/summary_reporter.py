"""
Summary reports of parsed features
"""

import json
import os
from datetime import datetime
from typing import List, Optional

from jinja2 import Template

from featurespec.parser.errors import ParseResult
from featurespec.parser.model import Feature
from featurespec.utils.logger import setup_logger

logger = setup_logger(__name__)

TEXT_TEMPLATE = """\
Feature summary ({{ language }}) - {{ timestamp }}
{{ total_features }} features, {{ total_scenarios }} scenarios, {{ total_outlines }} outlines, {{ total_steps }} steps
{% for feature in features %}
Feature: {{ feature.name }}{% if feature.file_path %}  [{{ feature.file_path }}]{% endif %}
{%- if feature.background %}
  Background ({{ feature.background.steps|length }} steps)
{%- endif %}
{%- for scenario in feature.all_scenarios() %}
  {% if scenario.examples is defined %}Scenario Outline{% else %}Scenario{% endif %}: {{ scenario.name }}
  {%- for step in scenario.steps %}
    {{ step.kind.value|capitalize }} {{ step.text }}
    {%- if step.data_table %}  ({{ step.data_table.rows|length }} table rows){% endif %}
    {%- if step.doc_string is not none %}  (doc string){% endif %}
  {%- endfor %}
  {%- if scenario.examples is defined and scenario.examples %}
    Examples: {{ scenario.examples.rows|length }} rows
  {%- endif %}
{%- endfor %}
{% endfor %}
{%- if failures %}
Rejected ({{ failures|length }}):
{%- for failure in failures %}
  {{ failure.describe() }}
{%- endfor %}
{% endif %}
"""


class SummaryReporter:
    """Render parsed features as a text or JSON summary"""

    def __init__(self, language: str = 'en'):
        self.language = language

    def render_text(self, features: List[Feature], results: Optional[List[ParseResult]] = None) -> str:
        scenarios = [s for f in features for s in f.scenarios]
        outlines = [o for f in features for o in f.scenario_outlines]

        template = Template(TEXT_TEMPLATE)
        return template.render(
            language=self.language,
            timestamp=datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            features=features,
            failures=[r for r in results or [] if not r.ok],
            total_features=len(features),
            total_scenarios=len(scenarios),
            total_outlines=len(outlines),
            total_steps=sum(len(s.steps) for s in scenarios + outlines),
        )

    def render_json(self, features: List[Feature], results: Optional[List[ParseResult]] = None) -> str:
        failures = [
            {
                'source': r.source_name,
                'kind': r.error.kind,
                'line': r.error.line,
                'message': str(r.error),
            }
            for r in results or [] if not r.ok
        ]
        return json.dumps({
            'language': self.language,
            'features': [feature.to_dict() for feature in features],
            'failures': failures,
        }, indent=2, ensure_ascii=False)

    def render(self, features: List[Feature], results: Optional[List[ParseResult]] = None,
               report_format: str = 'text') -> str:
        if report_format == 'json':
            return self.render_json(features, results)
        return self.render_text(features, results)

    def generate_report(self, features: List[Feature], output_path: str,
                        results: Optional[List[ParseResult]] = None, report_format: str = 'text') -> str:
        """Write the summary to a file and return its path"""
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.render(features, results, report_format))

        logger.info(f"Report generated: {output_path}")
        return output_path
