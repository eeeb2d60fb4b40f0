"""
Step definition registry
Maps a feature name to the object that implements its steps
"""

import importlib
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from featurespec.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class StepDefinitions:
    """Represents a registered step implementation"""
    feature_name: str
    handle: Any
    source: str = 'code'


class StepRegistry:
    """Feature name -> step implementation lookup, case-insensitive"""

    def __init__(self):
        self._definitions: Dict[str, StepDefinitions] = {}

    @staticmethod
    def _key(feature_name: str) -> str:
        return feature_name.strip().lower()

    def register(self, feature_name: str, handle: Any, source: str = 'code'):
        """Register the implementation for a feature"""
        key = self._key(feature_name)
        if key in self._definitions:
            logger.warning(f"Replacing step definitions for feature: {feature_name}")
        self._definitions[key] = StepDefinitions(feature_name, handle, source)
        logger.info(f"Registered step definitions: {feature_name} -> {getattr(handle, '__name__', handle)}")

    def step_definitions(self, feature_name: str) -> Callable:
        """Class decorator form of register()"""
        def decorator(handle):
            self.register(feature_name, handle)
            return handle
        return decorator

    def register_from_config(self, mappings: Dict[str, str]):
        """Register handles given as {feature name: 'package.module.Attribute'}"""
        for feature_name, target in (mappings or {}).items():
            module_name, _, attribute = target.rpartition('.')
            if not module_name:
                raise ValueError(f"Step definitions for '{feature_name}' must be a dotted path, got '{target}'")

            module = importlib.import_module(module_name)
            self.register(feature_name, getattr(module, attribute), source=target)

    def resolve(self, feature_name: str) -> Optional[Any]:
        """Implementation handle for a feature, or None"""
        definitions = self._definitions.get(self._key(feature_name))
        return definitions.handle if definitions else None

    def registered_features(self) -> List[str]:
        return sorted(d.feature_name for d in self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


default_registry = StepRegistry()
step_definitions = default_registry.step_definitions
