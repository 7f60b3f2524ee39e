"""
YAML loader with per-path caching for ordering-rules files.

Usage::

    from schemabuilder.ordering.loader import OrderingRulesLoader

    spec = OrderingRulesLoader().load(Path("ordering.yaml"))
    spec = OrderingRulesLoader().load_from_string(text)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, ClassVar, Union

import yaml

from schemabuilder.ordering.schema import OrderingRulesSpec

logger = logging.getLogger(__name__)


def _parse(raw: Any, source: str) -> OrderingRulesSpec:
    if not isinstance(raw, dict):
        raise TypeError(
            f"Expected a YAML mapping in {source}, got {type(raw).__name__}"
        )
    return OrderingRulesSpec.model_validate(raw)


class OrderingRulesLoader:
    """Loads ordering-rules files, caching each by resolved path."""

    _cache: ClassVar[dict[str, OrderingRulesSpec]] = {}

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the rules cache (useful in tests)."""
        cls._cache.clear()

    def load(self, path: Union[str, Path]) -> OrderingRulesSpec:
        """Load and validate a rules file.

        Raises:
            FileNotFoundError: If the file does not exist.
            TypeError: If the YAML root is not a mapping.
            yaml.YAMLError: If the file contains invalid YAML.
            pydantic.ValidationError: If the rules do not match the schema.
        """
        path = Path(path)
        key = str(path.resolve())
        if key in self._cache:
            logger.debug("Ordering rules cache hit: %s", key)
            return self._cache[key]

        if not path.exists():
            raise FileNotFoundError(f"Ordering rules file not found: {path}")

        with open(path, encoding="utf-8") as fh:
            spec = _parse(yaml.safe_load(fh), str(path))

        self._cache[key] = spec
        logger.debug(
            "Loaded ordering rules: %s, rules=%d, end=%d",
            key,
            len(spec.rules),
            len(spec.end),
        )
        return spec

    def load_from_string(self, yaml_str: str) -> OrderingRulesSpec:
        """Load rules from a YAML string; never cached."""
        return _parse(yaml.safe_load(yaml_str), "string")
