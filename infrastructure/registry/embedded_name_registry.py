"""
Embedded implementation of NameRegistryProvider.

Canonical names ship with the package as one YAML dictionary per category
under ``infrastructure/dictionaries``:

    category: type
    names:
      - "bug"
      - "dark"
      ...

Each registry is read at most once per provider. The first caller for a
category builds it under a lock; everyone after that gets the same
immutable NameRegistry without locking.

A dictionary with an empty or missing ``names`` list is treated as a
packaging defect and raises DictionaryLoadError on first load. Every shipped
category has at least one name, so an empty file can only mean a broken
build. An empty NameRegistry from another provider is still valid: every
query against it resolves as not found.
"""
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from application.exceptions import DictionaryLoadError
from domain.models.category import Category
from domain.models.registry import NameRegistry

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARIES_DIR = Path(__file__).resolve().parents[1] / "dictionaries"


class EmbeddedNameRegistry:
    """
    Reads canonical name registries from the YAML dictionaries in the package.

    Implements the NameRegistryProvider protocol.
    """

    def __init__(self, dictionaries_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            dictionaries_dir: Directory holding ``<category>.yaml`` files.
                Defaults to the dictionaries embedded in the package.
        """
        self._dir = Path(dictionaries_dir) if dictionaries_dir else DEFAULT_DICTIONARIES_DIR
        self._registries: Dict[Category, NameRegistry] = {}
        self._build_counts: Dict[Category, int] = {c: 0 for c in Category}
        self._lock = threading.Lock()

    @property
    def dictionaries_dir(self) -> Path:
        return self._dir

    def build_count(self, category: Category) -> int:
        """How many times the registry for ``category`` has been built."""
        return self._build_counts[category]

    def load(self, category: Category) -> NameRegistry:
        registry = self._registries.get(category)
        if registry is not None:
            return registry

        with self._lock:
            registry = self._registries.get(category)
            if registry is None:
                registry = self._build(category)
                self._registries[category] = registry
            return registry

    def path_for(self, category: Category) -> Path:
        return self._dir / f"{category.dictionary_name}.yaml"

    def _build(self, category: Category) -> NameRegistry:
        path = self.path_for(category)
        names = self._read_names(path, category)
        registry = NameRegistry(category, names)
        self._build_counts[category] += 1
        logger.debug(f"Built {category.value} registry with {len(registry)} names from {path}")
        return registry

    @staticmethod
    def _read_names(path: Path, category: Category) -> List[str]:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DictionaryLoadError(path, f"cannot be read ({e})") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DictionaryLoadError(path, f"is not valid YAML ({e})") from e

        if not isinstance(data, dict):
            raise DictionaryLoadError(path, "top level must be a mapping")

        declared = data.get("category")
        if declared != category.value:
            raise DictionaryLoadError(
                path, f"declares category {declared!r}, expected {category.value!r}"
            )

        names = data.get("names")
        if not isinstance(names, list) or not names:
            raise DictionaryLoadError(path, "'names' must be a non-empty list")

        for name in names:
            if not isinstance(name, str) or not name or name != name.strip().lower() or " " in name:
                raise DictionaryLoadError(path, f"invalid name {name!r}")

        # Shipped dictionaries are kept sorted so diffs stay reviewable
        for previous, current in zip(names, names[1:]):
            if previous >= current:
                raise DictionaryLoadError(
                    path, f"names must be sorted and unique ({previous!r} before {current!r})"
                )

        return names
