"""
Directory importer feeding fragments and ordering rules into a builder.

Only top-level regular files whose extension is whitelisted are visited,
in sorted filename order.  The file's base name (without extension) is
the identifier for everything the unit contributes.

Python units (``.py``) may export any of::

    definitions = "type User { id: ID! }"   # str or pre-parsed document
    resolvers = {"User": {...}}              # mapping
    directives = {"upper": ...}              # mapping
    after = ["Node"]                         # str or list of str
    before = "Admin"
    start = False
    end = False

SDL units (``.graphql`` / ``.gql``) contribute their text as definitions.

Usage::

    from schemabuilder.importer import FragmentImporter

    FragmentImporter(builder).import_from("schema/", [".py", ".graphql"])
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

from schemabuilder.errors import DuplicateIdentifierError, FragmentImportError
from schemabuilder.types import FragmentKind

if TYPE_CHECKING:
    from schemabuilder.builder import SchemaBuilder

logger = logging.getLogger(__name__)

SDL_EXTENSIONS = frozenset({".graphql", ".gql"})

_MODULE_PREFIX = "_schemabuilder_units"


@dataclass
class ImportedUnit:
    """What a single file contributes, before registration."""

    identifier: str
    path: Path
    definitions: Any = None
    resolvers: Optional[Mapping[str, Any]] = None
    directives: Optional[Mapping[str, Any]] = None
    after: list[str] = field(default_factory=list)
    before: list[str] = field(default_factory=list)
    start: bool = False
    end: bool = False

    @property
    def is_empty(self) -> bool:
        return self.definitions is None and self.resolvers is None and self.directives is None


class FragmentImporter:
    """Walks a directory and registers each unit with a ``SchemaBuilder``."""

    def __init__(self, builder: "SchemaBuilder") -> None:
        self._builder = builder

    def import_from(
        self,
        path: Union[str, Path],
        extensions: Iterable[str] = (".py",),
    ) -> int:
        """Import all units in ``path``.

        A missing directory imports nothing.

        Returns:
            Number of units that contributed at least one fragment.

        Raises:
            DuplicateIdentifierError: If a unit's base name is already known.
            FragmentImportError: If a unit cannot be loaded or exports a
                value of the wrong type.
        """
        root = Path(path).resolve()
        if not root.is_dir():
            logger.warning("Import path does not exist or is not a directory: %s", root)
            return 0

        wanted = set(extensions)
        imported = 0
        for entry in sorted(root.iterdir(), key=lambda p: p.name):
            if entry.suffix not in wanted or not entry.is_file():
                continue
            if self._builder.has_any(entry.stem):
                raise DuplicateIdentifierError(entry.stem)
            unit = self.read_unit(entry)
            if unit.is_empty:
                logger.debug("Skipping %s: no definitions, resolvers or directives", entry.name)
                continue
            self._register(unit)
            imported += 1

        logger.info("Imported %d unit(s) from %s", imported, root)
        return imported

    def read_unit(self, path: Path) -> ImportedUnit:
        if path.suffix in SDL_EXTENSIONS:
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise FragmentImportError(str(path), str(exc)) from exc
            return ImportedUnit(identifier=path.stem, path=path, definitions=text)
        module = _load_module(path)
        try:
            return self._unit_from_module(path, module)
        finally:
            # Units are loaded once; the module entry is not kept.
            sys.modules.pop(module.__name__, None)

    def _unit_from_module(self, path: Path, module: ModuleType) -> ImportedUnit:
        unit = ImportedUnit(identifier=path.stem, path=path)
        unit.definitions = getattr(module, "definitions", None)
        unit.resolvers = _mapping_export(path, module, "resolvers")
        unit.directives = _mapping_export(path, module, "directives")
        unit.after = _identifiers_export(path, module, "after")
        unit.before = _identifiers_export(path, module, "before")
        unit.start = _flag_export(path, module, "start")
        unit.end = _flag_export(path, module, "end")
        return unit

    def _register(self, unit: ImportedUnit) -> None:
        b = self._builder
        if unit.definitions is not None:
            b.register(FragmentKind.DEFINITIONS, unit.identifier, unit.definitions)
        if unit.resolvers is not None:
            b.register(FragmentKind.RESOLVERS, unit.identifier, unit.resolvers)
        if unit.directives is not None:
            b.register(FragmentKind.DIRECTIVES, unit.identifier, unit.directives)
        b.after(unit.identifier, *unit.after)
        b.before(unit.identifier, *unit.before)
        if unit.start:
            b.start(unit.identifier)
        if unit.end:
            b.end(unit.identifier)
        logger.debug("Registered unit '%s' from %s", unit.identifier, unit.path.name)


def _load_module(path: Path) -> ModuleType:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    name = f"{_MODULE_PREFIX}_{path.stem}_{digest}"
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise FragmentImportError(str(path), "not a loadable Python module")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(name, None)
        raise FragmentImportError(str(path), f"{type(exc).__name__}: {exc}") from exc
    return module


def _mapping_export(path: Path, module: ModuleType, name: str) -> Optional[Mapping[str, Any]]:
    value = getattr(module, name, None)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise FragmentImportError(
            str(path), f"'{name}' must be a mapping, got {type(value).__name__}"
        )
    return value


def _flag_export(path: Path, module: ModuleType, name: str) -> bool:
    value = getattr(module, name, False)
    if not isinstance(value, bool):
        raise FragmentImportError(
            str(path), f"'{name}' must be a bool, got {type(value).__name__}"
        )
    return value


def _identifiers_export(path: Path, module: ModuleType, name: str) -> list[str]:
    value = getattr(module, name, None)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    try:
        ids = list(value)
    except TypeError:
        raise FragmentImportError(
            str(path), f"'{name}' must be a string or a list of strings"
        ) from None
    if not all(isinstance(i, str) for i in ids):
        raise FragmentImportError(str(path), f"'{name}' must contain only strings")
    return ids
