# bundlecache/index.py
from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    cast,
)

from bundlecache.entry import ResourceEntry
from bundlecache.errors import LoadError, LookupFailure
from bundlecache.names import normalize_name, strip_mesh_id_suffix
from bundlecache.providers import ResourceProvider, open_bundle
from bundlecache.settings import IndexSettings
from bundlecache.types import (
    GameObject,
    Material,
    MeshData,
    MeshFilter,
    ShaderSource,
    SkinnedMeshRenderer,
    TypeTag,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceIndex:
    """
    Name-indexed, type-checked view over every resource in one bundle.

    Built once from a provider and read-only afterwards, so lookups are
    safe from any number of reader threads. Names are case-insensitive.
    A name missing from the bundle is retried under its current name when
    the rename table knows it; the type check always applies to whatever
    entry the chain ends on.
    """

    def __init__(
        self,
        entries: Mapping[str, ResourceEntry],
        settings: Optional[IndexSettings] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._table: Mapping[str, ResourceEntry] = MappingProxyType(
            {normalize_name(name): entry for name, entry in entries.items()}
        )
        self._settings = settings or IndexSettings()
        self._logger = log or logger

    @classmethod
    def build(
        cls,
        provider: ResourceProvider,
        settings: Optional[IndexSettings] = None,
        log: Optional[logging.Logger] = None,
    ) -> ResourceIndex:
        """
        Load every resource the provider enumerates.

        When two resources share a normalized name the later one wins.
        Raises LoadError if the provider cannot be read or returns a payload
        that does not match its declared tag.
        """
        log = log or logger
        table: Dict[str, ResourceEntry] = {}

        for path in provider.enumerate_paths():
            loaded = provider.load_by_path(path)

            if not isinstance(loaded.payload, loaded.tag.payload_type):
                raise LoadError(
                    f"{path} declares {loaded.tag} but holds "
                    f"{type(loaded.payload).__name__}"
                )

            key = normalize_name(loaded.name)
            previous = table.get(key)
            if previous is not None:
                log.debug(
                    "Replacing %s %s from %s with %s",
                    previous.tag,
                    key,
                    previous.path,
                    path,
                )

            table[key] = ResourceEntry(loaded.tag, loaded.payload, path)
            log.debug("Loaded %s %s from %s", loaded.tag, loaded.name, path)

        return cls(table, settings=settings, log=log)

    @classmethod
    def from_bundle(
        cls,
        path: str | Path,
        settings: Optional[IndexSettings] = None,
        log: Optional[logging.Logger] = None,
    ) -> ResourceIndex:
        """Open a bundle archive or directory, index it and close it."""
        with open_bundle(path) as provider:
            return cls.build(provider, settings=settings, log=log)

    # LOOKUP
    def try_get(self, name: str, resource_type: Type[T]) -> T | None:
        """
        Quiet probe. Returns None for a missing or mistyped name and never
        logs, for callers that have a fallback plan.
        """
        tag = TypeTag.of(resource_type)
        _, entry = self._resolve(name)
        if entry is None or entry.tag is not tag:
            return None
        return cast(T, entry.payload)

    def get(self, name: str, resource_type: Type[T]) -> T | None:
        """
        Lookup for resources expected to exist. A missing or mistyped name
        is logged as an error and yields None.
        """
        tag = TypeTag.of(resource_type)
        key, entry = self._resolve(name)

        if entry is None:
            self._logger.error(
                "Couldn't find %s %s",
                tag,
                normalize_name(name),
                extra={
                    "lookup_failure": LookupFailure.NOT_FOUND,
                    "resource_name": normalize_name(name),
                    "expected_type": tag,
                },
            )
            return None

        if entry.tag is not tag:
            self._logger.error(
                "Resource %s is %s, not %s",
                key,
                entry.tag,
                tag,
                extra={
                    "lookup_failure": LookupFailure.TYPE_MISMATCH,
                    "resource_name": key,
                    "expected_type": tag,
                    "actual_type": entry.tag,
                },
            )
            return None

        return cast(T, entry.payload)

    def get_mesh(self, name: str) -> MeshData | None:
        """
        Mesh of a prefab, falling back to the "<object>_<id>" naming that
        multi-mesh exports use for their individual meshes.

        The direct lookup is a quiet probe rather than a verbose get, so a
        name served by the fallback logs nothing. Only the fallback lookup
        reports a miss.
        """
        prefab = self.try_get(name, GameObject)
        if prefab is not None:
            skinned = prefab.get_component(SkinnedMeshRenderer)
            if skinned is not None:
                return skinned.shared_mesh

            mesh_filter = prefab.get_component(MeshFilter)
            if mesh_filter is not None:
                return mesh_filter.mesh

            self._logger.error(
                "Game object %s has no mesh component",
                normalize_name(name),
                extra={
                    "lookup_failure": LookupFailure.NOT_FOUND,
                    "resource_name": normalize_name(name),
                    "expected_type": TypeTag.MESH,
                },
            )
            return None

        # TODO: parse multi-digit mesh ids, "chair_12" strips to "chair_".
        base_name = strip_mesh_id_suffix(
            name, self._settings.mesh_id_suffix_length
        )
        if base_name is None:
            self._logger.error(
                "Mesh name %r is too short to carry a mesh id suffix",
                name,
                extra={
                    "lookup_failure": LookupFailure.MALFORMED_NAME,
                    "resource_name": normalize_name(name),
                    "expected_type": TypeTag.GAME_OBJECT,
                },
            )
            return None

        prefab = self.get(base_name, GameObject)
        if prefab is None:
            return None

        mesh_filter = prefab.get_component_in_children(MeshFilter)
        return mesh_filter.mesh if mesh_filter is not None else None

    def get_shader(self, name: str) -> ShaderSource | None:
        """Shader by name, or the shader of the material with that name."""
        shader = self.try_get(name, ShaderSource)
        if shader is not None:
            return shader

        material = self.try_get(name, Material)
        if material is not None:
            return material.shader

        return None

    # INTROSPECTION
    def entry(self, name: str) -> ResourceEntry | None:
        """Entry the name resolves to, renames included, regardless of type."""
        return self._resolve(name)[1]

    def entries(self) -> Mapping[str, ResourceEntry]:
        """Read-only view of the table keyed by normalized name."""
        return self._table

    def names_of(self, resource_type: Type[Any]) -> List[str]:
        tag = TypeTag.of(resource_type)
        return [key for key, entry in self._table.items() if entry.tag is tag]

    @property
    def settings(self) -> IndexSettings:
        return self._settings

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._resolve(name)[1] is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def _resolve(self, name: str) -> Tuple[str, ResourceEntry | None]:
        """
        Follow the rename chain from name until a table hit, a name with no
        rename, or the hop limit. Returns the last key tried and its entry.
        """
        key = normalize_name(name)
        renames = self._settings.renames

        for _ in range(self._settings.max_rename_hops + 1):
            entry = self._table.get(key)
            if entry is not None:
                return key, entry

            renamed = renames.get(key)
            if renamed is None:
                return key, None
            key = renamed

        return key, None
