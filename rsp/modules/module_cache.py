from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Set

from rsp.types.module import Module

logger = logging.getLogger(__name__)


class ModuleCache:
    """Canonical path -> loaded Module, for the lifetime of the process.

    Also tracks which paths are currently being loaded so a module that
    requires itself (directly or through others) can be reported instead of
    recursing forever.
    """

    def __init__(self):
        self._modules: Dict[Path, Module] = {}
        self._loading: Set[Path] = set()

    def get(self, path: Path) -> Optional[Module]:
        return self._modules.get(path)

    def insert(self, path: Path, module: Module) -> None:
        logger.debug("Caching module %s", path)
        self._modules[path] = module

    def remove(self, path: Path) -> Optional[Module]:
        return self._modules.pop(path, None)

    def clear(self) -> None:
        self._modules.clear()
        self._loading.clear()

    def is_loading(self, path: Path) -> bool:
        return path in self._loading

    def begin_load(self, path: Path) -> None:
        self._loading.add(path)

    def end_load(self, path: Path) -> None:
        self._loading.discard(path)

    def __contains__(self, path: Path) -> bool:
        return path in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._modules)


# Module-level singleton
_cache: Optional[ModuleCache] = None


def get_module_cache() -> ModuleCache:
    global _cache
    if _cache is None:
        _cache = ModuleCache()
    return _cache
