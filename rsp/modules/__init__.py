from rsp.modules.module_cache import ModuleCache, get_module_cache
from rsp.modules.module_loader import load_module, require, resolve_module_path

__all__ = [
    "ModuleCache",
    "get_module_cache",
    "load_module",
    "require",
    "resolve_module_path",
]
