"""Optional dependency helpers.

Decoding backends are imported lazily so that `import pixelite` (and the
pure-numpy transcoder) work even when a backend library is missing.
"""

from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import Optional, Tuple


_PIP_NAME_OVERRIDES = {
    # Common module ↔ pip package mismatches.
    "cv2": "opencv-python",
    "PIL": "Pillow",
    "yaml": "PyYAML",
}


def optional_import(module_name: str) -> Tuple[Optional[ModuleType], Optional[BaseException]]:
    """Attempt to import a module, returning (module, error)."""

    try:
        return import_module(module_name), None
    except Exception as exc:  # noqa: BLE001 - return import error without swallowing BaseException
        return None, exc


def require(module_name: str, *, extra: Optional[str] = None, purpose: Optional[str] = None) -> ModuleType:
    """Import `module_name`, raising a clean ImportError with install hint if missing."""

    module, error = optional_import(module_name)
    if module is not None:
        return module

    hint = None
    if extra:
        hint = f"pip install 'pixelite[{extra}]'"
    else:
        root = str(module_name).split(".", 1)[0]
        pip_target = _PIP_NAME_OVERRIDES.get(root, root)
        hint = f"pip install '{pip_target}'"

    context = f" for {purpose}" if purpose else ""
    raise ImportError(
        f"Optional dependency '{module_name}' is required{context}.\n"
        f"Install it via:\n  {hint}\n"
        f"Original error: {error}"
    ) from error


class LazyModule:
    """Single-assignment handle to a lazily imported module.

    Concurrent first calls may both run `require`; the first handle stored
    wins and every later call observes that same handle.
    """

    def __init__(self, module_name: str, *, extra: Optional[str] = None, purpose: Optional[str] = None) -> None:
        self.module_name = str(module_name)
        self.extra = extra
        self.purpose = purpose
        self._module: Optional[ModuleType] = None

    @property
    def loaded(self) -> bool:
        return self._module is not None

    def get(self) -> ModuleType:
        module = self._module
        if module is not None:
            return module

        module = require(self.module_name, extra=self.extra, purpose=self.purpose)
        if self._module is None:
            self._module = module
        return self._module

    def __repr__(self) -> str:
        state = "loaded" if self.loaded else "pending"
        return f"LazyModule({self.module_name!r}, {state})"
