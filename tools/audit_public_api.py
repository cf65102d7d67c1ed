from __future__ import annotations

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any

REPO_ROOT = Path(__file__).resolve().parents[1]

_SETUP_VERSION = re.compile(r"""version\s*=\s*["']([^"']+)["']""")


def _ensure_repo_root_on_sys_path() -> None:
    # `python tools/<script>.py` puts `tools/` on sys.path[0], not the repo root.
    if str(REPO_ROOT) not in sys.path:
        sys.path.insert(0, str(REPO_ROOT))


def _setup_version() -> str | None:
    setup_py = REPO_ROOT / "setup.py"
    if not setup_py.exists():
        return None
    match = _SETUP_VERSION.search(setup_py.read_text(encoding="utf-8"))
    return match.group(1) if match else None


def audit_public_api() -> list[str]:
    """Return a list of human-readable issues with the public API.

    Checks that every name in `pixelite.__all__` resolves, that every lazy
    export is listed in `__all__`, and that `__version__` matches setup.py.
    """

    _ensure_repo_root_on_sys_path()
    import pixelite

    issues: list[str] = []
    names = list(getattr(pixelite, "__all__", []))
    for name in names:
        try:
            getattr(pixelite, name)
        except Exception as exc:  # noqa: BLE001 - tool boundary
            issues.append(f"{name}: {exc}")

    lazy = dict(getattr(pixelite, "_LAZY_EXPORTS", {}))
    for name in sorted(set(lazy) - set(names)):
        issues.append(f"{name}: lazy export missing from __all__")

    expected = _setup_version()
    actual = getattr(pixelite, "__version__", None)
    if expected is not None and actual != expected:
        issues.append(f"__version__ {actual!r} does not match setup.py version {expected!r}")
    return issues


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="audit_public_api")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    args = parser.parse_args(argv)

    issues = audit_public_api()
    ok = not issues

    if bool(args.json):
        payload: dict[str, Any] = {"ok": bool(ok), "issues": list(issues)}
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        if ok:
            print("OK: pixelite public API looks consistent.")
        else:
            print("ERROR: pixelite public API issues detected:", file=sys.stderr)
            for issue in issues:
                print(f"- {issue}", file=sys.stderr)

    return 0 if ok else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
