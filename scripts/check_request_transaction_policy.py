"""Pre-commit helper enforcing request-bounded transaction conventions.

Routes and services open transactions with ``async with db.begin():`` and
never call ``commit()`` or ``rollback()`` themselves. With no arguments the
whole of ``franchise_hub/routes`` and ``franchise_hub/services`` is scanned.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
REQUEST_BOUNDED_ROOTS = (
    REPO_ROOT / "franchise_hub" / "routes",
    REPO_ROOT / "franchise_hub" / "services",
    REPO_ROOT / "franchise_hub" / "utils" / "upsert.py",
)

_FORBIDDEN_ATTRS = {"commit", "rollback"}


def request_bounded_files() -> list[Path]:
    files: list[Path] = []
    for root in REQUEST_BOUNDED_ROOTS:
        if root.is_file():
            files.append(root)
        elif root.is_dir():
            files.extend(sorted(root.rglob("*.py")))
    return files


def find_violations(paths: list[Path]) -> list[str]:
    """Return ``path:line`` for every ``.commit()`` / ``.rollback()`` call."""
    violations: list[str] = []
    for path in paths:
        if path.suffix != ".py":
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if (
                isinstance(node, ast.Call)
                and isinstance(node.func, ast.Attribute)
                and node.func.attr in _FORBIDDEN_ATTRS
            ):
                violations.append(f"{path}:{node.lineno}")
    return violations


def main(argv: list[str]) -> int:
    paths = [Path(arg) for arg in argv[1:]] or request_bounded_files()
    violations = find_violations(paths)
    if not violations:
        return 0

    sys.stderr.write(
        "\n".join(
            [
                "Explicit commit()/rollback() calls are forbidden in request-bounded"
                " code (routes/services). Use `async with db.begin(): ...` instead.",
                "",
                "Violations:",
                *sorted(violations),
                "",
            ]
        )
    )
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
