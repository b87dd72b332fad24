"""Policy tests to keep request code aligned with transaction conventions."""

from __future__ import annotations

from pathlib import Path

from scripts.check_request_transaction_policy import (
    find_violations,
    main,
    request_bounded_files,
)


def test_request_bounded_code_has_no_explicit_commit_or_rollback() -> None:
    """Routes, services and the upsert helpers should not call commit()/rollback()."""
    files = request_bounded_files()
    assert any(path.name == "import_service.py" for path in files)

    violations = find_violations(files)
    assert not violations, (
        "Explicit commit()/rollback() calls found in request-bounded code:\n"
        + "\n".join(sorted(violations))
    )


def test_policy_flags_explicit_commit(tmp_path: Path) -> None:
    offender = tmp_path / "offender.py"
    offender.write_text(
        "async def save(db):\n"
        "    db.add(object())\n"
        "    await db.commit()\n",
        encoding="utf-8",
    )

    assert find_violations([offender]) == [f"{offender}:3"]
    assert main(["check", str(offender)]) == 1


def test_policy_ignores_non_python_files(tmp_path: Path) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("db.commit()\n", encoding="utf-8")

    assert find_violations([notes]) == []
