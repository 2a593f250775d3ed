from __future__ import annotations

"""
Installed-package smoke test.

Validates an installed `line-formatter` (not the repo checkout): the public
names resolve and a sample record renders to the expected bytes. No files or
network are touched.
"""

from datetime import datetime
from pathlib import Path
import os
import sys
import tempfile


def main() -> None:
    # Ensure we don't accidentally import from the repo checkout (cwd or repo root).
    repo_root = Path(__file__).resolve().parents[1]
    orig_cwd = os.getcwd()
    orig_sys_path = list(sys.path)
    try:
        with tempfile.TemporaryDirectory() as tmpdir:
            os.chdir(tmpdir)
            sys.path = [
                p
                for p in sys.path
                if p
                and p != str(repo_root)
                and Path(p).resolve() != repo_root
                and Path(p).resolve() != repo_root / "backend"
            ]

            import line_formatter

            for name in line_formatter.__all__:
                getattr(line_formatter, name)

            record = line_formatter.LogRecord(
                timestamp=datetime(2024, 1, 1, 10, 30, 0),
                level=line_formatter.Level.INFO,
                message=" starting up ",
                fields={"user": "alice", "id": 42},
            )
            config = line_formatter.FormatterConfig(field_order=["id"], no_colors=True)
            got = line_formatter.render(record, config)
            want = b"[10:30:00] [INFO] [id:42] [user:alice] starting up\n"
            if got != want:
                raise SystemExit(f"Unexpected render output: {got!r} != {want!r}")

            print("OK: line_formatter imports and renders")
    finally:
        os.chdir(orig_cwd)
        sys.path = orig_sys_path


if __name__ == "__main__":
    main()
