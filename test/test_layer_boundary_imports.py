import ast
import unittest
from pathlib import Path

# Modules that make up the pure rendering core.
CORE_MODULES = ("levels.py", "record.py", "renderer.py")


def _find_forbidden_imports(py_file: Path, forbidden_roots: tuple[str, ...]) -> list[str]:
    """
    Static guardrail: the pure renderer must not pick up I/O or logging machinery.

    We use AST parsing (not regex) to avoid false positives from comments/strings.
    """
    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except SyntaxError as exc:
        return [f"SyntaxError while parsing {py_file}: {exc}"]

    offenders: list[str] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                name = alias.name
                if name.split(".")[0] in forbidden_roots:
                    offenders.append(f"import {name}")
        elif isinstance(node, ast.ImportFrom):
            if node.module is None:
                continue
            mod = node.module
            if mod.split(".")[0] in forbidden_roots or mod in forbidden_roots:
                offenders.append(f"from {mod} import ...")

    return offenders


class TestLayerBoundaryImports(unittest.TestCase):
    def test_core_does_no_io(self) -> None:
        repo_root = Path(__file__).resolve().parents[1]
        pkg_root = repo_root / "backend" / "line_formatter"
        self.assertTrue(pkg_root.exists(), msg=f"Expected package dir: {pkg_root}")

        forbidden = ("logging", "sys", "os", "io", "yaml", "threading")
        violations: list[str] = []
        for name in CORE_MODULES:
            py_file = pkg_root / name
            offenders = _find_forbidden_imports(py_file, forbidden)
            if offenders:
                violations.append(f"{py_file.relative_to(repo_root)}: {offenders}")

        self.assertFalse(
            violations,
            msg=(
                "Rendering core must stay free of I/O and logging imports; "
                "stdlib integration belongs in `formatter.py` / `logging_setup.py`.\n"
                + "\n".join(violations)
            ),
        )

    def test_core_does_not_import_bridge(self) -> None:
        repo_root = Path(__file__).resolve().parents[1]
        pkg_root = repo_root / "backend" / "line_formatter"

        forbidden = (
            "line_formatter.formatter",
            "line_formatter.event_logger",
            "line_formatter.logging_setup",
        )
        violations: list[str] = []
        for name in CORE_MODULES:
            py_file = pkg_root / name
            tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
            for node in ast.walk(tree):
                if isinstance(node, ast.ImportFrom) and node.module in forbidden:
                    violations.append(f"{py_file.relative_to(repo_root)}: from {node.module}")

        self.assertFalse(violations, msg="\n".join(violations))


if __name__ == "__main__":
    unittest.main()
