from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
for path in (SRC_ROOT, PROJECT_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture
def fake_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Create an importable package tree under ``tmp_path`` and return its name."""

    name = "rr_fixture_pkg"
    root = tmp_path / name
    (root / "sub").mkdir(parents=True)
    (root / "tests").mkdir()
    (root / "__init__.py").write_text("class Root:\n    pass\n")
    (root / "models.py").write_text(
        "from collections import OrderedDict\n\n"
        "class Beta:\n    pass\n\n"
        "class Alpha:\n    class Inner:\n        pass\n"
    )
    (root / "sub" / "__init__.py").write_text("")
    (root / "sub" / "deep.py").write_text("from ..models import Alpha\n\nclass Deep(Alpha):\n    pass\n")
    (root / "tests" / "__init__.py").write_text("")
    (root / "tests" / "test_x.py").write_text("class TestX:\n    pass\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    yield name
    for module_name in [m for m in sys.modules if m == name or m.startswith(f"{name}.")]:
        del sys.modules[module_name]
