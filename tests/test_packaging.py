from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _names(requirements):
    return {req.split(">")[0].split("=")[0].split("[")[0].strip() for req in requirements}


def test_runtime_and_test_dependencies_are_split():
    project = tomllib.loads(PYPROJECT.read_text())["project"]
    runtime = _names(project["dependencies"])
    test_extra = _names(project["optional-dependencies"]["test"])

    assert "botocore" in runtime
    assert "httpx" not in runtime
    assert {"httpx", "pytest"} <= test_extra
