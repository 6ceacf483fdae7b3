"""
Shared fixtures: small parts exports written to tmp_path.
"""
from pathlib import Path

import pytest

from parts_api.data.loader import load_parts
from parts_api.main import create_app

SAMPLE_CSV = (
    "serial,name,price\n"
    "A1,Widget,10\n"
    "a2,Gadget,5\n"
)


def write_source(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def source_file(tmp_path):
    return write_source(tmp_path / "LE.txt", SAMPLE_CSV)


@pytest.fixture
def snapshot(source_file):
    return load_parts(source_file)


@pytest.fixture
def client(source_file):
    from fastapi.testclient import TestClient

    app = create_app(source=source_file, watch=False)
    with TestClient(app) as c:
        yield c
