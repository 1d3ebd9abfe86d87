from pathlib import Path

import pytest


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_path() -> Path:
    return FIXTURES / "sample.xt"


@pytest.fixture
def sample_lines(sample_path):
    return sample_path.read_text(encoding="utf-8").splitlines()
