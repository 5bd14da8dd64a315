import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test (or main()) applied"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_unit(tmp_path):
    """Write lines to a temporary input file and return its path"""

    def _write(name: str, lines: list[str]) -> str:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)

    return _write
