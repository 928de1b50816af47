from pathlib import Path

import pytest

SAMPLE_HEADER = "FirstName,LastName,Address,PhoneNumber"

SAMPLE_LINES = [
    "Jimmy,Smith,102 Long Lane,29384857",
    "Clive,Owen,65 Ambling Way,31214788",
    "James,Brown,82 Stewart St,32114566",
    "Graham,Howe,12 Howard St,8766556",
    "John,Howe,78 Short Lane,29384857",
    "Clive,Smith,49 Sutherland St,31214788",
    "James,Owen,8 Crimson Rd,32114566",
    "Graham,Brown,94 Roland St,8766556",
]


def write_source(path: Path, header: str, lines: list[str]) -> Path:
    path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def sample_source(tmp_path: Path) -> Path:
    """Source file with the eight sample people in canonical column order."""
    return write_source(tmp_path / "data.csv", SAMPLE_HEADER, SAMPLE_LINES)


@pytest.fixture()
def reordered_source(tmp_path: Path) -> Path:
    """Same people with the header columns in a different order."""
    lines = []
    for line in SAMPLE_LINES:
        first, last, address, phone = line.split(",")
        lines.append(",".join([phone, address, last, first]))
    return write_source(
        tmp_path / "reordered.csv", "PhoneNumber,Address,LastName,FirstName", lines
    )


@pytest.fixture()
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)


@pytest.fixture()
def source_factory(tmp_path: Path):
    """Write an arbitrary source file under tmp_path and return its path."""

    def _write(content: str, name: str = "source.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
