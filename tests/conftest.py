from __future__ import annotations

from pathlib import Path
from typing import Generator, List, Optional

import pytest

from ls_crates.models import CrateInfo
from ls_crates.utils.console import reconfigure_console
from ls_crates.utils.logger import disable_logging


class FakeSource:
    """In-memory metadata source recording every query."""

    def __init__(
        self,
        crates: Optional[List[CrateInfo]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.crates = list(crates or [])
        self.error = error
        self.calls: List[Path] = []

    def resolve_dependencies(self, project_dir: Path) -> List[CrateInfo]:
        self.calls.append(project_dir)
        if self.error is not None:
            raise self.error
        return list(self.crates)


@pytest.fixture
def sample_crates() -> List[CrateInfo]:
    """The two-crate project used by the end-to-end scenarios."""
    return [
        CrateInfo(
            name="serde",
            version="1.0.0",
            description="a serialization framework",
            manifest_path="/registry/serde-1.0.0/Cargo.toml",
        ),
        CrateInfo(
            name="libc",
            version="0.2.0",
            manifest_path="/registry/libc-0.2.0/Cargo.toml",
        ),
    ]


@pytest.fixture
def fake_source(sample_crates: List[CrateInfo]) -> FakeSource:
    return FakeSource(sample_crates)


@pytest.fixture(autouse=True)
def plain_console(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Force uncolored output, fresh consoles and no leftover log handlers."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("CARGO_LS_CRATES_CONFIG", raising=False)
    monkeypatch.delenv("CARGO_LS_CRATES_LOG", raising=False)
    reconfigure_console()
    yield
    reconfigure_console()
    disable_logging()


@pytest.fixture
def source_factory():
    """Return the FakeSource class for tests needing custom crates or errors."""
    return FakeSource
