from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Dict
from unittest.mock import patch

import pytest

from ls_crates.exceptions import MetadataError
from ls_crates.core.metadata import CargoMetadata, _first_error_line, find_cargo

ROOT_ID = "path+file:///work/app#0.1.0"
SERDE_ID = "registry+https://github.com/rust-lang/crates.io-index#serde@1.0.0"
LIBC_ID = "registry+https://github.com/rust-lang/crates.io-index#libc@0.2.0"


def _payload() -> Dict[str, Any]:
    return {
        "packages": [
            {
                "name": "serde",
                "version": "1.0.0",
                "id": SERDE_ID,
                "description": "a serialization\n    framework",
                "manifest_path": "/registry/serde-1.0.0/Cargo.toml",
                "source": "registry+https://github.com/rust-lang/crates.io-index",
            },
            {
                "name": "app",
                "version": "0.1.0",
                "id": ROOT_ID,
                "description": None,
                "manifest_path": "/work/app/Cargo.toml",
                "source": None,
            },
            {
                "name": "libc",
                "version": "0.2.0",
                "id": LIBC_ID,
                "description": None,
                "manifest_path": "/registry/libc-0.2.0/Cargo.toml",
                "source": "registry+https://github.com/rust-lang/crates.io-index",
            },
        ],
        "workspace_members": [ROOT_ID],
        "resolve": {"nodes": [], "root": ROOT_ID},
        "version": 1,
    }


def _completed(
    stdout: str = "", stderr: str = "", returncode: int = 0
) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(
        args=["cargo", "metadata"], returncode=returncode, stdout=stdout, stderr=stderr
    )


@pytest.mark.unit
class TestFindCargo:
    """Tests for find_cargo."""

    def test_explicit_path_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a configured path is used even when CARGO is set."""
        monkeypatch.setenv("CARGO", "/from/env/cargo")

        assert find_cargo("/custom/cargo") == "/custom/cargo"

    def test_cargo_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the CARGO variable exported by cargo is honored."""
        monkeypatch.setenv("CARGO", "/from/env/cargo")

        assert find_cargo() == "/from/env/cargo"

    def test_path_lookup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test falling back to cargo on PATH."""
        monkeypatch.delenv("CARGO", raising=False)

        with patch("ls_crates.core.metadata.shutil.which", return_value="/usr/bin/cargo"):
            assert find_cargo() == "/usr/bin/cargo"

    def test_missing_cargo_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test MetadataError when cargo cannot be found anywhere."""
        monkeypatch.delenv("CARGO", raising=False)

        with patch("ls_crates.core.metadata.shutil.which", return_value=None):
            with pytest.raises(MetadataError) as exc_info:
                find_cargo()

        assert "cargo" in str(exc_info.value)


@pytest.mark.unit
class TestFirstErrorLine:
    """Tests for _first_error_line helper."""

    def test_prefers_error_line(self) -> None:
        """Test the first line starting with 'error' is selected."""
        stderr = "    Updating crates.io index\nerror: failed to select a version\n  caused by"

        assert _first_error_line(stderr) == "error: failed to select a version"

    def test_falls_back_to_first_line(self) -> None:
        """Test the first non-empty line is used without an error line."""
        assert _first_error_line("\n  something broke  \nmore") == "something broke"

    def test_empty_stderr(self) -> None:
        """Test a generic message when cargo printed nothing."""
        assert _first_error_line("") == "cargo metadata failed"


@pytest.mark.unit
class TestCargoMetadataCommand:
    """Tests for CargoMetadata.command."""

    def test_default_command(self) -> None:
        """Test the metadata query arguments."""
        source = CargoMetadata("/bin/cargo")

        assert source.command() == ["/bin/cargo", "metadata", "--format-version", "1"]

    def test_offline_flag(self) -> None:
        """Test --offline is appended when configured."""
        source = CargoMetadata("/bin/cargo", offline=True)

        assert source.command()[-1] == "--offline"


@pytest.mark.unit
class TestCargoMetadataParse:
    """Tests for CargoMetadata.parse."""

    def test_excludes_workspace_members(self) -> None:
        """Test the project's own crates are not listed."""
        crates = CargoMetadata.parse(_payload())

        assert [c.name for c in crates] == ["serde", "libc"]

    def test_include_workspace_members(self) -> None:
        """Test workspace members are kept on request, in cargo order."""
        crates = CargoMetadata.parse(_payload(), include_workspace_members=True)

        assert [c.name for c in crates] == ["serde", "app", "libc"]

    def test_projects_fields(self) -> None:
        """Test package entries are converted to CrateInfo."""
        serde, libc = CargoMetadata.parse(_payload())

        assert serde.version == "1.0.0"
        assert serde.description == "a serialization framework"
        assert serde.manifest_path == "/registry/serde-1.0.0/Cargo.toml"
        assert libc.description is None

    def test_missing_packages_raises(self) -> None:
        """Test a document without a package list is rejected."""
        with pytest.raises(MetadataError):
            CargoMetadata.parse({"workspace_members": []})

    def test_nameless_package_raises(self) -> None:
        """Test an entry without a name is rejected."""
        with pytest.raises(MetadataError):
            CargoMetadata.parse({"packages": [{"version": "1.0.0", "id": "x"}]})


@pytest.mark.unit
class TestCargoMetadataResolve:
    """Tests for CargoMetadata.resolve_dependencies."""

    def test_runs_cargo_in_project_dir(self, tmp_path: Path) -> None:
        """Test cargo runs in the project directory and output is parsed."""
        source = CargoMetadata("/bin/cargo")

        with patch(
            "ls_crates.core.metadata.subprocess.run",
            return_value=_completed(stdout=json.dumps(_payload())),
        ) as mock_run:
            crates = source.resolve_dependencies(tmp_path)

        assert [c.name for c in crates] == ["serde", "libc"]
        args, kwargs = mock_run.call_args
        assert args[0] == ["/bin/cargo", "metadata", "--format-version", "1"]
        assert kwargs["cwd"] == str(tmp_path)
        assert kwargs["capture_output"] is True

    def test_nonzero_exit_raises(self, tmp_path: Path) -> None:
        """Test cargo failures become a MetadataError with cargo's message."""
        stderr = (
            "error: could not find `Cargo.toml` in `/tmp` or any parent directory\n"
        )
        source = CargoMetadata("/bin/cargo")

        with patch(
            "ls_crates.core.metadata.subprocess.run",
            return_value=_completed(stderr=stderr, returncode=101),
        ):
            with pytest.raises(MetadataError) as exc_info:
                source.resolve_dependencies(tmp_path)

        error = exc_info.value
        assert error.message.startswith("error: could not find `Cargo.toml`")
        assert error.exit_code == 101
        assert error.project_dir == str(tmp_path)
        assert "\n" not in str(error)

    def test_os_error_raises(self, tmp_path: Path) -> None:
        """Test an unrunnable executable becomes a MetadataError."""
        source = CargoMetadata("/missing/cargo")

        with patch(
            "ls_crates.core.metadata.subprocess.run",
            side_effect=FileNotFoundError("No such file"),
        ):
            with pytest.raises(MetadataError) as exc_info:
                source.resolve_dependencies(tmp_path)

        assert "/missing/cargo" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        """Test undecodable output becomes a MetadataError."""
        source = CargoMetadata("/bin/cargo")

        with patch(
            "ls_crates.core.metadata.subprocess.run",
            return_value=_completed(stdout="not json"),
        ):
            with pytest.raises(MetadataError):
                source.resolve_dependencies(tmp_path)

    def test_non_object_json_raises(self, tmp_path: Path) -> None:
        """Test a JSON document that is not an object is rejected."""
        source = CargoMetadata("/bin/cargo")

        with patch(
            "ls_crates.core.metadata.subprocess.run",
            return_value=_completed(stdout="[]"),
        ):
            with pytest.raises(MetadataError):
                source.resolve_dependencies(tmp_path)
