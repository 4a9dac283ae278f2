"""
Integration tests for the registration flow.

Tests the full flow through the command-line entry point: construction,
welcome line, grant, confirmation line and exit status.
"""

import subprocess
import sys
from pathlib import Path

import pytest

import src.app.main as entry_point
from src.app.main import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_USER_ERROR, main
from src.domain.exceptions import ValidationError, VerificationError

pytestmark = pytest.mark.integration

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestSampleUser:
    """The default run registers and verifies the sample user."""

    def test_default_run_succeeds(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Sample user is welcomed and verified, exit status 0."""
        exit_code = main([])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert out.splitlines() == [
            "Welcome Luca Rossi of 22 years old",
            "User email foo@ok.com is verified!",
        ]

    def test_middle_name_in_welcome(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Middle name appears between name and surname."""
        assert main(["--middle-name", "Maria"]) == EXIT_OK
        assert "Welcome Luca Maria Rossi of 22 years old" in capsys.readouterr().out


class TestFailures:
    """Domain errors map to exit status 1 with a surfaced message."""

    def test_unverified_email(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Welcome is printed, verification fails, no confirmation line."""
        exit_code = main(["--email", "foo@unverified.com"])

        captured = capsys.readouterr()
        assert exit_code == EXIT_USER_ERROR
        assert "Welcome Luca Rossi of 22 years old" in captured.out
        assert "is verified!" not in captured.out
        assert "Error: Email has not been verified yet" in captured.err

    @pytest.mark.parametrize(
        ("argv", "message"),
        [
            (["--email", "foo.at.com"], "Invalid email"),
            (["--email", "fo@ok.com", "--age", "-100"], "Age cannot be negative"),
            (["--email", "fo@ok.com", "--age", "130"], "I don't think you can be immortal"),
            (
                ["--age", "12"],
                "Sorry but this service is unavailable for minor of 13 years old",
            ),
        ],
    )
    def test_construction_failures(
        self, capsys: pytest.CaptureFixture[str], argv: list[str], message: str
    ) -> None:
        """Construction errors stop before the welcome line."""
        exit_code = main(argv)

        captured = capsys.readouterr()
        assert exit_code == EXIT_USER_ERROR
        assert captured.out == ""
        assert f"Error: {message}" in captured.err

    def test_configured_marker(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The verification marker comes from settings."""
        monkeypatch.setenv("TYPESTATE_VERIFICATION_MARKER", "unverified")

        assert main(["--email", "foo@unverified.com"]) == EXIT_OK
        assert "User email foo@unverified.com is verified!" in capsys.readouterr().out

    @pytest.mark.parametrize("error", [VerificationError, ValidationError])
    def test_family_base_errors_are_reported(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
        error: type[Exception],
    ) -> None:
        """A base error raised by a replacement verifier still exits cleanly."""

        def failing_run(*args: object) -> None:
            raise error("confirmation link expired")

        monkeypatch.setattr(entry_point, "run", failing_run)

        assert main([]) == EXIT_USER_ERROR
        assert "Error: confirmation link expired" in capsys.readouterr().err

    def test_invalid_settings(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A bad TYPESTATE_ variable is reported without a traceback."""
        monkeypatch.setenv("TYPESTATE_LOG_LEVEL", "LOUD")

        exit_code = main([])

        captured = capsys.readouterr()
        assert exit_code == EXIT_CONFIG_ERROR
        assert captured.out == ""
        assert "Error: invalid configuration" in captured.err
        assert "Traceback" not in captured.err


class TestProcessEntryPoint:
    """Runs the module as a real process."""

    def test_module_exit_codes(self) -> None:
        """python -m src.app.main exits 0 on success and 1 on failure."""
        ok = subprocess.run(
            [sys.executable, "-m", "src.app.main"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
        )
        failed = subprocess.run(
            [sys.executable, "-m", "src.app.main", "--email", "foo.at.com"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
        )

        assert ok.returncode == 0, ok.stderr
        assert "User email foo@ok.com is verified!" in ok.stdout
        assert failed.returncode == 1
        assert "Error: Invalid email" in failed.stderr

    def test_failure_reported_once(self) -> None:
        """With default settings the failure appears once on stderr."""
        failed = subprocess.run(
            [sys.executable, "-m", "src.app.main", "--email", "foo.at.com"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
        )

        assert failed.returncode == EXIT_USER_ERROR
        assert failed.stderr.strip().splitlines() == ["Error: Invalid email"]
