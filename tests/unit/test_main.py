import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from resume_intake.enhancement.base import PassthroughEnhancer
from resume_intake.main import main


@pytest.fixture(autouse=True)
def _quiet(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENHANCEMENT_ENABLED", "false")


class TestMain:
    def test_prints_record_for_text_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        resume = tmp_path / "resume.txt"
        resume.write_text("Jane Doe\nSenior Engineer", encoding="utf-8")
        with patch("resume_intake.main.Log"):
            code = main([str(resume)])
        assert code == 0
        record = json.loads(capsys.readouterr().out)
        assert record["resume_txt"] == "Jane Doe Senior Engineer"
        assert record["text_extraction_method"] == "text_file"
        assert record["file_type"] == "text/plain"
        assert record["is_pdf"] is False
        assert record["storage_status"] == "text_only"

    def test_explicit_mime_type(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        resume = tmp_path / "resume"
        resume.write_text("Jane Doe", encoding="utf-8")
        with patch("resume_intake.main.Log"):
            main([str(resume), "--mime-type", "text/plain"])
        assert json.loads(capsys.readouterr().out)["file_type"] == "text/plain"

    def test_missing_file_returns_1(self, tmp_path: Path) -> None:
        with patch("resume_intake.main.Log") as mock_log:
            assert main([str(tmp_path / "nope.pdf")]) == 1
        mock_log.error.assert_called_once()

    def test_oversized_file_returns_2(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "16")
        resume = tmp_path / "resume.txt"
        resume.write_bytes(b"x" * 17)
        with patch("resume_intake.main.Log"), patch.object(
            Path, "read_bytes", autospec=True
        ) as read_bytes:
            assert main([str(resume)]) == 2
        read_bytes.assert_not_called()
        assert capsys.readouterr().out == ""

    def test_closes_enhancer_after_extraction(self, tmp_path: Path) -> None:
        resume = tmp_path / "resume.txt"
        resume.write_text("Jane Doe", encoding="utf-8")
        enhancer = MagicMock(spec=PassthroughEnhancer)
        enhancer.enhance.side_effect = lambda text: text
        with patch("resume_intake.main.Log"), patch(
            "resume_intake.main.EnhancerFactory.create", return_value=enhancer
        ):
            assert main([str(resume)]) == 0
        enhancer.close.assert_called_once_with()

    def test_oversized_file_never_builds_enhancer(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "16")
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(b"%PDF-" + b"x" * 12)
        with patch("resume_intake.main.Log"), patch(
            "resume_intake.main.EnhancerFactory.create"
        ) as mock_create:
            assert main([str(resume)]) == 2
        mock_create.assert_not_called()
