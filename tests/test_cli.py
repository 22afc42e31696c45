"""Tests for the dna2protein command line."""

import io

import pytest
from dna2protein.cli import main


class TestTranslateCommand:
    """Tests for the translate subcommand."""

    def test_file_to_stdout(self, dna_file, capsys):
        main(["translate", "-f", str(dna_file), "-o", "-"])
        assert capsys.readouterr().out == "AlaMetPro\n"

    def test_rna_written_first(self, dna_file, capsys):
        main(["translate", "-f", str(dna_file), "-o", "-", "--rna"])
        assert capsys.readouterr().out == "GCCAUGCCA\nAlaMetPro\n"

    def test_stdin_to_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("acacgtcct\n"))
        out = tmp_path / "protein.txt"

        main(["translate", "-f", "-", "-o", str(out)])
        assert out.read_text() == "CysAlaGly\n"

    def test_rna_to_file(self, dna_file, tmp_path):
        out = tmp_path / "protein.txt"
        main(["translate", "-f", str(dna_file), "-o", str(out), "-r"])
        assert out.read_text().splitlines() == ["GCCAUGCCA", "AlaMetPro"]

    def test_invalid_dna(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("abcdef\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["translate", "-f", str(path), "-o", "-"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error when transcribing DNA" in captured.err

    def test_missing_input(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["translate", "-f", str(tmp_path / "missing.txt"), "-o", "-"])
        assert exc_info.value.code == 1
        assert "Error when reading" in capsys.readouterr().err

    def test_undecodable_input(self, tmp_path, capsys):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"ACG\xff\xfeT\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["translate", "-f", str(path), "-o", "-"])
        assert exc_info.value.code == 1
        assert "Error when reading" in capsys.readouterr().err

    def test_bad_params_value(self, dna_file, tmp_path, capsys):
        params = tmp_path / "params.txt"
        params.write_text("STRIP_WHITESPACE = yes\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["translate", "-f", str(dna_file), "-o", "-", "--params", str(params)])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"Error when reading {params}" in captured.err

    def test_params_strip_whitespace(self, tmp_path, capsys):
        dna = tmp_path / "gene.txt"
        dna.write_text("cgg tac ggt\n")
        params = tmp_path / "params.txt"
        params.write_text("STRIP_WHITESPACE = 1\n")

        main(["translate", "-f", str(dna), "-o", "-", "--params", str(params)])
        assert capsys.readouterr().out == "AlaMetPro\n"


class TestTranscribeCommand:
    """Tests for the transcribe subcommand."""

    def test_file_to_stdout(self, dna_file, capsys):
        main(["transcribe", "-f", str(dna_file), "-o", "-"])
        assert capsys.readouterr().out == "GCCAUGCCA\n"

    def test_undecodable_stdin(self, monkeypatch, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)

        with pytest.raises(SystemExit) as exc_info:
            main(["transcribe", "-f", "-", "-o", "-"])
        assert exc_info.value.code == 1
        assert "Error when reading -" in capsys.readouterr().err

    def test_bad_length(self, tmp_path, capsys):
        path = tmp_path / "short.txt"
        path.write_text("gccgc")

        with pytest.raises(SystemExit) as exc_info:
            main(["transcribe", "-f", str(path), "-o", "-"])
        assert exc_info.value.code == 1
        assert "not a multiple of 3" in capsys.readouterr().err


class TestMain:
    """Tests for the top-level parser."""

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "dna2protein 0.1.0" in capsys.readouterr().out
