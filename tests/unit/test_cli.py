"""
Unit tests for the command-line entry point.
"""

import pytest

from hocrverse.cli import DEFAULT_PAIRS, build_parser, load_config, main


class TestLoadConfig:
    """Test flag/YAML merging."""

    def test_defaults_without_yaml(self):
        args = build_parser().parse_args([])
        config = load_config(args)
        assert config.page_min == 60
        assert config.page_max == 96
        assert config.composite_pairs == DEFAULT_PAIRS
        assert len(config.pairs) == 8

    def test_flags_override_defaults(self):
        args = build_parser().parse_args(["--page-min", "1", "--page-max", "2", "--pairs", ""])
        config = load_config(args)
        assert (config.page_min, config.page_max) == (1, 2)
        assert config.pairs == []

    def test_yaml_then_flags(self, tmp_path):
        path = tmp_path / "extract.yaml"
        path.write_text("page_min: 10\npage_max: 20\nsuperscript_rise_px: 9\n", encoding="utf-8")
        args = build_parser().parse_args(["--config", str(path), "--page-max", "30"])
        config = load_config(args)
        assert config.page_min == 10
        assert config.page_max == 30
        assert config.superscript_rise_px == 9
        assert config.pairs == []


class TestMain:
    """Test end-to-end CLI runs."""

    def test_writes_both_csvs(self, tmp_path, sample_hocr):
        texts = tmp_path / "texts.csv"
        text_verses = tmp_path / "text_verses.csv"
        status = main(
            [
                "--in",
                str(sample_hocr),
                "--texts",
                str(texts),
                "--text-verses",
                str(text_verses),
                "--page-min",
                "5",
                "--page-max",
                "6",
                "--pairs",
                "3-4,8-9,6-7",
            ]
        )
        assert status == 0
        assert texts.read_text(encoding="utf-8").splitlines()[1].startswith('1,"3–4",')
        assert text_verses.read_text(encoding="utf-8").splitlines() == [
            "text_id,verse_number",
            "1,3",
            "1,4",
            "2,6",
            "2,7",
            "3,1",
            "4,2",
        ]

    def test_missing_input(self, tmp_path, capsys):
        status = main(["--in", str(tmp_path / "missing.html")])
        assert status == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_pairs(self, tmp_path, sample_hocr, capsys):
        """Malformed pairs abort before anything is written."""
        texts = tmp_path / "texts.csv"
        status = main(["--in", str(sample_hocr), "--texts", str(texts), "--pairs", "1-2-3"])
        assert status == 1
        assert "bad pair" in capsys.readouterr().err
        assert not texts.exists()

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "--page-min" in capsys.readouterr().out

    def test_unwritable_output(self, tmp_path, sample_hocr, capsys):
        """A missing output directory is reported, not raised."""
        status = main(
            [
                "--in",
                str(sample_hocr),
                "--texts",
                str(tmp_path / "no_such_dir" / "texts.csv"),
                "--page-min",
                "5",
                "--page-max",
                "6",
            ]
        )
        assert status == 1
        assert "Error:" in capsys.readouterr().err

    def test_badly_typed_yaml_value(self, tmp_path, sample_hocr, capsys):
        """String page bounds in YAML are reported as bad configuration."""
        path = tmp_path / "extract.yaml"
        path.write_text("page_min: '60'\npage_max: '96'\n", encoding="utf-8")
        status = main(["--in", str(sample_hocr), "--config", str(path)])
        assert status == 1
        err = capsys.readouterr().err
        assert "page_min must be an integer" in err
        assert "Failed to extract" not in err
