"""Tests for the YAML settings loader."""

from pathlib import Path

from wikiparse.config import ParserConfig
from wikiparse.documents import DocumentKind


class TestDefaults:
    def test_output_dir(self, default_config):
        assert default_config.output_dir == Path("xmlOutput")

    def test_workers(self, default_config):
        assert default_config.workers == 1

    def test_no_capture_limit(self, default_config):
        assert default_config.max_capture is None

    def test_filenames(self, default_config):
        assert default_config.filenames == {
            DocumentKind.ALL: "articleOutput.xml",
            DocumentKind.CATEGORIES: "pageCategoryDocument.xml",
            DocumentKind.CITATIONS: "pageCitationDocument.xml",
            DocumentKind.ANCHORS: "pageAnchorDocument.xml",
            DocumentKind.TEXT: "pageTextDocument.xml",
        }


class TestOverrides:
    def test_override_file_wins(self, tmp_path):
        override = tmp_path / "config.yaml"
        override.write_text("workers: 4\nmax_capture: 5000\noutput_dir: out\n")
        config = ParserConfig(paths=[override])
        assert config.workers == 4
        assert config.max_capture == 5000
        assert config.output_dir == Path("out")

    def test_filenames_merged_per_kind(self, tmp_path):
        override = tmp_path / "config.yaml"
        override.write_text("filenames:\n  text: plain.xml\n")
        config = ParserConfig(paths=[override])
        assert config.filename_for(DocumentKind.TEXT) == "plain.xml"
        assert config.filename_for(DocumentKind.CATEGORIES) == "pageCategoryDocument.xml"

    def test_priority_order(self, tmp_path):
        user = tmp_path / "user.yaml"
        project = tmp_path / "project.yaml"
        user.write_text("workers: 8\n")
        project.write_text("workers: 2\noutput_dir: project-out\n")
        config = ParserConfig(paths=[user, project])
        assert config.workers == 8
        assert config.output_dir == Path("project-out")

    def test_missing_file_ignored(self, tmp_path):
        config = ParserConfig(paths=[tmp_path / "absent.yaml"])
        assert config.workers == 1

    def test_invalid_yaml_ignored(self, tmp_path):
        broken = tmp_path / "config.yaml"
        broken.write_text("workers: [1, 2\n")
        config = ParserConfig(paths=[broken])
        assert config.workers == 1

    def test_non_mapping_ignored(self, tmp_path):
        listing = tmp_path / "config.yaml"
        listing.write_text("- a\n- b\n")
        config = ParserConfig(paths=[listing])
        assert config.output_dir == Path("xmlOutput")

    def test_project_dir_lookup(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        (tmp_path / ".wikiparse").mkdir()
        (tmp_path / ".wikiparse" / "config.yaml").write_text("workers: 3\n")
        assert ParserConfig().workers == 3


class TestTaggerSettings:
    def test_default_directory(self, default_config):
        assert default_config.tagger_dir == Path("POSTaggerInput")

    def test_default_filenames(self, default_config):
        assert default_config.tagger_filenames == {
            DocumentKind.ALL: "pageArticleDocument.txt",
            DocumentKind.CATEGORIES: "pageCategoryDocument.txt",
            DocumentKind.CITATIONS: "pageCitationDocument.txt",
            DocumentKind.ANCHORS: "pageAnchorDocument.txt",
            DocumentKind.TEXT: "pageTextDocument.txt",
        }

    def test_tagger_filenames_merged_per_kind(self, tmp_path):
        override = tmp_path / "config.yaml"
        override.write_text("tagger_filenames:\n  anchors: links.txt\n")
        config = ParserConfig(paths=[override])
        assert config.tagger_filename_for(DocumentKind.ANCHORS) == "links.txt"
        assert config.tagger_filename_for(DocumentKind.TEXT) == "pageTextDocument.txt"
        assert config.filename_for(DocumentKind.ANCHORS) == "pageAnchorDocument.xml"
