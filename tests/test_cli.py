"""Tests for the flyer-studio CLI."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from flyer_studio.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _patched_manager(manager):
    with patch("flyer_studio.cli.get_template_manager", return_value=manager):
        yield manager


class TestListing:
    """Tests for categories/templates/show."""

    def test_categories(self):
        result = runner.invoke(app, ["categories"])
        assert result.exit_code == 0
        assert "Event Flyers" in result.stdout

    def test_templates(self):
        result = runner.invoke(app, ["templates", "--category", "social"])
        assert result.exit_code == 0
        assert "social/glass-card" in result.stdout

    def test_templates_empty(self):
        result = runner.invoke(app, ["templates", "--category", "nonexistent-category"])
        assert result.exit_code == 0
        assert "No templates found" in result.stdout

    def test_show(self):
        result = runner.invoke(app, ["show", "event/plain"])
        assert result.exit_code == 0
        assert "TITLE" in result.stdout

    def test_show_missing(self):
        result = runner.invoke(app, ["show", "missing/slug"])
        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestGenerate:
    """Tests for generate/preview."""

    def test_generate_to_file(self, tmp_path):
        out = tmp_path / "out.html"
        result = runner.invoke(app, ["generate", "event/plain", "Grand opening party", "--output", str(out)])
        assert result.exit_code == 0
        assert "<h1>Grand Opening Party</h1>" in out.read_text()

    def test_generate_with_brand_kit(self, tmp_path):
        kit = tmp_path / "kit.json"
        kit.write_text(json.dumps({"id": 1, "name": "Acme", "primaryColor": "#123456", "secondaryColor": "#654321"}))
        out = tmp_path / "out.html"
        result = runner.invoke(
            app, ["generate", "event/summer-fest", "Summer party", "--brand-kit", str(kit), "-o", str(out)]
        )
        assert result.exit_code == 0
        assert "from-[#123456]" in out.read_text()

    def test_generate_invalid_brand_kit(self, tmp_path):
        kit = tmp_path / "kit.json"
        kit.write_text('{"name": "missing fields"}')
        result = runner.invoke(app, ["generate", "event/plain", "x", "--brand-kit", str(kit)])
        assert result.exit_code == 1
        assert "Invalid brand kit" in result.stdout

    def test_generate_missing_template(self):
        result = runner.invoke(app, ["generate", "missing/slug", "Summer party"])
        assert result.exit_code == 1

    def test_preview(self, tmp_path):
        out = tmp_path / "preview.html"
        result = runner.invoke(app, ["preview", "event/plain", "-o", str(out)])
        assert result.exit_code == 0
        assert "Grand Opening Celebration" in out.read_text()


class TestSave:
    """Tests for save."""

    def test_save(self, tmp_path, _patched_manager):
        src = tmp_path / "banner.html"
        src.write_text("<div>{{HEADLINE}}</div>")
        result = runner.invoke(app, ["save", "My Banner", str(src), "--category", "banner"])
        assert result.exit_code == 0
        assert "custom/my-banner" in result.stdout
        assert _patched_manager.load_template("custom/my-banner").category == "banner"

    def test_save_invalid_id(self, tmp_path):
        src = tmp_path / "banner.html"
        src.write_text("<div></div>")
        result = runner.invoke(app, ["save", "X", str(src), "-c", "banner", "--id", "../escape"])
        assert result.exit_code == 1
        assert "Failed to save template" in result.stdout

    def test_save_undecodable_file(self, tmp_path):
        src = tmp_path / "banner.html"
        src.write_bytes(b"<div>\xff\xfe</div>")
        result = runner.invoke(app, ["save", "X", str(src), "-c", "banner"])
        assert result.exit_code == 1
        assert "Failed to save template" in result.stdout

    def test_save_unreadable_file(self, tmp_path):
        src = tmp_path / "banner.html"
        src.write_text("<div></div>")
        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            result = runner.invoke(app, ["save", "X", str(src), "-c", "banner"])
        assert result.exit_code == 1
        assert "Failed to save template" in result.stdout


class TestStatus:
    """Tests for status."""

    def test_configured(self, templates_dir, monkeypatch):
        monkeypatch.setenv("FLYER_TEMPLATES_DIR", str(templates_dir))
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "Found" in result.stdout

    def test_missing_store(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FLYER_TEMPLATES_DIR", str(tmp_path / "nope"))
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 1
        assert "Missing" in result.stdout
