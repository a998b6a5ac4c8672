"""Тесты для CLI (`sitemap_stream/cli.py`) с использованием click.testing.CliRunner.
Проверяют команды `dump`, `config`, `--version`, а также обработку ошибок.
"""
import json

from click.testing import CliRunner
from conftest import urlset

from sitemap_stream.cli import cli


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "sitemap-stream" in result.output


def test_dump_urlset_stdout(sitemap_files):
    runner = CliRunner()
    result = runner.invoke(cli, ["dump", str(sitemap_files["urlset"])])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == [
        {
            "location": "https://example.com/",
            "last_modified": "2024-01-15T00:00:00+00:00",
            "change_frequency": "",
            "priority": 0.8,
        },
        {
            "location": "https://example.com/about",
            "last_modified": None,
            "change_frequency": "monthly",
            "priority": 1.0,
        },
    ]


def test_dump_index_and_text(sitemap_files):
    runner = CliRunner()
    result = runner.invoke(cli, ["dump", str(sitemap_files["index"]), "--pretty"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [d["location"] for d in data] == [
        "https://example.com/sitemap1.xml",
        "https://example.com/sitemap2.xml",
    ]
    assert "priority" not in data[0]

    result = runner.invoke(cli, ["dump", str(sitemap_files["text"]), "--format", "text"])
    assert result.exit_code == 0
    assert [d["location"] for d in json.loads(result.stdout)] == [
        "https://example.com/a",
        "https://example.com/b",
    ]


def test_dump_limit(sitemap_files):
    runner = CliRunner()
    result = runner.invoke(cli, ["dump", str(sitemap_files["text"]), "--limit", "1"])
    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == 1


def test_dump_json_file(sitemap_files, tmp_path):
    out = tmp_path / "reports" / "out.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["dump", str(sitemap_files["urlset"]), "--json", str(out)])
    assert result.exit_code == 0
    assert out.exists()
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data[1]["location"] == "https://example.com/about"


def test_dump_empty_document_fails(tmp_path):
    path = tmp_path / "empty.xml"
    path.write_bytes(urlset())
    runner = CliRunner()
    result = runner.invoke(cli, ["dump", str(path)])
    assert result.exit_code == 1
    assert result.stdout == ""


def test_dump_strict_soft_error(tmp_path):
    path = tmp_path / "soft.xml"
    path.write_bytes(urlset("<loc>https://example.com/</loc><priority>loud</priority>"))
    runner = CliRunner()

    result = runner.invoke(cli, ["dump", str(path)])
    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["priority"] == 1.0

    result = runner.invoke(cli, ["dump", str(path), "--strict"])
    assert result.exit_code == 1


def test_dump_uses_config_file(tmp_path, sitemap_files):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(json.dumps({"format": "urlset", "limit": 1}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "dump", str(sitemap_files["urlset"])])
    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == 1


def test_bad_config_fails(tmp_path, sitemap_files):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("format: gzip\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "dump", str(sitemap_files["urlset"])])
    assert result.exit_code == 1


def test_show_config(tmp_path):
    cfg_file = tmp_path / "default.yaml"
    cfg_file.write_text("strict: true\nlimit: 10\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["strict"] is True
    assert data["limit"] == 10
    assert data["format"] == "auto"


def test_log_file_receives_debug_records(tmp_path, sitemap_files):
    log_file = tmp_path / "sitemap.log"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["--log-level", "DEBUG", "--log-file", str(log_file), "dump", str(sitemap_files["index"])],
    )
    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == 2
    log_text = log_file.read_text(encoding="utf-8")
    assert "Detected sitemap format: index" in log_text
    assert "DEBUG" in log_text
