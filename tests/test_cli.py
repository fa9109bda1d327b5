from typer.testing import CliRunner

import typosee.scan as scan_module
from typosee.cli import app
from typosee.errors import TableAllocationError


runner = CliRunner()


def _inputs(tmp_path):
    subdomains = tmp_path / "subdomains.csv"
    subdomains.write_text("distance,a,b,fqdn\n1,1,1,mail.gogle.com\n2,2,2,example.org\n", encoding="utf-8")
    keywords = tmp_path / "keywords.txt"
    keywords.write_text("Google\n", encoding="utf-8")
    return str(subdomains), str(keywords)


def test_scan_prints_matches(tmp_path):
    subdomains, keywords = _inputs(tmp_path)
    result = runner.invoke(app, ["scan", subdomains, keywords, "2", "--verbose"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "distance,keyword,fqdn-element,full-fqdn"
    assert "1,google,gogle,mail.gogle.com" in lines
    assert "\tDelete o at 2" in lines
    assert lines[-1] == "Total lines processed: 2"


def test_scan_rejects_bad_threshold(tmp_path):
    subdomains, keywords = _inputs(tmp_path)
    result = runner.invoke(app, ["scan", subdomains, keywords, "0"])
    assert result.exit_code != 0


def test_scan_writes_json(tmp_path):
    subdomains, keywords = _inputs(tmp_path)
    out = tmp_path / "out" / "report.json"
    result = runner.invoke(app, ["scan", subdomains, keywords, "1", "--out-json", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()


def test_distance_command():
    result = runner.invoke(app, ["distance", "chalk", "cheese"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "4",
        "\tSubstitute e for a at 2",
        "\tSubstitute e for l at 3",
        "\tSubstitute s for k at 4",
        "\tInsert e at 4",
    ]


def test_scan_reports_failed_comparisons(tmp_path, monkeypatch):
    subdomains, keywords = _inputs(tmp_path)

    def fail(a, b):
        raise TableAllocationError("out of memory")

    monkeypatch.setattr(scan_module, "levenshtein", fail)
    result = runner.invoke(app, ["scan", subdomains, keywords, "2"])
    assert result.exit_code == 1
    assert "[ERR] could not compare google,gogle,mail.gogle.com: out of memory" in result.output
    assert "1,google,gogle,mail.gogle.com" not in result.output


def test_scan_rejects_malformed_keyword_file(tmp_path):
    subdomains, _ = _inputs(tmp_path)
    keywords = tmp_path / "keywords.yaml"
    keywords.write_text("google: 1\n", encoding="utf-8")
    result = runner.invoke(app, ["scan", subdomains, str(keywords), "2"])
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
