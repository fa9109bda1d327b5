import importlib.util
import sys
from pathlib import Path

import typosee.scan as scan_module
from typosee.errors import TableAllocationError


SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"


def _load(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_make_report_returns_status_on_failed_comparisons(tmp_path, monkeypatch):
    subdomains = tmp_path / "subdomains.csv"
    subdomains.write_text("fqdn\nmail.gogle.com\n", encoding="utf-8")
    keywords = tmp_path / "keywords.txt"
    keywords.write_text("google\n", encoding="utf-8")
    out_dir = tmp_path / "out"

    def fail(a, b):
        raise TableAllocationError("out of memory")

    monkeypatch.setattr(scan_module, "levenshtein", fail)
    monkeypatch.setattr(sys, "argv", ["make_report", str(subdomains), str(keywords), "--out-dir", str(out_dir)])
    assert _load("make_report").main() == 1
    assert (out_dir / "subdomains.json").exists()
