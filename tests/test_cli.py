#!/usr/bin/env python3
"""CLI regression: dxf_to_svg.main writes SVG + JSON report, fails cleanly on bad input."""

import json
import os
import sys

import ezdxf

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'scripts'))
from dxf_to_svg import main


def _write_dxf(path):
    doc = ezdxf.new()
    msp = doc.modelspace()
    msp.add_line((0, 0), (4, 2))
    msp.add_circle((2, 1), 0.5)
    msp.add_xline((0, 0), (1, 1))
    doc.saveas(path)


def test_main_writes_svg_and_report(tmp_path):
    dxf_path = tmp_path / "part.dxf"
    _write_dxf(str(dxf_path))
    out = tmp_path / "part.svg"
    report = tmp_path / "report.json"

    rc = main([str(dxf_path), "-o", str(out), "--report", str(report),
               "--padding", "0", "--background", "none"])

    assert rc == 0
    svg = out.read_text(encoding="utf-8")
    assert 'viewBox="0 0 1000 500"' in svg
    assert "<rect" not in svg
    data = json.loads(report.read_text())
    assert data["counts"] == {"entities": 3, "rendered": 2, "unsupported": 1}
    assert data["skipped_types"] == {"XLINE": 1}


def test_main_default_output_path(tmp_path):
    dxf_path = tmp_path / "plate.dxf"
    _write_dxf(str(dxf_path))
    assert main([str(dxf_path), "--no-bounds"]) == 0
    svg = (tmp_path / "plate.svg").read_text(encoding="utf-8")
    assert 'viewBox="0 0 100 100"' in svg


def test_main_missing_input(tmp_path, capsys):
    rc = main([str(tmp_path / "missing.dxf")])
    assert rc == 1
    assert "ERROR" in capsys.readouterr().err


def test_main_config_file(tmp_path):
    dxf_path = tmp_path / "part.dxf"
    _write_dxf(str(dxf_path))
    cfg = tmp_path / "render.toml"
    cfg.write_text('[render]\ndefault_color = "navy"\n')
    out = tmp_path / "out.svg"
    assert main([str(dxf_path), "-o", str(out), "--config", str(cfg)]) == 0
    assert 'stroke="navy"' in out.read_text(encoding="utf-8")
