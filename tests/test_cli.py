import logging

from xdebug_trace.cli import main


def test_cli_writes_html_and_assets(tmp_path, sample_path):
    output = tmp_path / "out" / "trace.html"

    assert main([str(sample_path), "-o", str(output)]) == 0

    html = output.read_text(encoding="utf-8")
    assert '<span class="name">define</span>' in html
    assert (output.parent / "style.css").exists()
    assert (output.parent / "script.js").exists()


def test_cli_default_output_name(tmp_path, sample_path):
    trace = tmp_path / "run.xt"
    trace.write_bytes(sample_path.read_bytes())

    assert main([str(trace), "--no-assets"]) == 0

    assert (tmp_path / "run.xt.html").exists()
    assert not (tmp_path / "style.css").exists()


def test_cli_time_precision(tmp_path, sample_path):
    output = tmp_path / "trace.html"

    assert main([str(sample_path), "-o", str(output), "--no-assets", "--time-precision", "3"]) == 0

    assert '<span class="time">0.000</span>' in output.read_text(encoding="utf-8")


def test_cli_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="xdebug_trace.cli"):
        assert main([str(tmp_path / "missing.xt")]) == 1
    assert "Cannot parse" in caplog.text


def test_cli_not_a_trace(tmp_path, caplog):
    path = tmp_path / "index.php"
    path.write_text("<?php\necho 'hi';\n?>\n\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="xdebug_trace.cli"):
        assert main([str(path), "-o", str(tmp_path / "x.html")]) == 1
    assert not (tmp_path / "x.html").exists()
