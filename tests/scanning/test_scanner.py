"""Tests for file and batch scanning."""

import io

import pytest

from linestat.exceptions import FileOpenError, FileReadError
from linestat.scanning import scanner as scanner_module
from linestat.scanning.classifier import classify_bytes
from linestat.scanning.scanner import classify_stream, scan_batch, scan_file


class _ScriptedHandle:
    """Binary handle replaying scripted reads; scripted exceptions are raised."""

    def __init__(self, *script):
        self.script = list(script)
        self.closed = False

    def read(self, size=-1):
        if not self.script:
            return b""
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class TestClassifyStream:
    def test_matches_in_memory_classification(self, sample_source):
        fst = classify_stream(io.BytesIO(sample_source), "mem.c")
        assert fst == classify_bytes(sample_source, path="mem.c")

    @pytest.mark.parametrize("chunk_size", [1, 5, 1024])
    def test_chunk_size_does_not_change_results(self, mixed_source, chunk_size):
        fst = classify_stream(io.BytesIO(mixed_source), chunk_size=chunk_size)
        assert fst == classify_bytes(mixed_source)

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            classify_stream(io.BytesIO(b"x"), chunk_size=0)

    def test_sink_receives_every_line(self, sample_source):
        seen = []
        classify_stream(
            io.BytesIO(sample_source), "s.c", sink=lambda path, line: seen.append((path, line.number))
        )
        assert seen == [("s.c", n) for n in range(1, 7)]


class TestScanFile:
    def test_scans_file(self, sample_file, sample_source):
        fst = scan_file(sample_file)
        assert fst.ok
        assert fst.path == str(sample_file)
        assert fst == classify_bytes(sample_source, path=str(sample_file))

    def test_accepts_string_path(self, sample_file):
        assert scan_file(str(sample_file)).lines_all == 6

    def test_missing_file(self, missing_file):
        fst = scan_file(missing_file)
        assert not fst.ok
        assert isinstance(fst.error, FileOpenError)
        assert fst.path == str(missing_file)
        assert fst.line_counts() == (0, 0, 0, 0)
        assert fst.avg_bpl_all is None
        assert "Cannot open file" in fst.error_message

    def test_directory_cannot_be_scanned(self, tmp_path):
        fst = scan_file(tmp_path)
        assert isinstance(fst.error, FileOpenError)

    def test_read_error_discards_partial_counts(self, monkeypatch):
        handle = _ScriptedHandle(b"a\nb\nc\n", OSError(5, "Input/output error"))
        monkeypatch.setattr(scanner_module, "open", lambda *a, **kw: handle, raising=False)

        fst = scan_file("flaky.c", chunk_size=6)

        assert isinstance(fst.error, FileReadError)
        assert fst.line_counts() == (0, 0, 0, 0)
        assert fst.max_bpl_all == 0
        assert handle.closed

    def test_handle_closed_after_success(self, monkeypatch):
        handle = _ScriptedHandle(b"x\n")
        monkeypatch.setattr(scanner_module, "open", lambda *a, **kw: handle, raising=False)

        fst = scan_file("ok.c")

        assert fst.ok
        assert fst.lines_all == 1
        assert handle.closed

    def test_open_error_logged(self, missing_file, caplog):
        with caplog.at_level("WARNING", logger="linestat"):
            scan_file(missing_file)
        assert "Cannot open file" in caplog.text


class TestScanBatch:
    def test_input_order_preserved(self, sample_file, short_file):
        batch = scan_batch([short_file, sample_file])
        assert [f.path for f in batch.files] == [str(short_file), str(sample_file)]

    def test_reductions(self, sample_file, short_file):
        batch = scan_batch([sample_file, short_file])
        assert batch.max_lpf_all == 6
        assert batch.max_lpf_code == 2
        assert batch.max_lpf_comment == 3
        assert batch.max_lpf_empty == 1
        assert batch.avg_lpf_all == pytest.approx(4.5)
        assert batch.avg_lpf_code == pytest.approx(2.0)
        assert batch.avg_lpf_comment == pytest.approx(1.5)
        assert batch.avg_lpf_empty == pytest.approx(1.0)

    def test_unreadable_file_excluded_from_reductions(self, sample_file, short_file, missing_file):
        batch = scan_batch([sample_file, missing_file, short_file])

        assert len(batch.files) == 3
        assert batch.files[1].error_message
        assert batch.files[1].line_counts() == (0, 0, 0, 0)
        assert [f.ok for f in batch.valid_files] == [True, True]
        assert batch.failed_files == [batch.files[1]]
        assert batch.avg_lpf_all == pytest.approx(4.5)
        assert batch.max_lpf_all == 6

    def test_no_valid_files(self, missing_file):
        batch = scan_batch([missing_file])
        assert len(batch.files) == 1
        assert batch.max_lpf_all == 0
        assert batch.avg_lpf_all is None
        assert batch.avg_lpf_empty is None

    def test_empty_path_list(self):
        batch = scan_batch([])
        assert batch.files == []
        assert batch.avg_lpf_code is None

    def test_parallel_matches_sequential(self, tmp_path, sample_source, mixed_source):
        paths = []
        for i in range(8):
            path = tmp_path / f"f{i}.c"
            path.write_bytes(sample_source * (i + 1) if i % 2 else mixed_source)
            paths.append(path)
        paths.insert(3, tmp_path / "missing.c")

        sequential = scan_batch(paths)
        parallel = scan_batch(paths, workers=4)

        assert [f.path for f in parallel.files] == [str(p) for p in paths]
        assert [f.line_counts() for f in parallel.files] == [
            f.line_counts() for f in sequential.files
        ]
        assert parallel.avg_lpf_all == sequential.avg_lpf_all

    def test_invalid_workers(self, sample_file):
        with pytest.raises(ValueError):
            scan_batch([sample_file], workers=0)
