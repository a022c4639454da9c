#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Tests for GFA reading, writing and statistics.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip
import io
import logging

import pytest

from gfaweaver.gfa.errors import (
    DuplicateSegmentError,
    GFAParseError,
    UnsupportedVersionError,
)
from gfaweaver.gfa.fields import IntegerDecoding
from gfaweaver.gfa.graph import GFAGraph
from gfaweaver.io_utils.gfa_io import (
    gfa_stats,
    parse_gfa_lines,
    read_gfa,
    validate_gfa_file,
    write_gfa,
)


class TestParseLines:
    """Tokenizing GFA text into records."""

    def test_simple_document(self, simple_gfa):
        graph = parse_gfa_lines(simple_gfa.splitlines())

        assert graph.header.version == 1
        assert graph.header.comments() == "#\tassembled by hand"
        assert [s.name for s in graph.segments] == [b"ctg1", b"ctg2", b"ctg3"]
        assert graph.segments[0].read_count == 12
        assert graph.segments[2].uri == "file:///data/ctg3.fa"
        assert len(graph.links) == 2

    def test_fills_given_graph(self, graph):
        result = parse_gfa_lines(["S\tctg1\tACGT\n"], graph)

        assert result is graph
        assert len(graph.segments) == 1

    def test_blank_lines_skipped(self):
        graph = parse_gfa_lines(["\n", "S\ta\tAC\n", "   \n"])

        assert len(graph.segments) == 1

    def test_comment_without_tab(self):
        graph = parse_gfa_lines(["#plain comment"])

        assert graph.header.comment_lines == (b"#\tplain comment",)

    def test_version_spelled_as_float(self):
        graph = parse_gfa_lines(["H\tVN:Z:1.0"])

        assert graph.header.version == 1

    def test_unversioned_header_round_trips(self):
        """A written VN:Z:0 header reads back as unset."""
        graph = parse_gfa_lines(["H\tVN:Z:0"])

        assert graph.header.version == 0

    def test_version_two_rejected(self):
        with pytest.raises(GFAParseError) as excinfo:
            parse_gfa_lines(["H\tVN:Z:2"])

        assert isinstance(excinfo.value.__cause__, UnsupportedVersionError)
        assert excinfo.value.line_no == 1

    def test_duplicate_segment_reports_line(self):
        with pytest.raises(GFAParseError, match="line 2") as excinfo:
            parse_gfa_lines(["S\ta\tAC", "S\ta\tGG"])

        assert isinstance(excinfo.value.__cause__, DuplicateSegmentError)

    def test_short_segment_line(self):
        with pytest.raises(GFAParseError):
            parse_gfa_lines(["S\tonly_name"])

    def test_short_link_line(self):
        with pytest.raises(GFAParseError):
            parse_gfa_lines(["L\ta\t+\tb\t+"])

    def test_unknown_record_type(self):
        with pytest.raises(GFAParseError, match="unknown record type"):
            parse_gfa_lines(["X\tsomething"])

    def test_reserved_records_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gfaweaver"):
            graph = parse_gfa_lines(["C\ta\t+\tb\t+\t10\t5M", "P\tp1\ta+,b-\t*"])

        assert graph.segments == ()
        assert "containment" in caplog.text

    def test_reserved_records_error(self):
        with pytest.raises(GFAParseError, match="path records"):
            parse_gfa_lines(["P\tp1\ta+\t*"], unsupported_records="error")

    def test_bad_policy(self):
        with pytest.raises(ValueError):
            parse_gfa_lines([], unsupported_records="ignore")

    def test_char_code_decoding(self):
        graph = parse_gfa_lines(["S\ta\tAC\tRC:i:5"], int_decoding="char_code")

        assert graph.segments[0].read_count == 53

    def test_lenient_skips_bad_lines(self, caplog):
        lines = ["S\ta\tAC", "S\ta\tGG", "L\ta\t?\ta\t+\t*", "S\tb\tTT"]

        with caplog.at_level(logging.WARNING, logger="gfaweaver"):
            graph = parse_gfa_lines(lines, strict=False)

        assert [s.name for s in graph.segments] == [b"a", b"b"]
        assert graph.links == ()
        assert "Skipped 2 invalid line(s)" in caplog.text


class TestReadWrite:

    def test_read_file(self, simple_gfa_file):
        graph = read_gfa(simple_gfa_file)

        assert len(graph.segments) == 3

    def test_read_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            read_gfa(temp_output_dir / "nope.gfa")

    def test_read_gzip(self, temp_output_dir, simple_gfa):
        path = temp_output_dir / "simple.gfa.gz"
        with gzip.open(path, "wt") as f:
            f.write(simple_gfa)

        assert len(read_gfa(path).links) == 2

    def test_write_stream(self, simple_gfa):
        graph = parse_gfa_lines(simple_gfa.splitlines())
        out = io.StringIO()

        write_gfa(graph, out)

        assert out.getvalue() == (
            "H\tVN:Z:1\n"
            "#\tassembled by hand\n"
            "S\tctg1\tACGTACGT\tLN:i:8\tRC:i:12\n"
            "S\tctg2\tTTGACCA\tLN:i:7\n"
            "S\tctg3\tGGGCCC\tLN:i:6\tSH:i:abc123\tUR:i:file:///data/ctg3.fa\n"
            "L\tctg1\t+\tctg2\t-\t0M\n"
            "L\tctg2\t-\tctg3\t+\t*\n"
        )

    def test_write_then_read(self, simple_gfa_file, temp_output_dir):
        graph = read_gfa(simple_gfa_file)
        out_path = temp_output_dir / "out.gfa"

        write_gfa(graph, out_path)
        again = read_gfa(out_path)

        assert list(again.lines()) == list(graph.lines())

    def test_write_compressed(self, simple_gfa_file, temp_output_dir):
        graph = read_gfa(simple_gfa_file)
        out_path = temp_output_dir / "out.gfa"

        write_gfa(graph, out_path, compress=True)

        with gzip.open(out_path, "rt") as f:
            assert f.readline() == "H\tVN:Z:1\n"

    def test_multiline_comment_write_then_read(self, temp_output_dir):
        graph = GFAGraph()
        graph.header.add_comment("line one\nline two")
        out_path = temp_output_dir / "comments.gfa"

        write_gfa(graph, out_path)
        again = read_gfa(out_path)

        assert again.header.comment_lines == (b"#\tline one", b"#\tline two")

    def test_read_non_utf8_name(self, temp_output_dir):
        path = temp_output_dir / "latin1.gfa"
        path.write_bytes(b"H\tVN:Z:1\nS\tctg\xff1\tACGT\nL\tctg\xff1\t+\tctg\xff1\t-\t0M\n")

        graph = read_gfa(path)

        assert graph.segments[0].name == b"ctg\xff1"
        assert graph.links[0].to_name == b"ctg\xff1"

    def test_non_utf8_bytes_survive_write(self, temp_output_dir):
        raw = b"H\tVN:Z:1\n#\tby caf\xe9\nS\tctg\xff1\tACGT\tLN:i:4\n"
        path = temp_output_dir / "latin1.gfa"
        path.write_bytes(raw)
        out_path = temp_output_dir / "out.gfa"

        write_gfa(read_gfa(path), out_path)

        assert out_path.read_bytes() == raw

    def test_non_utf8_gzip(self, temp_output_dir):
        path = temp_output_dir / "latin1.gfa.gz"
        with gzip.open(path, "wb") as f:
            f.write(b"S\tctg\xff1\tACGT\n")

        assert read_gfa(path).segments[0].name == b"ctg\xff1"


class TestStats:

    def test_gfa_stats(self, simple_gfa):
        graph = parse_gfa_lines(simple_gfa.splitlines())

        assert gfa_stats(graph) == {
            'version': 1,
            'segments': 3,
            'links': 2,
            'comments': 1,
            'total_length': 21,
        }

    def test_empty_stats(self):
        assert gfa_stats(GFAGraph())['total_length'] == 0

    def test_validate_file(self, simple_gfa_file):
        assert validate_gfa_file(simple_gfa_file)['segments'] == 3

    def test_validate_is_strict(self, broken_gfa_file):
        with pytest.raises(GFAParseError):
            validate_gfa_file(broken_gfa_file, strict=False)

    def test_validate_passes_options(self, temp_output_dir):
        path = temp_output_dir / "legacy.gfa"
        path.write_text("S\ta\tAC\tRC:i:5\n")

        assert validate_gfa_file(path, int_decoding=IntegerDecoding.CHAR_CODE)['segments'] == 1

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
