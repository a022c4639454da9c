#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Pytest configuration and shared fixtures.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from gfaweaver.gfa import GFAGraph


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="gfaweaver_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def graph():
    """Fresh, empty graph."""
    return GFAGraph()


@pytest.fixture
def simple_gfa():
    """Small, valid GFA v1 document."""
    return (
        "H\tVN:Z:1\n"
        "#\tassembled by hand\n"
        "S\tctg1\tACGTACGT\tLN:i:8\tRC:i:12\n"
        "S\tctg2\tTTGACCA\n"
        "S\tctg3\tGGGCCC\tSH:i:abc123\tUR:i:file:///data/ctg3.fa\n"
        "L\tctg1\t+\tctg2\t-\t0M\n"
        "L\tctg2\t-\tctg3\t+\t*\n"
    )


@pytest.fixture
def simple_gfa_file(temp_output_dir, simple_gfa):
    """simple_gfa written to disk."""
    path = temp_output_dir / "simple.gfa"
    path.write_text(simple_gfa)
    return path


@pytest.fixture
def broken_gfa_file(temp_output_dir):
    """GFA file with a duplicate segment and a bad orientation."""
    path = temp_output_dir / "broken.gfa"
    path.write_text(
        "H\tVN:Z:1\n"
        "S\tctg1\tACGT\n"
        "S\tctg1\tTTTT\n"
        "L\tctg1\tx\tctg1\t+\t0M\n"
        "S\tctg2\tGGGG\n"
    )
    return path

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
