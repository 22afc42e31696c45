"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_dna_sequence():
    """Return a sample DNA sequence for testing."""
    return "cggtacggt"


@pytest.fixture
def sample_rna_sequence():
    """Return the mRNA transcribed from the sample DNA sequence."""
    return "GCCAUGCCA"


@pytest.fixture
def dna_file(tmp_path, sample_dna_sequence):
    """Write the sample DNA sequence to a file and return its path."""
    path = tmp_path / "gene.txt"
    path.write_text(sample_dna_sequence + "\n")
    return path
