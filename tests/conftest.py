"""Pytest configuration and shared fixtures."""

import gzip
import random

import pytest
from click.testing import CliRunner

from gzdec import config as config_layer
from gzdec.cli.main import cli
from gzdec.core import DecompressionContext
from gzdec.models import DecoderConfig


@pytest.fixture(autouse=True)
def clear_config_cache(monkeypatch, tmp_path):
    """Isolate every test from real config files and the module cache.

    Runs each test from an empty working directory with GZDEC_CONFIG unset,
    so config resolution falls back to defaults unless a test opts in.
    """
    monkeypatch.delenv("GZDEC_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    config_layer.reset()
    yield
    config_layer.reset()


@pytest.fixture
def context():
    """Provide an initialized context, finalized after the test if still active."""
    ctx = DecompressionContext()
    ctx.initialize()
    yield ctx
    if ctx.active:
        ctx.finalize()


@pytest.fixture
def small_config():
    """Config with tiny chunks so short inputs cross many chunk boundaries."""
    return DecoderConfig(input_chunk_size=64, output_chunk_size=128)


@pytest.fixture
def text_payload():
    """Provide a compressible text payload."""
    return b"".join(
        f"{i:05d},record-{i % 7},value={i * 31 % 1000}\n".encode() for i in range(2000)
    )


@pytest.fixture
def random_payload():
    """Provide an incompressible payload (compressed size ~ raw size)."""
    rng = random.Random(1234)
    return bytes(rng.getrandbits(8) for _ in range(50_000))


@pytest.fixture
def gz_text(text_payload):
    return gzip.compress(text_payload)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["decode", "file.gz", "-o", "out.txt"])
        result = invoke(["decode", "--silent"], input_data=gz_bytes)
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def write_gz(tmp_path):
    """Write ``data`` gzip-compressed to a file and return its path."""

    def _write(data: bytes, name: str = "data.gz"):
        path = tmp_path / name
        path.write_bytes(gzip.compress(data))
        return path

    return _write
