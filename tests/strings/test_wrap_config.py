"""Tests for WrapConfig validation."""
import pytest

from seqsafe.strings import DEFAULT_DELIMS, WrapConfig


def test_defaults():
    config = WrapConfig()
    assert config.width == 80
    assert config.force is False
    assert config.delims == DEFAULT_DELIMS


def test_negative_width_rejected():
    with pytest.raises(ValueError, match="width"):
        WrapConfig(width=-1)


def test_empty_delims_rejected():
    with pytest.raises(ValueError, match="delims"):
        WrapConfig(delims="")


def test_frozen():
    config = WrapConfig()
    with pytest.raises(AttributeError):
        config.width = 10
