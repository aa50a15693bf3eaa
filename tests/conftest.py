"""Pytest fixtures for product-config tests."""

import pytest

from product_config import Assembly, Part


@pytest.fixture
def cpu():
    return Part("Intel i9 CPU", 500)


@pytest.fixture
def ram():
    return Part("16GB RAM", 150)


@pytest.fixture
def ssd():
    return Part("1TB SSD", 200)


@pytest.fixture
def motherboard(cpu, ram):
    board = Assembly("Motherboard")
    board.add_child(cpu)
    board.add_child(ram)
    return board


@pytest.fixture
def computer(motherboard, ssd, cpu):
    """Motherboard (CPU, RAM) + SSD, with the CPU mandatory."""
    product = Assembly("Gaming Computer")
    product.add_child(motherboard)
    product.add_child(ssd)
    product.add_mandatory(cpu)
    return product


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from real user and project config files."""
    monkeypatch.setattr(
        "product_config.config.USER_CONFIG_PATH", tmp_path / "user" / "config.toml"
    )
    work = tmp_path / "work"
    work.mkdir()
    (work / ".git").mkdir()
    monkeypatch.chdir(work)
    return work
