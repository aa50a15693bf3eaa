"""
Sample product configuration used by the ``demo`` command.
"""

from __future__ import annotations

from .components import Assembly, Part


def build_sample_configuration() -> Assembly:
    """
    Build a gaming computer made of a motherboard (CPU and RAM) and an SSD.

    The CPU is mandatory for the computer; it sits inside the motherboard,
    so the requirement is met through a nested assembly.
    """
    cpu = Part("Intel i9 CPU", 500)
    ram = Part("16GB RAM", 150)
    ssd = Part("1TB SSD", 200)

    motherboard = Assembly("Motherboard")
    motherboard.add_child(cpu)
    motherboard.add_child(ram)

    computer = Assembly("Gaming Computer")
    computer.add_child(motherboard)
    computer.add_child(ssd)
    computer.add_mandatory(cpu)

    return computer
