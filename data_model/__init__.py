"""
data_model — struktury danych poddoc.

Użycie:
  from data_model import Instruction, Dependency

Moduły:
  documents: Instruction, Dependency, InstructionList

Mapowanie na dialekt POD:
  "=head1 NAME"    → Instruction(element="head1", title="NAME")
  akapity po tagu  → Instruction.content
  "=item Gadget"   → Dependency(name="Gadget") w sekcji "Dependencies"
"""

from .documents import (
    Instruction,
    Dependency,
    InstructionList,
)

__all__ = [
    "Instruction",
    "Dependency",
    "InstructionList",
]
