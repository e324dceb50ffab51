"""
Recurrent Memory - 4-Slot Gated Cell
====================================

A tiny LSTM-style memory that carries short-term context across steps.
Each slot reads a strided triple of the normalized feature vector:

    offset   = (i * 3) mod 11
    slice_i  = avg(x[offset], x[offset + 2], x[offset + 4])   (indices mod 11)

    input    = σ(4·slice − 1 + 0.8·h_i)
    forget   = σ(1.5 − 2·slice)
    output   = σ(3·slice + 0.3)
    cand     = tanh(2·slice + 0.1·rng())

    c_i ← forget·c_i + input·cand
    h_i ← output·tanh(c_i)

Slots 0..2 feed attention, cognitive load and stress respectively.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional, Sequence

import numpy as np

from .numeric import sigmoid
from .rng import RandomSource


class MemorySlot(IntEnum):
    """Semantic role of each hidden slot."""
    ATTENTION = 0
    LOAD = 1
    STRESS = 2
    RESERVE = 3


MEMORY_DIM = len(MemorySlot)
INITIAL_HIDDEN = (0.1, 0.05, 0.08, 0.04)


class RecurrentMemory:
    """Hidden/cell vectors plus the gated update rule."""

    def __init__(
        self,
        hidden: Optional[Sequence[float]] = None,
        cell: Optional[Sequence[float]] = None,
    ):
        self.hidden = np.array(hidden if hidden is not None else INITIAL_HIDDEN, dtype=np.float64)
        self.cell = np.array(cell if cell is not None else np.zeros(MEMORY_DIM), dtype=np.float64)
        if self.hidden.shape != (MEMORY_DIM,) or self.cell.shape != (MEMORY_DIM,):
            raise ValueError(f"memory vectors must have {MEMORY_DIM} slots")

    @staticmethod
    def slot_slice(x: Sequence[float], slot: int) -> float:
        n = len(x)
        offset = (slot * 3) % n
        return (x[offset] + x[(offset + 2) % n] + x[(offset + 4) % n]) / 3

    def update(self, x: Sequence[float], rng: RandomSource) -> np.ndarray:
        """
        Advance one step on the normalized feature vector.

        Draws exactly one value from ``rng`` per slot, in slot order.
        Returns a copy of the new hidden vector.
        """
        for i in range(MEMORY_DIM):
            s = float(self.slot_slice(x, i))
            input_gate = sigmoid(s * 4 - 1 + float(self.hidden[i]) * 0.8)
            forget_gate = sigmoid(1.5 - s * 2)
            output_gate = sigmoid(s * 3 + 0.3)
            candidate = math.tanh(s * 2 + rng.next() * 0.1)
            c = forget_gate * float(self.cell[i]) + input_gate * candidate
            self.cell[i] = c
            self.hidden[i] = output_gate * math.tanh(c)
        return self.hidden.copy()

    def __repr__(self) -> str:
        return f"RecurrentMemory(hidden={self.hidden.round(4).tolist()}, cell={self.cell.round(4).tolist()})"


__all__ = ['MemorySlot', 'MEMORY_DIM', 'INITIAL_HIDDEN', 'RecurrentMemory']
