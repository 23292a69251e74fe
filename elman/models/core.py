# core.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
import numpy as np

@dataclass
class Activation:
    fn: Callable[[np.ndarray], np.ndarray]
    deriv: Callable[[np.ndarray], np.ndarray]

def tanh_activation() -> Activation:
    def fn(x: np.ndarray) -> np.ndarray:
        return np.tanh(x)
    def deriv(x: np.ndarray) -> np.ndarray:
        y = np.tanh(x)
        return 1.0 - y*y
    return Activation(fn=fn, deriv=deriv)

@dataclass
class ElmanParams:
    W_in: np.ndarray   # (I, H)
    W_hid: np.ndarray  # (H, H)
    W_out: np.ndarray  # (H, O)
    n_in: int
    n_hidden: int
    n_out: int
    def check(self) -> None:
        assert self.W_in.shape == (self.n_in, self.n_hidden), \
            f"W_in must be (I, H)=({self.n_in}, {self.n_hidden}), got {self.W_in.shape}"
        assert self.W_hid.shape == (self.n_hidden, self.n_hidden), \
            f"W_hid must be (H, H)=({self.n_hidden}, {self.n_hidden}), got {self.W_hid.shape}"
        assert self.W_out.shape == (self.n_hidden, self.n_out), \
            f"W_out must be (H, O)=({self.n_hidden}, {self.n_out}), got {self.W_out.shape}"

def init_params(n_in: int, n_hidden: int, n_out: int, seed: Optional[int] = None) -> ElmanParams:
    """Independent uniform samples in [-1, 1] for every weight."""
    rng = np.random.default_rng(seed)
    return ElmanParams(
        W_in=rng.uniform(-1.0, 1.0, size=(n_in, n_hidden)),
        W_hid=rng.uniform(-1.0, 1.0, size=(n_hidden, n_hidden)),
        W_out=rng.uniform(-1.0, 1.0, size=(n_hidden, n_out)),
        n_in=n_in, n_hidden=n_hidden, n_out=n_out,
    )

def as_vector(x, size: int, name: str) -> np.ndarray:
    """Coerce to a float vector of exactly `size` entries (no broadcasting)."""
    v = np.asarray(x, dtype=float)
    if v.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {v.shape}")
    return v
