# elman.py
from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np

from elman.models.core import ElmanParams, init_params, tanh_activation, as_vector


class ElmanNetwork:
    """
    Elman recurrent network (B=1, row-vector convention):

      pre(t) = x(t) W_in + h(t-1) W_hid   ∈ R^{H}
      h(t)   = tanh(pre(t))                ∈ R^{H}
      y(t)   = h(t) W_out                  ∈ R^{O}   (linear output)

    The hidden state h is the only state carried between calls. It starts at zero
    and is replaced by every forward()/predict(); it is never reset afterwards, not
    between examples and not between epochs.

    Public API:
      - forward(x)                   -> y        (state transition: updates h)
      - backward(x, target, y)       -> None     (in-place weight update)
      - train_epoch(inputs, targets) -> total squared error of the epoch
      - train(inputs, targets, epochs, log_every=None) -> per-epoch errors
      - predict(x)                   -> y        (same as forward, updates h)

    Not thread-safe: one instance must be driven by one caller at a time.
    """
    def __init__(self, input_neurons: int, hidden_neurons: int, output_neurons: int,
                 learning_rate: float, seed: Optional[int] = None):
        self.input_neurons = input_neurons
        self.hidden_neurons = hidden_neurons
        self.output_neurons = output_neurons
        self.learning_rate = learning_rate

        self.p: ElmanParams = init_params(input_neurons, hidden_neurons, output_neurons, seed=seed)
        self.p.check()
        self.f = tanh_activation()

        self.hidden_state = self.zero_state()

    # ----- utilities -----
    def zero_state(self) -> np.ndarray:
        return np.zeros((self.hidden_neurons,), dtype=float)

    # ----- forward pass -----
    def forward(self, x) -> np.ndarray:
        """
        One step. Replaces self.hidden_state with h(t) and returns y(t).
        Calling it twice with the same input generally gives two different
        outputs, since the second call sees the state left by the first.
        """
        x = as_vector(x, self.input_neurons, "input")
        pre = x @ self.p.W_in + self.hidden_state @ self.p.W_hid   # (H,)
        self.hidden_state = self.f.fn(pre)                         # (H,)
        return self.hidden_state @ self.p.W_out                    # (O,)

    # ----- backward pass (one-step truncated) -----
    def backward(self, x, target, output) -> None:
        """
        Update W_out, W_in and W_hid in place from the error of the most recent
        forward(x) call, whose return value is `output`.

        Gradients stop at the current step: no propagation into earlier states.
        The output gradient is scaled by tanh'(output) although the output layer
        is linear; this factor is kept as is.
        """
        x = as_vector(x, self.input_neurons, "input")
        target = as_vector(target, self.output_neurons, "target")
        output = as_vector(output, self.output_neurons, "output")
        h = self.hidden_state
        lr = self.learning_rate

        output_error = target - output                              # (O,)
        output_grad = output_error * self.f.deriv(output)           # (O,)

        # everything below reads the weights as they were before this call
        hidden_grad = output_grad @ self.p.W_out.T                  # (H,)
        hidden_error = hidden_grad * self.f.deriv(h)                # (H,)

        self.p.W_out += lr * np.outer(h, output_grad)               # (H, O)
        self.p.W_in += lr * np.outer(x, hidden_error)               # (I, H)
        self.p.W_hid += lr * np.outer(h, hidden_error)              # (H, H)

    # ----- training -----
    def train_epoch(self, inputs: Sequence, targets: Sequence) -> float:
        """One ordered pass over the dataset. Returns Σ (target - output)²."""
        if len(inputs) != len(targets):
            raise ValueError(f"Mismatch: {len(inputs)} inputs vs {len(targets)} targets")
        total_error = 0.0
        for x, target in zip(inputs, targets):
            output = self.forward(x)
            self.backward(x, target, output)
            diff = np.asarray(target, dtype=float) - output
            total_error += float((diff * diff).sum())
        return total_error

    def train(self, inputs: Sequence, targets: Sequence, epochs: int,
              log_every: Optional[int] = None) -> List[float]:
        """
        Run `epochs` ordered passes. The hidden state carries over from one
        example to the next and from the last example of an epoch to the first
        of the following one. Returns the total error of every epoch.
        """
        history: List[float] = []
        for epoch in range(epochs):
            total_error = self.train_epoch(inputs, targets)
            history.append(total_error)
            if log_every and (epoch + 1) % log_every == 0:
                print(f"Epoch {epoch + 1}, Error: {total_error:.6f}")
        return history

    # ----- inference -----
    def predict(self, x) -> np.ndarray:
        """Alias of forward(); continues the current hidden-state trajectory."""
        return self.forward(x)
