#!/usr/bin/env python
"""
Compare the one-step weight update against PyTorch autograd.

With a zero starting state and a single output, the W_out and W_in updates
are the negative gradient of 0.5 * (target - y)^2 scaled by
lr * (1 - tanh(y)^2). The W_hid gradient is zero from a zero state, while
the update uses the current hidden state, so it is checked separately.

Usage:
    python tests/test_gradients.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch

from elman.models.elman import ElmanNetwork


def autograd_step(W_in, W_hid, W_out, h_prev, x, target):
    """Reference forward + backward in float64, returns the three gradients."""
    W_in_t = torch.tensor(W_in, dtype=torch.float64, requires_grad=True)
    W_hid_t = torch.tensor(W_hid, dtype=torch.float64, requires_grad=True)
    W_out_t = torch.tensor(W_out, dtype=torch.float64, requires_grad=True)

    h = torch.tanh(torch.tensor(x, dtype=torch.float64) @ W_in_t
                   + torch.tensor(h_prev, dtype=torch.float64) @ W_hid_t)
    y = h @ W_out_t
    loss = 0.5 * ((torch.tensor(target, dtype=torch.float64) - y) ** 2).sum()
    loss.backward()

    return W_in_t.grad.numpy(), W_hid_t.grad.numpy(), W_out_t.grad.numpy(), y.detach().numpy()


def test_update_is_scaled_negative_gradient():
    print("\n" + "=" * 60)
    print("Test: Update vs autograd")
    print("=" * 60)

    lr = 0.05
    net = ElmanNetwork(3, 4, 1, lr, seed=3)
    x = np.array([0.1, 0.2, 0.3])
    target = np.array([0.5])

    W_in0, W_hid0, W_out0 = net.p.W_in.copy(), net.p.W_hid.copy(), net.p.W_out.copy()
    g_in, g_hid, g_out, y_ref = autograd_step(W_in0, W_hid0, W_out0, np.zeros(4), x, target)

    output = net.forward(x)
    assert np.allclose(output, y_ref)
    net.backward(x, target, output)

    scale = 1.0 - np.tanh(output) ** 2
    assert np.allclose(net.p.W_out, W_out0 - lr * scale * g_out)
    assert np.allclose(net.p.W_in, W_in0 - lr * scale * g_in)
    print("✓ W_out and W_in match lr * tanh'(y) * (-grad)")

    # from a zero state the recurrent weights get no true gradient
    assert np.allclose(g_hid, 0.0)
    assert not np.allclose(net.p.W_hid, W_hid0)
    print("✓ W_hid moves along the current hidden state")


def test_update_direction_multi_output():
    """Per-output tanh' factors keep every W_out column a descent direction."""
    lr = 0.01
    net = ElmanNetwork(2, 3, 2, lr, seed=8)
    x = np.array([0.4, -0.2])
    target = np.array([0.3, -0.6])

    W_out0 = net.p.W_out.copy()
    _, _, g_out, _ = autograd_step(net.p.W_in.copy(), net.p.W_hid.copy(), W_out0, np.zeros(3), x, target)

    output = net.forward(x)
    net.backward(x, target, output)

    step = net.p.W_out - W_out0
    for k in range(2):
        assert float(step[:, k] @ g_out[:, k]) <= 0.0


def run_all_tests():
    test_update_is_scaled_negative_gradient()
    test_update_direction_multi_output()
    print("\n✅ Gradient checks passed!")


if __name__ == "__main__":
    run_all_tests()
