from matplotlib import pyplot as plt
import numpy as np
from linreg import lin
np.set_printoptions(precision=4, linewidth=100)


def plot_fit(x, y, a, b, ax=None, a_true=None, b_true=None):
    """Scatter of the data with the line (a, b) over it, and the true line
    dashed when given. Returns the fitted line artist so it can be updated."""
    if ax is None:
        ax = plt.gca()
    ax.scatter(x, y, s=12, alpha=0.7)
    xs = np.array([0, x.max()])
    if a_true is not None:
        ax.plot(xs, lin(a_true, b_true, xs), 'k--', label='true')
    line, = ax.plot(xs, lin(a, b, xs), 'r', lw=2, label='fit')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend(loc='upper left')
    return line


def plot_contour(A, B, L, ax=None, minimum=None, levels=30):
    if ax is None:
        ax = plt.gca()
    ax.contour(A, B, L, levels, cmap='viridis')
    if minimum is not None:
        ax.plot(*minimum, 'b*', ms=12, label='minimum')
    ax.set_xlabel('a')
    ax.set_ylabel('b')
    return ax


def plot_losses(traj, ax=None):
    if ax is None:
        ax = plt.gca()
    ax.semilogy(traj['it'], traj['loss'], 'o-', ms=3)
    ax.set_xlabel('iteration')
    ax.set_ylabel('loss')
    return ax
