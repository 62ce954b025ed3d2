import numpy as np
np.set_printoptions(precision=4, linewidth=100)

n = 100
x_max = 10.
lr = 0.01
n_iter = 500
n_first = 4
n_frames = 50
grid_step = 0.1
grid_lims = (-1., 3.)
a_range = (0., 2.)
b_range = (0., 2.)


def lin(a, b, x): return a * x + b


def make_data(n=n, noise=1., seed=None):
    """Random true line plus `n` noisy observations of it.

    Returns (a_true, b_true, x, y). Without a seed every call draws a new
    dataset.
    """
    rng = np.random.RandomState(seed)
    a = rng.uniform(*a_range)
    b = rng.uniform(*b_range)
    x = rng.uniform(0, x_max, n)
    y = lin(a, b, x) + noise * rng.randn(n)
    return a, b, x, y


def loss(y, x, a, b):
    """Mean squared error of the line (a, b). `a` and `b` may be arrays of the
    same shape, in which case one loss per (a, b) pair is returned."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    err = y - lin(a[..., None], b[..., None], x)
    return (err**2).mean(axis=-1)


# d[(y-(a*x+b))**2,a] = -2 x (y - (a x + b))
# d[(y-(a*x+b))**2,b] = -2 (y - (a x + b))
def grad(y, x, a, b):
    err = y - lin(a, b, x)
    return (-2 * x * err).mean(), (-2 * err).mean()


def upd(y, x, a, b, lr=lr):
    da, db = grad(y, x, a, b)
    return a - lr * da, b - lr * db


def run(y, x, a0=0., b0=0., lr=lr, n_iter=n_iter):
    """Batch gradient descent from (a0, b0).

    Row 0 of the returned (n_iter+1, 2) array is the starting point, row i the
    estimate after iteration i.
    """
    hist = np.empty((n_iter + 1, 2))
    hist[0] = a0, b0
    for i in range(1, n_iter + 1):
        hist[i] = upd(y, x, hist[i - 1, 0], hist[i - 1, 1], lr)
    return hist


def sample_iters(n_iter=n_iter, n_first=n_first, n_frames=n_frames):
    """The first few iterations, every (n_iter/n_frames)-th one, then the last
    one again so the animation rests on the final fit. Short budgets sample
    every iteration once."""
    n_first = min(n_first, n_iter)
    n_frames = min(n_frames, n_iter)
    every = n_iter // n_frames
    mid = np.arange(1, n_frames + 1) * every
    return np.r_[np.arange(1, n_first + 1), mid[mid > n_first], n_iter]


traj_dtype = [('it', int), ('a', float), ('b', float), ('loss', float)]


def sample_trajectory(hist, y, x, iters=None):
    if iters is None:
        iters = sample_iters(len(hist) - 1)
    ab = hist[iters]
    traj = np.empty(len(iters), dtype=traj_dtype)
    traj['it'] = iters
    traj['a'] = ab[:, 0]
    traj['b'] = ab[:, 1]
    traj['loss'] = loss(y, x, ab[:, 0], ab[:, 1])
    return traj


def loss_grid(y, x, lims=grid_lims, step=grid_step):
    lo, hi = lims
    ticks = np.linspace(lo, hi, int(round((hi - lo) / step)) + 1)
    A, B = np.meshgrid(ticks, ticks)
    return A, B, loss(y, x, A, B)


def lstsq(x, y):
    """Closed form least squares line, the global minimum of `loss`."""
    a, b = np.polyfit(x, y, 1)
    return a, b
