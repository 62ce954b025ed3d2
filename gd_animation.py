import numpy as np
from matplotlib import animation, pyplot as plt
from tqdm import tqdm

from linreg import lin
from gd_utils import plot_fit, plot_contour


def make_animation(x, y, a_true, b_true, traj, grid, minimum, interval=200,
                   fig=None):
    """Fitted line over the data on the left, the (a, b) path over the loss
    contour on the right, one frame per row of `traj`."""
    if fig is None:
        fig = plt.figure(dpi=100, figsize=(10, 4))
    ax1, ax2 = fig.subplots(1, 2)
    line = plot_fit(x, y, traj['a'][0], traj['b'][0], ax1, a_true, b_true)
    xs = line.get_xdata()

    A, B, L = grid
    plot_contour(A, B, L, ax2, minimum)
    path, = ax2.plot([], [], 'r-', lw=1)
    point, = ax2.plot([], [], 'ro', ms=6)
    ax2.set_xlim(A.min(), A.max())
    ax2.set_ylim(B.min(), B.max())
    fig.tight_layout()

    def animate(i):
        a, b = traj['a'][i], traj['b'][i]
        line.set_ydata(lin(a, b, xs))
        ax1.set_title('iteration %d: a=%.3f b=%.3f' % (traj['it'][i], a, b))
        path.set_data(traj['a'][:i + 1], traj['b'][:i + 1])
        point.set_data([a], [b])
        ax2.set_title('loss %.4f' % traj['loss'][i])
        return line, path, point

    return animation.FuncAnimation(fig, animate, np.arange(len(traj)),
                                   interval=interval)


def save_gif(ani, path, fps=5):
    with tqdm(desc='frames') as pbar:
        def progress(i, n):
            pbar.total = n
            pbar.update(1)
        ani.save(path, writer=animation.PillowWriter(fps=fps),
                 progress_callback=progress)
