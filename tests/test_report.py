"""Tests for the animation and the HTML report."""

import numpy as np
from matplotlib import pyplot as plt
from PIL import Image

from linreg import lin, make_data, run, sample_trajectory, loss_grid, lstsq
from gd_animation import make_animation, save_gif
from gd_utils import plot_fit, plot_losses
import sgd_intro


def small_fit():
    a, b, x, y = make_data(seed=0)
    hist = run(y, x)
    traj = sample_trajectory(hist, y, x, iters=[1, 2, 3, 250, 500])
    return a, b, x, y, hist, traj


def test_plot_fit_returns_updatable_line():
    a, b, x, y, hist, traj = small_fit()
    fig = plt.figure()
    line = plot_fit(x, y, 0.5, 1., a_true=a, b_true=b)
    np.testing.assert_allclose(line.get_ydata(), lin(0.5, 1., line.get_xdata()))
    assert len(fig.axes[0].get_lines()) == 2
    plt.close(fig)


def test_plot_losses():
    a, b, x, y, hist, traj = small_fit()
    fig = plt.figure()
    ax = plot_losses(traj)
    np.testing.assert_array_equal(ax.get_lines()[0].get_xdata(), traj['it'])
    plt.close(fig)


def test_save_gif_ends_on_last_frame(tmp_path):
    a, b, x, y, hist, traj = small_fit()
    fig = plt.figure()
    ani = make_animation(x, y, a, b, traj, loss_grid(y, x), lstsq(x, y),
                         fig=fig)
    path = tmp_path / 'gd.gif'
    save_gif(ani, str(path))

    with Image.open(path) as im:
        assert im.format == 'GIF'
        assert im.n_frames == len(traj)

    ax1, ax2 = fig.axes
    assert ax1.get_title().startswith('iteration 500:')
    fitted = ax1.get_lines()[-1]
    np.testing.assert_allclose(fitted.get_ydata(),
                               lin(hist[-1, 0], hist[-1, 1], fitted.get_xdata()))
    path_line = ax2.get_lines()[-2]
    np.testing.assert_array_equal(path_line.get_xdata(), traj['a'])
    plt.close(fig)


def test_save_gif_merges_repeated_last_frame(tmp_path):
    a, b, x, y = make_data(seed=0)
    hist = run(y, x)
    traj = sample_trajectory(hist, y, x, iters=[1, 2, 500, 500])
    fig = plt.figure()
    ani = make_animation(x, y, a, b, traj, loss_grid(y, x), lstsq(x, y),
                         fig=fig)
    path = tmp_path / 'gd.gif'
    save_gif(ani, str(path))
    plt.close(fig)

    with Image.open(path) as im:
        assert im.n_frames == len(set(traj['it']))


def test_fit():
    f = sgd_intro.fit(seed=1, noise=0.)
    assert len(f.hist) == 501
    assert len(f.traj) == 55
    assert f.grid[2].shape == (41, 41)
    assert np.allclose(f.minimum, (f.a_true, f.b_true))


def test_write_report(tmp_path, capsys):
    path = tmp_path / 'report.html'
    f = sgd_intro.write_report(str(path), seed=2, n_iter=100)

    html = path.read_text()
    assert html.startswith('<!DOCTYPE html>')
    assert '100 iterations' in html
    assert 'data:image/png;base64,' in html
    assert '<script' in html
    assert '%.4f' % f.a_true in html

    out = capsys.readouterr().out
    assert 'true a=%.4f' % f.a_true in out
