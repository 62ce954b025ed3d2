# Gradient descent for a line, animated.
#
# Fit y = a*x + b to noisy synthetic data with batch gradient descent, then
# animate the fitted line over the data next to the (a, b) path over the loss
# contour. Writes a standalone HTML page (and optionally a GIF).

import base64
import collections
import io

import matplotlib
from matplotlib import pyplot as plt

import linreg
from linreg import make_data, run, sample_trajectory, loss, loss_grid, lstsq
from gd_animation import make_animation, save_gif
from gd_utils import plot_losses

Fit = collections.namedtuple(
    'Fit', 'a_true b_true x y hist traj grid minimum')


def fit(seed=None, noise=1., lr=linreg.lr, n_iter=linreg.n_iter):
    a_true, b_true, x, y = make_data(noise=noise, seed=seed)
    hist = run(y, x, lr=lr, n_iter=n_iter)
    traj = sample_trajectory(hist, y, x)
    return Fit(a_true, b_true, x, y, hist, traj, loss_grid(y, x), lstsq(x, y))


page = '''<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Gradient descent</title></head>
<body>
<h1>Fitting a line with gradient descent</h1>
<p>{n} points, learning rate {lr}, {n_iter} iterations.</p>
<table>
<tr><th></th><th>a</th><th>b</th><th>loss</th></tr>
<tr><td>true</td><td>{a_true:.4f}</td><td>{b_true:.4f}</td><td>{loss_true:.4f}</td></tr>
<tr><td>least squares</td><td>{a_min:.4f}</td><td>{b_min:.4f}</td><td>{loss_min:.4f}</td></tr>
<tr><td>gradient descent</td><td>{a:.4f}</td><td>{b:.4f}</td><td>{loss:.4f}</td></tr>
</table>
{animation}
<img src="data:image/png;base64,{losses}">
</body>
</html>
'''


def losses_png(traj):
    fig = plt.figure(dpi=100, figsize=(5, 3))
    plot_losses(traj)
    fig.tight_layout()
    buf = io.BytesIO()
    fig.savefig(buf, format='png')
    plt.close(fig)
    return base64.b64encode(buf.getvalue()).decode('ascii')


def write_report(path, seed=None, gif_path=None, lr=linreg.lr,
                 n_iter=linreg.n_iter):
    f = fit(seed, lr=lr, n_iter=n_iter)
    a, b = f.hist[-1]
    print('true a=%.4f b=%.4f, fitted a=%.4f b=%.4f, loss %.4f' % (
        f.a_true, f.b_true, a, b, f.traj['loss'][-1]))

    fig = plt.figure(dpi=100, figsize=(10, 4))
    ani = make_animation(f.x, f.y, f.a_true, f.b_true, f.traj, f.grid,
                         f.minimum, fig=fig)
    if gif_path is not None:
        save_gif(ani, gif_path)
    html = page.format(
        n=len(f.x), lr=lr, n_iter=len(f.hist) - 1,
        a_true=f.a_true, b_true=f.b_true,
        loss_true=loss(f.y, f.x, f.a_true, f.b_true),
        a_min=f.minimum[0], b_min=f.minimum[1],
        loss_min=loss(f.y, f.x, *f.minimum),
        a=a, b=b, loss=f.traj['loss'][-1],
        animation=ani.to_jshtml(default_mode='once'),
        losses=losses_png(f.traj))
    plt.close(fig)
    with open(path, 'w') as fh:
        fh.write(html)
    return f


def main():
    matplotlib.use('Agg')
    write_report('gradient-descent.html', gif_path='gradient-descent.gif')


if __name__ == '__main__':
    main()
