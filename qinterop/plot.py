# qinterop/plot.py
import os
import numpy as np
import matplotlib.pyplot as plt

from .density import as_qobj, qubit_count

def basis_labels(n):
    # printed most-significant qubit first, i.e. |q_{n-1} ... q_0>
    return [format(i, f"0{n}b") if n else "" for i in range(1 << n)]

def plot_density_matrix(rho, path=None, title=None):
    """Real and imaginary parts of rho side by side; saved to ``path`` if given."""
    m = as_qobj(rho).full()
    n = qubit_count(m.shape[0])
    labels = basis_labels(n)
    fig, axes = plt.subplots(1, 2, figsize=(8, 3.6))
    for ax, part, name in zip(axes, (m.real, m.imag), ("Re", "Im")):
        im = ax.imshow(part, cmap="RdBu_r", vmin=-1, vmax=1)
        ax.set_xticks(range(len(labels)))
        ax.set_yticks(range(len(labels)))
        ax.set_xticklabels(labels, rotation=90)
        ax.set_yticklabels(labels)
        ax.set_title(f"{name}(ρ)")
        fig.colorbar(im, ax=ax, fraction=0.046)
    if title:
        fig.suptitle(title)
    fig.tight_layout()
    if path:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        fig.savefig(path, dpi=200)
        plt.close(fig)
    return fig

def plot_sweep(xs, series, xlabel, ylabel, path=None, title=None):
    """``series`` maps a legend label to y-values aligned with ``xs``."""
    fig = plt.figure()
    for label, ys in series.items():
        plt.plot(np.asarray(xs), np.asarray(ys), marker="o", label=label)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    if title:
        plt.title(title)
    plt.grid(True)
    plt.legend()
    plt.tight_layout()
    if path:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        plt.savefig(path, dpi=200)
        plt.close(fig)
    return fig
