# qinterop/tests/test_tutorial.py
import csv
import os
import matplotlib
matplotlib.use("Agg")
import numpy as np
import pytest
from qinterop import tutorial
from qinterop.plot import plot_density_matrix, plot_sweep, basis_labels

def test_entropy_walkthrough(capsys):
    s = tutorial.run_entropy("bell", 2, [0])
    assert s == pytest.approx(1.0)
    assert "[run]" in capsys.readouterr().out

def test_distance_walkthrough():
    out = tutorial.run_distance("zero", "plus", 1)
    assert out["trace_distance"] == pytest.approx(np.sqrt(0.5))
    assert out["relative_entropy"] == np.inf

def test_channel_walkthrough():
    rho, res = tutorial.run_channel("depolarizing", 1.0, "zero", 1, 0)
    assert res["purity"] == pytest.approx(0.5)
    assert res["entropy"] == pytest.approx(1.0)

def test_purify_walkthrough():
    pure, err = tutorial.run_purify("ghz", 3, [0, 1])
    assert pure.n == 4
    assert err < 1e-6

def test_sweep_writes_csv_and_plot(tmp_path):
    csv_path, png_path = tutorial.run_sweep("amplitude_damping", 5, "bell", 2, 0, str(tmp_path))
    with open(csv_path) as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    assert list(rows[0]) == tutorial.HEADER
    assert float(rows[0]["trace_distance"]) == pytest.approx(0.0, abs=1e-9)
    assert os.path.exists(png_path)

def test_main_parses_subcommands(tmp_path, capsys):
    tutorial.main(["entropy", "--state", "ghz", "--n", "3", "--qubits", "0,2"])
    tutorial.main(["plot", "--state", "w", "--n", "2", "--path", str(tmp_path / "w.png")])
    assert (tmp_path / "w.png").exists()
    with pytest.raises(SystemExit):
        tutorial.main(["channel", "--kind", "nope"])

def test_plot_helpers(tmp_path):
    assert basis_labels(2) == ["00", "01", "10", "11"]
    fig = plot_density_matrix(np.eye(4) / 4)
    assert len(fig.axes) == 4  # two panels + two colorbars
    path = tmp_path / "sweep" / "s.png"
    plot_sweep([0, 1], {"a": [0, 1]}, "x", "y", path=str(path))
    assert path.exists()

def test_distance_defaults_compare_bell_with_ghz():
    args = tutorial.build_parser().parse_args(["distance"])
    assert (args.a, args.b, args.n) == ("bell", "ghz", 2)
    out = tutorial.run_distance(args.a, args.b, 3)
    assert out["trace_distance"] > 0.5
