# qinterop/tutorial.py
import argparse, csv, os
import numpy as np

from .circuit import prepare, STATES
from .density import reg2dm
from . import channels as C
from . import qinfo as Q
from .plot import plot_density_matrix, plot_sweep

DATA_DIR = "data"

def parse_ints(s):
    return [int(x) for x in s.split(",") if x.strip()]

def fmt_matrix(rho):
    return np.array2string(rho.full(), precision=4, suppress_small=True)

# ---------------------------------------------------------------------
# individual walkthroughs

def run_entropy(state, n, qubits, seed=0):
    print(f"[run] Entropy of {state}(n={n}) reduced to qubits {qubits}")
    reg = prepare(state, n, dtype=np.complex128, seed=seed)
    rho = reg2dm(reg, active=qubits)
    s = Q.entropy(rho)
    print(fmt_matrix(rho))
    print(f"  S(rho)={s:.6f} bits  purity={Q.purity(rho):.6f}")
    print("✓ done.\n")
    return s

def run_distance(a, b, n, seed=0):
    print(f"[run] Distances between {a} and {b} (n={n})")
    rho = reg2dm(prepare(a, n, dtype=np.complex128, seed=seed))
    sigma = reg2dm(prepare(b, n, dtype=np.complex128, seed=seed + 1))
    out = {
        "trace_distance": Q.trace_distance(rho, sigma),
        "fidelity": Q.fidelity(rho, sigma),
        "relative_entropy": Q.relative_entropy(rho, sigma),
    }
    for k, v in out.items():
        print(f"  {k}={v:.6f}")
    print("✓ done.\n")
    return out

def run_channel(kind, p, state, n, qubit, seed=0):
    print(f"[run] {kind}(p={p}) on qubit {qubit} of {state}(n={n})")
    rho = reg2dm(prepare(state, n, dtype=np.complex128, seed=seed))
    ops = C.kraus(kind, p)
    if not C.is_cptp(ops):
        raise RuntimeError(f"{kind} Kraus operators are not CPTP")
    out = C.apply_channel(ops, rho, qubit=qubit)
    res = {
        "purity": Q.purity(out),
        "entropy": Q.entropy(out),
        "trace_distance": Q.trace_distance(rho, out),
    }
    for k, v in res.items():
        print(f"  {k}={v:.6f}")
    print("✓ done.\n")
    return out, res

def run_purify(state, n, qubits, seed=0):
    print(f"[run] Purify {state}(n={n}) reduced to qubits {qubits}")
    rho = reg2dm(prepare(state, n, dtype=np.complex128, seed=seed), active=qubits)
    pure = Q.purify(rho)
    back = reg2dm(pure, active=range(len(qubits)))
    err = Q.trace_distance(rho, back)
    print(f"  purified onto {pure.n} qubits  purity={Q.purity(pure):.6f}  round-trip distance={err:.2e}")
    print("✓ done.\n")
    return pure, err

HEADER = ["channel", "p", "entropy", "purity", "trace_distance", "fidelity"]

def run_sweep(kind, points, state, n, qubit, out_dir, seed=0):
    base = os.path.join(out_dir, "sweeps")
    os.makedirs(base, exist_ok=True)
    csv_path = os.path.join(base, f"{kind}.csv")
    png_path = os.path.join(base, f"{kind}.png")
    print(f"[run] {kind} sweep on {state}(n={n}) → {csv_path}")
    rho = reg2dm(prepare(state, n, dtype=np.complex128, seed=seed))
    rows = []
    for p in np.linspace(0.0, 1.0, points):
        out = C.apply_channel(C.kraus(kind, float(p)), rho, qubit=qubit)
        rows.append({
            "channel": kind, "p": f"{p:.4f}",
            "entropy": Q.entropy(out), "purity": Q.purity(out),
            "trace_distance": Q.trace_distance(rho, out), "fidelity": Q.fidelity(rho, out),
        })
        print(f"  p={p:.3f}  S={rows[-1]['entropy']:.4f}  D={rows[-1]['trace_distance']:.4f}")
    with open(csv_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        w.writerows(rows)
    ps = [float(r["p"]) for r in rows]
    plot_sweep(ps, {k: [r[k] for r in rows] for k in ("entropy", "purity", "trace_distance")},
               xlabel="p", ylabel="value", title=f"{kind} on {state}", path=png_path)
    print("✓ done.\n")
    return csv_path, png_path

def run_plot(state, n, qubits, path, seed=0):
    print(f"[run] Density matrix of {state}(n={n}) → {path}")
    rho = reg2dm(prepare(state, n, dtype=np.complex128, seed=seed), active=qubits)
    plot_density_matrix(rho, path=path, title=f"{state}, qubits {qubits or 'all'}")
    print("✓ done.\n")
    return path

# ---------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(description="qinterop walkthrough: registers → density matrices → QuTiP")
    sub = p.add_subparsers(dest="cmd", required=True)

    def state_args(sp, default="bell"):
        sp.add_argument("--state", type=str, default=default, choices=STATES)
        sp.add_argument("--n", type=int, default=2)
        sp.add_argument("--seed", type=int, default=0)

    p_entropy = sub.add_parser("entropy")
    state_args(p_entropy)
    p_entropy.add_argument("--qubits", type=str, default="0")

    p_distance = sub.add_parser("distance")
    p_distance.add_argument("--a", type=str, default="bell", choices=STATES)
    p_distance.add_argument("--b", type=str, default="ghz", choices=STATES)
    p_distance.add_argument("--n", type=int, default=2)
    p_distance.add_argument("--seed", type=int, default=0)

    p_channel = sub.add_parser("channel")
    state_args(p_channel)
    p_channel.add_argument("--kind", type=str, default="depolarizing", choices=sorted(C.CHANNELS))
    p_channel.add_argument("--p", type=float, default=0.1)
    p_channel.add_argument("--qubit", type=int, default=0)

    p_purify = sub.add_parser("purify")
    state_args(p_purify, default="ghz")
    p_purify.add_argument("--qubits", type=str, default="0")

    p_sweep = sub.add_parser("sweep")
    state_args(p_sweep)
    p_sweep.add_argument("--kind", type=str, default="amplitude_damping", choices=sorted(C.CHANNELS))
    p_sweep.add_argument("--points", type=int, default=11)
    p_sweep.add_argument("--qubit", type=int, default=0)
    p_sweep.add_argument("--out", type=str, default=DATA_DIR)

    p_plot = sub.add_parser("plot")
    state_args(p_plot)
    p_plot.add_argument("--qubits", type=str, default="")
    p_plot.add_argument("--path", type=str, default=os.path.join(DATA_DIR, "density.png"))
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.cmd == "entropy":
        run_entropy(args.state, args.n, parse_ints(args.qubits), seed=args.seed)

    elif args.cmd == "distance":
        run_distance(args.a, args.b, args.n, seed=args.seed)

    elif args.cmd == "channel":
        run_channel(args.kind, args.p, args.state, args.n, args.qubit, seed=args.seed)

    elif args.cmd == "purify":
        run_purify(args.state, args.n, parse_ints(args.qubits), seed=args.seed)

    elif args.cmd == "sweep":
        run_sweep(args.kind, args.points, args.state, args.n, args.qubit, args.out, seed=args.seed)

    elif args.cmd == "plot":
        qubits = parse_ints(args.qubits) or None
        run_plot(args.state, args.n, qubits, args.path, seed=args.seed)

if __name__ == "__main__":
    main()
