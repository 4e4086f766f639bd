import os
import numpy as np
import matplotlib.pyplot as plt
from scipy.io import mmread
from scipy.sparse import kron, eye, diags
from tqdm import tqdm
from load_full import read_full, SENTINEL
from write_full import write_full

DATA_DIR = "full_matrices"
PLOT_PATH = "plot_full.png"
N = 8
SEED = 0

# generate matrix
def generate_poisson_2d(n):
    e = np.ones(n)
    T = diags([e, -4*e, e], [-1, 0, 1], shape=(n, n))
    I = eye(n)
    return (kron(I, T) + kron(T, I)).tocsr()

def generate_samples(data_dir=DATA_DIR, n=N, seed=SEED):
    """Write a few sample full-matrix files into data_dir and return their paths."""
    os.makedirs(data_dir, exist_ok=True)
    rng = np.random.default_rng(seed)

    samples = {}
    samples["random_real"] = rng.standard_normal((n, n + 2))
    samples["random_complex"] = rng.standard_normal((n, n)) + 1j * rng.standard_normal((n, n))
    samples["poisson_2d"] = generate_poisson_2d(n).toarray()

    # LP-style bounds: some variables have no lower or no upper bound
    bounds = np.zeros((n * n, 2))
    bounds[:, 1] = rng.uniform(low=1.0, high=10.0, size=n * n)
    bounds[::3, 0] = -np.inf
    bounds[1::4, 1] = np.inf
    samples["poisson_2d_bounds"] = bounds

    paths = []
    for name, A in samples.items():
        path = os.path.join(data_dir, f"{name}.mtx")
        write_full(path, A)
        paths.append(path)
    return paths

def check_file(path):
    """Read path with read_full and compare it against scipy's Matrix Market reader."""
    A = read_full(path)
    with open(path, 'r', encoding='latin-1') as f:
        if not f.readline().startswith("%%MatrixMarket"):
            raise ValueError("no Matrix Market banner, cannot compare with scipy")
    B = np.asarray(mmread(path))
    B = np.array(B, dtype=np.result_type(B, np.float64))
    for part in ((B.real, B.imag) if np.iscomplexobj(B) else (B,)):
        part[part == SENTINEL] = np.inf
        part[part == -SENTINEL] = -np.inf

    if A.shape != B.shape:
        raise ValueError(f"Shape mismatch for {path}: {A.shape} vs {B.shape}")

    finite = np.isfinite(A)
    max_diff = float(np.max(np.abs(A[finite] - B[finite]))) if finite.any() else 0.0
    return {
        "path": path,
        "shape": A.shape,
        "dtype": A.dtype,
        "n_inf": int(np.count_nonzero(np.isinf(A))),
        "inf_match": bool(np.array_equal(A[~finite], B[~finite])),
        "max_diff": max_diff,
        "matrix": A,
    }

def plot_magnitude(A, title, plot_path=PLOT_PATH):
    plt.figure(figsize=(6, 5))
    plt.imshow(np.ma.masked_invalid(np.abs(A)), cmap="viridis", interpolation="nearest")
    plt.colorbar(label="|a_ij|")
    plt.xlabel("Column")
    plt.ylabel("Row")
    plt.title(title)
    plt.tight_layout()
    plt.savefig(plot_path)
    plt.close()

# begin check
def run_check(data_dir=DATA_DIR, plot_path=PLOT_PATH):
    if not os.path.isdir(data_dir) or not os.listdir(data_dir):
        print(f"No matrices in {data_dir}, generating samples...")
        generate_samples(data_dir)

    paths = sorted(os.path.join(data_dir, name) for name in os.listdir(data_dir))
    paths = [p for p in paths if os.path.isfile(p)]
    results = []
    for path in tqdm(paths, desc="Checking"):
        try:
            results.append(check_file(path))
        except ValueError as e:
            print(f"Skipping {path}: {e}")

    # print results
    print("\nRead Results:")
    for r in results:
        shape = f"{r['shape'][0]} x {r['shape'][1]}"
        print(f"{os.path.basename(r['path']):<28}: {shape:>10} {str(r['dtype']):>10}  "
              f"inf = {r['n_inf']:<4} max diff = {r['max_diff']:.2e}  inf match = {r['inf_match']}")

    # plot results
    if results:
        largest = max(results, key=lambda r: r["matrix"].size)
        plot_magnitude(largest["matrix"], f"|A| for {os.path.basename(largest['path'])}", plot_path)

    return results

if __name__ == "__main__":
    run_check()
