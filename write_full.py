import numpy as np
from load_full import SENTINEL


def _format_value(x):
    # text readers cannot parse inf/nan, so both infinities and nan become sentinels
    if np.isnan(x) or x == np.inf:
        x = SENTINEL
    elif x == -np.inf:
        x = -SENTINEL
    return f"{x:.17g}"


def write_full(filename, A):
    """Write a dense matrix in the layout read by read_full. 1-D input is written as a column."""
    A = np.asarray(A)
    if A.ndim == 1:
        A = A.reshape((-1, 1))
    if A.ndim != 2:
        raise ValueError(f"Expected a vector or 2-D matrix, got shape {A.shape}")

    is_complex = np.iscomplexobj(A)
    A = A.astype(np.complex128 if is_complex else np.float64)
    rows, cols = A.shape

    with open(filename, 'w') as f:
        f.write(f"%%MatrixMarket matrix array {'complex' if is_complex else 'real'} general\n")
        f.write(f"{rows} {cols}\n")
        for x in A.flatten(order='F'):
            if is_complex:
                f.write(f"{_format_value(x.real)} {_format_value(x.imag)}\n")
            else:
                f.write(f"{_format_value(x)}\n")
