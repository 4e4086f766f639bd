import re
import numpy as np

SENTINEL = 1e308
# ASCII whitespace only, as a scanf-style reader splits
TOKEN = re.compile(r'[^ \t\n\r\f\v]+')


class FullMatrixFormatError(ValueError):
    """Raised when a full-matrix file is not in the expected layout."""

    def __init__(self, message, path=None, expected=None, actual=None):
        super().__init__(message)
        self.path = path
        self.expected = expected
        self.actual = actual


def _parse_dim(token):
    # int() also takes digit-group underscores, which a %d scanner does not
    if '_' in token:
        raise ValueError(f"invalid literal for int(): '{token}'")
    return int(token)


def _parse_value(token):
    if '_' in token:
        raise ValueError(f"could not convert string to float: '{token}'")
    return float(token)


def read_full(filename, strict=True):
    """Read a dense real or complex matrix stored column-major after a header line and a 'rows cols' line."""
    # latin-1 decodes every byte
    with open(filename, 'r', encoding='latin-1') as f:
        # header line is ignored
        f.readline()
        tokens = TOKEN.findall(f.read())

    if len(tokens) < 2:
        raise FullMatrixFormatError(f"invalid file: {filename} (missing matrix dimensions)",
                                    path=filename)
    try:
        rows, cols = _parse_dim(tokens[0]), _parse_dim(tokens[1])
    except ValueError:
        raise FullMatrixFormatError(f"invalid file: {filename} "
                                    f"(failed to parse matrix dimensions: '{tokens[0]} {tokens[1]}')",
                                    path=filename)
    if rows < 0 or cols < 0:
        raise FullMatrixFormatError(f"invalid file: {filename} (negative dimensions {rows} x {cols})",
                                    path=filename)

    data = []
    for k, token in enumerate(tokens[2:]):
        try:
            data.append(_parse_value(token))
        except ValueError:
            if not strict:
                break
            raise FullMatrixFormatError(f"invalid file: {filename} (bad value '{token}' at entry {k + 1})",
                                        path=filename)

    A = np.array(data, dtype=np.float64)
    A[A == SENTINEL] = np.inf
    A[A == -SENTINEL] = -np.inf

    n = rows * cols
    if len(A) == n:
        return A.reshape((rows, cols), order='F')
    if len(A) == 2 * n:
        Z = np.empty((rows, cols), dtype=np.complex128)
        # assign parts separately so inf * 1j does not leak nan into the real part
        Z.real = A[0::2].reshape((rows, cols), order='F')
        Z.imag = A[1::2].reshape((rows, cols), order='F')
        return Z

    raise FullMatrixFormatError(f"invalid file: {filename} "
                                f"(expected {n} or {2 * n} entries for a {rows} x {cols} matrix, found {len(A)})",
                                path=filename, expected=(n, 2 * n), actual=len(A))
