# Copyright 2024, m3shware
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

""" Basic vector math.

Small helpers for single 3-vectors. Vectorized computations should use
the corresponding NumPy functions instead.
"""

import math
import numpy as np


def angle(v, w, deg=False):
    r""" Unsigned angle between vectors.

    Parameters
    ----------
    v, w : array_like, shape (3, )
        Vector in 3-space.
    deg : bool, optional
        Convert result from radians to degrees.

    Returns
    -------
    float
        Angle in :math:`[0, \pi]`, or degrees if requested.

    Note
    ----
    The angle between any vector and the zero vector is taken to be zero.
    This keeps weights derived from angles totally ordered.
    """
    v = np.asarray(v, dtype=float)
    w = np.asarray(w, dtype=float)

    denom = norm(v) * norm(w)

    if denom == 0.0:
        return 0.0

    phi = math.acos(clamp(v.dot(w) / denom, -1.0, 1.0))

    return math.degrees(phi) if deg else phi


def clamp(x, lo, hi):
    """ Clamp value to the closed interval [`lo`, `hi`].
    """
    assert lo <= hi
    return max(min(x, hi), lo)


def cross(u, v):
    r""" Cross product of vectors in :math:`\mathbb{R}^3`.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
    """
    # Unpacking also catches shape problems.
    u0, u1, u2 = u
    v0, v1, v2 = v

    return np.array([u1*v2 - u2*v1,
                     u2*v0 - u0*v2,
                     u0*v1 - u1*v0], dtype=float)


def norm(u):
    """ Euclidean length of a vector.
    """
    u = np.asarray(u, dtype=float)
    return math.sqrt(u.dot(u))


def unit(u):
    """ Normalized copy of a vector.

    The zero vector is returned unchanged.

    Returns
    -------
    ~numpy.ndarray
    """
    u = np.asarray(u, dtype=float)
    length = norm(u)

    return u / length if length > 0.0 else u.copy()


def average(vectors):
    """ Arithmetic mean of a non-empty sequence of vectors.

    Raises
    ------
    ValueError
        If `vectors` is empty.
    """
    vectors = [np.asarray(v, dtype=float) for v in vectors]

    if not vectors:
        raise ValueError('cannot average an empty sequence')

    return sum(vectors) / len(vectors)
