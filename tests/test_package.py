"""
Tests for the top-level package surface.
"""

import numpy as np

import alximo


def test_version():
    assert alximo.__version__ == "0.1.0"


def test_top_level_functions(linear_pair):
    x, y = linear_pair
    r, p = alximo.pearsonr(x, y)
    assert r == 1.0
    C = alximo.corrcoef(x, y).correlation_matrix
    assert C.shape == (2, 2)
    assert alximo.cov(x).covariance_matrix.shape == (1, 1)


def test_concurrent_calls_are_independent(rng):
    from concurrent.futures import ThreadPoolExecutor

    datasets = [rng.standard_normal((3, 20)) for _ in range(8)]
    expected = [alximo.corrcoef(d).correlation_matrix for d in datasets]
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(lambda d: alximo.corrcoef(d).correlation_matrix, datasets))
    for e, g in zip(expected, got):
        np.testing.assert_array_equal(e, g)
