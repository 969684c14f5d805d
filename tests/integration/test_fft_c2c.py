# Copyright 2021 NVIDIA Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

import numpy as np
import pytest
from utils.comparisons import allclose
from utils.generators import mk_signal

import tensorfft as tf

COMPLEX_TYPES = (np.complex64, np.complex128)

ALL_KWARGS = (
    {},
    {"norm": "forward"},
    {"norm": "ortho"},
    {"norm": "backward"},
    {"n": 55},
    {"n": 56},
    {"n": 220},
    {"n": 221},
)


def _np_kwargs(kwargs):
    kwargs = dict(kwargs)
    if "dim" in kwargs:
        kwargs["axis"] = kwargs.pop("dim")
    return kwargs


def check_1d_c2c(N, dtype=np.complex128):
    Z = mk_signal(N, dtype)
    Z_copy = Z.copy()

    for kwargs in ALL_KWARGS:
        print(f"=== 1D C2C {np.dtype(dtype)}, args: {kwargs} ===")
        out = np.fft.fft(Z, **kwargs).astype(dtype)
        out_tf = tf.fft.fft(Z, **kwargs)
        assert allclose(out, out_tf)
        out = np.fft.ifft(Z, **kwargs).astype(dtype)
        out_tf = tf.fft.ifft(Z, **kwargs)
        assert allclose(out, out_tf)

    assert np.array_equal(Z, Z_copy)


def check_nd_c2c(shape, dtype=np.complex128):
    Z = mk_signal(shape, dtype)
    Z_copy = Z.copy()

    for dim in range(-len(shape), len(shape)):
        for kwargs in ({}, {"n": shape[dim] // 2}, {"n": shape[dim] + 3}):
            kwargs = dict(kwargs, dim=dim)
            print(f"=== {len(shape)}D C2C {np.dtype(dtype)}, {kwargs} ===")
            out = np.fft.fft(Z, **_np_kwargs(kwargs)).astype(dtype)
            out_tf = tf.fft.fft(Z, **kwargs)
            assert allclose(out, out_tf)
            out = np.fft.ifft(Z, **_np_kwargs(kwargs)).astype(dtype)
            out_tf = tf.fft.ifft(Z, **kwargs)
            assert allclose(out, out_tf)

    assert np.array_equal(Z, Z_copy)


@pytest.mark.parametrize("dtype", COMPLEX_TYPES)
def test_1d(dtype):
    check_1d_c2c(N=110, dtype=dtype)


@pytest.mark.parametrize("dtype", COMPLEX_TYPES)
def test_2d(dtype):
    check_nd_c2c(shape=(12, 9), dtype=dtype)


@pytest.mark.parametrize("dtype", COMPLEX_TYPES)
def test_3d(dtype):
    check_nd_c2c(shape=(6, 5, 8), dtype=dtype)


@pytest.mark.parametrize("dtype", COMPLEX_TYPES)
@pytest.mark.parametrize("norm", (None, "backward", "forward", "ortho"))
def test_round_trip(dtype, norm):
    Z = mk_signal((4, 37), dtype)
    out = tf.fft.ifft(tf.fft.fft(Z, norm=norm), norm=norm)
    assert out.dtype == dtype
    assert allclose(Z, out)


def test_ortho_preserves_energy():
    Z = mk_signal(128, np.complex128)
    out = tf.fft.fft(Z, norm="ortho")
    assert np.isclose(np.linalg.norm(out), np.linalg.norm(Z))
    back = tf.fft.ifft(out, norm="ortho")
    assert np.isclose(np.linalg.norm(back), np.linalg.norm(Z))


@pytest.mark.parametrize(
    "dtype, expected",
    (
        (np.float32, np.complex64),
        (np.float64, np.complex128),
        (np.int64, np.complex128),
        (np.bool_, np.complex128),
    ),
)
def test_real_input_is_promoted(dtype, expected):
    Z = (mk_signal(16) * 10).astype(dtype)
    out = tf.fft.fft(Z)
    assert out.dtype == expected
    assert allclose(np.fft.fft(Z.astype(np.float64)).astype(expected), out)
    out = tf.fft.ifft(Z)
    assert out.dtype == expected
    assert allclose(np.fft.ifft(Z.astype(np.float64)).astype(expected), out)


def test_negative_dim_matches_positive():
    Z = mk_signal((3, 4, 10), np.complex128)
    assert np.array_equal(tf.fft.fft(Z, dim=-1), tf.fft.fft(Z, dim=2))
    assert np.array_equal(tf.fft.fft(Z, dim=-3), tf.fft.fft(Z, dim=0))


def test_array_like_input():
    data = [1.0, 2.0, 3.0, 4.0]
    out = tf.fft.fft(data)
    assert allclose(np.fft.fft(data), out)
    out = tf.fft.fft(a=data, n=6)
    assert allclose(np.fft.fft(data, n=6), out)


def test_numpy_integer_n():
    Z = mk_signal(20, np.complex128)
    out = tf.fft.fft(Z, n=np.int64(12))
    assert out.shape == (12,)


if __name__ == "__main__":
    import sys

    sys.exit(pytest.main(sys.argv))
