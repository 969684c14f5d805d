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

REAL_TYPES = (np.float32, np.float64)
COMPLEX_OF = {np.float32: np.complex64, np.float64: np.complex128}


def check_1d_r2c(N, dtype=np.float64):
    out_dtype = COMPLEX_OF[dtype]
    Z = mk_signal(N, dtype)
    Z_copy = Z.copy()

    all_kwargs = (
        {},
        {"norm": "forward"},
        {"norm": "ortho"},
        {"n": N // 2},
        {"n": N // 2 + 1},
        {"n": N * 2},
        {"n": N * 2 + 1},
    )

    for kwargs in all_kwargs:
        print(f"=== 1D R2C {np.dtype(dtype)}, args: {kwargs} ===")
        out = np.fft.rfft(Z, **kwargs).astype(out_dtype)
        out_tf = tf.fft.rfft(Z, **kwargs)
        assert allclose(out, out_tf)
        n = kwargs.get("n", N)
        assert out_tf.shape == (n // 2 + 1,)

    assert np.array_equal(Z, Z_copy)


def check_nd_r2c(shape, dtype=np.float64):
    out_dtype = COMPLEX_OF[dtype]
    Z = mk_signal(shape, dtype)

    for dim in range(-len(shape), len(shape)):
        for n in (None, shape[dim] - 1, shape[dim] + 4):
            print(f"=== {len(shape)}D R2C {np.dtype(dtype)}, {dim=} {n=} ===")
            out = np.fft.rfft(Z, n=n, axis=dim).astype(out_dtype)
            out_tf = tf.fft.rfft(Z, n=n, dim=dim)
            assert allclose(out, out_tf)
            expected = list(shape)
            expected[dim] = (shape[dim] if n is None else n) // 2 + 1
            assert out_tf.shape == tuple(expected)


@pytest.mark.parametrize("dtype", REAL_TYPES)
def test_1d(dtype):
    check_1d_r2c(N=110, dtype=dtype)
    check_1d_r2c(N=111, dtype=dtype)


@pytest.mark.parametrize("dtype", REAL_TYPES)
def test_2d(dtype):
    check_nd_r2c(shape=(28, 10), dtype=dtype)


@pytest.mark.parametrize("dtype", REAL_TYPES)
def test_3d(dtype):
    check_nd_r2c(shape=(6, 12, 10), dtype=dtype)


def test_128_samples():
    Z = mk_signal(128)
    out = tf.fft.rfft(Z)
    assert out.shape == (65,)
    assert np.iscomplexobj(out)
    back = tf.fft.irfft(out, n=128)
    assert back.shape == (128,)
    assert back.dtype == np.float64
    assert allclose(Z, back)


@pytest.mark.parametrize("N", (1, 2, 7, 64, 65))
@pytest.mark.parametrize("dtype", REAL_TYPES)
def test_round_trip(N, dtype):
    Z = mk_signal((3, N), dtype)
    out = tf.fft.irfft(tf.fft.rfft(Z, n=N), n=N)
    assert out.dtype == dtype
    assert allclose(Z, out)


def test_integer_input():
    Z = np.arange(12)
    out = tf.fft.rfft(Z)
    assert out.dtype == np.complex128
    assert allclose(np.fft.rfft(Z.astype(np.float64)), out)


@pytest.mark.parametrize("func", ("rfft", "ihfft"))
@pytest.mark.parametrize("dtype", (np.complex64, np.complex128))
def test_complex_input_rejected(func, dtype):
    Z = mk_signal(16, dtype)
    with pytest.raises(TypeError, match="expects a real input"):
        getattr(tf.fft, func)(Z)


if __name__ == "__main__":
    import sys

    sys.exit(pytest.main(sys.argv))
