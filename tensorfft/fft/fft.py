# Copyright 2021-2022 NVIDIA Corporation
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
from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, Union

import numpy as np

from ..config import (
    FFT,
    HFFT,
    IFFT,
    IHFFT,
    IRFFT,
    RFFT,
    FFTDomain,
    FFTNormalization,
    FFTVariant,
)
from ..runtime import runtime
from ..utils import add_boilerplate, normalize_axis_index, to_fft_dtype

if TYPE_CHECKING:
    import numpy.typing as npt

__all__ = ("fft", "ifft", "rfft", "irfft", "hfft", "ihfft")


def _sanitize_dtype(
    a: npt.NDArray[Any], variant: FFTVariant
) -> np.dtype[Any]:
    if variant.domain == FFTDomain.REAL:
        if a.dtype.kind == "c":
            raise TypeError(
                f"{variant} expects a real input array, "
                f"but got an array of dtype={a.dtype}"
            )
        return to_fft_dtype(a.dtype)
    dtype = to_fft_dtype(a.dtype)
    # real input is promoted for the complex-domain transforms
    return np.result_type(dtype, np.complex64)


def _sanitize_n(n: Any, extent: int, variant: FFTVariant) -> int:
    if n is None:
        n = variant.default_n(extent)
        if n < 1:
            raise ValueError(
                f"Invalid number of data points ({n}) inferred for {variant} "
                f"from an input of length {extent} along the transformed "
                "dimension, pass n explicitly"
            )
        if variant.onesided_input:
            runtime.warn(
                f"{variant}: n was not given, assuming an even output length "
                f"n={n}; pass n={n + 1} to reconstruct an odd-length signal"
            )
        return n
    if isinstance(n, (bool, np.bool_)):
        raise TypeError(f"n must be an integer, got {n!r}")
    try:
        n = operator.index(n)
    except TypeError:
        raise TypeError(
            f"n must be an integer, got {type(n).__name__}"
        ) from None
    if n < 1:
        raise ValueError(
            f"Invalid number of data points ({n}) specified, "
            "n must be a positive integer"
        )
    return n


def _resize_axis(
    a: npt.NDArray[Any], length: int, axis: int
) -> npt.NDArray[Any]:
    extent = a.shape[axis]
    if extent > length:
        slices = [slice(None)] * a.ndim
        slices[axis] = slice(0, length)
        return a[tuple(slices)]
    if extent < length:
        pad_width = [(0, 0)] * a.ndim
        pad_width[axis] = (0, length - extent)
        return np.pad(a, pad_width)
    return a


def _execute(
    variant: FFTVariant,
    a: npt.NDArray[Any],
    n: Union[int, None],
    dim: int,
    norm: Union[str, None],
) -> npt.NDArray[Any]:
    dtype = _sanitize_dtype(a, variant)
    axis = normalize_axis_index(dim, a.ndim)
    n = _sanitize_n(n, a.shape[axis], variant)
    # validates the mode before anything runs
    FFTNormalization.from_string(norm)
    if variant.conjugate:
        norm = FFTNormalization.reverse(norm)
    elif norm is None:
        norm = "backward"

    kind = variant.fft_type(dtype)
    fft_input = _resize_axis(
        a.astype(dtype, copy=False), variant.input_length(n), axis
    )
    if variant.conjugate and variant.onesided_input:
        fft_input = np.conjugate(fft_input)

    engine = runtime.get_engine()
    out = engine.execute(
        fft_input, n, axis, kind, variant.engine_direction, norm
    )
    expected = variant.output_length(n)
    if out.ndim != a.ndim or out.shape[axis] != expected:
        raise RuntimeError(
            f"FFT engine {type(engine).__name__} returned an array of shape "
            f"{out.shape} for {variant}, expected length {expected} along "
            f"dimension {axis}"
        )

    if variant.conjugate and variant.onesided_output:
        out = np.conjugate(out)
    return out.astype(kind.output_dtype, copy=False)


@add_boilerplate("a")
def fft(
    a: npt.NDArray[Any],
    n: Union[int, None] = None,
    dim: int = -1,
    norm: Union[str, None] = None,
) -> npt.NDArray[Any]:
    """
    Compute the one-dimensional discrete Fourier Transform.

    This function computes the one-dimensional *n*-point discrete Fourier
    Transform (DFT) with the efficient Fast Fourier Transform (FFT)
    algorithm.

    Parameters
    ----------
    a : array_like
        Input array, can be complex. Real input is promoted to complex.
    n : int, optional
        Length of the transformed dimension of the output.
        If `n` is smaller than the length of the input, the input is cropped.
        If it is larger, the input is padded with zeros.  If `n` is not given,
        the length of the input along the dimension specified by `dim` is
        used.
    dim : int, optional
        Dimension over which to compute the FFT.  If not given, the last
        dimension is used.
    norm : ``{"backward", "ortho", "forward"}``, optional
        Normalization mode. Default is "backward", i.e. no normalization on
        the forward transform. "forward" scales by ``1/n``, "ortho" by
        ``1/sqrt(n)``.

    Returns
    -------
    out : complex ndarray
        The truncated or zero-padded input, transformed along the dimension
        indicated by `dim`, or the last one if `dim` is not specified.

    Raises
    ------
    AxisError
        If `dim` is not a valid dimension of `a`.
    ValueError
        If `n` is not positive or `norm` is not a recognized mode.
    TypeError
        If `a` does not hold numbers.

    See Also
    --------
    numpy.fft.fft
    """
    return _execute(FFT, a, n, dim, norm)


@add_boilerplate("a")
def ifft(
    a: npt.NDArray[Any],
    n: Union[int, None] = None,
    dim: int = -1,
    norm: Union[str, None] = None,
) -> npt.NDArray[Any]:
    """
    Compute the one-dimensional inverse discrete Fourier Transform.

    This function computes the inverse of the one-dimensional *n*-point
    discrete Fourier transform computed by `fft`.  In other words,
    ``ifft(fft(a)) == a`` to within numerical accuracy.

    The input should be ordered in the same way as is returned by `fft`,
    i.e. ``a[0]`` is the zero frequency term, ``a[1:n//2]`` the positive
    frequency terms and ``a[n//2 + 1:]`` the negative frequency terms.

    Parameters
    ----------
    a : array_like
        Input array, can be complex.
    n : int, optional
        Length of the transformed dimension of the output. The input is
        cropped or zero-padded to this length.  If `n` is not given, the
        length of the input along `dim` is used.
    dim : int, optional
        Dimension over which to compute the inverse DFT.  If not given, the
        last dimension is used.
    norm : ``{"backward", "ortho", "forward"}``, optional
        Normalization mode. Default is "backward", i.e. scaling by ``1/n``.

    Returns
    -------
    out : complex ndarray
        The truncated or zero-padded input, transformed along `dim`.

    See Also
    --------
    numpy.fft.ifft
    """
    return _execute(IFFT, a, n, dim, norm)


@add_boilerplate("a")
def rfft(
    a: npt.NDArray[Any],
    n: Union[int, None] = None,
    dim: int = -1,
    norm: Union[str, None] = None,
) -> npt.NDArray[Any]:
    """
    Compute the one-dimensional discrete Fourier Transform for real input.

    Because the DFT of a real signal is Hermitian symmetric, only the
    ``n//2 + 1`` non-negative frequency terms are returned.

    Parameters
    ----------
    a : array_like
        Input array, must be real.
    n : int, optional
        Number of points along the transformed dimension of the input to
        use.  If `n` is smaller than the length of the input, the input is
        cropped.  If it is larger, the input is padded with zeros.  If `n`
        is not given, the length of the input along `dim` is used.
    dim : int, optional
        Dimension over which to compute the FFT.  If not given, the last
        dimension is used.
    norm : ``{"backward", "ortho", "forward"}``, optional
        Normalization mode. Default is "backward".

    Returns
    -------
    out : complex ndarray
        The truncated or zero-padded input, transformed along `dim`.
        The length of the transformed dimension is ``n//2 + 1``.

    Raises
    ------
    TypeError
        If `a` is complex.

    See Also
    --------
    numpy.fft.rfft
    """
    return _execute(RFFT, a, n, dim, norm)


@add_boilerplate("a")
def irfft(
    a: npt.NDArray[Any],
    n: Union[int, None] = None,
    dim: int = -1,
    norm: Union[str, None] = None,
) -> npt.NDArray[Any]:
    """
    Computes the inverse of `rfft`.

    The input is a onesided Hermitian spectrum in the form returned by
    `rfft`; the negative frequency terms are taken to be the complex
    conjugates of the positive ones.  ``irfft(rfft(a), len(a)) == a`` to
    within numerical accuracy.

    Parameters
    ----------
    a : array_like
        The input array.
    n : int, optional
        Length of the transformed dimension of the output.  For `n` output
        points, ``n//2 + 1`` input points are necessary.  If the input is
        longer than this, it is cropped.  If it is shorter than this, it is
        padded with zeros.  If `n` is not given, it is taken to be
        ``2*(m-1)`` where ``m`` is the length of the input along `dim`.
        An odd-length signal can only be recovered by passing `n`.
    dim : int, optional
        Dimension over which to compute the inverse FFT.  If not given, the
        last dimension is used.
    norm : ``{"backward", "ortho", "forward"}``, optional
        Normalization mode. Default is "backward".

    Returns
    -------
    out : ndarray
        The real result, of length `n` along `dim`.

    See Also
    --------
    numpy.fft.irfft
    """
    return _execute(IRFFT, a, n, dim, norm)


@add_boilerplate("a")
def hfft(
    a: npt.NDArray[Any],
    n: Union[int, None] = None,
    dim: int = -1,
    norm: Union[str, None] = None,
) -> npt.NDArray[Any]:
    """
    Compute the FFT of a signal that has Hermitian symmetry, i.e., a real
    spectrum.

    Parameters
    ----------
    a : array_like
        The input array, the onesided half of a Hermitian symmetric time
        domain signal.  Real input is promoted to complex.
    n : int, optional
        Length of the transformed dimension of the output. For `n` output
        points, ``n//2 + 1`` input points are necessary.  If the input is
        longer than this, it is cropped.  If it is shorter than this, it is
        padded with zeros.  If `n` is not given, it is taken to be ``2*(m-1)``
        where ``m`` is the length of the input along `dim`.
    dim : int, optional
        Dimension over which to compute the FFT. If not given, the last
        dimension is used.
    norm : ``{"backward", "ortho", "forward"}``, optional
        Normalization mode. Default is "backward", i.e. no normalization on
        this forward transform.

    Returns
    -------
    out : ndarray
        The real result, transformed along `dim`.  The length of the
        transformed dimension is `n`, or ``2*m - 2`` if `n` is not given.
        To get an odd number of output points, `n` must be specified, for
        instance as ``2*m - 1`` in the typical case.

    Raises
    ------
    ValueError
        If `n` is not given and the input has a single point along `dim`.

    See Also
    --------
    numpy.fft.hfft
    """
    # a C2R transform of the conjugate with the normalization reversed
    return _execute(HFFT, a, n, dim, norm)


@add_boilerplate("a")
def ihfft(
    a: npt.NDArray[Any],
    n: Union[int, None] = None,
    dim: int = -1,
    norm: Union[str, None] = None,
) -> npt.NDArray[Any]:
    """
    Compute the inverse FFT of a signal that has Hermitian symmetry.

    Parameters
    ----------
    a : array_like
        Input array, must be real.
    n : int, optional
        Length of the inverse FFT, the number of points along the
        transformed dimension of the input to use.  If `n` is smaller than
        the length of the input, the input is cropped.  If it is larger, the
        input is padded with zeros.  If `n` is not given, the length of the
        input along `dim` is used.
    dim : int, optional
        Dimension over which to compute the inverse FFT. If not given, the
        last dimension is used.
    norm : ``{"backward", "ortho", "forward"}``, optional
        Normalization mode. Default is "backward", i.e. scaling by ``1/n``.

    Returns
    -------
    out : complex ndarray
        The truncated or zero-padded input, transformed along `dim`.
        The length of the transformed dimension is ``n//2 + 1``, the
        onesided Hermitian representation of the result.

    Raises
    ------
    TypeError
        If `a` is complex.

    See Also
    --------
    numpy.fft.ihfft
    """
    return _execute(IHFFT, a, n, dim, norm)
