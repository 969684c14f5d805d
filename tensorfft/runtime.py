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

import warnings
from typing import Union

from .engine import FFTEngine, NumPyEngine
from .settings import settings
from .utils import find_last_user_stacklevel


class Runtime:
    def __init__(self) -> None:
        self._engines: dict[str, FFTEngine] = {}
        self.register_engine("numpy", NumPyEngine())

    @property
    def engines(self) -> tuple[str, ...]:
        return tuple(self._engines)

    def register_engine(self, name: str, engine: FFTEngine) -> None:
        if not isinstance(engine, FFTEngine):
            raise TypeError(
                f"engine must be an FFTEngine, got {type(engine).__name__}"
            )
        self._engines[name] = engine

    def unregister_engine(self, name: str) -> None:
        if name == "numpy":
            raise ValueError("the numpy engine cannot be unregistered")
        self._engines.pop(name, None)

    def get_engine(self, name: Union[str, None] = None) -> FFTEngine:
        if name is None:
            name = settings.engine()
        try:
            return self._engines[name]
        except KeyError:
            raise ValueError(
                f"Unknown FFT engine {name!r} "
                f"(registered engines are {', '.join(self._engines)})"
            ) from None

    def warn(self, msg: str, category: type = UserWarning) -> None:
        if not settings.warn():
            return
        stacklevel = find_last_user_stacklevel()
        warnings.warn(msg, stacklevel=stacklevel, category=category)


runtime = Runtime()
