# Copyright 2023 NVIDIA Corporation
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

from legate.util.settings import PrioritizedSetting, Settings, convert_bool

__all__ = ("settings",)


class TensorFFTRuntimeSettings(Settings):
    warn: PrioritizedSetting[bool] = PrioritizedSetting(
        "warn",
        "TENSORFFT_WARN",
        default=False,
        convert=convert_bool,
        help="""
        Turn on warnings, e.g. when the output length of a transform taking
        a onesided Hermitian input has to be inferred.
        """,
    )

    engine: PrioritizedSetting[str] = PrioritizedSetting(
        "engine",
        "TENSORFFT_ENGINE",
        default="numpy",
        help="""
        Name of the registered DFT engine that executes the transforms.
        """,
    )


settings = TensorFFTRuntimeSettings()
