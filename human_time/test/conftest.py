# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
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

from datetime import datetime

import pytest

from human_time import HumanTimeExtractor


@pytest.fixture(scope="session")
def extractor():
    """Compiling the grammar takes a moment, so one extractor serves every test"""
    return HumanTimeExtractor()


@pytest.fixture
def now():
    # Friday
    return datetime(2010, 1, 1, 0, 0, 0)
