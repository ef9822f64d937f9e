"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

import pytest
from unittest.mock import MagicMock

from redis_sentinel.adapters.base import ClientAdapter
from redis_sentinel.exceptions import RedisConnectionError
from redis_sentinel.types import AdapterConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: 需要真实 Redis Sentinel 的集成测试")


class StubAdapter(ClientAdapter):
    """connect() 总是成功的适配器"""

    def __init__(self):
        super().__init__()
        self.connect_calls = 0

    def connect(self) -> None:
        self.connect_calls += 1
        self._connected = True


class FailingAdapter(ClientAdapter):
    """connect() 总是失败的适配器"""

    def connect(self) -> None:
        raise RedisConnectionError(f"Failed to connect to {self.address}:{self.port}")


@pytest.fixture
def stub_adapter():
    """连接成功的适配器"""
    return StubAdapter()


@pytest.fixture
def failing_adapter():
    """连接失败的适配器"""
    return FailingAdapter()


@pytest.fixture
def mock_adapter():
    """创建 Mock 适配器"""
    adapter = MagicMock(spec=ClientAdapter)
    adapter.is_connected.return_value = False
    return adapter


@pytest.fixture
def adapter_config():
    """默认适配器配置"""
    return AdapterConfig(socket_timeout=1.0, socket_connect_timeout=1.0)
