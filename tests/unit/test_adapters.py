# -*- coding: utf-8 -*-
"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

import fakeredis
import pytest
import redis
from unittest.mock import MagicMock

from redis_sentinel.adapters.base import ClientAdapter
from redis_sentinel.adapters.redis_adapter import RedisClientAdapter
from redis_sentinel.exceptions import (
    AuthenticationError,
    ConnectionRefusedError,
    ConnectionTimeoutError,
    RedisConnectionError,
)
from redis_sentinel.node import SentinelNode
from redis_sentinel.types import AdapterConfig


def _configured(adapter: RedisClientAdapter) -> RedisClientAdapter:
    adapter.set_address("10.0.0.1")
    adapter.set_port(26379)
    return adapter


def _failing_client_class(error: Exception) -> MagicMock:
    """ping() 抛出指定异常的客户端类"""
    client = MagicMock()
    client.ping.side_effect = error
    return MagicMock(return_value=client)


class TestClientAdapterBase:
    """测试适配器基类"""

    def test_abstract(self):
        """测试不能直接实例化"""
        with pytest.raises(TypeError):
            ClientAdapter()  # type: ignore

    def test_set_endpoint_without_validation(self, stub_adapter):
        """测试地址和端口原样记录"""
        stub_adapter.set_address("not-an-ip")
        stub_adapter.set_port(-5)
        assert stub_adapter.address == "not-an-ip"
        assert stub_adapter.port == -5

    def test_initial_state(self, stub_adapter):
        """测试初始状态"""
        assert stub_adapter.address is None
        assert stub_adapter.port is None
        assert stub_adapter.is_connected() is False

    def test_repr(self, stub_adapter):
        """测试 repr"""
        stub_adapter.set_address("10.0.0.1")
        stub_adapter.set_port(26379)
        assert repr(stub_adapter) == (
            "StubAdapter(address='10.0.0.1', port=26379, connected=False)"
        )


class TestRedisClientAdapter:
    """测试基于 redis-py 的适配器"""

    def test_connect_with_fakeredis(self):
        """测试连接成功"""
        adapter = _configured(RedisClientAdapter(client_class=fakeredis.FakeRedis))
        adapter.connect()

        assert adapter.is_connected() is True
        assert isinstance(adapter.get_client(), fakeredis.FakeRedis)

    def test_client_is_usable(self):
        """测试连接后客户端可用"""
        adapter = _configured(RedisClientAdapter(client_class=fakeredis.FakeRedis))
        adapter.connect()

        client = adapter.get_client()
        client.set("greeting", "hello")
        assert client.get("greeting") == "hello"

    def test_connect_failure_with_fakeredis(self):
        """测试服务端不可达时连接失败"""
        server = fakeredis.FakeServer()
        server.connected = False
        adapter = _configured(
            RedisClientAdapter(client_class=fakeredis.FakeRedis, server=server)
        )

        with pytest.raises(RedisConnectionError) as exc_info:
            adapter.connect()

        assert isinstance(exc_info.value.__cause__, redis.ConnectionError)
        assert adapter.is_connected() is False

    def test_connect_without_endpoint(self):
        """测试未配置地址时连接失败"""
        adapter = RedisClientAdapter(client_class=fakeredis.FakeRedis)
        with pytest.raises(RedisConnectionError):
            adapter.connect()
        assert adapter.is_connected() is False

    def test_get_client_before_connect(self):
        """测试连接前获取客户端"""
        adapter = _configured(RedisClientAdapter())
        with pytest.raises(RedisConnectionError):
            adapter.get_client()

    def test_connection_kwargs(self):
        """测试连接参数由地址、端口和配置组成"""
        config = AdapterConfig(password="secret", socket_connect_timeout=1.5)
        adapter = _configured(RedisClientAdapter(config, socket_keepalive=True))

        kwargs = adapter.get_connection_kwargs()

        assert kwargs["host"] == "10.0.0.1"
        assert kwargs["port"] == 26379
        assert kwargs["password"] == "secret"
        assert kwargs["socket_connect_timeout"] == 1.5
        assert kwargs["socket_keepalive"] is True
        assert "socket_timeout" not in kwargs

    def test_client_class_receives_kwargs(self):
        """测试客户端类收到连接参数"""
        client_class = MagicMock()
        adapter = _configured(RedisClientAdapter(client_class=client_class))
        adapter.connect()

        client_class.assert_called_once()
        assert client_class.call_args.kwargs["host"] == "10.0.0.1"
        assert client_class.call_args.kwargs["port"] == 26379
        client_class.return_value.ping.assert_called_once()

    def test_authentication_error(self):
        """测试认证失败"""
        adapter = _configured(
            RedisClientAdapter(
                client_class=_failing_client_class(
                    redis.AuthenticationError("invalid password")
                )
            )
        )
        with pytest.raises(AuthenticationError) as exc_info:
            adapter.connect()
        assert exc_info.value.reason == "invalid password"
        assert adapter.is_connected() is False

    def test_timeout_error(self):
        """测试连接超时"""
        adapter = _configured(
            RedisClientAdapter(
                AdapterConfig(socket_connect_timeout=2.0),
                client_class=_failing_client_class(redis.TimeoutError("timed out")),
            )
        )
        with pytest.raises(ConnectionTimeoutError) as exc_info:
            adapter.connect()
        assert exc_info.value.timeout == 2.0
        assert "after 2.0s" in str(exc_info.value)

    def test_refused_error(self):
        """测试连接被拒绝"""
        error = redis.ConnectionError(
            "Error 111 connecting to 10.0.0.1:26379. Connection refused."
        )
        adapter = _configured(
            RedisClientAdapter(client_class=_failing_client_class(error))
        )
        with pytest.raises(ConnectionRefusedError):
            adapter.connect()

    def test_os_error(self):
        """测试底层 socket 错误"""
        adapter = _configured(
            RedisClientAdapter(
                client_class=_failing_client_class(OSError("network unreachable"))
            )
        )
        with pytest.raises(RedisConnectionError) as exc_info:
            adapter.connect()
        assert "network unreachable" in str(exc_info.value)

    def test_response_error(self):
        """测试 PING 被拒绝（如 ACL 无权限）时转换为连接错误"""
        client_class = _failing_client_class(
            redis.exceptions.NoPermissionError(
                "NOPERM this user has no permissions to run the 'ping' command"
            )
        )
        node = SentinelNode(
            "10.0.0.1", 26379, RedisClientAdapter(client_class=client_class)
        )

        with pytest.raises(ConnectionError) as exc_info:
            node.connect()

        assert isinstance(exc_info.value, RedisConnectionError)
        assert isinstance(exc_info.value.__cause__, redis.ResponseError)
        client_class.return_value.close.assert_called_once()
        assert node.is_connected() is False

    def test_failed_client_is_closed(self):
        """测试连接失败时关闭客户端"""
        client_class = _failing_client_class(redis.ConnectionError("down"))
        adapter = _configured(RedisClientAdapter(client_class=client_class))

        with pytest.raises(RedisConnectionError):
            adapter.connect()

        client_class.return_value.close.assert_called_once()

    def test_close(self):
        """测试关闭连接"""
        client_class = MagicMock()
        adapter = _configured(RedisClientAdapter(client_class=client_class))
        adapter.connect()

        adapter.close()
        adapter.close()

        assert adapter.is_connected() is False
        client_class.return_value.close.assert_called_once()

    def test_close_failure_is_logged(self, caplog):
        """测试关闭失败只记录警告"""
        client_class = MagicMock()
        client_class.return_value.close.side_effect = OSError("already closed")
        adapter = _configured(RedisClientAdapter(client_class=client_class))
        adapter.connect()

        adapter.close()

        assert adapter.is_connected() is False
        assert "Failed to close client" in caplog.text

    def test_reconnect_replaces_client(self):
        """测试重复连接时替换客户端"""
        adapter = _configured(RedisClientAdapter(client_class=fakeredis.FakeRedis))
        adapter.connect()
        first = adapter.get_client()
        adapter.connect()

        assert adapter.get_client() is not first
        assert adapter.is_connected() is True


class TestSentinelNodeWithRedisAdapter:
    """测试节点与 redis-py 适配器协同"""

    def test_end_to_end(self):
        """测试节点通过适配器连接"""
        node = SentinelNode(
            "10.0.0.1", 26379, RedisClientAdapter(client_class=fakeredis.FakeRedis)
        )
        assert node.is_connected() is False
        node.connect()
        assert node.is_connected() is True

    def test_end_to_end_failure(self):
        """测试节点连接失败"""
        server = fakeredis.FakeServer()
        server.connected = False
        node = SentinelNode(
            "10.0.0.1",
            26379,
            RedisClientAdapter(client_class=fakeredis.FakeRedis, server=server),
        )
        with pytest.raises(RedisConnectionError):
            node.connect()
        assert node.is_connected() is False
