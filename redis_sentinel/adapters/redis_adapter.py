"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel redis-py 适配器模块

基于 redis-py 的默认客户端适配器实现
"""

import builtins
import logging
from typing import Any, Optional

import redis

from redis_sentinel.adapters.base import ClientAdapter
from redis_sentinel.exceptions import (
    AuthenticationError,
    ConnectionRefusedError,
    ConnectionTimeoutError,
    RedisConnectionError,
)
from redis_sentinel.types import AdapterConfig

logger = logging.getLogger(__name__)


class RedisClientAdapter(ClientAdapter):
    """
    redis-py 客户端适配器

    connect() 时按已配置的地址和端口创建客户端并发送 PING，
    redis-py 的异常统一转换为 RedisConnectionError 体系。

    Attributes:
        config: 连接配置
        client_class: 客户端类，默认 redis.Redis，测试中可替换为 fakeredis.FakeRedis

    Example:
        >>> adapter = RedisClientAdapter(AdapterConfig(socket_connect_timeout=1.0))
        >>> adapter.set_address("127.0.0.1")
        >>> adapter.set_port(26379)
        >>> adapter.connect()
        >>> adapter.is_connected()
        True
    """

    client_class = redis.Redis

    def __init__(
        self,
        config: AdapterConfig = None,
        client_class: type = None,
        **client_kwargs: Any,
    ):
        """
        初始化适配器

        Args:
            config: 连接配置
            client_class: 客户端类，覆盖类属性
            client_kwargs: 透传给客户端构造函数的额外参数
        """
        super().__init__()
        self.config = config or AdapterConfig()
        if client_class is not None:
            self.client_class = client_class
        self._client_kwargs = client_kwargs
        self._client: Optional[redis.Redis] = None

    def get_connection_kwargs(self) -> dict:
        """获取连接参数"""
        kwargs = self.config.to_connection_kwargs(self._address, self._port)
        kwargs.update(self._client_kwargs)
        return kwargs

    def connect(self) -> None:
        if self._address is None or self._port is None:
            raise RedisConnectionError("Adapter endpoint is not configured")

        if self._client is not None:
            self.close()

        logger.debug(f"Connecting to sentinel {self._address}:{self._port}")
        client = self.client_class(**self.get_connection_kwargs())
        try:
            client.ping()
        except redis.AuthenticationError as e:
            self._discard(client)
            raise AuthenticationError(self._address, self._port, str(e)) from e
        except redis.TimeoutError as e:
            self._discard(client)
            raise ConnectionTimeoutError(
                self._address, self._port, self.config.socket_connect_timeout
            ) from e
        except redis.ConnectionError as e:
            self._discard(client)
            if self._is_refused(e):
                raise ConnectionRefusedError(self._address, self._port) from e
            raise RedisConnectionError(
                f"Failed to connect to {self._address}:{self._port}: {e}"
            ) from e
        except OSError as e:
            self._discard(client)
            raise RedisConnectionError(
                f"Failed to connect to {self._address}:{self._port}: {e}"
            ) from e
        except redis.RedisError as e:
            # 如 ACL 拒绝 PING 的 NoPermissionError
            self._discard(client)
            raise RedisConnectionError(
                f"Failed to connect to {self._address}:{self._port}: {e}"
            ) from e

        self._client = client
        self._connected = True
        logger.debug(f"Connected to sentinel {self._address}:{self._port}")

    @staticmethod
    def _is_refused(error: Exception) -> bool:
        """判断连接错误是否由对端拒绝引起"""
        if isinstance(error.__cause__, builtins.ConnectionRefusedError):
            return True
        return "Connection refused" in str(error)

    def _discard(self, client: Any) -> None:
        """丢弃未能连通的客户端"""
        try:
            client.close()
        except Exception as e:
            logger.warning(
                f"Failed to close client for {self._address}:{self._port}: {e}"
            )

    def get_client(self) -> redis.Redis:
        """
        获取底层 redis-py 客户端

        Returns:
            已连通的客户端实例

        Raises:
            RedisConnectionError: 尚未连接时抛出
        """
        if self._client is None:
            raise RedisConnectionError(
                f"Not connected to {self._address}:{self._port}"
            )
        return self._client

    def close(self) -> None:
        """关闭客户端连接"""
        if self._client is not None:
            self._discard(self._client)
            self._client = None
        super().close()
