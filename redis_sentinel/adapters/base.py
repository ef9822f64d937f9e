"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel 客户端适配器基础模块

定义适配器的基类和接口
"""

from abc import ABC, abstractmethod
from typing import Optional


class ClientAdapter(ABC):
    """
    客户端适配器基类

    在 Sentinel 节点与具体 Redis 客户端库之间架桥，所有适配器实现必须继承此类。
    地址和端口只做记录，不做校验，校验由节点负责。

    Attributes:
        address: 目标地址
        port: 目标端口

    Example:
        >>> class MyAdapter(ClientAdapter):
        ...     def connect(self):
        ...         # 实现建立连接逻辑
        ...         self._connected = True
    """

    def __init__(self):
        self._address: Optional[str] = None
        self._port: Optional[int] = None
        self._connected = False

    @property
    def address(self) -> Optional[str]:
        """目标地址"""
        return self._address

    @property
    def port(self) -> Optional[int]:
        """目标端口"""
        return self._port

    def set_address(self, address: str) -> None:
        """记录目标地址"""
        self._address = address

    def set_port(self, port: int) -> None:
        """记录目标端口"""
        self._port = port

    @abstractmethod
    def connect(self) -> None:
        """
        连接到已配置的地址和端口

        可能阻塞在网络 I/O 上。

        Raises:
            RedisConnectionError: 无法建立连接时抛出，连接状态保持为 False
        """
        pass

    def is_connected(self) -> bool:
        """
        返回最近一次记录的连接状态

        不做 I/O，也不重新检测存活。对端静默断开时可能仍返回 True。
        """
        return self._connected

    def close(self) -> None:
        """断开连接"""
        self._connected = False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(address={self._address!r}, "
            f"port={self._port!r}, connected={self._connected})"
        )
