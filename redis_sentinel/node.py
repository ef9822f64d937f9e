# -*- coding: utf-8 -*-
"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel 节点模块

定义 Sentinel 节点实体
"""

from typing import Any, Callable, List, Optional, Union

from redis_sentinel.adapters.base import ClientAdapter
from redis_sentinel.adapters.redis_adapter import RedisClientAdapter
from redis_sentinel.config.schema import SentinelConfig
from redis_sentinel.exceptions import InvalidProperty
from redis_sentinel.types import SentinelNodeConfig
from redis_sentinel.validators import is_valid_ip_address, is_valid_port


class BaseSentinelNode:
    """
    Sentinel 节点基类

    持有节点身份（地址、端口、可选的集合名称），构造时完成校验。
    节点一旦创建即保证合法，之后不可修改。

    Attributes:
        address: IP 地址
        port: 端口号
        name: 所属 Sentinel 集合名称
    """

    def __init__(self, address: str, port: int, name: str = None):
        """
        初始化节点

        Args:
            address: IPv4 或 IPv6 地址字面量
            port: 端口号，范围 [0, 65535]
            name: 所属 Sentinel 集合名称

        Raises:
            InvalidProperty: 地址或端口不合法时抛出
        """
        self._guard_that_address_is_valid(address)
        self._guard_that_port_is_valid(port)

        self._address = address
        self._port = port
        self._name = name

    @staticmethod
    def _guard_that_address_is_valid(address: Any) -> None:
        if not is_valid_ip_address(address):
            raise InvalidProperty(
                "A sentinel node requires a valid IP address", address
            )

    @staticmethod
    def _guard_that_port_is_valid(port: Any) -> None:
        if not is_valid_port(port):
            raise InvalidProperty("A sentinel node requires a valid service port", port)

    @property
    def address(self) -> str:
        """节点 IP 地址"""
        return self._address

    @property
    def port(self) -> int:
        """节点端口"""
        return self._port

    @property
    def name(self) -> Optional[str]:
        """所属 Sentinel 集合名称"""
        return self._name

    def _identity(self) -> tuple:
        return (self._address, self._port, self._name)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BaseSentinelNode):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(address={self._address!r}, "
            f"port={self._port}, name={self._name!r})"
        )


class SentinelNode(BaseSentinelNode):
    """
    可连接的 Sentinel 节点

    独占一个客户端适配器，构造时把自身地址和端口写入适配器，
    connect() / is_connected() 直接转发给适配器，不做重试也不做缓存。

    Example:
        >>> node = SentinelNode("10.0.0.1", 26379)
        >>> node.connect()
        >>> node.is_connected()
        True
    """

    def __init__(
        self,
        address: str,
        port: int,
        adapter: ClientAdapter = None,
        name: str = None,
    ):
        """
        初始化节点

        Args:
            address: IPv4 或 IPv6 地址字面量
            port: 端口号，范围 [0, 65535]
            adapter: 未初始化的客户端适配器，默认 RedisClientAdapter
            name: 所属 Sentinel 集合名称

        Raises:
            InvalidProperty: 地址或端口不合法时抛出
        """
        super().__init__(address, port, name)

        if adapter is None:
            adapter = RedisClientAdapter()
        self._adapter = self._initialize_adapter(adapter)

    def _initialize_adapter(self, adapter: ClientAdapter) -> ClientAdapter:
        """把节点地址和端口写入适配器"""
        adapter.set_address(self.address)
        adapter.set_port(self.port)
        return adapter

    @property
    def adapter(self) -> ClientAdapter:
        """节点独占的客户端适配器"""
        return self._adapter

    def connect(self) -> None:
        """
        连接节点

        Raises:
            RedisConnectionError: 适配器无法建立连接时原样抛出
        """
        self._adapter.connect()

    def is_connected(self) -> bool:
        """
        节点是否已连接

        返回适配器记录的状态，不主动探测存活。
        """
        return self._adapter.is_connected()

    def close(self) -> None:
        """断开连接"""
        self._adapter.close()


class NamedSentinelNode(BaseSentinelNode):
    """
    仅包含身份信息的 Sentinel 节点

    用于发现与登记，不持有适配器，也不能连接。
    """

    def __init__(self, name: str, address: str, port: int):
        super().__init__(address, port, name)


def create_node(
    config: SentinelNodeConfig,
    adapter: ClientAdapter = None,
    connectable: bool = True,
) -> Union[SentinelNode, NamedSentinelNode]:
    """
    节点工厂函数

    根据配置创建对应类型的节点实例。

    Args:
        config: 节点配置
        adapter: 客户端适配器，仅可连接节点使用
        connectable: 是否创建可连接节点

    Returns:
        SentinelNode 或 NamedSentinelNode 实例
    """
    if connectable:
        return SentinelNode(config.address, config.port, adapter, config.name)
    return NamedSentinelNode(config.name, config.address, config.port)


def build_nodes(
    config: SentinelConfig,
    adapter_factory: Callable[[], ClientAdapter] = None,
) -> List[SentinelNode]:
    """
    根据完整配置批量创建可连接节点

    每个节点都拿到一个新建的适配器，节点之间不共享适配器。

    Args:
        config: 完整配置
        adapter_factory: 适配器工厂，默认按 config.adapter 创建 RedisClientAdapter

    Returns:
        SentinelNode 列表

    Raises:
        InvalidProperty: 任一节点地址或端口不合法时抛出
    """
    if adapter_factory is None:

        def adapter_factory() -> ClientAdapter:
            return RedisClientAdapter(config.adapter)

    return [
        create_node(node_config, adapter_factory()) for node_config in config.nodes
    ]
