"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel 类型定义模块

定义节点协议接口和配置数据类
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


# =============================================================================
# 协议定义
# =============================================================================


@runtime_checkable
class SentinelNodeProtocol(Protocol):
    """Sentinel 节点身份协议"""

    @property
    def address(self) -> str:
        """节点 IP 地址"""
        ...

    @property
    def port(self) -> int:
        """节点端口"""
        ...


@runtime_checkable
class ConnectableNodeProtocol(SentinelNodeProtocol, Protocol):
    """可连接的 Sentinel 节点协议"""

    def connect(self) -> None:
        """建立连接"""
        ...

    def is_connected(self) -> bool:
        """是否已连接"""
        ...


# =============================================================================
# 数据类型定义
# =============================================================================


@dataclass
class AdapterConfig:
    """
    默认适配器的连接配置

    Attributes:
        password: Sentinel 密码
        db: 数据库编号
        socket_timeout: Socket 超时时间
        socket_connect_timeout: Socket 连接超时时间
        decode_responses: 是否解码响应
        encoding: 编码格式
    """

    password: str | None = None
    db: int = 0
    socket_timeout: float | None = None
    socket_connect_timeout: float | None = None
    decode_responses: bool = True
    encoding: str = "utf-8"

    def to_connection_kwargs(self, host: str, port: int) -> dict[str, Any]:
        """转换为 redis-py 连接参数"""
        kwargs = {
            "host": host,
            "port": port,
            "db": self.db,
            "decode_responses": self.decode_responses,
            "encoding": self.encoding,
        }
        if self.password:
            kwargs["password"] = self.password
        if self.socket_timeout:
            kwargs["socket_timeout"] = self.socket_timeout
        if self.socket_connect_timeout:
            kwargs["socket_connect_timeout"] = self.socket_connect_timeout
        return kwargs


@dataclass(frozen=True)
class SentinelNodeConfig:
    """
    单个 Sentinel 节点的声明式配置

    Attributes:
        address: IP 地址
        port: 端口号
        name: 所属 Sentinel 集合名称
    """

    address: str
    port: int = 26379
    name: str | None = None

    def __str__(self) -> str:
        if ":" in self.address:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"
