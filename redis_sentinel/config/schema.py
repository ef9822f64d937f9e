# -*- coding: utf-8 -*-
"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel 配置 Schema 模块

定义完整的配置结构
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Union

from redis_sentinel.exceptions import InvalidConfigError
from redis_sentinel.types import AdapterConfig, SentinelNodeConfig

DEFAULT_SENTINEL_PORT = 26379


def parse_node_address(value: str) -> SentinelNodeConfig:
    """
    解析 "host:port" 形式的节点地址

    IPv6 地址需使用方括号，如 "[::1]:26379"；省略端口时使用 26379。

    Args:
        value: 节点地址字符串

    Returns:
        SentinelNodeConfig 实例

    Raises:
        InvalidConfigError: 格式错误时抛出
    """
    text = value.strip()
    if not text:
        raise InvalidConfigError("nodes", value, "empty node address")

    if text.startswith("["):
        host, sep, rest = text[1:].partition("]")
        if not sep:
            raise InvalidConfigError("nodes", value, "unterminated IPv6 bracket")
        if rest and not rest.startswith(":"):
            raise InvalidConfigError("nodes", value, "unexpected text after ']'")
        port_text = rest[1:]
    elif text.count(":") == 1:
        host, _, port_text = text.partition(":")
    else:
        # 无端口，或不带方括号的 IPv6
        host, port_text = text, ""

    if not port_text:
        return SentinelNodeConfig(address=host, port=DEFAULT_SENTINEL_PORT)

    try:
        port = int(port_text)
    except ValueError:
        raise InvalidConfigError("nodes", value, f"invalid port {port_text!r}")
    return SentinelNodeConfig(address=host, port=port)


@dataclass
class SentinelConfig:
    """
    redis-sentinel 完整配置

    Attributes:
        name: Sentinel 集合名称，节点未单独指定时使用
        nodes: 节点配置列表
        adapter: 默认适配器连接配置

    Example:
        >>> config = SentinelConfig.from_dict({
        ...     "name": "mymaster",
        ...     "nodes": ["10.0.0.1:26379", {"address": "10.0.0.2", "port": 26380}],
        ...     "adapter": {"socket_connect_timeout": 1.0},
        ... })
    """

    name: str = ""
    nodes: List[SentinelNodeConfig] = field(default_factory=list)
    adapter: AdapterConfig = field(default_factory=AdapterConfig)

    @staticmethod
    def _parse_node(entry: Union[str, Dict[str, Any], SentinelNodeConfig]) -> SentinelNodeConfig:
        """将单个节点配置项转换为 SentinelNodeConfig"""
        if isinstance(entry, SentinelNodeConfig):
            return entry
        if isinstance(entry, str):
            return parse_node_address(entry)
        if isinstance(entry, dict):
            if "address" not in entry:
                raise InvalidConfigError("nodes", entry, "missing 'address'")
            try:
                return SentinelNodeConfig(**entry)
            except TypeError as e:
                raise InvalidConfigError("nodes", entry, str(e))
        raise InvalidConfigError("nodes", entry, "unsupported node entry type")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SentinelConfig":
        """
        从字典创建配置

        Args:
            data: 配置字典

        Returns:
            SentinelConfig 实例
        """
        name = data.get("name") or ""

        raw_nodes = data.get("nodes") or []
        if isinstance(raw_nodes, str):
            raw_nodes = [raw_nodes]
        elif not isinstance(raw_nodes, (list, tuple)):
            raise InvalidConfigError("nodes", raw_nodes, "must be a list")

        nodes = []
        for entry in raw_nodes:
            node = cls._parse_node(entry)
            if node.name is None and name:
                node = SentinelNodeConfig(node.address, node.port, name)
            nodes.append(node)

        adapter_data = data.get("adapter") or {}
        if isinstance(adapter_data, AdapterConfig):
            adapter = adapter_data
        elif isinstance(adapter_data, dict):
            known = {f.name for f in fields(AdapterConfig)}
            unknown = set(adapter_data) - known
            if unknown:
                raise InvalidConfigError(
                    "adapter", sorted(unknown), "unknown adapter options"
                )
            adapter = AdapterConfig(**adapter_data)
        else:
            raise InvalidConfigError("adapter", adapter_data, "must be a mapping")

        return cls(name=name, nodes=nodes, adapter=adapter)

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为字典

        Returns:
            配置字典
        """
        return {
            "name": self.name,
            "nodes": [vars(node).copy() for node in self.nodes],
            "adapter": vars(self.adapter).copy(),
        }
