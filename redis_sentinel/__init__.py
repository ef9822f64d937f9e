"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel: Redis Sentinel 节点原语

提供单个 Sentinel 节点的身份、校验与连接委托：
- 节点实体：构造即校验，地址和端口不可变
- 客户端适配器：可替换的连接能力，默认基于 redis-py
- 配置加载：字典、YAML、环境变量

Usage:
    from redis_sentinel import SentinelNode, NamedSentinelNode
    from redis_sentinel.adapters import ClientAdapter, RedisClientAdapter

Example:
    >>> from redis_sentinel import SentinelNode
    >>> node = SentinelNode("10.0.0.1", 26379)
    >>> node.connect()
    >>> node.is_connected()
    True

    # 从配置批量创建节点
    >>> from redis_sentinel import build_nodes, load_config
    >>> config = load_config(config={"name": "mymaster", "nodes": ["10.0.0.1:26379"]})
    >>> nodes = build_nodes(config)
"""

__version__ = "1.0.0"
__author__ = "BlueKing Monitor Team"

# =============================================================================
# 类型定义
# =============================================================================
from redis_sentinel.types import (
    AdapterConfig,
    ConnectableNodeProtocol,
    SentinelNodeConfig,
    SentinelNodeProtocol,
)

# =============================================================================
# 异常
# =============================================================================
from redis_sentinel.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConnectionRefusedError,
    ConnectionTimeoutError,
    InvalidConfigError,
    InvalidProperty,
    MissingConfigError,
    RedisConnectionError,
    SentinelNodeError,
)

# =============================================================================
# 适配器
# =============================================================================
from redis_sentinel.adapters.base import ClientAdapter
from redis_sentinel.adapters.redis_adapter import RedisClientAdapter

# =============================================================================
# 节点
# =============================================================================
from redis_sentinel.node import (
    BaseSentinelNode,
    NamedSentinelNode,
    SentinelNode,
    build_nodes,
    create_node,
)

# =============================================================================
# 配置模块
# =============================================================================
from redis_sentinel.config.loader import (
    CompositeConfigLoader,
    ConfigLoader,
    DictConfigLoader,
    EnvConfigLoader,
    YamlConfigLoader,
    load_config,
)
from redis_sentinel.config.schema import SentinelConfig

# =============================================================================
# 公共 API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Types
    "AdapterConfig",
    "SentinelNodeConfig",
    "SentinelNodeProtocol",
    "ConnectableNodeProtocol",
    # Exceptions
    "SentinelNodeError",
    "InvalidProperty",
    "ConfigurationError",
    "InvalidConfigError",
    "MissingConfigError",
    "RedisConnectionError",
    "ConnectionTimeoutError",
    "ConnectionRefusedError",
    "AuthenticationError",
    # Adapters
    "ClientAdapter",
    "RedisClientAdapter",
    # Nodes
    "BaseSentinelNode",
    "SentinelNode",
    "NamedSentinelNode",
    "create_node",
    "build_nodes",
    # Config
    "SentinelConfig",
    "ConfigLoader",
    "DictConfigLoader",
    "YamlConfigLoader",
    "EnvConfigLoader",
    "CompositeConfigLoader",
    "load_config",
]
