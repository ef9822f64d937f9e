"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel 异常定义模块

定义完整的异常层次结构，便于精确的错误处理
"""

import builtins


class SentinelNodeError(Exception):
    """
    redis-sentinel 基础异常

    所有 redis-sentinel 相关异常的基类
    """

    pass


# =============================================================================
# 节点属性相关异常
# =============================================================================


class InvalidProperty(SentinelNodeError):
    """
    节点属性无效

    构造 Sentinel 节点时地址或端口校验失败抛出，节点不会被创建
    """

    def __init__(self, reason: str, value: any = None):
        self.reason = reason
        self.value = value
        super().__init__(reason)


# =============================================================================
# 配置相关异常
# =============================================================================


class ConfigurationError(SentinelNodeError):
    """
    配置相关错误

    当配置无效、缺失或格式错误时抛出
    """

    pass


class InvalidConfigError(ConfigurationError):
    """配置值无效"""

    def __init__(self, key: str, value: any, reason: str = None):
        self.key = key
        self.value = value
        self.reason = reason
        msg = f"Invalid configuration for '{key}': {value}"
        if reason:
            msg += f", reason: {reason}"
        super().__init__(msg)


class MissingConfigError(ConfigurationError):
    """必需的配置项缺失"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing required configuration: {key}")


# =============================================================================
# 连接相关异常
# =============================================================================


class RedisConnectionError(SentinelNodeError, builtins.ConnectionError):
    """
    连接相关错误

    当适配器无法与 Sentinel 节点建立连接时抛出。
    同时继承内置 ConnectionError，调用方可直接 except ConnectionError。
    """

    pass


class ConnectionTimeoutError(RedisConnectionError):
    """连接超时"""

    def __init__(self, host: str, port: int, timeout: float = None):
        self.host = host
        self.port = port
        self.timeout = timeout
        msg = f"Connection timeout to {host}:{port}"
        if timeout:
            msg += f" after {timeout}s"
        super().__init__(msg)


class ConnectionRefusedError(RedisConnectionError):
    """连接被拒绝"""

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port
        super().__init__(f"Connection refused to {host}:{port}")


class AuthenticationError(RedisConnectionError):
    """认证失败"""

    def __init__(self, host: str, port: int, reason: str = None):
        self.host = host
        self.port = port
        self.reason = reason
        msg = f"Authentication failed for {host}:{port}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
