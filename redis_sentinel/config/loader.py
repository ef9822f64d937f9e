# -*- coding: utf-8 -*-
"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel 配置加载器模块

提供多种配置加载方式
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

from redis_sentinel.config.schema import SentinelConfig
from redis_sentinel.exceptions import ConfigurationError, MissingConfigError

logger = logging.getLogger(__name__)


class ConfigLoader(ABC):
    """
    配置加载器基类

    所有配置加载器必须继承此类。
    """

    @abstractmethod
    def load_dict(self) -> Dict[str, Any]:
        """
        加载原始配置字典

        只包含该来源实际提供的配置项，便于组合加载时合并。

        Raises:
            ConfigurationError: 加载失败时抛出
        """
        pass

    def load(self) -> SentinelConfig:
        """
        加载配置

        Returns:
            SentinelConfig 实例
        """
        return SentinelConfig.from_dict(self.load_dict())


class DictConfigLoader(ConfigLoader):
    """
    字典配置加载器

    Example:
        >>> loader = DictConfigLoader({"nodes": ["10.0.0.1:26379"]})
        >>> config = loader.load()
    """

    def __init__(self, config: Dict[str, Any]):
        self._config = config

    def load_dict(self) -> Dict[str, Any]:
        return dict(self._config)


class YamlConfigLoader(ConfigLoader):
    """
    YAML 配置加载器

    从 YAML 文件加载配置。

    Example:
        >>> loader = YamlConfigLoader("/path/to/sentinel.yaml")
        >>> config = loader.load()
    """

    def __init__(self, path: str):
        """
        初始化加载器

        Args:
            path: YAML 文件路径
        """
        self._path = Path(path)

    def load_dict(self) -> Dict[str, Any]:
        try:
            import yaml
        except ImportError:
            raise ConfigurationError(
                "pyyaml is required for YAML config. Install with: pip install pyyaml"
            )

        if not self._path.exists():
            raise MissingConfigError(str(self._path))

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except Exception as e:
            raise ConfigurationError(f"Failed to load YAML config: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError("YAML config must be a dictionary")

        logger.debug(f"Loaded sentinel config from {self._path}")
        return config

    def __repr__(self) -> str:
        return f"YamlConfigLoader(path={str(self._path)!r})"


class EnvConfigLoader(ConfigLoader):
    """
    环境变量配置加载器

    环境变量命名规则：
    - REDIS_SENTINEL_NAME: Sentinel 集合名称
    - REDIS_SENTINEL_NODES: 逗号分隔的节点列表，如 10.0.0.1:26379,[::1]:26379
    - REDIS_SENTINEL_ADAPTER_{FIELD}: 适配器连接配置

    Example:
        export REDIS_SENTINEL_NAME=mymaster
        export REDIS_SENTINEL_NODES=10.0.0.1:26379,10.0.0.2:26379
        export REDIS_SENTINEL_ADAPTER_SOCKET_CONNECT_TIMEOUT=1.5

        >>> loader = EnvConfigLoader()
        >>> config = loader.load()
    """

    DEFAULT_PREFIX = "REDIS_SENTINEL_"

    # 这些字段保持原始字符串
    RAW_FIELDS = ("password", "encoding")

    def __init__(self, prefix: str = None):
        """
        初始化加载器

        Args:
            prefix: 环境变量前缀，默认 REDIS_SENTINEL_
        """
        self._prefix = prefix or self.DEFAULT_PREFIX

    def load_dict(self) -> Dict[str, Any]:
        config: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self._prefix):
                continue

            field_path = key[len(self._prefix) :]

            if field_path == "NAME":
                config["name"] = value
            elif field_path == "NODES":
                config["nodes"] = [item for item in value.split(",") if item.strip()]
            elif field_path.startswith("ADAPTER_"):
                field = field_path[8:].lower()
                adapter = config.setdefault("adapter", {})
                if field in self.RAW_FIELDS:
                    adapter[field] = value
                else:
                    adapter[field] = self._parse_value(value)

        return config

    def _parse_value(self, value: str) -> Any:
        """
        解析环境变量值

        支持自动类型转换：整数、浮点数、布尔值
        """
        # 整数，优先于布尔值，避免 "0" 被当作 False
        try:
            return int(value)
        except ValueError:
            pass

        # 浮点数
        try:
            return float(value)
        except ValueError:
            pass

        # 布尔值
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        # 字符串
        return value

    def __repr__(self) -> str:
        return f"EnvConfigLoader(prefix={self._prefix!r})"


class CompositeConfigLoader(ConfigLoader):
    """
    组合配置加载器

    按优先级从多个来源加载配置，后面的覆盖前面的。

    Example:
        >>> loader = CompositeConfigLoader([
        ...     YamlConfigLoader("default.yaml"),
        ...     YamlConfigLoader("local.yaml"),
        ...     EnvConfigLoader(),
        ... ])
        >>> config = loader.load()
    """

    def __init__(self, loaders: list):
        """
        初始化加载器

        Args:
            loaders: 配置加载器列表，按优先级从低到高排列
        """
        self._loaders = loaders

    def load_dict(self) -> Dict[str, Any]:
        merged_config: Dict[str, Any] = {}

        for loader in self._loaders:
            try:
                config_dict = loader.load_dict()
            except MissingConfigError as e:
                # 配置文件不存在时跳过
                logger.debug(f"Skipping missing config source: {e.key}")
                continue
            except ConfigurationError:
                raise
            except Exception as e:
                raise ConfigurationError(f"Failed to load config from {loader}: {e}")
            merged_config = self._deep_merge(merged_config, config_dict)

        return merged_config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """深度合并字典，列表整体覆盖"""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config: Dict[str, Any] = None,
    yaml_path: str = None,
    env_prefix: str = None,
) -> SentinelConfig:
    """
    便捷配置加载函数

    按以下优先级加载配置（后面的覆盖前面的）：
    1. YAML 文件
    2. 字典配置
    3. 环境变量

    Args:
        config: 字典配置
        yaml_path: YAML 文件路径
        env_prefix: 环境变量前缀

    Returns:
        SentinelConfig 实例

    Example:
        >>> config = load_config(
        ...     yaml_path="sentinel.yaml",
        ...     config={"name": "mymaster"},
        ... )
    """
    loaders = []

    if yaml_path:
        loaders.append(YamlConfigLoader(yaml_path))

    if config:
        loaders.append(DictConfigLoader(config))

    if env_prefix is not None or not loaders:
        loaders.append(EnvConfigLoader(env_prefix))

    return CompositeConfigLoader(loaders).load()
