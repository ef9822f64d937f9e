"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2025 Tencent. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.

redis-sentinel 校验模块

节点地址与端口的格式校验
"""

import ipaddress
from typing import Any

MIN_PORT = 0
MAX_PORT = 65535


def is_valid_ip_address(value: Any) -> bool:
    """
    校验是否为合法的 IPv4 或 IPv6 字面量

    主机名、非法八位组、越界的 IPv6 分段、IPv6 scope ID 以及非字符串一律视为非法。

    Args:
        value: 待校验的地址

    Returns:
        是否合法
    """
    # ip_address 也接受整数和带 scope ID 的 IPv6，这里只认纯字面量
    if not isinstance(value, str) or "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_valid_port(value: Any) -> bool:
    """
    校验端口是否在 [0, 65535] 闭区间内

    端口 0 视为合法。
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_PORT <= value <= MAX_PORT
