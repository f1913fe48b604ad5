"""
/**
 * @file deeplx/utils/__init__.py
 * @description 工具函数导出。
 */
"""

from .validators import is_valid_proxy_url, split_csv

__all__ = ["is_valid_proxy_url", "split_csv"]
