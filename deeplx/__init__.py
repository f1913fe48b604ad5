"""
/**
 * @file deeplx/__init__.py
 * @description DeepL 网页端接口转发服务。
 */
"""

__version__ = "0.1.0"
