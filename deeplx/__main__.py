"""
/**
 * @file deeplx/__main__.py
 * @description python -m deeplx 入口。
 */
"""

from deeplx.cli import main

main()
