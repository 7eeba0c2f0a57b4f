"""
utils 模块 — 无状态工具函数
- format: 数字 / 日期 / ticker 占位图标格式化
"""
