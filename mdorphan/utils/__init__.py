"""md-orphan 的通用工具子包。"""
