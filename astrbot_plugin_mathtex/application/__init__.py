"""
应用层
"""
from .formula_service import FormulaService

__all__ = ["FormulaService"]
