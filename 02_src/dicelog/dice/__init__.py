"""Dice module."""

from .dice_throw import DiceThrow, DiceThrowResult

__all__ = ["DiceThrow", "DiceThrowResult"]
