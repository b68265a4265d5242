"""Cribbage round simulation: cards and deck, hand scoring, strategies, players and the game."""

__version__ = "0.1.0"
__all__ = ["cards", "scorer", "evaluators", "player", "game"]