"""Bibliothèque minsweeper : plateau, parties, solveurs, debug."""
