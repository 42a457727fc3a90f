"""
Boardcamp - backend de locadora de jogos de tabuleiro
"""
