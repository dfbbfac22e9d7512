"""
Configuration centrale de minsweeper.

Ce fichier contient les paramètres des solveurs, de la génération de
parties et du banc d'essai.
"""

# Paramètres des solveurs
SOLVER_CONFIG = {
    'expert_brute_force_limit': 20,  # Taille max de frontière (cases vides) pour la force brute Expert
    'mia_brute_force_limit': 30,     # Idem pour Mia
    'multi_flag_radius': 2,          # Rayon de la fenêtre des déductions à deux cellules
    'tank_max_region_size': 24,      # Au-delà, une région du solveur tank est ignorée
    'tank_endgame_cells': 8,         # Cases hors frontière sous lesquelles on passe en fin de partie
}

# Génération de parties « sans devinette »
GENERATION_CONFIG = {
    'max_attempts': 100_000,  # Nombre max de plateaux tirés avant abandon
}

# Banc d'essai
BENCHMARK_CONFIG = {
    'total': 1000,        # Nombre de parties par défaut
    'size': 'expert',     # Taille par défaut
    'workers': None,      # None = nombre de CPU
    'chunksize': 16,      # Parties envoyées d'un coup à chaque processus
}

# Solveur par défaut (CLI)
DEFAULT_SOLVER = 'mia'

# Chemins des fichiers
PATHS = {
    'logs': 'logs',
}
