"""
Pipeline de normalisation des réservations de salles (25Live).

Ce package transforme les enregistrements bruts du service de disponibilité
des salles en événements canoniques dédupliqués, puis en tâches de
vérification d'enregistrement vidéo.
"""

__version__ = "1.0.0"
