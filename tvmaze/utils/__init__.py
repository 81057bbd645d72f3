"""Utilitaires partages (constantes, texte, attribution)."""
