"""Rotas de cards."""
