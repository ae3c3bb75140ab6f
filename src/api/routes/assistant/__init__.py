"""Rotas de extração e rascunho de e-mail."""
