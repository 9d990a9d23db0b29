"""Modelos de domínio do emissor de tokens."""
