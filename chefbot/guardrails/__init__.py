"""Guardrails for ChefBot input."""

from chefbot.guardrails.input_validator import InputValidator

__all__ = ["InputValidator"]
