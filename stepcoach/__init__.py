"""Fitness chat relay that forwards conversations to a language model."""

__version__ = "0.1.0"
