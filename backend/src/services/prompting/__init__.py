"""Prompt construction package."""

from .prompt_builder import build_prompt

__all__ = ["build_prompt"]
