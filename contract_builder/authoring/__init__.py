"""
AI-assisted authoring module.

Turns a natural-language contract description into MultiversX Rust source
through a chat-completion endpoint.
"""
from .completion import HttpCompletionService, PromptCompletionService, strip_code_fences

__all__ = ["HttpCompletionService", "PromptCompletionService", "strip_code_fences"]
