"""CLI commands"""

from .generate import generate, generate_command
from .layers import layers_command

__all__ = ["generate", "generate_command", "layers_command"]
