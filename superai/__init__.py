"""SuperAI - OpenCode agent and skill bundle installer."""

__version__ = "1.0.0"
