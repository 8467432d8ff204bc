"""Input validation for CLI commands."""

from .models import CheckInput, RenderInput

__all__ = ["CheckInput", "RenderInput"]
