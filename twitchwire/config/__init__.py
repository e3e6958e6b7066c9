"""Decoder configuration package."""

from .settings import DecoderSettings

__all__ = ["DecoderSettings"]
