"""Core type definitions."""

from typing import NewType

# "/"-separated path relative to the served folder (e.g., "config/nvim/init.lua")
# Distinct from filesystem Path to catch type mismatches
RelativePath = NewType("RelativePath", str)
