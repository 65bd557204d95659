"""Strongly typed identifiers for Inkwell domain entities."""

from typing import NewType
from uuid import UUID

# Assigned by the post store on first insert
PostId = NewType("PostId", UUID)
