"""Base class shared by all blocks."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..models import BlockContent


class Block(ABC):
    """Abstract page block: a titled piece of content placed on a page."""

    def __init__(self, name: str, logger: Optional[logging.Logger] = None) -> None:
        self._name = name
        self._logger = logger or logging.getLogger(name)
        self.title = ""
        self.content: Optional[BlockContent] = None

    @property
    def name(self) -> str:
        """Return the internal name of the block."""

        return self._name

    @property
    def logger(self) -> logging.Logger:
        """Return the logger associated with the block."""

        return self._logger

    def specialization(self) -> None:
        """Adjust the block once its instance configuration is known."""

    def applicable_formats(self) -> Dict[str, bool]:
        """Return the page types the block may be added to."""

        return {"all": True}

    def has_config(self) -> bool:
        """Return whether the block has site-wide settings."""

        return False

    @abstractmethod
    def get_content(self) -> BlockContent:
        """Build (or return the cached) content of the block."""

        raise NotImplementedError


__all__ = ["Block"]
