"""Shared context object passed to all page renderers."""

from dataclasses import dataclass
from typing import Any


@dataclass
class AppContext:
    """Bundles shared state that page renderers need from app.py."""

    workspace: Any
    user_role: str
    username: str = ""

    @property
    def registry(self):
        return self.workspace.registry

    @property
    def directory(self):
        return self.workspace.directory

    @property
    def taxonomy(self):
        return self.workspace.taxonomy

    @property
    def audit(self):
        return self.workspace.audit
