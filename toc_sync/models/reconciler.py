"""Reconciler configuration and run result."""

import os
from enum import Enum
from typing import List, Mapping, Optional

from pydantic import BaseModel

from toc_sync.errors import ConfigError
from toc_sync.models.toc import TocFile

DEFAULT_REFERENCE_URL = "https://warcraft.wiki.gg/wiki/TOC_format"

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


def _input_name(name: str) -> str:
    # GitHub Actions exposes `with:` inputs as INPUT_<NAME>, hyphens kept
    return f"INPUT_{name.replace(' ', '_').upper()}"


def _get_input(env: Mapping[str, str], name: str, default: str = "") -> str:
    value = env.get(_input_name(name), "").strip()
    return value or default


def _get_boolean_input(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = _get_input(env, name)
    if not value:
        return default
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        f"Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


class ReconcilerConfig(BaseModel):
    """Configuration for one reconciliation run."""

    toc_directory: str = "."
    reference_url: str = DEFAULT_REFERENCE_URL
    toc_extension: str = ".toc"
    fail_on_updates: bool = False       # Fail instead of persisting when updates are found
    create_issue: bool = False          # Also write issue-template.md when updates are found
    action_directory: str = "."         # Where issue-template.md is written

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ReconcilerConfig":
        """Load configuration from GitHub Action inputs."""
        env = os.environ if env is None else env
        return cls(
            toc_directory=_get_input(env, "toc-directory", "."),
            reference_url=_get_input(env, "wiki-url", DEFAULT_REFERENCE_URL),
            fail_on_updates=_get_boolean_input(env, "fail-job-when-updates-found"),
            create_issue=_get_boolean_input(env, "create-issue-if-updates-found"),
            action_directory=env.get("GITHUB_ACTION_PATH", "") or ".",
        )


class RunOutcome(str, Enum):
    UP_TO_DATE = "up_to_date"           # Nothing to update, nothing written
    UPDATES_FOUND = "updates_found"     # Updates found, run failed by configuration
    UPDATES_PENDING = "updates_pending" # Updates found, persisting deferred to the caller
    UPDATED = "updated"                 # Updates persisted


class ReconciliationResult(BaseModel):
    """Outcome of a single reconciliation run. Derived, never persisted."""

    tocs: List[TocFile]
    outcome: RunOutcome
    failure_reason: Optional[str] = None
    written: List[str] = []

    @property
    def needs_update(self) -> List[TocFile]:
        return [t for t in self.tocs if t.needs_update]

    @property
    def unknown_latest(self) -> List[TocFile]:
        return [t for t in self.tocs if t.no_known_interface]

    @property
    def up_to_date(self) -> List[TocFile]:
        return [t for t in self.tocs if not t.needs_update and not t.no_known_interface]

    @property
    def failed(self) -> bool:
        return self.failure_reason is not None

    @property
    def tocs_updated(self) -> int:
        return len(self.needs_update)
