"""
CLA Bot Configuration Models

Per-repository configuration loaded from a YAML file:

    config_items:
      - repos: ["my-org", "other-org/some-repo"]
        excluded_repos: ["my-org/sandbox"]
        cla_label_yes: cla/yes
        cla_label_no: cla/no
        check_url: https://cla.example.com/api/v1/individual-signing
        sign_url: https://cla.example.com/sign
        faq_url: https://cla.example.com/faq
        check_by_committer: false

The first item whose repo filter applies to an org/repo wins.
"""

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from app.cla.errors import ConfigurationError

logger = logging.getLogger(__name__)


class RepoFilter(BaseModel):
    """Selects the repositories a config item applies to."""

    # Entries are either "org" (whole organization) or "org/repo"
    repos: List[str] = Field(..., min_length=1)
    excluded_repos: List[str] = []

    @field_validator("repos")
    @classmethod
    def _check_repos(cls, v: List[str]) -> List[str]:
        for item in v:
            parts = item.split("/")
            if len(parts) > 2 or not all(parts):
                raise ValueError(f"invalid repo entry: {item!r}")
        return v

    @field_validator("excluded_repos")
    @classmethod
    def _check_excluded_repos(cls, v: List[str]) -> List[str]:
        for item in v:
            parts = item.split("/")
            if len(parts) != 2 or not all(parts):
                raise ValueError(f"excluded repo must be org/repo: {item!r}")
        return v

    def can_apply(self, org: str, repo: str) -> bool:
        full_name = f"{org}/{repo}"
        if full_name in self.excluded_repos:
            return False
        return org in self.repos or full_name in self.repos


class LitePRCommitter(BaseModel):
    """Committer identity used for lite PRs (merged by an automated account)."""

    email: str = ""
    name: str = ""

    def validate_required(self) -> None:
        if not self.email:
            raise ValueError("missing email")
        if not self.name:
            raise ValueError("missing name")

    def is_lite_pr(self, email: str, name: str) -> bool:
        """A match on either field is enough."""
        return email == self.email or name == self.name


class BotConfig(RepoFilter):
    """CLA settings for a set of repositories."""

    # Label for PRs whose commit authors have all signed the CLA
    cla_label_yes: str = Field(..., min_length=1)
    # Label for PRs with at least one unsigned commit author
    cla_label_no: str = Field(..., min_length=1)
    # Signing status endpoint, queried as <check_url>?email=<email>
    check_url: str = Field(..., min_length=1)
    sign_url: str = Field(..., min_length=1)
    faq_url: str = Field(..., min_length=1)

    # Check by committer email instead of author email
    check_by_committer: bool = False
    # Required when check_by_committer is true
    lite_pr_committer: LitePRCommitter = LitePRCommitter()

    @model_validator(mode="after")
    def _check_lite_pr_committer(self) -> "BotConfig":
        if self.check_by_committer:
            try:
                self.lite_pr_committer.validate_required()
            except ValueError as e:
                raise ValueError(f"lite_pr_committer: {e}") from e
        return self


class Configuration(BaseModel):
    """All config items known to the bot."""

    config_items: List[BotConfig] = []

    def config_for(self, org: str, repo: str) -> Optional[BotConfig]:
        for item in self.config_items:
            if item.can_apply(org, repo):
                return item
        return None

    def get_config(self, org: str, repo: str) -> BotConfig:
        cfg = self.config_for(org, repo)
        if cfg is None:
            raise ConfigurationError(f"no config for this repo:{org}/{repo}")
        return cfg


def load_configuration(path: str | Path) -> Configuration:
    """
    Load and validate the bot configuration file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Validated Configuration

    Raises:
        ConfigurationError: If the file cannot be read, parsed, or validated
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    try:
        configuration = Configuration.model_validate(raw or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    logger.info(
        f"Loaded {len(configuration.config_items)} CLA config item(s) from {path}"
    )
    return configuration
