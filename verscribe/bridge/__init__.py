"""Collaborator adapters: git access, configuration loading, build servers."""

from verscribe.bridge.base import (
    BuildServer,
    BuildServerOverrides,
    ConfigurationLoader,
    RepositoryHandle,
    short_branch_name,
)
from verscribe.bridge.build_servers import (
    AzureDevOpsBuildServer,
    GitHubActionsBuildServer,
    default_build_servers,
    detect,
)
from verscribe.bridge.config_loader import DEFAULT_CONFIG_FILENAME, JsonConfigurationLoader
from verscribe.bridge.git import GitRepository, discover_repository

__all__ = [
    # Protocols
    "RepositoryHandle",
    "ConfigurationLoader",
    "BuildServer",
    "BuildServerOverrides",
    "short_branch_name",
    # Git
    "GitRepository",
    "discover_repository",
    # Configuration
    "DEFAULT_CONFIG_FILENAME",
    "JsonConfigurationLoader",
    # Build servers
    "AzureDevOpsBuildServer",
    "GitHubActionsBuildServer",
    "default_build_servers",
    "detect",
]
