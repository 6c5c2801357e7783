"""Configuration models and loading for procapi projects."""

from .models import DocumentConfigModel, OutputConfigModel, SiteConfigModel, TagModel
from .site_config import SITE_CONFIG_FILENAME, find_repo_root, load_site_config

__all__ = [
    "SITE_CONFIG_FILENAME",
    "DocumentConfigModel",
    "OutputConfigModel",
    "SiteConfigModel",
    "TagModel",
    "find_repo_root",
    "load_site_config",
]
