"""Photo album project manager: settings validation, creation wizard and project tree."""

__version__ = "0.1.0"
__all__ = ["app", "consts", "projectsettings", "projecttree", "treeitem", "wizard"]