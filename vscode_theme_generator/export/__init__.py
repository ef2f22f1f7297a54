from .json_export import export_theme, theme_filename

__all__ = ["export_theme", "theme_filename"]
