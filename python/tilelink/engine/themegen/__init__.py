from tilelink.engine.themegen.generator import (
    PresetThemeProvider,
    StaticThemeProvider,
    ThemeGenerator,
    ThemeProvider,
    normalize_symbols,
)

__all__ = [
    "PresetThemeProvider",
    "StaticThemeProvider",
    "ThemeGenerator",
    "ThemeProvider",
    "normalize_symbols",
]
