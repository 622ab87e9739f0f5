"""Default style profiles."""

from .schema import ButtonStyleModel, StylesConfig


def get_default_config() -> StylesConfig:
    """Generate the default style configuration."""
    return StylesConfig(
        version=1,
        styles={
            "default": ButtonStyleModel(),
            "danger": ButtonStyleModel(fill_color="red", text_color="white"),
        },
    )
